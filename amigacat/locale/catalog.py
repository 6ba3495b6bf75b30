"""Amiga catalog loading with ordered fallback across search roots.

This is the piece a localization host talks to: it locates the catalog
file for an application and language, decodes it, and commits the
strings into a :class:`~amigacat.locale.string_table.StringTable`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..errors import CatalogError, Status, WriteUnsupported
from ..iff.parser import CatalogRecord, decode
from .locator import SearchPaths, candidate_paths
from .string_table import HashMapStringTable, StringTable

log = logging.getLogger(__name__)

# Read once by hosts choosing among several catalog back-ends.
CATALOG_ADDON_PRIORITY = 80

CATALOG_MIME_TYPE = "locale/x-vnd.Be.locale-catalog.amiga"

EMPTY_CATALOG_PATH = "emptycat"


class AmigaCatalog:
    """A catalog backed by an Amiga ``FORM``/``CTLG`` file.

    Construction searches :func:`candidate_paths` in order and keeps the
    first file that decodes.  Check :meth:`init_check` afterwards; use
    :func:`instantiate` to get ``None`` instead of a failed catalog.
    """

    def __init__(
        self,
        signature: str,
        language: str,
        fingerprint: int = 0,
        *,
        app_dir: str | Path | None = None,
        search: SearchPaths | None = None,
        table: StringTable | None = None,
        _probe: bool = True,
    ):
        self.signature = signature
        self.language_name = language
        self.fingerprint = fingerprint
        self.path: Path | None = None
        self.table: StringTable = table if table is not None else HashMapStringTable()
        self._status = Status.NOT_FOUND

        if not _probe:
            return

        search = search if search is not None else SearchPaths.from_env()
        for candidate in candidate_paths(app_dir, signature, language, search):
            self._status = self.read_from_file(candidate)
            if self._status is Status.OK:
                break

        if self._status is not Status.OK:
            log.warning(
                "No usable catalog for %s/%s (status=%s)",
                signature,
                language,
                self._status.value,
            )

    @classmethod
    def create(cls, path: str | Path, signature: str, language: str) -> "AmigaCatalog":
        """An empty catalog for editing workflows.  Always initialised."""
        catalog = cls(signature, language, 0, _probe=False)
        catalog.path = Path(path)
        catalog._status = Status.OK
        return catalog

    def __len__(self) -> int:
        return len(self.table)

    def init_check(self) -> Status:
        return self._status

    def get_string(self, id: int) -> str | None:
        return self.table.get_string(id)

    def read_from_file(self, path: str | Path | None = None) -> Status:
        """Decode *path* (default: :attr:`path`) and commit it.

        Nothing is written to the string table unless the whole file
        decodes.
        """
        if path is None:
            if self.path is None:
                return Status.NOT_FOUND
            path = self.path
        path = Path(path)

        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as ex:
            log.debug("Cannot open %s: %s", path, ex)
            return Status.NOT_FOUND

        try:
            record = decode(data)
        except CatalogError as ex:
            log.warning("Failed to decode %s: %s", path, ex)
            return ex.status

        self._commit(record)
        self.path = path
        self.fingerprint = self.table.compute_fingerprint()
        log.info(
            "Loaded %s: %d strings, fingerprint=0x%08X",
            path,
            len(record.entries),
            self.fingerprint,
        )
        return Status.OK

    def _commit(self, record: CatalogRecord) -> None:
        if record.signature:
            self.signature = record.signature
        if record.language_name:
            self.language_name = record.language_name
        for entry in record.entries:
            self.table.set_string(entry.id, entry.text)

    def write_to_file(self, path: str | Path | None = None) -> None:
        raise WriteUnsupported("Amiga catalogs cannot be written")

    def summary(self) -> dict[str, Any]:
        """Return a summary dict suitable for JSON export."""
        strings: dict[int, str] = {}
        items = getattr(self.table, "items", None)
        if items is not None:
            strings = dict(items())
        return {
            "path": str(self.path) if self.path else None,
            "signature": self.signature,
            "language": self.language_name,
            "fingerprint": self.fingerprint,
            "status": self._status.value,
            "count": len(self.table),
            "strings": strings,
        }


def instantiate(
    signature: str, language: str, fingerprint: int = 0, **kwargs: Any
) -> AmigaCatalog | None:
    """Load a catalog, returning ``None`` if no candidate decodes."""
    catalog = AmigaCatalog(signature, language, fingerprint, **kwargs)
    if catalog.init_check() is not Status.OK:
        return None
    return catalog


def create_catalog(signature: str, language: str) -> AmigaCatalog:
    return AmigaCatalog.create(EMPTY_CATALOG_PATH, signature, language)
