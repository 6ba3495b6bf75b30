"""Catalog search paths.

A catalog for application *signature* in *language* lives at
``Catalogs/<language>/<signature>.catalog`` below one of several roots.
Roots are probed in priority order: the application's own directory,
then the user's config directory, then the system-wide one.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

CATALOG_FOLDER = "Catalogs"
CATALOG_EXTENSION = ".catalog"

USER_DIR_ENV = "AMIGACAT_USER_DIR"
SYSTEM_DIR_ENV = "AMIGACAT_SYSTEM_DIR"


@dataclass(frozen=True)
class SearchPaths:
    """User- and system-level roots searched after the application directory."""

    user_dir: Path | None = None
    system_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "SearchPaths":
        """Build from ``AMIGACAT_USER_DIR`` / ``AMIGACAT_SYSTEM_DIR``."""
        user = os.environ.get(USER_DIR_ENV)
        system = os.environ.get(SYSTEM_DIR_ENV)
        return cls(
            user_dir=Path(user) if user else Path.home() / "config" / "settings" / "etc",
            system_dir=Path(system) if system else Path("/etc"),
        )

    def roots(self, app_dir: Path | None = None) -> list[Path]:
        return [p for p in (app_dir, self.user_dir, self.system_dir) if p is not None]


def catalog_relpath(signature: str, language: str) -> Path:
    return Path(CATALOG_FOLDER) / language / f"{signature}{CATALOG_EXTENSION}"


def candidate_paths(
    app_dir: str | Path | None,
    signature: str,
    language: str,
    search: SearchPaths | None = None,
) -> list[Path]:
    """Return the ordered list of files to try for a catalog.

    Does not touch the filesystem.
    """
    search = search or SearchPaths()
    rel = catalog_relpath(signature, language)
    app = Path(app_dir) if app_dir is not None else None
    return [root / rel for root in search.roots(app)]


def available_languages(signature: str, roots: list[Path]) -> list[str]:
    """Languages for which a catalog of *signature* exists under any root."""
    found: set[str] = set()
    name = f"{signature}{CATALOG_EXTENSION}"
    for root in roots:
        folder = Path(root) / CATALOG_FOLDER
        if not folder.is_dir():
            continue
        for lang_dir in folder.iterdir():
            if lang_dir.is_dir() and (lang_dir / name).is_file():
                found.add(lang_dir.name)
    log.debug("Languages for %s: %s", signature, sorted(found))
    return sorted(found)
