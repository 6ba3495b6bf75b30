"""Error taxonomy and status codes for catalog loading."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Outcome of a catalog load attempt, as reported by ``init_check()``."""

    OK = "ok"
    NOT_FOUND = "not_found"
    MALFORMED_CONTAINER = "malformed_container"
    UNSUPPORTED_FORM_TYPE = "unsupported_form_type"
    TRUNCATED = "truncated"
    WRITE_UNSUPPORTED = "write_unsupported"


class CatalogError(Exception):
    """Base class for all catalog errors."""

    status: Status = Status.NOT_FOUND


class NotFound(CatalogError):
    """No candidate catalog file could be opened."""

    status = Status.NOT_FOUND


class DecodeError(CatalogError):
    """The byte stream is not a readable CTLG container."""


class MalformedContainer(DecodeError):
    """Bad ``FORM`` header or a chunk overrunning the declared container size."""

    status = Status.MALFORMED_CONTAINER


class UnsupportedFormType(DecodeError):
    """The container is an IFF ``FORM`` but not of type ``CTLG``."""

    status = Status.UNSUPPORTED_FORM_TYPE


class Truncated(DecodeError):
    """A declared size reaches past the end of the available data."""

    status = Status.TRUNCATED


class WriteUnsupported(CatalogError):
    """Catalogs in the Amiga format are read-only."""

    status = Status.WRITE_UNSUPPORTED


__all__ = [
    "Status",
    "CatalogError",
    "NotFound",
    "DecodeError",
    "MalformedContainer",
    "UnsupportedFormType",
    "Truncated",
    "WriteUnsupported",
]
