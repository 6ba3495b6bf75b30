"""Reader for Amiga IFF locale catalogs (FORM/CTLG)."""

__version__ = "0.1.0"

from .errors import CatalogError, Status
from .iff import CatalogRecord, decode
from .locale import AmigaCatalog, create_catalog, instantiate

__all__ = [
    "__version__",
    "CatalogError",
    "Status",
    "CatalogRecord",
    "decode",
    "AmigaCatalog",
    "create_catalog",
    "instantiate",
]
