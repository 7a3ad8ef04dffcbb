"""Library Catalog - Core Application Package

This package contains the core application modules including:
- Catalog logic (library.py)
- Data models (book.py, reader.py)
- JSON persistence (storage.py)
- Settings (config.py)
- Interactive CLI (main.py)
"""

from library_catalog.book import Book
from library_catalog.errors import (
    BookNotAvailable,
    BookNotFound,
    CatalogFileError,
    InvalidInput,
    LibraryError,
    ReaderNotFound,
)
from library_catalog.library import Library
from library_catalog.reader import Reader

__version__ = "1.0.0"

__all__ = [
    "Book",
    "BookNotAvailable",
    "BookNotFound",
    "CatalogFileError",
    "InvalidInput",
    "Library",
    "LibraryError",
    "Reader",
    "ReaderNotFound",
]
