"""Errors raised by the catalog and its persistence layer.

Every error carries a user-facing message, so the shell can print
``str(exc)`` directly.
"""

from __future__ import annotations


class LibraryError(Exception):
    """Base class for catalog errors."""

    message = "Ошибка библиотеки."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class BookNotFound(LibraryError, LookupError):
    message = "Книга не найдена."


class BookNotAvailable(LibraryError):
    message = "Книга уже выдана."


class ReaderNotFound(LibraryError, LookupError):
    message = "Читатель не найден."


class InvalidInput(LibraryError, ValueError):
    message = "Некорректный ввод."


class CatalogFileError(LibraryError, ValueError):
    """The data file exists but does not hold a valid catalog document."""

    message = "Файл данных повреждён."
