import logging
from typing import Any, Dict, List, Optional

from library_catalog.book import Book
from library_catalog.errors import BookNotAvailable, BookNotFound, ReaderNotFound
from library_catalog.reader import Reader

logger = logging.getLogger(__name__)


class Library:
    """Manages the collection of books, readers and borrowing state."""

    def __init__(self) -> None:
        self.books: List[Book] = []
        self.readers: Dict[int, Reader] = {}
        self.next_book_id: int = 1
        self.next_reader_id: int = 1

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str) -> Book:
        """Create a book with the next free id. Title and author are validated by the caller."""
        book = Book(id=self.next_book_id, title=title, author=author, available=True)
        self.books.append(book)
        self.next_book_id += 1
        logger.info("Book added: id=%s title=%r", book.id, book.title)
        return book

    def register_reader(self, name: str) -> Reader:
        reader = Reader(id=self.next_reader_id, name=name)
        self.readers[reader.id] = reader
        self.next_reader_id += 1
        logger.info("Reader registered: id=%s name=%r", reader.id, reader.name)
        return reader

    def find_book(self, book_id: int) -> Optional[Book]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def borrow_book(self, book_id: int, reader_id: int) -> None:
        """Check a book out. The reader is checked before the book.

        The holder is not recorded: only the book's availability changes.
        """
        if reader_id not in self.readers:
            logger.warning("Borrow rejected: reader %s not found", reader_id)
            raise ReaderNotFound()

        book = self.find_book(book_id)
        if book is None:
            logger.warning("Borrow rejected: book %s not found", book_id)
            raise BookNotFound()

        if not book.available:
            logger.warning("Borrow rejected: book %s already checked out", book_id)
            raise BookNotAvailable()

        book.available = False
        logger.info("Book %s borrowed by reader %s", book_id, reader_id)

    def return_book(self, book_id: int) -> None:
        """Mark a book available again. Returning an available book is a no-op."""
        book = self.find_book(book_id)
        if book is None:
            logger.warning("Return rejected: book %s not found", book_id)
            raise BookNotFound()
        book.available = True
        logger.info("Book %s returned", book_id)

    def list_books(self) -> List[Book]:
        return list(self.books)

    def list_readers(self) -> List[Reader]:
        return list(self.readers.values())

    # ------------------------- Serialization ------------------------- #
    def to_dict(self) -> Dict[str, Any]:
        return {
            "books": [book.to_dict() for book in self.books],
            # JSON object keys are strings
            "readers": {str(reader_id): reader.to_dict() for reader_id, reader in self.readers.items()},
            "next_book_id": self.next_book_id,
            "next_reader_id": self.next_reader_id,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Library":
        """Rebuild a catalog from its document form.

        Raises KeyError, TypeError or ValueError when the document is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError("Catalog document must be an object.")

        library = Library()
        library.books = [Book.from_dict(item) for item in data["books"]]
        readers = data["readers"]
        if not isinstance(readers, dict):
            raise TypeError("'readers' must be an object keyed by reader id.")
        for key, item in readers.items():
            reader = Reader.from_dict(item)
            if int(key) != reader.id:
                raise ValueError(f"Reader key {key!r} does not match reader id {reader.id}.")
            library.readers[reader.id] = reader
        library.next_book_id = _counter(data, "next_book_id")
        library.next_reader_id = _counter(data, "next_reader_id")

        book_ids = [book.id for book in library.books]
        if len(set(book_ids)) != len(book_ids):
            raise ValueError("Duplicate book ids.")
        if book_ids and max(book_ids) >= library.next_book_id:
            raise ValueError("next_book_id must exceed every book id.")
        if library.readers and max(library.readers) >= library.next_reader_id:
            raise ValueError("next_reader_id must exceed every reader id.")
        return library


def _counter(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise TypeError(f"{key} must be a positive integer, got {value!r}.")
    return value
