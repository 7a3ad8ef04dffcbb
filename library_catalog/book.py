from __future__ import annotations


class Book:
    """Represents a single book in the catalog."""

    def __init__(self, id: int, title: str, author: str, available: bool = True) -> None:
        self.id = id
        self.title = title
        self.author = author
        self.available = available

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ID: {self.id})"

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r}, available={self.available!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        # "is_available" is the on-disk field name
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "is_available": self.available,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        """Build a Book from its document form. Raises TypeError on wrongly typed fields."""
        book_id, title, author, available = data["id"], data["title"], data["author"], data["is_available"]
        # bool is a subclass of int
        if not isinstance(book_id, int) or isinstance(book_id, bool):
            raise TypeError(f"Book id must be an integer, got {book_id!r}.")
        if not isinstance(title, str) or not isinstance(author, str):
            raise TypeError(f"Book {book_id}: title and author must be strings.")
        if not isinstance(available, bool):
            raise TypeError(f"Book {book_id}: is_available must be a boolean, got {available!r}.")
        return Book(id=book_id, title=title, author=author, available=available)
