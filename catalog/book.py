from __future__ import annotations


class Book:
    """Represents a single book item in the library."""

    def __init__(self, title: str, author: str, isbn: str, available: bool = True) -> None:
        self.title = title
        self.author = author
        self.isbn = isbn
        self._available = available

    @property
    def available(self) -> bool:
        return self._available

    def is_available(self) -> bool:
        return self._available

    def matches(self, title: str, author: str) -> bool:
        return self.title == title and self.author == author

    # Ungated mutators; callers outside the package go through Library.
    def _check_out(self) -> None:
        self._available = False

    def _check_in(self) -> None:
        self._available = True

    def __str__(self) -> str:
        return (
            f"Title: {self.title}, Author: {self.author}, ISBN: {self.isbn}, "
            f"Available: {'Yes' if self._available else 'No'}"
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Book(title={self.title!r}, author={self.author!r}, isbn={self.isbn!r}, available={self._available})"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "available": self._available,
        }
