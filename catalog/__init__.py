"""Library Catalog - Core Application Package

This package contains the in-memory catalog modules:
- Book entity (book.py)
- User roles, users and the user factory (user.py)
- Library registry and transactions (library.py)
"""

from catalog.book import Book
from catalog.library import Library, TransactionResult
from catalog.user import Faculty, InvalidUserTypeError, Student, User, UserFactory, UserRole

__all__ = [
    "Book",
    "Faculty",
    "InvalidUserTypeError",
    "Library",
    "Student",
    "TransactionResult",
    "User",
    "UserFactory",
    "UserRole",
]
