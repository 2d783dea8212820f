import logging
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

from catalog.book import Book
from catalog.user import InvalidUserTypeError, User, UserFactory, UserRole

logger = logging.getLogger(__name__)


class TransactionResult(Enum):
    """Outcome of a checkout or check-in; the value is the message shown to the user."""
    CHECKED_OUT = "Book checked out successfully!"
    CHECKED_IN = "Book checked in successfully!"
    ALREADY_CHECKED_OUT = "Book is already checked out!"
    ALREADY_AVAILABLE = "Book is already available!"
    NOT_FOUND = "Book not found!"

    @property
    def ok(self) -> bool:
        return self in (TransactionResult.CHECKED_OUT, TransactionResult.CHECKED_IN)

    @property
    def message(self) -> str:
        return self.value


class Library:
    """Manages the collection of books and users for the running process.

    One instance is created by the entry point and handed to whoever needs it.
    Nothing is persisted; all state lives for the lifetime of the instance.
    """

    def __init__(self) -> None:
        self.books: List[Book] = []
        self.users: List[User] = []
        self._next_user_id = 1

    # ------------------------- Books ------------------------- #
    def add_book(self, title: str, author: str, isbn: str) -> Book:
        """Add a new, available book at the end of the catalog."""
        book = Book(title=title, author=author, isbn=isbn)
        self.books.append(book)
        logger.info(f"Book added: {book.title!r} by {book.author!r} (ISBN: {book.isbn})")
        return book

    def list_books(self) -> List[Book]:
        """All books in insertion order."""
        return list(self.books)

    def iter_books(self) -> Iterator[Book]:
        yield from self.books

    def find_book(self, title: str, author: str) -> Optional[Book]:
        """Return the earliest-added book with this title and author.

        Books are matched on title and author only; ISBNs are not compared.
        """
        for book in self.books:
            if book.matches(title, author):
                return book
        return None

    # ------------------------- Users ------------------------- #
    def add_user(self, type_selector: Union[int, str], name: str) -> User:
        """Create a Student (1) or Faculty (2) member and register it.

        Raises InvalidUserTypeError for any other selector; in that case no
        user is stored and no id is consumed.
        """
        try:
            UserFactory.role_for(type_selector)
        except InvalidUserTypeError:
            logger.warning(f"Rejected user type selector: {type_selector!r}")
            raise

        user = UserFactory.create_user(type_selector, name, self._next_user_id)
        self._next_user_id += 1
        self.users.append(user)
        logger.info(f"User added: {user.name!r} as {user.role.label} (UserID: {user.user_id})")
        return user

    def list_users(self) -> List[User]:
        return list(self.users)

    def find_user(self, user_id: int) -> Optional[User]:
        for user in self.users:
            if user.user_id == user_id:
                return user
        return None

    # ------------------------- Transactions ------------------------- #
    def check_out_book(self, title: str, author: str, isbn: str = "") -> TransactionResult:
        # isbn is collected by callers but books are matched on title and author
        book = self.find_book(title, author)
        if book is None:
            logger.info(f"Checkout failed, no book {title!r} by {author!r}")
            return TransactionResult.NOT_FOUND
        if not book.is_available():
            return TransactionResult.ALREADY_CHECKED_OUT
        book._check_out()
        logger.info(f"Checked out {book.title!r} (ISBN: {book.isbn})")
        return TransactionResult.CHECKED_OUT

    def check_in_book(self, title: str, author: str, isbn: str = "") -> TransactionResult:
        book = self.find_book(title, author)
        if book is None:
            logger.info(f"Check-in failed, no book {title!r} by {author!r}")
            return TransactionResult.NOT_FOUND
        if book.is_available():
            return TransactionResult.ALREADY_AVAILABLE
        book._check_in()
        logger.info(f"Checked in {book.title!r} (ISBN: {book.isbn})")
        return TransactionResult.CHECKED_IN

    # ------------------------- Statistics ------------------------- #
    def get_statistics(self) -> Dict[str, Any]:
        """Library statistics."""
        available = sum(1 for book in self.books if book.is_available())
        students = sum(1 for user in self.users if user.role is UserRole.STUDENT)
        return {
            "total_books": len(self.books),
            "available_books": available,
            "checked_out_books": len(self.books) - available,
            "unique_authors": len({book.author for book in self.books}),
            "total_users": len(self.users),
            "students": students,
            "faculty": len(self.users) - students,
        }

    def close(self) -> None:
        """Release every book and user held by the registry."""
        self.books.clear()
        self.users.clear()
