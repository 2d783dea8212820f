import pytest

from catalog import Book, Faculty, InvalidUserTypeError, Student, UserFactory, UserRole


def test_book_keeps_fields_as_entered():
    book = Book(" Sapiens", "Yuval Noah Harari", "9780099590088 ")
    assert book.title == " Sapiens"
    assert book.isbn == "9780099590088 "
    assert book.is_available()
    assert str(book) == "Title:  Sapiens, Author: Yuval Noah Harari, ISBN: 9780099590088 , Available: Yes"


def test_book_display_line():
    book = Book("Sapiens", "Yuval Noah Harari", "9780099590088")
    assert str(book) == "Title: Sapiens, Author: Yuval Noah Harari, ISBN: 9780099590088, Available: Yes"

    book._check_out()
    assert str(book).endswith("Available: No")


def test_book_to_dict():
    book = Book("Emma", "Jane Austen", "42", available=False)
    data = book.to_dict()
    assert data == {"title": "Emma", "author": "Jane Austen", "isbn": "42", "available": False}


def test_book_matches_title_and_author_only():
    book = Book("Emma", "Jane Austen", "42")
    assert book.matches("Emma", "Jane Austen")
    assert not book.matches(" Emma", "Jane Austen")
    assert not book.matches("Emma", "Jane Austen ")
    assert not book.matches("emma", "Jane Austen")
    assert not book.matches("Emma", "Austen")


def test_factory_creates_roles():
    student = UserFactory.create_user(1, "Alice", 7)
    faculty = UserFactory.create_user(2, "Bob", 8)

    assert isinstance(student, Student) and student.role is UserRole.STUDENT
    assert isinstance(faculty, Faculty) and faculty.role is UserRole.FACULTY
    assert (student.user_id, faculty.user_id) == (7, 8)


@pytest.mark.parametrize("selector", [0, 3, "3", "one", True, "²", "٣", [1]])
def test_factory_rejects_unknown_selectors(selector):
    with pytest.raises(InvalidUserTypeError) as excinfo:
        UserFactory.create_user(selector, "Nobody", 1)
    assert excinfo.value.selector == selector
    assert isinstance(excinfo.value, ValueError)


def test_user_display_lines():
    assert str(Student(1, "Alice")) == "[Student] Name: Alice, UserID: 1"
    assert str(Faculty(2, "Bob")) == "[Faculty] Name: Bob, UserID: 2"


def test_user_to_dict():
    assert Faculty(3, "Bob").to_dict() == {"user_id": 3, "name": "Bob", "role": "Faculty"}
