"""
Unit tests for the book models and the validator.
"""

import pytest
from pydantic import ValidationError

from catalog.models import Book, BookUpdate, NewBook
from catalog.validator import REQUIRED_FIELDS_MESSAGE, validate_book


class TestBook:
    """Test cases for the Book model."""

    def test_valid_book(self):
        book = Book(id=1, title="Dune", author="Frank Herbert")

        assert book.id == 1
        assert book.description == ""

    def test_missing_id_is_rejected(self):
        with pytest.raises(ValidationError):
            Book(title="Dune", author="Frank Herbert")

    def test_serializes_four_fields(self):
        book = Book(id=2, title="Emma", author="Jane Austen", description="A matchmaker.")

        assert book.dict() == {
            "id": 2,
            "title": "Emma",
            "author": "Jane Austen",
            "description": "A matchmaker.",
        }


class TestInputModels:
    """Test cases for NewBook and BookUpdate."""

    def test_new_book_accepts_missing_fields(self):
        new_book = NewBook()

        assert new_book.title is None
        assert new_book.author is None

    def test_update_changes_only_sent_fields(self):
        update = BookUpdate(**{"description": "new"})

        assert update.changes() == {"description": "new"}

    def test_update_ignores_explicit_nulls(self):
        update = BookUpdate(**{"title": None, "author": "Someone"})

        assert update.changes() == {"author": "Someone"}

    def test_update_ignores_id(self):
        update = BookUpdate(**{"id": 99, "title": "Other"})

        assert update.changes() == {"title": "Other"}


class TestValidateBook:
    """Test cases for validate_book."""

    def test_valid_book_has_no_error(self):
        assert validate_book(NewBook(title="A", author="B")) is None

    @pytest.mark.parametrize("title,author", [
        ("", "B"),
        ("A", ""),
        (None, "B"),
        ("A", None),
        ("", ""),
    ])
    def test_missing_required_field(self, title, author):
        assert validate_book(NewBook(title=title, author=author)) == REQUIRED_FIELDS_MESSAGE

    def test_message_text(self):
        assert REQUIRED_FIELDS_MESSAGE == "Title and author are required fields."

    def test_object_without_fields(self):
        assert validate_book(object()) == REQUIRED_FIELDS_MESSAGE
