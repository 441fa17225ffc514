"""
Validation for new book records.
"""

from typing import Optional

REQUIRED_FIELDS_MESSAGE = "Title and author are required fields."


def validate_book(book) -> Optional[str]:
    """
    Check that a candidate book has a title and an author.

    Args:
        book: Any object with ``title`` and ``author`` attributes

    Returns:
        An error message if a required field is empty or missing, otherwise None
    """
    if not getattr(book, "title", None) or not getattr(book, "author", None):
        return REQUIRED_FIELDS_MESSAGE
    return None
