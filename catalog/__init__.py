"""
Catalog package for the Book Store Management backend.

This package contains:
- Book data models
- Book validation
- JSON file storage
- The book collection service
"""

__version__ = "1.0.0"
