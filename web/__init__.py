"""
Browser front end for the Book Store Management system.

This package contains:
- An async client for the book API
- The server-rendered list and form pages
"""
