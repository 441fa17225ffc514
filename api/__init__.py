"""
FastAPI RESTful API for the Book Store Management system.

This module provides:
- CRUD endpoints over the book collection
- Health and service banner endpoints
- JSON error responses for validation, lookup and server failures
"""
