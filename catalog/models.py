"""
Pydantic models for book records.
Implements the four-field Book schema and the input shapes used to create
and update books.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    """
    A stored book record. The id is assigned by the service and never changes.
    """
    id: int = Field(..., description="Unique book identifier")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    description: Optional[str] = Field("", description="Book description")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "id": 1,
                "title": "A Light in the Attic",
                "author": "Shel Silverstein",
                "description": "A collection of poems and drawings.",
            }
        }


class NewBook(BaseModel):
    """
    Input for creating a book.

    Every field is optional here so that missing title/author reach the
    validator and come back as a 400 with a readable message.
    """
    title: Optional[str] = Field(None, description="Book title")
    author: Optional[str] = Field(None, description="Book author")
    description: Optional[str] = Field(None, description="Book description")


class BookUpdate(BaseModel):
    """Input for replacing or patching a book. Only fields that are sent are applied."""
    title: Optional[str] = Field(None, description="New title")
    author: Optional[str] = Field(None, description="New author")
    description: Optional[str] = Field(None, description="New description")

    def changes(self) -> dict:
        """Fields explicitly sent by the caller, ignoring explicit nulls."""
        return self.dict(exclude_unset=True, exclude_none=True)
