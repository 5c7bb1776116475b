"""
Book domain model.

Represents a single book held by the in-memory catalog.

Responsibility: Book entity shared by the repository and the GraphQL layer
"""

from typing import Optional
from pydantic import BaseModel, Field


class Book(BaseModel):
    """
    Catalog book record.
    
    The id is assigned by the repository when the book is stored;
    callers build new books without one.
    """
    
    id: Optional[int] = Field(
        default=None,
        description="Catalog-assigned identifier, unset until stored"
    )
    title: str = Field(description="Book title")
    author: str = Field(description="Author display name")
