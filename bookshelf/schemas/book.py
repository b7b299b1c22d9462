"""
Book Pydantic Schemas

The external shape of a book record.

Create and update payloads deliberately accept missing or blank text
fields: the book service owns validation so that a caller gets every
offending field back in a single InvalidArgumentError, instead of the
transport rejecting the first problem it sees.
"""

from pydantic import BaseModel, ConfigDict, Field


class BookCreate(BaseModel):
    """
    Schema for creating a new book.

    The id is never accepted here; the service assigns it.

    Example request body:
    {
        "name": "Cool Book",
        "author": "John Smith",
        "year": "2018"
    }
    """

    name: str | None = Field(
        default=None,
        description="Book title",
        examples=["Cool Book", "Nineteen Eighty-Four"],
    )

    author: str | None = Field(
        default=None,
        description="Author name",
        examples=["John Smith", "George Orwell"],
    )

    year: str | None = Field(
        default=None,
        description="Publication year (free text)",
        examples=["2018", "1949"],
    )


class BookUpdate(BookCreate):
    """
    Schema for updating an existing book.

    Full replacement: name, author and year are all overwritten.
    The id selects the record and is never changed.
    """

    id: str | None = Field(
        default=None,
        description="Identifier of the book to update",
        examples=["6f1c9a1e-3b0e-4d5e-9a57-6d3f0b0f2a11"],
    )


class BookResponse(BaseModel):
    """Schema for book responses."""

    id: str = Field(..., description="Unique identifier")
    name: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    year: str = Field(..., description="Publication year (free text)")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "6f1c9a1e-3b0e-4d5e-9a57-6d3f0b0f2a11",
                "name": "Cool Book",
                "author": "John Smith",
                "year": "2018",
            }
        },
    )
