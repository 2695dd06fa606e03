"""
Pydantic models for movie records.

``MovieBase`` is the request body for both creating and replacing a
movie.  Every field is optional at the schema level: a missing title
is a business rule checked by the endpoint (HTTP 400), not a schema
error.  ``MovieRead`` is a stored record including its ``id``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MovieBase(BaseModel):
    title: Optional[str] = Field(None, examples=["Dune"])
    genre: Optional[str] = Field(None, examples=["Sci-Fi"])
    description: Optional[str] = Field(None, examples=["A noble family becomes embroiled in a war for Arrakis."])
    poster_url: Optional[str] = Field(None, examples=["https://image.tmdb.org/t/p/w500/d5NXSklXo0qyIYkgV94XAgMIckC.jpg"])
    rating: Optional[float] = Field(
        None,
        examples=[8.5],
        allow_inf_nan=False,
        description="Expected between 0 and 10; not enforced",
    )

    def has_title(self) -> bool:
        return bool(self.title and self.title.strip())


class MovieWrite(MovieBase):
    """Schema for creating or fully replacing a movie.

    Updates are whole-record replacements: fields left out of the body
    are stored as null.
    """


class MovieRead(MovieBase):
    """Schema for reading a movie from the API."""

    id: int
    title: str

    model_config = {
        "from_attributes": True,
    }


class Message(BaseModel):
    """Confirmation or error payload."""

    message: str


class MovieCreated(MovieBase):
    """Response body of a successful insert: the new id plus the submitted fields."""

    message: str
    id: int
