"""
Book Model

The only entity of the API: a book stored as one MongoDB document.

Storage representation:
    {"_id": ObjectId(...), "title": "...", "author": "..."}

The identifier is assigned when the book is created and never changes.
The GraphQL layer exposes it as the 24-character hex string produced by
str(ObjectId); parse_book_id performs the opposite conversion for lookups.
"""

import logging
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from books_graphql.exceptions import DecodeError, InvalidArgumentError

logger = logging.getLogger(__name__)


class Book(BaseModel):
    """
    A book as held in the collection.

    `id` is populated from the document's `_id` field; `title` and
    `author` must be strings.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        frozen=True,
    )

    id: ObjectId = Field(default_factory=ObjectId, alias="_id")
    title: str
    author: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Book":
        """
        Build a Book from a stored document.

        Raises:
            DecodeError: If required fields are missing or mistyped
        """
        try:
            return cls.model_validate(document)
        except ValidationError as exc:
            raise DecodeError(
                f"Stored book {document.get('_id')!s} could not be decoded: "
                f"{exc.error_count()} invalid field(s)"
            ) from exc

    def to_document(self) -> dict[str, Any]:
        """Return the storage representation, keyed by `_id`."""
        return {"_id": self.id, "title": self.title, "author": self.author}


def parse_book_id(value: str) -> ObjectId:
    """
    Convert a wire identifier into an ObjectId.

    Raises:
        InvalidArgumentError: If the value is not a valid ObjectId string
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        logger.info(f"Rejected book id {value!r}")
        raise InvalidArgumentError(f"Invalid book id: {value!r}") from exc
