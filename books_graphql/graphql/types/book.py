"""
GraphQL Book Type

Defines the Book object type and the BookInput input type.
"""

import strawberry


@strawberry.type(name="Book")
class BookType:
    """
    GraphQL type representing a book.

    Every field is a string on the wire, including the identifier.
    """

    id: str
    title: str
    author: str


@strawberry.input(name="BookInput")
class BookInput:
    """
    Input type for creating a book.

    Both fields are non-null, so a request missing either one fails
    validation before any resolver runs.
    """

    title: str
    author: str
