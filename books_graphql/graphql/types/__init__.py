"""
GraphQL Types Package

Strawberry type definitions mapping the Book model to the schema.
"""

from books_graphql.graphql.types.book import BookInput, BookType

__all__ = [
    "BookType",
    "BookInput",
]
