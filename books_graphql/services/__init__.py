"""
Services Package

Data access used by the GraphQL resolvers.
"""

from books_graphql.services.books import BookRepository

__all__ = ["BookRepository"]
