"""
Models Package

Storage-side representation of the API's entities.
"""

from books_graphql.models.book import Book, parse_book_id

__all__ = ["Book", "parse_book_id"]
