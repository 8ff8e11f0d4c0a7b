"""
GraphQL Query Resolvers

Defines the read operations (queries) for the GraphQL API.
Each resolver makes one call through the repository found on the context.
"""

import strawberry
from strawberry.types import Info

from books_graphql.graphql.context import GraphQLContext
from books_graphql.graphql.types.book import BookType
from books_graphql.models.book import Book, parse_book_id


def book_to_graphql(book: Book) -> BookType:
    """Convert a stored Book to its wire representation."""
    return BookType(
        id=str(book.id),
        title=book.title,
        author=book.author,
    )


@strawberry.type(name="RootQuery")
class Query:
    """
    GraphQL Query type containing all read operations.
    """

    @strawberry.field(description="Get a single book by ID")
    def book(
        self,
        info: Info[GraphQLContext, None],
        id: str,
    ) -> BookType | None:
        """
        Look up a book by its identifier.

        The id must be a 24-character hex ObjectId string. A malformed id
        and a missing book are both reported as errors on this field.
        """
        book_id = parse_book_id(id)
        book = info.context.books.get(book_id)
        return book_to_graphql(book)

    @strawberry.field(description="List every book in the collection")
    def books(
        self,
        info: Info[GraphQLContext, None],
    ) -> list[BookType] | None:
        """
        Return all books, unpaginated, in storage order.
        """
        return [book_to_graphql(book) for book in info.context.books.list_all()]
