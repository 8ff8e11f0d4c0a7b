"""
GraphQL Mutation Resolvers

Defines the write operations (mutations) for the GraphQL API.
"""

import logging

import strawberry
from strawberry.types import Info

from books_graphql.exceptions import InvalidArgumentError
from books_graphql.graphql.context import GraphQLContext
from books_graphql.graphql.queries import book_to_graphql
from books_graphql.graphql.types.book import BookInput, BookType

logger = logging.getLogger(__name__)


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.
    """

    @strawberry.mutation(description="Create a new book")
    def create_book(
        self,
        info: Info[GraphQLContext, None],
        input: BookInput | None = None,
    ) -> BookType | None:
        """
        Insert a new book.

        `input` is nullable in the schema; leaving it out is rejected here
        before anything is written.
        """
        if input is None:
            logger.info("createBook called without input")
            raise InvalidArgumentError("createBook requires an input object")

        book = info.context.books.create(title=input.title, author=input.author)
        return book_to_graphql(book)
