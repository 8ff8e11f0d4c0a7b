"""
GraphQL Context

Provides request context to all GraphQL resolvers.

The context is created for each request by the dispatcher and passed to
resolvers via the `info` parameter. It carries the storage dependency so
resolvers never reach for module-level state.
"""

from books_graphql.services.books import BookRepository


class GraphQLContext:
    """
    Context object available to all GraphQL resolvers.

    Attributes:
        books: Repository used for every database call
    """

    def __init__(self, books: BookRepository):
        self.books = books
