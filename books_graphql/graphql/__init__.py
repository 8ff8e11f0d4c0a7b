"""
GraphQL Package

This package declares the GraphQL schema using Strawberry GraphQL and
exposes execute(), the one entry point used by the HTTP dispatcher.

Schema:
    type RootQuery {
        book(id: String!): Book
        books: [Book!]
    }

    type Mutation {
        createBook(input: BookInput): Book
    }

Execution follows the GraphQL algorithm: the operation is parsed, validated
against the schema, and then each selected field is resolved in request
order. A parse or validation failure returns errors only and no resolver is
called. A resolver failure nulls its own field and adds an error while the
other fields still resolve.

Example Query:
    query {
        books {
            id
            title
            author
        }
    }
"""

from dataclasses import dataclass, field
from typing import Any

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext

from books_graphql.exceptions import BookError
from books_graphql.graphql.context import GraphQLContext
from books_graphql.graphql.mutations import Mutation
from books_graphql.graphql.queries import Query


class BooksSchema(strawberry.Schema):
    """
    Strawberry schema that leaves BookError logging to the repository.

    Strawberry logs every field error at ERROR with a traceback. A missing
    book or a malformed id is an expected outcome already logged where it
    happens, so only unexpected errors reach the default logger.
    """

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        unexpected = [
            error for error in errors
            if not isinstance(error.original_error, BookError)
        ]
        super().process_errors(unexpected, execution_context)


# Create the GraphQL schema
schema = BooksSchema(
    query=Query,
    mutation=Mutation,
)


@dataclass
class ResultEnvelope:
    """
    Outcome of one GraphQL execution.

    Attributes:
        data: Resolved fields, or None when the operation never ran
        errors: Parse, validation and field errors in the order reported
    """

    data: dict[str, Any] | None = None
    errors: list[GraphQLError] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Format the envelope as a GraphQL response body."""
        body: dict[str, Any] = {"data": self.data}
        if self.errors:
            body["errors"] = [error.formatted for error in self.errors]
        return body


def execute(
    query: str,
    context: GraphQLContext,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> ResultEnvelope:
    """
    Execute a GraphQL operation against the schema.

    Resolvers are synchronous and run in the calling thread.

    Args:
        query: The operation document
        context: Per-request context carrying the repository
        variables: Values for the operation's variables
        operation_name: Operation to run when the document holds several

    Returns:
        ResultEnvelope with data and errors
    """
    result = schema.execute_sync(
        query,
        variable_values=variables,
        context_value=context,
        operation_name=operation_name,
    )
    return ResultEnvelope(data=result.data, errors=list(result.errors or []))


__all__ = ["BooksSchema", "schema", "execute", "ResultEnvelope", "GraphQLContext"]
