"""
GraphQL Router

The HTTP entry point of the API: decodes the request body, hands the
operation to the schema executor and serializes the result envelope.

Status codes:
- 400 (plain text) when the body is not a JSON object or has no query;
  the schema is not executed.
- 200 (application/json) for every executed operation, including ones
  whose envelope carries errors.
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from books_graphql.dependencies import Books
from books_graphql.exceptions import RequestDecodeError
from books_graphql.graphql import GraphQLContext, execute

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/graphql", tags=["GraphQL"])


async def decode_graphql_request(
    request: Request,
) -> tuple[str, dict[str, Any] | None, str | None]:
    """
    Extract query, variables and operationName from the request body.

    Raises:
        RequestDecodeError: If the body is not a JSON object, the query is
            missing or empty, or the optional fields have the wrong type
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise RequestDecodeError("Error decoding request body") from exc

    if not isinstance(payload, dict):
        raise RequestDecodeError("Error decoding request body")

    query = payload.get("query")
    if not isinstance(query, str) or not query:
        raise RequestDecodeError("Must provide a GraphQL query")

    variables = payload.get("variables")
    if variables is not None and not isinstance(variables, dict):
        raise RequestDecodeError("Variables must be a JSON object")

    operation_name = payload.get("operationName")
    if operation_name is not None and not isinstance(operation_name, str):
        raise RequestDecodeError("operationName must be a string")

    return query, variables, operation_name


@router.api_route(
    "",
    methods=["GET", "POST"],
    summary="Execute a GraphQL operation",
    description="Send a JSON body with `query` and optional `variables`.",
)
async def graphql_endpoint(request: Request, books: Books) -> Response:
    """
    Run one GraphQL operation.

    Resolvers make blocking database calls, so execution happens on the
    threadpool rather than the event loop.
    """
    query, variables, operation_name = await decode_graphql_request(request)

    envelope = await run_in_threadpool(
        execute,
        query,
        GraphQLContext(books=books),
        variables,
        operation_name,
    )

    try:
        return JSONResponse(status_code=200, content=envelope.to_dict())
    except (TypeError, ValueError) as exc:
        logger.error(f"Error encoding GraphQL response: {exc}", exc_info=True)
        return PlainTextResponse(
            "Error encoding response",
            status_code=500,
        )
