"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

The BookRepository is built once during application startup and kept on
app.state. Routes receive it through Depends(get_book_repository), which
tests can replace with app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Request

from books_graphql.services.books import BookRepository


def get_book_repository(request: Request) -> BookRepository:
    """
    Return the repository created by the application lifespan.

    Usage in Routes:
        @router.post("/graphql")
        async def graphql(books: Books): ...
    """
    return request.app.state.books


Books = Annotated[BookRepository, Depends(get_book_repository)]
