"""
API Routers Package

- graphql_router: /graphql request dispatcher
"""

from books_graphql.routers.graphql import router as graphql_router

__all__ = ["graphql_router"]
