"""
Books GraphQL API Package

A single /graphql endpoint serving book lookups and inserts backed by a
MongoDB collection.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: MongoDB client creation and startup connection check
- exceptions.py: Transport and resolver error types
- main.py: FastAPI application factory and lifespan
- dependencies.py: Dependency injection functions
- models/: Storage representation of books
- services/: Database access (BookRepository)
- graphql/: Strawberry schema, resolvers and executor
- routers/: HTTP request dispatcher and health check
"""

__version__ = "0.1.0"
