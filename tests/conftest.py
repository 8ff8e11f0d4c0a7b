"""
pytest Fixtures for Books GraphQL API Tests

This file contains shared fixtures used across all test files.

DATABASE FIXTURES
=================
mongomock provides an in-memory MongoClient with the same API as pymongo.
The application's connect_to_mongo() is patched to return it, so the real
lifespan runs and builds its BookRepository on top of the fake client.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["MONGOURI"] = "mongodb://localhost:27017"

from collections.abc import Generator

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.collection import Collection

from books_graphql import main
from books_graphql.graphql import GraphQLContext
from books_graphql.main import app
from books_graphql.services.books import BookRepository


@pytest.fixture
def mongo_client() -> mongomock.MongoClient:
    """Fresh in-memory MongoDB server for each test."""
    return mongomock.MongoClient()


@pytest.fixture
def books_collection(mongo_client: mongomock.MongoClient) -> Collection:
    """The collection the application reads and writes."""
    return mongo_client["graphql"]["books"]


@pytest.fixture
def book_repository(books_collection: Collection) -> BookRepository:
    """Repository over the in-memory collection."""
    return BookRepository(books_collection, timeout=5.0)


@pytest.fixture
def graphql_context(book_repository: BookRepository) -> GraphQLContext:
    """Context for executing operations without going through HTTP."""
    return GraphQLContext(books=book_repository)


@pytest.fixture
def client(
    mongo_client: mongomock.MongoClient,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[TestClient, None, None]:
    """
    Create a test client backed by the in-memory database.

    The `with` block runs the application lifespan, which calls the
    patched connect_to_mongo().
    """
    monkeypatch.setattr(main, "connect_to_mongo", lambda settings: mongo_client)

    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_book(books_collection: Collection) -> dict:
    """Insert one book document directly into the collection."""
    document = {
        "_id": ObjectId(),
        "title": "1984",
        "author": "George Orwell",
    }
    books_collection.insert_one(document)
    return document


@pytest.fixture
def multiple_books(books_collection: Collection) -> list[dict]:
    """Insert several book documents."""
    documents = [
        {"_id": ObjectId(), "title": f"Test Book {i + 1}", "author": f"Author {i + 1}"}
        for i in range(5)
    ]
    books_collection.insert_many(documents)
    return documents
