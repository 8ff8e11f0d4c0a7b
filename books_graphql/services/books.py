"""
Books Service

Database access for the books collection.

Each public method performs exactly one MongoDB operation, bounded by
pymongo.timeout() so a slow server cannot hold a request forever. Driver
failures are logged and re-raised as StorageError; the GraphQL layer turns
that into a field error.

The repository holds no state besides the collection handle, so a single
instance is shared by every request.
"""

import logging
from contextlib import closing

import pymongo
from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from books_graphql.exceptions import DecodeError, NotFoundError, StorageError
from books_graphql.models.book import Book

logger = logging.getLogger(__name__)


class BookRepository:
    """
    Read/write access to book documents.

    Args:
        collection: The MongoDB collection storing books
        timeout: Deadline in seconds applied to every database call
    """

    def __init__(self, collection: Collection, timeout: float = 5.0):
        self.collection = collection
        self.timeout = timeout

    def get(self, book_id: ObjectId) -> Book:
        """
        Fetch one book by its identifier.

        Raises:
            NotFoundError: If no document has this `_id`
            DecodeError: If the stored document is not a valid book
            StorageError: If the driver reports a failure
        """
        try:
            with pymongo.timeout(self.timeout):
                document = self.collection.find_one({"_id": book_id})
        except PyMongoError as exc:
            logger.error(f"Error finding book by ID {book_id}: {exc}")
            raise StorageError("Failed to fetch book") from exc

        if document is None:
            logger.info(f"Book {book_id} not found")
            raise NotFoundError(f"Book {book_id} not found")

        return self._decode(document)

    def list_all(self) -> list[Book]:
        """
        Load every book in the collection.

        No sort is requested, so the order is whatever the server returns.
        The cursor is closed whether or not iteration succeeds.

        Raises:
            DecodeError: If any stored document is not a valid book
            StorageError: If the driver reports a failure
        """
        try:
            with pymongo.timeout(self.timeout):
                with closing(self.collection.find({})) as cursor:
                    documents = list(cursor)
        except PyMongoError as exc:
            logger.error(f"Error finding books: {exc}")
            raise StorageError("Failed to list books") from exc

        return [self._decode(document) for document in documents]

    def _decode(self, document: dict) -> Book:
        try:
            return Book.from_document(document)
        except DecodeError as exc:
            logger.error(f"Error decoding book: {exc}")
            raise

    def create(self, title: str, author: str) -> Book:
        """
        Insert a new book and return it.

        The identifier is generated here and then replaced by the one the
        server acknowledges.

        Raises:
            StorageError: If the insert fails
        """
        book = Book(title=title, author=author)

        try:
            with pymongo.timeout(self.timeout):
                result = self.collection.insert_one(book.to_document())
        except PyMongoError as exc:
            logger.error(f"Error creating a new book: {exc}")
            raise StorageError("Failed to create book") from exc

        logger.info(f"Created book {result.inserted_id}")
        return book.model_copy(update={"id": result.inserted_id})
