"""
Database Configuration Module

This module creates the MongoDB client used by the API.

Connection Lifecycle
====================
1. Startup: connect_to_mongo() builds a MongoClient and pings the server.
   The ping is bounded by MONGO_CONNECT_TIMEOUT; if it fails the error
   propagates out of the application lifespan and the process stops.
2. Requests: all requests share the one client. MongoClient keeps its own
   connection pool and is safe to use from many threads at once.
3. Shutdown: the lifespan closes the client.
"""

import logging

import pymongo
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from books_graphql.config import Settings

logger = logging.getLogger(__name__)


def connect_to_mongo(settings: Settings) -> MongoClient:
    """
    Create a MongoDB client and verify the server is reachable.

    Args:
        settings: Application settings holding MONGOURI and the timeout

    Returns:
        A connected MongoClient

    Raises:
        PyMongoError: If the server cannot be reached within the timeout
    """
    timeout_ms = int(settings.mongo_connect_timeout * 1000)
    client: MongoClient = MongoClient(
        settings.mongouri,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
    )

    try:
        with pymongo.timeout(settings.mongo_connect_timeout):
            client.admin.command("ping")
    except PyMongoError as exc:
        logger.critical(f"Could not connect to MongoDB: {exc}")
        client.close()
        raise

    logger.info(f"Connected to MongoDB database '{settings.mongo_database}'")
    return client


def get_books_collection(client: MongoClient, settings: Settings) -> Collection:
    """Return the collection that stores book documents."""
    return client[settings.mongo_database][settings.mongo_collection]
