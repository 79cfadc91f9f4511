"""Word store selection.

The store is chosen once at startup from WORD_STORE, by the CLI and the API
alike.
"""

import logging
import os

from adapter.fake.word_repository import FakeWordRepository
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.word_repository import MongoWordRepository
from domain.model.errors import StorageError
from port.word_repository import WordRepository

logger = logging.getLogger(__name__)

STORE_MONGODB = 'mongodb'
STORE_MEMORY = 'memory'


def create_word_repo(store: str | None = None) -> WordRepository:
    """Build the configured word store.

    Raises:
        StorageError: MongoDB selected but unreachable
        ValueError: unknown store name
    """
    store = (store or os.getenv('WORD_STORE', STORE_MONGODB)).lower()

    if store == STORE_MEMORY:
        logger.info("Using in-memory word store")
        return FakeWordRepository()

    if store == STORE_MONGODB:
        client = get_mongodb_client()
        if client is None:
            raise StorageError("MongoDB unavailable (check MONGO_URL)")
        repo = MongoWordRepository(client[DATABASE_NAME])
        if repo.ensure_indexes():
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
        return repo

    raise ValueError(f"unknown WORD_STORE {store!r}, expected {STORE_MONGODB!r} or {STORE_MEMORY!r}")
