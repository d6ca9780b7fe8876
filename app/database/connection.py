import asyncio, logging
from typing import Callable, Optional
from fastapi import Request
from pymongo import AsyncMongoClient, ASCENDING, DESCENDING, TEXT
from app.config.settings import Settings

logger = logging.getLogger(__name__)

# collections
DESTINATION_COLLECTION = "destinations"
PACKAGE_COLLECTION = "tourpackages"
BLOG_COLLECTION = "blogposts"

COLLECTION_INDEXES = {
    DESTINATION_COLLECTION: [
        ([("region", ASCENDING), ("featured", DESCENDING)], {}),
        ([("startingPrice", ASCENDING)], {}),
        ([("averageRating", DESCENDING)], {}),
        ([("country", ASCENDING), ("region", ASCENDING)], {}),
        ([("name", TEXT), ("country", TEXT), ("description", TEXT), ("tags", TEXT)], {"name": "destination_text"}),
    ],
    PACKAGE_COLLECTION: [
        ([("category", ASCENDING), ("featured", DESCENDING)], {}),
        ([("price", ASCENDING)], {}),
        ([("rating", DESCENDING)], {}),
        ([("destination", TEXT), ("title", TEXT), ("description", TEXT)], {"name": "package_text"}),
    ],
    BLOG_COLLECTION: [
        ([("slug", ASCENDING)], {"unique": True}),
        ([("category", ASCENDING), ("featured", DESCENDING), ("publishedAt", DESCENDING)], {}),
        ([("isActive", ASCENDING), ("publishedAt", DESCENDING)], {}),
        (
            [("title", TEXT), ("excerpt", TEXT), ("content", TEXT), ("tags", TEXT), ("author.name", TEXT)],
            {"name": "blog_text"},
        ),
    ],
}


async def ensure_indexes(db) -> None:
    """Create the text, unique and sort indexes every list endpoint relies on."""
    for collection_name, indexes in COLLECTION_INDEXES.items():
        for keys, options in indexes:
            await db[collection_name].create_index(keys, **options)
    logger.info("Database indexes ensured")


class MongoConnection:
    """
    Process-wide database handle.

    The client is created on first use and reused afterwards. Callers that
    arrive while the first connection is still being established await the
    same future, so only one client is ever opened. A failed attempt is
    discarded and the next caller starts over.
    """

    def __init__(self, settings: Settings, client_factory: Callable = AsyncMongoClient):
        self.settings = settings
        self.client_factory = client_factory
        self.client = None
        self.db = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def status(self) -> str:
        if self.db is not None:
            return "connected"
        if self._pending is not None:
            return "connecting"
        return "disconnected"

    async def get_database(self):
        if self.db is not None:
            return self.db

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._connect())

        pending = self._pending
        try:
            self.db = await pending
        except Exception:
            if self._pending is pending:
                self._pending = None
            raise
        return self.db

    async def _connect(self):
        client = self.client_factory(
            self.settings.MONGODB_URI,
            maxPoolSize=self.settings.MONGODB_MAX_POOL_SIZE,
            serverSelectionTimeoutMS=self.settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            socketTimeoutMS=self.settings.MONGODB_SOCKET_TIMEOUT_MS,
        )
        try:
            await client.admin.command("ping")
            db = client[self.settings.MONGODB_DB]
            await ensure_indexes(db)
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            await client.close()
            raise

        self.client = client
        logger.info(f"Connected to MongoDB database '{self.settings.MONGODB_DB}'")
        return db

    async def ping(self) -> bool:
        try:
            db = await self.get_database()
            await db.command("ping")
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False

    async def close(self):
        if self.client is not None:
            await self.client.close()
            logger.info("Database connection closed")
        self.client = None
        self.db = None
        self._pending = None


def get_connection(request: Request) -> MongoConnection:
    return request.app.state.mongo
