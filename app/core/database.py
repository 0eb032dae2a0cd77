"""
MongoDB database connection and utilities.
"""

import enum
import logging
from typing import Optional

import certifi
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.config import AIRPORTS_COLLECTION, Settings
from app.core.exceptions import AdapterUnavailableError

logger = logging.getLogger(__name__)


class ConnectionState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"
    DISCONNECTED = "disconnected"


class Database:
    """
    MongoDB connection owned by the application.

    Connected once at startup and shared read-only by every request. A failed
    connect is not retried: the handle stays in ``FAILED`` and every
    ``get_collection`` call raises ``AdapterUnavailableError`` straight away.
    """

    def __init__(self, uri: str, db_name: str, connect_timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self.connect_timeout_ms = connect_timeout_ms
        self.state = ConnectionState.UNINITIALIZED
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            uri=settings.MONGO_URI,
            db_name=settings.MONGO_DB_NAME,
            connect_timeout_ms=settings.MONGO_CONNECT_TIMEOUT_MS,
        )

    @property
    def is_connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    async def connect(self) -> ConnectionState:
        """Connect to MongoDB and return the resulting state."""
        self.state = ConnectionState.CONNECTING
        client_kwargs = {"serverSelectionTimeoutMS": self.connect_timeout_ms}
        if "mongodb+srv://" in self.uri or "ssl=true" in self.uri.lower():
            client_kwargs["tlsCAFile"] = certifi.where()
        client = None
        try:
            # Invalid URIs raise here, unreachable servers on the ping.
            client = AsyncIOMotorClient(self.uri, **client_kwargs)
            await client.admin.command("ping")
        except PyMongoError as e:
            if client is not None:
                client.close()
            self.state = ConnectionState.FAILED
            logger.error(f"Failed to connect to MongoDB: {e}")
            return self.state

        self.client = client
        self.db = client[self.db_name]
        self.state = ConnectionState.CONNECTED
        logger.info(f"Connected to MongoDB: {self.db_name}")

        await self._create_indexes()
        return self.state

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            logger.info("Disconnected from MongoDB")
        self.client = None
        self.db = None
        if self.state is ConnectionState.CONNECTED:
            self.state = ConnectionState.DISCONNECTED

    async def _create_indexes(self) -> None:
        """One airport per IATA code."""
        try:
            await self.db[AIRPORTS_COLLECTION].create_index(
                "iataCode", unique=True, name="iata_code_unique"
            )
        except PyMongoError as e:
            # Existing duplicates block the index; serve anyway.
            logger.warning(f"Could not create unique iataCode index: {e}")

    def get_collection(self, name: str) -> AsyncIOMotorCollection:
        """Get a collection by name, failing fast while not connected."""
        if not self.is_connected or self.db is None:
            raise AdapterUnavailableError(f"Database is {self.state.value}")
        return self.db[name]


def get_db(request: Request) -> Database:
    """FastAPI dependency: the Database owned by the running app."""
    return request.app.state.database
