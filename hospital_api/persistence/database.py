import logging
from typing import Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.server_api import ServerApi

from ..core.config import Settings, settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
DOCTORS_COLLECTION = "doctors"


class MongoGateway:
    """One client, one database, the two collections every handler works against."""

    def __init__(self, uri: str, db_name: str, server_selection_timeout_ms: int = 5000,
                 client: Optional[MongoClient] = None):
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client = client
        self._db: Optional[Database] = client[db_name] if client is not None else None

    def connect(self) -> "MongoGateway":
        """Open the client and ping the server. Any failure propagates to the caller."""
        if self._client is None:
            self._client = MongoClient(
                self.uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                tz_aware=True,
            )
        self._client.admin.command("ping")
        self._db = self._client[self.db_name]
        logger.info("Connected to MongoDB")
        return self

    @property
    def db(self) -> Database:
        if self._db is None:
            raise RuntimeError("MongoGateway.connect() has not been called")
        return self._db

    @property
    def users(self) -> Collection:
        return self.db[USERS_COLLECTION]

    @property
    def doctors(self) -> Collection:
        return self.db[DOCTORS_COLLECTION]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None


def create_gateway(cfg: Settings = settings) -> MongoGateway:
    return MongoGateway(
        uri=cfg.mongodb_uri,
        db_name=cfg.DB_NAME,
        server_selection_timeout_ms=cfg.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )


def get_gateway(request: Request) -> MongoGateway:
    return request.app.state.gateway
