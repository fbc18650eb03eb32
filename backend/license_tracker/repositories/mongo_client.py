"""MongoDB Client - Connection and Collection Management"""
from functools import wraps
from typing import Any, Callable, Dict, Optional, TypeVar
from pymongo import MongoClient as PyMongoClient
from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, PyMongoError

from ..config.settings import Settings
from ..domain.errors import PersistenceError
from ..utils.logger import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

TASKS_COLLECTION = "license_tasks"
USERS_COLLECTION = "users"
STATUSES_COLLECTION = "statuses"
VEHICLE_CLASSES_COLLECTION = "vehicle_classes"


def translate_store_errors(func: F) -> F:
    """Re-raise driver failures from a repository method as PersistenceError"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PyMongoError as e:
            logger.error(f"Store operation {func.__qualname__} failed: {e}", exc_info=True)
            raise PersistenceError("Database operation failed") from e
    return wrapper  # type: ignore[return-value]


class MongoStore:
    """
    Owns the MongoDB client for the lifetime of the application.

    Created once at startup and handed to repositories; ``close()`` is called
    on shutdown. Nothing connects at import time.
    """

    def __init__(self, uri: str, db_name: str):
        self._uri = uri
        self._db_name = db_name
        self._client: Optional[PyMongoClient] = None
        self._database: Optional[Database] = None

    @classmethod
    def from_settings(cls, config: Settings) -> "MongoStore":
        return cls(config.mongo_uri, config.mongo_db)

    def connect(self) -> "MongoStore":
        """Create the client and verify the server answers a ping"""
        if self._client is not None:
            return self
        logger.info(f"Connecting to MongoDB: {self._uri}")
        client = PyMongoClient(
            self._uri,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
        )
        try:
            client.admin.command("ping")
            logger.info("MongoDB connection successful")
        except ConnectionFailure as e:
            logger.error(f"MongoDB connection failed: {e}")
            client.close()
            raise
        self._client = client
        self._database = client[self._db_name]
        logger.info(f"Using database: {self._db_name}")
        return self

    @property
    def database(self) -> Database:
        if self._database is None:
            raise RuntimeError("MongoStore is not connected")
        return self._database

    def close(self) -> None:
        """Close MongoDB connection"""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")

    def create_indexes(self) -> None:
        """Create all required indexes"""
        db = self.database
        logger.info("Creating MongoDB indexes...")

        tasks = db[TASKS_COLLECTION]
        tasks.create_index("task_id", unique=True)
        tasks.create_index("status")
        tasks.create_index("application_number", sparse=True)
        tasks.create_index("vehicle_class")
        tasks.create_index([("created_at", DESCENDING)])

        users = db[USERS_COLLECTION]
        users.create_index("user_id", unique=True)
        users.create_index("email", unique=True)

        db[STATUSES_COLLECTION].create_index([("name", ASCENDING)], unique=True)
        db[VEHICLE_CLASSES_COLLECTION].create_index([("name", ASCENDING)], unique=True)

        logger.info("MongoDB indexes created successfully")

    def health_check(self) -> Dict[str, Any]:
        """Check MongoDB health"""
        try:
            if self._client is None:
                raise ConnectionFailure("client not connected")
            self._client.admin.command("ping")
            return {
                "status": "healthy",
                "database": self._db_name,
                "connection": "ok"
            }
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return {
                "status": "unhealthy",
                "database": self._db_name,
                "error": str(e)
            }
