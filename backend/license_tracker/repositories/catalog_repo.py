"""Catalog Repository - Status and vehicle class reference data"""
from typing import Iterable, List
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.database import Database

from .mongo_client import STATUSES_COLLECTION, VEHICLE_CLASSES_COLLECTION, translate_store_errors
from ..utils.time import utc_now
from ..utils.logger import get_logger

logger = get_logger(__name__)


class CatalogRepository:
    """Repository for a named-value catalog collection (one document per name)"""

    def __init__(self, db: Database, collection_name: str):
        self._collection: Collection = db[collection_name]
        self._name = collection_name

    @classmethod
    def statuses(cls, db: Database) -> "CatalogRepository":
        return cls(db, STATUSES_COLLECTION)

    @classmethod
    def vehicle_classes(cls, db: Database) -> "CatalogRepository":
        return cls(db, VEHICLE_CLASSES_COLLECTION)

    @translate_store_errors
    def list_names(self) -> List[str]:
        """All names, alphabetical"""
        cursor = self._collection.find({}, {"_id": 0, "name": 1}).sort("name", ASCENDING)
        return [doc["name"] for doc in cursor]

    @translate_store_errors
    def contains(self, name: str) -> bool:
        return self._collection.count_documents({"name": name}, limit=1) > 0

    @translate_store_errors
    def seed(self, names: Iterable[str]) -> int:
        """Insert any missing names; returns how many were added"""
        added = 0
        for name in names:
            result = self._collection.update_one(
                {"name": name},
                {"$setOnInsert": {"name": name, "created_at": utc_now()}},
                upsert=True
            )
            if result.upserted_id is not None:
                added += 1
        if added:
            logger.info(f"Seeded {added} entries into {self._name}")
        return added
