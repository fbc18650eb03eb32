"""Task Repository - Data access for license tasks"""
import re
from typing import Any, Dict, List, Optional
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from .mongo_client import TASKS_COLLECTION, translate_store_errors
from ..domain.enums import TERMINAL_STATUSES
from ..domain.errors import ConcurrencyError, TaskNotFoundError
from ..domain.models import LicenseTask, StatusEvent
from ..utils.time import utc_now
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Fields matched by the free-text search box
SEARCH_FIELDS = ("applicant_name", "mobile", "application_number")


def build_task_query(
    search: Optional[str] = None,
    status: Optional[str] = None,
    vehicle_class: Optional[str] = None,
    include_terminal: bool = False
) -> Dict[str, Any]:
    """
    Build the MongoDB filter for task listings.

    Without an explicit status, tasks in a terminal status are left out
    unless ``include_terminal`` is set.
    """
    and_conditions: List[Dict[str, Any]] = []

    if search:
        pattern = re.escape(search.strip())
        and_conditions.append({"$or": [
            {field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS
        ]})

    if status:
        and_conditions.append({"status": status})
    elif not include_terminal:
        and_conditions.append({"status": {"$nin": list(TERMINAL_STATUSES)}})

    if vehicle_class:
        # Array field: matches when any element equals the class
        and_conditions.append({"vehicle_class": vehicle_class})

    if not and_conditions:
        return {}
    if len(and_conditions) == 1:
        return and_conditions[0]
    return {"$and": and_conditions}


def _from_document(doc: Dict[str, Any]) -> LicenseTask:
    doc.pop("_id", None)
    return LicenseTask.model_validate(doc)


class TaskRepository:
    """Repository for license task operations"""

    def __init__(self, db: Database):
        self._tasks: Collection = db[TASKS_COLLECTION]

    @translate_store_errors
    def create_task(self, task: LicenseTask) -> LicenseTask:
        """Insert a new task"""
        # Python mode keeps created_at a datetime so MongoDB sorts on it
        doc = task.model_dump()
        doc["_id"] = task.task_id

        self._tasks.insert_one(doc)
        logger.info(f"Created task: {task.task_id}", extra={"task_id": task.task_id})
        return task

    @translate_store_errors
    def get_task(self, task_id: str) -> Optional[LicenseTask]:
        """Get task by ID"""
        doc = self._tasks.find_one({"task_id": task_id})
        if doc:
            return _from_document(doc)
        return None

    def get_task_or_raise(self, task_id: str) -> LicenseTask:
        """Get task by ID or raise error"""
        task = self.get_task(task_id)
        if not task:
            raise TaskNotFoundError(f"Task {task_id} not found")
        return task

    @translate_store_errors
    def list_tasks(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        vehicle_class: Optional[str] = None,
        include_terminal: bool = False
    ) -> List[LicenseTask]:
        """List tasks matching the filters, newest first"""
        query = build_task_query(search, status, vehicle_class, include_terminal)
        cursor = self._tasks.find(query).sort("created_at", DESCENDING)
        return [_from_document(doc) for doc in cursor]

    @translate_store_errors
    def update_with_event(
        self,
        task_id: str,
        updates: Dict[str, Any],
        event: StatusEvent,
        expected_version: Optional[int] = None
    ) -> LicenseTask:
        """
        Set fields and append a history entry in one atomic document write.

        Args:
            task_id: Task ID
            updates: Storage-form field values to $set
            event: History entry to $push
            expected_version: Version read before planning the change; the
                write is refused if another writer got there first
        """
        filter_query: Dict[str, Any] = {"task_id": task_id}
        if expected_version is not None:
            filter_query["version"] = expected_version

        set_fields = dict(updates)
        set_fields["updated_at"] = utc_now()

        result = self._tasks.find_one_and_update(
            filter_query,
            {
                "$set": set_fields,
                "$push": {"status_history": event.model_dump()},
                "$inc": {"version": 1}
            },
            return_document=ReturnDocument.AFTER
        )

        if result is None:
            if expected_version is not None and self._tasks.find_one({"task_id": task_id}, {"_id": 1}):
                raise ConcurrencyError(
                    f"Task {task_id} was modified. Please refresh and try again.",
                    details={"expected_version": expected_version}
                )
            raise TaskNotFoundError(f"Task {task_id} not found")

        logger.info(
            f"Updated task: {task_id}",
            extra={"task_id": task_id, "status": event.status, "version": result.get("version")}
        )
        return _from_document(result)

    @translate_store_errors
    def delete_task(self, task_id: str) -> bool:
        """Permanently delete a task"""
        result = self._tasks.delete_one({"task_id": task_id})
        if result.deleted_count > 0:
            logger.info(f"Deleted task: {task_id}", extra={"task_id": task_id})
            return True
        return False
