"""Repository modules - Data access layer"""
from .mongo_client import MongoStore, translate_store_errors
from .task_repo import TaskRepository, build_task_query
from .catalog_repo import CatalogRepository
from .user_repo import UserRepository

__all__ = [
    "MongoStore",
    "translate_store_errors",
    "TaskRepository",
    "build_task_query",
    "CatalogRepository",
    "UserRepository",
]
