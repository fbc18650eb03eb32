"""Service modules - Business logic layer"""
from .task_service import TaskService
from .catalog_service import CatalogService
from .auth_service import AuthService

__all__ = [
    "TaskService",
    "CatalogService",
    "AuthService",
]
