"""
Task Routes Module

License task endpoints organized by functionality:

- crud.py: Create, list, check, get, edit, delete tasks
- workflow.py: Status transitions and task report

All routes are combined into a single router for inclusion in the API.
"""

from fastapi import APIRouter

from .schemas import (
    CreateTaskRequest, EditTaskRequest, TaskResponse,
    UpdateStatusRequest, StatusUpdateResponse, MessageResponse
)
from .crud import router as crud_router
from .workflow import router as workflow_router

router = APIRouter()
router.include_router(crud_router)
router.include_router(workflow_router)

__all__ = [
    "router",
    # Schemas
    "CreateTaskRequest", "EditTaskRequest", "TaskResponse",
    "UpdateStatusRequest", "StatusUpdateResponse", "MessageResponse"
]
