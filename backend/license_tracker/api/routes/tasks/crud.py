"""
Task CRUD Routes

Create, list, lookup, get, edit and delete license tasks.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from ...deps import get_task_service, get_optional_user_dep
from ....domain.models import ActorContext, LicenseTask, TaskSummary
from ....services.task_service import TaskService
from ....utils.logger import get_logger
from .schemas import CreateTaskRequest, EditTaskRequest, TaskResponse, MessageResponse

logger = get_logger(__name__)
router = APIRouter()


@router.post("/tasks", response_model=LicenseTask, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    actor: Optional[ActorContext] = Depends(get_optional_user_dep),
    service: TaskService = Depends(get_task_service)
):
    """
    Create a license task

    The task starts as "New Application" with an empty status history.
    When the caller is logged in, createdBy defaults to their username.
    """
    task = service.create_task(
        request.model_dump(exclude_none=True),
        created_by=actor.username if actor else None
    )
    logger.info(f"Created task: {task.task_id}", extra={"task_id": task.task_id})
    return task


@router.get("/tasks", response_model=List[LicenseTask])
async def list_tasks(
    search: Optional[str] = Query(None, description="Match name, mobile or application number"),
    task_status: Optional[str] = Query(None, alias="status", description="Exact status; includes terminal statuses"),
    vehicle_class: Optional[str] = Query(None, alias="vehicleClass", description="Tasks including this class"),
    service: TaskService = Depends(get_task_service)
):
    """
    List tasks, newest first

    Tasks that are "LLR Issued" or "Returned" are hidden unless their
    status is requested explicitly.
    """
    return service.list_tasks(search=search, status=task_status, vehicle_class=vehicle_class)


@router.get("/check-tasks", response_model=List[TaskSummary])
async def check_tasks(
    search: Optional[str] = Query(None),
    service: TaskService = Depends(get_task_service)
):
    """Abbreviated task rows for a quick lookup across all statuses"""
    return service.check_tasks(search)


@router.get("/tasks/{task_id}", response_model=LicenseTask)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service)
):
    """Get one task with its full status history"""
    return service.get_task(task_id)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def edit_task(
    task_id: str,
    request: EditTaskRequest,
    service: TaskService = Depends(get_task_service)
):
    """
    Edit applicant name, mobile, vehicle classes or notes

    Missing or empty fields are left unchanged. An "Edited" entry is added
    to the status history.
    """
    task = service.edit_task_fields(
        task_id,
        applicant_name=request.applicant_name,
        mobile=request.mobile,
        vehicle_class=request.vehicle_class,
        notes=request.notes
    )
    return TaskResponse(message="Task updated successfully", task=task)


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service)
):
    """Delete a task permanently"""
    service.delete_task(task_id)
    return MessageResponse(message="Task deleted successfully")
