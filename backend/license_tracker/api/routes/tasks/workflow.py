"""
Task Workflow Routes

Status transitions and the per-task report.
"""

from typing import Any, Dict
from fastapi import APIRouter, Depends

from ...deps import get_task_service
from ....domain.enums import SYSTEM_ACTOR
from ....services.task_service import TaskService
from ....utils.logger import get_logger
from .schemas import UpdateStatusRequest, StatusUpdateResponse

logger = get_logger(__name__)
router = APIRouter()


@router.put("/tasks/{task_id}/status", response_model=StatusUpdateResponse)
async def update_task_status(
    task_id: str,
    request: UpdateStatusRequest,
    service: TaskService = Depends(get_task_service)
):
    """
    Move a task to a new status

    - "Application Generated" records applicationNumber when given
    - "LLR Issued" needs an application number and returns the LLR,
      maturity and expiry dates
    """
    task, dates = service.apply_status_transition(
        task_id,
        request.status,
        application_number=request.application_number,
        notes=request.notes,
        updated_by=SYSTEM_ACTOR
    )
    return StatusUpdateResponse(
        message=f"Status updated to {task.status}",
        task=task,
        dates=dates
    )


@router.get("/tasks/{task_id}/report")
async def get_task_report(
    task_id: str,
    service: TaskService = Depends(get_task_service)
) -> Dict[str, Any]:
    """Task details with status history, payments and intimations"""
    return service.build_report(task_id)
