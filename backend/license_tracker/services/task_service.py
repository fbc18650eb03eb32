"""Task Service - Business logic for license tasks"""
from typing import Any, Dict, List, Optional, Tuple
from pydantic import ValidationError as PydanticValidationError

from ..domain.models import LicenseTask, IssuanceDates, TaskSummary
from ..domain.enums import TaskStatus, SYSTEM_ACTOR
from ..domain.errors import ValidationError, TaskNotFoundError
from ..engine.status_workflow import StatusWorkflow, TransitionPlan
from ..repositories.task_repo import TaskRepository
from ..utils.idgen import generate_task_id, is_valid_task_id
from ..utils.time import utc_now
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Fields a client may set when creating a task; workflow fields start empty
CREATE_FIELDS = (
    "applicant_name", "father_name", "dob", "mobile", "email", "reference",
    "vehicle_class", "license_type", "declared_payment", "advance_payment",
    "created_by", "notes",
)


class TaskService:
    """Service for license task operations"""

    def __init__(self, repo: TaskRepository, workflow: StatusWorkflow):
        self.repo = repo
        self.workflow = workflow

    # =========================================================================
    # CRUD
    # =========================================================================

    def create_task(self, fields: Dict[str, Any], created_by: Optional[str] = None) -> LicenseTask:
        """
        Create a new license task

        The task starts as "New Application" with an empty history.
        """
        data = {key: fields[key] for key in CREATE_FIELDS if fields.get(key) is not None}
        if created_by and not data.get("created_by"):
            data["created_by"] = created_by
        if "vehicle_class" in data:
            data["vehicle_class"] = list(dict.fromkeys(data["vehicle_class"]))

        try:
            task = LicenseTask.model_validate({
                **data,
                "task_id": generate_task_id(),
                "status": TaskStatus.NEW_APPLICATION.value,
                "status_history": [],
                "created_at": utc_now(),
                "version": 1,
            })
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid task data",
                details={"errors": e.errors(include_url=False, include_context=False)}
            )

        return self.repo.create_task(task)

    def get_task(self, task_id: str) -> LicenseTask:
        """Get task by ID"""
        self._check_task_id(task_id)
        return self.repo.get_task_or_raise(task_id)

    def list_tasks(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        vehicle_class: Optional[str] = None
    ) -> List[LicenseTask]:
        """List tasks newest first; terminal statuses only when asked for by name"""
        return self.repo.list_tasks(search=search, status=status, vehicle_class=vehicle_class)

    def check_tasks(self, search: Optional[str] = None) -> List[TaskSummary]:
        """Abbreviated rows for a quick lookup across every status"""
        tasks = self.repo.list_tasks(search=search, include_terminal=True)
        return [self._summarize(task) for task in tasks]

    def delete_task(self, task_id: str) -> None:
        """Delete a task permanently"""
        self._check_task_id(task_id)
        if not self.repo.delete_task(task_id):
            raise TaskNotFoundError(f"Task {task_id} not found")

    # =========================================================================
    # Workflow
    # =========================================================================

    def apply_status_transition(
        self,
        task_id: str,
        status: str,
        application_number: Optional[str] = None,
        notes: Optional[str] = None,
        updated_by: str = SYSTEM_ACTOR
    ) -> Tuple[LicenseTask, Optional[IssuanceDates]]:
        """
        Move a task to a new status

        Returns:
            The stored task, and the issuance dates when the transition was
            to "LLR Issued"
        """
        task = self.get_task(task_id)
        plan = self.workflow.plan_transition(
            task,
            status,
            application_number=application_number,
            notes=notes,
            updated_by=updated_by
        )
        updated = self._commit(task, plan)
        return updated, plan.dates

    def edit_task_fields(
        self,
        task_id: str,
        applicant_name: Optional[str] = None,
        mobile: Optional[str] = None,
        vehicle_class: Optional[List[str]] = None,
        notes: Optional[str] = None,
        updated_by: str = SYSTEM_ACTOR
    ) -> LicenseTask:
        """Apply a partial edit and record it in the history"""
        task = self.get_task(task_id)
        plan = self.workflow.plan_edit(
            task,
            applicant_name=applicant_name,
            mobile=mobile,
            vehicle_class=vehicle_class,
            notes=notes,
            updated_by=updated_by
        )
        return self._commit(task, plan)

    # =========================================================================
    # Reports
    # =========================================================================

    def build_report(self, task_id: str) -> Dict[str, Any]:
        """
        Full report for one task

        Payments and intimations are not tracked yet; the keys are kept so
        report consumers see a stable shape.
        """
        task = self.get_task(task_id)
        return {
            "taskDetails": task.model_dump(mode="json", by_alias=True, exclude={"status_history"}),
            "statusHistory": [e.model_dump(mode="json", by_alias=True) for e in task.status_history],
            "payments": [],
            "intimations": [],
        }

    # =========================================================================
    # Helpers
    # =========================================================================

    def _commit(self, task: LicenseTask, plan: TransitionPlan) -> LicenseTask:
        return self.repo.update_with_event(
            task.task_id,
            plan.storage_updates(),
            plan.event,
            expected_version=task.version
        )

    @staticmethod
    def _check_task_id(task_id: str) -> None:
        if not is_valid_task_id(task_id):
            raise ValidationError("Invalid task id", details={"task_id": task_id})

    @staticmethod
    def _summarize(task: LicenseTask) -> TaskSummary:
        latest_note = ""
        if task.status_history:
            latest_note = task.status_history[-1].notes
        elif task.notes:
            latest_note = task.notes

        return TaskSummary(
            task_id=task.task_id,
            applicant_name=task.applicant_name,
            father_name=task.father_name,
            mobile=task.mobile,
            vehicle_class=", ".join(task.vehicle_class),
            application_number=task.application_number,
            status=task.status,
            latest_note=latest_note
        )
