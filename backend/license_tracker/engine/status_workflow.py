"""Status Workflow - Plan status transitions and field edits for license tasks"""
from datetime import date, datetime
from typing import Any, Callable, Dict, FrozenSet, List, Optional
from pydantic import BaseModel, ConfigDict

from ..domain.models import LicenseTask, StatusEvent, IssuanceDates
from ..domain.enums import TaskStatus, EDITED_STATUS, SYSTEM_ACTOR, DEFAULT_NOTES
from ..domain.errors import ValidationError, InvalidTransitionError
from ..utils.time import Clock, utc_now, local_now, maturity_date, expiry_date
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Transitions on which a supplied application number is recorded
APPLICATION_NUMBER_STATUSES = (
    TaskStatus.APPLICATION_GENERATED.value,
    TaskStatus.LLR_ISSUED.value,
)


class TransitionPlan(BaseModel):
    """
    Result of planning a change to a task.

    ``task`` already carries the changes and the appended history entry; the
    caller persists ``storage_updates()`` plus ``event`` in one write.
    """
    model_config = ConfigDict(frozen=True)

    task: LicenseTask
    changed_fields: FrozenSet[str]
    event: StatusEvent
    dates: Optional[IssuanceDates] = None

    def storage_updates(self) -> Dict[str, Any]:
        """Changed fields in their stored (snake_case, ISO date) form"""
        if not self.changed_fields:
            return {}
        return self.task.model_dump(include=set(self.changed_fields))


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class StatusWorkflow:
    """
    Status state machine for license tasks.

    Rules:
    1. "Application Generated" records the supplied application number
       (a later call may overwrite it)
    2. "LLR Issued" requires an application number, from this call or an
       earlier one
    3. "LLR Issued" fixes llr_date to today and derives maturity (+30 days)
       and expiry (+6 months); the dates are set once and kept on re-issue
    4. Every change appends a StatusEvent snapshot to the history

    The workflow never touches the store; it only plans the change.
    """

    def __init__(
        self,
        is_known_status: Optional[Callable[[str], bool]] = None,
        timezone_name: str = "Asia/Kolkata",
        clock: Clock = utc_now
    ):
        self._is_known_status = is_known_status
        self._timezone_name = timezone_name
        self._clock = clock

    def plan_transition(
        self,
        task: LicenseTask,
        requested_status: str,
        application_number: Optional[str] = None,
        notes: Optional[str] = None,
        updated_by: str = SYSTEM_ACTOR
    ) -> TransitionPlan:
        """
        Plan moving a task to a new status

        Raises:
            ValidationError: If the status is blank or not in the catalog
            InvalidTransitionError: If LLR issuance lacks an application number
        """
        status = _clean(requested_status)
        if not status:
            raise ValidationError("Status is required")

        if self._is_known_status is not None and not self._is_known_status(status):
            raise ValidationError(
                f"Unknown status: {status}",
                details={"status": status}
            )

        now = local_now(self._timezone_name, self._clock)
        changes: Dict[str, Any] = {"status": status}

        supplied_number = _clean(application_number)
        if supplied_number and status in APPLICATION_NUMBER_STATUSES:
            changes["application_number"] = supplied_number

        current_number = changes.get("application_number", task.application_number)

        dates: Optional[IssuanceDates] = None
        if status == TaskStatus.LLR_ISSUED.value:
            if not _clean(current_number):
                raise InvalidTransitionError(
                    "Application number is required before issuing LLR",
                    details={"task_id": task.task_id, "status": status}
                )
            dates = task.issuance_dates or self._issue_dates(now.date())
            changes.update(
                llr_date=dates.llr_date,
                maturity_date=dates.maturity_date,
                expiry_date=dates.expiry_date
            )

        plan = self._plan(task, changes, status, notes, updated_by, dates, now)
        logger.info(
            f"Planned transition {task.status!r} -> {status!r} for task {task.task_id}",
            extra={"task_id": task.task_id, "status": status, "actor": updated_by}
        )
        return plan

    def plan_edit(
        self,
        task: LicenseTask,
        applicant_name: Optional[str] = None,
        mobile: Optional[str] = None,
        vehicle_class: Optional[List[str]] = None,
        notes: Optional[str] = None,
        updated_by: str = SYSTEM_ACTOR
    ) -> TransitionPlan:
        """
        Plan a partial edit of applicant fields

        Only non-empty values are applied; omitted fields are never cleared.
        An "Edited" entry is appended even when nothing changed.
        """
        changes: Dict[str, Any] = {}

        if _clean(applicant_name):
            changes["applicant_name"] = _clean(applicant_name)
        if _clean(mobile):
            changes["mobile"] = _clean(mobile)
        if vehicle_class:
            classes = [c for c in dict.fromkeys(_clean(v) for v in vehicle_class) if c]
            if classes:
                changes["vehicle_class"] = classes
        if _clean(notes):
            changes["notes"] = _clean(notes)

        now = local_now(self._timezone_name, self._clock)
        return self._plan(task, changes, EDITED_STATUS, notes, updated_by, None, now)

    @staticmethod
    def _issue_dates(today: date) -> IssuanceDates:
        return IssuanceDates(
            llr_date=today,
            maturity_date=maturity_date(today),
            expiry_date=expiry_date(today)
        )

    def _plan(
        self,
        task: LicenseTask,
        changes: Dict[str, Any],
        event_status: str,
        notes: Optional[str],
        updated_by: str,
        dates: Optional[IssuanceDates],
        now: datetime
    ) -> TransitionPlan:
        changed = task.model_copy(update=changes)

        event = StatusEvent(
            status=event_status,
            date=now.date(),
            time=now.strftime("%H:%M:%S"),
            updated_by=updated_by or SYSTEM_ACTOR,
            application_number=changed.application_number,
            llr_date=changed.llr_date,
            maturity_date=changed.maturity_date,
            expiry_date=changed.expiry_date,
            notes=_clean(notes) or DEFAULT_NOTES
        )

        return TransitionPlan(
            task=changed.model_copy(update={"status_history": [*task.status_history, event]}),
            changed_fields=frozenset(changes),
            event=event,
            dates=dates
        )
