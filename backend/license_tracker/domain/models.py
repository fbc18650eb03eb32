"""Domain Models - Pydantic schemas for all entities"""
from datetime import date, datetime
from typing import Annotated, List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from .enums import TaskStatus, DEFAULT_NOTES


# Calendar dates are stored and rendered as YYYY-MM-DD strings (BSON has no date type)
IsoDate = Annotated[date, PlainSerializer(lambda d: d.isoformat(), return_type=str)]


class CamelModel(BaseModel):
    """Base model: snake_case in Python and MongoDB, camelCase on the HTTP surface"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )


# ============================================================================
# Identity
# ============================================================================

class ActorContext(BaseModel):
    """Current actor context from a session token"""
    model_config = ConfigDict(extra="forbid")

    user_id: str = Field(..., description="User ID (token 'id' claim)")
    username: Optional[str] = Field(None, description="Username (token 'username' claim)")


class User(BaseModel):
    """Registered user"""
    model_config = ConfigDict(extra="ignore")

    user_id: str
    username: str
    email: EmailStr
    password_hash: str
    created_at: datetime


# ============================================================================
# License Task
# ============================================================================

class IssuanceDates(CamelModel):
    """Dates fixed when the LLR is issued"""
    llr_date: IsoDate
    maturity_date: IsoDate
    expiry_date: IsoDate


class StatusEvent(CamelModel):
    """One entry of a task's status history (immutable once appended)"""
    model_config = ConfigDict(frozen=True)

    status: str
    date: IsoDate
    time: str = Field(..., description="HH:MM:SS in the business timezone")
    updated_by: str
    application_number: Optional[str] = None
    llr_date: Optional[IsoDate] = None
    maturity_date: Optional[IsoDate] = None
    expiry_date: Optional[IsoDate] = None
    notes: str = DEFAULT_NOTES


class LicenseTask(CamelModel):
    """A driving-license application tracked through its workflow"""

    task_id: str = Field(..., alias="id", description="Unique task ID")

    # Applicant
    applicant_name: str
    father_name: Optional[str] = None
    dob: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    reference: Optional[str] = None
    vehicle_class: List[str] = Field(..., min_length=1)
    license_type: Optional[str] = None

    # Payments
    declared_payment: float = Field(default=0, ge=0)
    advance_payment: float = Field(default=0, ge=0)

    # Workflow
    status: str = TaskStatus.NEW_APPLICATION.value
    application_number: Optional[str] = None
    llr_date: Optional[IsoDate] = None
    maturity_date: Optional[IsoDate] = None
    expiry_date: Optional[IsoDate] = None
    status_history: List[StatusEvent] = Field(default_factory=list)

    # Metadata
    created_by: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    version: int = Field(default=1, description="Optimistic concurrency version")

    @property
    def issuance_dates(self) -> Optional[IssuanceDates]:
        if self.llr_date is None:
            return None
        return IssuanceDates(
            llr_date=self.llr_date,
            maturity_date=self.maturity_date,
            expiry_date=self.expiry_date
        )


class TaskSummary(CamelModel):
    """Abbreviated task row returned by the check-tasks lookup"""
    task_id: str = Field(..., alias="id")
    applicant_name: str
    father_name: Optional[str] = None
    mobile: Optional[str] = None
    vehicle_class: str = ""
    application_number: Optional[str] = None
    status: str
    latest_note: str = ""
