"""
Task Schemas

Request and response models for license task API endpoints.
"""

from typing import List, Optional
from pydantic import Field

from ....domain.models import CamelModel, LicenseTask, IssuanceDates


# =============================================================================
# Task CRUD Schemas
# =============================================================================

class CreateTaskRequest(CamelModel):
    """Request to create a license task"""
    applicant_name: str = Field(..., min_length=1, max_length=200)
    father_name: Optional[str] = Field(None, max_length=200)
    dob: Optional[str] = None
    mobile: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=255)
    reference: Optional[str] = Field(None, max_length=200)
    vehicle_class: List[str] = Field(..., min_length=1)
    license_type: Optional[str] = None
    declared_payment: float = Field(default=0, ge=0)
    advance_payment: float = Field(default=0, ge=0)
    created_by: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=5000)


class EditTaskRequest(CamelModel):
    """Partial edit; empty values are ignored"""
    applicant_name: Optional[str] = Field(None, max_length=200)
    mobile: Optional[str] = Field(None, max_length=20)
    vehicle_class: Optional[List[str]] = None
    notes: Optional[str] = Field(None, max_length=5000)


class TaskResponse(CamelModel):
    """Response wrapping a task after a change"""
    message: str
    task: LicenseTask


# =============================================================================
# Workflow Schemas
# =============================================================================

class UpdateStatusRequest(CamelModel):
    """Request to move a task to a new status"""
    status: str = Field(..., min_length=1, max_length=100)
    application_number: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = Field(None, max_length=5000)


class StatusUpdateResponse(TaskResponse):
    """Response after a status change; dates are present after LLR issuance"""
    dates: Optional[IssuanceDates] = None


class MessageResponse(CamelModel):
    """Plain acknowledgement"""
    message: str
