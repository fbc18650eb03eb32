"""Domain Enumerations - Status and catalog definitions"""
from enum import Enum


class TaskStatus(str, Enum):
    """
    Built-in license task statuses.

    These seed the status catalog collection on startup. The catalog itself is
    reference data, so operators may add statuses without a code change; the
    workflow engine only attaches behaviour to the values below.
    """
    NEW_APPLICATION = "New Application"
    DOCUMENTS_PENDING = "Documents Pending"
    APPLICATION_GENERATED = "Application Generated"
    SLOT_BOOKED = "Slot Booked"
    TEST_FAILED = "Test Failed"
    LLR_ISSUED = "LLR Issued"
    RETURNED = "Returned"


# Literal recorded in the history when task fields are edited directly
EDITED_STATUS = "Edited"

# Updater recorded on history entries when no actor identity is propagated
SYSTEM_ACTOR = "System"

DEFAULT_NOTES = "No notes"

# Excluded from task listings unless a status filter is given
TERMINAL_STATUSES = (TaskStatus.LLR_ISSUED.value, TaskStatus.RETURNED.value)


class VehicleClass(str, Enum):
    """Built-in vehicle classes seeded into the vehicle class catalog"""
    MCWOG = "MCWOG"  # Motorcycle without gear
    MCWG = "MCWG"  # Motorcycle with gear
    LMV = "LMV"  # Light motor vehicle
    LMV_TR = "LMV-TR"  # Light motor vehicle, transport
    HMV = "HMV"  # Heavy motor vehicle
    E_RICKSHAW = "E-Rickshaw"
