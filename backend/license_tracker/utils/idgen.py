"""ID Generation Utilities"""
import re
import uuid
from datetime import datetime, timezone
from typing import Optional


TASK_ID_PREFIX = "LT"
USER_ID_PREFIX = "USR"

_TASK_ID_PATTERN = re.compile(rf"^{TASK_ID_PREFIX}-[0-9a-f]{{12}}$")


def generate_id(prefix: Optional[str] = None) -> str:
    """
    Generate a unique ID with optional prefix

    Examples:
        >>> generate_id('LT')
        'LT-a1b2c3d4e5f6'
        >>> generate_id()
        'a1b2c3d4e5f6'
    """
    unique_part = uuid.uuid4().hex[:12]

    if prefix:
        return f"{prefix}-{unique_part}"
    return unique_part


def generate_task_id() -> str:
    """Generate license task ID"""
    return generate_id(TASK_ID_PREFIX)


def generate_user_id() -> str:
    """Generate user ID"""
    return generate_id(USER_ID_PREFIX)


def is_valid_task_id(value: str) -> bool:
    """Check that a path parameter has the shape of a task ID"""
    return bool(_TASK_ID_PATTERN.match(value or ""))


def generate_correlation_id() -> str:
    """
    Generate a correlation ID for request tracing

    Returns:
        Correlation ID string with timestamp prefix
    """
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    unique_part = uuid.uuid4().hex[:8]
    return f"COR-{timestamp}-{unique_part}"
