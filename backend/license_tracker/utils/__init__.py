"""Utility modules"""
from .logger import get_logger, setup_logging
from .jwt import JWTService
from .idgen import generate_id, generate_correlation_id, generate_task_id, is_valid_task_id
from .time import utc_now, local_now, maturity_date, expiry_date

__all__ = [
    "get_logger",
    "setup_logging",
    "JWTService",
    "generate_id",
    "generate_correlation_id",
    "generate_task_id",
    "is_valid_task_id",
    "utc_now",
    "local_now",
    "maturity_date",
    "expiry_date",
]
