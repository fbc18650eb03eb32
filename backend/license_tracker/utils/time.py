"""Time Utilities - UTC timestamps and calendar arithmetic"""
from datetime import date, datetime, timedelta, timezone
from typing import Callable
from dateutil import tz
from dateutil.relativedelta import relativedelta


Clock = Callable[[], datetime]

LLR_MATURITY_DAYS = 30
LLR_VALIDITY_MONTHS = 6


def utc_now() -> datetime:
    """Get current UTC datetime"""
    return datetime.now(timezone.utc)


def local_now(timezone_name: str, clock: Clock = utc_now) -> datetime:
    """
    Current wall-clock time in the named timezone.

    Raises:
        ValueError: if the timezone name is unknown
    """
    zone = tz.gettz(timezone_name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {timezone_name}")
    now = clock()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(zone)


def maturity_date(llr_date: date) -> date:
    """Earliest date the driving test can be taken: issuance + 30 days"""
    return llr_date + timedelta(days=LLR_MATURITY_DAYS)


def expiry_date(llr_date: date) -> date:
    """
    Learner's licence expiry: issuance + 6 calendar months.

    relativedelta keeps the day of month and clamps to the last day of a
    shorter target month (2024-08-31 -> 2025-02-28).
    """
    return llr_date + relativedelta(months=LLR_VALIDITY_MONTHS)

