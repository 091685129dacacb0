"""
Service for the calendar and current-status views.

Both views are built on top of the cycle calculator and only read the
profile.
"""
import calendar
from datetime import date
from typing import Any, Dict, List, Optional

from aws_lambda_powertools import Logger

from src.models.cycle import CalendarDay
from src.models.profile import UserCycleProfile
from src.services.constants import PHASE_DESCRIPTIONS, PHASE_TRANSITIONS
from src.services.cycle import (
    cycle_day_for_date,
    phase_for_date,
    is_period_day,
    is_ovulation_day,
    is_fertile_day,
    snapshot_for_profile
)

logger = Logger()


def build_calendar_day(day: date, profile: UserCycleProfile) -> CalendarDay:
    """
    Annotate a single date with its cycle information.

    Args:
        day: Date to annotate
        profile: User cycle profile

    Returns:
        CalendarDay; ``cycle_day`` is None for an unconfigured profile
    """
    return CalendarDay(
        date=day,
        cycle_day=cycle_day_for_date(day, profile) if profile.is_configured else None,
        phase=phase_for_date(day, profile),
        is_period_day=is_period_day(day, profile),
        is_ovulation_day=is_ovulation_day(day, profile),
        is_fertile_day=is_fertile_day(day, profile)
    )


def build_month_calendar(profile: UserCycleProfile, year: int, month: int) -> List[CalendarDay]:
    """
    Build the annotated calendar for one month.

    Args:
        profile: User cycle profile
        year: Calendar year
        month: Calendar month (1-12)

    Returns:
        One CalendarDay per day of the month, in date order

    Raises:
        ValueError: If month is outside 1-12

    Example:
        >>> days = build_month_calendar(profile, 2024, 2)
        >>> len(days)
        29
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")

    _, days_in_month = calendar.monthrange(year, month)
    days = [build_calendar_day(date(year, month, day), profile) for day in range(1, days_in_month + 1)]

    logger.debug("Month calendar built", extra={
        "year": year,
        "month": month,
        "configured": profile.is_configured,
        "period_days": sum(1 for d in days if d.is_period_day)
    })
    return days


def build_status(profile: UserCycleProfile, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Build the current-status summary for a user.

    Args:
        profile: User cycle profile
        today: Reference date, defaults to today

    Returns:
        Dictionary with the snapshot fields plus:
        - configured: Whether the profile has cycle data
        - phase_description: Short text describing the current phase
        - next_phase: Phase that follows the current one
    """
    snapshot = snapshot_for_profile(profile, today)
    return {
        **snapshot.model_dump(mode="json"),
        "configured": profile.is_configured,
        "phase_description": PHASE_DESCRIPTIONS[snapshot.current_phase],
        "next_phase": PHASE_TRANSITIONS[snapshot.current_phase].value
    }
