"""
Statistics calculation service for recorded periods.

This module re-estimates a user's average cycle and period length from the
periods they recorded, and folds the result back into their cycle profile.
"""
import math
from typing import Dict, List, Optional

from aws_lambda_powertools import Logger

from src.models.event import PeriodRecord
from src.models.profile import UserCycleProfile
from src.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    MIN_CYCLE_GAP_DAYS,
    MAX_CYCLE_GAP_DAYS
)
from src.services.exceptions import InvalidPeriodDurationError

logger = Logger()


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def validate_period(period: PeriodRecord) -> None:
    """
    Validate that a recorded period does not end before it starts.

    Raises:
        InvalidPeriodDurationError: If end_date precedes start_date
    """
    if period.end_date is not None and period.end_date < period.start_date:
        raise InvalidPeriodDurationError(
            f"Period ending {period.end_date} starts later, on {period.start_date}"
        )


def calculate_average_lengths(periods: List[PeriodRecord]) -> Optional[Dict[str, int]]:
    """
    Calculate average period and cycle length from completed periods.

    Cycle lengths are the gaps between the start dates of consecutive
    completed periods. Gaps outside (0, 60) days are ignored as bad data.

    Args:
        periods: Recorded periods in any order

    Returns:
        Dictionary containing:
        - average_period_length: Rounded mean period duration
        - average_cycle_length: Rounded mean cycle gap, 28 if no gap qualifies
        None if there is no completed period

    Raises:
        InvalidPeriodDurationError: If a period ends before it starts

    Example:
        >>> stats = calculate_average_lengths(periods)
        >>> print(f"{stats['average_cycle_length']} day cycles")
    """
    completed = sorted((p for p in periods if p.is_complete), key=lambda p: p.start_date)
    if not completed:
        return None

    for period in completed:
        validate_period(period)

    average_period_length = _round_half_up(
        sum(p.duration for p in completed) / len(completed)
    )

    gaps = [
        (later.start_date - earlier.start_date).days
        for earlier, later in zip(completed, completed[1:])
    ]
    valid_gaps = [gap for gap in gaps if MIN_CYCLE_GAP_DAYS < gap < MAX_CYCLE_GAP_DAYS]
    if len(valid_gaps) < len(gaps):
        logger.warning("Ignoring implausible cycle gaps", extra={
            "ignored_gaps": [gap for gap in gaps if gap not in valid_gaps]
        })

    average_cycle_length = (
        _round_half_up(sum(valid_gaps) / len(valid_gaps)) if valid_gaps else DEFAULT_CYCLE_LENGTH
    )

    return {
        "average_period_length": average_period_length,
        "average_cycle_length": average_cycle_length
    }


def apply_average_lengths(profile: UserCycleProfile, periods: List[PeriodRecord]) -> UserCycleProfile:
    """
    Return a copy of the profile updated from the recorded periods.

    The latest recorded start becomes ``last_period_start``; cycle and period
    length are replaced when averages can be calculated. The given profile is
    left untouched.

    Args:
        profile: Current cycle profile
        periods: All recorded periods of the user

    Returns:
        Updated copy of the profile
    """
    if not periods:
        return profile.model_copy()

    update = {"last_period_start": max(p.start_date for p in periods)}
    averages = calculate_average_lengths(periods)
    if averages:
        update["cycle_length"] = averages["average_cycle_length"]
        update["period_length"] = averages["average_period_length"]

    logger.info("Profile averages recalculated", extra={
        "user_id": profile.user_id,
        "periods": len(periods),
        **{k: str(v) for k, v in update.items()}
    })
    return profile.model_copy(update=update)
