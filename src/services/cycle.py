"""
Service module for menstrual cycle phase calculations.

This module derives the cycle day, the cycle phase and the predicted dates
(next period, ovulation, fertile window) from a user's cycle profile. Every
function is pure: the profile is only read, and an unconfigured or malformed
profile yields the documented defaults instead of an error.

Typical usage:
    profile = repository.get_profile(user_id)
    snapshot = snapshot_for_profile(profile)
    if is_fertile_day(some_date, profile):
        ...
"""
from datetime import date, datetime, timedelta
from typing import Optional, Union

from src.models.cycle import CycleSnapshot
from src.models.phase import CyclePhase
from src.models.profile import UserCycleProfile
from src.services.constants import (
    DEFAULT_PHASE,
    FOLLICULAR_END_RATIO,
    OVULATORY_END_RATIO,
    LUTEAL_PHASE_DAYS,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION
)

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    """Drop the time of day so comparisons happen per calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _boundary(cycle_length: int, ratio: tuple) -> int:
    numerator, denominator = ratio
    return cycle_length * numerator // denominator


def phase_for_day(cycle_day: int, cycle_length: int, period_length: int) -> CyclePhase:
    """
    Classify a cycle day into its phase.

    Days up to ``period_length`` are menstrual. The follicular phase ends at
    half the cycle and the ovulatory phase at 60% of it (both floored). When
    the period is as long as half the cycle the follicular range is empty and
    the remaining days go straight to the ovulatory check.

    Args:
        cycle_day: Day in the cycle (1-based)
        cycle_length: Cycle length in days
        period_length: Period length in days

    Returns:
        Phase for the given day

    Example:
        >>> phase_for_day(15, 28, 5)
        <CyclePhase.OVULATORY: 'ovulatory'>
    """
    if cycle_day <= period_length:
        return CyclePhase.MENSTRUAL
    if cycle_day <= _boundary(cycle_length, FOLLICULAR_END_RATIO):
        return CyclePhase.FOLLICULAR
    if cycle_day <= _boundary(cycle_length, OVULATORY_END_RATIO):
        return CyclePhase.OVULATORY
    return CyclePhase.LUTEAL


def days_since_start(target_date: DateLike, profile: UserCycleProfile) -> int:
    """Whole days from the last period start to ``target_date`` (negative before it)."""
    return (_as_date(target_date) - profile.last_period_start).days


def cycle_day_for_date(target_date: DateLike, profile: UserCycleProfile) -> int:
    """
    Calculate the cycle day for a date.

    The result is always within ``[1, cycle_length]``, also for dates that
    precede the last period start. Callers must check
    ``profile.is_configured`` first; unconfigured profiles have no cycle day.

    Args:
        target_date: Date to calculate for
        profile: Configured cycle profile

    Returns:
        Day in the cycle (1-based)
    """
    cycle_length = profile.cycle_length
    # Python's modulo already returns a non-negative remainder for a positive divisor
    return days_since_start(target_date, profile) % cycle_length + 1


def phase_for_date(target_date: DateLike, profile: UserCycleProfile) -> CyclePhase:
    """Get the phase of a date, falling back to the default phase for unconfigured profiles."""
    if not profile.is_configured:
        return DEFAULT_PHASE
    cycle_day = cycle_day_for_date(target_date, profile)
    return phase_for_day(cycle_day, profile.cycle_length, profile.period_length)


def snapshot_for_profile(
    profile: UserCycleProfile,
    reference_date: Optional[DateLike] = None
) -> CycleSnapshot:
    """
    Compute the cycle snapshot for a reference date.

    Args:
        profile: User cycle profile
        reference_date: Date to compute for, defaults to today

    Returns:
        CycleSnapshot with every field populated, or the default snapshot
        (follicular, no dates) when the profile is not configured

    Example:
        >>> profile = UserCycleProfile(last_period_start=date(2024, 1, 1))
        >>> snapshot = snapshot_for_profile(profile, date(2024, 1, 1))
        >>> snapshot.next_period_date
        datetime.date(2024, 1, 29)
    """
    if not profile.is_configured:
        return CycleSnapshot()

    reference = _as_date(reference_date) if reference_date is not None else date.today()
    cycle_length = profile.cycle_length

    current_day = cycle_day_for_date(reference, profile)
    current_phase = phase_for_day(current_day, cycle_length, profile.period_length)

    cycles_since = days_since_start(reference, profile) // cycle_length
    next_period_date = profile.last_period_start + timedelta(days=(cycles_since + 1) * cycle_length)
    ovulation_date = next_period_date - timedelta(days=LUTEAL_PHASE_DAYS)

    return CycleSnapshot(
        current_day=current_day,
        current_phase=current_phase,
        next_period_date=next_period_date,
        ovulation_date=ovulation_date,
        fertile_window_start=ovulation_date - timedelta(days=FERTILE_DAYS_BEFORE_OVULATION),
        fertile_window_end=ovulation_date + timedelta(days=FERTILE_DAYS_AFTER_OVULATION),
        days_until_next_period=(next_period_date - reference).days
    )


def is_period_day(target_date: DateLike, profile: UserCycleProfile) -> bool:
    """Check if a date falls in the menstrual phase."""
    if not profile.is_configured:
        return False
    return phase_for_date(target_date, profile) == CyclePhase.MENSTRUAL


def is_ovulation_day(target_date: DateLike, profile: UserCycleProfile) -> bool:
    """Check if a date is the predicted ovulation day of its cycle."""
    if not profile.is_configured:
        return False
    snapshot = snapshot_for_profile(profile, target_date)
    return snapshot.ovulation_date == _as_date(target_date)


def is_fertile_day(target_date: DateLike, profile: UserCycleProfile) -> bool:
    """Check if a date lies inside the predicted fertile window (both ends included)."""
    if not profile.is_configured:
        return False
    snapshot = snapshot_for_profile(profile, target_date)
    return snapshot.fertile_window_start <= _as_date(target_date) <= snapshot.fertile_window_end
