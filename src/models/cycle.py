"""
Derived cycle models. None of these are persisted.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel

from src.models.phase import CyclePhase


class CycleSnapshot(BaseModel):
    """
    Cycle position and predicted dates relative to a reference date.
    """
    current_day: int = 1
    current_phase: CyclePhase = CyclePhase.FOLLICULAR
    next_period_date: Optional[date] = None
    ovulation_date: Optional[date] = None
    fertile_window_start: Optional[date] = None
    fertile_window_end: Optional[date] = None
    days_until_next_period: Optional[int] = None


class CalendarDay(BaseModel):
    """
    A single calendar cell annotated with its cycle information.
    """
    date: date
    cycle_day: Optional[int] = None
    phase: CyclePhase
    is_period_day: bool = False
    is_ovulation_day: bool = False
    is_fertile_day: bool = False
