"""
Tracking entry models for logged symptoms, moods and periods.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class SymptomEntry(BaseModel):
    """
    A symptom logged by the user. Severity is stored on a 1-3 scale.
    """
    entry_id: str
    user_id: str
    date: date
    type: str = Field(..., min_length=1)
    severity: int = Field(2, ge=1, le=3)
    notes: str = ""
    cycle_day: int = Field(1, ge=1)


class MoodEntry(BaseModel):
    """
    A mood logged by the user with an energy level from 1 to 5.
    """
    entry_id: str
    user_id: str
    date: date
    mood: str = Field(..., min_length=1)
    energy: int = Field(3, ge=1, le=5)
    notes: str = ""
    cycle_day: int = Field(1, ge=1)


class PeriodRecord(BaseModel):
    """
    A recorded bleed. ``end_date`` stays empty until the period is over.
    """
    user_id: str
    start_date: date
    end_date: Optional[date] = None
    notes: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.end_date is not None

    @property
    def duration(self) -> Optional[int]:
        """Period length in days, counting both ends."""
        if self.end_date is None:
            return None
        return (self.end_date - self.start_date).days + 1
