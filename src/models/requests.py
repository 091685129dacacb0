"""
Request body models for the HTTP handlers.
"""
import datetime
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class ProfileUpdate(BaseModel):
    """
    Cycle settings sent by the user. Omitted fields keep their stored value.
    """
    last_period_start: Optional[date] = None
    cycle_length: Optional[int] = Field(None, ge=1, le=60)
    period_length: Optional[int] = Field(None, ge=1, le=15)


class PeriodInput(BaseModel):
    start_date: date
    end_date: Optional[date] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self) -> "PeriodInput":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class SymptomInput(BaseModel):
    """
    A symptom to log; severity uses the 1-5 input scale.
    """
    type: str = Field(..., min_length=1)
    severity: int = Field(3, ge=1, le=5)
    notes: str = ""
    date: Optional[datetime.date] = None


class MoodInput(BaseModel):
    mood: str = Field(..., min_length=1)
    energy: int = Field(3, ge=1, le=5)
    notes: str = ""
    date: Optional[datetime.date] = None


class RecommendationRequest(BaseModel):
    """
    Free-text description of how the user feels, with an optional phase
    override. Without one the user's current phase is used.
    """
    user_input: str = Field(..., min_length=1)
    current_phase: Optional[str] = None
