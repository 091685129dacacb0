"""
Cycle profile model holding the user's cycle settings.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel

from src.services.constants import DEFAULT_CYCLE_LENGTH, DEFAULT_PERIOD_LENGTH


class UserCycleProfile(BaseModel):
    """
    Cycle settings for a user.

    Lengths are not range-validated here: an unusable profile is reported by
    ``is_configured`` so the calculator can fall back to its defaults instead
    of failing.
    """
    user_id: Optional[str] = None
    last_period_start: Optional[date] = None
    cycle_length: int = DEFAULT_CYCLE_LENGTH
    period_length: int = DEFAULT_PERIOD_LENGTH

    @property
    def is_configured(self) -> bool:
        """Check if the profile carries enough data for cycle calculations."""
        return (
            self.last_period_start is not None
            and self.cycle_length > 0
            and self.period_length > 0
        )
