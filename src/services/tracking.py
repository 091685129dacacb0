"""
Service module for logging symptoms and moods.

Entries are stamped with the cycle day they were logged on, computed from
the user's stored profile at the entry date.

Typical usage:
    service = TrackingService(repository)
    entry = service.log_symptom(user_id, "cramps", severity=4)
    recent = service.list_symptoms(user_id)
"""
import math
import uuid
from datetime import date
from typing import List, Optional

from aws_lambda_powertools import Logger

from src.models.event import MoodEntry, SymptomEntry
from src.services.constants import (
    DEFAULT_SEVERITY,
    DEFAULT_ENERGY,
    SEVERITY_INPUT_SCALE,
    SEVERITY_STORED_SCALE
)
from src.services.cycle import cycle_day_for_date
from src.services.exceptions import AuthorizationError, EntryNotFoundError
from src.services.repository import TrackerRepository

logger = Logger()


def convert_severity(severity: int) -> int:
    """
    Convert a 1-5 severity rating to the stored 1-3 scale.

    Args:
        severity: Rating on the input scale (1-5)

    Returns:
        Rating on the stored scale (1-3)

    Raises:
        ValueError: If severity is outside 1-5

    Example:
        >>> [convert_severity(s) for s in range(1, 6)]
        [1, 2, 2, 3, 3]
    """
    if not 1 <= severity <= SEVERITY_INPUT_SCALE:
        raise ValueError(f"Severity must be between 1 and {SEVERITY_INPUT_SCALE}, got {severity}")
    return min(SEVERITY_STORED_SCALE, math.ceil(severity * SEVERITY_STORED_SCALE / SEVERITY_INPUT_SCALE))


class TrackingService:
    """Logs, lists and deletes a user's symptom and mood entries."""

    def __init__(self, repository: TrackerRepository):
        self.repository = repository

    def _cycle_day(self, user_id: str, entry_date: date) -> int:
        profile = self.repository.get_profile(user_id)
        if not profile.is_configured:
            return 1
        return cycle_day_for_date(entry_date, profile)

    @staticmethod
    def _require_user(user_id: Optional[str]) -> None:
        if not user_id:
            raise AuthorizationError("No user logged in")

    def log_symptom(
        self,
        user_id: str,
        symptom_type: str,
        severity: int = DEFAULT_SEVERITY,
        notes: str = "",
        entry_date: Optional[date] = None
    ) -> SymptomEntry:
        """
        Log a symptom for a user.

        Args:
            user_id: User identifier
            symptom_type: Symptom name, e.g. "cramps"
            severity: Rating from 1 to 5
            notes: Optional free-text notes
            entry_date: Date of the symptom, defaults to today

        Returns:
            The stored SymptomEntry

        Raises:
            AuthorizationError: If no user id is given
            ValueError: If severity is outside 1-5
        """
        self._require_user(user_id)
        entry_date = entry_date or date.today()

        entry = SymptomEntry(
            entry_id=str(uuid.uuid4()),
            user_id=user_id,
            date=entry_date,
            type=symptom_type,
            severity=convert_severity(severity),
            notes=notes or "",
            cycle_day=self._cycle_day(user_id, entry_date)
        )
        self.repository.put_symptom(entry)

        logger.info("Symptom logged", extra={
            "user_id": user_id,
            "entry_id": entry.entry_id,
            "symptom_type": entry.type,
            "cycle_day": entry.cycle_day
        })
        return entry

    def log_mood(
        self,
        user_id: str,
        mood: str,
        energy: int = DEFAULT_ENERGY,
        notes: str = "",
        entry_date: Optional[date] = None
    ) -> MoodEntry:
        """
        Log a mood for a user.

        Args:
            user_id: User identifier
            mood: Mood name, e.g. "calm"
            energy: Energy level from 1 to 5
            notes: Optional free-text notes
            entry_date: Date of the mood, defaults to today

        Returns:
            The stored MoodEntry
        """
        self._require_user(user_id)
        entry_date = entry_date or date.today()

        entry = MoodEntry(
            entry_id=str(uuid.uuid4()),
            user_id=user_id,
            date=entry_date,
            mood=mood,
            energy=energy,
            notes=notes or "",
            cycle_day=self._cycle_day(user_id, entry_date)
        )
        self.repository.put_mood(entry)

        logger.info("Mood logged", extra={
            "user_id": user_id,
            "entry_id": entry.entry_id,
            "mood": entry.mood,
            "cycle_day": entry.cycle_day
        })
        return entry

    def list_symptoms(self, user_id: str) -> List[SymptomEntry]:
        self._require_user(user_id)
        return sorted(self.repository.list_symptoms(user_id), key=lambda e: e.date, reverse=True)

    def list_moods(self, user_id: str) -> List[MoodEntry]:
        self._require_user(user_id)
        return sorted(self.repository.list_moods(user_id), key=lambda e: e.date, reverse=True)

    def delete_symptom(self, user_id: str, entry_id: str) -> None:
        """Delete a symptom entry, raising EntryNotFoundError if it does not exist."""
        self._require_user(user_id)
        if not self.repository.delete_symptom(user_id, entry_id):
            raise EntryNotFoundError(f"Symptom {entry_id} not found")

    def delete_mood(self, user_id: str, entry_id: str) -> None:
        """Delete a mood entry, raising EntryNotFoundError if it does not exist."""
        self._require_user(user_id)
        if not self.repository.delete_mood(user_id, entry_id):
            raise EntryNotFoundError(f"Mood {entry_id} not found")
