"""
Persistence layer for cycle profiles and tracking entries.

Services receive a ``TrackerRepository`` instead of reaching for a global
client, so tests can hand in a double and handlers can share one instance.

Typical usage:
    repository = DynamoTrackerRepository(get_dynamo())
    service = TrackingService(repository)
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from aws_lambda_powertools import Logger

from src.models.event import MoodEntry, PeriodRecord, SymptomEntry
from src.models.profile import UserCycleProfile
from src.utils.dynamo import (
    DynamoDBClient,
    PROFILE_SK,
    SYMPTOM_PREFIX,
    MOOD_PREFIX,
    PERIOD_PREFIX,
    create_pk,
    create_symptom_sk,
    create_mood_sk,
    create_period_sk
)

logger = Logger()

_KEY_ATTRIBUTES = ("PK", "SK")


class TrackerRepository(ABC):
    """Storage interface for everything the tracker persists per user."""

    @abstractmethod
    def get_profile(self, user_id: str) -> UserCycleProfile:
        """Get the user's cycle profile; an empty profile if none is stored."""

    @abstractmethod
    def save_profile(self, profile: UserCycleProfile) -> None:
        """Store the user's cycle profile."""

    @abstractmethod
    def put_symptom(self, entry: SymptomEntry) -> None:
        """Store a symptom entry."""

    @abstractmethod
    def list_symptoms(self, user_id: str) -> List[SymptomEntry]:
        """List the user's symptom entries, newest first."""

    @abstractmethod
    def delete_symptom(self, user_id: str, entry_id: str) -> bool:
        """Delete a symptom entry. Returns False if it did not exist."""

    @abstractmethod
    def put_mood(self, entry: MoodEntry) -> None:
        """Store a mood entry."""

    @abstractmethod
    def list_moods(self, user_id: str) -> List[MoodEntry]:
        """List the user's mood entries, newest first."""

    @abstractmethod
    def delete_mood(self, user_id: str, entry_id: str) -> bool:
        """Delete a mood entry. Returns False if it did not exist."""

    @abstractmethod
    def put_period(self, period: PeriodRecord) -> None:
        """Store a recorded period, replacing one with the same start date."""

    @abstractmethod
    def list_periods(self, user_id: str) -> List[PeriodRecord]:
        """List the user's recorded periods, oldest first."""


def _strip_keys(item: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in item.items() if k not in _KEY_ATTRIBUTES}


class DynamoTrackerRepository(TrackerRepository):
    """
    Single-table DynamoDB implementation.

    Layout under ``PK = USER#<id>``:
        PROFILE                      cycle profile
        SYMPTOM#<date>#<entry_id>    symptom entries
        MOOD#<date>#<entry_id>       mood entries
        PERIOD#<start_date>          recorded periods
    """

    def __init__(self, dynamo: DynamoDBClient):
        self.dynamo = dynamo

    def get_profile(self, user_id: str) -> UserCycleProfile:
        item = self.dynamo.get_item({"PK": create_pk(user_id), "SK": PROFILE_SK})
        if not item:
            logger.debug("No stored profile", extra={"user_id": user_id})
            return UserCycleProfile(user_id=user_id)
        return UserCycleProfile(**{**_strip_keys(item), "user_id": user_id})

    def save_profile(self, profile: UserCycleProfile) -> None:
        self.dynamo.put_item({
            "PK": create_pk(profile.user_id),
            "SK": PROFILE_SK,
            **profile.model_dump(mode="json")
        })

    def put_symptom(self, entry: SymptomEntry) -> None:
        self.dynamo.put_item({
            "PK": create_pk(entry.user_id),
            "SK": create_symptom_sk(entry.date.isoformat(), entry.entry_id),
            **entry.model_dump(mode="json")
        })

    def list_symptoms(self, user_id: str) -> List[SymptomEntry]:
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_prefix=SYMPTOM_PREFIX,
            newest_first=True
        )
        return [SymptomEntry(**_strip_keys(item)) for item in items]

    def delete_symptom(self, user_id: str, entry_id: str) -> bool:
        return self._delete_entry(user_id, entry_id, SYMPTOM_PREFIX)

    def put_mood(self, entry: MoodEntry) -> None:
        self.dynamo.put_item({
            "PK": create_pk(entry.user_id),
            "SK": create_mood_sk(entry.date.isoformat(), entry.entry_id),
            **entry.model_dump(mode="json")
        })

    def list_moods(self, user_id: str) -> List[MoodEntry]:
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_prefix=MOOD_PREFIX,
            newest_first=True
        )
        return [MoodEntry(**_strip_keys(item)) for item in items]

    def delete_mood(self, user_id: str, entry_id: str) -> bool:
        return self._delete_entry(user_id, entry_id, MOOD_PREFIX)

    def put_period(self, period: PeriodRecord) -> None:
        self.dynamo.put_item({
            "PK": create_pk(period.user_id),
            "SK": create_period_sk(period.start_date.isoformat()),
            **period.model_dump(mode="json", exclude_none=True)
        })

    def list_periods(self, user_id: str) -> List[PeriodRecord]:
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_prefix=PERIOD_PREFIX
        )
        return [PeriodRecord(**_strip_keys(item)) for item in items]

    def _delete_entry(self, user_id: str, entry_id: str, prefix: str) -> bool:
        """Find an entry by id (the sort key also holds its date) and delete it."""
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_prefix=prefix
        )
        for item in items:
            if item.get("entry_id") == entry_id:
                self.dynamo.delete_item({"PK": item["PK"], "SK": item["SK"]})
                logger.info("Entry deleted", extra={
                    "user_id": user_id,
                    "entry_id": entry_id,
                    "entry_type": prefix.rstrip("#").lower()
                })
                return True
        return False
