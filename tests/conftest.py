"""
Pytest configuration and shared fixtures.
"""
import json
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

import pytest

from src.models.event import MoodEntry, PeriodRecord, SymptomEntry
from src.models.profile import UserCycleProfile
from src.services.repository import TrackerRepository
from src.utils import clients


class InMemoryRepository(TrackerRepository):
    """Repository double keeping everything in dictionaries."""

    def __init__(self):
        self.profiles: Dict[str, UserCycleProfile] = {}
        self.symptoms: Dict[str, SymptomEntry] = {}
        self.moods: Dict[str, MoodEntry] = {}
        self.periods: Dict[tuple, PeriodRecord] = {}

    def get_profile(self, user_id: str) -> UserCycleProfile:
        return self.profiles.get(user_id, UserCycleProfile(user_id=user_id)).model_copy()

    def save_profile(self, profile: UserCycleProfile) -> None:
        self.profiles[profile.user_id] = profile.model_copy()

    def put_symptom(self, entry: SymptomEntry) -> None:
        self.symptoms[entry.entry_id] = entry

    def list_symptoms(self, user_id: str) -> List[SymptomEntry]:
        entries = [e for e in self.symptoms.values() if e.user_id == user_id]
        return sorted(entries, key=lambda e: e.date, reverse=True)

    def delete_symptom(self, user_id: str, entry_id: str) -> bool:
        entry = self.symptoms.get(entry_id)
        if entry is None or entry.user_id != user_id:
            return False
        del self.symptoms[entry_id]
        return True

    def put_mood(self, entry: MoodEntry) -> None:
        self.moods[entry.entry_id] = entry

    def list_moods(self, user_id: str) -> List[MoodEntry]:
        entries = [e for e in self.moods.values() if e.user_id == user_id]
        return sorted(entries, key=lambda e: e.date, reverse=True)

    def delete_mood(self, user_id: str, entry_id: str) -> bool:
        entry = self.moods.get(entry_id)
        if entry is None or entry.user_id != user_id:
            return False
        del self.moods[entry_id]
        return True

    def put_period(self, period: PeriodRecord) -> None:
        self.periods[(period.user_id, period.start_date)] = period

    def list_periods(self, user_id: str) -> List[PeriodRecord]:
        periods = [p for (owner, _), p in self.periods.items() if owner == user_id]
        return sorted(periods, key=lambda p: p.start_date)


@dataclass
class LambdaContextStub:
    """Minimal Lambda context for the powertools decorators."""
    function_name: str = "cycle-tracker-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:cycle-tracker-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    function_version: str = "$LATEST"


@pytest.fixture
def standard_profile() -> UserCycleProfile:
    """Profile with a 28 day cycle and 5 day period starting 2024-01-01."""
    return UserCycleProfile(
        user_id="user-1",
        last_period_start=date(2024, 1, 1),
        cycle_length=28,
        period_length=5
    )


@pytest.fixture
def unconfigured_profile() -> UserCycleProfile:
    """Profile without a last period start."""
    return UserCycleProfile(user_id="user-1")


@pytest.fixture
def repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def handler_repository(repository):
    """Install the in-memory repository as the handlers' shared repository."""
    clients.set_repository(repository)
    yield repository
    clients.set_repository(None)


@pytest.fixture
def lambda_context() -> LambdaContextStub:
    return LambdaContextStub()


@pytest.fixture
def api_event():
    """Factory for API Gateway proxy events from an authenticated user."""
    def make_event(
        method: str = "GET",
        path: str = "/",
        body: Optional[Any] = None,
        query: Optional[Dict[str, str]] = None,
        path_parameters: Optional[Dict[str, str]] = None,
        user_id: Optional[str] = "user-1"
    ) -> Dict[str, Any]:
        authorizer = {"claims": {"sub": user_id}} if user_id else {}
        return {
            "httpMethod": method,
            "path": path,
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "body": json.dumps(body) if body is not None else None,
            "requestContext": {
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "authorizer": authorizer
            }
        }
    return make_event
