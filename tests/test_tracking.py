"""
Tests for symptom and mood tracking.
"""
from datetime import date

import pytest
from pydantic import ValidationError

from src.services.exceptions import AuthorizationError, EntryNotFoundError
from src.services.tracking import TrackingService, convert_severity


@pytest.fixture
def service(repository, standard_profile):
    repository.save_profile(standard_profile)
    return TrackingService(repository)


def test_convert_severity():
    """Test the 1-5 scale maps onto the stored 1-3 scale."""
    assert [convert_severity(s) for s in range(1, 6)] == [1, 2, 2, 3, 3]


@pytest.mark.parametrize("severity", [0, 6, -1])
def test_convert_severity_out_of_range(severity):
    with pytest.raises(ValueError):
        convert_severity(severity)


def test_log_symptom(service, repository):
    entry = service.log_symptom("user-1", "cramps", severity=4, notes="left side", entry_date=date(2024, 1, 20))

    assert entry.severity == 3
    assert entry.cycle_day == 20
    assert entry.notes == "left side"
    assert entry.entry_id in repository.symptoms


def test_log_symptom_defaults(service):
    entry = service.log_symptom("user-1", "headache")

    assert entry.date == date.today()
    assert entry.severity == 2  # default 3 on the input scale
    assert entry.notes == ""


def test_log_symptom_without_profile(repository):
    """Test entries of users without cycle data start at cycle day 1."""
    service = TrackingService(repository)
    entry = service.log_symptom("user-2", "bloating", entry_date=date(2024, 1, 20))

    assert entry.cycle_day == 1


def test_log_symptom_requires_user(service):
    with pytest.raises(AuthorizationError):
        service.log_symptom("", "cramps")


def test_log_mood(service, repository):
    entry = service.log_mood("user-1", "calm", energy=4, entry_date=date(2024, 1, 3))

    assert entry.energy == 4
    assert entry.cycle_day == 3
    assert entry.entry_id in repository.moods


def test_log_mood_rejects_invalid_energy(service):
    with pytest.raises(ValidationError):
        service.log_mood("user-1", "calm", energy=9)


def test_list_entries_newest_first(service):
    service.log_symptom("user-1", "cramps", entry_date=date(2024, 1, 2))
    service.log_symptom("user-1", "acne", entry_date=date(2024, 1, 20))
    service.log_symptom("user-1", "bloating", entry_date=date(2024, 1, 10))
    service.log_mood("user-1", "tired", entry_date=date(2024, 1, 1))
    service.log_mood("user-1", "happy", entry_date=date(2024, 1, 5))

    assert [s.type for s in service.list_symptoms("user-1")] == ["acne", "bloating", "cramps"]
    assert [m.mood for m in service.list_moods("user-1")] == ["happy", "tired"]


def test_delete_entries(service, repository):
    symptom = service.log_symptom("user-1", "cramps")
    mood = service.log_mood("user-1", "calm")

    service.delete_symptom("user-1", symptom.entry_id)
    service.delete_mood("user-1", mood.entry_id)

    assert repository.symptoms == {}
    assert repository.moods == {}


def test_delete_missing_entry(service):
    with pytest.raises(EntryNotFoundError):
        service.delete_symptom("user-1", "missing")
    with pytest.raises(EntryNotFoundError):
        service.delete_mood("user-1", "missing")


def test_delete_other_users_entry(service):
    symptom = service.log_symptom("user-1", "cramps")

    with pytest.raises(EntryNotFoundError):
        service.delete_symptom("user-2", symptom.entry_id)
