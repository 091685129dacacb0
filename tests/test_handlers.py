"""
Tests for the Lambda handlers.
"""
import json
from datetime import date
from unittest.mock import patch

from src.handlers.calendar import handler as calendar_handler
from src.handlers.profile import handler as profile_handler
from src.handlers.recommendations import handler as recommendations_handler
from src.handlers.status import handler as status_handler
from src.handlers.tracking import handler as tracking_handler


def body_of(response):
    return json.loads(response["body"])


def test_status_for_date(handler_repository, api_event, lambda_context, standard_profile):
    handler_repository.save_profile(standard_profile)

    response = status_handler(api_event(path="/status", query={"date": "2024-01-20"}), lambda_context)
    body = body_of(response)

    assert response["statusCode"] == 200
    assert body["configured"] is True
    assert body["current_day"] == 20
    assert body["current_phase"] == "luteal"
    assert body["next_period_date"] == "2024-01-29"
    assert body["days_until_next_period"] == 9


def test_status_unconfigured(handler_repository, api_event, lambda_context):
    body = body_of(status_handler(api_event(path="/status"), lambda_context))

    assert body["configured"] is False
    assert body["current_phase"] == "follicular"
    assert body["next_period_date"] is None


def test_status_invalid_date(handler_repository, api_event, lambda_context):
    response = status_handler(api_event(path="/status", query={"date": "yesterday"}), lambda_context)
    assert response["statusCode"] == 400


def test_status_requires_user(handler_repository, api_event, lambda_context):
    response = status_handler(api_event(path="/status", user_id=None), lambda_context)
    assert response["statusCode"] == 401


def test_calendar(handler_repository, api_event, lambda_context, standard_profile):
    handler_repository.save_profile(standard_profile)

    response = calendar_handler(api_event(path="/calendar", query={"year": "2024", "month": "1"}), lambda_context)
    body = body_of(response)

    assert response["statusCode"] == 200
    assert (body["year"], body["month"], body["configured"]) == (2024, 1, True)
    assert len(body["days"]) == 31
    assert [d["date"] for d in body["days"] if d["is_ovulation_day"]] == ["2024-01-15"]


def test_calendar_invalid_month(handler_repository, api_event, lambda_context):
    response = calendar_handler(api_event(path="/calendar", query={"year": "2024", "month": "13"}), lambda_context)

    assert response["statusCode"] == 400
    assert body_of(response)["error"] == "Invalid month: 13"


def test_update_profile(handler_repository, api_event, lambda_context):
    event = api_event("PUT", "/profile", body={"last_period_start": "2024-01-01", "cycle_length": 30})

    response = profile_handler(event, lambda_context)

    assert response["statusCode"] == 200
    stored = handler_repository.get_profile("user-1")
    assert stored.last_period_start == date(2024, 1, 1)
    assert stored.cycle_length == 30
    assert stored.period_length == 5


def test_update_profile_rejects_invalid_length(handler_repository, api_event, lambda_context):
    response = profile_handler(api_event("PUT", "/profile", body={"cycle_length": 0}), lambda_context)

    assert response["statusCode"] == 400
    assert body_of(response)["error"] == "Invalid request data"


def test_get_profile(handler_repository, api_event, lambda_context, standard_profile):
    handler_repository.save_profile(standard_profile)

    body = body_of(profile_handler(api_event("GET", "/profile"), lambda_context))

    assert body["last_period_start"] == "2024-01-01"
    assert body["cycle_length"] == 28


def test_record_periods_updates_averages(handler_repository, api_event, lambda_context):
    profile_handler(
        api_event("POST", "/profile/periods", body={"start_date": "2024-01-01", "end_date": "2024-01-04"}),
        lambda_context
    )
    response = profile_handler(
        api_event("POST", "/profile/periods", body={"start_date": "2024-01-31", "end_date": "2024-02-03"}),
        lambda_context
    )
    body = body_of(response)

    assert response["statusCode"] == 201
    assert body["period"]["start_date"] == "2024-01-31"
    assert body["profile"]["last_period_start"] == "2024-01-31"
    assert body["profile"]["cycle_length"] == 30
    assert body["profile"]["period_length"] == 4


def test_record_period_end_before_start(handler_repository, api_event, lambda_context):
    event = api_event("POST", "/profile/periods", body={"start_date": "2024-01-05", "end_date": "2024-01-01"})
    assert profile_handler(event, lambda_context)["statusCode"] == 400


def test_profile_method_not_allowed(handler_repository, api_event, lambda_context):
    assert profile_handler(api_event("DELETE", "/profile"), lambda_context)["statusCode"] == 405
    assert profile_handler(api_event("GET", "/profile/periods"), lambda_context)["statusCode"] == 405


def test_log_and_list_symptoms(handler_repository, api_event, lambda_context, standard_profile):
    handler_repository.save_profile(standard_profile)

    response = tracking_handler(
        api_event("POST", "/symptoms", body={"type": "cramps", "severity": 5, "date": "2024-01-02"}),
        lambda_context
    )
    created = body_of(response)

    assert response["statusCode"] == 201
    assert created["severity"] == 3
    assert created["cycle_day"] == 2

    listed = body_of(tracking_handler(api_event("GET", "/symptoms"), lambda_context))
    assert [s["entry_id"] for s in listed["symptoms"]] == [created["entry_id"]]


def test_delete_symptom(handler_repository, api_event, lambda_context):
    created = body_of(tracking_handler(api_event("POST", "/symptoms", body={"type": "acne"}), lambda_context))
    entry_id = created["entry_id"]

    response = tracking_handler(
        api_event("DELETE", f"/symptoms/{entry_id}", path_parameters={"entry_id": entry_id}),
        lambda_context
    )

    assert response["statusCode"] == 200
    assert body_of(response) == {"deleted": entry_id}
    assert handler_repository.symptoms == {}


def test_delete_missing_mood(handler_repository, api_event, lambda_context):
    response = tracking_handler(
        api_event("DELETE", "/moods/missing", path_parameters={"entry_id": "missing"}),
        lambda_context
    )
    assert response["statusCode"] == 404


def test_log_mood_invalid_energy(handler_repository, api_event, lambda_context):
    response = tracking_handler(api_event("POST", "/moods", body={"mood": "calm", "energy": 7}), lambda_context)
    assert response["statusCode"] == 400


def test_tracking_unknown_resource(handler_repository, api_event, lambda_context):
    assert tracking_handler(api_event("GET", "/nothing"), lambda_context)["statusCode"] == 404


def test_summary(handler_repository, api_event, lambda_context, standard_profile):
    handler_repository.save_profile(standard_profile)
    for day, symptom_type in [("2024-01-02", "cramps"), ("2024-01-03", "cramps"), ("2024-01-25", "bloating")]:
        tracking_handler(api_event("POST", "/symptoms", body={"type": symptom_type, "date": day}), lambda_context)
    tracking_handler(api_event("POST", "/moods", body={"mood": "tired", "date": "2024-01-03"}), lambda_context)

    response = tracking_handler(api_event("GET", "/summary", query={"year": "2024", "month": "1"}), lambda_context)
    body = body_of(response)

    assert response["statusCode"] == 200
    assert body["summary"]["symptom_count"] == 3
    assert body["summary"]["mood_count"] == 1
    assert body["summary"]["active_days"] == 3
    assert body["summary"]["top_symptoms"][0] == ["cramps", 2]
    assert body["symptoms_by_phase"]["menstrual"] == ["cramps", "cramps"]
    assert body["symptoms_by_phase"]["luteal"] == ["bloating"]
    assert body["insights"]["phase_analysis"]["menstrual"]["symptom_count"] == 2
    assert body["insights"]["phase_analysis"]["menstrual"]["common_moods"] == ["tired"]
    assert body["insights"]["symptom_patterns"]["total_unique_symptoms"] == 2
    assert body["insights"]["mood_patterns"]["mood_stability"] == "stable"
    assert body["insights"]["wellness_score"] == 5


def test_summary_without_profile_uses_month_and_default_phase(handler_repository, api_event, lambda_context):
    """Test phase grouping is limited to the requested month and falls back to follicular."""
    tracking_handler(api_event("POST", "/symptoms", body={"type": "cramps", "date": "2024-01-03"}), lambda_context)
    tracking_handler(api_event("POST", "/symptoms", body={"type": "headache", "date": "2023-06-03"}), lambda_context)

    body = body_of(tracking_handler(
        api_event("GET", "/summary", query={"year": "2024", "month": "1"}),
        lambda_context
    ))

    assert body["summary"]["symptom_count"] == 1
    assert body["symptoms_by_phase"] == {
        "menstrual": [],
        "follicular": ["cramps"],
        "ovulatory": [],
        "luteal": []
    }
    assert body["insights"]["phase_analysis"]["follicular"]["common_symptoms"] == ["cramps"]
    assert body["insights"]["phase_analysis"]["menstrual"]["symptom_count"] == 0


def test_recommendation_with_phase(handler_repository, api_event, lambda_context):
    event = api_event("POST", "/recommendations", body={"user_input": "Bad cramps today", "current_phase": "menstrual"})

    response = recommendations_handler(event, lambda_context)
    body = body_of(response)

    assert response["statusCode"] == 200
    assert body["success"] is True
    assert body["recommendation"]["concern"] == "pain"
    assert body["recommendation"]["phase"] == "menstrual"
    assert body["recommendation"]["confidence"] == 0.7


def test_recommendation_uses_profile_phase(handler_repository, api_event, lambda_context, unconfigured_profile):
    handler_repository.save_profile(unconfigured_profile)

    body = body_of(recommendations_handler(
        api_event("POST", "/recommendations", body={"user_input": "Just checking in"}),
        lambda_context
    ))

    assert body["recommendation"]["phase"] == "follicular"
    assert body["recommendation"]["concern"] == "general"


def test_recommendation_requires_input(handler_repository, api_event, lambda_context):
    response = recommendations_handler(api_event("POST", "/recommendations", body={"user_input": ""}), lambda_context)
    assert response["statusCode"] == 400


def test_repository_failure_returns_500(handler_repository, api_event, lambda_context):
    with patch.object(handler_repository, "get_profile", side_effect=RuntimeError("table unavailable")):
        response = status_handler(api_event(path="/status"), lambda_context)

    assert response["statusCode"] == 500
    assert body_of(response) == {"error": "Internal server error"}
