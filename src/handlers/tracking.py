"""
Lambda handler for symptom and mood tracking.

Routes:
    GET    /symptoms               list symptoms, newest first
    POST   /symptoms               log a symptom
    DELETE /symptoms/{entry_id}    delete a symptom
    GET    /moods                  list moods, newest first
    POST   /moods                  log a mood
    DELETE /moods/{entry_id}       delete a mood
    GET    /summary?year=&month=   monthly summary, insights and symptoms per phase
"""
from datetime import date
from typing import Any, Dict, Optional

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.requests import MoodInput, SymptomInput
from src.services.summary import analyze_month, group_symptoms_by_phase, summarize_month
from src.services.tracking import TrackingService
from src.utils.clients import get_repository
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response, parse_body, query_int

tracer = Tracer()

def _resource(event: Dict[str, Any]) -> Optional[str]:
    """Find which collection the request addresses from its path."""
    segments = [s for s in (event.get("path") or "").split("/") if s]
    for resource in ("symptoms", "moods", "summary"):
        if resource in segments:
            return resource
    return None

def handle_symptoms(service: TrackingService, event: Dict[str, Any], user_id: str) -> Dict[str, Any]:
    method = event.get("httpMethod", "GET")
    if method == "GET":
        entries = service.list_symptoms(user_id)
        return json_response(200, {"symptoms": [e.model_dump(mode="json") for e in entries]})
    if method == "POST":
        symptom = SymptomInput(**parse_body(event))
        entry = service.log_symptom(
            user_id,
            symptom.type,
            severity=symptom.severity,
            notes=symptom.notes,
            entry_date=symptom.date
        )
        return json_response(201, entry.model_dump(mode="json"))
    if method == "DELETE":
        entry_id = (event.get("pathParameters") or {}).get("entry_id")
        if not entry_id:
            raise ValueError("entry_id path parameter is required")
        service.delete_symptom(user_id, entry_id)
        return json_response(200, {"deleted": entry_id})
    return json_response(405, {"error": f"Method {method} not allowed"})

def handle_moods(service: TrackingService, event: Dict[str, Any], user_id: str) -> Dict[str, Any]:
    method = event.get("httpMethod", "GET")
    if method == "GET":
        entries = service.list_moods(user_id)
        return json_response(200, {"moods": [e.model_dump(mode="json") for e in entries]})
    if method == "POST":
        mood = MoodInput(**parse_body(event))
        entry = service.log_mood(
            user_id,
            mood.mood,
            energy=mood.energy,
            notes=mood.notes,
            entry_date=mood.date
        )
        return json_response(201, entry.model_dump(mode="json"))
    if method == "DELETE":
        entry_id = (event.get("pathParameters") or {}).get("entry_id")
        if not entry_id:
            raise ValueError("entry_id path parameter is required")
        service.delete_mood(user_id, entry_id)
        return json_response(200, {"deleted": entry_id})
    return json_response(405, {"error": f"Method {method} not allowed"})

def handle_summary(service: TrackingService, event: Dict[str, Any], user_id: str) -> Dict[str, Any]:
    """Summarize and analyze a month, grouping its symptoms by cycle phase."""
    today = date.today()
    year = query_int(event, "year", today.year)
    month = query_int(event, "month", today.month)
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")

    symptoms = service.list_symptoms(user_id)
    moods = service.list_moods(user_id)
    profile = service.repository.get_profile(user_id)

    summary = summarize_month(symptoms, moods, year, month)
    insights = analyze_month(symptoms, moods, profile, year, month)
    return json_response(200, {
        "summary": summary.model_dump(mode="json"),
        "symptoms_by_phase": group_symptoms_by_phase(symptoms, profile, year, month),
        "insights": insights.model_dump(mode="json")
    })

@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True)
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle tracking requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID

    Returns:
        API Gateway Lambda proxy response
    """
    resource = _resource(event)
    try:
        service = TrackingService(get_repository())

        if resource == "symptoms":
            return handle_symptoms(service, event, user_id)
        if resource == "moods":
            return handle_moods(service, event, user_id)
        if resource == "summary":
            return handle_summary(service, event, user_id)

        return json_response(404, {"error": "Unknown resource"})

    except Exception as e:
        return error_response(e, user_id=user_id, resource=resource, http_method=event.get("httpMethod"))
