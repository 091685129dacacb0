"""
Lambda handler for cycle settings and recorded periods.

Routes:
    GET  /profile           read the cycle profile
    PUT  /profile           update cycle settings
    POST /profile/periods   record a period and re-estimate average lengths
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.event import PeriodRecord
from src.models.requests import PeriodInput, ProfileUpdate
from src.services.repository import TrackerRepository
from src.services.statistics import apply_average_lengths
from src.utils.clients import get_repository
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response, parse_body

tracer = Tracer()

def update_profile(repository: TrackerRepository, user_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    """Apply a settings update and return the stored profile."""
    update = ProfileUpdate(**body)
    profile = repository.get_profile(user_id)
    profile = profile.model_copy(update=update.model_dump(exclude_none=True))
    repository.save_profile(profile)

    logger.info("Profile updated", extra={"fields": sorted(update.model_dump(exclude_none=True))})
    return profile.model_dump(mode="json")

def record_period(repository: TrackerRepository, user_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Store a recorded period and fold all recorded periods into the profile.

    Returns:
        Dictionary containing the stored period and the updated profile
    """
    period_input = PeriodInput(**body)
    period = PeriodRecord(user_id=user_id, **period_input.model_dump())
    repository.put_period(period)

    profile = apply_average_lengths(repository.get_profile(user_id), repository.list_periods(user_id))
    repository.save_profile(profile)

    return {
        "period": period.model_dump(mode="json"),
        "profile": profile.model_dump(mode="json")
    }

@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True)
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle profile requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID

    Returns:
        API Gateway Lambda proxy response
    """
    method = event.get("httpMethod", "GET")
    path = event.get("path") or ""
    try:
        repository = get_repository()

        if path.rstrip("/").endswith("/periods"):
            if method != "POST":
                return json_response(405, {"error": f"Method {method} not allowed"})
            return json_response(201, record_period(repository, user_id, parse_body(event)))

        if method == "GET":
            return json_response(200, repository.get_profile(user_id).model_dump(mode="json"))
        if method == "PUT":
            return json_response(200, update_profile(repository, user_id, parse_body(event)))
        return json_response(405, {"error": f"Method {method} not allowed"})

    except Exception as e:
        return error_response(e, user_id=user_id, path=path, http_method=method)
