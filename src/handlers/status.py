"""
Lambda handler for the current cycle status.
"""
from datetime import date
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.services.cycle_calendar import build_status
from src.utils.clients import get_repository
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response

tracer = Tracer()

@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True)
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle a status request.

    Accepts an optional ``date`` query parameter (YYYY-MM-DD) to compute the
    status for another day than today.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        params = event.get("queryStringParameters") or {}
        reference_date = date.fromisoformat(params["date"]) if params.get("date") else None

        profile = get_repository().get_profile(user_id)
        status = build_status(profile, reference_date)

        logger.info("Status calculated", extra={
            "current_phase": status["current_phase"],
            "current_day": status["current_day"],
            "configured": status["configured"]
        })
        return json_response(200, status)

    except Exception as e:
        return error_response(e, user_id=user_id)
