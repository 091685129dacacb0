"""
Lambda handler for the annotated month calendar.
"""
from datetime import date
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.services.cycle_calendar import build_month_calendar
from src.utils.clients import get_repository
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response, query_int

tracer = Tracer()

@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True)
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle a calendar request for ``?year=&month=`` (defaults to the current month).

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        today = date.today()
        year = query_int(event, "year", today.year)
        month = query_int(event, "month", today.month)

        profile = get_repository().get_profile(user_id)
        days = build_month_calendar(profile, year, month)

        return json_response(200, {
            "year": year,
            "month": month,
            "configured": profile.is_configured,
            "days": [day.model_dump(mode="json") for day in days]
        })

    except Exception as e:
        return error_response(e, user_id=user_id)
