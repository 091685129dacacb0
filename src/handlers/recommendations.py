"""
Lambda handler for phase-aware recommendations.
"""
from datetime import date
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.requests import RecommendationRequest
from src.services.cycle import phase_for_date
from src.services.recommendation import generate_recommendation
from src.utils.clients import get_repository
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response, parse_body

tracer = Tracer()

@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True)
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle a recommendation request.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = RecommendationRequest(**parse_body(event))

        phase = request.current_phase
        if not phase:
            profile = get_repository().get_profile(user_id)
            phase = phase_for_date(date.today(), profile)

        recommendation = generate_recommendation(request.user_input, phase)
        return json_response(200, {
            "success": True,
            "recommendation": recommendation.model_dump(mode="json")
        })

    except Exception as e:
        return error_response(e, user_id=user_id)
