"""
Middleware functions for request processing.
"""
from functools import wraps
from typing import Any, Callable, Dict, Optional

from src.utils.logging import logger
from src.utils.responses import json_response

def extract_user_id(event: Dict[str, Any]) -> Optional[str]:
    """
    Extract the authenticated user ID from an API Gateway proxy event.

    Authentication happens upstream in the API Gateway authorizer; this only
    reads the identity it attached. Supports Cognito user pool authorizers
    (REST API), JWT authorizers (HTTP API) and Lambda authorizers.

    Args:
        event: API Gateway Lambda proxy event

    Returns:
        User ID, or None if the request carries no identity
    """
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}

    claims = authorizer.get("claims") or (authorizer.get("jwt") or {}).get("claims") or {}
    user_id = claims.get("sub") or authorizer.get("principalId")

    return str(user_id) if user_id else None

def require_user(f: Callable) -> Callable:
    """
    Decorator to require an authenticated user for handlers.

    The wrapped handler is called as ``f(event, context, user_id)``.

    Args:
        f: Handler function to wrap

    Returns:
        Wrapped handler function
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
        user_id = extract_user_id(event)
        if not user_id:
            logger.warning("Request without user identity", extra={
                "path": event.get("path"),
                "http_method": event.get("httpMethod")
            })
            return json_response(401, {"error": "Unauthorized"})

        logger.append_keys(user_id=user_id)
        return f(event, context, user_id)

    return wrapped
