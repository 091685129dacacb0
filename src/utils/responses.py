"""
API Gateway proxy response helpers.
"""
import json
from typing import Any, Dict

from pydantic import ValidationError

from src.services.exceptions import (
    AuthorizationError,
    EntryNotFoundError,
    RecommendationError,
    StatisticsError
)
from src.utils.logging import logger

JSON_HEADERS = {"Content-Type": "application/json"}

def json_response(status_code: int, body: Any) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response with a JSON body.

    Dates and other non-JSON values are serialized with ``str``.
    """
    return {
        "statusCode": status_code,
        "headers": JSON_HEADERS,
        "body": json.dumps(body, default=str),
        "isBase64Encoded": False
    }

def error_response(error: Exception, **context: Any) -> Dict[str, Any]:
    """
    Map an exception raised while serving a request to an error response.

    Client errors are logged as warnings; anything unexpected is logged with
    its traceback and answered with a 500.

    Args:
        error: Exception raised by the handler
        **context: Extra fields for the log record

    Returns:
        API Gateway proxy response
    """
    if isinstance(error, AuthorizationError):
        status_code = 401
    elif isinstance(error, EntryNotFoundError):
        status_code = 404
    elif isinstance(error, ValidationError):
        logger.warning("Invalid request data", extra={"errors": error.errors(include_url=False), **context})
        return json_response(400, {"error": "Invalid request data", "details": error.errors(include_url=False)})
    elif isinstance(error, (ValueError, RecommendationError, StatisticsError)):
        status_code = 400
    else:
        logger.exception("Unhandled error", exc_info=error, extra={
            "error": str(error),
            "error_type": error.__class__.__name__,
            **context
        })
        return json_response(500, {"error": "Internal server error"})

    logger.warning("Request rejected", extra={
        "status_code": status_code,
        "error": str(error),
        "error_type": error.__class__.__name__,
        **context
    })
    return json_response(status_code, {"error": str(error)})

def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the JSON body of a proxy event.

    Raises:
        ValueError: If the body is not a JSON object
    """
    body = event.get("body") or "{}"
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as e:
            raise ValueError(f"Request body is not valid JSON: {e.msg}")
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body

def query_int(event: Dict[str, Any], name: str, default: int) -> int:
    """
    Read an integer query string parameter.

    Raises:
        ValueError: If the parameter is present but not an integer
    """
    params = event.get("queryStringParameters") or {}
    raw = params.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Query parameter '{name}' must be an integer, got {raw!r}")
