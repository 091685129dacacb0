"""Shared logger for the Lambda handlers."""
import os
import sys
import json
import traceback
from aws_lambda_powertools import Logger

TRACEBACK_SEPARATOR = " | "

def single_line_traceback(exc_info=True):
    """
    Render a traceback as one line so CloudWatch keeps it in a single record.

    Args:
        exc_info: True for the exception being handled, an exception instance,
            or a ``sys.exc_info()`` tuple

    Returns:
        The joined traceback, or None when there is no exception
    """
    if exc_info is True:
        exc_info = sys.exc_info()
    elif isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)

    if not isinstance(exc_info, tuple) or exc_info[0] is None:
        return None

    lines = traceback.format_exception(*exc_info)
    return TRACEBACK_SEPARATOR.join(
        part.strip() for line in lines for part in line.splitlines() if part.strip()
    )

class SingleLineLogger(Logger):
    """Logger whose ``exception`` records carry the traceback as a one-line field."""

    def exception(self, message, *args, **kwargs):
        extra = dict(kwargs.pop('extra', None) or {})
        extra['exception'] = single_line_traceback(kwargs.pop('exc_info', True))
        super().error(message, *args, extra=extra, **kwargs)

logger = SingleLineLogger(
    service=os.environ.get('POWERTOOLS_SERVICE_NAME', 'cycle-tracker'),
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    log_uncaught_exceptions=True,
    json_serializer=json.dumps,
    use_rfc3339=True,
    # Persistent keys, kept when per-invocation state is cleared
    stage=os.environ.get('STAGE', 'dev'),
    region=os.environ.get('AWS_REGION'),
    function=os.environ.get('AWS_LAMBDA_FUNCTION_NAME')
)
