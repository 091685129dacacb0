"""
Lambda handlers package for AWS Lambda functions.
"""
from .status import handler as status_handler
from .calendar import handler as calendar_handler
from .profile import handler as profile_handler
from .tracking import handler as tracking_handler
from .recommendations import handler as recommendations_handler

__all__ = [
    "status_handler",
    "calendar_handler",
    "profile_handler",
    "tracking_handler",
    "recommendations_handler"
]
