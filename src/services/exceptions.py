"""
Service-level exceptions.

This module contains exceptions that can be raised by various services
in the application.
"""

class AuthorizationError(Exception):
    """Raised when a request carries no usable user identity."""
    pass

class EntryNotFoundError(Exception):
    """Raised when a tracking entry does not exist for the user."""
    pass

class RecommendationError(Exception):
    """Raised when a recommendation cannot be generated from the input."""
    pass

class StatisticsError(Exception):
    """Base exception for statistics calculation errors."""
    pass

class InvalidPeriodDurationError(StatisticsError):
    """Raised when a recorded period ends before it starts."""
    pass
