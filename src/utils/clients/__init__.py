"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the application.
"""
from typing import Optional

from src.services.repository import DynamoTrackerRepository, TrackerRepository
from src.utils.dynamo import get_dynamo

# Initialize shared clients (lazy loading)
_repository = None

def get_repository() -> TrackerRepository:
    """Get or create the tracker repository backed by DynamoDB."""
    global _repository
    if _repository is None:
        _repository = DynamoTrackerRepository(get_dynamo())
    return _repository

def set_repository(repository: Optional[TrackerRepository]) -> None:
    """Replace the shared repository; None makes the next call create a fresh one."""
    global _repository
    _repository = repository
