"""
Recommendation model for phase-aware wellness suggestions.
"""
from typing import List
from datetime import datetime
from pydantic import BaseModel, Field


class Recommendation(BaseModel):
    """
    A templated recommendation selected from the user's own description.
    """
    title: str
    description: str
    tips: List[str]
    category: str = Field(..., pattern="^(nutrition|exercise|self-care|productivity)$")
    icon: str
    confidence: float = Field(..., ge=0, le=1)
    phase: str
    concern: str
    user_input: str
    timestamp: datetime
    ai_generated: bool = True
