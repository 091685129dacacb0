"""
Service module for generating phase-aware recommendations.

Recommendations are selected, not generated: the user's text is classified
into a concern by keyword matching and the concern (or, for general input,
the current phase) picks a template from a static table.
"""
import re
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from aws_lambda_powertools import Logger

from src.models.phase import CyclePhase
from src.models.recommendation import Recommendation
from src.services.constants import (
    CONCERN_KEYWORDS,
    CONCERN_RECOMMENDATIONS,
    PHASE_RECOMMENDATIONS,
    DEFAULT_PHASE,
    SPECIFIC_SYMPTOM_PATTERN,
    BASE_CONFIDENCE,
    DETAILED_INPUT_WORDS,
    VERY_DETAILED_INPUT_WORDS,
    MAX_CONFIDENCE
)
from src.services.exceptions import RecommendationError

logger = Logger()


class Concern(str, Enum):
    """
    What the user's description is mainly about.
    """
    PAIN = "pain"
    ENERGY = "energy"
    MOOD = "mood"
    HUNGER = "hunger"
    GENERAL = "general"


def classify(text: str) -> Concern:
    """
    Classify free text into a concern.

    Keyword groups are checked in priority order (pain, energy, mood,
    hunger) and the first group with a substring match wins.

    Args:
        text: User's description of how they feel

    Returns:
        Matching Concern, GENERAL if nothing matches

    Example:
        >>> classify("Bad cramps and I'm exhausted")
        <Concern.PAIN: 'pain'>
    """
    lowered = text.lower()
    for concern, keywords in CONCERN_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return Concern(concern)
    return Concern.GENERAL


def calculate_confidence(text: str) -> float:
    """Score how specific the input is, between the base confidence and the cap."""
    word_count = len(text.split(" "))
    confidence = BASE_CONFIDENCE

    if word_count > DETAILED_INPUT_WORDS:
        confidence += 0.2
    if re.search(SPECIFIC_SYMPTOM_PATTERN, text, re.IGNORECASE):
        confidence += 0.2
    if word_count > VERY_DETAILED_INPUT_WORDS:
        confidence += 0.1

    return round(min(confidence, MAX_CONFIDENCE), 2)


def _resolve_phase(phase: Union[CyclePhase, str, None]) -> CyclePhase:
    try:
        return CyclePhase(phase)
    except ValueError:
        return DEFAULT_PHASE


def generate_recommendation(
    text: str,
    phase: Union[CyclePhase, str, None],
    now: Optional[datetime] = None
) -> Recommendation:
    """
    Select a recommendation for the user's description.

    Args:
        text: User's description of how they feel
        phase: Current cycle phase; unknown values use the default phase
        now: Timestamp for the recommendation, defaults to current time

    Returns:
        Recommendation built from the matching template

    Raises:
        RecommendationError: If the text is empty
    """
    if not text or not text.strip():
        raise RecommendationError("User input is required")

    text = text.strip()
    cycle_phase = _resolve_phase(phase)
    concern = classify(text)

    if concern == Concern.GENERAL:
        template = PHASE_RECOMMENDATIONS[cycle_phase]
    else:
        template = CONCERN_RECOMMENDATIONS[concern.value]

    recommendation = Recommendation(
        title=template["title"],
        description=template["description"].format(phase=cycle_phase.value),
        tips=list(template["tips"]),
        category=template["category"],
        icon=template["icon"],
        confidence=calculate_confidence(text),
        phase=cycle_phase.value,
        concern=concern.value,
        user_input=text,
        timestamp=now or datetime.now()
    )

    logger.info("Recommendation selected", extra={
        "phase": cycle_phase.value,
        "concern": concern.value,
        "confidence": recommendation.confidence
    })
    return recommendation
