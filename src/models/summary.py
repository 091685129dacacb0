"""
Monthly summary model for logged tracking data.
"""
from typing import Dict, List, Tuple
from pydantic import BaseModel


class MonthlySummary(BaseModel):
    """
    Aggregated symptom and mood activity for a calendar month.
    """
    year: int
    month: int
    symptom_count: int = 0
    mood_count: int = 0
    active_days: int = 0
    top_symptoms: List[Tuple[str, int]] = []
    top_moods: List[Tuple[str, int]] = []


class PhaseInsight(BaseModel):
    """
    Symptom and mood activity that fell into one cycle phase.
    """
    symptom_count: int = 0
    common_symptoms: List[str] = []
    average_symptom_intensity: float = 0.0
    common_moods: List[str] = []


class SymptomPatterns(BaseModel):
    most_common: List[Tuple[str, int]] = []
    high_intensity: List[str] = []
    total_unique_symptoms: int = 0
    average_intensity: float = 0.0


class MoodPatterns(BaseModel):
    dominant_moods: List[Tuple[str, int]] = []
    mood_stability: str = "stable"
    total_mood_entries: int = 0


class MonthlyInsights(BaseModel):
    """
    Pattern analysis for a calendar month.

    ``wellness_score`` runs from 0 to 10; fewer symptoms and more positive
    moods score higher.
    """
    year: int
    month: int
    phase_analysis: Dict[str, PhaseInsight]
    symptom_patterns: SymptomPatterns
    mood_patterns: MoodPatterns
    wellness_score: int
