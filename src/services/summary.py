"""
Service for summarizing logged symptoms and moods.

Every function here works on one calendar month: entries outside the
requested month are filtered out before anything is counted. Entries are
assigned to a phase through the cycle day stored on them; without a usable
profile they all fall into the default phase.
"""
import math
from collections import Counter
from typing import Dict, List, Union

from src.models.event import MoodEntry, SymptomEntry
from src.models.phase import CyclePhase
from src.models.profile import UserCycleProfile
from src.models.summary import (
    MonthlyInsights,
    MonthlySummary,
    MoodPatterns,
    PhaseInsight,
    SymptomPatterns
)
from src.services.constants import (
    DEFAULT_PHASE,
    TOP_ENTRIES_LIMIT,
    COMMON_SYMPTOMS_LIMIT,
    HIGH_INTENSITY_THRESHOLD,
    MOOD_STABILITY_LEVELS,
    UNSTABLE_MOOD_LABEL,
    POSITIVE_MOOD_KEYWORDS,
    MAX_WELLNESS_SCORE,
    SYMPTOM_WELLNESS_PENALTY,
    POSITIVE_MOOD_WELLNESS_BONUS
)
from src.services.cycle import phase_for_day

Entry = Union[SymptomEntry, MoodEntry]


def _in_month(entry_date, year: int, month: int) -> bool:
    return entry_date.year == year and entry_date.month == month


def _month_entries(entries: List[Entry], year: int, month: int) -> List[Entry]:
    return [e for e in entries if _in_month(e.date, year, month)]


def _entry_phase(entry: Entry, profile: UserCycleProfile) -> CyclePhase:
    if not profile.is_configured:
        return DEFAULT_PHASE
    return phase_for_day(entry.cycle_day, profile.cycle_length, profile.period_length)


def _average_intensity(symptoms: List[SymptomEntry]) -> float:
    if not symptoms:
        return 0.0
    return round(sum(s.severity for s in symptoms) / len(symptoms), 1)


def _top_names(names: List[str], limit: int) -> List[str]:
    return [name for name, _ in Counter(names).most_common(limit)]


def summarize_month(
    symptoms: List[SymptomEntry],
    moods: List[MoodEntry],
    year: int,
    month: int
) -> MonthlySummary:
    """
    Summarize a month of tracking data.

    Args:
        symptoms: Symptom entries (any date range)
        moods: Mood entries (any date range)
        year: Calendar year
        month: Calendar month (1-12)

    Returns:
        MonthlySummary with counts, the number of days with any entry and
        the most frequent symptoms and moods (most common first)
    """
    month_symptoms = _month_entries(symptoms, year, month)
    month_moods = _month_entries(moods, year, month)
    active_days = {entry.date for entry in [*month_symptoms, *month_moods]}

    return MonthlySummary(
        year=year,
        month=month,
        symptom_count=len(month_symptoms),
        mood_count=len(month_moods),
        active_days=len(active_days),
        top_symptoms=Counter(s.type for s in month_symptoms).most_common(TOP_ENTRIES_LIMIT),
        top_moods=Counter(m.mood for m in month_moods).most_common(TOP_ENTRIES_LIMIT)
    )


def group_symptoms_by_phase(
    symptoms: List[SymptomEntry],
    profile: UserCycleProfile,
    year: int,
    month: int
) -> Dict[str, List[str]]:
    """
    Group the month's symptom types by the phase they were logged in.

    Args:
        symptoms: Symptom entries (any date range) with their stored cycle day
        profile: Cycle profile whose lengths classify the days
        year: Calendar year
        month: Calendar month (1-12)

    Returns:
        Mapping of every phase name to the symptom types logged in it
    """
    grouped: Dict[str, List[str]] = {phase.value: [] for phase in CyclePhase}
    for symptom in _month_entries(symptoms, year, month):
        grouped[_entry_phase(symptom, profile).value].append(symptom.type)
    return grouped


def mood_stability(moods: List[MoodEntry]) -> str:
    """Label how much the moods vary by the number of distinct moods."""
    distinct = len({m.mood for m in moods})
    for limit, label in MOOD_STABILITY_LEVELS:
        if distinct <= limit:
            return label
    return UNSTABLE_MOOD_LABEL


def wellness_score(symptoms: List[SymptomEntry], moods: List[MoodEntry]) -> int:
    """
    Score overall wellness from 0 to 10.

    Each symptom costs 0.1 of a 10 point symptom score; each mood containing
    a positive keyword adds 0.5 to a mood score capped at 10. The result is
    the rounded mean of both.

    Example:
        >>> wellness_score([], [])
        5
    """
    symptom_score = max(0.0, MAX_WELLNESS_SCORE - len(symptoms) * SYMPTOM_WELLNESS_PENALTY)
    positive_moods = sum(
        1 for m in moods
        if any(keyword in m.mood.lower() for keyword in POSITIVE_MOOD_KEYWORDS)
    )
    mood_score = min(MAX_WELLNESS_SCORE, positive_moods * POSITIVE_MOOD_WELLNESS_BONUS)
    return math.floor((symptom_score + mood_score) / 2 + 0.5)


def analyze_symptom_patterns(symptoms: List[SymptomEntry]) -> SymptomPatterns:
    """
    Find the most common symptoms and those logged with high severity.

    A symptom type is high intensity when its average severity reaches
    HIGH_INTENSITY_THRESHOLD.
    """
    severities: Dict[str, List[int]] = {}
    for symptom in symptoms:
        severities.setdefault(symptom.type, []).append(symptom.severity)

    high_intensity = [
        symptom_type for symptom_type, values in severities.items()
        if sum(values) / len(values) >= HIGH_INTENSITY_THRESHOLD
    ]

    return SymptomPatterns(
        most_common=Counter(s.type for s in symptoms).most_common(COMMON_SYMPTOMS_LIMIT),
        high_intensity=high_intensity,
        total_unique_symptoms=len(severities),
        average_intensity=_average_intensity(symptoms)
    )


def analyze_month(
    symptoms: List[SymptomEntry],
    moods: List[MoodEntry],
    profile: UserCycleProfile,
    year: int,
    month: int
) -> MonthlyInsights:
    """
    Analyze a month of tracking data by phase, symptom and mood.

    Args:
        symptoms: Symptom entries (any date range)
        moods: Mood entries (any date range)
        profile: Cycle profile used to assign entries to phases
        year: Calendar year
        month: Calendar month (1-12)

    Returns:
        MonthlyInsights with per-phase activity, symptom and mood patterns
        and the wellness score
    """
    month_symptoms = _month_entries(symptoms, year, month)
    month_moods = _month_entries(moods, year, month)

    phase_analysis = {}
    for phase in CyclePhase:
        phase_symptoms = [s for s in month_symptoms if _entry_phase(s, profile) == phase]
        phase_moods = [m for m in month_moods if _entry_phase(m, profile) == phase]
        phase_analysis[phase.value] = PhaseInsight(
            symptom_count=len(phase_symptoms),
            common_symptoms=_top_names([s.type for s in phase_symptoms], TOP_ENTRIES_LIMIT),
            average_symptom_intensity=_average_intensity(phase_symptoms),
            common_moods=_top_names([m.mood for m in phase_moods], TOP_ENTRIES_LIMIT)
        )

    return MonthlyInsights(
        year=year,
        month=month,
        phase_analysis=phase_analysis,
        symptom_patterns=analyze_symptom_patterns(month_symptoms),
        mood_patterns=MoodPatterns(
            dominant_moods=Counter(m.mood for m in month_moods).most_common(TOP_ENTRIES_LIMIT),
            mood_stability=mood_stability(month_moods),
            total_mood_entries=len(month_moods)
        ),
        wellness_score=wellness_score(month_symptoms, month_moods)
    )
