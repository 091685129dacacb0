"""
Constants and shared data for cycle-related services.
"""
from typing import Dict, List
from src.models.phase import CyclePhase

DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 5
DEFAULT_PHASE = CyclePhase.FOLLICULAR

# Phase boundaries as fractions of the cycle length
FOLLICULAR_END_RATIO = (1, 2)
OVULATORY_END_RATIO = (3, 5)

LUTEAL_PHASE_DAYS = 14
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1

# Cycle gaps outside this range are treated as bad data when averaging
MIN_CYCLE_GAP_DAYS = 0
MAX_CYCLE_GAP_DAYS = 60

PHASE_DESCRIPTIONS = {
    CyclePhase.MENSTRUAL: "Your period is here. Energy tends to be lowest, so rest is productive.",
    CyclePhase.FOLLICULAR: "Estrogen is rising. Energy, mood and focus usually climb.",
    CyclePhase.OVULATORY: "Peak energy and confidence. This is your most fertile time.",
    CyclePhase.LUTEAL: "Progesterone rises. Slow down and prepare for your next period."
}

PHASE_TRANSITIONS = {
    CyclePhase.MENSTRUAL: CyclePhase.FOLLICULAR,
    CyclePhase.FOLLICULAR: CyclePhase.OVULATORY,
    CyclePhase.OVULATORY: CyclePhase.LUTEAL,
    CyclePhase.LUTEAL: CyclePhase.MENSTRUAL
}

# Symptom severity is collected on a 1-5 scale and stored on a 1-3 scale
SEVERITY_INPUT_SCALE = 5
SEVERITY_STORED_SCALE = 3
DEFAULT_SEVERITY = 3
DEFAULT_ENERGY = 3

# Checked in order, first match wins
CONCERN_KEYWORDS: Dict[str, List[str]] = {
    "pain": ["pain", "cramp", "hurt", "ache", "sore", "uncomfortable", "bloated"],
    "energy": ["tired", "exhausted", "energy", "fatigue", "sleepy", "drained"],
    "mood": ["sad", "happy", "anxious", "stressed", "moody", "emotional", "irritated"],
    "hunger": ["hungry", "craving", "appetite", "food", "eat", "snack"]
}

SPECIFIC_SYMPTOM_PATTERN = r"(pain|cramp|tired|mood|craving|bloated|energy)"

BASE_CONFIDENCE = 0.5
DETAILED_INPUT_WORDS = 10
VERY_DETAILED_INPUT_WORDS = 20
MAX_CONFIDENCE = 0.95

CONCERN_RECOMMENDATIONS = {
    "pain": {
        "title": "Targeted Pain Relief",
        "description": (
            "Based on your description of discomfort during your {phase} phase, "
            "here are evidence-based suggestions to help you feel better"
        ),
        "tips": [
            "Apply heat therapy for 15-20 minutes to reduce muscle tension",
            "Try gentle stretches focusing on your lower back and hips",
            "Consider anti-inflammatory foods like turmeric and ginger",
            "Practice deep breathing to help your body relax and manage pain"
        ],
        "icon": "🤗",
        "category": "self-care"
    },
    "energy": {
        "title": "Natural Energy Boost",
        "description": "Gentle, sustainable ways to support your energy levels during your {phase} phase",
        "tips": [
            "Focus on iron-rich foods like spinach, beans, and lean meats",
            "Take short 5-10 minute walks to improve circulation",
            "Ensure consistent sleep schedule of 7-9 hours",
            "Try energizing but gentle yoga poses like cat-cow stretches"
        ],
        "icon": "⚡",
        "category": "nutrition"
    },
    "mood": {
        "title": "Emotional Wellness Support",
        "description": "Mood-supporting strategies tailored for your {phase} phase and how you're feeling right now",
        "tips": [
            "Practice 5-10 minutes of mindfulness or meditation",
            "Include mood-supporting foods like dark chocolate and nuts",
            "Try journaling to process and understand your emotions",
            "Connect with supportive friends or family members"
        ],
        "icon": "🌈",
        "category": "self-care"
    },
    "hunger": {
        "title": "Smart Nourishment Strategy",
        "description": "Balanced nutrition approach for managing hunger and cravings during your {phase} phase",
        "tips": [
            "Combine cravings with nutritious additions (e.g., dark chocolate with nuts)",
            "Focus on protein and healthy fats to maintain satiety",
            "Stay hydrated as dehydration can mimic hunger",
            "Plan regular, balanced meals to prevent extreme hunger"
        ],
        "icon": "🍎",
        "category": "nutrition"
    }
}

PHASE_RECOMMENDATIONS = {
    CyclePhase.MENSTRUAL: {
        "title": "Gentle Menstrual Support",
        "description": "Nurturing care recommendations for your menstrual phase",
        "tips": [
            "Honor your need for rest and slower pace",
            "Use heat therapy for comfort",
            "Eat warming, iron-rich foods",
            "Practice extra self-compassion"
        ],
        "icon": "🌙",
        "category": "self-care"
    },
    CyclePhase.FOLLICULAR: {
        "title": "Growth & Renewal Energy",
        "description": "Harness your natural renewal energy during the follicular phase",
        "tips": [
            "Try new activities or learn something new",
            "Focus on strength-building exercises",
            "Eat fresh, seasonal foods",
            "Plan creative or challenging projects"
        ],
        "icon": "🌱",
        "category": "productivity"
    },
    CyclePhase.OVULATORY: {
        "title": "Peak Performance Optimization",
        "description": "Make the most of your natural peak energy during ovulation",
        "tips": [
            "Schedule important conversations or presentations",
            "Try your most challenging workouts",
            "Focus on social connections and networking",
            "Take on ambitious goals or projects"
        ],
        "icon": "✨",
        "category": "productivity"
    },
    CyclePhase.LUTEAL: {
        "title": "Balanced Transition Support",
        "description": "Maintain comfort and balance during your luteal phase",
        "tips": [
            "Focus on complex carbohydrates for steady energy",
            "Practice stress-reduction and mindfulness",
            "Prepare mentally and physically for menstruation",
            "Listen carefully to your body's changing needs"
        ],
        "icon": "🍂",
        "category": "nutrition"
    }
}

TOP_ENTRIES_LIMIT = 3
COMMON_SYMPTOMS_LIMIT = 5

# Average severity on the stored 1-3 scale; 4 on the 1-5 input scale
HIGH_INTENSITY_THRESHOLD = 2.4

# Upper bounds of distinct moods per month for each stability label
MOOD_STABILITY_LEVELS = [(3, "stable"), (5, "variable")]
UNSTABLE_MOOD_LABEL = "highly variable"

POSITIVE_MOOD_KEYWORDS = ["happy", "good", "great", "energetic", "calm"]
MAX_WELLNESS_SCORE = 10
SYMPTOM_WELLNESS_PENALTY = 0.1
POSITIVE_MOOD_WELLNESS_BONUS = 0.5
