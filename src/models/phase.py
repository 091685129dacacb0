"""
Phase model definition for menstrual cycle phases.
"""
from enum import Enum


class CyclePhase(str, Enum):
    """
    Menstrual cycle phases, mutually exclusive over every cycle day.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATORY = "ovulatory"
    LUTEAL = "luteal"
