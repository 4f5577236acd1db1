"""Ski school student record and its literal unions."""

from dataclasses import dataclass
from enum import Enum


class SkillLevel(str, Enum):
    """Skill level of a ski school student."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class Sport(str, Enum):
    """Sport taught at the ski school."""
    SKI = "ski"
    SNOWBOARD = "snowboard"


@dataclass(frozen=True)
class SkiSchoolStudent:
    """Student enrolled at the ski school."""
    name: str
    age: int
    sport: Sport
    level: SkillLevel
