"""Ordinal rank tables and display labels for enumerated qualifications.

Scoring depends on these exact values. Anything not listed ranks 0, below
every real tier.
"""

import math

EDUCATION_RANKS: dict[str, int] = {
    "high_school": 1,
    "associate": 2,
    "bachelor": 3,
    "master": 4,
    "phd": 5,
}

EXPERIENCE_RANKS: dict[str, int] = {
    "no_experience": 1,
    "internship": 2,
    "entry_level": 3,
    "mid_level": 4,
    "senior_level": 5,
    "executive": 6,
}

GRADE_RANKS: dict[str, int] = {"A": 4, "B": 3, "C": 2, "D": 1, "E": 0, "F": 0}

EDUCATION_LABELS: dict[str, str] = {
    "high_school": "High School Diploma",
    "associate": "Associate Degree",
    "bachelor": "Bachelor's Degree",
    "master": "Master's Degree",
    "phd": "PhD",
}

EXPERIENCE_LABELS: dict[str, str] = {
    "no_experience": "No Experience",
    "internship": "Internship",
    "entry_level": "Entry Level (0-2 years)",
    "mid_level": "Mid Level (2-5 years)",
    "senior_level": "Senior Level (5+ years)",
    "executive": "Executive",
}

NOT_PROVIDED = "Not provided"


def rank_of(table: dict[str, int], value: object) -> int:
    if not isinstance(value, str):
        return 0
    return table.get(value, 0)


def grade_rank(letter: object) -> int:
    if not isinstance(letter, str):
        return 0
    return GRADE_RANKS.get(letter.strip().upper(), 0)


def format_education_level(level: str) -> str:
    return EDUCATION_LABELS.get(level, level) or NOT_PROVIDED


def format_experience(experience: str) -> str:
    return EXPERIENCE_LABELS.get(experience, experience) or NOT_PROVIDED


def format_document(key: str) -> str:
    """``transcript_copy`` -> ``Transcript Copy``."""
    return " ".join(word.capitalize() for word in key.split("_"))


def format_number(value: float) -> str:
    """3.5 -> "3.5", 30.0 -> "30"."""
    if math.isinf(value):
        return "unreadable"
    return f"{value:g}"
