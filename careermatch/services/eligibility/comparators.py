"""Per-criterion comparators.

Each comparator takes already-normalized values (ranks, floats, string lists)
and returns either a verdict or a credit fraction. None of them raise: a
missing candidate value arrives here as rank 0, 0.0 or an empty collection.
"""

from collections.abc import Iterable, Mapping

# GPA gaps are compared after rounding so that 3.8 - 3.3 counts as 0.5.
_GPA_PRECISION = 6


def ordinal_credit(candidate_rank: int, required_rank: int, partial: float) -> float:
    """Full credit when met, ``partial`` exactly one step below, else nothing."""
    if candidate_rank >= required_rank:
        return 1.0
    if candidate_rank == required_rank - 1:
        return partial
    return 0.0


def gpa_credit(gpa: float, min_gpa: float, tolerance: float, partial: float) -> float:
    if gpa >= min_gpa:
        return 1.0
    if round(min_gpa - gpa, _GPA_PRECISION) <= tolerance:
        return partial
    return 0.0


def same_text(candidate: str, required: str) -> bool:
    if not candidate or not required:
        return False
    return candidate.strip().lower() == required.strip().lower()


def missing_items(required: Iterable[str], held: Iterable[str]) -> list[str]:
    """Required items the candidate lacks, in the posting's order."""
    held_set = set(held)
    return [item for item in required if item not in held_set]


def coverage(required: list[str], held: Iterable[str]) -> float:
    if not required:
        return 1.0
    missing = missing_items(required, held)
    return (len(required) - len(missing)) / len(required)


def held_documents(documents: Mapping[str, object]) -> list[str]:
    """Document keys with an actual upload behind them."""
    return [key for key, value in documents.items() if value]
