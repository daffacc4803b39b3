"""Eligibility and match-scoring engine.

Pure functions of (profile, posting): nothing here performs I/O or mutates
its inputs. Under-specified input degrades to the most conservative value
instead of raising.
"""

from careermatch.services.eligibility.breakdown import get_qualification_breakdown
from careermatch.services.eligibility.filter import (
    filter_qualified,
    filter_qualified_courses,
    filter_qualified_jobs,
    is_eligible,
)
from careermatch.services.eligibility.qualification import check_qualification
from careermatch.services.eligibility.ranking import rank_candidates, rank_postings
from careermatch.services.eligibility.scorer import calculate_match_score, score_criteria

__all__ = [
    "calculate_match_score",
    "check_qualification",
    "filter_qualified",
    "filter_qualified_courses",
    "filter_qualified_jobs",
    "get_qualification_breakdown",
    "is_eligible",
    "rank_candidates",
    "rank_postings",
    "score_criteria",
]
