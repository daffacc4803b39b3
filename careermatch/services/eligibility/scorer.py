"""Weighted match scorer.

score = 100 * sum(weight * credit) / sum(weight), over declared criteria
only, rounded half up. A posting that declares nothing scores 100, matching
the filter's "open to everyone" rule.
"""

import logging
from collections.abc import Sequence

from careermatch.models.schemas.evaluation import CriterionResult
from careermatch.models.schemas.normalize import round_half_up
from careermatch.models.schemas.posting import CoursePosting, JobPosting
from careermatch.models.schemas.profile import CandidateProfile
from careermatch.services.eligibility.filter import evaluate_posting

logger = logging.getLogger(__name__)

FULL_SCORE = 100


def score_criteria(results: Sequence[CriterionResult]) -> int:
    total_weight = sum(r.weight for r in results)
    if total_weight <= 0:
        return FULL_SCORE
    earned = sum(r.weight * r.credit for r in results)
    return max(0, min(FULL_SCORE, round_half_up(FULL_SCORE * earned / total_weight)))


def calculate_match_score(
    profile: CandidateProfile | None,
    posting: JobPosting | CoursePosting,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> int:
    log = log or logger
    score = score_criteria(evaluate_posting(profile, posting, log=log))
    log.debug("Posting %s scored %d", posting.id, score)
    return score
