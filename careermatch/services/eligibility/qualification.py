"""One-call qualification check: verdict, score and reasons together."""

import logging

from careermatch.models.schemas.evaluation import QualificationResult
from careermatch.models.schemas.posting import CoursePosting, JobPosting
from careermatch.models.schemas.profile import CandidateProfile
from careermatch.services.eligibility.course_evaluator import IMPROVEMENT_SUGGESTIONS
from careermatch.services.eligibility.filter import all_satisfied, evaluate_posting, profile_loaded
from careermatch.services.eligibility.scorer import score_criteria

logger = logging.getLogger(__name__)

MEETS_ALL = "Meets all requirements"
NOT_LOADED = "Missing requirements or qualifications"


def check_qualification(
    profile: CandidateProfile | None,
    posting: JobPosting | CoursePosting,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> QualificationResult:
    log = log or logger
    results = evaluate_posting(profile, posting, log=log)

    if results and not profile_loaded(profile):
        log.debug("Posting %s checked before profile qualifications loaded", posting.id)
        return QualificationResult(qualified=False, match_score=0, reasons=[NOT_LOADED])

    qualified = all_satisfied(results)
    reasons = [r.reason for r in results if not r.satisfied] if not qualified else [MEETS_ALL]
    suggestions = list(IMPROVEMENT_SUGGESTIONS) if not qualified and posting.kind == "course" else []

    return QualificationResult(
        qualified=qualified,
        match_score=score_criteria(results),
        reasons=reasons,
        suggestions=suggestions,
    )
