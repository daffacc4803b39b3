"""Qualification breakdown for the "view details" panel of one posting."""

import logging

from careermatch.models.schemas.evaluation import BreakdownItem
from careermatch.models.schemas.posting import CoursePosting, JobPosting
from careermatch.models.schemas.profile import CandidateProfile
from careermatch.services.eligibility.filter import evaluate_posting, profile_loaded


def get_qualification_breakdown(
    posting: JobPosting | CoursePosting,
    profile: CandidateProfile | None,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[BreakdownItem]:
    """Ordered requirement vs. candidate rows for a single posting.

    Jobs list education, GPA, experience and degree type. Skills count toward
    the match score but are not listed here.
    """
    if not profile_loaded(profile):
        return []
    return [
        BreakdownItem(
            criterion=r.criterion,
            requirement_label=r.requirement_label,
            candidate_value_label=r.candidate_value_label,
            satisfied=r.satisfied,
        )
        for r in evaluate_posting(profile, posting, log=log)
        if r.in_breakdown
    ]
