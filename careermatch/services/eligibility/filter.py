"""Eligibility filter: AND of every declared requirement."""

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from careermatch.models.schemas.evaluation import CriterionResult
from careermatch.models.schemas.posting import CoursePosting, JobPosting
from careermatch.models.schemas.profile import CandidateProfile
from careermatch.services.eligibility.registry import get_evaluator

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=JobPosting | CoursePosting)


def evaluate_posting(
    profile: CandidateProfile | None,
    posting: JobPosting | CoursePosting,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[CriterionResult]:
    """All declared criteria of ``posting`` evaluated against ``profile``."""
    qualifications = profile.qualifications if profile is not None else None
    return get_evaluator(posting.kind).evaluate(qualifications, posting.requirements, log=log)


def all_satisfied(results: Iterable[CriterionResult]) -> bool:
    # Evaluated up front by the caller, so no criterion is skipped.
    return all(r.satisfied for r in results)


def is_eligible(
    profile: CandidateProfile | None,
    posting: JobPosting | CoursePosting,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> bool:
    """True when the profile meets every requirement the posting declares.

    A posting without requirements is open to everyone.
    """
    return all_satisfied(evaluate_posting(profile, posting, log=log))


def profile_loaded(profile: CandidateProfile | None) -> bool:
    return profile is not None and profile.qualifications is not None


def filter_qualified(
    postings: Sequence[P],
    profile: CandidateProfile | None,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[P]:
    """Eligible subset of ``postings``, or all of them if the profile has not loaded."""
    log = log or logger
    if not profile_loaded(profile):
        # Qualifications not loaded yet: show everything rather than nothing.
        log.debug("Profile qualifications not loaded, skipping filter for %d postings", len(postings))
        return list(postings)

    qualified = [p for p in postings if is_eligible(profile, p, log=log)]
    log.info("%d of %d postings match profile %s", len(qualified), len(postings), profile.id)
    return qualified


def filter_qualified_jobs(
    jobs: Sequence[JobPosting],
    profile: CandidateProfile | None,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[JobPosting]:
    return filter_qualified(jobs, profile, log)


def filter_qualified_courses(
    courses: Sequence[CoursePosting],
    profile: CandidateProfile | None,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[CoursePosting]:
    return filter_qualified(courses, profile, log)
