"""Ranking pipeline: wires filter, scorer and sort together.

Flow:
    profile + postings
      ├─ filter_qualified(postings, profile)     → eligible postings
      │                                               (all, if the profile has not loaded)
      ├─ calculate_match_score(profile, posting)  → copy with match_score set
      ├─ stable sort, highest score first         → ties keep input order
      ├─ optional min_score cut-off
      └─ truncate to limit
"""

import logging
from collections.abc import Sequence

from careermatch.config import settings
from careermatch.models.responses import RankedCandidate
from careermatch.models.schemas.posting import CoursePosting, JobPosting
from careermatch.models.schemas.profile import CandidateProfile
from careermatch.services.eligibility.filter import evaluate_posting, filter_qualified, profile_loaded
from careermatch.services.eligibility.scorer import calculate_match_score, score_criteria

logger = logging.getLogger(__name__)


def _cut(items: list, limit: int | None) -> list:
    if limit is None:
        limit = settings.default_result_limit
    return items[:max(0, limit)]


def rank_postings(
    profile: CandidateProfile | None,
    postings: Sequence[JobPosting | CoursePosting],
    limit: int | None = None,
    min_score: int | None = None,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[JobPosting | CoursePosting]:
    """Best-matching postings for a profile, highest ``match_score`` first.

    Input postings are not modified; each result is a copy carrying its score.
    """
    log = log or logger

    # --- Stage 1: eligibility ---
    survivors = filter_qualified(postings, profile, log=log)

    # --- Stage 2: scoring ---
    scored = [
        p.model_copy(update={"match_score": calculate_match_score(profile, p, log=log)})
        for p in survivors
    ]

    # --- Stage 3: order and cut ---
    # sorted() is stable, also with reverse=True.
    ranked = sorted(scored, key=lambda p: p.match_score, reverse=True)
    if min_score is not None:
        ranked = [p for p in ranked if p.match_score >= min_score]

    result = _cut(ranked, limit)
    log.info(
        "Ranked %d postings for profile %s: %d eligible, %d returned",
        len(postings), profile.id if profile else None, len(survivors), len(result),
    )
    return result


def rank_candidates(
    posting: JobPosting | CoursePosting,
    profiles: Sequence[CandidateProfile],
    limit: int | None = None,
    min_score: int | None = None,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> list[RankedCandidate]:
    """Best-matching profiles for one posting, highest score first.

    Profiles whose qualifications have not loaded are skipped.
    """
    log = log or logger
    ranked: list[RankedCandidate] = []
    for profile in profiles:
        if not profile_loaded(profile):
            continue
        results = evaluate_posting(profile, posting, log=log)
        score = score_criteria(results)
        if min_score is not None and score < min_score:
            continue
        ranked.append(RankedCandidate(
            profile=profile,
            match_score=score,
            matched_criteria=[r.criterion for r in results if r.satisfied],
        ))

    ranked.sort(key=lambda c: c.match_score, reverse=True)
    result = _cut(ranked, limit)
    log.info("Ranked %d profiles for posting %s, %d returned", len(profiles), posting.id, len(result))
    return result
