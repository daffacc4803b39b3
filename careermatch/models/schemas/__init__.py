"""Pydantic contracts between the storage layer and the eligibility engine."""

from careermatch.models.schemas.evaluation import (
    BreakdownItem,
    CriterionResult,
    QualificationResult,
)
from careermatch.models.schemas.posting import (
    CoursePosting,
    CourseRequirements,
    JobPosting,
    JobRequirements,
    Posting,
    parse_posting,
)
from careermatch.models.schemas.profile import CandidateProfile, Grades, Qualifications

__all__ = [
    "BreakdownItem",
    "CandidateProfile",
    "CoursePosting",
    "CourseRequirements",
    "CriterionResult",
    "Grades",
    "JobPosting",
    "JobRequirements",
    "Posting",
    "QualificationResult",
    "Qualifications",
    "parse_posting",
]
