from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from careermatch.models.schemas.profile import CandidateProfile


class RankedCandidate(BaseModel):
    """A profile scored against one posting, for the recruiter-side view."""
    profile: CandidateProfile
    match_score: int = 0
    matched_criteria: list[str] = []

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
