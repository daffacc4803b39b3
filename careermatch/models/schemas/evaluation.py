"""Per-criterion evaluation records shared by the filter, scorer and breakdown."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CriterionResult(BaseModel):
    """One declared requirement evaluated against one profile.

    Undeclared requirements never produce a record, so a posting with no
    requirements evaluates to an empty list.
    """
    criterion: str  # education, gpa, min_grade, ...
    weight: float = 0.0
    satisfied: bool = False
    credit: float = 0.0  # 0.0-1.0 share of the weight earned
    requirement_label: str = ""
    candidate_value_label: str = ""
    reason: str = ""  # why the requirement is not met, empty when satisfied
    in_breakdown: bool = True


class BreakdownItem(BaseModel):
    """A single row of the "view details" qualification breakdown."""
    criterion: str
    requirement_label: str
    candidate_value_label: str
    satisfied: bool

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class QualificationResult(BaseModel):
    qualified: bool = False
    match_score: int = 0  # 0-100
    reasons: list[str] = []
    suggestions: list[str] = []

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
