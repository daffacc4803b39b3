"""Postings and their requirement shapes.

Institutions and companies author requirements through separate management
forms, so any subset of keys may be present. Every requirement field is
optional: None means "no constraint". Blank strings, empty lists and zero
thresholds are normalized to None at load time. A threshold that is present
but unreadable stays declared and can never be met.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    Field,
    TypeAdapter,
    field_validator,
)
from pydantic.alias_generators import to_camel

from careermatch.models.schemas.normalize import (
    positive_or_none,
    to_grade_map,
    to_label,
    to_score,
    to_str_list,
)

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


def _list_or_none(v: Any) -> list[str] | None:
    return to_str_list(v) or None


def _mapping_or_none(v: Any) -> Any:
    return v if isinstance(v, (dict, BaseModel)) else None


class JobRequirements(BaseModel):
    education_level: str | None = Field(
        default=None,
        validation_alias=AliasChoices("educationLevel", "educationalLevel", "education_level"),
    )
    min_gpa: float | None = Field(default=None, alias="minGPA")
    degree_type: str | None = None
    min_experience: str | None = None
    required_skills: list[str] | None = None
    required_certificates: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("requiredCertificates", "certificates", "required_certificates"),
    )
    required_documents: list[str] | None = None

    model_config = _CAMEL

    @field_validator("education_level", "degree_type", "min_experience", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str | None:
        return to_label(v)

    @field_validator("min_gpa", mode="before")
    @classmethod
    def _threshold(cls, v: Any) -> float | None:
        return positive_or_none(v)

    @field_validator("required_skills", "required_certificates", "required_documents", mode="before")
    @classmethod
    def _items(cls, v: Any) -> list[str] | None:
        return _list_or_none(v)


class CourseRequirements(BaseModel):
    min_points: float | None = None
    min_grade: str | None = None  # A, B, C, D
    required_subjects: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("requiredSubjects", "subjects", "required_subjects"),
    )
    subject_grades: dict[str, str] | None = None  # subject -> minimum letter
    required_certificates: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("requiredCertificates", "certificates", "required_certificates"),
    )

    model_config = _CAMEL

    @field_validator("min_points", mode="before")
    @classmethod
    def _threshold(cls, v: Any) -> float | None:
        return positive_or_none(v)

    @field_validator("min_grade", mode="before")
    @classmethod
    def _letter(cls, v: Any) -> str | None:
        text = to_label(v)
        return text.upper() if text else None

    @field_validator("required_subjects", "required_certificates", mode="before")
    @classmethod
    def _items(cls, v: Any) -> list[str] | None:
        return _list_or_none(v)

    @field_validator("subject_grades", mode="before")
    @classmethod
    def _grades(cls, v: Any) -> dict[str, str] | None:
        return to_grade_map(v) or None


class PostingBase(BaseModel):
    """Fields shared by every posting. Unknown storage fields are kept as-is."""
    id: str | None = None
    match_score: int | None = None  # set on ranked copies only

    model_config = {**_CAMEL, "extra": "allow"}

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any) -> str | None:
        return None if v is None else str(v)

    @field_validator("match_score", mode="before")
    @classmethod
    def _score(cls, v: Any) -> int | None:
        return to_score(v)


class JobPosting(PostingBase):
    kind: Literal["job"] = "job"
    requirements: Annotated[JobRequirements | None, BeforeValidator(_mapping_or_none)] = None


class CoursePosting(PostingBase):
    kind: Literal["course"] = "course"
    requirements: Annotated[CourseRequirements | None, BeforeValidator(_mapping_or_none)] = None


Posting = Annotated[Union[JobPosting, CoursePosting], Field(discriminator="kind")]

_posting_adapter: TypeAdapter[Posting] = TypeAdapter(Posting)


def parse_posting(data: dict[str, Any], kind: str | None = None) -> JobPosting | CoursePosting:
    """Build the right posting variant from a storage document.

    ``kind`` overrides the document's own ``kind`` key, for callers that know
    which collection the document came from. An unknown kind raises
    ``pydantic.ValidationError``.
    """
    return _posting_adapter.validate_python({**data, "kind": kind or data.get("kind")})
