"""Candidate profile: the qualifications a student records on their profile."""

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from careermatch.models.schemas.normalize import (
    to_float,
    to_grade_map,
    to_int,
    to_str_list,
    to_text,
)

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class Grades(BaseModel):
    """School-leaving results used for course admission."""
    overall: str = ""  # letter A-F
    subjects: dict[str, str] = {}  # subject name -> letter grade
    points: int = 0

    model_config = _CAMEL

    @field_validator("overall", mode="before")
    @classmethod
    def _letter(cls, v: Any) -> str:
        return (to_text(v) or "").upper()

    @field_validator("subjects", mode="before")
    @classmethod
    def _subjects(cls, v: Any) -> dict[str, str]:
        return to_grade_map(v)

    @field_validator("points", mode="before")
    @classmethod
    def _points(cls, v: Any) -> int:
        return max(0, to_int(v))


class Qualifications(BaseModel):
    education_level: str = ""  # high_school, associate, bachelor, master, phd
    degree_type: str = ""
    gpa: float = 0.0  # 0-4.0 scale
    experience: str = ""  # no_experience ... executive
    skills: list[str] = []
    grades: Grades = Field(default_factory=Grades)
    certificates: list[str] = []
    documents: dict[str, Any] = {}  # document key -> upload reference

    model_config = _CAMEL

    @field_validator("education_level", "degree_type", "experience", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return to_text(v) or ""

    @field_validator("gpa", mode="before")
    @classmethod
    def _gpa(cls, v: Any) -> float:
        return max(0.0, to_float(v))

    @field_validator("skills", "certificates", mode="before")
    @classmethod
    def _str_list(cls, v: Any) -> list[str]:
        return to_str_list(v)

    @field_validator("grades", mode="before")
    @classmethod
    def _grades(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, Grades)) else {}

    @field_validator("documents", mode="before")
    @classmethod
    def _documents(cls, v: Any) -> dict[str, Any]:
        return {str(k): doc for k, doc in v.items()} if isinstance(v, dict) else {}


class CandidateProfile(BaseModel):
    """A student profile as loaded from storage.

    ``qualifications`` is None until the profile document has loaded; the
    collection filters treat that as "show everything" rather than "qualifies
    for nothing".
    """
    id: str | None = None
    qualifications: Qualifications | None = None

    model_config = {**_CAMEL, "extra": "allow"}

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any) -> str | None:
        return None if v is None else str(v)

    @field_validator("qualifications", mode="before")
    @classmethod
    def _qualifications(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, Qualifications)) else None
