"""Shared test fixtures."""

import pytest

from careermatch.models.schemas.posting import CoursePosting, JobPosting
from careermatch.models.schemas.profile import CandidateProfile
from careermatch.services.eligibility.registry import clear as clear_registry


@pytest.fixture(autouse=True)
def _reset_registry():
    """Evaluators capture settings on creation; start every test fresh."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def graduate_profile() -> CandidateProfile:
    """Bachelor graduate with an entry-level job behind them."""
    return CandidateProfile.model_validate({
        "id": "student-1",
        "qualifications": {
            "educationLevel": "bachelor",
            "degreeType": "Computer Science",
            "gpa": 3.6,
            "experience": "entry_level",
            "skills": ["python", "sql", "git"],
            "certificates": ["AWS Cloud Practitioner"],
            "documents": {"transcript": "uploads/t.pdf", "cv": ""},
        },
    })


@pytest.fixture
def school_leaver_profile() -> CandidateProfile:
    return CandidateProfile.model_validate({
        "id": "student-2",
        "qualifications": {
            "educationLevel": "high_school",
            "grades": {
                "overall": "B",
                "subjects": {"Math": "B", "English": "A", "Biology": "C"},
                "points": 32,
            },
        },
    })


@pytest.fixture
def unloaded_profile() -> CandidateProfile:
    return CandidateProfile(id="student-3")


@pytest.fixture
def open_job() -> JobPosting:
    return JobPosting(id="job-open")


@pytest.fixture
def analyst_job() -> JobPosting:
    return JobPosting.model_validate({
        "id": "job-analyst",
        "title": "Junior Data Analyst",
        "requirements": {
            "educationLevel": "bachelor",
            "minGPA": 3.5,
            "minExperience": "entry_level",
        },
    })


@pytest.fixture
def physics_course() -> CoursePosting:
    return CoursePosting.model_validate({
        "id": "course-physics",
        "name": "BSc Physics",
        "requirements": {"requiredSubjects": ["Math", "Physics"]},
    })
