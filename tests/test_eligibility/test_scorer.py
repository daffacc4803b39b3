"""Tests for the weighted match scorer."""

import pytest

from careermatch.models.schemas.evaluation import CriterionResult
from careermatch.models.schemas.posting import CoursePosting, JobPosting
from careermatch.models.schemas.profile import CandidateProfile
from careermatch.services.eligibility.scorer import calculate_match_score, score_criteria


def _profile(**qualifications) -> CandidateProfile:
    return CandidateProfile.model_validate({"qualifications": qualifications})


def _job(**requirements) -> JobPosting:
    return JobPosting.model_validate({"requirements": requirements})


class TestScoreCriteria:
    def test_no_criteria_scores_full(self):
        assert score_criteria([]) == 100

    def test_zero_weight_criteria_score_full(self):
        assert score_criteria([CriterionResult(criterion="x", weight=0, credit=0)]) == 100

    def test_weighted_average(self):
        results = [
            CriterionResult(criterion="a", weight=30, credit=1.0),
            CriterionResult(criterion="b", weight=10, credit=0.0),
        ]
        assert score_criteria(results) == 75

    def test_rounds_half_up(self):
        # 1/8 of the weight earned -> 12.5
        results = [CriterionResult(criterion="skills", weight=10, credit=0.125)]
        assert score_criteria(results) == 13


class TestJobScores:
    def test_meeting_every_requirement_scores_full(self, graduate_profile, analyst_job):
        assert calculate_match_score(graduate_profile, analyst_job) == 100

    def test_gpa_near_miss_scores_half(self, graduate_profile):
        assert calculate_match_score(graduate_profile, _job(minGPA=3.8)) == 50

    def test_vacuous_postings(self, graduate_profile, open_job):
        assert calculate_match_score(graduate_profile, open_job) == 100
        assert calculate_match_score(graduate_profile, _job()) == 100
        assert calculate_match_score(None, CoursePosting()) == 100

    def test_undeclared_criteria_do_not_dilute(self):
        profile = _profile(educationLevel="master")
        assert calculate_match_score(profile, _job(educationLevel="bachelor")) == 100

    def test_mixed_credit(self):
        profile = _profile(educationLevel="associate", gpa=3.0, experience="internship")
        job = _job(educationLevel="bachelor", minGPA=2.5, minExperience="mid_level", degreeType="Law")
        # education 15/30 + gpa 25/25 + experience 0/20 + degree 0/15 = 40/90
        assert calculate_match_score(profile, job) == 44

    def test_skills_proportional(self):
        profile = _profile(skills=["python", "sql", "excel"])
        job = _job(requiredSkills=["python", "sql", "spark", "tableau"])
        assert calculate_match_score(profile, job) == 50

    def test_supplementary_criteria(self, graduate_profile):
        job = _job(requiredCertificates=["AWS Cloud Practitioner"], requiredDocuments=["transcript", "cv"])
        # certificates 15/15 + documents 2.5/5 = 17.5/20
        assert calculate_match_score(graduate_profile, job) == 88

    def test_unloaded_profile_scores_as_empty(self, unloaded_profile):
        assert calculate_match_score(unloaded_profile, _job(educationLevel="high_school")) == 50

    def test_unreadable_gpa_threshold_earns_nothing(self):
        profile = _profile(gpa=2.0, educationLevel="associate")
        job = _job(educationLevel="associate", minGPA="abc")
        # education 30/30 + gpa 0/25 = 30/55
        assert calculate_match_score(profile, job) == 55

    def test_numeric_education_requirement_still_counts(self):
        # 5 is not a known level, so it ranks 0 and is met by anyone.
        job = _job(educationLevel=5, degreeType="Law")
        # education 30/30 + degree 0/15 = 30/45
        assert calculate_match_score(_profile(), job) == 67


class TestCourseScores:
    def test_eligible_course_scores_full(self, school_leaver_profile):
        course = CoursePosting.model_validate({
            "requirements": {"minGrade": "C", "minPoints": 30, "requiredSubjects": ["Math"]},
        })
        assert calculate_match_score(school_leaver_profile, course) == 100

    def test_missing_one_of_two_subjects_scores_half(self, school_leaver_profile, physics_course):
        assert calculate_match_score(school_leaver_profile, physics_course) == 50

    def test_grade_near_miss_and_points_miss(self, school_leaver_profile):
        course = CoursePosting.model_validate({"requirements": {"minGrade": "A", "minPoints": 40}})
        # grade 10/20 + points 0/20
        assert calculate_match_score(school_leaver_profile, course) == 25

    def test_certificates_proportional(self, graduate_profile):
        course = CoursePosting.model_validate({
            "requirements": {"certificates": ["AWS Cloud Practitioner", "High School Diploma"]},
        })
        assert calculate_match_score(graduate_profile, course) == 50


class TestMonotonicity:
    JOB = {
        "educationLevel": "master",
        "minGPA": 3.5,
        "minExperience": "mid_level",
        "degreeType": "Economics",
        "requiredSkills": ["stata", "r"],
    }

    @pytest.mark.parametrize("field,values", [
        ("gpa", [0.0, 2.9, 3.0, 3.2, 3.49, 3.5, 4.0]),
        ("educationLevel", ["", "high_school", "associate", "bachelor", "master", "phd"]),
        ("experience", ["", "no_experience", "internship", "entry_level", "mid_level", "senior_level", "executive"]),
    ])
    def test_raising_one_attribute_never_lowers_score(self, field, values):
        base = {"gpa": 3.1, "educationLevel": "bachelor", "experience": "entry_level", "skills": ["r"]}
        job = _job(**self.JOB)
        scores = [calculate_match_score(_profile(**{**base, field: v}), job) for v in values]
        assert scores == sorted(scores)
