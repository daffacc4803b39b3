from pydantic_settings import BaseSettings

# Relative importance of each job criterion. Only criteria a posting declares
# count toward the total, so the absolute scale does not matter.
DEFAULT_JOB_WEIGHTS: dict[str, float] = {
    "education": 30,
    "gpa": 25,
    "experience": 20,
    "degree_type": 15,
    "skills": 10,
    "certificates": 15,
    "documents": 5,
}

DEFAULT_COURSE_WEIGHTS: dict[str, float] = {
    "min_grade": 20,
    "min_points": 20,
    "required_subjects": 15,
    "subject_grades": 15,
    "certificates": 10,
}


class Settings(BaseSettings):
    job_weights: dict[str, float] = DEFAULT_JOB_WEIGHTS
    course_weights: dict[str, float] = DEFAULT_COURSE_WEIGHTS

    # Near-miss scoring
    partial_credit: float = 0.5  # fraction of the weight awarded on a near miss
    gpa_near_miss: float = 0.5  # absolute GPA gap still counted as a near miss

    # Ranking
    default_result_limit: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "CAREERMATCH_", "extra": "ignore"}


settings = Settings()
