"""Course requirement evaluator.

Criteria, in display order: min_grade, min_points, required_subjects,
subject_grades, certificates. All of them are listed in the breakdown.
"""

from careermatch.models.schemas.evaluation import CriterionResult
from careermatch.models.schemas.posting import CourseRequirements
from careermatch.models.schemas.profile import Qualifications
from careermatch.services.eligibility import comparators
from careermatch.services.eligibility.base import BaseRequirementEvaluator
from careermatch.services.eligibility.ranks import NOT_PROVIDED, format_number, grade_rank

# Shown with every ineligible course result.
IMPROVEMENT_SUGGESTIONS = [
    "Consider improving your grades in the required subjects",
    "Explore alternative courses with lower requirements",
    "Contact the institution for special consideration",
    "Look for bridging programs or foundation courses",
]


class CourseRequirementEvaluator(BaseRequirementEvaluator):
    kind = "course"

    def weights(self) -> dict[str, float]:
        return self.settings.course_weights

    def _evaluate(self, qualifications: Qualifications, requirements: CourseRequirements) -> list[CriterionResult]:
        grades = qualifications.grades
        req = requirements
        results: list[CriterionResult] = []

        if req.min_grade is not None:
            have = grade_rank(grades.overall)
            need = grade_rank(req.min_grade)
            satisfied = have >= need
            results.append(CriterionResult(
                criterion="min_grade",
                weight=self.weight_of("min_grade"),
                satisfied=satisfied,
                credit=comparators.ordinal_credit(have, need, self.settings.partial_credit),
                requirement_label=f"Minimum Grade: {req.min_grade}",
                candidate_value_label=grades.overall or NOT_PROVIDED,
                reason="" if satisfied else (
                    f"Minimum grade of {req.min_grade} required (your grade: {grades.overall or 'none'})"
                ),
            ))

        if req.min_points is not None:
            satisfied = grades.points >= req.min_points
            results.append(CriterionResult(
                criterion="min_points",
                weight=self.weight_of("min_points"),
                satisfied=satisfied,
                credit=1.0 if satisfied else 0.0,
                requirement_label=f"Minimum Points: {format_number(req.min_points)}",
                candidate_value_label=str(grades.points) if grades.points > 0 else NOT_PROVIDED,
                reason="" if satisfied else (
                    f"Minimum of {format_number(req.min_points)} points required "
                    f"(your points: {grades.points})"
                ),
            ))

        if req.required_subjects:
            missing = comparators.missing_items(req.required_subjects, grades.subjects)
            if missing:
                candidate_label = f"Missing: {', '.join(missing)}"
            else:
                candidate_label = ", ".join(grades.subjects)
            results.append(CriterionResult(
                criterion="required_subjects",
                weight=self.weight_of("required_subjects"),
                satisfied=not missing,
                credit=comparators.coverage(req.required_subjects, grades.subjects),
                requirement_label=f"Required Subjects: {', '.join(req.required_subjects)}",
                candidate_value_label=candidate_label,
                reason=f"Missing required subjects: {', '.join(missing)}" if missing else "",
            ))

        if req.subject_grades:
            results.append(self._subject_grades(qualifications, req.subject_grades))

        if req.required_certificates:
            held = qualifications.certificates
            missing = comparators.missing_items(req.required_certificates, held)
            results.append(CriterionResult(
                criterion="certificates",
                weight=self.weight_of("certificates"),
                satisfied=not missing,
                credit=comparators.coverage(req.required_certificates, held),
                requirement_label=f"Certificates: {', '.join(req.required_certificates)}",
                candidate_value_label=f"Missing: {', '.join(missing)}" if missing else ", ".join(held),
                reason=f"Missing required certificates: {', '.join(missing)}" if missing else "",
            ))

        return results

    def _subject_grades(self, q: Qualifications, required: dict[str, str]) -> CriterionResult:
        subjects = q.grades.subjects
        credits: list[float] = []
        shortfalls: list[str] = []
        for subject, letter in required.items():
            held = subjects.get(subject, "")
            have, need = grade_rank(held), grade_rank(letter)
            credits.append(comparators.ordinal_credit(have, need, self.settings.partial_credit))
            if have < need:
                shortfalls.append(f"{subject} ({held or 'none'} < {letter})")

        return CriterionResult(
            criterion="subject_grades",
            weight=self.weight_of("subject_grades"),
            satisfied=not shortfalls,
            credit=sum(credits) / len(credits),
            requirement_label="Subject Grades: " + ", ".join(
                f"{subject} {letter}" for subject, letter in required.items()
            ),
            candidate_value_label=", ".join(
                f"{subject} {subjects.get(subject) or '-'}" for subject in required
            ),
            reason=f"Subject grades below requirement: {', '.join(shortfalls)}" if shortfalls else "",
        )
