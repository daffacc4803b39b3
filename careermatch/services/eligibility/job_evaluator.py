"""Job requirement evaluator.

Criteria, in display order:
    education, gpa, experience, degree_type    (listed in the breakdown)
    skills, certificates, documents            (scored only)

Skills, certificates and documents earn proportional credit; education and
experience earn partial credit one rank below the requirement; GPA earns
partial credit within ``settings.gpa_near_miss`` below the minimum.
"""

from careermatch.models.schemas.evaluation import CriterionResult
from careermatch.models.schemas.normalize import UNREADABLE
from careermatch.models.schemas.posting import JobRequirements
from careermatch.models.schemas.profile import Qualifications
from careermatch.services.eligibility import comparators
from careermatch.services.eligibility.base import BaseRequirementEvaluator
from careermatch.services.eligibility.ranks import (
    EDUCATION_RANKS,
    EXPERIENCE_RANKS,
    NOT_PROVIDED,
    format_document,
    format_education_level,
    format_experience,
    format_number,
    rank_of,
)


class JobRequirementEvaluator(BaseRequirementEvaluator):
    kind = "job"

    def weights(self) -> dict[str, float]:
        return self.settings.job_weights

    def _evaluate(self, qualifications: Qualifications, requirements: JobRequirements) -> list[CriterionResult]:
        q, req = qualifications, requirements
        results: list[CriterionResult] = []

        if req.education_level is not None:
            results.append(self._education(q, req.education_level))
        if req.min_gpa is not None:
            results.append(self._gpa(q, req.min_gpa))
        if req.min_experience is not None:
            results.append(self._experience(q, req.min_experience))
        if req.degree_type is not None:
            results.append(self._degree_type(q, req.degree_type))
        if req.required_skills:
            results.append(self._skills(q, req.required_skills))
        if req.required_certificates:
            results.append(self._certificates(q, req.required_certificates))
        if req.required_documents:
            results.append(self._documents(q, req.required_documents))

        return results

    def _education(self, q: Qualifications, required: str) -> CriterionResult:
        have = rank_of(EDUCATION_RANKS, q.education_level)
        need = rank_of(EDUCATION_RANKS, required)
        satisfied = have >= need
        return CriterionResult(
            criterion="education",
            weight=self.weight_of("education"),
            satisfied=satisfied,
            credit=comparators.ordinal_credit(have, need, self.settings.partial_credit),
            requirement_label=f"Education: {format_education_level(required)}",
            candidate_value_label=format_education_level(q.education_level),
            reason="" if satisfied else (
                f"Education level too low: {q.education_level or 'none'} < required {required}"
            ),
        )

    def _gpa(self, q: Qualifications, min_gpa: float) -> CriterionResult:
        satisfied = q.gpa >= min_gpa
        if satisfied:
            reason = ""
        elif min_gpa == UNREADABLE:
            reason = "GPA requirement could not be read"
        elif q.gpa > 0:
            reason = f"GPA too low: {format_number(q.gpa)} < required {format_number(min_gpa)}"
        else:
            reason = "GPA requirement exists but no GPA is recorded"
        return CriterionResult(
            criterion="gpa",
            weight=self.weight_of("gpa"),
            satisfied=satisfied,
            credit=comparators.gpa_credit(
                q.gpa, min_gpa, self.settings.gpa_near_miss, self.settings.partial_credit
            ),
            requirement_label=f"Minimum GPA: {format_number(min_gpa)}",
            candidate_value_label=format_number(q.gpa) if q.gpa > 0 else NOT_PROVIDED,
            reason=reason,
        )

    def _experience(self, q: Qualifications, required: str) -> CriterionResult:
        have = rank_of(EXPERIENCE_RANKS, q.experience)
        need = rank_of(EXPERIENCE_RANKS, required)
        satisfied = have >= need
        return CriterionResult(
            criterion="experience",
            weight=self.weight_of("experience"),
            satisfied=satisfied,
            credit=comparators.ordinal_credit(have, need, self.settings.partial_credit),
            requirement_label=f"Experience: {format_experience(required)}",
            candidate_value_label=format_experience(q.experience),
            reason="" if satisfied else (
                f"Experience level too low: {q.experience or 'none'} < required {required}"
            ),
        )

    def _degree_type(self, q: Qualifications, required: str) -> CriterionResult:
        satisfied = comparators.same_text(q.degree_type, required)
        if satisfied:
            reason = ""
        elif q.degree_type:
            reason = f"Degree type mismatch: {q.degree_type} != required {required}"
        else:
            reason = f"Degree type required: {required} but no degree type is recorded"
        return CriterionResult(
            criterion="degree_type",
            weight=self.weight_of("degree_type"),
            satisfied=satisfied,
            credit=1.0 if satisfied else 0.0,
            requirement_label=f"Degree in: {required}",
            candidate_value_label=q.degree_type or NOT_PROVIDED,
            reason=reason,
        )

    def _skills(self, q: Qualifications, required: list[str]) -> CriterionResult:
        missing = comparators.missing_items(required, q.skills)
        matched = len(required) - len(missing)
        share = comparators.coverage(required, q.skills)
        # TODO: list skills in the qualification breakdown once product decides
        # whether the details view should show them; they are scored already.
        return CriterionResult(
            criterion="skills",
            weight=self.weight_of("skills"),
            satisfied=not missing,
            credit=share,
            requirement_label=f"Skills: {', '.join(required)}",
            candidate_value_label=f"{matched}/{len(required)} skills ({share * 100:.0f}%)",
            reason=f"Missing skills: {', '.join(missing)}" if missing else "",
            in_breakdown=False,
        )

    def _certificates(self, q: Qualifications, required: list[str]) -> CriterionResult:
        missing = comparators.missing_items(required, q.certificates)
        return CriterionResult(
            criterion="certificates",
            weight=self.weight_of("certificates"),
            satisfied=not missing,
            credit=comparators.coverage(required, q.certificates),
            requirement_label=f"Certificates: {', '.join(required)}",
            candidate_value_label=", ".join(q.certificates) or "None",
            reason=f"Missing certificates: {', '.join(missing)}" if missing else "",
            in_breakdown=False,
        )

    def _documents(self, q: Qualifications, required: list[str]) -> CriterionResult:
        held = comparators.held_documents(q.documents)
        missing = comparators.missing_items(required, held)
        return CriterionResult(
            criterion="documents",
            weight=self.weight_of("documents"),
            satisfied=not missing,
            credit=comparators.coverage(required, held),
            requirement_label=f"Documents: {', '.join(format_document(d) for d in required)}",
            candidate_value_label=f"{len(required) - len(missing)}/{len(required)} documents",
            reason=(
                f"Missing documents: {', '.join(format_document(d) for d in missing)}"
                if missing else ""
            ),
            in_breakdown=False,
        )
