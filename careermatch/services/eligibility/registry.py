"""Lazily-built evaluator registry, one evaluator per posting kind."""

import logging

from careermatch.services.eligibility.base import BaseRequirementEvaluator

logger = logging.getLogger(__name__)

_registry: dict[str, BaseRequirementEvaluator] = {}


def _create_evaluator(kind: str) -> BaseRequirementEvaluator:
    """Factory: create an evaluator by posting kind with deferred imports."""
    if kind == "job":
        from careermatch.services.eligibility.job_evaluator import JobRequirementEvaluator
        return JobRequirementEvaluator()
    elif kind == "course":
        from careermatch.services.eligibility.course_evaluator import CourseRequirementEvaluator
        return CourseRequirementEvaluator()
    else:
        raise ValueError(f"Unknown posting kind: {kind}")


def get_evaluator(kind: str) -> BaseRequirementEvaluator:
    """Get the evaluator for a posting kind, creating it on first access."""
    if kind not in _registry:
        _registry[kind] = _create_evaluator(kind)
        logger.debug("Created %s requirement evaluator", kind)
    return _registry[kind]


def register(evaluator: BaseRequirementEvaluator) -> None:
    """Install an evaluator, e.g. one built with custom settings."""
    _registry[evaluator.kind] = evaluator


def clear() -> None:
    """Drop all evaluators. Useful for testing."""
    _registry.clear()
