"""Abstract base class for requirement evaluators."""

from abc import ABC, abstractmethod
from typing import Any
import logging

from careermatch.config import Settings, settings as default_settings
from careermatch.models.schemas.evaluation import CriterionResult
from careermatch.models.schemas.profile import Qualifications

logger = logging.getLogger(__name__)


class BaseRequirementEvaluator(ABC):
    """Base class for per-kind requirement evaluators.

    Subclasses must implement:
        - kind: posting discriminator handled ("job", "course")
        - weights(): criterion name -> weight table from settings
        - _evaluate(): one CriterionResult per declared requirement
    """

    kind: str = ""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    @abstractmethod
    def weights(self) -> dict[str, float]:
        """Weight table for this posting kind."""

    @abstractmethod
    def _evaluate(self, qualifications: Qualifications, requirements: Any) -> list[CriterionResult]:
        """Walk every declared requirement, in display order."""

    def weight_of(self, criterion: str) -> float:
        return float(self.weights().get(criterion, 0.0))

    def evaluate(
        self,
        qualifications: Qualifications | None,
        requirements: Any,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> list[CriterionResult]:
        """Evaluate every declared criterion; never short-circuits.

        A missing profile is evaluated as an empty one (every value at its
        lowest rank). Missing requirements evaluate to an empty list.
        """
        log = log or logger
        if requirements is None:
            return []
        results = self._evaluate(qualifications or Qualifications(), requirements)
        for r in results:
            log.debug(
                "%s criterion %s: satisfied=%s credit=%.2f weight=%.1f",
                self.kind, r.criterion, r.satisfied, r.credit, r.weight,
            )
        return results
