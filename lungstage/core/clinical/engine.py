"""
Staging Engine

Central dispatcher. Takes a questionnaire name and its raw answer record,
validates the record and runs the matching rule module.

Usage:
    from lungstage.core.clinical import StagingEngine, Questionnaire

    engine = StagingEngine()
    result = engine.classify(Questionnaire.COPD, {"ratio": 0.65, ...})
    print(result.gold_grade, result.abe_group)

Adding a questionnaire:
    1. Create  lungstage/core/clinical/rules_<name>.py with classify_<name>()
    2. Add a build_<name>_input() validator in validation.py
    3. Register both in _QUESTIONNAIRES below.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from lungstage.utils import get_logger
from .base import AsthmaResult, CopdResult, Questionnaire
from .rules_asthma import classify_asthma
from .rules_copd import classify_copd
from .validation import build_asthma_input, build_copd_input

logger = get_logger(__name__)

StagingResult = Union[CopdResult, AsthmaResult]

# ── Registry: questionnaire → (validator, classifier) ────────────────────────
_QUESTIONNAIRES: Dict[Questionnaire, Tuple[Callable, Callable]] = {
    Questionnaire.COPD:   (build_copd_input, classify_copd),
    Questionnaire.ASTHMA: (build_asthma_input, classify_asthma),
}


class StagingEngine:
    """
    Validates questionnaire answers and stages them.

    Stateless, safe to call from multiple threads / concurrent requests.
    """

    def classify(
        self,
        questionnaire: Union[Questionnaire, str],
        raw: Mapping[str, Any],
    ) -> StagingResult:
        """
        Validate and classify one questionnaire.

        Raises:
            ValueError: unknown questionnaire name.
            MissingFieldError: a required answer is missing or invalid.
            UnrecognizedCategoryError: strict category mode rejected an answer.
        """
        questionnaire = Questionnaire(questionnaire)
        build_input, classifier = _QUESTIONNAIRES[questionnaire]

        result = classifier(build_input(raw))
        logger.info(f"StagingEngine [{questionnaire.value}]: {self.headline(result)}")
        return result

    @staticmethod
    def registered_questionnaires() -> List[Questionnaire]:
        """Return which questionnaires have active rule modules."""
        return list(_QUESTIONNAIRES.keys())

    @staticmethod
    def headline(result: StagingResult) -> str:
        """One-line classification label for logs and listings."""
        if isinstance(result, CopdResult):
            return f"{result.gold_grade.value}, {result.abe_group.value}"
        return result.stage_name

    @classmethod
    def summarise(cls, result: StagingResult) -> Dict[str, Any]:
        """
        Build a compact summary dict suitable for JSON API responses.

        Example output:
        {
            "questionnaire": "copd",
            "headline": "GOLD 2 (Moderate), Group A",
            "result": {...}
        }
        """
        return {
            "questionnaire": result.questionnaire.value,
            "headline": cls.headline(result),
            "result": result.to_dict(),
        }
