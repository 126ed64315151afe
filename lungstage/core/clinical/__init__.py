"""
Clinical Staging Layer

Turns questionnaire answers into COPD (GOLD grade / ABE group) and asthma
(severity stage) classifications.

Usage:
    from lungstage.core.clinical import StagingEngine

    engine = StagingEngine()
    result = engine.classify("asthma", answers)   # answers: Dict[str, Any]
"""
from .base import (
    Questionnaire,
    GoldGrade,
    AbeGroup,
    CopdInput,
    CopdResult,
    InhalerUse,
    AsthmaInput,
    AsthmaResult,
)
from .rules_copd import classify_copd
from .rules_asthma import classify_asthma
from .validation import build_copd_input, build_asthma_input
from .engine import StagingEngine, StagingResult

__all__ = [
    "Questionnaire",
    "GoldGrade",
    "AbeGroup",
    "CopdInput",
    "CopdResult",
    "InhalerUse",
    "AsthmaInput",
    "AsthmaResult",
    "classify_copd",
    "classify_asthma",
    "build_copd_input",
    "build_asthma_input",
    "StagingEngine",
    "StagingResult",
]
