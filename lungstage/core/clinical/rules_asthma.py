"""
Asthma Staging Rules: GINA-style severity

Four independent findings each map to a severity band 1–4; the overall
stage is the most severe band (worst finding dominates):

    fev1      : < 60 % → 4, < 80 % → 3, otherwise or absent → 1
    daytime   : symptom days per week
    nighttime : nighttime awakenings per month
    activity  : limitation of normal activity

Unknown category values fall back to band 1 unless strict category mode
is enabled (config.STRICT_CATEGORIES), in which case they are rejected.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from lungstage import config
from lungstage.utils import get_logger, UnrecognizedCategoryError
from .base import AsthmaInput, AsthmaResult

logger = get_logger(__name__)

# ── Thresholds ────────────────────────────────────────────────────────────────

FEV1_SEVERE   = 60   # below → severe persistent band
FEV1_MODERATE = 80   # below → moderate persistent band

# ── Category tables ───────────────────────────────────────────────────────────

DAYTIME_BANDS: Dict[str, int] = {
    "<=2": 1,          # ≤2 days/week
    "3-6": 2,          # 3–6 days/week
    "daily": 3,
    "throughout": 4,   # throughout the day
}

NIGHTTIME_BANDS: Dict[str, int] = {
    "<=2": 1,          # ≤2 times/month
    "3-4": 2,          # 3–4 times/month
    "5+": 3,           # ≥5 times/month
    "often": 4,        # often, 7 times/week
}

ACTIVITY_BANDS: Dict[str, int] = {
    "none": 1,
    "minor": 2,
    "some": 3,
    "extreme": 4,
}

CATEGORY_TABLES: Dict[str, Dict[str, int]] = {
    "daytime": DAYTIME_BANDS,
    "nighttime": NIGHTTIME_BANDS,
    "activity": ACTIVITY_BANDS,
}

STAGES: Dict[int, Tuple[str, str]] = {
    1: (
        "Intermittent (Mild) Asthma",
        "Symptoms occur infrequently (≤2 days/week), with minimal nighttime waking "
        "(≤2 times/month) and no limitation of activities. Lung function (FEV₁) is "
        "typically ≥80% predicted.",
    ),
    2: (
        "Mild Persistent Asthma",
        "Symptoms are present on 3–6 days per week or 3–4 nights per month. There "
        "may be minor limitation of activity and FEV₁ is ≥80% predicted.",
    ),
    3: (
        "Moderate Persistent Asthma",
        "Symptoms occur daily and nighttime awakenings ≥5 times per month. There is "
        "some limitation of activities and lung function is between 60–80% predicted.",
    ),
    4: (
        "Severe Persistent Asthma",
        "Symptoms are present throughout the day, nighttime symptoms occur often, "
        "activities are extremely limited, and lung function is ≤60% predicted.",
    ),
}


# ── Contributions ─────────────────────────────────────────────────────────────

def fev1_band(fev1: Optional[float]) -> int:
    """Severity band from FEV1 % predicted; an absent value contributes nothing."""
    if fev1 is None:
        return 1
    if fev1 < FEV1_SEVERE:
        return 4
    if fev1 < FEV1_MODERATE:
        return 3
    return 1


def category_band(field_name: str, value: str, strict: Optional[bool] = None) -> int:
    """
    Severity band for a categorical answer.

    Args:
        field_name: "daytime", "nighttime" or "activity"
        value: The selected category code
        strict: Reject unknown codes instead of falling back to band 1.
                Defaults to config.STRICT_CATEGORIES.
    """
    table = CATEGORY_TABLES[field_name]
    band = table.get(value)
    if band is not None:
        return band

    if config.STRICT_CATEGORIES if strict is None else strict:
        raise UnrecognizedCategoryError(field_name, value, allowed=table.keys())
    logger.warning(f"Unrecognized {field_name} category {value!r}; treating as band 1")
    return 1


def classify_asthma(data: AsthmaInput, strict: Optional[bool] = None) -> AsthmaResult:
    """
    Stage a validated asthma questionnaire.

    Returns:
        AsthmaResult whose severity is the maximum of the four bands.
    """
    contributions = {
        "fev1": fev1_band(data.fev1),
        "daytime": category_band("daytime", data.daytime, strict),
        "nighttime": category_band("nighttime", data.nighttime, strict),
        "activity": category_band("activity", data.activity, strict),
    }
    severity = max(contributions.values())
    stage_name, stage_description = STAGES[severity]

    logger.debug(f"Asthma staged: severity {severity} ({stage_name}) from {contributions}")
    return AsthmaResult(
        severity=severity,
        stage_name=stage_name,
        stage_description=stage_description,
        input=data,
        contributions=contributions,
    )
