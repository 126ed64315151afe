"""
COPD Staging Rules: GOLD 2025

Assigns a GOLD grade from spirometry and an ABE group from exacerbation
history and the mMRC dyspnea scale, then attaches the GOLD 2025 pocket
guide first-line treatment summary for that group.

Rule ordering:
    Grade : descending FEV1 % predicted thresholds, closed lower bound.
    Group : exacerbation risk first (E), then symptom burden (B), else A.

The FEV1/FVC ratio only produces the diagnostic note. Grade and group are
assigned whatever the ratio, matching the questionnaire this replaces.
"""
from __future__ import annotations

from typing import Dict, Tuple

from lungstage.utils import get_logger
from .base import AbeGroup, CopdInput, CopdResult, GoldGrade

logger = get_logger(__name__)

# ── Thresholds ────────────────────────────────────────────────────────────────

OBSTRUCTION_RATIO  = 0.70   # FEV1/FVC below this confirms airflow obstruction

FEV1_GOLD1         = 80     # ≥ 80 % predicted
FEV1_GOLD2         = 50     # 50–79 %
FEV1_GOLD3         = 30     # 30–49 %

HOSPITALIZATIONS_E = 1      # any hospitalization → group E
EXACERBATIONS_E    = 2      # two or more moderate exacerbations → group E
MMRC_B             = 2      # mMRC ≥ 2 → higher symptom burden


# ── Static text ───────────────────────────────────────────────────────────────

GOLD_DESCRIPTIONS: Dict[GoldGrade, str] = {
    GoldGrade.GOLD1: "Airflow obstruction is mild with FEV₁ ≥80% predicted.",
    GoldGrade.GOLD2: "Airflow obstruction is moderate with FEV₁ between 50% and 79% predicted.",
    GoldGrade.GOLD3: "Airflow obstruction is severe with FEV₁ between 30% and 49% predicted.",
    GoldGrade.GOLD4: "Airflow obstruction is very severe with FEV₁ <30% predicted.",
}

ABE_DESCRIPTIONS: Dict[AbeGroup, str] = {
    AbeGroup.E: (
        "High risk for exacerbations: two or more moderate exacerbations or at "
        "least one hospitalization in the past year."
    ),
    AbeGroup.B: (
        "Higher symptom burden: mMRC score ≥2 with 0–1 moderate exacerbations "
        "and no hospitalization in the past year."
    ),
    AbeGroup.A: (
        "Lower symptom burden: mMRC score 0–1 with 0–1 moderate exacerbations "
        "and no hospitalization in the past year."
    ),
}

RECOMMENDATION_HEADING = "GOLD 2025 recommended treatment:"

_RESCUE_SABA = (
    "Rescue short‑acting bronchodilators should be prescribed to all patients "
    "for immediate symptom relief."
)

RECOMMENDATIONS: Dict[AbeGroup, Tuple[str, ...]] = {
    AbeGroup.A: (
        "Offer bronchodilator therapy to relieve breathlessness; this may be a "
        "short‑acting or long‑acting bronchodilator. A long‑acting bronchodilator "
        "(LABA or LAMA) is preferred if available and affordable except in "
        "patients with very occasional breathlessness.",
        "Continue treatment if benefit is documented; reassess regularly.",
        _RESCUE_SABA,
    ),
    AbeGroup.B: (
        "Initiate therapy with a combination of a long‑acting beta agonist and a "
        "long‑acting muscarinic antagonist (LABA+LAMA); clinical trials "
        "demonstrate that LABA+LAMA is superior to LAMA alone for symptom control.",
        "If LABA+LAMA is not appropriate, there is no evidence to recommend one "
        "class of long‑acting bronchodilator over another; select either LABA or "
        "LAMA based on the patient’s perception of symptom relief.",
        "Investigate and manage comorbidities that may contribute to symptoms.",
        _RESCUE_SABA,
    ),
    AbeGroup.E: (
        "A dual bronchodilator combination (LABA+LAMA) is the preferred initial therapy.",
        "Do not initiate LABA+ICS without LAMA; if an inhaled corticosteroid is "
        "indicated (e.g., blood eosinophil count ≥300 cells/µL or concomitant "
        "asthma), use triple therapy with LABA+LAMA+ICS, which is superior to "
        "LABA+ICS.",
        "Consider triple therapy at diagnosis when eosinophil count is high "
        "(≥300 cells/µL).",
        "Patients with COPD and co‑existing asthma should be treated like asthma "
        "patients, making inhaled corticosteroids mandatory.",
        _RESCUE_SABA,
    ),
}


# ── Rules ─────────────────────────────────────────────────────────────────────

def gold_grade(fev1_percent: float) -> GoldGrade:
    """GOLD grade from FEV1 % predicted (first match wins)."""
    if fev1_percent >= FEV1_GOLD1:
        return GoldGrade.GOLD1
    if fev1_percent >= FEV1_GOLD2:
        return GoldGrade.GOLD2
    if fev1_percent >= FEV1_GOLD3:
        return GoldGrade.GOLD3
    return GoldGrade.GOLD4


def abe_group(exacerbations: int, hospitalizations: int, mmrc: int) -> AbeGroup:
    """
    ABE group. Exacerbation risk dominates symptom burden, so group E is
    checked before the mMRC score is considered.
    """
    if hospitalizations >= HOSPITALIZATIONS_E or exacerbations >= EXACERBATIONS_E:
        return AbeGroup.E
    if mmrc >= MMRC_B:
        return AbeGroup.B
    return AbeGroup.A


def diagnostic_note(ratio: float) -> str:
    if ratio < OBSTRUCTION_RATIO:
        return (
            f"Your FEV₁/FVC ratio is {ratio:.2f}, which is below the 0.70 threshold "
            "used to confirm airflow obstruction in COPD."
        )
    return (
        f"Your FEV₁/FVC ratio is {ratio:.2f}. Values ≥0.70 are generally considered "
        "normal; consult a healthcare professional for interpretation."
    )


def classify_copd(data: CopdInput) -> CopdResult:
    """
    Stage a validated COPD questionnaire.

    Args:
        data: Answers already checked by `build_copd_input`.

    Returns:
        CopdResult with grade, group, their descriptions, the diagnostic
        note and the group's treatment recommendation.
    """
    grade = gold_grade(data.fev1_percent)
    group = abe_group(data.exacerbations, data.hospitalizations, data.mmrc)

    result = CopdResult(
        gold_grade=grade,
        gold_description=GOLD_DESCRIPTIONS[grade],
        abe_group=group,
        abe_description=ABE_DESCRIPTIONS[group],
        recommendation=RECOMMENDATIONS[group],
        diagnostic_note=diagnostic_note(data.ratio),
        obstruction_confirmed=data.ratio < OBSTRUCTION_RATIO,
        input=data,
    )
    logger.debug(
        f"COPD staged: {grade.name} / {group.name} "
        f"(FEV1={data.fev1_percent}%, exac={data.exacerbations}, "
        f"hosp={data.hospitalizations}, mMRC={data.mmrc})"
    )
    return result
