"""
Clinical Staging Layer: Base Types

Defines the input and result records shared by the COPD and asthma
rule modules. These are questionnaire-specific value objects consumed
by the report renderer; `to_dict()` keeps the camelCase record shape
used by the browser questionnaires.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Questionnaire(str, Enum):
    """Supported staging questionnaires."""
    COPD   = "copd"
    ASTHMA = "asthma"


class GoldGrade(str, Enum):
    """
    GOLD airflow-obstruction grade, from FEV1 % predicted.

    GOLD1 – mild         (≥80 %)
    GOLD2 – moderate     (50–79 %)
    GOLD3 – severe       (30–49 %)
    GOLD4 – very severe  (<30 %)
    """
    GOLD1 = "GOLD 1 (Mild)"
    GOLD2 = "GOLD 2 (Moderate)"
    GOLD3 = "GOLD 3 (Severe)"
    GOLD4 = "GOLD 4 (Very Severe)"

    @property
    def number(self) -> int:
        return int(self.name[-1])


class AbeGroup(str, Enum):
    """GOLD ABE risk/symptom group."""
    A = "Group A"
    B = "Group B"
    E = "Group E"


# ── COPD ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CopdInput:
    """Validated answers of the COPD questionnaire."""
    ratio: float                     # FEV1/FVC, e.g. 0.65
    fev1_percent: float              # FEV1 % predicted
    exacerbations: int               # moderate exacerbations, past year
    hospitalizations: int            # hospitalizations, past year
    mmrc: int                        # mMRC dyspnea score 0-4
    inhalers: Tuple[str, ...] = ()
    frequency: Optional[str] = None  # inhaler use, times per week

    def to_dict(self) -> dict:
        return {
            "ratio": self.ratio,
            "fev1Percent": self.fev1_percent,
            "exacerbations": self.exacerbations,
            "hospitalizations": self.hospitalizations,
            "mmrc": self.mmrc,
            "inhalers": list(self.inhalers),
            "frequency": self.frequency,
        }


@dataclass(frozen=True)
class CopdResult:
    """
    GOLD grade and ABE group for one COPD questionnaire.

    Every display string the report needs is carried here so the renderer
    never has to interpret raw codes.
    """
    gold_grade: GoldGrade
    gold_description: str
    abe_group: AbeGroup
    abe_description: str
    recommendation: Tuple[str, ...]
    diagnostic_note: str
    obstruction_confirmed: bool
    input: CopdInput

    questionnaire = Questionnaire.COPD

    def to_dict(self) -> dict:
        return {
            "questionnaire": self.questionnaire.value,
            "goldGrade": self.gold_grade.value,
            "goldDescription": self.gold_description,
            "abeGroup": self.abe_group.value,
            "abeDescription": self.abe_description,
            "recommendation": list(self.recommendation),
            "diagnosticNote": self.diagnostic_note,
            "obstructionConfirmed": self.obstruction_confirmed,
            "input": self.input.to_dict(),
        }


# ── Asthma ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InhalerUse:
    """One inhaler the patient reports using."""
    name: str
    weekly_frequency: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "weeklyFrequency": self.weekly_frequency}


@dataclass(frozen=True)
class AsthmaInput:
    """Validated answers of the asthma questionnaire."""
    daytime: str                     # "<=2" | "3-6" | "daily" | "throughout"
    nighttime: str                   # "<=2" | "3-4" | "5+" | "often"
    activity: str                    # "none" | "minor" | "some" | "extreme"
    fev1: Optional[float] = None     # FEV1 % predicted, None when not measured
    inhalers: Tuple[InhalerUse, ...] = ()
    frequency: Optional[str] = None  # overall inhaler use, times per week

    def to_dict(self) -> dict:
        return {
            "fev1": self.fev1,
            "daytime": self.daytime,
            "nighttime": self.nighttime,
            "activity": self.activity,
            "inhalers": [i.to_dict() for i in self.inhalers],
            "frequency": self.frequency,
        }


@dataclass(frozen=True)
class AsthmaResult:
    """Severity stage for one asthma questionnaire."""
    severity: int                    # 1-4
    stage_name: str
    stage_description: str
    input: AsthmaInput
    # e.g. {"fev1": 1, "daytime": 3, "nighttime": 1, "activity": 1}
    contributions: Dict[str, int] = field(default_factory=dict)

    questionnaire = Questionnaire.ASTHMA

    def to_dict(self) -> dict:
        return {
            "questionnaire": self.questionnaire.value,
            "severity": self.severity,
            "stageName": self.stage_name,
            "stageDescription": self.stage_description,
            "contributions": dict(self.contributions),
            "input": self.input.to_dict(),
        }

    @property
    def driving_factors(self) -> List[str]:
        """Contributors whose band equals the final severity."""
        return [k for k, v in self.contributions.items() if v == self.severity]
