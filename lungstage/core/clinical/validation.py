"""
Questionnaire Input Validation

Turns the raw answer record submitted by a questionnaire form into a
validated input value object. All presence and numeric checks happen
here, before classification; the rule modules assume clean input.

Records use the form's camelCase keys:
    COPD  : ratio, fev1Percent, exacerbations, hospitalizations, mmrc,
            inhalers[], frequency?
    Asthma: fev1?, daytime, nighttime, activity,
            inhalers[{name, weeklyFrequency}], frequency?
"""
from __future__ import annotations

import math
from typing import Any, List, Mapping, Optional, Tuple

from lungstage.utils import get_logger, MissingFieldError
from .base import AsthmaInput, CopdInput, InhalerUse, Questionnaire

logger = get_logger(__name__)

MMRC_MIN = 0
MMRC_MAX = 4


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_float(value: Any) -> Optional[float]:
    """Finite float or None (blank, non-numeric, NaN, infinite)."""
    if _is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_int(value: Any) -> Optional[int]:
    """Whole number or None. 2.0 and "2" are accepted, 2.5 is not."""
    number = _parse_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _optional_text(value: Any) -> Optional[str]:
    if _is_blank(value):
        return None
    return str(value).strip()


def _inhaler_names(raw: Any) -> Tuple[str, ...]:
    if not raw:
        return ()
    names = []
    for item in raw:
        if isinstance(item, Mapping):
            item = item.get("name")
        text = _optional_text(item)
        if text:
            names.append(text)
    return tuple(names)


def _inhaler_uses(raw: Any) -> Tuple[InhalerUse, ...]:
    if not raw:
        return ()
    uses = []
    for item in raw:
        if isinstance(item, Mapping):
            name = _optional_text(item.get("name"))
            weekly = _optional_text(item.get("weeklyFrequency", item.get("weekly_frequency")))
        else:
            name, weekly = _optional_text(item), None
        if name:
            uses.append(InhalerUse(name=name, weekly_frequency=weekly))
    return tuple(uses)


def build_copd_input(raw: Mapping[str, Any]) -> CopdInput:
    """
    Validate a COPD answer record.

    Raises:
        MissingFieldError: listing every required field that is absent,
            blank, non-numeric or out of range.
    """
    ratio = _parse_float(raw.get("ratio"))
    fev1_percent = _parse_float(raw.get("fev1Percent"))
    exacerbations = _parse_int(raw.get("exacerbations"))
    hospitalizations = _parse_int(raw.get("hospitalizations"))
    mmrc = _parse_int(raw.get("mmrc"))

    missing: List[str] = []
    if ratio is None or ratio < 0:
        missing.append("ratio")
    if fev1_percent is None or fev1_percent < 0:
        missing.append("fev1Percent")
    if exacerbations is None or exacerbations < 0:
        missing.append("exacerbations")
    if hospitalizations is None or hospitalizations < 0:
        missing.append("hospitalizations")
    if mmrc is None or not MMRC_MIN <= mmrc <= MMRC_MAX:
        missing.append("mmrc")

    if missing:
        logger.info(f"COPD questionnaire rejected, missing/invalid: {missing}")
        raise MissingFieldError(missing, questionnaire=Questionnaire.COPD.value)

    return CopdInput(
        ratio=ratio,
        fev1_percent=fev1_percent,
        exacerbations=exacerbations,
        hospitalizations=hospitalizations,
        mmrc=mmrc,
        inhalers=_inhaler_names(raw.get("inhalers")),
        frequency=_optional_text(raw.get("frequency")),
    )


def build_asthma_input(raw: Mapping[str, Any]) -> AsthmaInput:
    """
    Validate an asthma answer record.

    FEV1 is optional: blank means "not measured". A value that is present
    but not numeric is rejected rather than silently dropped.

    Raises:
        MissingFieldError: for absent category answers or a non-numeric FEV1.
    """
    missing: List[str] = []

    fev1_raw = raw.get("fev1")
    fev1 = _parse_float(fev1_raw)
    if not _is_blank(fev1_raw) and (fev1 is None or fev1 < 0):
        missing.append("fev1")

    categories = {}
    for name in ("daytime", "nighttime", "activity"):
        value = _optional_text(raw.get(name))
        if value is None:
            missing.append(name)
        categories[name] = value

    if missing:
        logger.info(f"Asthma questionnaire rejected, missing/invalid: {missing}")
        raise MissingFieldError(missing, questionnaire=Questionnaire.ASTHMA.value)

    return AsthmaInput(
        daytime=categories["daytime"],
        nighttime=categories["nighttime"],
        activity=categories["activity"],
        fev1=fev1,
        inhalers=_inhaler_uses(raw.get("inhalers")),
        frequency=_optional_text(raw.get("frequency")),
    )
