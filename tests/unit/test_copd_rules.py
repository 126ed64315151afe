"""
Unit Tests for COPD Staging Rules

GOLD grade thresholds, ABE group priority and the static text lookups.
"""
import pytest

from lungstage.core.clinical import (
    AbeGroup, CopdInput, CopdResult, GoldGrade, classify_copd
)
from lungstage.core.clinical.rules_copd import (
    ABE_DESCRIPTIONS, GOLD_DESCRIPTIONS, RECOMMENDATIONS,
    abe_group, diagnostic_note, gold_grade,
)


def make_input(**overrides) -> CopdInput:
    values = dict(
        ratio=0.65, fev1_percent=55, exacerbations=1,
        hospitalizations=0, mmrc=1,
    )
    values.update(overrides)
    return CopdInput(**values)


class TestGoldGrade:
    """Tests for FEV1-based GOLD grading."""

    @pytest.mark.parametrize("fev1, expected", [
        (80, GoldGrade.GOLD1),
        (79.9, GoldGrade.GOLD2),
        (50, GoldGrade.GOLD2),
        (49.9, GoldGrade.GOLD3),
        (30, GoldGrade.GOLD3),
        (29.9, GoldGrade.GOLD4),
        (0, GoldGrade.GOLD4),
        (120, GoldGrade.GOLD1),
    ])
    def test_thresholds_closed_lower_bound(self, fev1, expected):
        assert gold_grade(fev1) == expected

    def test_gold1_regardless_of_other_fields(self):
        """FEV1 ≥ 80 is GOLD 1 whatever the ratio, history or dyspnea."""
        for overrides in (
            dict(ratio=0.3, exacerbations=5, hospitalizations=3, mmrc=4),
            dict(ratio=0.9, exacerbations=0, hospitalizations=0, mmrc=0),
        ):
            result = classify_copd(make_input(fev1_percent=85, **overrides))
            assert result.gold_grade == GoldGrade.GOLD1

    def test_grade_number(self):
        assert GoldGrade.GOLD3.number == 3


class TestAbeGroup:
    """Tests for ABE group priority."""

    @pytest.mark.parametrize("mmrc", [0, 1, 2, 3, 4])
    def test_two_exacerbations_is_group_e(self, mmrc):
        assert abe_group(exacerbations=2, hospitalizations=0, mmrc=mmrc) == AbeGroup.E

    @pytest.mark.parametrize("mmrc", [0, 4])
    def test_any_hospitalization_is_group_e(self, mmrc):
        assert abe_group(exacerbations=0, hospitalizations=1, mmrc=mmrc) == AbeGroup.E

    def test_symptom_burden_is_group_b(self):
        assert abe_group(exacerbations=1, hospitalizations=0, mmrc=2) == AbeGroup.B

    def test_low_burden_is_group_a(self):
        assert abe_group(exacerbations=1, hospitalizations=0, mmrc=1) == AbeGroup.A
        assert abe_group(exacerbations=0, hospitalizations=0, mmrc=0) == AbeGroup.A


class TestDiagnosticNote:
    """The ratio only changes the informational note."""

    def test_below_threshold_confirms_obstruction(self):
        note = diagnostic_note(0.65)
        assert "0.65" in note
        assert "below the 0.70 threshold" in note

    def test_at_threshold_is_normal(self):
        note = diagnostic_note(0.70)
        assert "0.70" in note
        assert "generally considered normal" in note

    def test_normal_ratio_still_staged(self):
        """Grade and group are assigned even when the ratio is ≥ 0.70."""
        result = classify_copd(make_input(ratio=0.82, fev1_percent=40, exacerbations=3))
        assert result.obstruction_confirmed is False
        assert result.gold_grade == GoldGrade.GOLD3
        assert result.abe_group == AbeGroup.E


class TestClassifyCopd:
    """End-to-end COPD classification."""

    def test_scenario_moderate_group_a(self):
        result = classify_copd(make_input(
            ratio=0.65, fev1_percent=55, exacerbations=1, hospitalizations=0, mmrc=1
        ))
        assert result.gold_grade == GoldGrade.GOLD2
        assert result.abe_group == AbeGroup.A
        assert result.obstruction_confirmed is True

    def test_scenario_severe_group_e(self):
        result = classify_copd(make_input(
            ratio=0.60, fev1_percent=45, exacerbations=3, hospitalizations=0, mmrc=3
        ))
        assert result.gold_grade == GoldGrade.GOLD3
        assert result.abe_group == AbeGroup.E

    def test_descriptions_follow_classification(self):
        result = classify_copd(make_input(fev1_percent=20, mmrc=3))
        assert result.gold_description == GOLD_DESCRIPTIONS[GoldGrade.GOLD4]
        assert result.abe_description == ABE_DESCRIPTIONS[AbeGroup.B]
        assert result.recommendation == RECOMMENDATIONS[AbeGroup.B]

    def test_recommendation_depends_only_on_group(self):
        a = classify_copd(make_input(fev1_percent=90, ratio=0.5))
        b = classify_copd(make_input(fev1_percent=25, ratio=0.9))
        assert a.abe_group == b.abe_group == AbeGroup.A
        assert a.recommendation == b.recommendation

    @pytest.mark.parametrize("group", list(AbeGroup))
    def test_every_recommendation_mentions_rescue_bronchodilator(self, group):
        assert "Rescue short" in RECOMMENDATIONS[group][-1]

    def test_group_e_mentions_triple_therapy(self):
        text = " ".join(RECOMMENDATIONS[AbeGroup.E])
        assert "LABA+LAMA+ICS" in text
        assert "300 cells/µL" in text

    def test_idempotent(self):
        data = make_input(inhalers=("Tiotropium",), frequency="2")
        assert classify_copd(data) == classify_copd(data)

    def test_input_echoed(self):
        data = make_input(inhalers=("Tiotropium",))
        result = classify_copd(data)
        assert isinstance(result, CopdResult)
        assert result.input is data

    def test_to_dict_record_shape(self):
        result = classify_copd(make_input(frequency="3"))
        payload = result.to_dict()

        assert payload["questionnaire"] == "copd"
        assert payload["goldGrade"] == "GOLD 2 (Moderate)"
        assert payload["abeGroup"] == "Group A"
        for key in ("goldDescription", "abeDescription", "recommendation", "diagnosticNote"):
            assert payload[key]
        assert payload["input"]["fev1Percent"] == 55
        assert payload["input"]["frequency"] == "3"
