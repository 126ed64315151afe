"""
Staging Report Renderer

Turns a COPD or asthma staging result into ordered report lines and plain
text. Reads only fields of the result; nothing is reclassified here.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from datetime import datetime

from lungstage.core.clinical import AsthmaResult, CopdResult, StagingResult
from lungstage.core.clinical.rules_copd import RECOMMENDATION_HEADING
from lungstage.utils import get_logger, ReportGenerationError

logger = get_logger(__name__)

NO_INHALERS = "None selected"

# Download filenames offered by the questionnaire pages
DOWNLOAD_FILENAMES = {
    "copd": "copd_report.pdf",
    "asthma": "asthma_report.pdf",
}


@dataclass(frozen=True)
class ReportLine:
    """A single report line: optional bold label, text, bullet flag."""
    text: str
    label: Optional[str] = None
    bullet: bool = False

    def to_text(self) -> str:
        if self.bullet:
            return f"• {self.text}"
        if self.label:
            return f"{self.label}: {self.text}" if self.text else self.label
        return self.text


@dataclass
class StagingReport:
    """Data container for a rendered staging report."""
    report_id: str
    generated_at: datetime
    questionnaire: str
    title: str = "Results"
    lines: List[ReportLine] = field(default_factory=list)

    # Output path, set once exported
    pdf_path: Optional[str] = None

    @property
    def download_filename(self) -> str:
        return DOWNLOAD_FILENAMES.get(self.questionnaire, f"{self.report_id}.pdf")

    def to_text(self) -> str:
        return "\n".join([self.title] + [line.to_text() for line in self.lines])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "report_id": self.report_id,
            "generated_at": self.generated_at.isoformat(),
            "questionnaire": self.questionnaire,
            "title": self.title,
            "lines": [line.to_text() for line in self.lines],
            "pdf_path": self.pdf_path,
        }


def _number(value: float) -> str:
    """55.0 → "55", 55.5 → "55.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class ReportRenderer:
    """Renders staging results into `StagingReport`s."""

    def render(self, result: StagingResult, report_id: Optional[str] = None) -> StagingReport:
        """
        Render a staging result.

        Args:
            result: CopdResult or AsthmaResult
            report_id: Optional identifier; generated from the clock if omitted

        Returns:
            StagingReport with ordered lines
        """
        if isinstance(result, CopdResult):
            lines = self._copd_lines(result)
        elif isinstance(result, AsthmaResult):
            lines = self._asthma_lines(result)
        else:
            raise ReportGenerationError(
                f"Cannot render {type(result).__name__}",
                report_type=getattr(result, "questionnaire", "unknown"),
            )

        questionnaire = result.questionnaire.value
        if report_id is None:
            report_id = f"{questionnaire.upper()}-{datetime.now().strftime('%Y%m%d-%H%M%S-%f')}"

        report = StagingReport(
            report_id=report_id,
            generated_at=datetime.now(),
            questionnaire=questionnaire,
            lines=lines,
        )
        logger.debug(f"Rendered {questionnaire} report {report_id} ({len(lines)} lines)")
        return report

    def _copd_lines(self, result: CopdResult) -> List[ReportLine]:
        data = result.input
        lines = [
            ReportLine(result.diagnostic_note, label="Diagnostic Criterion"),
            ReportLine(result.gold_grade.value, label="GOLD Grade"),
            ReportLine(result.gold_description),
            ReportLine(result.abe_group.value, label="ABE Group"),
            ReportLine(result.abe_description),
            ReportLine(f"{_number(data.fev1_percent)}%", label="FEV₁% provided"),
            ReportLine(str(data.mmrc), label="mMRC score"),
            ReportLine(str(data.exacerbations), label="Number of moderate exacerbations"),
            ReportLine(str(data.hospitalizations), label="Number of hospitalizations"),
            ReportLine(", ".join(data.inhalers) or NO_INHALERS, label="Inhalers used"),
        ]
        if data.frequency:
            lines.append(ReportLine(f"{data.frequency} times per week", label="Inhaler use frequency"))
        if result.recommendation:
            lines.append(ReportLine("", label=RECOMMENDATION_HEADING))
            lines.extend(ReportLine(item, bullet=True) for item in result.recommendation)
        return lines

    def _asthma_lines(self, result: AsthmaResult) -> List[ReportLine]:
        data = result.input
        lines = [
            ReportLine(result.stage_name, label="Estimated Asthma Severity"),
            ReportLine(result.stage_description),
        ]
        if data.fev1 is not None:
            lines.append(ReportLine(f"{_number(data.fev1)}%", label="FEV₁% provided"))

        inhalers = [
            f"{i.name} ({i.weekly_frequency} times per week)" if i.weekly_frequency else i.name
            for i in data.inhalers
        ]
        lines.append(ReportLine(", ".join(inhalers) or NO_INHALERS, label="Inhalers used"))
        if data.frequency:
            lines.append(ReportLine(f"{data.frequency} times per week", label="Inhaler use frequency"))
        return lines
