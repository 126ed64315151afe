"""
PDF Report Exporter

Writes a rendered staging report into a paginated PDF: plain text wrapped
to a fixed column width, flowing onto as many pages as needed.
"""
from typing import List, Optional
from xml.sax.saxutils import escape
import io
import os

from lungstage import config
from lungstage.utils import get_logger, ReportGenerationError
from .renderer import StagingReport

logger = get_logger(__name__)

# Import reportlab
try:
    from reportlab.lib.pagesizes import A4
    from reportlab.lib.styles import ParagraphStyle
    from reportlab.lib.units import mm
    from reportlab.lib.utils import simpleSplit
    from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer
    REPORTLAB_AVAILABLE = True
except ImportError:
    REPORTLAB_AVAILABLE = False
    logger.warning("reportlab not installed - PDF generation unavailable")

FONT_NAME = "Helvetica"
FRAME_PADDING = 6  # platypus Frame default padding, points per side

# The standard PDF fonts have no glyphs for these characters
PDF_SUBSTITUTIONS = {
    "₁": "1",
    "≥": ">=",
    "≤": "<=",
    "‑": "-",   # non-breaking hyphen
    "’": "'",
}


def pdf_safe(text: str) -> str:
    for char, replacement in PDF_SUBSTITUTIONS.items():
        text = text.replace(char, replacement)
    return text


class PdfReportExporter:
    """
    Exports `StagingReport`s as PDF files.

    A4 pages, left margin and column width taken from config
    (10 mm / 180 mm by default), 12 pt Helvetica.
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
        column_width_mm: Optional[float] = None,
        font_size: Optional[int] = None,
    ):
        self.output_dir = output_dir or config.REPORTS_DIR
        self.column_width_mm = column_width_mm or config.PDF_COLUMN_WIDTH_MM
        self.font_size = font_size or config.PDF_FONT_SIZE
        os.makedirs(self.output_dir, exist_ok=True)
        logger.info(f"PdfReportExporter initialized, output: {self.output_dir}")

    @property
    def column_width(self) -> float:
        """Column width in PDF points."""
        return self.column_width_mm * mm

    def wrap_text(self, text: str) -> List[str]:
        """
        Wrap plain text to the column width. Blank input lines are kept
        as empty strings so paragraph breaks survive.
        """
        self._require_reportlab()
        wrapped: List[str] = []
        for line in pdf_safe(text).splitlines():
            if not line.strip():
                wrapped.append("")
                continue
            wrapped.extend(simpleSplit(line, FONT_NAME, self.font_size, self.column_width))
        return wrapped

    def export(self, report: StagingReport) -> str:
        """
        Write `<report_id>.pdf` to the output directory.

        Returns:
            Path of the written file; also stored on `report.pdf_path`.
        """
        filepath = os.path.join(self.output_dir, f"{report.report_id}.pdf")
        data = self.export_bytes(report)
        with open(filepath, "wb") as fh:
            fh.write(data)
        report.pdf_path = filepath
        logger.info(f"Staging report exported: {filepath}")
        return filepath

    def export_bytes(self, report: StagingReport) -> bytes:
        """Render the report PDF in memory."""
        self._require_reportlab()
        buffer = io.BytesIO()
        page_width, _ = A4
        left = config.PDF_LEFT_MARGIN_MM * mm

        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=left - FRAME_PADDING,
            rightMargin=max(page_width - left - self.column_width - FRAME_PADDING, 0),
            topMargin=10 * mm,
            bottomMargin=10 * mm,
            title=f"{report.questionnaire.upper()} staging report",
        )
        style = ParagraphStyle(
            name="ReportLine",
            fontName=FONT_NAME,
            fontSize=self.font_size,
            leading=self.font_size * 1.25,
        )

        story = []
        for line in self.wrap_text(report.to_text()):
            if line:
                story.append(Paragraph(escape(line), style))
            else:
                story.append(Spacer(1, self.font_size))

        try:
            doc.build(story)
        except Exception as exc:
            raise ReportGenerationError(
                f"PDF build failed: {exc}",
                report_type=report.questionnaire,
                details={"report_id": report.report_id},
            ) from exc
        return buffer.getvalue()

    @staticmethod
    def _require_reportlab() -> None:
        if not REPORTLAB_AVAILABLE:
            raise ReportGenerationError("reportlab is not installed", report_type="pdf")
