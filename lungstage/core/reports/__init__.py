"""
Report Generation Module

Renders staging results as plain-text reports and exports them as
downloadable PDFs.
"""
from .renderer import ReportRenderer, ReportLine, StagingReport
from .pdf_export import PdfReportExporter

__all__ = [
    "ReportRenderer",
    "ReportLine",
    "StagingReport",
    "PdfReportExporter",
]
