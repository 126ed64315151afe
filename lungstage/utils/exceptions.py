"""
Custom Exception Hierarchy

Provides specific exception types for the staging pipeline with
structured error information.
"""
from typing import Optional, Dict, Any, Iterable


class StagingError(Exception):
    """Base exception for all staging errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class MissingFieldError(StagingError):
    """A required questionnaire answer is absent, blank or not numeric."""

    def __init__(
        self,
        fields: Iterable[str],
        questionnaire: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        fields = list(fields)
        super().__init__(
            message=f"Please fill in all required fields: {', '.join(fields)}",
            code="MISSING_FIELD",
            details={"fields": fields, "questionnaire": questionnaire, **(details or {})}
        )
        self.fields = fields
        self.questionnaire = questionnaire


class UnrecognizedCategoryError(StagingError):
    """A categorical answer is outside its fixed category set (strict mode)."""

    def __init__(
        self,
        field: str,
        value: Any,
        allowed: Optional[Iterable[str]] = None
    ):
        allowed = list(allowed or [])
        super().__init__(
            message=f"Unrecognized value {value!r} for {field}",
            code="UNRECOGNIZED_CATEGORY",
            details={"field": field, "value": value, "allowed": allowed}
        )
        self.field = field
        self.value = value


class ReportGenerationError(StagingError):
    """Errors during report rendering or PDF export."""

    def __init__(
        self,
        message: str,
        report_type: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="REPORT_ERROR",
            details={"report_type": report_type, **(details or {})}
        )
        self.report_type = report_type
