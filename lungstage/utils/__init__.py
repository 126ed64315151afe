"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    StagingError,
    MissingFieldError,
    UnrecognizedCategoryError,
    ReportGenerationError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "StagingError",
    "MissingFieldError",
    "UnrecognizedCategoryError",
    "ReportGenerationError",
]
