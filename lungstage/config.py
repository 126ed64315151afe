"""
Staging Service: Configuration
===============================
Centralised settings for logging, report output and category handling.
Loads overrides from the project-level .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


API_VERSION: str = "1.0.0"

# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("LOG_FILE", "")

# ── Reports ─────────────────────────────────────────────────────────────
REPORTS_DIR: str = os.getenv("REPORTS_DIR", "reports")
PDF_COLUMN_WIDTH_MM: float = float(os.getenv("PDF_COLUMN_WIDTH_MM", "180"))
PDF_LEFT_MARGIN_MM: float = 10.0
PDF_FONT_SIZE: int = int(os.getenv("PDF_FONT_SIZE", "12"))

# ── Classification ──────────────────────────────────────────────────────
# When enabled, asthma answers outside the known category sets raise
# UnrecognizedCategoryError instead of contributing the mildest severity.
STRICT_CATEGORIES: bool = _env_flag("STRICT_CATEGORIES")
