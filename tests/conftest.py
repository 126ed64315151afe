"""
Pytest Configuration and Fixtures

Shared fixtures for the staging pipeline tests.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep PDFs written by the API tests out of the working tree
os.environ.setdefault("REPORTS_DIR", tempfile.mkdtemp(prefix="lungstage-reports-"))


@pytest.fixture
def copd_answers() -> dict:
    """COPD questionnaire as submitted by the form (GOLD 2, group A)."""
    return {
        "ratio": 0.65,
        "fev1Percent": 55,
        "exacerbations": 1,
        "hospitalizations": 0,
        "mmrc": 1,
        "inhalers": ["Tiotropium", "Salbutamol"],
        "frequency": "3",
    }


@pytest.fixture
def asthma_answers() -> dict:
    """Asthma questionnaire as submitted by the form (moderate persistent)."""
    return {
        "fev1": 85,
        "daytime": "daily",
        "nighttime": "<=2",
        "activity": "none",
        "inhalers": [
            {"name": "Budesonide/Formoterol", "weeklyFrequency": "4"},
            {"name": "Salbutamol"},
        ],
        "frequency": "",
    }


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir
