"""Shared pytest configuration: isolates log and cache output from the working tree."""

import os
import sys
import tempfile
from pathlib import Path

import pytest


# Settings are read once at import time, so the environment must be prepared before the packages load
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="legal_analyzer_tests_"))

os.environ.setdefault("LEGAL_ANALYZER_LOG_DIR", str(_TEST_ROOT / "logs"))
os.environ.setdefault("LEGAL_ANALYZER_CACHE_DIR", str(_TEST_ROOT / "cache"))

REPO_ROOT = Path(__file__).resolve().parent.parent

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


NDA_TEXT = (
    "This Non-Disclosure Agreement establishes confidentiality obligations. "
    "The Receiving Party shall be liable for any breach. "
    "This Agreement may be terminated by either party with thirty days written notice."
)

HIGH_RISK_TEXT = (
    "The Company shall have unlimited liability for all damages arising hereunder. "
    "The Contractor shall indemnify the Company against all claims and losses. "
    "This agreement will automatically renew for successive one year terms. "
    "The Contractor shall work exclusively for the Company under this agreement. "
    "The Company may terminate the employee at any time. "
    "The employee shall not compete with the Company. "
    "The Company may modify this agreement at its discretion."
)


@pytest.fixture
def nda_text() -> str:
    return NDA_TEXT


@pytest.fixture
def high_risk_text() -> str:
    return HIGH_RISK_TEXT
