from __future__ import annotations

import sys
from dataclasses import asdict
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from shared.settings import default_settings  # noqa: E402


@pytest.fixture
def settings_store():
    """The process-wide settings store, restored after the test."""
    snapshot = default_settings.get()
    yield default_settings
    default_settings.update(**asdict(snapshot))
