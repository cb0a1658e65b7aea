# tests/conftest.py

from __future__ import annotations

import os
from datetime import datetime

import pytest

# Must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from models import AppState  # noqa: E402

FIXED_NOW = datetime(2025, 1, 2, 9, 30)


@pytest.fixture()
def state() -> AppState:
    """AppState with a frozen clock so form resets are deterministic."""
    return AppState(clock=lambda: FIXED_NOW)


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
