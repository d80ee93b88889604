"""pytest configuration and fixtures for smart-form tests."""

import os

import pytest
from PyQt6.QtWidgets import QApplication

from smart_form.protocols import set_form_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_form_config():
    """Restore the default form configuration after each test."""
    yield
    set_form_config(None)
