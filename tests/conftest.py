import os
import tempfile

# Before config is imported: keep the real ~/.passgen untouched
os.environ.setdefault("PASSGEN_HOME", tempfile.mkdtemp(prefix="passgen-tests-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import random

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def rng():
    return random.Random(1234)
