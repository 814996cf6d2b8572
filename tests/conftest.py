import sys
from pathlib import Path

import pytest

# Flat layout: make the project root importable without installing
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from log import reset_log_fn


@pytest.fixture(autouse=True)
def _quiet_log():
    yield
    reset_log_fn()
