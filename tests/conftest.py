import random
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def rng() -> random.Random:
    """Fixed-seed random source so generator tests are repeatable."""
    return random.Random(2024)
