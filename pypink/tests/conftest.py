import sys
from pathlib import Path

import pytest

# Ensure the repository root is on sys.path so tests can import the package
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pypink.source import default_source


@pytest.fixture
def source():
    return default_source(seed=1234)
