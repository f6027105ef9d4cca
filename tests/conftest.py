import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from tests.helpers import make_creator  # noqa: E402


@pytest.fixture()
def scenario_records():
    """The three-creator scenario: two Instagram accounts, one YouTube."""
    return [
        make_creator("A", "Asha", platform="Instagram", followers=2_000_000, pricing="$500"),
        make_creator("B", "Bilal", platform="YouTube", followers=50_000, pricing="$50"),
        make_creator("C", "Chitra", platform="Instagram", followers=800_000),
    ]
