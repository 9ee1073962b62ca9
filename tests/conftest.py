"""Test data fixtures and golden test cases."""

import json
from pathlib import Path

import pytest

GOLDEN_CASES_DIR = Path(__file__).parent / "golden_cases"


def get_golden_case(case_name: str) -> dict:
    """Load a golden test case from JSON file."""
    case_file = GOLDEN_CASES_DIR / f"{case_name}.json"
    with open(case_file, "r") as f:
        return json.load(f)


# Sample tile from the calculator's initial form values
SAMPLE_INPUT = {
    "wind_speed_mph": 175.0,
    "mean_height_ft": 30.0,
    "exposure": "C",
    "roof_zone": 3,
    "tile_length_in": 17.0,
    "tile_width_in": 12.0,
    "lift_coefficient": 0.2,
}


@pytest.fixture
def sample_input() -> dict:
    return dict(SAMPLE_INPUT)
