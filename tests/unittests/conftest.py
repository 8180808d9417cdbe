"""Contains configurations for the test run."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def resources_folder() -> Path:
    """Returns the path to the test resources folder."""
    return Path(__file__).parents[1] / "resources"


@pytest.fixture
def mini_chart_path(resources_folder: Path) -> Path:
    """Returns the path to the three-type test chart."""
    return resources_folder / "mini_chart.yml"
