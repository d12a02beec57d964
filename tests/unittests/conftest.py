"""Contains configurations for the test run."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def resources_folder() -> Path:
    """Returns the path to the test resources folder."""
    return Path(__file__).parents[1] / "resources"


@pytest.fixture(scope="session")
def raichu_forms_path(resources_folder: Path) -> Path:
    """Form rows for Raichu with English and Spanish localized names."""
    return resources_folder / "raichu_forms.json"


@pytest.fixture(scope="session")
def charizard_forms_path(resources_folder: Path) -> Path:
    """Form rows for Charizard (mega and gigantamax), wrapped in a "forms" object."""
    return resources_folder / "charizard_forms.json"
