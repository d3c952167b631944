"""Shared test fixtures."""

from pathlib import Path

import pytest

from gridroute.samples import Sample, geometry_one, geometry_two

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def grid_one() -> Sample:
    return geometry_one()


@pytest.fixture()
def grid_two() -> Sample:
    return geometry_two()
