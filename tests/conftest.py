"""
Pytest configuration for the lipidadducts test suite.
"""

import pytest

from lipidadducts.core import Lipid


# Neutral monoisotopic mass of PC 34:1 (C42H82NO8P)
PC_34_1_MASS = 759.577824


def pytest_configure(config):
    """Called after command line options have been parsed."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests that run against the static adduct tables"
    )


@pytest.fixture
def pc_34_1():
    """Candidate lipid used across annotation tests."""
    return Lipid(
        compound_id=1,
        name="PC 34:1",
        formula="C42H82NO8P",
        lipid_type="PC",
        carbon_count=34,
        double_bonds_count=1,
    )


@pytest.fixture
def neutral_mass():
    """Neutral mass matching the pc_34_1 fixture."""
    return PC_34_1_MASS


@pytest.fixture
def two_shift_table():
    """Minimal table with shift magnitudes 1.0 and 2.0 Da."""
    return {"[M+A]+": 1.0, "[M+B]+": 2.0}


@pytest.fixture
def three_shift_table():
    """Table in which (A, B) and (B, C) explain the same 1 Da spacing."""
    return {"[M+A]+": 1.0, "[M+B]+": 2.0, "[M+C]+": 3.0}
