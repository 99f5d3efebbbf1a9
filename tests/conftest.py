"""
Pytest fixtures for award simulator tests.

Provides fresh awards, simulations and captured console output.
"""

import io
import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from provider_quality.rules.award import create_award
from provider_quality.simulation import AwardSimulation
from provider_quality.state.schema import AwardKind


@pytest.fixture
def gov_quality_plus():
    """Fresh Gov Quality Plus award (default decay)."""
    return create_award(AwardKind.GOV_QUALITY_PLUS)


@pytest.fixture
def blue_compare():
    """Fresh Blue Compare award."""
    return create_award(AwardKind.BLUE_COMPARE)


@pytest.fixture
def blue_first():
    """Fresh Blue First award."""
    return create_award(AwardKind.BLUE_FIRST)


@pytest.fixture
def blue_distinction_plus():
    """Fresh Blue Distinction Plus award."""
    return create_award(AwardKind.BLUE_DISTINCTION_PLUS)


@pytest.fixture
def simulation():
    """Simulation holding one award of every kind."""
    return AwardSimulation.default()


@pytest.fixture
def console_output():
    """Redirect the shared Rich console into a buffer."""
    from provider_quality.interface.renderer import console

    original_file = console.file
    buffer = io.StringIO()
    console.file = buffer
    try:
        yield buffer
    finally:
        console.file = original_file
