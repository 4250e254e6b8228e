import pytest
import numpy as np
from pathlib import Path
import tempfile
import sys
from typing import Generator

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from transitsim.core.models import PhaseCurve
from transitsim.transit import generate_analytic_curve


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def transit_params() -> dict:
    """Parameters whose chord actually crosses the stellar disk (z(0) = 0.5)."""
    return {
        "rprs": 0.1,
        "b": 0.05,
        "aRs": 10.0,
        "u1": 0.3,
        "u2": 0.2,
    }


@pytest.fixture
def analytic_model(transit_params) -> PhaseCurve:
    """Discretized analytic model over +/-0.08 in phase."""
    return generate_analytic_curve(**transit_params, num_points=300, phase_range=0.08)


@pytest.fixture
def flat_model() -> PhaseCurve:
    """Out-of-transit baseline over +/-0.08 in phase."""
    phase = np.linspace(-0.08, 0.08, 300)
    return PhaseCurve(phase=phase, flux=np.ones_like(phase))


# Markers for different test types
def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers",
        "statistical: test relies on averages over seeded random draws"
    )
