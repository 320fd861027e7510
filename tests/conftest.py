"""
Pytest fixtures and configuration for the Gatewarden test suite.
"""

import io
import os

import pytest

from gatewarden.gate import QualityGate, QualityGateCriticality
from gatewarden.handlers import FlowNode, Run
from gatewarden.log import FilteredLog

# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def log():
    """Fresh evaluation log."""
    return FilteredLog()


@pytest.fixture
def sink():
    """In-memory text stream for forwarded log lines."""
    return io.StringIO()


@pytest.fixture
def run():
    """Run without a result."""
    return Run("build #1")


@pytest.fixture
def flow_node():
    """Stage node without a warning marker."""
    return FlowNode("coverage")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GATEWARDEN_ variables of the developer machine out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("GATEWARDEN_"):
            monkeypatch.delenv(key)


# ============================================================================
# Quality Gates
# ============================================================================


@pytest.fixture
def three_gates():
    """Gates A (passes), B (missed as WARNING) and C (missed as FAILED)."""
    return [
        QualityGate("A", 80.0, QualityGateCriticality.UNSTABLE),
        QualityGate("B", 50.0, QualityGateCriticality.UNSTABLE),
        QualityGate("C", 10.0, QualityGateCriticality.FAILURE),
    ]


@pytest.fixture
def measured_values():
    """Measured values of the gates in ``three_gates``."""
    return {"A": 85.0, "B": 40.0, "C": 2.0}
