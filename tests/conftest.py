"""
Shared pytest fixtures for hostvalidate tests.

These fixtures provide scripted hosts, loggers and an uncolored ledger that
writes to memory, so no test touches the real machine.
"""

import io

import pytest

from hostvalidate.ledger import SeverityLedger
from tests.fixtures import MockLogger, make_empty_host, make_healthy_host


# =============================================================================
# Logger Fixtures
# =============================================================================

@pytest.fixture
def mock_logger():
    """
    Create a logger that captures messages per level.

    Usage:
        def test_something(mock_logger):
            some_function(logger=mock_logger)
            assert mock_logger.has_message('debug', 'expected')
    """
    return MockLogger()


# =============================================================================
# Host Fixtures
# =============================================================================

@pytest.fixture
def healthy_host(mock_logger):
    """A host on which every check passes."""
    return make_healthy_host(logger=mock_logger)


@pytest.fixture
def empty_host(mock_logger):
    """A host with no tools, files or directories."""
    return make_empty_host(logger=mock_logger)


# =============================================================================
# Ledger Fixtures
# =============================================================================

@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def ledger(output):
    """Uncolored ledger writing to the `output` StringIO."""
    return SeverityLedger(stream=output, use_colors=False)
