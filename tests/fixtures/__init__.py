"""
Test fixtures for hostvalidate.

This package contains the scripted host, mock logger and sample tool output
used across unit and integration tests.
"""

from tests.fixtures.mock_logger import MockLogger
from tests.fixtures.fake_host import FakeHost, UBUNTU
from tests.fixtures.sample_data import (
    make_healthy_host,
    make_empty_host,
    healthy_responses,
    HEALTHY_TOOLS,
)

__all__ = [
    'MockLogger',
    'FakeHost',
    'UBUNTU',
    'make_healthy_host',
    'make_empty_host',
    'healthy_responses',
    'HEALTHY_TOOLS',
]
