"""
Pytest configuration and fixtures for process_flow testing.

This file sets up common fixtures, test configuration, and hooks for pytest.
"""

import pytest

from process_flow.core.stream_registry import StreamRegistry


def pytest_configure(config):
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end network scenarios"
    )


@pytest.fixture
def registry():
    """Provide an empty stream registry."""
    return StreamRegistry()


@pytest.fixture
def feeds(registry):
    """Register s1 = 10.0, s2 = 5.0 and an unset s3; return their handles."""
    s1 = registry.create(index=registry.next_index(), mass_flow=10.0)
    s2 = registry.create(index=registry.next_index(), mass_flow=5.0)
    s3 = registry.create(index=registry.next_index())
    return s1, s2, s3


@pytest.fixture
def demo_yaml():
    """YAML text for a mixer feeding a double reactor."""
    return """
name: "Test Network"
version: "1.0"
streams:
  - index: 1
    mass_flow: 10.0
  - index: 2
    mass_flow: 5.0
  - index: 3
  - name: product_a
  - name: product_b
devices:
  - id: mixer_1
    type: mixer
    inputs_count: 2
    inputs: [s1, s2]
    outputs: [s3]
  - id: reactor_1
    type: reactor
    double: true
    inputs: [s3]
    outputs: [product_a, product_b]
"""
