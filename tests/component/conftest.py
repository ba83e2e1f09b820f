"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── tdd/         Client behaviour against mocked transports
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import MockTransport


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mock_transport() -> MockTransport:
    """Fresh mock transport"""
    return MockTransport()


@pytest.fixture
def album_client(mock_transport):
    """AlbumClient wired to the mock transport"""
    from album_client import AlbumClient
    return AlbumClient(transport=mock_transport)
