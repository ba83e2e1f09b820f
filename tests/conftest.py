"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Client tests against a mocked transport
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from typing import Any, Dict

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Set testing environment BEFORE any project imports
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("API_BASE_URL", "https://api.test.local")

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    make_album_payload,
    make_album_page_payload,
)


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Centralized test configuration"""

    # Ids seen in recorded API fixtures
    PUBLIC_USER_ID = 115220313
    USER_ID = 2433258
    ALBUM_ID = 10303859

    BASE_URL = "https://api.test.local"
    ACCESS_TOKEN = "test-access-token"
    HTTP_TIMEOUT = 30


@pytest.fixture(scope="session")
def test_config() -> TestConfig:
    """Provide test configuration"""
    return TestConfig()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_album() -> Dict[str, Any]:
    """Album payload as returned by the API"""
    return make_album_payload(album_id=TestConfig.ALBUM_ID)


@pytest.fixture
def sample_album_page() -> Dict[str, Any]:
    """Single-page album list payload for /me/albums"""
    return make_album_page_payload(
        [make_album_payload(album_id=TestConfig.ALBUM_ID)],
        base_path="/me/albums",
    )
