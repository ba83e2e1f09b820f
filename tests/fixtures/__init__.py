"""
Shared Test Fixtures

Centralized factories used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - album_fixtures.py: Album API payload factories
"""

# Common utilities
from .common import (
    make_user_id,
    make_album_id,
    make_timestamp,
)

# Album payload fixtures
from .album_fixtures import (
    make_album_payload,
    make_album_page_payload,
    make_error_payload,
)

__all__ = [
    "make_user_id",
    "make_album_id",
    "make_timestamp",
    "make_album_payload",
    "make_album_page_payload",
    "make_error_payload",
]
