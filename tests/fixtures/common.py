"""
Common/Shared Fixtures

Base factories and generators used across test layers.
"""
import random
from datetime import datetime, timezone


def make_user_id() -> int:
    """Generate a numeric user ID"""
    return random.randint(1_000_000, 999_999_999)


def make_album_id() -> int:
    """Generate a numeric album ID"""
    return random.randint(1_000_000, 99_999_999)


def make_timestamp() -> str:
    """Generate current UTC timestamp"""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()
