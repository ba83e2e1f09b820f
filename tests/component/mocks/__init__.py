"""
Component Test Mocks

Mock implementations that replace real I/O dependencies (HTTP transport).
"""

from .http_mock import MockTransport

__all__ = [
    'MockTransport',
]
