#!/usr/bin/env python3
"""
Core Module

Shared infrastructure for remote API clients.

COMPONENTS:
    - config/: dataclass settings loaded from the environment
    - logger.py: logger setup from LoggingConfig
    - auth.py: bearer token authentication for httpx
    - service_client_base.py: httpx transport that dispatches request descriptors

USAGE:
    from core.config import get_settings
    from core.service_client_base import HttpTransport

    transport = HttpTransport(get_settings().api)
"""

__version__ = "1.0.0"
