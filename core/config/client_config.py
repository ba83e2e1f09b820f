#!/usr/bin/env python3
"""Album client main configuration

Remote API endpoint and credential settings, combined with logging settings.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

from .logging_config import LoggingConfig


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class ApiClientConfig:
    """Remote collection API settings"""
    base_url: str = "https://api.vimeo.com"
    access_token: Optional[str] = None
    api_version: str = "3.4"
    timeout: float = 30.0
    user_agent: str = "album-client/1.0"

    @property
    def accept_header(self) -> str:
        return f"application/vnd.vimeo.*+json;version={self.api_version}"

    @classmethod
    def from_env(cls) -> 'ApiClientConfig':
        return cls(
            base_url=os.getenv("API_BASE_URL", "https://api.vimeo.com").rstrip('/'),
            access_token=os.getenv("API_ACCESS_TOKEN") or None,
            api_version=os.getenv("API_VERSION", "3.4"),
            timeout=_float(os.getenv("API_TIMEOUT", "30"), 30.0),
            user_agent=os.getenv("API_USER_AGENT", "album-client/1.0"),
        )


@dataclass
class ClientSettings:
    """Top-level settings for the album client"""
    api: ApiClientConfig = field(default_factory=ApiClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'ClientSettings':
        return cls(
            api=ApiClientConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )
