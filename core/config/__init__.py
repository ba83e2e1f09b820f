#!/usr/bin/env python3
"""Modular configuration for the album client

Configuration hierarchy:
- client_config: remote API endpoint, credentials and timeouts
- logging_config: logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .client_config import ApiClientConfig, ClientSettings

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": ".env.development",
    "dev": ".env.development",
    "testing": ".env.test",
    "test": ".env.test",
    "production": ".env.production",
}
env_file = env_files.get(env, ".env.development")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = ClientSettings.from_env()

def get_settings() -> ClientSettings:
    """Get global settings instance"""
    return settings

def reload_settings() -> ClientSettings:
    """Reload settings from environment"""
    global settings
    settings = ClientSettings.from_env()
    return settings

__all__ = [
    'ClientSettings',
    'ApiClientConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]
