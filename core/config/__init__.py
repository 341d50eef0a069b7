#!/usr/bin/env python3
"""Modular configuration system for the wish service

Configuration hierarchy:
- wish_config: Ledger policy and collaborator endpoints
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .wish_config import WishServiceConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = WishServiceConfig.from_env()

def get_settings() -> WishServiceConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> WishServiceConfig:
    """Reload settings from environment"""
    global settings
    settings = WishServiceConfig.from_env()
    return settings

__all__ = [
    'WishServiceConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]
