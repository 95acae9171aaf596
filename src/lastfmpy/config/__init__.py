"""Application configuration helpers."""

from __future__ import annotations

from .env import load_env_file, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .lastfm import (
    LASTFM_BASE_URL,
    LastFmConfig,
    default_lastfm_resilience,
    get_lastfm_config,
)
from .logging import configure_logging

__all__ = [
    "LASTFM_BASE_URL",
    "ConfigurationError",
    "LastFmConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "default_lastfm_resilience",
    "get_lastfm_config",
    "load_env_file",
    "require_env_var",
    "require_env_vars",
]
