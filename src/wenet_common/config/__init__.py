"""Application configuration helpers."""

from __future__ import annotations

from .env import require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .merge import EmptyListPolicy, MergeConfig, get_merge_config, parse_empty_list_policy
from .profile_manager import (
    ProfileManagerConfig,
    find_profile_manager_config,
    get_profile_manager_config,
)

__all__ = [
    "ConfigurationError",
    "EmptyListPolicy",
    "MergeConfig",
    "MissingConfigurationError",
    "ProfileManagerConfig",
    "configure_logging",
    "find_profile_manager_config",
    "get_merge_config",
    "get_profile_manager_config",
    "parse_empty_list_policy",
    "require_env_vars",
]
