"""Profile manager service configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, optional_float_env_var, require_env_vars

PROFILE_MANAGER_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class ProfileManagerConfig:
    """Where the profile manager lives and how long to wait for it."""

    base_url: str
    timeout_seconds: float = PROFILE_MANAGER_TIMEOUT_SECONDS
    api_key: str | None = None


def get_profile_manager_config() -> ProfileManagerConfig:
    values = require_env_vars(("WENET_PROFILE_MANAGER_URL",))
    return ProfileManagerConfig(
        base_url=values["WENET_PROFILE_MANAGER_URL"].rstrip("/"),
        timeout_seconds=optional_float_env_var(
            "WENET_PROFILE_MANAGER_TIMEOUT", PROFILE_MANAGER_TIMEOUT_SECONDS
        ),
        api_key=optional_env_var("WENET_API_KEY"),
    )


def find_profile_manager_config() -> ProfileManagerConfig | None:
    """Return the profile manager config, or ``None`` when no URL is configured."""

    if optional_env_var("WENET_PROFILE_MANAGER_URL") is None:
        return None
    return get_profile_manager_config()
