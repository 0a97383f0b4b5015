"""Settings for merging list-valued fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .env import optional_env_var
from .errors import ConfigurationError


class EmptyListPolicy(StrEnum):
    """What an explicitly empty incoming list means during a merge."""

    KEEP = "keep"  # same as an absent list: stored elements stay
    CLEAR = "clear"  # the field is emptied


@dataclass(frozen=True, slots=True)
class MergeConfig:
    empty_list_policy: EmptyListPolicy = EmptyListPolicy.KEEP


def parse_empty_list_policy(value: str) -> EmptyListPolicy:
    try:
        return EmptyListPolicy(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(policy.value for policy in EmptyListPolicy)
        raise ConfigurationError(
            f"Unsupported empty list policy {value!r} (expected one of: {allowed})"
        ) from exc


def get_merge_config() -> MergeConfig:
    raw = optional_env_var("WENET_EMPTY_LIST_POLICY")
    if raw is None:
        return MergeConfig()
    return MergeConfig(empty_list_policy=parse_empty_list_policy(raw))
