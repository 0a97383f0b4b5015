"""Profile manager adapter: payload schemas, translation and HTTP client."""

from __future__ import annotations

from .client import ProfileManagerAPIError, ProfileManagerClient
from .translator import (
    community_from_payload,
    community_to_payload,
    profile_from_payload,
    profile_to_payload,
)

__all__ = [
    "ProfileManagerAPIError",
    "ProfileManagerClient",
    "community_from_payload",
    "community_to_payload",
    "profile_from_payload",
    "profile_to_payload",
]
