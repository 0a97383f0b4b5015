"""Enumerations shared by the profile models."""

from __future__ import annotations

from enum import StrEnum


class PlannedActivityStatus(StrEnum):
    CONFIRMED = "confirmed"
    TENTATIVE = "tentative"
    CANCELLED = "cancelled"


class Gender(StrEnum):
    FEMALE = "F"
    MALE = "M"
    OTHER = "O"
    NON_BINARY = "non-binary"
    NOT_SAY = "not-say"
