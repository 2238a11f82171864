# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Target platforms and locales.

A platform selects which attributes and values a voice engine accepts.
Anything that is not a known platform is treated as the generic baseline.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Platform(str, Enum):
    """Voice-synthesis platform."""

    GENERIC = "generic"
    AMAZON = "amazon"
    GOOGLE = "google"

    @classmethod
    def coerce(cls, value: Any) -> Platform:
        """Return the Platform for value, GENERIC when unknown or missing."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERIC


LOCALES: tuple[str, ...] = (
    "en-US",
    "en-GB",
    "en-IN",
    "en-AU",
    "en-CA",
    "de-DE",
    "es-ES",
    "it-IT",
    "ja-JP",
    "fr-FR",
)

DEFAULT_LOCALE = "en-US"
