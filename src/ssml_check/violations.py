# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Violation records produced by the tag rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Attribute name used when a required attribute is missing or the whole
# element is not allowed.
NONE = "none"


@dataclass(frozen=True)
class Violation:
    """One rule breach that was repaired.

    Attributes:
        tag: Name of the element that broke the rule.
        attribute: Offending attribute, ``"none"`` for a missing required
            attribute or a disallowed element, None for structural problems.
        value: The rejected value. None when the attribute itself was not
            recognised.
        kind: Always ``"tag"``.
    """

    tag: str | None
    attribute: str | None = None
    value: Any = None
    kind: str = "tag"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form, leaving out attribute and value when absent."""
        result: dict[str, Any] = {"kind": self.kind, "tag": self.tag}
        if self.attribute is not None:
            result["attribute"] = self.attribute
        if self.value is not None:
            result["value"] = self.value
        return result
