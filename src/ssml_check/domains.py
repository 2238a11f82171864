# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attribute value domains for tag rules.

A domain answers two questions about an attribute value:
    - accepts(value, check): is the value legal?
    - repair(value, check): what replaces an illegal value? None means the
      attribute is dropped.

Domain classes:
    OneOf: exact-match enumeration
    Matches: regex pattern with a fixed replacement
    Duration: time value (see units.parse_duration)
    Measure: pattern plus numeric bounds, repaired by clamping
    Identifier: name token, repaired from the element index
    AnyOf: union of domains, repaired by the last one

The ``check`` argument is the TagCheck in progress, giving access to the
platform, the element index and the other (already corrected) attributes.

Example:
    >>> STRENGTH = OneOf(choices('none, x-weak, weak, medium'), default='medium')
    >>> STRENGTH.accepts('loud', check)
    False
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from genro_toolbox import smartsplit

from .units import format_number, matches, number_in_range, parse_duration

if TYPE_CHECKING:
    from .checker import TagCheck


def choices(spec: str) -> tuple[str, ...]:
    """Split a comma-separated list of values: 'a, b, c' -> ('a', 'b', 'c')."""
    return tuple(item.strip() for item in smartsplit(spec, ",") if item.strip())


@dataclass(frozen=True)
class OneOf:
    """Value must be one of a fixed set of strings."""

    values: tuple[str, ...]
    default: str | None = None

    def accepts(self, value: Any, check: TagCheck) -> bool:
        return value in self.values

    def repair(self, value: Any, check: TagCheck) -> str | None:
        return self.default


@dataclass(frozen=True)
class Matches:
    """Value must fully match a regex."""

    pattern: re.Pattern
    default: str | None = None

    def accepts(self, value: Any, check: TagCheck) -> bool:
        return matches(self.pattern, value)

    def repair(self, value: Any, check: TagCheck) -> str | None:
        return self.default


@dataclass(frozen=True)
class Duration:
    """Value must be a duration, optionally no longer than ceiling ms."""

    ceiling: int | None = None
    default: str | None = None

    def accepts(self, value: Any, check: TagCheck) -> bool:
        return parse_duration(value, check.platform, self.ceiling) is not None

    def repair(self, value: Any, check: TagCheck) -> str | None:
        return self.default


@dataclass(frozen=True)
class Measure:
    """Number with a unit, matching pattern and lying in [low, high].

    An illegal value is replaced by its number clamped to the bounds, or by
    fallback when it has no leading number.
    """

    pattern: re.Pattern
    low: float
    high: float
    fallback: float
    unit: str
    signed: bool = False

    def accepts(self, value: Any, check: TagCheck) -> bool:
        if not matches(self.pattern, value):
            return False
        return number_in_range(value, self.low, self.high, self.fallback).in_range

    def repair(self, value: Any, check: TagCheck) -> str | None:
        number = number_in_range(value, self.low, self.high, self.fallback).value
        return format_number(number, signed=self.signed) + self.unit


@dataclass(frozen=True)
class Identifier:
    """Value must be an identifier; repaired to one derived from the element index."""

    pattern: re.Pattern
    prefix: str = "id_"

    def accepts(self, value: Any, check: TagCheck) -> bool:
        return matches(self.pattern, value)

    def repair(self, value: Any, check: TagCheck) -> str | None:
        return f"{self.prefix}{check.index}"


class AnyOf:
    """Value must satisfy at least one domain; the last one repairs it."""

    def __init__(self, *options: Any) -> None:
        if not options:
            raise ValueError("AnyOf needs at least one domain")
        self.options = options

    def __repr__(self) -> str:
        return f"AnyOf{self.options!r}"

    def accepts(self, value: Any, check: TagCheck) -> bool:
        return any(option.accepts(value, check) for option in self.options)

    def repair(self, value: Any, check: TagCheck) -> str | None:
        return self.options[-1].repair(value, check)
