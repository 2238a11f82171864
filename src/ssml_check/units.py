# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Numeric parsing for attribute values.

Durations, bounded numbers and the unit grammars (percent, decibels,
semitones, time offsets, identifiers) used by the tag rules.

Durations:
    - ``500ms`` - milliseconds
    - ``2s``, ``2.5s`` - seconds
    - ``2``, ``2.5`` - seconds, accepted on Google only
    - ``infinity`` - only when no ceiling applies

Example:
    >>> parse_duration('2.5s', Platform.GENERIC)
    2500
    >>> number_in_range('300', 50, 200, 100)
    NumberRange(in_range=False, value=200)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .platforms import Platform

INFINITY = math.inf

_NUMBER = r"[0-9]+(?:\.[0-9]+)?"
_IDENT = r"[\w#-]+"

MILLISECONDS = re.compile(r"([0-9]+)ms")
SECONDS = re.compile(rf"({_NUMBER})s")
BARE_SECONDS = re.compile(rf"({_NUMBER})")

PERCENT = re.compile(rf"{_NUMBER}%")
PLUS_PERCENT = re.compile(rf"\+?{_NUMBER}%")
SIGNED_PERCENT = re.compile(rf"[+-]{_NUMBER}%")
SIGNED_DECIBELS = re.compile(rf"[+-]{_NUMBER}dB")
DECIBELS = re.compile(rf"[+-]?{_NUMBER}dB")
SEMITONES = re.compile(rf"[+-]{_NUMBER}st")
COUNT = re.compile(rf"\+?{_NUMBER}")

# Letters and digits of any script plus '-', '_' and '#'
IDENTIFIER = re.compile(_IDENT)
CLOCK_VALUE = re.compile(rf"[+-]?{_NUMBER}(?:h|min|s|ms)")
SYNCBASE_VALUE = re.compile(rf"{_IDENT}\.(?:begin|end)[+-]{_NUMBER}(?:h|min|s|ms)")

# Google time formats: any run of h, m, s, Z, 1, 2, 4, whitespace and punctuation
TIME_FORMAT = re.compile(r"[hmsZ^\s.!?:;()12|4]*")

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def matches(pattern: re.Pattern, value: Any) -> bool:
    """True if value is a string fully matching pattern."""
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def _to_milliseconds(seconds: str) -> int:
    return int(Decimal(seconds) * 1000)


def parse_duration(
    text: Any, platform: Platform | str | None = None, ceiling: int | None = None
) -> int | float | None:
    """Convert a duration to milliseconds.

    Args:
        text: The attribute value.
        platform: Target platform; bare numbers are seconds on Google only.
        ceiling: Optional maximum in milliseconds. When given, ``infinity``
            is rejected and longer durations are invalid.

    Returns:
        Milliseconds as int, INFINITY, or None if the value is invalid.

    Fractional seconds are converted exactly: ``2.5s`` is 2500, not 2000 as
    with a whole-second reading, so ``10.5s`` exceeds a 10000 ms ceiling.
    """
    if not isinstance(text, str):
        return None

    if ceiling is None and text == "infinity":
        return INFINITY

    if match := MILLISECONDS.fullmatch(text):
        time = int(match.group(1))
    elif match := SECONDS.fullmatch(text):
        time = _to_milliseconds(match.group(1))
    elif Platform.coerce(platform) is Platform.GOOGLE and (match := BARE_SECONDS.fullmatch(text)):
        time = _to_milliseconds(match.group(1))
    else:
        return None

    if ceiling is not None and time > ceiling:
        return None
    return time


@dataclass(frozen=True)
class NumberRange:
    """Result of number_in_range."""

    in_range: bool
    value: float


def leading_number(text: Any) -> float | None:
    """Parse the number at the start of text, ignoring whatever follows it.

    Overflowing exponents (``1e400``) count as no number.
    """
    match = _LEADING_FLOAT.match(str(text))
    if match is None:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


def number_in_range(text: Any, low: float, high: float, default: float) -> NumberRange:
    """Read the leading number of text and clamp it to [low, high].

    Syntax (units, sign, suffix) is not checked here: callers pair this
    with a pattern check.

    Returns:
        NumberRange(False, default) if there is no number, NumberRange(False, low|high)
        if it falls outside the bounds, NumberRange(True, value) otherwise.
    """
    value = leading_number(text)
    if value is None:
        return NumberRange(False, default)
    if value < low:
        return NumberRange(False, low)
    if value > high:
        return NumberRange(False, high)
    return NumberRange(True, value)


def format_number(value: float, signed: bool = False) -> str:
    """Shortest plain decimal text for value; signed adds '+' to non-negative values.

    Never uses exponent notation, so the result matches the unit grammars.
    """
    if float(value).is_integer():
        text = str(int(value))
    else:
        text = format(Decimal(repr(float(value))).normalize(), "f")
    if signed and value >= 0:
        return "+" + text
    return text
