# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Sanitize speech markup for a target voice platform and locale.

Each supported tag has a rule that drops unknown attributes, replaces
illegal values with safe defaults, fills in required attributes and removes
or unwraps elements that are not allowed where they stand. Every repair is
reported as a Violation.

Example:
    >>> from ssml_check import Element, sanitize
    >>> doc = Element.from_dict({'elements': [{'name': 'speak', 'elements': [
    ...     {'name': 'prosody', 'attributes': {'rate': '10%'}},
    ... ]}]})
    >>> [v.to_dict() for v in sanitize(doc, 'amazon', 'en-US')]
    [{'kind': 'tag', 'tag': 'prosody', 'attribute': 'rate', 'value': '10%'}]
    >>> doc.elements[0].elements[0].attributes
    {'rate': '20%'}
"""

from ssml_check.actions import Action, Outcome, apply_outcome
from ssml_check.checker import TagCheck, TagCheckerBase, UnknownTagError, rule
from ssml_check.element import Element
from ssml_check.platforms import LOCALES, Platform
from ssml_check.ssml import (
    VALIDATORS,
    SsmlChecker,
    check_amazon_domain,
    check_amazon_effect,
    check_amazon_emotion,
    check_audio,
    check_break,
    check_desc,
    check_emphasis,
    check_lang,
    check_media,
    check_p,
    check_par,
    check_phoneme,
    check_prosody,
    check_s,
    check_say_as,
    check_seq,
    check_speak,
    check_sub,
    check_voice,
    check_w,
    default_checker,
)
from ssml_check.units import INFINITY, NumberRange, number_in_range, parse_duration
from ssml_check.violations import Violation
from ssml_check.walker import sanitize

__all__ = [
    "Action",
    "Element",
    "INFINITY",
    "LOCALES",
    "NumberRange",
    "Outcome",
    "Platform",
    "SsmlChecker",
    "TagCheck",
    "TagCheckerBase",
    "UnknownTagError",
    "VALIDATORS",
    "Violation",
    "apply_outcome",
    "check_amazon_domain",
    "check_amazon_effect",
    "check_amazon_emotion",
    "check_audio",
    "check_break",
    "check_desc",
    "check_emphasis",
    "check_lang",
    "check_media",
    "check_p",
    "check_par",
    "check_phoneme",
    "check_prosody",
    "check_s",
    "check_say_as",
    "check_seq",
    "check_speak",
    "check_sub",
    "check_voice",
    "check_w",
    "default_checker",
    "number_in_range",
    "parse_duration",
    "rule",
    "sanitize",
]
