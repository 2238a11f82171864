# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Depth-first driver that runs the tag rules over a whole tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .checker import UnknownTagError
from .ssml import default_checker

if TYPE_CHECKING:
    from .checker import TagCheckerBase
    from .element import Element
    from .platforms import Platform
    from .violations import Violation

logger = logging.getLogger(__name__)


def sanitize(
    document: Element,
    platform: Platform | str | None = None,
    locale: str | None = None,
    checker: TagCheckerBase | None = None,
    strict: bool = False,
) -> list[Violation]:
    """Check and repair every element below document.

    The document node itself is not checked: pass the parsed document (whose
    single child is usually ``speak``) rather than the root tag.

    Args:
        document: Container whose children are walked.
        platform: Target platform.
        locale: Target locale code.
        checker: Rules to apply, the default SsmlChecker if None.
        strict: Raise on tags without a rule instead of leaving them alone.

    Returns:
        All violations, in document order.

    Raises:
        UnknownTagError: If strict and a tag has no rule.
    """
    if checker is None:
        checker = default_checker

    violations: list[Violation] = []
    _walk(document, checker, violations, platform, locale, strict)
    logger.debug("Sanitized document: %d violations", len(violations))
    return violations


def _walk(
    parent: Element,
    checker: TagCheckerBase,
    violations: list[Violation],
    platform: Platform | str | None,
    locale: str | None,
    strict: bool,
) -> None:
    index = 0
    while index < len(parent.children):
        element = parent.elements[index]
        if element.name is None:
            index += 1
            continue

        logger.debug("Checking '%s' at %d", element.name, index)
        if element.name in checker:
            # A removed element leaves its children (if any) at index: look again
            if checker.check(parent, index, violations, element, platform, locale):
                continue
        elif strict:
            raise UnknownTagError(element.name)
        else:
            logger.debug("No rule for '%s', leaving it as is", element.name)

        _walk(element, checker, violations, platform, locale, strict)
        index += 1
