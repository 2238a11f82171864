# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tree edits decided by a tag rule.

A rule never edits the tree while it runs: it returns an Outcome, and
apply_outcome() carries it out on the parent's children.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .element import Element
    from .violations import Violation

logger = logging.getLogger(__name__)


class Action(Enum):
    """What happens to the checked element."""

    KEEP = "keep"
    REMOVE = "remove"
    REPLACE_WITH_CHILDREN = "replace_with_children"


@dataclass
class Outcome:
    """Result of checking one element.

    Attributes:
        attributes: Corrected attributes for a kept element.
        violations: Violations found, in report order.
        action: What to do with the element.
        children: Filtered children to install on a kept element, or None
            to leave the children alone.
    """

    attributes: dict[str, Any] = field(default_factory=dict)
    violations: list[Violation] = field(default_factory=list)
    action: Action = Action.KEEP
    children: list[Element] | None = None

    @property
    def removed(self) -> bool:
        return self.action is not Action.KEEP


def _locate(parent: Element, index: int, element: Element) -> int:
    siblings = parent.children
    if 0 <= index < len(siblings) and siblings[index] is element:
        return index
    for position, sibling in enumerate(siblings):
        if sibling is element:
            return position
    raise ValueError(f"element '{element.name}' is not a child of '{parent.name}'")


def apply_outcome(
    outcome: Outcome, parent: Element | None, index: int, element: Element
) -> bool:
    """Apply outcome to the tree.

    Args:
        outcome: What the rule decided.
        parent: Parent of element, None for a root element.
        index: Position of element in parent.elements.
        element: The checked element.

    Returns:
        True if element is no longer at parent.elements[index].

    Raises:
        ValueError: If element is not among parent's children.
    """
    if outcome.action is Action.KEEP:
        attributes = element.attributes
        if attributes != outcome.attributes:
            attributes.clear()
            attributes.update(outcome.attributes)
        if outcome.children is not None:
            element.elements[:] = outcome.children
        return False

    if parent is None:
        logger.warning("Cannot remove root element '%s': it has no parent", element.name)
        return False

    position = _locate(parent, index, element)

    if outcome.action is Action.REPLACE_WITH_CHILDREN:
        parent.elements[position : position + 1] = list(element.children)
        logger.debug(
            "Replaced '%s' at %d with %d children", element.name, position, len(element.children)
        )
    else:
        del parent.elements[position]
        logger.debug("Removed '%s' at %d", element.name, position)
    return True
