# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""TagCheckerBase - registry of per-tag rules.

A checker subclass declares one method per tag with the @rule decorator.
__init_subclass__ collects them into ``_rules`` so a driver can dispatch
by tag name:

    class MyChecker(TagCheckerBase):
        @rule(tags='p, s')
        def paragraph(self, check):
            check.attributes({})

        @rule(children='par, seq, media')
        def par(self, check):
            pass

Each rule receives a TagCheck holding a working copy of the element's
attributes and records violations and the tree action on it. Rules never
touch the tree: evaluate() returns an Outcome and check() applies it.

Tag names are looked up with ':' folded to '-', so 'amazon:effect' and
'amazon-effect' reach the same rule.
"""

from __future__ import annotations

import logging
from abc import ABC
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from genro_toolbox import smartsplit

from .actions import Action, Outcome, apply_outcome
from .platforms import Platform
from .violations import NONE, Violation

if TYPE_CHECKING:
    from .element import Element

logger = logging.getLogger(__name__)

Validator = Callable[..., bool]


class UnknownTagError(KeyError):
    """Raised when no rule is registered for a tag."""


def _parse_tags(tags: str | tuple[str, ...]) -> list[str]:
    """Parse tags parameter into a list of tag names."""
    if isinstance(tags, str):
        return [t.strip() for t in smartsplit(tags, ",") if t.strip()]
    return list(tags)


def tag_key(tag: str | None) -> str:
    """Registry key for a tag name."""
    return (tag or "").replace(":", "-")


def rule(
    tags: str | tuple[str, ...] = "",
    children: str | tuple[str, ...] | None = None,
) -> Callable:
    """Decorator to mark a method as the rule for one or more tags.

    Args:
        tags: Tag names this method checks, as 'a, b' or ('a', 'b').
            If empty, the method name is used with '_' turned into '-'.
        children: Tags allowed as direct children. Other children are
            dropped and reported before the rule runs. None means any.
    """

    def decorator(func: Callable) -> Callable:
        func._rule = {"tags": tags, "children": children}  # type: ignore[attr-defined]
        return func

    return decorator


class TagCheck:
    """Working state while one element is checked.

    Attributes:
        element: The element under check (not modified).
        parent: Its parent, None for a root element.
        index: Its position among the parent's children.
        platform: Target platform.
        locale: Target locale code.
        attrs: Working copy of the attributes, corrected in place.
    """

    def __init__(
        self,
        element: Element,
        parent: Element | None = None,
        index: int = 0,
        platform: Platform | str | None = None,
        locale: str | None = None,
    ) -> None:
        self.element = element
        self.parent = parent
        self.index = index
        self.platform = Platform.coerce(platform)
        self.locale = locale
        self.attrs: dict[str, Any] = dict(element.attributes)
        self.violations: list[Violation] = []
        self.action = Action.KEEP
        self.children: list[Element] | None = None

    @property
    def tag(self) -> str | None:
        return self.element.name

    @property
    def google(self) -> bool:
        return self.platform is Platform.GOOGLE

    @property
    def amazon(self) -> bool:
        return self.platform is Platform.AMAZON

    def report(self, attribute: str | None = None, value: Any = None) -> None:
        """Record a violation on this element."""
        self.violations.append(Violation(self.tag, attribute, value))

    def attributes(self, spec: dict[str, Any]) -> None:
        """Check present attributes against spec.

        Args:
            spec: Maps each recognised attribute to its domain, or to None
                when any value is accepted. Attributes are checked in spec
                order; unrecognised ones are then reported without a value
                and dropped.
        """
        order = {name: position for position, name in enumerate(spec)}
        for name in sorted(self.attrs, key=lambda n: order.get(n, len(order))):
            value = self.attrs[name]
            if name not in spec:
                self.report(name)
                del self.attrs[name]
                continue
            domain = spec[name]
            if domain is None or domain.accepts(value, self):
                continue
            self.report(name, value)
            repaired = domain.repair(value, self)
            if repaired is None:
                del self.attrs[name]
            else:
                self.attrs[name] = repaired

    def require(self, **defaults: str) -> None:
        """Fill in missing required attributes, reporting once if any was missing."""
        missing = [name for name in defaults if name not in self.attrs]
        if missing:
            self.report(NONE)
            for name in missing:
                self.attrs[name] = defaults[name]

    def remove(self) -> None:
        """Drop the element from its parent."""
        self.action = Action.REMOVE

    def unwrap(self) -> None:
        """Put the element's children in its place, or drop it if it has none."""
        if self.element.children:
            self.action = Action.REPLACE_WITH_CHILDREN
        else:
            self.action = Action.REMOVE

    def keep_children(self, allowed: frozenset[str]) -> None:
        """Drop direct children whose tag is not in allowed, in one pass."""
        kept = []
        for child in self.element.children:
            if child.name in allowed:
                kept.append(child)
            else:
                self.violations.append(Violation(self.tag, value=child.name))
        if len(kept) != len(self.element.children):
            self.children = kept

    def outcome(self) -> Outcome:
        return Outcome(
            attributes=self.attrs,
            violations=self.violations,
            action=self.action,
            children=self.children,
        )


class TagCheckerBase(ABC):
    """Abstract base class for tag checkers.

    Subclasses define rules with @rule; the lookup table is built once per
    class. Configuration lives in class attributes that subclasses may
    override.
    """

    _rules: dict[str, dict[str, Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build _rules from @rule decorated methods."""
        super().__init_subclass__(**kwargs)

        # Inherit _rules from base classes
        cls._rules = {}
        for base in cls.__mro__[1:]:
            if hasattr(base, "_rules"):
                cls._rules.update(base._rules)
                break

        for name, obj in list(cls.__dict__.items()):
            rule_info = getattr(obj, "_rule", None)
            if not rule_info:
                continue

            tag_list = _parse_tags(rule_info["tags"]) or [name.replace("_", "-")]
            children = rule_info["children"]
            allowed = None if children is None else frozenset(_parse_tags(children))

            for tag in tag_list:
                cls._rules[tag_key(tag)] = {"handler": name, "children": allowed}

    @property
    def tags(self) -> list[str]:
        """Registered tag names."""
        return list(self._rules)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag_key(tag) in self._rules

    def _get_rule(self, tag: str | None) -> dict[str, Any]:
        try:
            return self._rules[tag_key(tag)]
        except KeyError:
            raise UnknownTagError(tag) from None

    def evaluate(
        self,
        element: Element,
        parent: Element | None = None,
        index: int = 0,
        platform: Platform | str | None = None,
        locale: str | None = None,
        tag: str | None = None,
    ) -> Outcome:
        """Check element without touching the tree.

        Args:
            tag: Rule to apply; defaults to the one for element.name.

        Raises:
            UnknownTagError: If no rule is registered for the tag.
        """
        rule_info = self._get_rule(tag or element.name)
        check = TagCheck(element, parent, index, platform, locale)
        if rule_info["children"] is not None:
            check.keep_children(rule_info["children"])
        getattr(self, rule_info["handler"])(check)
        return check.outcome()

    def check(
        self,
        parent: Element | None,
        index: int,
        violations: list[Violation],
        element: Element,
        platform: Platform | str | None = None,
        locale: str | None = None,
        tag: str | None = None,
    ) -> bool:
        """Check element, repair it in the tree and append its violations.

        Returns:
            True if element was removed or replaced in parent.elements.
        """
        outcome = self.evaluate(element, parent, index, platform, locale, tag)
        violations.extend(outcome.violations)
        if outcome.violations:
            logger.debug("'%s': %d violations", element.name, len(outcome.violations))
        return apply_outcome(outcome, parent, index, element)

    def validator(self, tag: str) -> Validator:
        """Return the (parent, index, violations, element, platform, locale) callable for tag.

        Raises:
            UnknownTagError: If no rule is registered for tag.
        """
        self._get_rule(tag)

        def validate(
            parent: Element | None,
            index: int,
            violations: list[Violation],
            element: Element,
            platform: Platform | str | None = None,
            locale: str | None = None,
        ) -> bool:
            return self.check(parent, index, violations, element, platform, locale, tag)

        validate.__name__ = "check_" + tag_key(tag).replace("-", "_")
        return validate
