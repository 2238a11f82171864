# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Element module - nodes of an already-parsed speech markup tree.

An Element gathers three things:
    - *name*: the tag name (None for text nodes and the document root)
    - *attributes*: dict of attribute name to value
    - *elements*: ordered list of child Elements, None for leaves

The tree belongs to the caller. Tag rules only edit attributes in place
and delete or splice existing children; they never create elements.

Example:
    >>> doc = Element.from_dict({
    ...     'elements': [{'name': 'speak', 'elements': [
    ...         {'name': 'break', 'attributes': {'time': '2s'}},
    ...     ]}]
    ... })
    >>> doc.elements[0].elements[0].attributes
    {'time': '2s'}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from genro_toolbox import safe_is_instance


class Element:
    """A node of the markup tree.

    Attributes:
        name: Tag name, None for text nodes and for the document itself.
        elements: Child elements in document order, or None for a leaf.
        text: Text content of a text node.
    """

    __slots__ = ("name", "_attributes", "elements", "text")

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        elements: list[Element] | None = None,
        text: str | None = None,
    ) -> None:
        self.name = name
        self._attributes: dict[str, Any] = {}
        self.attributes = attributes
        self.elements = elements
        self.text = text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return False
        return (
            self.name == other.name
            and self._attributes == other._attributes
            and (self.elements or []) == (other.elements or [])
            and self.text == other.text
        )

    def __repr__(self) -> str:
        if self.is_text:
            return f"Element(text={self.text!r})"
        return f"Element({self.name!r}, {self._attributes!r})"

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    @property
    def attributes(self) -> dict[str, Any]:
        """Attribute dict, never None."""
        return self._attributes

    @attributes.setter
    def attributes(self, value: Mapping[str, Any] | None) -> None:
        # A missing or malformed attribute set reads as empty
        if not isinstance(value, Mapping):
            value = {}
        self._attributes = {k: v for k, v in value.items() if v is not None}

    @property
    def is_text(self) -> bool:
        return self.text is not None and self.name is None

    @property
    def children(self) -> list[Element]:
        """Child elements, an empty list for leaves."""
        return self.elements or []

    # -------------------------------------------------------------------------
    # Dict conversion
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Any) -> Element:
        """Build a tree from nested dicts.

        Accepts the ``{name, attributes, elements, text}`` shape produced by
        XML-to-JSON converters. Element instances are returned unchanged.
        """
        if safe_is_instance(data, "ssml_check.element.Element"):
            return data
        if not isinstance(data, Mapping):
            raise TypeError(f"cannot build an Element from {type(data).__name__}")

        children = data.get("elements")
        elements = None
        if children is not None:
            elements = [cls.from_dict(child) for child in children]

        text = data.get("text")
        if text is not None and not isinstance(text, str):
            text = str(text)

        return cls(
            name=data.get("name"),
            attributes=data.get("attributes"),
            elements=elements,
            text=text,
        )

    def to_dict(self) -> dict[str, Any]:
        """Nested dict form, the inverse of from_dict."""
        if self.is_text:
            return {"type": "text", "text": self.text}
        result: dict[str, Any] = {}
        if self.name is not None:
            result["type"] = "element"
            result["name"] = self.name
        if self._attributes:
            result["attributes"] = dict(self._attributes)
        if self.elements is not None:
            result["elements"] = [child.to_dict() for child in self.elements]
        return result
