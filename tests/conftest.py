# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pytest configuration and fixtures."""

import pytest

from ssml_check import Element


@pytest.fixture
def tree():
    """Build a parent holding one element; returns (parent, element).

    Usage:
        parent, element = tree('break', {'time': '2s'})
        parent, element = tree('desc', parent='audio')
        parent, element = tree('par', children=['media', 'foo'])
        parent, element = tree('amazon:emotion', children=['#Hi'])  # '#' marks text
    """

    def build(name, attributes=None, children=None, parent='speak', text=None):
        elements = None
        if children is not None:
            elements = [
                Element(text=child[1:]) if child.startswith('#') else Element(child)
                for child in children
            ]
        if text is not None:
            elements = (elements or []) + [Element(text=text)]
        element = Element(name, attributes, elements)
        return Element(parent, elements=[element]), element

    return build


@pytest.fixture
def violations():
    """Empty violation list."""
    return []
