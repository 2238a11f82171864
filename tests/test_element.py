# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for Element."""

import pytest

from ssml_check import Element


class TestElement:
    """Tests for Element construction."""

    def test_missing_attributes_read_as_empty(self):
        """None attributes become an empty dict."""
        assert Element('p').attributes == {}

    def test_malformed_attributes_read_as_empty(self):
        """Non-mapping attributes become an empty dict."""
        assert Element('p', attributes='level=strong').attributes == {}

    def test_none_values_dropped(self):
        """Attributes set to None are dropped."""
        element = Element('break', {'time': '1s', 'strength': None})
        assert element.attributes == {'time': '1s'}

    def test_children_of_leaf(self):
        """A leaf has no elements but an empty children list."""
        element = Element('break')
        assert element.elements is None
        assert element.children == []

    def test_text_node(self):
        """Text nodes have no name."""
        node = Element(text='Hello')
        assert node.is_text
        assert not Element('p').is_text

    def test_equality(self):
        """Elements compare by content."""
        assert Element('p', {'a': '1'}) == Element('p', {'a': '1'})
        assert Element('p') == Element('p', elements=[])
        assert Element('p') != Element('s')
        assert Element('p') != 'p'


class TestElementDict:
    """Tests for dict conversion."""

    def test_from_dict(self):
        """Nested dicts become Elements."""
        doc = Element.from_dict({
            'elements': [{
                'type': 'element',
                'name': 'speak',
                'elements': [
                    {'type': 'text', 'text': 'Hi'},
                    {'type': 'element', 'name': 'break', 'attributes': {'time': '2s'}},
                ],
            }]
        })
        speak = doc.elements[0]
        assert speak.name == 'speak'
        assert speak.elements[0].is_text
        assert speak.elements[1].attributes == {'time': '2s'}

    def test_from_dict_keeps_elements(self):
        """Element instances pass through."""
        element = Element('p')
        assert Element.from_dict(element) is element
        parent = Element.from_dict({'name': 'speak', 'elements': [element]})
        assert parent.elements[0] is element

    def test_from_dict_rejects_other_types(self):
        """Only mappings and Elements are accepted."""
        with pytest.raises(TypeError):
            Element.from_dict(['speak'])

    def test_round_trip_shape(self):
        """to_dict writes the same shape from_dict reads."""
        data = {
            'type': 'element',
            'name': 'prosody',
            'attributes': {'rate': 'slow'},
            'elements': [{'type': 'text', 'text': 'slowly'}],
        }
        assert Element.from_dict(data).to_dict() == data

    def test_to_dict_omits_empty(self):
        """Empty attributes and missing children are left out."""
        assert Element('break').to_dict() == {'type': 'element', 'name': 'break'}
