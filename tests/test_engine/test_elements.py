"""Tests for the element model."""

import pytest

from element_engine.elements import (
    BEATS,
    CYCLIC_ELEMENTS,
    SYMBOLS,
    Element,
    InvalidDepthError,
    element_at,
    rotate,
    successor,
)


class TestElement:
    def test_absolute_order(self):
        assert list(Element) == [
            Element.WATER,
            Element.FIRE,
            Element.EARTH,
            Element.AIR,
            Element.DRAW,
        ]
        assert SYMBOLS == "WVALD"

    def test_symbols(self):
        assert Element.WATER.symbol == "W"
        assert Element.FIRE.symbol == "V"
        assert Element.EARTH.symbol == "A"
        assert Element.AIR.symbol == "L"
        assert Element.DRAW.symbol == "D"
        assert str(Element.FIRE) == "V"

    def test_from_symbol(self):
        for element in Element:
            assert Element.from_symbol(element.symbol) is element

    def test_from_unknown_symbol_fails(self):
        with pytest.raises(ValueError):
            Element.from_symbol("X")

    def test_only_draw_is_wildcard(self):
        assert Element.DRAW.is_wildcard
        assert not any(e.is_wildcard for e in CYCLIC_ELEMENTS)

    def test_beats_cycle(self):
        """Each cyclic element beats the next one in absolute order."""
        assert BEATS[Element.WATER] is Element.FIRE
        assert BEATS[Element.FIRE] is Element.EARTH
        assert BEATS[Element.EARTH] is Element.AIR
        assert BEATS[Element.AIR] is Element.WATER


class TestElementAt:
    def test_depths_map_to_absolute_order(self):
        assert element_at(1) is Element.WATER
        assert element_at(2) is Element.FIRE
        assert element_at(3) is Element.EARTH
        assert element_at(4) is Element.AIR
        assert element_at(5) is Element.DRAW

    @pytest.mark.parametrize("depth", [0, 6, -1])
    def test_out_of_range_depth_fails(self, depth):
        with pytest.raises(InvalidDepthError):
            element_at(depth)


class TestRotate:
    def test_rotations_from_water(self):
        assert rotate(Element.WATER, 1) is Element.AIR
        assert rotate(Element.WATER, 2) is Element.EARTH
        assert rotate(Element.WATER, 3) is Element.FIRE
        assert rotate(Element.WATER, 4) is Element.WATER

    def test_depth_one_beats_previous(self):
        for element in CYCLIC_ELEMENTS:
            assert BEATS[rotate(element, 1)] is element

    def test_depth_three_is_beaten_by_previous(self):
        for element in CYCLIC_ELEMENTS:
            assert BEATS[element] is rotate(element, 3)

    def test_depth_four_is_identity(self):
        for element in CYCLIC_ELEMENTS:
            assert rotate(element, 4) is element

    def test_depth_five_is_wildcard(self):
        for element in Element:
            assert rotate(element, 5) is Element.DRAW

    def test_wildcard_previous_rotates_as_air(self):
        for depth in range(1, 5):
            assert rotate(Element.DRAW, depth) is rotate(Element.AIR, depth)
        assert rotate(Element.DRAW, 4) is Element.AIR

    def test_successor_walks_full_cycle(self):
        current = Element.WATER
        seen = []
        for _ in range(4):
            current = successor(current)
            seen.append(current)
        assert seen == [Element.AIR, Element.EARTH, Element.FIRE, Element.WATER]

    def test_missing_previous_fails(self):
        with pytest.raises(InvalidDepthError):
            rotate(None, 1)

    @pytest.mark.parametrize("depth", [0, 6])
    def test_out_of_range_depth_fails(self, depth):
        with pytest.raises(InvalidDepthError):
            rotate(Element.WATER, depth)
