"""Element model: the four cyclic elements, the wildcard, and rotation."""

from __future__ import annotations

from enum import IntEnum


class InvalidDepthError(ValueError):
    """Raised when a depth or previous element cannot be rotated."""

    pass


class Element(IntEnum):
    """Game elements in absolute order.

    Symbols follow the Dutch names (Water, Vuur, Aarde, Lucht). DRAW is the
    wildcard: it ties against everything and is available once per match.
    """

    WATER = 0
    FIRE = 1
    EARTH = 2
    AIR = 3
    DRAW = 4

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def is_wildcard(self) -> bool:
        return self is Element.DRAW

    @classmethod
    def from_symbol(cls, symbol: str) -> Element:
        """Look up an element by its one-letter symbol.

        Raises:
            ValueError: If the symbol is not one of W, V, A, L, D.
        """
        try:
            return _BY_SYMBOL[symbol]
        except KeyError:
            raise ValueError(f"Unknown element symbol: {symbol!r}") from None


_SYMBOLS = {
    Element.WATER: "W",
    Element.FIRE: "V",
    Element.EARTH: "A",
    Element.AIR: "L",
    Element.DRAW: "D",
}
_BY_SYMBOL = {symbol: element for element, symbol in _SYMBOLS.items()}

SYMBOLS = "".join(_SYMBOLS[e] for e in Element)

CYCLIC_ELEMENTS: tuple[Element, ...] = (
    Element.WATER,
    Element.FIRE,
    Element.EARTH,
    Element.AIR,
)

# Each cyclic element beats the next one in absolute order.
BEATS: dict[Element, Element] = {
    Element.WATER: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.AIR,
    Element.AIR: Element.WATER,
}

# Rotating by one step yields the element that beats the previous one.
_ROTATION_CYCLE = (Element.WATER, Element.AIR, Element.EARTH, Element.FIRE)

_ROTATIONS: dict[Element, tuple[Element, ...]] = {
    element: tuple(
        _ROTATION_CYCLE[(_ROTATION_CYCLE.index(element) + step) % 4]
        for step in range(1, 5)
    )
    for element in _ROTATION_CYCLE
}

MIN_DEPTH = 1
MAX_DEPTH = 5
WILDCARD_DEPTH = 5


def element_at(depth: int) -> Element:
    """Map a depth value 1-5 to an element in absolute order."""
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise InvalidDepthError(f"Depth must be between 1 and 5, got {depth}")
    return Element(depth - 1)


def rotate(previous: Element | None, depth: int) -> Element:
    """Derive the next element from a previous element and a depth.

    Depth 5 always selects the wildcard. Depths 1-4 rotate ``previous``
    along the cycle W -> L -> A -> V -> W: depth 1 gives the element that
    beats ``previous``, depth 2 the one that ties it, depth 3 the one it
    beats, and depth 4 returns it unchanged. The wildcard has no cycle
    position and is treated as AIR.

    Raises:
        InvalidDepthError: If depth is outside 1-5 or previous is unset.
    """
    if depth == WILDCARD_DEPTH:
        return Element.DRAW
    if not MIN_DEPTH <= depth < WILDCARD_DEPTH:
        raise InvalidDepthError(f"Depth must be between 1 and 5, got {depth}")
    if previous is None:
        raise InvalidDepthError("Cannot rotate without a previous element")
    if previous is Element.DRAW:
        previous = Element.AIR
    return _ROTATIONS[previous][depth - 1]


def successor(element: Element) -> Element:
    """Next element along the rotation cycle (a depth-1 rotation)."""
    return rotate(element, 1)
