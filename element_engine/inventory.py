"""Player inventory and move resolution.

Every player starts a match with three of each cyclic element and a single
wildcard, which is exactly enough for the 13 rounds of a match. When the
element a strategy wants is used up, the resolver substitutes the nearest
element along the rotation cycle that is still in stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from element_engine.elements import CYCLIC_ELEMENTS, Element, successor

ROUNDS = 13

INITIAL_INVENTORY: tuple[int, ...] = (3, 3, 3, 3, 1)  # W, V, A, L, D


class NoLegalMoveError(Exception):
    """Raised when a player has nothing left in stock to play."""

    pass


class InventoryError(ValueError):
    """Raised when a move would overdraw a player's inventory."""

    pass


@dataclass(slots=True)
class PlayerState:
    """State of one player during a single match.

    Attributes:
        available: Remaining count per element, indexed by Element.
        moves: Moves made so far, in round order.
    """

    available: list[int] = field(default_factory=lambda: list(INITIAL_INVENTORY))
    moves: list[Element] = field(default_factory=list)

    @property
    def move_count(self) -> int:
        return len(self.moves)

    @property
    def remaining(self) -> int:
        """Total number of moves still in stock."""
        return sum(self.available)

    def take(self, element: Element) -> Element:
        """Spend one element from the inventory and record it as a move.

        Raises:
            InventoryError: If the element is out of stock or all rounds
                have already been played.
        """
        if self.move_count >= ROUNDS:
            raise InventoryError(f"Player already made {ROUNDS} moves")
        if self.available[element] <= 0:
            raise InventoryError(f"No {element.name} left in inventory")
        self.available[element] -= 1
        self.moves.append(element)
        return element


def choose_available(desired: Element, available: list[int]) -> Element:
    """Pick the desired element, or the nearest substitute still in stock.

    Substitutes are probed along the rotation cycle starting at the desired
    element's successor; the wildcard is the last resort. A spent wildcard
    has no cycle position, so the walk starts from AIR's successor the same
    way rotate treats it.

    Raises:
        NoLegalMoveError: If nothing at all is left in stock.
    """
    if available[desired] > 0:
        return desired

    current = desired
    for _ in range(len(CYCLIC_ELEMENTS)):
        current = successor(current)
        if available[current] > 0:
            return current

    if available[Element.DRAW] > 0:
        return Element.DRAW

    raise NoLegalMoveError(f"No element available to replace {desired.name}")


def choose_forced(available: list[int]) -> Element:
    """Pick the final move: whatever is left, scanned in absolute order.

    Before the last round exactly one inventory slot remains, so the
    result is fully determined.

    Raises:
        NoLegalMoveError: If the inventory is empty.
    """
    for element in Element:
        if available[element] > 0:
            return element
    raise NoLegalMoveError("Inventory exhausted before the final move")
