from enum import Enum

from jitsu.card import CardStatus


class PotState(Enum):
    EMPTY = "empty"
    ANIMATING = "animating"   # both cards committed, still travelling
    REVEALED = "revealed"


class Slot:
    """Holds at most one card; empty until something fills it."""

    __slots__ = ("_card",)

    def __init__(self, card=None):
        self._card = card

    def __repr__(self):
        return f"Slot({self._card!r})" if self._card is not None else "Slot(empty)"

    @property
    def card(self):
        return self._card

    @property
    def is_empty(self):
        return self._card is None

    @property
    def is_stale(self):
        """True when the slot needs a fresh card from the deck."""
        return self._card is None or self._card.status is not CardStatus.IN_HAND

    def fill(self, card):
        self._card = card

    def clear(self):
        card, self._card = self._card, None
        return card
