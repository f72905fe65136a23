from __future__ import annotations

import random
from typing import Optional

from jitsu.deck import Deck
from jitsu.game import JitsuGame
from jitsu.tray import Tray


def create_game(*, seed: int = 7, hand_size: int = 5, screen_size=(1000, 750)) -> JitsuGame:
    """Game context with a fallback tray background and a fixed seed."""
    return JitsuGame(screen_size, seed=seed, hand_size=hand_size)


def small_deck(game: JitsuGame, *, align_left: bool, count: int) -> Deck:
    """A deck holding only the first `count` cards of a full shuffled deck."""
    full = Deck(game, align_left=align_left)
    return Deck(game, align_left=align_left, cards=list(full.cards)[:count])


def create_tray(game: JitsuGame, *, rng: Optional[random.Random] = None, my_deck=None, com_deck=None,
                size: int = 5, font=None) -> Tray:
    my_deck = my_deck if my_deck is not None else Deck(game, align_left=True, face_up=True, name="me")
    com_deck = com_deck if com_deck is not None else Deck(game, align_left=False, name="com")
    return Tray(game, my_deck, size, com_deck, size, rng=rng, font=font)


def settle_hands(tray: Tray, dt: float = 0.1, max_frames: int = 200) -> int:
    """Run frames until every hand card has reached its slot."""
    for frame in range(1, max_frames + 1):
        tray.update(dt)
        if all(not s.is_stale and s.card.is_done_moving() for s in tray.my_slots + tray.com_slots):
            return frame
    raise AssertionError("hand cards never settled")


def settle_pot(tray: Tray, dt: float = 0.1, max_frames: int = 200) -> int:
    """Run frames until both pot cards have landed."""
    for frame in range(1, max_frames + 1):
        tray.update(dt)
        if tray.both_cards_ready():
            return frame
    raise AssertionError("pot cards never landed")


def count_calls(obj, method_name: str) -> list:
    """Wrap a bound method so each call is recorded; returns the call log."""
    calls = []
    original = getattr(obj, method_name)

    def wrapper(*args, **kwargs):
        calls.append(args)
        return original(*args, **kwargs)

    setattr(obj, method_name, wrapper)
    return calls
