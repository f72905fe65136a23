from collections import deque, namedtuple

from jitsu import settings
from jitsu.card import Card, Element
from jitsu.diagnostics import debug_print

CardSize = namedtuple("CardSize", ["width", "height"])


class DeckExhausted(Exception):
    """Raised when draw() is called on a deck with no cards left."""

    def __init__(self, name):
        super().__init__(f"deck '{name}' has no cards left")
        self.name = name


class Deck:
    """Shuffled source of cards for one side of the table.

    align_left says which screen edge the side's hand grows from; it also
    decides where that side's pot card lands and where fresh cards fly in from.
    """

    def __init__(self, game, align_left, face_up=False, name="", rng=None, cards=None):
        self.game = game
        self.align_left = align_left
        self.face_up = face_up
        self.name = name or ("left" if align_left else "right")
        self.rng = rng if rng is not None else game.rng

        self.card_size = self._scaled_card_size()

        if cards is None:
            cards = [self._make_card(element, power) for element in Element for power in settings.POWERS]
            self.rng.shuffle(cards)
        self.cards = deque(cards)

    def _scaled_card_size(self):
        tile = self.game.tile_size
        return CardSize(tile * settings.CARD_SIZE_TILES[0], tile * settings.CARD_SIZE_TILES[1])

    @property
    def card_speed(self):
        return self.game.tile_size * settings.CARD_SPEED_TILES

    def _make_card(self, element, power):
        return Card(element, power, self.card_size, self.pot_location,
                    speed=self.card_speed, face_up=self.face_up)

    def fit_card(self, card):
        card.fit(self.card_size, self.pot_location, self.card_speed)

    def relayout(self):
        """Rescale to the game's current tile size, including the cards still in the deck."""
        self.card_size = self._scaled_card_size()
        for card in self.cards:
            self.fit_card(card)

    @property
    def pot_location(self):
        screen_w = self.game.screen_size[0]
        gap = self.game.tile_size * settings.POT_GAP_TILES
        y = self.game.tile_size * settings.POT_TOP_TILES
        if self.align_left:
            return (screen_w / 2 - gap / 2 - self.card_size.width, y)
        return (screen_w / 2 + gap / 2, y)

    @property
    def spawn_location(self):
        screen_w, screen_h = self.game.screen_size
        x = -self.card_size.width if self.align_left else screen_w
        return (x, screen_h)

    @property
    def remaining(self):
        return len(self.cards)

    def __len__(self):
        return len(self.cards)

    def draw(self):
        if not self.cards:
            raise DeckExhausted(self.name)
        card = self.cards.popleft()
        card.place_at(self.spawn_location)
        return card

    def recycle(self, card):
        """Return a played card to the bottom of the deck."""
        card.reset()
        self.cards.append(card)
        debug_print(f"[deck] {self.name}: recycled {card!r}, {len(self.cards)} left")
