import random

from jitsu import settings
from jitsu.deck import Deck
from jitsu.diagnostics import debug_print
from jitsu.slots import PotState
from jitsu.tray import Tray


class JitsuGame:
    """Game context: screen geometry, the shared rng, both decks and the tray."""

    def __init__(self, screen_size=(settings.WIDTH, settings.HEIGHT), seed=settings.SEED,
                 my_name=settings.MY_NAME, com_name=settings.COM_NAME,
                 hand_size=settings.HAND_SIZE, tray_background=None):
        self.rng = random.Random(seed)
        self.my_name = my_name
        self.com_name = com_name
        self.hand_size = hand_size
        self.screen_size = (screen_size[0], screen_size[1])
        self.my_deck = Deck(self, align_left=True, face_up=True, name=my_name)
        self.com_deck = Deck(self, align_left=False, face_up=False, name=com_name)
        self.tray = Tray(self, self.my_deck, hand_size, self.com_deck, hand_size,
                         background=tray_background)
        self.linger_ms = 0.0

    @property
    def tile_size(self):
        return self.screen_size[1] / settings.TILES_ACROSS_HEIGHT

    def resize(self, size):
        """Rescale the table to a new screen size; the match carries on."""
        size = (size[0], size[1])
        if size == self.screen_size:
            return
        self.screen_size = size
        self.tray.relayout()
        debug_print(f"[game] layout for {self.screen_size}, tile={self.tile_size:.1f}")

    def update(self, dt):
        self.tray.update(dt)
        if self.tray.pot_state is not PotState.REVEALED:
            return
        if self.tray.com_pot.card.is_flipping():
            return
        self.linger_ms += dt * 1000.0
        if self.linger_ms >= settings.ROUND_LINGER_MS:
            self.linger_ms = 0.0
            self.tray.new_round()

    def render(self, surface):
        surface.fill(settings.BG_COLOR)
        self.tray.render(surface)

    def handle_touch_at(self, point):
        return self.tray.handle_touch_at(point)
