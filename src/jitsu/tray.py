import pygame

from jitsu import settings
from jitsu.assets import draw_text_to, load_font
from jitsu.card import CardStatus
from jitsu.deck import DeckExhausted
from jitsu.diagnostics import debug_print
from jitsu.slots import PotState, Slot


class Tray:
    """The card container along the bottom of the screen.

    Keeps both hands topped up from their decks, owns the two pot slots in
    the middle of the table and flips the opponent's pot card once both
    committed cards have landed.
    """

    def __init__(self, game, my_deck, my_size, com_deck, com_size, rng=None, font=None, background=None):
        if my_size < 0 or com_size < 0:
            raise ValueError(f"hand sizes must be >= 0, got {my_size} and {com_size}")
        self.game = game
        self.my_deck = my_deck
        self.my_size = my_size
        self.com_deck = com_deck
        self.com_size = com_size
        self.rng = rng if rng is not None else game.rng
        self.font = font
        self.background = background

        self.my_slots = [Slot() for _ in range(my_size)]
        self.com_slots = [Slot() for _ in range(com_size)]
        self.my_pot = Slot()
        self.com_pot = Slot()
        self.pot_state = PotState.EMPTY
        self.my_name = game.my_name
        self.com_name = game.com_name
        self._layout()

    def _layout(self):
        tile = self.game.tile_size
        screen_w, screen_h = self.game.screen_size
        self.tray_pos = pygame.Vector2(tile * settings.TRAY_PADDING[0], tile * settings.TRAY_PADDING[1])
        self.tray_area = pygame.Rect(
            round(self.tray_pos.x),
            round(self.tray_pos.y),
            round(screen_w - self.tray_pos.x * 2),  # equal padding left/right
            round(screen_h - self.tray_pos.y),      # extend to bottom of screen
        )

    def relayout(self):
        """Follow a change of screen size without disturbing the round.

        Hands, pots and pot_state are kept; every card is rescaled and sent
        towards its slot or pot position on the new layout.
        """
        self._layout()
        for slots, pot, deck in ((self.my_slots, self.my_pot, self.my_deck),
                                 (self.com_slots, self.com_pot, self.com_deck)):
            deck.relayout()
            for i, slot in enumerate(slots):
                if slot.is_empty:
                    continue
                deck.fit_card(slot.card)
                if not slot.is_stale:
                    slot.card.set_target_location(self.slot_position(i, deck))
            if not pot.is_empty:
                deck.fit_card(pot.card)
        debug_print(f"[tray] relayout to {self.tray_area}")

    # --- state queries ---

    @property
    def has_been_flipped(self):
        return self.pot_state is PotState.REVEALED

    def pot_is_empty(self):
        return self.my_pot.is_empty and self.com_pot.is_empty

    def both_cards_ready(self):
        my_ready = not self.my_pot.is_empty and self.my_pot.card.is_done_moving()
        com_ready = not self.com_pot.is_empty and self.com_pot.card.is_done_moving()
        return my_ready and com_ready

    # --- layout ---

    def slot_position(self, index, deck):
        """Top-left corner of hand slot `index` for the side that draws from `deck`."""
        width = deck.card_size.width
        from_left_edge = settings.SLOT_OFFSET[0] + self.tray_pos.x + settings.CARD_PADDING * width * index
        from_top_edge = settings.SLOT_OFFSET[1] + self.tray_pos.y
        if not deck.align_left:
            from_left_edge += width
            from_left_edge = self.game.screen_size[0] - from_left_edge
        return pygame.Vector2(from_left_edge, from_top_edge)

    # --- per-frame update ---

    def update_hand_and_pot(self, slots, size, deck, pot, dt):
        for i in range(size):
            slot = slots[i]
            if slot.is_stale:
                try:
                    next_card = deck.draw()
                except DeckExhausted as e:
                    # leave the slot as it is and try again next frame
                    debug_print(f"[tray] slot {i}: {e}")
                    continue
                next_card.set_target_location(self.slot_position(i, deck))
                next_card.status = CardStatus.IN_HAND
                slot.fill(next_card)
                debug_print(f"[tray] {deck.name} slot {i} <- {next_card!r}")
            slot.card.update(dt)
        if not pot.is_empty:
            pot.card.update(dt)

    def update(self, dt):
        self.update_hand_and_pot(self.my_slots, self.my_size, self.my_deck, self.my_pot, dt)
        self.update_hand_and_pot(self.com_slots, self.com_size, self.com_deck, self.com_pot, dt)
        if self.pot_state is PotState.ANIMATING and self.both_cards_ready():
            self.pot_state = PotState.REVEALED
            self.com_pot.card.reveal()
            debug_print(f"[tray] reveal {self.com_pot.card!r} vs {self.my_pot.card!r}")

    # --- input ---

    def handle_touch_at(self, point):
        """Commit the touched hand card and a random opponent card to the pot.

        Returns the (mine, theirs) pair that was committed, or None when the
        touch changed nothing.
        """
        if not self.pot_is_empty():
            return None

        # topmost card first: later slots are drawn over earlier ones
        touched = None
        for slot in reversed(self.my_slots):
            if not slot.is_stale and slot.card.contains(point):
                touched = slot.card
                break
        if touched is None:
            return None

        occupied = [i for i, slot in enumerate(self.com_slots) if not slot.is_stale]
        if not occupied:
            debug_print("[tray] touch ignored: opponent hand is empty")
            return None
        com_card = self.com_slots[self.rng.choice(occupied)].card

        self.com_pot.fill(com_card)
        com_card.send_to_pot()
        self.my_pot.fill(touched)
        touched.send_to_pot()
        self.pot_state = PotState.ANIMATING
        debug_print(f"[tray] pot <- {touched!r} / {com_card!r}")
        return touched, com_card

    def new_round(self):
        """Clear a revealed pot so the next selection can happen.

        Both pot cards go back to the bottom of their decks. Returns False
        (and does nothing) unless the pot has been revealed.
        """
        if self.pot_state is not PotState.REVEALED:
            return False
        for slots, pot, deck in ((self.my_slots, self.my_pot, self.my_deck),
                                 (self.com_slots, self.com_pot, self.com_deck)):
            card = pot.clear()
            for slot in slots:
                if slot.card is card:
                    slot.clear()
            deck.recycle(card)
        self.pot_state = PotState.EMPTY
        debug_print("[tray] new round")
        return True

    # --- rendering ---

    def _render_names(self, surface, right, left, left_name, right_name):
        right.x -= settings.PIXELS_PER_CHARACTER * len(right_name)
        f = self.font if self.font is not None else load_font(settings.NAME_FONT_SIZE)
        draw_text_to(f, surface, (left.x, left.y), left_name, settings.NAME_COLOR)
        draw_text_to(f, surface, (right.x, right.y), right_name, settings.NAME_COLOR)

    def render_names(self, deck, surface):
        left = self.tray_pos + pygame.Vector2(settings.NAME_OFFSET)
        right = pygame.Vector2(
            self.game.screen_size[0] - self.tray_pos.x - settings.NAME_OFFSET[0],
            self.tray_pos.y + settings.NAME_OFFSET[1],
        )
        if deck.align_left:
            self._render_names(surface, right, left, self.my_name, self.com_name)
        else:
            self._render_names(surface, right, left, self.com_name, self.my_name)

    def render_cards(self, slots, pot, surface):
        for slot in slots:
            if not slot.is_stale:
                slot.card.render(surface)
        if not pot.is_empty:
            pot.card.render(surface)

    def render_background(self, surface):
        if self.background is not None:
            surface.blit(pygame.transform.scale(self.background, self.tray_area.size), self.tray_area)
            return
        pygame.draw.rect(surface, settings.TRAY_FALLBACK_COLOR, self.tray_area,
                         border_top_left_radius=settings.TRAY_RADIUS,
                         border_top_right_radius=settings.TRAY_RADIUS)
        pygame.draw.rect(surface, settings.TRAY_FALLBACK_BORDER, self.tray_area, 3,
                         border_top_left_radius=settings.TRAY_RADIUS,
                         border_top_right_radius=settings.TRAY_RADIUS)

    def render(self, surface):
        self.render_background(surface)
        self.render_cards(self.com_slots, self.com_pot, surface)
        self.render_cards(self.my_slots, self.my_pot, surface)
        self.render_names(self.my_deck, surface)
