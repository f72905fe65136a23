import math
from enum import Enum

import pygame

from jitsu import settings
from jitsu.assets import load_font, render_surf


class CardStatus(Enum):
    IN_DECK = "in_deck"
    IN_HAND = "in_hand"
    IN_POT = "in_pot"


class Element(Enum):
    FIRE = "fire"
    WATER = "water"
    SNOW = "snow"

    @property
    def color(self):
        return settings.ELEMENT_COLORS[self.value]

    @property
    def initial(self):
        return self.value[0].upper()


class Card:
    """A single card on the table.

    The card owns its own motion and reveal animation; whoever holds it only
    sets a target and calls update(dt) once per frame.
    """

    def __init__(self, element, power, size, pot_location, speed, face_up=False):
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"card size must be positive, got {size!r}")
        self.element = element
        self.power = power
        self.size = (width, height)
        self.pot_location = pygame.Vector2(pot_location)
        self.speed = speed
        self.face_up = face_up
        self._start_face_up = face_up
        self.status = CardStatus.IN_DECK
        self.position = pygame.Vector2(0, 0)
        self.target = pygame.Vector2(0, 0)
        self.flip_elapsed = None  # ms into the reveal flip, None before reveal()
        self.revealed = False

    def __repr__(self):
        return f"Card({self.element.value}, {self.power}, {self.status.value})"

    @property
    def is_revealed(self):
        return self.revealed

    @property
    def rect(self):
        return pygame.Rect(round(self.position.x), round(self.position.y), *self.size)

    def fit(self, size, pot_location, speed):
        """Adopt a new table scale; a card sitting in the pot heads for the new pot."""
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"card size must be positive, got {size!r}")
        self.size = (width, height)
        self.pot_location = pygame.Vector2(pot_location)
        self.speed = speed
        if self.status is CardStatus.IN_POT:
            self.set_target_location(self.pot_location)

    def place_at(self, pos):
        self.position = pygame.Vector2(pos)

    def set_target_location(self, pos):
        self.target = pygame.Vector2(pos)

    def is_done_moving(self):
        return self.position == self.target

    def is_flipping(self):
        return self.flip_elapsed is not None and self.flip_elapsed < settings.FLIP_MS

    def contains(self, point):
        return self.rect.collidepoint(point)

    def send_to_pot(self):
        self.status = CardStatus.IN_POT
        self.set_target_location(self.pot_location)

    def reveal(self):
        """Start the face-up flip. Only the first call has any effect."""
        if self.revealed:
            return False
        self.revealed = True
        self.flip_elapsed = 0.0
        return True

    def reset(self):
        self.status = CardStatus.IN_DECK
        self.face_up = self._start_face_up
        self.revealed = False
        self.flip_elapsed = None

    def update(self, dt):
        """Advance motion and flip by dt seconds."""
        offset = self.target - self.position
        step = self.speed * dt
        if offset.length() <= step:
            self.position = pygame.Vector2(self.target)
        else:
            self.position += offset.normalize() * step

        if self.flip_elapsed is not None and self.flip_elapsed < settings.FLIP_MS:
            self.flip_elapsed = min(settings.FLIP_MS, self.flip_elapsed + dt * 1000.0)
            # face swaps at the flip's midpoint
            if self.flip_elapsed >= settings.FLIP_MS / 2:
                self.face_up = True

    def _width_scale(self):
        if not self.is_flipping():
            return 1.0
        t = self.flip_elapsed / float(settings.FLIP_MS)
        # Cosine width scale: 1 -> 0 -> 1, clamped so it never vanishes
        return max(0.06, abs(math.cos(math.pi * t)))

    def _draw_face(self, slab):
        rect = slab.get_rect()
        pygame.draw.rect(slab, settings.CARD_FACE, rect, border_radius=settings.CARD_RADIUS)
        band = rect.inflate(-rect.width // 4, -rect.height // 2)
        pygame.draw.rect(slab, self.element.color, band, border_radius=settings.CARD_RADIUS // 2)
        f = load_font(settings.CARD_FONT_SIZE)
        label = render_surf(f, f"{self.element.initial}{self.power}", settings.CARD_TEXT)
        slab.blit(label, label.get_rect(center=rect.center))

    def _draw_back(self, slab):
        rect = slab.get_rect()
        pygame.draw.rect(slab, settings.CARD_BACK, rect, border_radius=settings.CARD_RADIUS)
        for y in range(rect.top + 6, rect.bottom - 6, 8):
            pygame.draw.line(slab, settings.CARD_BACK_STRIPE, (rect.left + 6, y), (rect.right - 7, y), 2)

    def render(self, surface):
        dst = self.rect
        slab = pygame.Surface(dst.size, pygame.SRCALPHA)
        if self.face_up:
            self._draw_face(slab)
        else:
            self._draw_back(slab)
        pygame.draw.rect(slab, settings.CARD_BORDER, slab.get_rect(), settings.CARD_BORDER_W,
                         border_radius=settings.CARD_RADIUS)

        s = self._width_scale()
        if s < 1.0:
            slab = pygame.transform.smoothscale(slab, (max(1, int(dst.width * s)), dst.height))
        surface.blit(slab, slab.get_rect(center=dst.center))
