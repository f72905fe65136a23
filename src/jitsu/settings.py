import os

# --- Window ---
WIDTH, HEIGHT = 1000, 750
BG_COLOR = (236, 224, 196)
FPS = 60
CAPTION = "Panda Jitsu"

# Tile size is derived from the screen height
TILES_ACROSS_HEIGHT = 9

# --- Tray layout ---
CARD_PADDING = 1.2          # gap factor between cards in a hand
TRAY_PADDING = (1, 6.25)    # tiles from the left edge / from the top
SLOT_OFFSET = (30, 40)      # px from the tray origin to slot 0
HAND_SIZE = 5

# --- Names ---
MY_NAME = "SENSEI"
COM_NAME = "GRASSHOPPER"
PIXELS_PER_CHARACTER = 11.0
NAME_OFFSET = (25, 15)
NAME_FONT_SIZE = 20
NAME_COLOR = (0, 0, 0)

# --- Tray background ---
TRAY_FALLBACK_COLOR = (164, 116, 72)
TRAY_FALLBACK_BORDER = (92, 60, 34)
TRAY_RADIUS = 14

# --- Cards ---
CARD_SIZE_TILES = (0.75, 1.0)
CARD_SPEED_TILES = 12.0     # tiles per second
CARD_RADIUS = 8
CARD_BORDER_W = 2
CARD_FONT_SIZE = 22
FLIP_MS = 220               # total duration of the reveal flip
POWERS = range(2, 13)

CARD_BACK = (60, 72, 96)
CARD_BACK_STRIPE = (86, 100, 128)
CARD_FACE = (250, 246, 232)
CARD_BORDER = (40, 40, 40)
CARD_TEXT = (20, 20, 20)

ELEMENT_COLORS = {
    "fire": (222, 88, 52),
    "water": (58, 120, 214),
    "snow": (150, 210, 236),
}

# --- Pot ---
POT_GAP_TILES = 0.4         # horizontal gap between the two pot cards
POT_TOP_TILES = 2.5

# --- Round flow ---
ROUND_LINGER_MS = 1200      # pause on a revealed pot before the next round

# --- Environment overrides ---
DEBUG = os.getenv("JITSU_DEBUG", "0") == "1"
_seed = os.getenv("JITSU_SEED", "")
SEED = int(_seed) if _seed.strip().lstrip("-").isdigit() else None
