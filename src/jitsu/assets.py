import os
import sys

import pygame
import pygame.freetype as ft

_FONT_CACHE = {}


def resource_path(relative_path):
    """Works on dev, PyInstaller, and Pygbag (web)."""
    # Web (pygbag): use relative paths, not OS paths
    if sys.platform == "emscripten" or getattr(sys, "_emscripten_info", None):
        return relative_path
    try:
        base_path = sys._MEIPASS  # set by PyInstaller
    except AttributeError:
        base_path = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_path, relative_path)


def _load_font_ft_or_classic(ttf_path, size, *, name_for_logs):
    """Try freetype Font first (web-friendly), then classic pygame.font.Font."""
    try:
        f = ft.Font(ttf_path, size)
        f.render("A", (0, 0, 0))
        return f
    except Exception as e:
        print(f"[font-freetype-failed] {name_for_logs}: {e}")

    try:
        f = pygame.font.Font(ttf_path, size)
        f.render("A", True, (0, 0, 0))
        return f
    except Exception as e:
        print(f"[font-classic-failed] {name_for_logs}: {e}")
        return None


def load_font(size, ttf_relative=None):
    """Cached font lookup; falls back to pygame's bundled default font."""
    key = (ttf_relative, size)
    if key in _FONT_CACHE:
        return _FONT_CACHE[key]

    f = None
    if ttf_relative is not None:
        path = resource_path(ttf_relative)
        if os.path.exists(path):
            f = _load_font_ft_or_classic(path, size, name_for_logs=ttf_relative)
        else:
            print(f"[font-missing] {ttf_relative}")
    if f is None:
        if not pygame.font.get_init():
            pygame.font.init()
        f = pygame.font.Font(None, size)

    _FONT_CACHE[key] = f
    return f


def render_surf(f, text, color, aa=True):
    # freetype path
    try:
        surf, _ = f.render(text, color)
        return surf
    except TypeError:
        # classic pygame.font.Font path
        return f.render(text, aa, color)


def draw_text_to(f, surface, pos, text, color, aa=True):
    """Draw text at pos for freetype or classic fonts."""
    if isinstance(f, ft.Font):
        f.render_to(surface, pos, text, color)
        return
    surface.blit(render_surf(f, text, color, aa=aa), pos)
