import os

import pygame

from jitsu import assets, settings
from jitsu.diagnostics import debug_print


def test_resource_path_is_relative_to_package():
    path = assets.resource_path(os.path.join("assets", "x.png"))
    assert path == os.path.join(os.path.dirname(os.path.abspath(assets.__file__)), "assets", "x.png")


def test_default_font_is_cached():
    a = assets.load_font(17)
    b = assets.load_font(17)
    assert a is b


def test_missing_ttf_falls_back_to_default_font(capsys):
    f = assets.load_font(19, "fonts/Julee.ttf")
    assert f is not None
    assert "[font-missing] fonts/Julee.ttf" in capsys.readouterr().out


def test_draw_text_to_with_classic_font():
    surface = pygame.Surface((200, 50))
    surface.fill((255, 255, 255))
    assets.draw_text_to(assets.load_font(30), surface, (5, 5), "SENSEI", (0, 0, 0))
    assert any(surface.get_at((x, y))[:3] != (255, 255, 255) for x in range(5, 120) for y in range(5, 35))


def test_debug_print_respects_flag(capsys, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", False)
    debug_print("hidden")
    monkeypatch.setattr(settings, "DEBUG", True)
    debug_print("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
