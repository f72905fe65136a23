import asyncio
import sys

import pygame
import pygame.freetype

from jitsu import settings
from jitsu.diagnostics import debug_print
from jitsu.game import JitsuGame

WEB = (sys.platform == "emscripten" or getattr(sys, "_emscripten_info", None))


def touch_point(event, screen_size):
    """Screen-pixel position of a mouse click or a finger touch."""
    if event.type == pygame.FINGERDOWN:
        # finger coordinates are normalised to 0..1
        return (event.x * screen_size[0], event.y * screen_size[1])
    return event.pos


async def run_game():
    pygame.init()
    pygame.font.init()
    pygame.freetype.init()

    flags = 0 if WEB else pygame.RESIZABLE
    screen = pygame.display.set_mode((settings.WIDTH, settings.HEIGHT), flags)
    pygame.display.set_caption(settings.CAPTION)

    # first paint
    screen.fill(settings.BG_COLOR)
    pygame.display.flip()
    await asyncio.sleep(0)
    print("BOOT 1: display set")

    game = JitsuGame(screen.get_size())
    print("BOOT 2: game ready")

    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                game.resize(screen.get_size())
            # touches also arrive as synthesised clicks; FINGERDOWN handles those
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
                debug_print(f"Mouse click at: {event.pos}")
                game.handle_touch_at(touch_point(event, game.screen_size))
            elif event.type == pygame.FINGERDOWN:
                game.handle_touch_at(touch_point(event, game.screen_size))

        dt = clock.tick(settings.FPS) / 1000.0
        game.update(dt)
        game.render(screen)

        pygame.display.flip()
        await asyncio.sleep(0)

    if not WEB:
        pygame.quit()


def main():
    asyncio.run(run_game())


if __name__ == "__main__":
    main()
