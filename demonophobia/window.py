"""The game window and main loop."""

from __future__ import annotations

import os
from typing import Iterable, Optional, Sequence

import pygame

from demonophobia.controls import Debug, InputState, Key
from demonophobia.hero import Hero
from demonophobia.room import ROOM_1A_BG, Room1, Scene

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_NAME = "Demonophobia"
FPS = 60
HERO_TEXTURE = os.path.join("assets", "sprite", "hero", "hero.png")

_KEY_MAP = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_s: Key.S,
    pygame.K_F1: Key.F1,
}


def _inputs_from(events: Iterable[pygame.event.Event], held) -> InputState:
    """Build one frame's input from the frame's events and the held-key table."""
    events = list(events)
    pressed = {
        _KEY_MAP[event.key]
        for event in events
        if event.type == pygame.KEYDOWN and event.key in _KEY_MAP
    }
    released = {
        _KEY_MAP[event.key]
        for event in events
        if event.type == pygame.KEYUP and event.key in _KEY_MAP
    }
    down = {key for code, key in _KEY_MAP.items() if held[code]}
    return InputState(down, pressed, released)


def _wants_close(events: Iterable[pygame.event.Event]) -> bool:
    return any(
        event.type == pygame.QUIT
        or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)
        for event in events
    )


class Window:
    """Opens the game window and sets up the hero in the first room."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_NAME)
        self.fps = FPS
        self.clock = pygame.time.Clock()
        self.debug = Debug()
        self.hero = Hero(pygame.image.load(HERO_TEXTURE).convert_alpha())
        self.scene: Scene = Room1(self.hero, pygame.image.load(ROOM_1A_BG).convert())

    def run(self) -> None:
        """Run the game loop until the window is closed, then shut pygame down."""
        try:
            while True:
                frame_time = self.clock.tick(self.fps) / 1000.0
                events = pygame.event.get()
                if _wants_close(events):
                    break
                inputs = _inputs_from(events, pygame.key.get_pressed())
                self.debug.update(inputs)
                self.hero.frame_time = frame_time
                self.scene.update(inputs)
                self.scene.draw(self.screen, self.debug.debug_mode)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    Window().run()
    return 0