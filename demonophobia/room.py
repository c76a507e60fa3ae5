"""Scenes and the rooms the hero walks around in."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import pygame

from demonophobia.controls import InputState
from demonophobia.geometry import Vector2
from demonophobia.wall import Wall

if TYPE_CHECKING:
    from demonophobia.hero import Hero

SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0

ROOM_1A_BG = os.path.join("assets", "sprite", "rooms", "room1a.png")
ROOM_1B_BG = os.path.join("assets", "sprite", "rooms", "room1b.png")


class Scene(ABC):
    """Something the game loop updates and draws each frame."""

    @abstractmethod
    def update(self, inputs: InputState) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, debug_mode: bool) -> None:
        """Draw the scene onto ``surface``."""


class Room(Scene):
    """A screen-sized room bounded by a wall on each side."""

    def __init__(self, hero: Hero, background: Optional[pygame.Surface] = None) -> None:
        self.hero = hero
        self.background = background
        self.walls = [
            Wall(Vector2(0.0, 0.0), Vector2(139.0, SCREEN_HEIGHT), False),
            Wall(Vector2(SCREEN_WIDTH - 94.0, 0.0), Vector2(94.0, SCREEN_HEIGHT), True),
        ]
        hero.owner = self

    def update(self, inputs: InputState) -> None:
        self.hero.update(inputs)

    def draw(self, surface: pygame.Surface, debug_mode: bool) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        self.hero.draw(surface, debug_mode)
        for wall in self.walls:
            wall.draw(surface, debug_mode)


class Room1(Room):
    """The first room; loads its background from the assets when none is given."""

    def __init__(self, hero: Hero, background: Optional[pygame.Surface] = None) -> None:
        if background is None:
            background = pygame.image.load(ROOM_1A_BG)
        super().__init__(hero, background)