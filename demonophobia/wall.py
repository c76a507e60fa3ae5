"""Game object interface and the invisible room walls."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from demonophobia.controls import InputState
from demonophobia.geometry import Rectangle, Vector2

WALL_COLOR = (130, 130, 130, 200)


def _draw_translucent_rect(
    surface: pygame.Surface, rect: Rectangle, color: tuple[int, int, int, int]
) -> None:
    width, height = int(abs(rect.width)), int(abs(rect.height))
    if width == 0 or height == 0:
        return
    left = rect.x if rect.width >= 0 else rect.x + rect.width
    top = rect.y if rect.height >= 0 else rect.y + rect.height
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(color)
    surface.blit(overlay, (int(left), int(top)))


class GameObject(ABC):
    """Something in a scene that is updated and drawn every frame."""

    @abstractmethod
    def update(self, inputs: InputState) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, surface: pygame.Surface, debug_mode: bool) -> None:
        """Draw the object onto ``surface``."""


class Wall(GameObject):
    """A solid vertical boundary; ``is_right`` marks a wall on the right side."""

    def __init__(self, position: Vector2, size: Vector2, is_right: bool) -> None:
        self.body = Rectangle(position.x, position.y, size.x, size.y)
        self.is_right = is_right

    def update(self, inputs: InputState) -> None:
        pass

    def draw(self, surface: pygame.Surface, debug_mode: bool) -> None:
        """Walls are only visible in debug mode."""
        if debug_mode:
            _draw_translucent_rect(surface, self.body, WALL_COLOR)