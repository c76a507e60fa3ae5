"""The player character: body, hitbox, sprite, animations and state machine."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Optional

import pygame

from demonophobia import states
from demonophobia.animation import Animation
from demonophobia.controls import InputState
from demonophobia.geometry import Rectangle, Vector2, check_collision_recs
from demonophobia.sprite_sheet import SpriteSheet
from demonophobia.wall import GameObject, Wall, _draw_translucent_rect

if TYPE_CHECKING:
    from demonophobia.room import Room

SPRITE_OFFSET_X = 9.0
BODY_COLOR = (230, 41, 55, 100)
HITBOX_COLOR = (230, 41, 55, 100)
FRAME_GRID = Vector2(6.0, 5.0)


class AnimationSlot(enum.IntEnum):
    """Index of each animation in ``Hero.animations``."""

    IDLE = 0
    WALK = 1
    SIT = 2
    HALF_SIT = 3
    CRAWL = 4


# (first frame, last frame), frames per second, bounce back at the end
_ANIMATION_SPECS = {
    AnimationSlot.IDLE: ((6.0, 6.0), 1.0, False),
    AnimationSlot.WALK: ((0.0, 5.0), 4.0, False),
    AnimationSlot.SIT: ((8.0, 8.0), 1.0, False),
    AnimationSlot.HALF_SIT: ((7.0, 7.0), 1.0, False),
    AnimationSlot.CRAWL: ((9.0, 11.0), 3.0, True),
}


class Hero(GameObject):
    """The player character.

    ``texture`` is the hero's sprite sheet image (may be None when nothing is
    drawn); ``texture_size`` defaults to the texture's own size.
    ``frame_time`` is the length of the current frame in seconds and is set
    by the game loop before each update.
    """

    def __init__(
        self,
        texture: Optional[pygame.Surface] = None,
        texture_size: Optional[Vector2] = None,
    ) -> None:
        if texture_size is None:
            if texture is None:
                raise ValueError("a texture or a texture size is required")
            width, height = texture.get_size()
            texture_size = Vector2(float(width), float(height))

        self.texture = texture
        self.speed = 100.0
        self.frame_time = 0.0
        self.move = False
        self.look_right = False
        self.look_changed = False
        self.collided = False
        self.collided_wall: Optional[Wall] = None
        self.owner: Optional[Room] = None

        self.body_position = Vector2(500.0, 198.0)
        self.body_size = Vector2(185.0, 256.0)
        self.body = Rectangle(
            self.body_position.x,
            self.body_position.y,
            self.body_size.x,
            self.body_size.y,
        )
        self.hitbox_size = Vector2(52.0, 240.0)
        self.hitbox = Rectangle(
            self.body_position.x + self.body_size.x / 2.0 - self.hitbox_size.x / 2.0,
            self.body_position.y + (self.body_size.y - self.hitbox_size.y),
            self.hitbox_size.x,
            self.hitbox_size.y,
        )

        self.sprite = SpriteSheet(texture_size, FRAME_GRID)
        self.animations = [
            Animation(self.sprite, Vector2(*frames), speed, bounce)
            for frames, speed, bounce in (_ANIMATION_SPECS[slot] for slot in AnimationSlot)
        ]

        self.idle_state = states.IdleState(self)
        self.move_state = states.MoveState(self)
        self.half_sit_state = states.HalfSitState(self)
        self.sit_state = states.SitState(self)
        self.crawl_state = states.CrawlState(self)

        self.current_state: states.State = self.idle_state
        self.change_state(self.idle_state)

    def change_state(self, state: states.State) -> None:
        self.current_state.exit()
        self.current_state = state
        self.current_state.enter()

    def set_position(self) -> None:
        """Move body and hitbox to ``body_position``, keeping their offset."""
        self.hitbox.x += self.body_position.x - self.body.x
        self.body.x = self.body_position.x

    def change_look(self, look_right: bool) -> None:
        if self.look_right == look_right:
            return
        self.look_right = look_right
        self.look_changed = True

    def resolve_collision(self) -> None:
        """Push the hitbox out of the wall it collided with, dragging the body along."""
        wall = self.collided_wall
        if wall is None:
            raise RuntimeError("no wall to resolve a collision with")
        old_hitbox_x = self.hitbox.x
        if wall.is_right:
            self.hitbox.x = wall.body.x - self.hitbox.width - 0.01
        else:
            self.hitbox.x = wall.body.x + wall.body.width + 0.01
        self.body_position.x -= old_hitbox_x - self.hitbox.x
        self.body.x = self.body_position.x

    def collision_handler(self) -> None:
        """Detect the first wall of the owning room that the hitbox overlaps."""
        walls = self.owner.walls if self.owner is not None else ()
        wall = next(
            (candidate for candidate in walls if check_collision_recs(self.hitbox, candidate.body)),
            None,
        )
        self.collided = wall is not None
        self.collided_wall = wall
        if wall is not None:
            self.resolve_collision()

    def animation_handler(self, frame_time: float) -> None:
        if self.look_changed:
            self.sprite.set_flip(self.look_right, False)
            self.look_changed = False
        for animation in self.animations:
            animation.update(frame_time)

    def update(self, inputs: InputState) -> None:
        self.current_state.update(inputs)
        self.animation_handler(self.frame_time)

    def draw(self, surface: pygame.Surface, debug_mode: bool) -> None:
        offset = SPRITE_OFFSET_X if self.look_right else -SPRITE_OFFSET_X
        if self.texture is not None:
            source = self.sprite.texture_source
            region = pygame.Rect(
                int(source.x), int(source.y), int(abs(source.width)), int(abs(source.height))
            )
            frame = self.texture.subsurface(region)
            if source.width < 0 or source.height < 0:
                frame = pygame.transform.flip(frame, source.width < 0, source.height < 0)
            surface.blit(
                frame, (int(self.body_position.x + offset), int(self.body_position.y))
            )
        if debug_mode:
            _draw_translucent_rect(surface, self.body, BODY_COLOR)
            _draw_translucent_rect(surface, self.hitbox, HITBOX_COLOR)