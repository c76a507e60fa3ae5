"""The hero's movement states: idle, walking, crouching, sitting and crawling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from demonophobia import hero as _hero
from demonophobia.controls import InputState, Key

if TYPE_CHECKING:
    from demonophobia.hero import Hero

SIT_TIME = 0.2
"""Seconds the hero spends half-sitting before sitting down."""

IDLE_FRAME = 6
WALK_FRAME = 0
HALF_SIT_FRAME = 7
SIT_FRAME = 8
CRAWL_FRAME = 9


class State(ABC):
    """One state of the hero's state machine."""

    def __init__(self, owner: Hero) -> None:
        self.owner = owner

    @abstractmethod
    def enter(self) -> None:
        """Called when the hero switches into this state."""

    @abstractmethod
    def exit(self) -> None:
        """Called when the hero leaves this state."""

    @abstractmethod
    def update(self, inputs: InputState) -> None:
        """Handle one frame of input."""


def _horizontal_step(owner: Hero, inputs: InputState, speed: float) -> None:
    """Move the hero left or right by ``speed`` for one frame, or mark it still."""
    step = speed * owner.frame_time
    if inputs.is_down(Key.D):
        owner.change_look(True)
        owner.body_position.x += step
    elif inputs.is_down(Key.A):
        owner.change_look(False)
        owner.body_position.x -= step
    else:
        owner.move = False
        return
    owner.move = True
    owner.set_position()


class IdleState(State):
    """Standing still."""

    def enter(self) -> None:
        self.owner.sprite.change_frame(IDLE_FRAME)
        self.owner.animations[_hero.AnimationSlot.IDLE].play()

    def exit(self) -> None:
        self.owner.animations[_hero.AnimationSlot.IDLE].stop()

    def update(self, inputs: InputState) -> None:
        if inputs.is_pressed(Key.A) or inputs.is_pressed(Key.D):
            self.owner.change_state(self.owner.move_state)
        elif inputs.is_down(Key.S):
            self.owner.change_state(self.owner.half_sit_state)


class MoveState(State):
    """Walking at full speed."""

    def __init__(self, owner: Hero) -> None:
        super().__init__(owner)
        self.anim_is_playing = False

    def movement_handler(self, inputs: InputState) -> None:
        _horizontal_step(self.owner, inputs, self.owner.speed)

    def play_animation(self) -> None:
        if self.anim_is_playing:
            return
        self.owner.sprite.change_frame(WALK_FRAME)
        self.owner.animations[_hero.AnimationSlot.WALK].play()
        self.anim_is_playing = True

    def enter(self) -> None:
        pass

    def exit(self) -> None:
        self.anim_is_playing = False
        self.owner.animations[_hero.AnimationSlot.WALK].stop()

    def update(self, inputs: InputState) -> None:
        self.movement_handler(inputs)
        self.owner.collision_handler()

        if not self.owner.move or self.owner.collided:
            self.owner.change_state(self.owner.idle_state)
            return

        self.play_animation()


class HalfSitState(State):
    """Crouching on the way down; becomes sitting after ``SIT_TIME``."""

    def __init__(self, owner: Hero) -> None:
        super().__init__(owner)
        self.counter = 0.0

    def enter(self) -> None:
        self.counter = 0.0
        self.owner.sprite.change_frame(HALF_SIT_FRAME)
        self.owner.animations[_hero.AnimationSlot.HALF_SIT].play()

    def exit(self) -> None:
        self.owner.animations[_hero.AnimationSlot.HALF_SIT].stop()

    def update(self, inputs: InputState) -> None:
        self.counter += self.owner.frame_time

        if inputs.is_released(Key.S):
            self.owner.change_state(self.owner.idle_state)
            return

        if self.counter >= SIT_TIME:
            self.owner.change_state(self.owner.sit_state)


class SitState(State):
    """Sitting on the floor."""

    def enter(self) -> None:
        self.owner.sprite.change_frame(SIT_FRAME)
        self.owner.animations[_hero.AnimationSlot.SIT].play()

    def exit(self) -> None:
        self.owner.animations[_hero.AnimationSlot.SIT].stop()

    def update(self, inputs: InputState) -> None:
        if inputs.is_pressed(Key.A) or inputs.is_pressed(Key.D):
            self.owner.change_state(self.owner.crawl_state)
            self.owner.change_look(inputs.is_pressed(Key.D))
        elif not inputs.is_down(Key.S) and (
            not inputs.is_down(Key.A) or not inputs.is_down(Key.D)
        ):
            self.owner.change_state(self.owner.idle_state)


class CrawlState(State):
    """Crawling at half speed."""

    def __init__(self, owner: Hero) -> None:
        super().__init__(owner)
        self.anim_is_playing = False

    def movement_handler(self, inputs: InputState) -> None:
        _horizontal_step(self.owner, inputs, self.owner.speed / 2.0)

    def play_animation(self) -> None:
        if self.anim_is_playing:
            return
        self.owner.sprite.change_frame(CRAWL_FRAME)
        self.owner.animations[_hero.AnimationSlot.CRAWL].play()
        self.anim_is_playing = True

    def enter(self) -> None:
        pass

    def exit(self) -> None:
        self.anim_is_playing = False
        self.owner.animations[_hero.AnimationSlot.CRAWL].stop()

    def update(self, inputs: InputState) -> None:
        self.movement_handler(inputs)
        self.owner.collision_handler()

        if self.owner.collided:
            self.owner.change_state(self.owner.sit_state)
            return

        if not self.owner.move:
            if inputs.is_down(Key.S):
                self.owner.change_state(self.owner.sit_state)
            else:
                self.owner.change_state(self.owner.idle_state)
            return

        self.play_animation()