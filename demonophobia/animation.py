"""Timed playback of a range of sprite-sheet frames."""

from __future__ import annotations

import math

from demonophobia.geometry import Vector2
from demonophobia.sprite_sheet import SpriteSheet


class Animation:
    """Steps a sprite sheet through frames ``start..end`` at ``speed`` frames per second.

    When ``reverse_after_finish`` is set the animation bounces between the ends,
    otherwise it wraps around.
    """

    def __init__(
        self,
        sprite: SpriteSheet,
        start_end_frame: Vector2,
        speed: float,
        reverse_after_finish: bool,
    ) -> None:
        self.sprite = sprite
        self.start_frame = int(start_end_frame.x)
        self.end_frame = int(start_end_frame.y)
        self.speed = speed
        self.tick = 1.0 / speed if speed else math.inf
        self.reverse_after_finish = reverse_after_finish
        self.one_frame = start_end_frame.x == start_end_frame.y
        self.counter = 0.0
        self.current_frame = 0
        self.direction = 1
        self.is_playing = False

    def play(self) -> None:
        self.is_playing = True

    def stop(self) -> None:
        self.is_playing = False

    def sync_current_frame(self) -> None:
        """Take the current frame from the sprite sheet."""
        self.current_frame = self.sprite.selected_frame

    def update(self, frame_time: float) -> None:
        """Advance by ``frame_time`` seconds, changing frame once a tick has passed."""
        if not self.is_playing:
            return
        self.counter += frame_time
        if self.counter < self.tick:
            return
        self.counter = 0.0
        self.sync_current_frame()

        if not self.one_frame:
            self.current_frame += self.direction
            if self.current_frame > self.end_frame:
                if self.reverse_after_finish:
                    self.direction = -1
                    self.current_frame -= 2
                else:
                    self.current_frame = self.start_frame
            elif self.current_frame < self.start_frame:
                if self.reverse_after_finish:
                    self.direction = 1
                    self.current_frame += 2
                else:
                    self.current_frame = self.end_frame

        self.sprite.change_frame(self.current_frame)