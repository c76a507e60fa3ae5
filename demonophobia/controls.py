"""Keyboard input snapshot and the debug-mode toggle."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable


class Key(enum.Enum):
    """Keys the game reacts to."""

    A = enum.auto()
    D = enum.auto()
    S = enum.auto()
    F1 = enum.auto()


@dataclass(frozen=True)
class InputState:
    """Keyboard state for one frame.

    ``down`` holds keys currently held, ``pressed`` keys that went down this
    frame and ``released`` keys that went up this frame.
    """

    down: frozenset = field(default_factory=frozenset)
    pressed: frozenset = field(default_factory=frozenset)
    released: frozenset = field(default_factory=frozenset)

    def __init__(
        self,
        down: Iterable[Key] = (),
        pressed: Iterable[Key] = (),
        released: Iterable[Key] = (),
    ) -> None:
        object.__setattr__(self, "down", frozenset(down))
        object.__setattr__(self, "pressed", frozenset(pressed))
        object.__setattr__(self, "released", frozenset(released))

    def is_down(self, key: Key) -> bool:
        return key in self.down

    def is_pressed(self, key: Key) -> bool:
        return key in self.pressed

    def is_released(self, key: Key) -> bool:
        return key in self.released


@dataclass
class Debug:
    """Debug overlay switch, toggled by pressing F1."""

    debug_mode: bool = False

    def update(self, inputs: InputState) -> None:
        if inputs.is_pressed(Key.F1):
            self.debug_mode = not self.debug_mode