"""Frame selection and flipping over a grid-shaped sprite sheet."""

from __future__ import annotations

from demonophobia.geometry import Rectangle, Vector2


class SpriteSheet:
    """A texture cut into a grid of equally sized frames.

    ``texture_size`` is the texture's size in pixels, ``frame_grid`` the
    number of columns and rows of frames.
    """

    def __init__(self, texture_size: Vector2, frame_grid: Vector2) -> None:
        self.texture_size = Vector2(float(texture_size.x), float(texture_size.y))
        self.frame_grid = Vector2(frame_grid.x, frame_grid.y)
        self.frame_size = Vector2(
            float(texture_size.x) / frame_grid.x,
            float(texture_size.y) / frame_grid.y,
        )
        self.texture_source = Rectangle()
        self.selected_frame = 0
        self._flip_h = False
        self._flip_v = False

    @property
    def frame_count(self) -> int:
        return int(self.frame_grid.x) * int(self.frame_grid.y)

    def change_frame(self, frame: int) -> None:
        """Select a frame by index, counted row by row and wrapping past the last."""
        if frame < 0:
            raise ValueError(f"frame index must not be negative: {frame}")
        columns = int(self.frame_grid.x)
        column, row = frame % columns, (frame // columns) % int(self.frame_grid.y)
        self.texture_source = Rectangle(
            self.frame_size.x * column,
            self.frame_size.y * row,
            self.frame_size.x,
            self.frame_size.y,
        )
        self.selected_frame = frame
        self.hard_flip_frame(self._flip_h, self._flip_v)

    def set_flip(self, flip_h: bool, flip_v: bool) -> None:
        """Set the mirroring of the current and future frames."""
        self.hard_flip_frame(self._flip_h != flip_h, self._flip_v != flip_v)
        self._flip_h = flip_h
        self._flip_v = flip_v

    def get_flip(self, horizontal: bool) -> bool:
        """Return the horizontal flip if ``horizontal`` is true, else the vertical one."""
        return self._flip_h if horizontal else self._flip_v

    def hard_flip_frame(self, flip_h: bool, flip_v: bool) -> None:
        """Negate the source size on the given axes without recording the flip."""
        if flip_h:
            self.texture_source.width = -self.texture_source.width
        if flip_v:
            self.texture_source.height = -self.texture_source.height