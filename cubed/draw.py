"""A pixel frame buffer and drawing of textured wall slices into it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .constants import HEIGHT, TEXTURES_SIZE
from .raycast import RayHit, WallLine
from .scene import Player, Texture


@dataclass
class FrameBuffer:
    """A width by height grid of colours, stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("frame size must not be negative")
        self.pixels = [0] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the colour at (x, y)."""
        self.pixels[self._index(x, y)] = color

    def get(self, x: int, y: int) -> int:
        """Colour at (x, y)."""
        return self.pixels[self._index(x, y)]

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle, clipped to the frame."""
        x0 = max(x, 0)
        x1 = min(x + width, self.width)
        y0 = max(y, 0)
        y1 = min(y + height, self.height)
        if x1 <= x0:
            return
        run = [color] * (x1 - x0)
        for row in range(y0, y1):
            start = row * self.width
            self.pixels[start + x0:start + x1] = run


def texture_column(hit: RayHit, player: Player, texture: Texture) -> int:
    """The texture column matching where along the wall the ray struck."""
    pos = player.position
    if hit.side == 0:
        wall_x = pos.y + (hit.perpendicular_dist * hit.ray_dir.y) * hit.step.x
    else:
        wall_x = pos.x + (hit.perpendicular_dist * hit.ray_dir.x) * hit.step.y
    if not math.isfinite(wall_x):
        return 0
    wall_x -= math.floor(wall_x)
    return int(wall_x * texture.bpp)


def draw_wall(
    frame: FrameBuffer, hit: RayHit, player: Player, texture: Texture, line: WallLine
) -> None:
    """Paint one textured wall slice along ``line``."""
    x, x_end = line.x_start, line.x_end
    y, y_end = sorted((line.y_start, line.y_end))
    column = texture_column(hit, player, texture)
    height = abs(line.wall_height)
    step = texture.bpp / height if height else math.inf
    position = abs(y - HEIGHT // 2 + line.wall_height // 2) * step
    while x < x_end or y < y_end:
        row = int(position) & (TEXTURES_SIZE - 1)
        frame.put(int(x), int(y), texture.pixel(column, row))
        if x < x_end:
            x += line.step
        if y < y_end:
            y += line.step
        position += step