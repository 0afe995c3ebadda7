"""Loading the textures, colours, map and player start of a scene."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from os import PathLike
from typing import ClassVar

from PIL import Image, UnidentifiedImageError

from .constants import (
    CEILING,
    CONFIG_LINES,
    FILE_NOT_FOUND,
    FLOOR,
    PLAYER_CHARS,
    TEXTURE_KEYS,
)
from .cstring import atoi, split, strncmp
from .errors import ConfigError, MapError
from .vector import Vector

_FIELD_OF_VISION = 0.60


@dataclass(frozen=True)
class Texture:
    """A wall texture stored as rows of 0xRRGGBB colours."""

    width: int
    height: int
    pixels: tuple[int, ...]

    bpp: ClassVar[int] = 32

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture size must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Texture:
        """Load an image file; raises ConfigError if it cannot be read."""
        try:
            with Image.open(path) as image:
                rgb = image.convert("RGB")
        except (OSError, UnidentifiedImageError, ValueError) as exc:
            raise ConfigError(f"{FILE_NOT_FOUND}: {path}") from exc
        data = rgb.tobytes()
        pixels = tuple(
            (r << 16) | (g << 8) | b
            for r, g, b in zip(data[0::3], data[1::3], data[2::3])
        )
        return cls(rgb.width, rgb.height, pixels)

    def pixel(self, x: int, y: int) -> int:
        """Colour at column ``x`` of row ``y``.

        The pixels are addressed as one row-major run, so a column past the
        end of a row reads into the next one; outside the image gives 0.
        """
        index = y * self.width + x
        if 0 <= index < len(self.pixels):
            return self.pixels[index]
        return 0


@dataclass
class Player:
    """Where the player stands, where it looks and its camera plane."""

    position: Vector
    direction: Vector
    plane: Vector
    rotate: int

    @property
    def map_position(self) -> Vector:
        """The map cell holding the player, as whole coordinates."""
        return Vector(float(int(self.position.x)), float(int(self.position.y)))


@dataclass
class Scene:
    """The map grid together with its textures and colours."""

    grid: tuple[str, ...] = ()
    textures: dict[str, Texture] = field(default_factory=dict)
    floor: int = 0
    ceiling: int = 0


TextureLoader = Callable[[str], Texture]

_DIRECTIONS: dict[str, tuple[Vector, Vector, int]] = {
    "N": (Vector(0.0, -1.0), Vector(-_FIELD_OF_VISION, 0.0), -1),
    "S": (Vector(0.0, 1.0), Vector(_FIELD_OF_VISION, 0.0), -1),
    "W": (Vector(-1.0, 0.0), Vector(0.0, -_FIELD_OF_VISION), 1),
    "E": (Vector(1.0, 0.0), Vector(0.0, _FIELD_OF_VISION), 1),
}


def parse_color(text: str) -> int:
    """Pack comma-separated components, the first one in the lowest byte."""
    color = 0
    for index, part in enumerate(split(text, ",")):
        color |= atoi(part) << (8 * index)
    return color


def _value(fields: list[str], line: str) -> str:
    if len(fields) < 2:
        raise ConfigError(f"missing value in configuration line: {line!r}")
    return fields[1]


def load_config(
    lines: Sequence[str], texture_loader: TextureLoader = Texture.from_file
) -> Scene:
    """Read the six configuration lines into a scene with an empty grid.

    A key matches every name it is a prefix of, so "N" loads the north
    texture just as "NO" does.
    """
    if len(lines) < CONFIG_LINES:
        raise ConfigError("the configuration block is incomplete")
    scene = Scene()
    for line in lines[:CONFIG_LINES]:
        fields = split(line, " ")
        if not fields:
            raise ConfigError(f"empty configuration line: {line!r}")
        key = fields[0]
        size = len(key.encode())
        is_floor = strncmp(key, FLOOR, size) == 0
        is_ceiling = strncmp(key, CEILING, size) == 0
        if not is_floor and not is_ceiling:
            for name in TEXTURE_KEYS:
                if strncmp(key, name, size) == 0:
                    scene.textures[name] = texture_loader(_value(fields, line))
            continue
        if is_floor:
            scene.floor |= parse_color(_value(fields, line))
        if is_ceiling:
            scene.ceiling |= parse_color(_value(fields, line))
    return scene


def locate_player(grid: Sequence[str]) -> Player:
    """Find the first player start in the grid, scanning row by row."""
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            if ch in PLAYER_CHARS:
                direction, plane, rotate = _DIRECTIONS[ch]
                return Player(Vector(x + 0.5, y + 0.5), direction, plane, rotate)
    raise MapError("no player start in the map")


def load_scene(
    lines: Sequence[str], texture_loader: TextureLoader = Texture.from_file
) -> tuple[Scene, Player]:
    """Build the scene and the player from the lines of a checked scene file."""
    scene = load_config(lines, texture_loader)
    grid = tuple(lines[CONFIG_LINES:])
    player = locate_player(grid)
    return replace(scene, grid=grid), player