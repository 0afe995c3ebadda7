"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .constants import EAST, HEIGHT, NORTH, SOUTH, WALL, WEST, WIDTH
from .scene import Player, Scene, Texture
from .vector import Vector

_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and how far away it was."""

    column: int
    ray_dir: Vector
    delta_dist: Vector
    step: Vector
    map_pos: Vector
    side: int
    perpendicular_dist: float


@dataclass(frozen=True)
class WallLine:
    """The vertical span a wall slice covers on screen."""

    x_start: float
    y_start: float
    x_end: float
    y_end: float
    wall_height: int
    step: float = 1.0


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.inf
    return numerator / denominator


def _is_wall(grid: Sequence[str], x: float, y: float) -> bool:
    row_index = int(y)
    column = int(x)
    if not 0 <= row_index < len(grid):
        return True
    row = grid[row_index]
    if not 0 <= column < len(row):
        return True
    return row[column] == WALL


def cast_ray(player: Player, grid: Sequence[str], column: int) -> RayHit:
    """Step the ray of one screen column cell by cell until it meets a wall.

    Cells outside the grid count as walls.
    """
    multiplier = 2 * (column / WIDTH) - 1
    ray_dir = player.direction + player.plane.scaled(multiplier)
    delta = Vector(_inverse_abs(ray_dir.x), _inverse_abs(ray_dir.y))
    pos = player.position
    cell = player.map_position

    if ray_dir.x < 0:
        step_x = -1.0
        side_x = (pos.x - cell.x) * delta.x
    else:
        step_x = 1.0
        side_x = (cell.x + 1 - pos.x) * delta.x
    if ray_dir.y < 0:
        step_y = -1.0
        side_y = (pos.y - cell.y) * delta.y
    else:
        step_y = 1.0
        side_y = (cell.y + 1 - pos.y) * delta.y

    map_x, map_y = cell.x, cell.y
    while True:
        if side_x < side_y:
            map_x += step_x
            side_x += delta.x
            side = 0
        else:
            map_y += step_y
            side_y += delta.y
            side = 1
        if _is_wall(grid, map_x, map_y):
            break

    # Only the numerator is made positive, so the distance keeps the
    # sign of the ray component it is divided by.
    if side == 0:
        perpendicular = _divide(abs(map_x - pos.x + (1 - step_x) / 2), ray_dir.x)
    else:
        perpendicular = _divide(abs(map_y - pos.y + (1 - step_y) / 2), ray_dir.y)

    return RayHit(
        column=column,
        ray_dir=ray_dir,
        delta_dist=delta,
        step=Vector(step_x, step_y),
        map_pos=Vector(map_x, map_y),
        side=side,
        perpendicular_dist=perpendicular,
    )


def wall_line(hit: RayHit, column: int) -> WallLine:
    """The on-screen span of the wall slice for a hit, clamped to the screen."""
    distance = abs(hit.perpendicular_dist)
    ratio = HEIGHT / distance if distance else math.inf
    wall_height = int(ratio) if math.isfinite(ratio) else _INT_MAX
    half_screen = HEIGHT // 2
    half_wall = wall_height // 2
    y_end = min(float(half_screen + half_wall), float(HEIGHT))
    y_start = max(float(half_screen - half_wall), 0.0)
    return WallLine(
        x_start=float(column),
        y_start=y_start,
        x_end=float(column),
        y_end=y_end,
        wall_height=wall_height,
    )


def choose_texture(hit: RayHit, scene: Scene, rotate: int) -> Texture:
    """Pick the wall texture for the side of the wall the ray struck."""
    if hit.side:
        name = SOUTH if hit.step.y > 0 else NORTH
    elif rotate == -1:
        name = WEST if hit.step.x > 0 else EAST
    else:
        name = EAST if hit.step.x > 0 else WEST
    return scene.textures[name]


def cast_all(player: Player, grid: Sequence[str]) -> list[RayHit]:
    """Cast the rays of every screen column, left to right."""
    return [cast_ray(player, grid, column) for column in range(WIDTH)]