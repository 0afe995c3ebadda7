"""Keyboard state and player movement over the map grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .constants import ARROW_LEFT, ARROW_RIGHT, ESC, WALL
from .scene import Player
from .vector import Vector

ROTATION_SPEED = 0.005
MOVE_SPEED = 0.025
COLLISION_REACH = 0.1

_FORWARD = frozenset(map(ord, "Ww"))
_BACKWARD = frozenset(map(ord, "Ss"))
_LEFT = frozenset(map(ord, "Aa"))
_RIGHT = frozenset(map(ord, "Dd"))
_ROTATE = frozenset((ARROW_LEFT, ARROW_RIGHT))


@dataclass
class InputState:
    """The last key seen and whether it is still held down."""

    key: int | None = None
    moving: bool = False

    def press(self, key: int) -> None:
        """Record a key going down."""
        self.key = key
        self.moving = True

    def release(self, key: int) -> None:
        """Record a key coming up."""
        self.key = key
        self.moving = False


def is_open(grid: Sequence[str], y: float, x: float) -> bool:
    """True when the cell holding point (x, y) is not a wall.

    Points outside the grid count as blocked.
    """
    row_index = math.floor(y)
    column = math.floor(x)
    if not 0 <= row_index < len(grid):
        return False
    row = grid[row_index]
    if not 0 <= column < len(row):
        return False
    return row[column] != WALL


def rotate_player(player: Player, key: int) -> None:
    """Turn the player's view for the left and right arrow keys."""
    if key == ARROW_LEFT:
        angle = -ROTATION_SPEED * player.rotate
    elif key == ARROW_RIGHT:
        angle = ROTATION_SPEED * player.rotate
    else:
        return
    player.direction = player.direction.rotated(angle)
    player.plane = player.plane.rotated(angle)


def _step(player: Player, along: Vector, sign: float, grid: Sequence[str]) -> bool:
    probe = player.position + along.scaled(sign * COLLISION_REACH)
    if not is_open(grid, probe.y, probe.x):
        return False
    player.position = player.position + along.scaled(sign * MOVE_SPEED)
    return True


def move_forward_back(player: Player, key: int, grid: Sequence[str]) -> bool:
    """Move along the view direction for W and S; return whether it moved."""
    if key in _FORWARD:
        return _step(player, player.direction, 1.0, grid)
    if key in _BACKWARD:
        return _step(player, player.direction, -1.0, grid)
    return False


def move_sideways(player: Player, key: int, grid: Sequence[str]) -> bool:
    """Move along the camera plane for A and D; return whether it moved."""
    if key in _LEFT:
        return _step(player, player.plane, -1.0, grid)
    if key in _RIGHT:
        return _step(player, player.plane, 1.0, grid)
    return False


def handle_move(state: InputState, player: Player, grid: Sequence[str]) -> bool:
    """Apply the held key to the player. Returns True when the game should close."""
    if state.key == ESC:
        return True
    if not state.moving or state.key is None:
        return False
    key = state.key
    if key in _ROTATE:
        rotate_player(player, key)
    elif key in _FORWARD or key in _BACKWARD:
        move_forward_back(player, key, grid)
    elif key in _LEFT or key in _RIGHT:
        move_sideways(player, key, grid)
    return False