"""The game loop: loading a scene file, rendering frames and the window."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike

from .constants import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    CONFIG_LINES,
    ESC,
    HEIGHT,
    WIDTH,
)
from .controls import InputState, handle_move
from .draw import FrameBuffer, draw_wall
from .errors import CubError
from .mapfile import read_file
from .raycast import cast_all, choose_texture, wall_line
from .scene import Player, Scene, Texture, TextureLoader, load_scene
from .validate import check_args, check_config, check_map

_FRAMES_PER_SECOND = 60
_WINDOW_TITLE = "window"


def render_frame(frame: FrameBuffer, scene: Scene, player: Player) -> None:
    """Draw the background and every wall slice seen by the player.

    The floor colour is painted over the whole frame first, then the
    ceiling colour over the lower half.
    """
    frame.fill_rect(0, 0, WIDTH, HEIGHT, scene.floor)
    frame.fill_rect(0, HEIGHT // 2, WIDTH, HEIGHT - HEIGHT // 2, scene.ceiling)
    for hit in cast_all(player, scene.grid):
        line = wall_line(hit, hit.column)
        texture = choose_texture(hit, scene, player.rotate)
        draw_wall(frame, hit, player, texture, line)


@dataclass
class Game:
    """A loaded scene, the player in it, the keyboard state and the frame."""

    scene: Scene
    player: Player
    state: InputState = field(default_factory=InputState)
    frame: FrameBuffer = field(default_factory=lambda: FrameBuffer(WIDTH, HEIGHT))
    running: bool = True

    def render(self) -> bool:
        """Apply the held key and draw a frame.

        Returns False, without drawing, once the game has been asked to close.
        """
        if not self.running:
            return False
        if handle_move(self.state, self.player, self.scene.grid):
            self.running = False
            return False
        render_frame(self.frame, self.scene, self.player)
        return True

    def press(self, key: int) -> None:
        """Record a key going down."""
        self.state.press(key)

    def release(self, key: int) -> None:
        """Record a key coming up."""
        self.state.release(key)


def load_game(
    path: str | PathLike[str], texture_loader: TextureLoader = Texture.from_file
) -> Game:
    """Read, check and load a scene file into a ready game."""
    lines = read_file(path)
    check_config(lines)
    check_map(lines[CONFIG_LINES:])
    scene, player = load_scene(lines, texture_loader)
    return Game(scene, player)


def _frame_to_rgb(frame: FrameBuffer) -> bytes:
    from PIL import Image

    packed = array("I", (pixel & 0xFFFFFFFF for pixel in frame.pixels))
    if packed.itemsize != 4:
        packed = array("L", packed)
    raw_mode = "BGRX" if sys.byteorder == "little" else "XRGB"
    image = Image.frombytes(
        "RGB", (frame.width, frame.height), packed.tobytes(), "raw", raw_mode
    )
    return image.tobytes()


def _run_window(game: Game) -> None:
    import pygame

    keysyms = {
        pygame.K_LEFT: ARROW_LEFT,
        pygame.K_RIGHT: ARROW_RIGHT,
        pygame.K_UP: ARROW_UP,
        pygame.K_DOWN: ARROW_DOWN,
        pygame.K_ESCAPE: ESC,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(_WINDOW_TITLE)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.press(keysyms.get(event.key, event.key))
                elif event.type == pygame.KEYUP:
                    game.release(keysyms.get(event.key, event.key))
            if not game.render():
                break
            size = (game.frame.width, game.frame.height)
            surface = pygame.image.frombuffer(_frame_to_rgb(game.frame), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_args(args)
        game = load_game(path)
    except CubError as exc:
        print(f"Error!\n{exc}", file=sys.stderr)
        return 1
    _run_window(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())