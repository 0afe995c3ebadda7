import pytest
from PIL import Image

from cubed.errors import ConfigError, MapError
from cubed.scene import (
    Player,
    Scene,
    Texture,
    load_config,
    load_scene,
    locate_player,
    parse_color,
)
from cubed.vector import Vector

CONFIG = [
    "NO ./north.xpm",
    "SO ./south.xpm",
    "WE ./west.xpm",
    "EA ./east.xpm",
    "F 0,0,0",
    "C 255,255,255",
]
GRID = ["1111", "10S1", "1111"]


class _Loader:
    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)
        return Texture(1, 1, (len(self.paths),))


def test_texture_from_png(tmp_path):
    path = tmp_path / "tex.png"
    image = Image.new("RGB", (2, 2), (0, 0, 0))
    image.putpixel((1, 0), (255, 0, 0))
    image.putpixel((0, 1), (0, 0, 255))
    image.save(path)
    texture = Texture.from_file(path)
    assert (texture.width, texture.height) == (2, 2)
    assert texture.pixel(1, 0) == 0xFF0000
    assert texture.pixel(0, 1) == 0x0000FF
    assert texture.pixel(0, 0) == 0


def test_texture_from_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        Texture.from_file(tmp_path / "absent.xpm")


def test_texture_pixel_wraps_rows_and_outside_is_zero():
    texture = Texture(2, 2, (10, 20, 30, 40))
    assert texture.pixel(2, 0) == 30
    assert texture.pixel(1, 1) == 40
    assert texture.pixel(0, 2) == 0


def test_texture_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Texture(2, 2, (1, 2, 3))


def test_parse_color_extremes():
    assert parse_color("0,0,0") == 0
    assert parse_color("255,255,255") == 0xFFFFFF


def test_parse_color_first_component_is_low_byte():
    assert parse_color("7") == 7
    assert parse_color("0,0,0") | parse_color("7") == 7


def test_locate_player_south():
    player = locate_player(GRID)
    assert player.position == Vector(2.5, 1.5)
    assert player.direction == Vector(0.0, 1.0)
    assert player.plane == Vector(0.6, 0.0)
    assert player.rotate == -1
    assert player.map_position == Vector(2.0, 1.0)


@pytest.mark.parametrize(
    "ch, direction, plane, rotate",
    [
        ("N", Vector(0.0, -1.0), Vector(-0.6, 0.0), -1),
        ("W", Vector(-1.0, 0.0), Vector(0.0, -0.6), 1),
        ("E", Vector(1.0, 0.0), Vector(0.0, 0.6), 1),
    ],
)
def test_locate_player_directions(ch, direction, plane, rotate):
    player = locate_player(["111", f"1{ch}1", "111"])
    assert (player.direction, player.plane, player.rotate) == (direction, plane, rotate)


def test_locate_player_takes_first():
    player = locate_player(["1N1", "1S1"])
    assert player.position == Vector(1.5, 0.5)


def test_locate_player_missing():
    with pytest.raises(MapError):
        locate_player(["111", "101", "111"])


def test_load_config_textures_and_colors():
    loader = _Loader()
    scene = load_config(CONFIG, loader)
    assert loader.paths == ["./north.xpm", "./south.xpm", "./west.xpm", "./east.xpm"]
    assert scene.textures["NO"].pixel(0, 0) == 1
    assert scene.textures["EA"].pixel(0, 0) == 4
    assert scene.floor == 0
    assert scene.ceiling == 0xFFFFFF
    assert scene.grid == ()


def test_load_config_prefix_key():
    lines = ["N ./n.xpm"] + CONFIG[1:]
    loader = _Loader()
    scene = load_config(lines, loader)
    assert loader.paths[0] == "./n.xpm"
    assert set(scene.textures) == {"NO", "SO", "WE", "EA"}


def test_load_config_too_short():
    with pytest.raises(ConfigError):
        load_config(CONFIG[:5], _Loader())


def test_load_config_missing_value():
    with pytest.raises(ConfigError):
        load_config(["NO"] + CONFIG[1:], _Loader())


def test_load_scene():
    scene, player = load_scene(CONFIG + GRID, _Loader())
    assert isinstance(scene, Scene) and isinstance(player, Player)
    assert scene.grid == tuple(GRID)
    assert player.position == Vector(2.5, 1.5)
    assert scene.ceiling == 0xFFFFFF


def test_load_scene_without_player():
    with pytest.raises(MapError):
        load_scene(CONFIG + ["111", "101", "111"], _Loader())