import pytest

from cubed.constants import HEIGHT, WIDTH
from cubed.draw import FrameBuffer, draw_wall, texture_column
from cubed.raycast import WallLine, cast_all, cast_ray, wall_line
from cubed.scene import Texture, locate_player

ROOM = ("11111", "10001", "10N01", "10001", "11111")
COLUMN = WIDTH // 2


def uniform_texture(color):
    return Texture(32, 32, (color,) * 1024)


def striped_texture():
    return Texture(32, 32, tuple(row + 100 for row in range(32) for _ in range(32)))


def test_new_frame_is_blank():
    frame = FrameBuffer(4, 3)
    assert len(frame.pixels) == 4 * 3
    assert all(pixel == 0 for pixel in frame.pixels)


def test_put_get_round_trip():
    frame = FrameBuffer(4, 3)
    frame.put(3, 2, 0xABCDEF)
    assert frame.get(3, 2) == 0xABCDEF
    assert frame.get(2, 2) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (4, 0), (0, 3), (0, -1)])
def test_outside_pixel_raises(x, y):
    frame = FrameBuffer(4, 3)
    with pytest.raises(IndexError):
        frame.put(x, y, 1)
    with pytest.raises(IndexError):
        frame.get(x, y)


def test_fill_rect_fills_only_its_area():
    frame = FrameBuffer(4, 3)
    frame.fill_rect(1, 1, 2, 1, 7)
    for y in range(3):
        for x in range(4):
            expected = 7 if (1 <= x < 3 and y == 1) else 0
            assert frame.get(x, y) == expected


def test_fill_rect_is_clipped():
    frame = FrameBuffer(4, 3)
    frame.fill_rect(2, 1, 10, 10, 5)
    for y in range(3):
        for x in range(4):
            assert frame.get(x, y) == (5 if x >= 2 and y >= 1 else 0)


def test_texture_column_within_texture():
    player = locate_player(ROOM)
    texture = uniform_texture(1)
    for hit in cast_all(player, ROOM):
        assert 0 <= texture_column(hit, player, texture) < Texture.bpp


def test_draw_wall_paints_its_span():
    player = locate_player(ROOM)
    hit = cast_ray(player, ROOM, COLUMN)
    line = wall_line(hit, COLUMN)
    frame = FrameBuffer(WIDTH, HEIGHT)
    draw_wall(frame, hit, player, uniform_texture(0x123456), line)
    for y in range(HEIGHT):
        expected = 0x123456 if line.y_start <= y < line.y_end else 0
        assert frame.get(COLUMN, y) == expected
        assert frame.get(COLUMN + 1, y) == 0


def test_draw_wall_touches_one_column():
    player = locate_player(ROOM)
    hit = cast_ray(player, ROOM, COLUMN)
    line = wall_line(hit, COLUMN)
    frame = FrameBuffer(WIDTH, HEIGHT)
    draw_wall(frame, hit, player, uniform_texture(9), line)
    painted = sum(1 for pixel in frame.pixels if pixel)
    assert painted == int(line.y_end - line.y_start)


def test_draw_wall_uses_texture_colours():
    player = locate_player(ROOM)
    texture = striped_texture()
    hit = cast_ray(player, ROOM, COLUMN)
    line = wall_line(hit, COLUMN)
    frame = FrameBuffer(WIDTH, HEIGHT)
    draw_wall(frame, hit, player, texture, line)
    colours = set(texture.pixels)
    painted = [frame.get(COLUMN, y) for y in range(int(line.y_start), int(line.y_end))]
    assert painted
    assert all(colour in colours for colour in painted)


def test_reversed_line_draws_the_same():
    player = locate_player(ROOM)
    texture = striped_texture()
    hit = cast_ray(player, ROOM, COLUMN)
    line = wall_line(hit, COLUMN)
    reversed_line = WallLine(
        line.x_start, line.y_end, line.x_end, line.y_start, line.wall_height
    )
    first = FrameBuffer(WIDTH, HEIGHT)
    second = FrameBuffer(WIDTH, HEIGHT)
    draw_wall(first, hit, player, texture, line)
    draw_wall(second, hit, player, texture, reversed_line)
    assert first.pixels == second.pixels