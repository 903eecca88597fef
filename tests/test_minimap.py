import pytest

from raycub.camera import Camera
from raycub.image import Image
from raycub.minimap import (
    GREY,
    MINIMAP_SIZE,
    OLIVE,
    WHITE,
    draw_camera,
    draw_fov,
    draw_map,
    draw_ray,
    minimap_block_size,
)
from raycub.vector import Vec2

ROOM = (
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
)


def test_block_size_uses_longer_side():
    assert minimap_block_size(5, 4, MINIMAP_SIZE) == 40
    assert minimap_block_size(4, 5, MINIMAP_SIZE) == 40


@pytest.mark.parametrize("cols,rows", [(3, 7), (33, 12), (9, 9), (1, 1)])
def test_block_size_fits(cols, rows):
    size = minimap_block_size(cols, rows, MINIMAP_SIZE)
    assert size * max(cols, rows) <= MINIMAP_SIZE
    assert (size + 1) * max(cols, rows) > MINIMAP_SIZE


def test_block_size_rejects_empty_map():
    with pytest.raises(ValueError):
        minimap_block_size(0, 0, MINIMAP_SIZE)


def test_draw_map_walls_and_floor():
    image = Image(8, 4)
    draw_map(image, ("10",), 4)
    assert image.get_pixel(0, 0) == WHITE
    assert image.get_pixel(2, 2) == WHITE
    assert image.get_pixel(3, 3) == 0
    assert image.get_pixel(3, 0) == 0
    assert image.get_pixel(4, 0) == GREY
    assert image.get_pixel(7, 3) == GREY


def test_draw_ray_horizontal():
    image = Image(10, 10)
    draw_ray(image, Vec2(1.0, 1.0), Vec2(1.0, 0.0), 4)
    assert all(image.get_pixel(x, 4) == OLIVE for x in range(4, 9))
    assert image.get_pixel(9, 4) == 0
    assert image.get_pixel(3, 4) == 0


def test_draw_ray_points_up_for_positive_y():
    image = Image(10, 10)
    draw_ray(image, Vec2(1.0, 1.0), Vec2(0.0, 1.0), 4)
    assert image.get_pixel(4, 0) == OLIVE
    assert image.get_pixel(4, 5) == 0


def test_draw_camera_square_and_heading():
    image = Image(20, 20)
    camera = Camera(position=Vec2(1.5, 1.5), degree=0.0)
    draw_camera(image, camera, 4)
    for x in range(5, 8):
        for y in range(5, 8):
            assert image.get_pixel(x, y) == WHITE
    assert image.get_pixel(12, 6) == WHITE
    assert image.get_pixel(6, 9) == 0
    assert image.get_pixel(3, 6) == 0


def test_draw_fov_stays_inside_room():
    image = Image(20, 20)
    camera = Camera(position=Vec2(2.5, 2.5), degree=0.0)
    draw_fov(image, camera, ROOM, 4)
    assert image.get_pixel(10, 10) == OLIVE
    lit = [
        (x, y)
        for y in range(image.height)
        for x in range(image.width)
        if image.get_pixel(x, y)
    ]
    assert all(image.get_pixel(x, y) == OLIVE for x, y in lit)
    assert all(4 <= x <= 16 and 4 <= y <= 16 for x, y in lit)


def test_draw_fov_faces_heading():
    image = Image(20, 20)
    camera = Camera(position=Vec2(2.5, 2.5), degree=0.0)
    draw_fov(image, camera, ROOM, 4)
    assert image.get_pixel(15, 10) == OLIVE
    assert image.get_pixel(5, 10) == 0