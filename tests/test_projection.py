from raycub.camera import Camera
from raycub.dda import Side
from raycub.image import Image
from raycub.projection import render_view
from raycub.vector import Vec2

ROOM = ("111111111",) + ("100000001",) * 7 + ("111111111",)

TEXTURE_COLOURS = {
    Side.EAST: 0x00100000,
    Side.SOUTH: 0x00200000,
    Side.WEST: 0x00300000,
    Side.NORTH: 0x00400000,
}
FLOOR = 0xFF112233
CEILING = 0xFF445566


def _solid(colour):
    texture = Image(4, 4)
    for y in range(4):
        for x in range(4):
            texture.put_pixel(x, y, colour)
    return texture


def _textures():
    return [_solid(TEXTURE_COLOURS[side]) for side in Side]


def _render(camera):
    image = Image(20, 10)
    render_view(image, camera, ROOM, _textures(), FLOOR, CEILING)
    return image


def test_facing_east_hits_west_face():
    image = _render(Camera(position=Vec2(4.5, 4.5), degree=0.0))
    assert image.get_pixel(10, 5) == TEXTURE_COLOURS[Side.WEST]
    assert image.get_pixel(10, 4) == TEXTURE_COLOURS[Side.WEST]
    assert image.get_pixel(10, 0) == CEILING
    assert image.get_pixel(10, 9) == FLOOR


def test_facing_north_hits_south_face():
    image = _render(Camera(position=Vec2(4.5, 4.5), degree=90.0))
    assert image.get_pixel(10, 5) == TEXTURE_COLOURS[Side.SOUTH]
    assert image.get_pixel(10, 0) == CEILING
    assert image.get_pixel(10, 9) == FLOOR


def test_close_wall_fills_column():
    image = _render(Camera(position=Vec2(7.6, 4.5), degree=0.0))
    column = [image.get_pixel(10, y) for y in range(1, 9)]
    assert column == [TEXTURE_COLOURS[Side.WEST]] * 8


def test_every_pixel_is_known_colour():
    image = _render(Camera(position=Vec2(3.2, 5.7), degree=37.0))
    allowed = {FLOOR, CEILING, 0, *TEXTURE_COLOURS.values()}
    assert set(image.pixels) <= allowed
    assert image.get_pixel(0, 0) == CEILING
    assert image.get_pixel(19, 9) == FLOOR


def test_nearer_wall_is_taller():
    far = _render(Camera(position=Vec2(1.5, 4.5), degree=0.0))
    near = _render(Camera(position=Vec2(6.5, 4.5), degree=0.0))

    def wall_rows(image):
        return sum(1 for y in range(image.height) if image.get_pixel(10, y) not in (FLOOR, CEILING))

    assert wall_rows(near) > wall_rows(far)


def test_empty_image_is_left_alone():
    image = Image(0, 0)
    render_view(image, Camera(position=Vec2(4.5, 4.5)), ROOM, _textures(), FLOOR, CEILING)
    assert image.pixels == []