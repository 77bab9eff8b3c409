from mcaregion.region import ChunkLocation
from mcaregion.render import occupancy_image, ABSENT_COLOR


def test_empty_region():
    image = occupancy_image([])

    assert image.size == (32, 32)
    assert image.getpixel((0, 0)) == ABSENT_COLOR


def test_occupancy():
    locations = [
        ChunkLocation(0, 2 * 4096, 4096, 100),
        ChunkLocation(33, 3 * 4096, 4096, 200),
    ]

    image = occupancy_image(locations)

    assert image.getpixel((0, 0)) == (0, 64, 0)
    assert image.getpixel((1, 1)) == (0, 255, 0)
    assert image.getpixel((1, 0)) == ABSENT_COLOR


def test_scale():
    image = occupancy_image([ChunkLocation(31, 2 * 4096, 4096, 0)], scale=4)

    assert image.size == (128, 128)
    assert image.getpixel((31 * 4, 0)) == (0, 255, 0)
    assert image.getpixel((31 * 4 - 1, 0)) == ABSENT_COLOR
