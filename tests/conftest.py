import pytest
from PIL import Image

WHITE = (255, 255, 255, 255)
LIGHT = (200, 180, 160, 255)
MID = (120, 100, 90, 255)
DARK = (40, 30, 20, 255)
BLACK = (0, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


def make_image(rows):
    """Build an RGBA image from rows of RGBA tuples."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    image = Image.new("RGBA", (width, height))
    image.putdata([pixel for row in rows for pixel in row])
    return image


@pytest.fixture
def sprite():
    return make_image(
        [
            [WHITE, WHITE, WHITE, WHITE],
            [WHITE, LIGHT, MID, WHITE],
            [WHITE, DARK, BLACK, WHITE],
            [WHITE, WHITE, WHITE, BLACK],
        ]
    )


@pytest.fixture
def sprite_path(tmp_path, sprite):
    path = tmp_path / "sprite.png"
    sprite.save(path)
    return path
