import numpy as np
import pytest

from booth import BoothContext, ShapeStyle
from config import IMG_WIDTH, IMG_HEIGHT
from frame_bounds import CaptureBounds
from stamps import StampImage

RED = (0, 0, 255)
GREEN = (0, 255, 0)
BLUE = (255, 0, 0)


def solid_stamp(name, color, alpha=255, width=IMG_WIDTH, height=IMG_HEIGHT):
    pixels = np.zeros((height, width, 4), np.uint8)
    pixels[:, :, :3] = color
    pixels[:, :, 3] = alpha
    return StampImage(name, pixels)


@pytest.fixture
def catalog():
    return {
        "glasses": solid_stamp("glasses", BLUE),
        "hat": solid_stamp("hat", RED),
        "moustache": solid_stamp("moustache", GREEN),
        "santa": solid_stamp("santa", (255, 255, 255)),
    }


@pytest.fixture
def bounds():
    # Lienzo 800x600: el video ocupa x en [80, 720) e y en [60, 540)
    return CaptureBounds(800, 600)


@pytest.fixture
def style():
    return ShapeStyle(border_color=BLUE, fill_color=RED, border_thickness=2)


@pytest.fixture
def ctx(bounds, catalog, style):
    return BoothContext(bounds, catalog, style_source=lambda: style)


@pytest.fixture
def frame():
    # Frame sintético 640x480 con un gradiente horizontal
    row = np.linspace(0, 255, 640).astype(np.uint8)
    img = np.repeat(row[None, :], 480, axis=0)
    return np.dstack([img, img, img])
