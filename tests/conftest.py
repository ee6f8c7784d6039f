"""Shared fixtures for Robot36 encoder tests."""

import numpy as np
import pytest

from robot36_encoder.colorbars import generate_colorbars
from robot36_encoder.constants import IMAGE_WIDTH, IMAGE_HEIGHT
from robot36_encoder.image import Robot36Image

# Low rate keeps full encodes fast; every tick count is exact at 8 kHz.
FAST_RATE = 8000


def solid_frame(color):
    """320x240 RGB frame filled with one color."""
    frame = np.empty((IMAGE_HEIGHT, IMAGE_WIDTH, 3), dtype=np.uint8)
    frame[:] = color
    return frame


@pytest.fixture
def random_frame():
    """Random 320x240 RGB frame."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, (IMAGE_HEIGHT, IMAGE_WIDTH, 3), dtype=np.uint8)


@pytest.fixture
def black_image():
    return Robot36Image.from_array(solid_frame((0, 0, 0)))


@pytest.fixture
def white_image():
    return Robot36Image.from_array(solid_frame((255, 255, 255)))


@pytest.fixture
def colorbars_image():
    return Robot36Image.from_array(generate_colorbars())
