"""Robot36 test pattern: color bars, gray ramp and black/white blocks."""

import numpy as np

from .constants import IMAGE_WIDTH, IMAGE_HEIGHT

BAR_LEVEL = 191
NUM_BARS = 7
NUM_BLOCKS = 4


def _bar_colors():
    """RGB of the 75% bars: white, yellow, cyan, green, magenta, red, blue."""
    index = np.arange(NUM_BARS)
    on = np.stack([(index // 2) % 2 == 0, index < 4, index % 2 == 0], axis=1)
    return (on * BAR_LEVEL).astype(np.uint8)


def generate_colorbars(width=IMAGE_WIDTH, height=IMAGE_HEIGHT):
    """Generate an RGB test pattern sized for Robot36.

    The top half holds the bars, the next quarter a black to white ramp and
    the bottom quarter alternating black and white blocks.

    Returns:
        RGB frame as numpy array (height x width x 3, uint8).
    """
    columns = np.arange(width)
    ramp_top = height // 2
    ramp_bottom = ramp_top + height // 4

    frame = np.empty((height, width, 3), dtype=np.uint8)
    frame[:ramp_top] = _bar_colors()[columns * NUM_BARS // width]
    ramp = np.linspace(0, 255, width).astype(np.uint8)
    frame[ramp_top:ramp_bottom] = ramp[:, np.newaxis]
    blocks = (columns * NUM_BLOCKS // width) % 2 * 255
    frame[ramp_bottom:] = blocks.astype(np.uint8)[:, np.newaxis]
    return frame
