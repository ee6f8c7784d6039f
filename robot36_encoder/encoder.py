"""Robot36 encoder: YUV image -> phase-continuous FM audio samples.

Transmission order:

    VIS header   silence, leader tones, start bit, VIS code 8, parity, stop bit
    row pair     sync, porch, Y(row y),   sep 1500, porch, V(row y)
                 sync, porch, Y(row y+1), sep 2300, porch, U(row y+1)

Every segment is produced as an array of target frequencies (one per output
sample) and rendered through a single :class:`Oscillator`, so segment
boundaries never break phase.
"""

import logging

import numpy as np

from .constants import (
    SILENCE_HZ, SILENCE_SECS, VIS_HEADER,
    SYNC_HZ, SYNC_PORCH_HZ, PORCH_HZ, BLACK_HZ, SCAN_RANGE_HZ,
    EVEN_SEPARATOR_HZ, ODD_SEPARATOR_HZ,
)
from .oscillator import Oscillator
from .timing import Timing, ticks

logger = logging.getLogger(__name__)


def tone(num_ticks, frequency):
    """Constant-frequency segment of ``num_ticks`` samples."""
    return np.full(num_ticks, frequency, dtype=np.float64)


def scan_positions(num_ticks, width):
    """Source column for each tick of a scan: trunc((width-1) * t / ticks)."""
    t = np.arange(num_ticks, dtype=np.int64)
    return ((width - 1) * t / num_ticks).astype(np.intp)


def level_to_frequency(level):
    """Map channel level(s) in [0, 255] onto 1500-2300 Hz."""
    return BLACK_HZ + SCAN_RANGE_HZ * np.asarray(level, dtype=np.float64) / 255.0


class Encoder:
    """Encodes a :class:`Robot36Image` as Robot36 audio at ``rate`` Hz.

    The encoder holds only the image and the tick table; each call to
    :meth:`encode` (or :meth:`iter_blocks`) starts a fresh oscillator, so
    the same encoder can be traversed again and yields identical samples.
    """

    def __init__(self, image, rate):
        self.image = image
        self.timing = Timing.from_rate(rate)
        self.rate = self.timing.rate

        width = image.width()
        self._y_columns = scan_positions(self.timing.y_scan, width)
        uv_x0 = scan_positions(self.timing.uv_scan, width)
        self._uv_columns = (uv_x0, np.minimum(uv_x0 + 1, width - 1))

    # --- Frequency sequence ---

    def vis_header(self):
        """Yield the VIS header segments as frequency arrays."""
        yield tone(ticks(self.rate, SILENCE_SECS), SILENCE_HZ)
        for frequency, seconds in VIS_HEADER:
            yield tone(ticks(self.rate, seconds), frequency)

    def y_scan(self, row):
        levels = self.image.y_plane[row, self._y_columns]
        return level_to_frequency(levels)

    def _chroma_scan(self, plane, row):
        x0, x1 = self._uv_columns
        pair_sum = plane[row, x0].astype(np.uint16) + plane[row, x1]
        return level_to_frequency(pair_sum // 2)

    def v_scan(self, row):
        return self._chroma_scan(self.image.v_plane, row)

    def u_scan(self, row):
        return self._chroma_scan(self.image.u_plane, row)

    def row_pair(self, row):
        """Yield the segments of rows ``row`` and ``row + 1``."""
        t = self.timing
        yield tone(t.horizontal_sync, SYNC_HZ)
        yield tone(t.sync_porch, SYNC_PORCH_HZ)
        yield self.y_scan(row)
        yield tone(t.separator, EVEN_SEPARATOR_HZ)
        yield tone(t.porch, PORCH_HZ)
        yield self.v_scan(row)

        yield tone(t.horizontal_sync, SYNC_HZ)
        yield tone(t.sync_porch, SYNC_PORCH_HZ)
        yield self.y_scan(row + 1)
        yield tone(t.separator, ODD_SEPARATOR_HZ)
        yield tone(t.porch, PORCH_HZ)
        yield self.u_scan(row + 1)

    def frequencies(self):
        """Yield every segment's target frequencies in transmission order."""
        yield from self.vis_header()
        for row in range(0, self.image.height(), 2):
            yield from self.row_pair(row)

    # --- Lengths ---

    def header_length(self):
        return ticks(self.rate, SILENCE_SECS) + sum(
            ticks(self.rate, seconds) for _, seconds in VIS_HEADER)

    def pair_length(self):
        return self.timing.pair_ticks

    def num_segments(self):
        return 1 + len(VIS_HEADER) + 12 * (self.image.height() // 2)

    def num_samples(self):
        """Total samples produced by :meth:`encode`."""
        return self.header_length() + (self.image.height() // 2) * self.pair_length()

    # --- Samples ---

    def iter_blocks(self):
        """Yield one int16 sample array per segment."""
        oscillator = Oscillator(self.rate)
        logger.debug("Encoding %d samples at %d Hz", self.num_samples(), self.rate)
        for segment in self.frequencies():
            yield oscillator.render(segment)
        logger.debug("Encoding finished")

    def encode(self):
        """Lazy iterator of int samples forming the whole transmission.

        Segments are rendered as blocks, so a sample may differ by 1 LSB from
        feeding the same frequencies through :meth:`Oscillator.tick` one at a
        time.
        """
        for block in self.iter_blocks():
            yield from block.tolist()

    def encode_array(self):
        """Collect the whole transmission into one int16 array."""
        return np.concatenate(list(self.iter_blocks()))
