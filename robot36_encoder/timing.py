"""Conversion of protocol durations into sample (tick) counts."""

import logging
import math
import numbers
from dataclasses import dataclass

from .constants import (
    HORIZONTAL_SYNC_SECS, SYNC_PORCH_SECS, PORCH_SECS, SEPARATOR_SECS,
    Y_SECS, UV_SECS,
)
from .errors import InvalidSampleRate

logger = logging.getLogger(__name__)


def ticks(rate, seconds):
    """Number of whole samples covering ``seconds`` at ``rate`` Hz.

    Computed as ``floor(rate * seconds)`` in double precision, so
    ``ticks(48000, 0.009) == 431``.
    """
    return int(math.floor(rate * seconds))


def validate_rate(rate):
    """Return ``rate`` as an int, or raise InvalidSampleRate."""
    if isinstance(rate, bool) or not isinstance(rate, numbers.Integral) or rate <= 0:
        raise InvalidSampleRate(rate)
    return int(rate)


@dataclass(frozen=True)
class Timing:
    """Tick counts of each Robot36 line segment at one sample rate."""

    rate: int
    horizontal_sync: int
    sync_porch: int
    porch: int
    separator: int
    y_scan: int
    uv_scan: int

    @classmethod
    def from_rate(cls, rate):
        rate = validate_rate(rate)
        timing = cls(
            rate=rate,
            horizontal_sync=ticks(rate, HORIZONTAL_SYNC_SECS),
            sync_porch=ticks(rate, SYNC_PORCH_SECS),
            porch=ticks(rate, PORCH_SECS),
            separator=ticks(rate, SEPARATOR_SECS),
            y_scan=ticks(rate, Y_SECS),
            uv_scan=ticks(rate, UV_SECS),
        )
        logger.debug("Timing at %d Hz: %s", rate, timing)
        return timing

    @property
    def line_ticks(self):
        """Samples in one row, excluding its chroma scan."""
        return (self.horizontal_sync + self.sync_porch + self.y_scan
                + self.separator + self.porch)

    @property
    def pair_ticks(self):
        """Samples in one row pair (two luma rows, one V and one U scan)."""
        return 2 * self.line_ticks + 2 * self.uv_scan
