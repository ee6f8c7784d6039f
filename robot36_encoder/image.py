"""Fixed-size YUV image model consumed by the encoder."""

import logging

import numpy as np

from .color import Y, U, V, rgb_to_yuv_frame
from .constants import IMAGE_WIDTH, IMAGE_HEIGHT, RGB_BYTES
from .errors import (
    InvalidVectorSize, InvalidWidth, InvalidHeight, InvalidPixelData,
    PixelOutOfBounds,
)

logger = logging.getLogger(__name__)


class Robot36Image:
    """Immutable 320x240 grid of (Y, U, V) pixels.

    The RGB input is converted once at construction and discarded. Use
    :meth:`from_rgb_bytes` or :meth:`from_array` rather than calling the
    constructor directly; resizing to 320x240 is the caller's job.
    """

    def __init__(self, frame):
        y, u, v = rgb_to_yuv_frame(frame)
        for plane in (y, u, v):
            plane.flags.writeable = False
        self._y = y
        self._u = u
        self._v = v
        logger.debug("Built %dx%d Robot36 image", IMAGE_WIDTH, IMAGE_HEIGHT)

    @classmethod
    def from_rgb_bytes(cls, data):
        """Build an image from a flat R,G,B byte sequence (row-major).

        Args:
            data: bytes-like object, sequence of ints, or 1D integer array of
                exactly 320*240*3 values in [0, 255].

        Raises:
            InvalidVectorSize: if the length is not 230400.
            InvalidPixelData: if a value is not an integer in [0, 255].
        """
        if isinstance(data, (bytes, bytearray, memoryview)):
            flat = np.frombuffer(data, dtype=np.uint8)
        else:
            flat = np.asarray(data).ravel()
        if flat.size != RGB_BYTES:
            raise InvalidVectorSize(int(flat.size), RGB_BYTES)
        if flat.dtype != np.uint8:
            if flat.dtype.kind not in 'iu':
                raise InvalidPixelData(str(flat.dtype), 'integers in [0, 255]')
            out_of_range = (flat < 0) | (flat > 255)
            if out_of_range.any():
                bad = int(flat[np.argmax(out_of_range)])
                raise InvalidPixelData(bad, 'integers in [0, 255]')
            flat = flat.astype(np.uint8)
        return cls(flat.reshape(IMAGE_HEIGHT, IMAGE_WIDTH, 3))

    @classmethod
    def from_array(cls, frame):
        """Build an image from a decoded RGB frame (H x W x 3, uint8).

        Raises:
            InvalidWidth: if W != 320.
            InvalidHeight: if H != 240.
            InvalidVectorSize: if the array is not H x W x 3.
            InvalidPixelData: if the dtype is not uint8.
        """
        frame = np.asarray(frame)
        if frame.ndim != 3 or frame.shape[2] != 3:
            raise InvalidVectorSize(int(frame.size), RGB_BYTES)
        height, width = frame.shape[:2]
        if width != IMAGE_WIDTH:
            raise InvalidWidth(width, IMAGE_WIDTH)
        if height != IMAGE_HEIGHT:
            raise InvalidHeight(height, IMAGE_HEIGHT)
        if frame.dtype != np.uint8:
            raise InvalidPixelData(str(frame.dtype), 'uint8')
        return cls(frame)

    def width(self):
        return IMAGE_WIDTH

    def height(self):
        return IMAGE_HEIGHT

    @property
    def y_plane(self):
        """Read-only (240 x 320) uint8 luma plane."""
        return self._y

    @property
    def u_plane(self):
        return self._u

    @property
    def v_plane(self):
        return self._v

    def _check(self, x, y):
        if not (0 <= x < IMAGE_WIDTH and 0 <= y < IMAGE_HEIGHT):
            raise PixelOutOfBounds(x, y, IMAGE_WIDTH, IMAGE_HEIGHT)

    def get_y(self, x, y):
        self._check(x, y)
        return Y(int(self._y[y, x]))

    def get_u(self, x, y):
        self._check(x, y)
        return U(int(self._u[y, x]))

    def get_v(self, x, y):
        self._check(x, y)
        return V(int(self._v[y, x]))

    def __repr__(self):
        return f"Robot36Image({IMAGE_WIDTH}x{IMAGE_HEIGHT})"
