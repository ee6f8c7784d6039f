"""RGB -> YUV color transform used by the Robot36 scan lines.

Each channel value is an 8-bit unsigned integer tagged with its role. The
tags are ``typing.NewType`` wrappers over ``int``: they cost nothing at
runtime, and a type checker rejects a Y value passed where a U is expected.
"""

from typing import NewType

import numpy as np

from .constants import (
    YUV_SCALE, Y_OFFSET, UV_OFFSET, RGB_TO_Y, RGB_TO_U, RGB_TO_V,
)

R = NewType('R', int)
G = NewType('G', int)
B = NewType('B', int)
Y = NewType('Y', int)
U = NewType('U', int)
V = NewType('V', int)

_F = np.float32


def _clamp(x):
    """Clamp to [0, 255] and truncate toward zero."""
    if x < 0.0:
        return 0
    if x > 255.0:
        return 255
    return int(x)


def _weighted(coeffs, r, g, b):
    # Summation order is part of the contract: (c0*r + c1*g) + c2*b
    return coeffs[0] * r + coeffs[1] * g + coeffs[2] * b


def rgb_to_yuv(r, g, b):
    """Convert one RGB triple to a (Y, U, V) triple.

    Arithmetic runs in float32 with the reference coefficients, and the
    result is clamped to [0, 255] and truncated (not rounded).

    Args:
        r, g, b: Channel values in [0, 255].

    Returns:
        Tuple ``(Y, U, V)`` of ints in [0, 255].
    """
    r, g, b = _F(r), _F(g), _F(b)
    y = _clamp(Y_OFFSET + YUV_SCALE * _weighted(RGB_TO_Y, r, g, b))
    u = _clamp(UV_OFFSET + YUV_SCALE * _weighted(RGB_TO_U, r, g, b))
    v = _clamp(UV_OFFSET + YUV_SCALE * _weighted(RGB_TO_V, r, g, b))
    return Y(y), U(u), V(v)


def rgb_to_yuv_frame(frame):
    """Convert an RGB frame (H x W x 3, uint8) to Y, U and V planes.

    Vectorized form of :func:`rgb_to_yuv`; every pixel matches the scalar
    function exactly.

    Returns:
        Tuple of three (H x W) uint8 arrays ``(y, u, v)``.
    """
    rgb = np.asarray(frame).astype(np.float32)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    y = Y_OFFSET + YUV_SCALE * _weighted(RGB_TO_Y, r, g, b)
    u = UV_OFFSET + YUV_SCALE * _weighted(RGB_TO_U, r, g, b)
    v = UV_OFFSET + YUV_SCALE * _weighted(RGB_TO_V, r, g, b)
    return tuple(
        np.clip(plane, _F(0.0), _F(255.0)).astype(np.uint8)
        for plane in (y, u, v)
    )
