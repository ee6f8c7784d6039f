"""Phase-continuous complex oscillator."""

import numpy as np

from .constants import OSCILLATOR_START, SAMPLE_SCALE
from .timing import validate_rate


class Oscillator:
    """Frequency-controlled sinusoid generator with no phase jumps.

    The state is a complex phasor rotated once per tick by
    ``frequency * 2π / rate`` radians. Each output depends on the
    accumulated rotation, never on an absolute time index, so changing the
    frequency between ticks keeps the waveform continuous. The rotation
    factor has unit magnitude, so |state| stays at |0.5 + 0.5j| ≈ 0.7071
    and the scaled output stays inside the int16 range without clipping.
    """

    def __init__(self, rate):
        self.rate = validate_rate(rate)
        self.hz_to_rad = 2.0 * np.pi / self.rate
        self.state = OSCILLATOR_START

    def tick(self, frequency):
        """Advance one sample at ``frequency`` Hz and return it as an int."""
        self.state *= complex(np.cos(frequency * self.hz_to_rad),
                              np.sin(frequency * self.hz_to_rad))
        return int(self.state.real * SAMPLE_SCALE)

    def render(self, frequencies):
        """Advance one tick per element of ``frequencies``.

        Block form of :meth:`tick`: the rotation of tick ``k`` is the
        cumulative sum of the angles up to ``k`` applied to the carried
        state, and the last phasor becomes the new state.

        Args:
            frequencies: 1D array-like of frequencies in Hz.

        Returns:
            1D int16 array of samples, same length as ``frequencies``.
        """
        freqs = np.asarray(frequencies, dtype=np.float64)
        if freqs.size == 0:
            return np.empty(0, dtype=np.int16)
        angles = np.cumsum(freqs * self.hz_to_rad)
        phasors = self.state * np.exp(1j * angles)
        self.state = complex(phasors[-1])
        return (phasors.real * SAMPLE_SCALE).astype(np.int16)
