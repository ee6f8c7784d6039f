"""Frequency measurement of rendered Robot36 audio."""

import numpy as np
from scipy.signal import butter, hilbert, sosfiltfilt

# Below every Robot36 tone (lowest is 1100 Hz); strips the DC of the
# 0 Hz lead-in, which would otherwise skew the analytic signal.
HIGHPASS_HZ = 400.0


def instantaneous_frequency(samples, sample_rate, highpass_hz=HIGHPASS_HZ):
    """Per-sample instantaneous frequency (Hz) of a real signal.

    The signal is high-passed with a zero-phase Butterworth filter, then
    the analytic signal from a Hilbert transform gives the phase. The
    result has one element fewer than ``samples``.
    """
    audio = np.asarray(samples, dtype=np.float64)
    if highpass_hz:
        sos = butter(4, highpass_hz, btype='highpass', fs=sample_rate, output='sos')
        audio = sosfiltfilt(sos, audio)
    phase = np.unwrap(np.angle(hilbert(audio)))
    return np.diff(phase) * sample_rate / (2.0 * np.pi)


def segment_frequency(inst_freq, start, length, trim=0.2):
    """Median frequency of a segment, ignoring ``trim`` of each edge.

    Args:
        inst_freq: Output of :func:`instantaneous_frequency`.
        start: First sample of the segment.
        length: Segment length in samples.
        trim: Fraction of the segment dropped at both ends, where the
            neighbouring tones bleed in.
    """
    margin = int(length * trim)
    window = inst_freq[start + margin:start + length - margin]
    if window.size == 0:
        raise ValueError(f"Segment at {start} too short to measure ({length} samples)")
    return float(np.median(window))
