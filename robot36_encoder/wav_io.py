"""16-bit PCM mono WAV export/import for encoded Robot36 audio."""

import struct

import numpy as np

from .constants import DEFAULT_SAMPLE_RATE

# RIFF header, fmt chunk and data chunk header in one block
WAV_HEADER_FORMAT = "<4sI4s4sIHHIIHH4sI"
WAV_HEADER_SIZE = struct.calcsize(WAV_HEADER_FORMAT)
WAVE_FORMAT_PCM = 1
BYTES_PER_SAMPLE = 2


def export_wav(samples, filepath, sample_rate=DEFAULT_SAMPLE_RATE):
    """Write samples as a 16-bit PCM mono WAV file (format tag 1).

    Args:
        samples: Iterable or 1D array of int16 samples.
        filepath: Output WAV file path.
        sample_rate: Sample rate the samples were encoded at.
    """
    audio = np.asarray(
        samples if isinstance(samples, np.ndarray) else list(samples),
        dtype='<i2',
    )
    data = audio.tobytes()
    header = struct.pack(
        WAV_HEADER_FORMAT,
        b'RIFF', WAV_HEADER_SIZE - 8 + len(data), b'WAVE',
        b'fmt ', 16, WAVE_FORMAT_PCM, 1, sample_rate,
        sample_rate * BYTES_PER_SAMPLE, BYTES_PER_SAMPLE, 8 * BYTES_PER_SAMPLE,
        b'data', len(data),
    )
    with open(filepath, 'wb') as f:
        f.write(header)
        f.write(data)


def import_wav(filepath):
    """Read a 16-bit PCM mono WAV file.

    Args:
        filepath: Input WAV file path.

    Returns:
        Tuple of (samples, sample_rate) where samples is a 1D int16 array.

    Raises:
        ValueError: if the file is not a 16-bit PCM mono WAV.
    """
    with open(filepath, 'rb') as f:
        header = f.read(12)
        if len(header) < 12:
            raise ValueError("Not a valid WAV file")
        riff_id, _, wave_id = struct.unpack('<4sI4s', header)
        if riff_id != b'RIFF' or wave_id != b'WAVE':
            raise ValueError("Not a valid WAV file")

        format_tag = None
        num_channels = None
        sample_rate = None
        bits_per_sample = None
        audio_data = None

        while True:
            chunk_header = f.read(8)
            if len(chunk_header) < 8:
                break
            chunk_id, chunk_size = struct.unpack('<4sI', chunk_header)

            if chunk_id == b'fmt ':
                fmt_data = f.read(chunk_size)
                format_tag, num_channels, sample_rate = struct.unpack('<HHI', fmt_data[0:8])
                bits_per_sample = struct.unpack('<H', fmt_data[14:16])[0]
            elif chunk_id == b'data':
                audio_data = f.read(chunk_size)
            else:
                f.read(chunk_size)
            if chunk_size % 2 != 0:
                f.read(1)

    if format_tag is None or audio_data is None:
        raise ValueError("WAV file missing fmt or data chunk")
    if format_tag != WAVE_FORMAT_PCM or bits_per_sample != 16:
        raise ValueError(
            f"Unsupported WAV format tag {format_tag} / {bits_per_sample} bit")
    if num_channels != 1:
        raise ValueError(f"Expected mono WAV, got {num_channels} channels")

    samples = np.frombuffer(audio_data, dtype='<i2').astype(np.int16)
    return samples, sample_rate
