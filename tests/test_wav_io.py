"""Tests for robot36_encoder.wav_io."""

import struct

import numpy as np
import pytest

from robot36_encoder.wav_io import WAV_HEADER_SIZE, export_wav, import_wav


class TestExportWav:
    def test_creates_valid_wav(self, tmp_path):
        samples = np.array([0, 1, -1, 32767, -32767], dtype=np.int16)
        filepath = str(tmp_path / "test.wav")

        export_wav(samples, filepath, sample_rate=48000)

        with open(filepath, 'rb') as f:
            data = f.read()

        assert data[:4] == b'RIFF'
        assert data[8:12] == b'WAVE'
        assert data[12:16] == b'fmt '
        assert struct.unpack('<I', data[16:20])[0] == 16

        # Audio format = 1 (PCM), mono, 16 bit
        assert struct.unpack('<H', data[20:22])[0] == 1
        assert struct.unpack('<H', data[22:24])[0] == 1
        assert struct.unpack('<I', data[24:28])[0] == 48000
        assert struct.unpack('<I', data[28:32])[0] == 96000
        assert struct.unpack('<H', data[34:36])[0] == 16

        assert data[36:40] == b'data'
        assert struct.unpack('<I', data[40:44])[0] == len(samples) * 2
        assert struct.unpack('<I', data[4:8])[0] == len(data) - 8

    def test_empty_signal_is_bare_header(self, tmp_path):
        filepath = tmp_path / "empty.wav"
        export_wav(np.array([], dtype=np.int16), str(filepath), sample_rate=8000)
        data = filepath.read_bytes()
        assert len(data) == WAV_HEADER_SIZE == 44
        assert struct.unpack('<I', data[4:8])[0] == 36
        assert struct.unpack('<I', data[40:44])[0] == 0

    def test_little_endian_samples(self, tmp_path):
        filepath = str(tmp_path / "test.wav")
        export_wav(np.array([0x0102, -2], dtype=np.int16), filepath)
        with open(filepath, 'rb') as f:
            f.seek(44)
            assert f.read() == b'\x02\x01\xfe\xff'

    def test_accepts_iterable(self, tmp_path):
        filepath = str(tmp_path / "test.wav")
        export_wav(iter([1, 2, 3]), filepath, sample_rate=8000)
        samples, rate = import_wav(filepath)
        assert rate == 8000
        np.testing.assert_array_equal(samples, [1, 2, 3])


class TestImportWav:
    def test_roundtrip(self, tmp_path):
        samples = np.random.default_rng(1).integers(-32767, 32768, 1000).astype(np.int16)
        filepath = str(tmp_path / "test.wav")
        export_wav(samples, filepath, sample_rate=44100)
        loaded, rate = import_wav(filepath)
        assert rate == 44100
        assert loaded.dtype == np.int16
        np.testing.assert_array_equal(loaded, samples)

    def test_not_riff(self, tmp_path):
        filepath = tmp_path / "bad.wav"
        filepath.write_bytes(b'not a wav file at all')
        with pytest.raises(ValueError):
            import_wav(str(filepath))

    def test_rejects_float_wav(self, tmp_path):
        filepath = tmp_path / "float.wav"
        fmt = struct.pack('<4sIHHIIHH', b'fmt ', 16, 3, 1, 8000, 32000, 4, 32)
        body = b'WAVE' + fmt + struct.pack('<4sI', b'data', 4) + b'\x00' * 4
        filepath.write_bytes(struct.pack('<4sI', b'RIFF', len(body)) + body)
        with pytest.raises(ValueError):
            import_wav(str(filepath))

    def test_missing_data_chunk(self, tmp_path):
        filepath = tmp_path / "nodata.wav"
        fmt = struct.pack('<4sIHHIIHH', b'fmt ', 16, 1, 1, 8000, 16000, 2, 16)
        body = b'WAVE' + fmt
        filepath.write_bytes(struct.pack('<4sI', b'RIFF', len(body)) + body)
        with pytest.raises(ValueError):
            import_wav(str(filepath))
