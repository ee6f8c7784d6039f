"""Tests for the command-line entry point."""

import sys

import numpy as np
import pytest

import main
from robot36_encoder.colorbars import generate_colorbars
from robot36_encoder.wav_io import import_wav

from conftest import FAST_RATE


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, 'argv', ['main.py', *argv])
    main.main()


class TestEncodeToWav:
    @pytest.mark.parametrize("rate", [0, -8000])
    def test_bad_rate_exits(self, tmp_path, capsys, rate):
        output = tmp_path / "out.wav"
        with pytest.raises(SystemExit) as excinfo:
            main._encode_to_wav(generate_colorbars(), rate, str(output))
        assert excinfo.value.code == 1
        assert "Error: Invalid sample rate" in capsys.readouterr().out
        assert not output.exists()

    def test_wrong_size_exits(self, tmp_path, capsys):
        frame = np.zeros((10, 10, 3), dtype=np.uint8)
        with pytest.raises(SystemExit) as excinfo:
            main._encode_to_wav(frame, FAST_RATE, str(tmp_path / "out.wav"))
        assert excinfo.value.code == 1
        assert "Error: Invalid width 10" in capsys.readouterr().out


class TestCommands:
    def test_colorbars_rate_zero(self, tmp_path, monkeypatch, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(monkeypatch, 'colorbars', '-o', str(tmp_path / "cb.wav"), '--rate', '0')
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_colorbars_writes_wav(self, tmp_path, monkeypatch):
        output = tmp_path / "cb.wav"
        _run(monkeypatch, 'colorbars', '-o', str(output), '--rate', str(FAST_RATE))
        samples, rate = import_wav(str(output))
        assert rate == FAST_RATE
        assert len(samples) == 297680

    def test_missing_image_exits(self, tmp_path, monkeypatch, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(monkeypatch, 'encode', str(tmp_path / "missing.png"))
        assert excinfo.value.code == 1
        assert "Cannot open image" in capsys.readouterr().out

    def test_no_command_exits(self, monkeypatch):
        with pytest.raises(SystemExit) as excinfo:
            _run(monkeypatch)
        assert excinfo.value.code == 1
