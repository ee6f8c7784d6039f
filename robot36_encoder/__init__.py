"""Robot36 SSTV Encoder."""

from .color import rgb_to_yuv, rgb_to_yuv_frame
from .image import Robot36Image
from .timing import Timing, ticks
from .oscillator import Oscillator
from .encoder import Encoder
from .errors import (
    ImageCreationError, InvalidVectorSize, InvalidWidth, InvalidHeight,
    InvalidPixelData, PixelOutOfBounds, InvalidSampleRate,
)
from .wav_io import export_wav, import_wav
from .colorbars import generate_colorbars
