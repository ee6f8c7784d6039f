"""Robot36 SSTV protocol constants."""

import numpy as np

# --- Image ---
IMAGE_WIDTH = 320
IMAGE_HEIGHT = 240
IMAGE_SIZE = IMAGE_WIDTH * IMAGE_HEIGHT          # 76,800 pixels
RGB_BYTES = IMAGE_SIZE * 3                       # 230,400 bytes

DEFAULT_SAMPLE_RATE = 48000

# --- Segment durations (seconds) ---
HORIZONTAL_SYNC_SECS = 0.009
SYNC_PORCH_SECS = 0.003
PORCH_SECS = 0.0015
SEPARATOR_SECS = 0.0045
Y_SECS = 0.088                                   # luma scan, one row
UV_SECS = 0.044                                  # chroma scan, half row

# --- Tone frequencies (Hz) ---
SYNC_HZ = 1200.0
BLACK_HZ = 1500.0
WHITE_HZ = 2300.0
PORCH_HZ = 1900.0
VIS_BIT1_HZ = 1100.0
VIS_BIT0_HZ = 1300.0
LEADER_HZ = 1900.0
SILENCE_HZ = 0.0

SYNC_PORCH_HZ = BLACK_HZ
EVEN_SEPARATOR_HZ = BLACK_HZ                     # after the V (Cr) line
ODD_SEPARATOR_HZ = WHITE_HZ                      # after the U (Cb) line
SCAN_RANGE_HZ = WHITE_HZ - BLACK_HZ              # 800 Hz

# --- VIS header ---
VIS_CODE = 8
SILENCE_SECS = 0.3

# (frequency Hz, duration s) after the leading silence.
# Mode bits are sent LSB first, 1100 Hz = 1, 1300 Hz = 0, then even parity.
VIS_HEADER = (
    (LEADER_HZ, 0.3),
    (SYNC_HZ, 0.01),
    (LEADER_HZ, 0.3),
    (SYNC_HZ, 0.03),         # start bit
    (VIS_BIT0_HZ, 0.03),     # bit 0
    (VIS_BIT0_HZ, 0.03),
    (VIS_BIT0_HZ, 0.03),
    (VIS_BIT1_HZ, 0.03),     # bit 3
    (VIS_BIT0_HZ, 0.03),
    (VIS_BIT0_HZ, 0.03),
    (VIS_BIT0_HZ, 0.03),     # bit 6
    (VIS_BIT1_HZ, 0.03),     # parity
    (SYNC_HZ, 0.03),         # stop bit
)

# --- Oscillator ---
OSCILLATOR_START = complex(0.5, 0.5)             # |z| ≈ 0.7071
SAMPLE_SCALE = 32767                             # int16 max

# --- RGB -> YUV (BT.601 studio swing, scaled by 1/256) ---
# Evaluated in float32 to reproduce the reference output exactly.
YUV_SCALE = np.float32(0.003906)
Y_OFFSET = np.float32(16.0)
UV_OFFSET = np.float32(128.0)

RGB_TO_Y = np.array([65.738, 129.057, 25.064], dtype=np.float32)
RGB_TO_V = np.array([112.439, -94.154, -18.285], dtype=np.float32)
RGB_TO_U = np.array([-37.945, -74.494, 112.439], dtype=np.float32)
