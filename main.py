"""CLI entry point for the Robot36 SSTV encoder."""

import argparse
import logging
import sys

import numpy as np
from tqdm import tqdm

from robot36_encoder.constants import (
    IMAGE_WIDTH, IMAGE_HEIGHT, DEFAULT_SAMPLE_RATE, SILENCE_SECS, VIS_HEADER,
)

_INTERPOLATIONS = ('lanczos', 'area', 'linear', 'nearest')


def _read_image_rgb(path):
    """Read an image file as RGB, or exit if OpenCV cannot decode it."""
    import cv2
    frame_bgr = cv2.imread(path)
    if frame_bgr is None:
        print(f"Error: Cannot open image '{path}'")
        sys.exit(1)
    return cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)


def _resize(frame_rgb, interpolation='lanczos'):
    """Resize an RGB frame to 320x240 (no-op if it already fits)."""
    import cv2
    if frame_rgb.shape[:2] == (IMAGE_HEIGHT, IMAGE_WIDTH):
        return frame_rgb
    flags = {
        'lanczos': cv2.INTER_LANCZOS4,
        'area': cv2.INTER_AREA,
        'linear': cv2.INTER_LINEAR,
        'nearest': cv2.INTER_NEAREST,
    }
    return cv2.resize(frame_rgb, (IMAGE_WIDTH, IMAGE_HEIGHT),
                      interpolation=flags[interpolation])


def _encode_to_wav(frame_rgb, rate, output):
    """Encode a 320x240 RGB frame and write the audio as 16-bit WAV."""
    from robot36_encoder.encoder import Encoder
    from robot36_encoder.errors import ImageCreationError, InvalidSampleRate
    from robot36_encoder.image import Robot36Image
    from robot36_encoder.wav_io import export_wav

    try:
        encoder = Encoder(Robot36Image.from_array(frame_rgb), rate)
    except (ImageCreationError, InvalidSampleRate) as e:
        print(f"Error: {e}")
        sys.exit(1)

    blocks = []
    for block in tqdm(encoder.iter_blocks(), total=encoder.num_segments(),
                      unit='segment', desc='Encoding'):
        blocks.append(block)
    samples = np.concatenate(blocks)

    export_wav(samples, output, sample_rate=rate)
    print(f"Done: {output} ({len(samples)} samples, "
          f"{len(samples) / rate:.2f}s at {rate} Hz)")


def cmd_encode(args):
    """Encode an image file to Robot36 audio."""
    frame_rgb = _read_image_rgb(args.input)
    print(f"Input: {args.input} ({frame_rgb.shape[1]}x{frame_rgb.shape[0]})")
    frame_rgb = _resize(frame_rgb, args.interpolation)
    _encode_to_wav(frame_rgb, args.rate, args.output)


def cmd_colorbars(args):
    """Encode the built-in test pattern to Robot36 audio."""
    from robot36_encoder.colorbars import generate_colorbars

    print("Generating test pattern...")
    bars = generate_colorbars()
    _encode_to_wav(bars, args.rate, args.output)

    if args.save_png:
        import cv2
        cv2.imwrite(args.save_png, cv2.cvtColor(bars, cv2.COLOR_RGB2BGR))
        print(f"Saved source pattern: {args.save_png}")


def cmd_inspect(args):
    """Print basic facts about an encoded WAV file."""
    from robot36_encoder.analysis import instantaneous_frequency, segment_frequency
    from robot36_encoder.timing import ticks
    from robot36_encoder.wav_io import import_wav

    try:
        samples, rate = import_wav(args.input)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"{args.input}: {len(samples)} samples at {rate} Hz "
          f"({len(samples) / rate:.2f}s)")

    leader_start = ticks(rate, SILENCE_SECS)
    leader_len = ticks(rate, VIS_HEADER[0][1])
    if len(samples) < leader_start + leader_len:
        print("  Too short to contain a VIS header")
        return

    inst = instantaneous_frequency(samples, rate)
    leader = segment_frequency(inst, leader_start, leader_len)
    brk = segment_frequency(inst, leader_start + leader_len,
                            ticks(rate, VIS_HEADER[1][1]))
    print(f"  Leader tone: {leader:.1f} Hz")
    print(f"  Break tone:  {brk:.1f} Hz")


def main():
    parser = argparse.ArgumentParser(
        description="Robot36 SSTV Encoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  python main.py encode photo.png -o robot36.wav
  python main.py encode photo.png -o robot36.wav --rate 44100
  python main.py colorbars -o colorbars.wav --save-png colorbars.png
  python main.py inspect robot36.wav
        """)
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # encode
    p_enc = subparsers.add_parser('encode', help='Encode an image to Robot36 audio')
    p_enc.add_argument('input', help='Input image file (PNG, JPG, etc.)')
    p_enc.add_argument('-o', '--output', default='robot36.wav', help='Output WAV file')
    p_enc.add_argument('--rate', type=int, default=DEFAULT_SAMPLE_RATE,
                       help=f'Sample rate in Hz (default: {DEFAULT_SAMPLE_RATE})')
    p_enc.add_argument('--interpolation', choices=_INTERPOLATIONS, default='lanczos',
                       help='Filter used to resize the image to 320x240 (default: lanczos)')

    # colorbars
    p_cb = subparsers.add_parser('colorbars', help='Encode the test pattern')
    p_cb.add_argument('-o', '--output', default='colorbars.wav', help='Output WAV file')
    p_cb.add_argument('--rate', type=int, default=DEFAULT_SAMPLE_RATE,
                      help=f'Sample rate in Hz (default: {DEFAULT_SAMPLE_RATE})')
    p_cb.add_argument('--save-png', default=None, help='Also save source pattern as PNG')

    # inspect
    p_ins = subparsers.add_parser('inspect', help='Describe an encoded WAV file')
    p_ins.add_argument('input', help='Input WAV file')

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        'encode': cmd_encode,
        'colorbars': cmd_colorbars,
        'inspect': cmd_inspect,
    }
    commands[args.command](args)


if __name__ == '__main__':
    main()
