"""Exceptions raised while building images and encoders."""


class ImageCreationError(ValueError):
    """Input could not be turned into a Robot36 image."""

    message = "Invalid image {0}. Should be {1}"

    def __init__(self, actual, expected):
        self.actual = actual
        self.expected = expected
        super().__init__(self.message.format(actual, expected))


class InvalidVectorSize(ImageCreationError):
    message = "Invalid image size {0}. Should be {1}"


class InvalidWidth(ImageCreationError):
    message = "Invalid width {0}. Should be {1}"


class InvalidHeight(ImageCreationError):
    message = "Invalid height {0}. Should be {1}"


class InvalidPixelData(ImageCreationError):
    message = "Invalid pixel data {0}. Should be {1}"


class PixelOutOfBounds(IndexError):
    """A channel lookup fell outside the 320x240 grid."""

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        super().__init__(
            f"Pixel ({x}, {y}) outside {width}x{height} image")


class InvalidSampleRate(ValueError):
    """Sample rate must be a positive integer number of Hz."""

    def __init__(self, rate):
        self.rate = rate
        super().__init__(f"Invalid sample rate {rate!r}. Should be a positive integer")
