"""
AGRI - Image decoding and color-bucket tally for crop image analysis.
Pixel buffers are numpy arrays of shape (height, width, 4), RGBA, uint8.
Every pixel lands in at most one bucket: green, then brown, then yellow.
"""
import logging
from typing import NamedTuple

import cv2
import numpy as np

logger = logging.getLogger(__name__)

# Green: green channel dominant and bright enough
GREEN_MIN_G = 100
# Brown: strong red, moderate green, low blue
BROWN_MIN_R = 150
BROWN_MIN_G = 100
BROWN_MAX_B = 100
# Yellow: strong red and green, moderate blue
YELLOW_MIN_R = 200
YELLOW_MIN_G = 200
YELLOW_MAX_B = 150


class ImageDecodeError(ValueError):
    """Raised when uploaded bytes cannot be turned into a pixel buffer."""


class EmptyImageError(ValueError):
    """Raised when a pixel buffer has zero width or height."""


class ColorTally(NamedTuple):
    green: int
    brown: int
    yellow: int
    total: int

    def _ratio(self, count: int) -> float:
        if self.total <= 0:
            raise EmptyImageError("Invalid image: zero dimensions")
        return count / self.total

    @property
    def green_ratio(self) -> float:
        return self._ratio(self.green)

    @property
    def brown_ratio(self) -> float:
        return self._ratio(self.brown)

    @property
    def yellow_ratio(self) -> float:
        return self._ratio(self.yellow)


def decode_image(image_bytes: bytes) -> np.ndarray:
    """
    Decode JPEG/PNG/... bytes with OpenCV into an RGBA pixel buffer.
    Alpha is kept; fully transparent pixels read as (0, 0, 0, 0), as a browser canvas returns them.
    Raises ImageDecodeError for empty or undecodable input.
    """
    if not image_bytes:
        raise ImageDecodeError("Invalid image: empty file")
    nparr = np.frombuffer(image_bytes, np.uint8)
    img = cv2.imdecode(nparr, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ImageDecodeError("Invalid image: could not decode")

    # 16-bit PNG/TIFF -> 8-bit
    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        img = cv2.normalize(img, None, 0, 255, cv2.NORM_MINMAX).astype(np.uint8)

    if img.ndim == 2:
        rgba = cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    elif img.shape[2] == 4:
        rgba = cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    elif img.shape[2] == 3:
        rgba = cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    else:
        rgba = cv2.cvtColor(np.ascontiguousarray(img[:, :, 0]), cv2.COLOR_GRAY2RGBA)

    rgba[rgba[:, :, 3] == 0] = 0
    return rgba


def _split_rgb(pixels: np.ndarray):
    """Widened (int16) copies of the R, G, B planes; grayscale is read as R = G = B."""
    if pixels.ndim == 2:
        gray = pixels.astype(np.int16)
        return gray, gray, gray
    channels = pixels.shape[2]
    if channels < 3:
        gray = pixels[:, :, 0].astype(np.int16)
        return gray, gray, gray
    rgb = pixels[:, :, :3].astype(np.int16)
    return rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]


def tally_colors(pixels: np.ndarray) -> ColorTally:
    """
    Count green, brown and yellow pixels. Tests run in that order and the first
    match wins, so a pixel in both the brown and yellow ranges counts as brown.
    The input buffer is only read.
    """
    if pixels is None or pixels.ndim not in (2, 3):
        raise ValueError("Invalid pixel buffer: expected (height, width[, channels]) array")
    h, w = pixels.shape[:2]
    if h == 0 or w == 0 or pixels.size == 0:
        raise EmptyImageError("Invalid image: zero dimensions")

    r, g, b = _split_rgb(pixels)
    green = (g > r) & (g > b) & (g > GREEN_MIN_G)
    brown = ~green & (r > BROWN_MIN_R) & (g > BROWN_MIN_G) & (b < BROWN_MAX_B)
    yellow = ~green & ~brown & (r > YELLOW_MIN_R) & (g > YELLOW_MIN_G) & (b < YELLOW_MAX_B)

    tally = ColorTally(
        green=int(np.count_nonzero(green)),
        brown=int(np.count_nonzero(brown)),
        yellow=int(np.count_nonzero(yellow)),
        total=h * w,
    )
    logger.debug("Color tally %dx%d: %s", w, h, tally)
    return tally
