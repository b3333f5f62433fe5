"""
Tests: color tally and image decoding.
"""

import cv2
import numpy as np
import pytest

from conftest import solid_rgba, mixed_rgba
from image_processor import (
    ColorTally,
    EmptyImageError,
    ImageDecodeError,
    decode_image,
    tally_colors,
)


class TestColorBuckets:

    def test_pure_green_is_green(self):
        tally = tally_colors(solid_rgba((0, 255, 0)))
        assert tally == ColorTally(green=100, brown=0, yellow=0, total=100)

    def test_dark_green_is_not_counted(self):
        # green dominant but g <= 100
        tally = tally_colors(solid_rgba((10, 100, 10)))
        assert tally.green == 0

    def test_brown(self):
        tally = tally_colors(solid_rgba((180, 120, 60)))
        assert tally.brown == 100
        assert tally.green == 0 and tally.yellow == 0

    def test_yellow(self):
        tally = tally_colors(solid_rgba((255, 255, 100)))
        assert tally.yellow == 100
        assert tally.brown == 0

    def test_brown_wins_over_yellow(self):
        # in both the brown and yellow ranges
        tally = tally_colors(solid_rgba((255, 255, 90)))
        assert tally.brown == 100
        assert tally.yellow == 0

    def test_overlap_pixel_counts_once_as_brown(self):
        tally = tally_colors(solid_rgba((180, 150, 90)))
        assert tally.brown == 100
        assert tally.green + tally.yellow == 0

    def test_reddish_pixel_is_unclassified(self):
        # g = 50 fails the brown rule
        tally = tally_colors(solid_rgba((200, 50, 50)))
        assert tally == ColorTally(green=0, brown=0, yellow=0, total=100)

    def test_black_and_white_are_unclassified(self):
        for rgb in [(0, 0, 0), (255, 255, 255)]:
            tally = tally_colors(solid_rgba(rgb))
            assert tally.green + tally.brown + tally.yellow == 0
            assert tally.total == 100


class TestTally:

    def test_ratios_use_total_pixels(self):
        img = mixed_rgba([((0, 255, 0), 3), ((180, 120, 60), 2), ((0, 0, 0), 5)])
        tally = tally_colors(img)
        assert tally.green_ratio == pytest.approx(0.3)
        assert tally.brown_ratio == pytest.approx(0.2)
        assert tally.yellow_ratio == 0.0

    def test_buckets_never_exceed_total(self):
        rng = np.random.default_rng(7)
        img = rng.integers(0, 256, size=(37, 53, 4), dtype=np.uint8)
        tally = tally_colors(img)
        assert tally.total == 37 * 53
        assert tally.green + tally.brown + tally.yellow <= tally.total

    def test_order_independent(self):
        img = mixed_rgba([((0, 255, 0), 4), ((255, 255, 120), 6)])
        flipped = img[::-1, ::-1].copy()
        assert tally_colors(img) == tally_colors(flipped)

    def test_input_not_modified(self):
        img = mixed_rgba([((0, 255, 0), 5), ((180, 120, 60), 5)])
        before = img.copy()
        tally_colors(img)
        assert np.array_equal(img, before)

    def test_rgb_and_grayscale_buffers(self):
        rgb = solid_rgba((0, 255, 0))[:, :, :3]
        assert tally_colors(rgb).green == 100
        gray = np.full((4, 5), 255, dtype=np.uint8)
        assert tally_colors(gray) == ColorTally(0, 0, 0, 20)

    def test_zero_dimensions_raise(self):
        with pytest.raises(EmptyImageError):
            tally_colors(np.zeros((0, 10, 4), dtype=np.uint8))
        with pytest.raises(EmptyImageError):
            tally_colors(np.zeros((10, 0, 4), dtype=np.uint8))

    def test_not_a_raster_raises(self):
        with pytest.raises(ValueError):
            tally_colors(np.zeros(16, dtype=np.uint8))


class TestDecodeImage:

    def test_decodes_png_to_rgba(self):
        bgr = np.zeros((6, 8, 3), dtype=np.uint8)
        bgr[:, :] = (0, 255, 0)
        ok, buf = cv2.imencode(".png", bgr)
        assert ok
        pixels = decode_image(buf.tobytes())
        assert pixels.shape == (6, 8, 4)
        assert tuple(pixels[0, 0]) == (0, 255, 0, 255)

    def test_channel_order_is_rgb(self):
        bgr = np.zeros((2, 2, 3), dtype=np.uint8)
        bgr[:, :] = (60, 120, 180)  # B, G, R
        _, buf = cv2.imencode(".png", bgr)
        pixels = decode_image(buf.tobytes())
        assert tuple(pixels[0, 0, :3]) == (180, 120, 60)

    def test_empty_bytes(self):
        with pytest.raises(ImageDecodeError, match="empty"):
            decode_image(b"")

    def test_garbage_bytes(self):
        with pytest.raises(ImageDecodeError, match="could not decode"):
            decode_image(b"definitely not an image")

    def test_transparent_pixels_are_blanked(self):
        bgra = np.zeros((10, 10, 4), dtype=np.uint8)
        bgra[:, :] = (0, 255, 0, 0)  # green hidden under alpha 0
        _, buf = cv2.imencode(".png", bgra)
        pixels = decode_image(buf.tobytes())
        assert pixels.shape == (10, 10, 4)
        assert not pixels.any()
        assert tally_colors(pixels) == ColorTally(green=0, brown=0, yellow=0, total=100)

    def test_alpha_is_kept_for_visible_pixels(self):
        bgra = np.zeros((4, 4, 4), dtype=np.uint8)
        bgra[:, :] = (0, 255, 0, 255)
        bgra[:2, :] = (0, 255, 0, 0)
        _, buf = cv2.imencode(".png", bgra)
        pixels = decode_image(buf.tobytes())
        assert tuple(pixels[3, 0]) == (0, 255, 0, 255)
        assert tuple(pixels[0, 0]) == (0, 0, 0, 0)
        assert tally_colors(pixels).green == 8

    def test_grayscale_png(self):
        gray = np.full((3, 5), 200, dtype=np.uint8)
        _, buf = cv2.imencode(".png", gray)
        pixels = decode_image(buf.tobytes())
        assert pixels.shape == (3, 5, 4)
        assert tuple(pixels[0, 0]) == (200, 200, 200, 255)


class TestColorTallyRatios:

    def test_zero_total_raises_empty_image(self):
        tally = ColorTally(green=0, brown=0, yellow=0, total=0)
        for ratio in ("green_ratio", "brown_ratio", "yellow_ratio"):
            with pytest.raises(EmptyImageError):
                getattr(tally, ratio)
