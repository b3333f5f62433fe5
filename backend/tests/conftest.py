import os
import sys

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def solid_rgba(rgb, height=10, width=10):
    r, g, b = rgb
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :] = (r, g, b, 255)
    return img


def mixed_rgba(parts, height=10, width=10):
    """Image whose rows are filled with colors in proportion: [((r, g, b), n_rows), ...]."""
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :, 3] = 255
    row = 0
    for (r, g, b), rows in parts:
        img[row:row + rows, :, :3] = (r, g, b)
        row += rows
    return img
