"""Mapping of escape counts to RGB colours."""

from __future__ import annotations

import numpy as np

PALETTE = (0x8B00FF, 0xFF4500, 0xFF0066, 0xCC00FF, 0xFF6600, 0xDD0033)
INSIDE_COLOR = 0x0A0A2E


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _blend(first: int, second: int, blend: float) -> int:
    r1, g1, _ = _channels(first)
    r2, g2, b2 = _channels(second)
    r = int(r1 * (1 - blend) + r2 * blend)
    g = int(g1 * (1 - blend) + g2 * blend)
    # The blue channel is taken from the second colour on both sides.
    b = int(b2 * (1 - blend) + b2 * blend)
    return (r << 16) | (g << 8) | b


def colorpicker(iteration: int, max_iter: int) -> int:
    """Colour for a point that escaped after ``iteration`` of ``max_iter`` steps."""
    if iteration < 0:
        raise ValueError("iteration count must not be negative")
    if iteration == max_iter:
        return INSIDE_COLOR
    position = (iteration / max_iter) * 5
    index = int(position)
    if index >= 5:
        return PALETTE[5]
    return _blend(PALETTE[index], PALETTE[index + 1], position - index)


def colorize(iterations, max_iter: int) -> np.ndarray:
    """Colours, as uint32, for an array of escape counts in 0..max_iter."""
    counts = np.asarray(iterations, dtype=np.int64)
    if counts.size and (counts.min() < 0 or counts.max() > max_iter):
        raise ValueError("iteration counts must lie in 0..max_iter")
    table = np.array(
        [colorpicker(i, max_iter) for i in range(max_iter + 1)], dtype=np.uint32
    )
    return table[counts]