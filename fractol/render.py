"""Pixel buffer and multi-threaded fractal rendering."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from fractol.color import colorize
from fractol.config import (
    HEIGHT,
    NUM_THREADS,
    WIDTH,
    Config,
    FractalType,
    calculate_max_iter,
)
from fractol.sets import escape_rows


class Image:
    """A grid of 0xRRGGBB pixels, stored row by row."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the image are ignored."""
        if self._contains(x, y):
            self.pixels[y, x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The colour of one pixel."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside the image")
        return int(self.pixels[y, x])


def row_bands(height: int = HEIGHT, count: int = NUM_THREADS) -> list[tuple[int, int]]:
    """Split ``height`` rows into ``count`` bands; the last takes the remainder."""
    if count < 1:
        raise ValueError("band count must be at least 1")
    if height < 0:
        raise ValueError("height must not be negative")
    step = height // count
    return [
        (i * step, height if i == count - 1 else (i + 1) * step)
        for i in range(count)
    ]


def render_fractal(config: Config, image: Image) -> Image:
    """Recompute the iteration limit and draw the configured fractal into ``image``."""
    config.max_iter = calculate_max_iter(config.zoom)
    if config.type is FractalType.NONE:
        return image
    if (image.width, image.height) != (WIDTH, HEIGHT):
        raise ValueError(f"image must be {WIDTH}x{HEIGHT}")

    def draw(band: tuple[int, int]) -> None:
        start, end = band
        counts = escape_rows(config, start, end)
        image.pixels[start:end] = colorize(counts, config.max_iter)

    with ThreadPoolExecutor(max_workers=NUM_THREADS) as pool:
        list(pool.map(draw, row_bands(HEIGHT, NUM_THREADS)))
    return image