"""Escape-time iteration for the Mandelbrot and Julia sets."""

from __future__ import annotations

import numpy as np

from fractol.config import HEIGHT, WIDTH, Config, FractalType


def _escape(z_r: float, z_i: float, c_r: float, c_i: float, max_iter: int) -> int:
    iteration = 0
    while z_r * z_r + z_i * z_i <= 4.0 and iteration < max_iter:
        z_r, z_i = z_r * z_r - z_i * z_i + c_r, 2.0 * z_r * z_i + c_i
        iteration += 1
    return iteration


def mandelbrot_escape(c_r: float, c_i: float, max_iter: int) -> int:
    """Steps before z -> z*z + c, from z = 0, leaves the radius-2 disc."""
    return _escape(0.0, 0.0, c_r, c_i, max_iter)


def julia_escape(z_r: float, z_i: float, c_r: float, c_i: float, max_iter: int) -> int:
    """Steps before z -> z*z + c, from the given z, leaves the radius-2 disc."""
    return _escape(z_r, z_i, c_r, c_i, max_iter)


def escape_rows(config: Config, start_y: int, end_y: int) -> np.ndarray:
    """Escape counts for image rows ``start_y`` up to ``end_y``, one per pixel."""
    if not 0 <= start_y <= end_y <= HEIGHT:
        raise ValueError(f"row range {start_y}..{end_y} outside 0..{HEIGHT}")
    if config.type is FractalType.NONE:
        raise ValueError("no fractal type selected")

    xs = (np.arange(WIDTH) - WIDTH / 2.0) / config.zoom + config.center_r
    ys = (np.arange(start_y, end_y) - HEIGHT / 2.0) / config.zoom + config.center_i
    plane_r, plane_i = np.meshgrid(xs, ys)
    shape = plane_r.shape
    plane_r = plane_r.ravel()
    plane_i = plane_i.ravel()

    if config.type is FractalType.MANDELBROT:
        z_r = np.zeros_like(plane_r)
        z_i = np.zeros_like(plane_i)
        c_r, c_i = plane_r, plane_i
    else:
        z_r, z_i = plane_r.copy(), plane_i.copy()
        c_r = np.full_like(plane_r, config.julia_r)
        c_i = np.full_like(plane_i, config.julia_i)

    counts = np.zeros(z_r.size, dtype=np.int64)
    active = np.flatnonzero(z_r * z_r + z_i * z_i <= 4.0)
    for _ in range(config.max_iter):
        if active.size == 0:
            break
        a = z_r[active]
        b = z_i[active]
        new_r = a * a - b * b + c_r[active]
        new_i = 2.0 * a * b + c_i[active]
        z_r[active] = new_r
        z_i[active] = new_i
        counts[active] += 1
        active = active[new_r * new_r + new_i * new_i <= 4.0]
    return counts.reshape(shape)