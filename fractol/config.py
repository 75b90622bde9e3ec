"""View configuration and command-line parsing for the fractal viewer."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass

WIDTH = 800
HEIGHT = 800
NUM_THREADS = 4

DEFAULT_MAX_ITER = 100
MIN_ITER = 100
MAX_ITER = 1000

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class FractalType(enum.Enum):
    """The kind of fractal to draw."""

    NONE = 0
    MANDELBROT = 1
    JULIA = 2


class UsageError(ValueError):
    """Raised when the command-line arguments are not valid."""


@dataclass
class Config:
    """The state of the view: fractal kind, zoom, centre and Julia constant."""

    type: FractalType = FractalType.NONE
    max_iter: int = DEFAULT_MAX_ITER
    zoom: float = WIDTH / 4.0
    center_r: float = 0.0
    center_i: float = 0.0
    julia_r: float = 0.0
    julia_i: float = 0.0

    def pixel_to_complex(self, x: float, y: float) -> tuple[float, float]:
        """Map a pixel position to the point of the complex plane it shows."""
        return (
            (x - WIDTH / 2.0) / self.zoom + self.center_r,
            (y - HEIGHT / 2.0) / self.zoom + self.center_i,
        )


def _atof(text: str) -> float:
    """Read the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group().strip())


def parse_fractal_type(arg: str) -> FractalType:
    """Return the fractal type named by ``arg``."""
    if arg == "mandelbrot":
        return FractalType.MANDELBROT
    if arg == "julia":
        return FractalType.JULIA
    raise UsageError(f"unknown fractal type: {arg!r}")


def parse_args(argv: list[str]) -> Config:
    """Build a configuration from the arguments that follow the program name."""
    if not argv:
        raise UsageError("no fractal type given")
    config = Config(type=parse_fractal_type(argv[0]))
    if config.type is FractalType.JULIA:
        if len(argv) != 3:
            raise UsageError("julia takes exactly two parameters")
        config.julia_r = _atof(argv[1])
        config.julia_i = _atof(argv[2])
        config.center_r = 0.0
    else:
        if len(argv) != 1:
            raise UsageError("mandelbrot takes no parameters")
        config.center_r = -0.5
    return config


def calculate_max_iter(zoom: float) -> int:
    """Iteration limit for a zoom level, growing logarithmically and clamped."""
    if not zoom > 0:
        return MIN_ITER
    max_iter = 100 + int(math.log(zoom / 200.0) * 50)
    return max(MIN_ITER, min(MAX_ITER, max_iter))