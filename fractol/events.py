"""Keyboard and mouse handling that moves and zooms the view."""

from __future__ import annotations

import enum

from fractol.config import Config

ZOOM_FACTOR = 1.2
PAN_PIXELS = 20.0
WHEEL_UP = 4
WHEEL_DOWN = 5


class Key(enum.IntEnum):
    """Key codes the viewer reacts to."""

    ESCAPE = 65307
    EQUAL = 61
    KP_ADD = 86
    MINUS = 45
    KP_SUBTRACT = 82
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


def key_press(config: Config, keycode: int) -> bool:
    """Apply a key to the view; True when the view changed.

    Escape requests that the program ends by raising ``SystemExit(0)``.
    """
    if keycode == Key.ESCAPE:
        raise SystemExit(0)
    if keycode in (Key.EQUAL, Key.KP_ADD):
        config.zoom *= ZOOM_FACTOR
    elif keycode in (Key.MINUS, Key.KP_SUBTRACT):
        config.zoom /= ZOOM_FACTOR
    elif keycode == Key.UP:
        config.center_i -= PAN_PIXELS / config.zoom
    elif keycode == Key.DOWN:
        config.center_i += PAN_PIXELS / config.zoom
    elif keycode == Key.LEFT:
        config.center_r -= PAN_PIXELS / config.zoom
    elif keycode == Key.RIGHT:
        config.center_r += PAN_PIXELS / config.zoom
    else:
        return False
    return True


def mouse_press(config: Config, button: int) -> bool:
    """Zoom with the wheel buttons; True when the view changed."""
    if button == WHEEL_UP:
        config.zoom *= ZOOM_FACTOR
    elif button == WHEEL_DOWN:
        config.zoom /= ZOOM_FACTOR
    else:
        return False
    return True