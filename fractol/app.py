"""Command-line entry point: parse arguments and run the interactive viewer."""

from __future__ import annotations

import sys

import numpy as np

from fractol.config import HEIGHT, WIDTH, Config, UsageError, parse_args
from fractol.events import Key, key_press, mouse_press
from fractol.printf import printf
from fractol.render import Image, render_fractal

_USAGE_LINES = (
    "Usage:",
    "  ./fractol mandelbrot",
    "  ./fractol julia <real> <imag>",
    "",
    "Options:",
    "  mandelbrot           Display Mandelbrot set",
    "  julia r i            Display Julia set with parameters",
)

_EXIT_MESSAGES = (
    "Programme terminé avec succès.",
    "Erreur : allocation mémoire échouée.",
    "Erreur inconnue.",
)


def usage_text() -> str:
    """The help text shown when the arguments are wrong."""
    return "\n".join(_USAGE_LINES) + "\n"


def exit_message(code: int) -> str:
    """The message printed when the program stops with ``code``."""
    if not 0 <= code < len(_EXIT_MESSAGES):
        raise ValueError(f"unknown exit code: {code}")
    return _EXIT_MESSAGES[code]


def _to_rgb(image: Image) -> np.ndarray:
    pixels = image.pixels
    rgb = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


def _run(config: Config) -> int:
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("fractol")
    except pygame.error:
        pygame.quit()
        printf("%s\n", exit_message(1))
        return 1

    keymap = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_EQUALS: Key.EQUAL,
        pygame.K_KP_PLUS: Key.KP_ADD,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP_MINUS: Key.KP_SUBTRACT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }
    image = Image()

    def redraw() -> None:
        render_fractal(config, image)
        screen.blit(pygame.surfarray.make_surface(_to_rgb(image)), (0, 0))
        pygame.display.flip()

    try:
        redraw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                key = keymap.get(event.key)
                if key is not None and key_press(config, key):
                    redraw()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if mouse_press(config, event.button):
                    redraw()
    except SystemExit as exc:
        return int(exc.code or 0)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Run the viewer with ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except UsageError:
        printf("%s", usage_text())
        return 1
    return _run(config)


if __name__ == "__main__":
    raise SystemExit(main())