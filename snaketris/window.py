"""A drawing window: colours, images, rectangles and text on a pygame display."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pygame

FONT_PATH = "VeraMono.ttf"
SMALL_FONT_SIZE = 20
BIG_FONT_SIZE = 80
_BIG_FONT_THRESHOLD = 60

log = logging.getLogger(__name__)


def _open_font(size: int) -> pygame.font.Font:
    """Open the game font at ``size``, falling back to pygame's default font."""
    try:
        return pygame.font.Font(FONT_PATH, size)
    except (OSError, pygame.error) as exc:
        log.warning("cannot load font %s (%s): using the default font", FONT_PATH, exc)
        return pygame.font.Font(None, size)


class Window:
    """A display window with a background and a foreground colour."""

    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.display.init()
        pygame.font.init()
        self.width = width
        self.height = height
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.background = pygame.Color(255, 255, 255, 255)
        self.foreground = pygame.Color(0, 0, 0, 255)
        self._font = _open_font(SMALL_FONT_SIZE)
        self._font_big = _open_font(BIG_FONT_SIZE)
        self._closed = False

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the fonts and shut the display down."""
        if self._closed:
            return
        self._closed = True
        pygame.font.quit()
        pygame.display.quit()

    def set_background(self, r: int, g: int, b: int, a: int) -> None:
        """Set the colour used to clear the window and behind text."""
        self.background = pygame.Color(r, g, b, a)

    def set_foreground(self, r: int, g: int, b: int, a: int) -> None:
        """Set the colour used for rectangles and text."""
        self.foreground = pygame.Color(r, g, b, a)

    def clear(self) -> None:
        """Fill the whole window with the background colour."""
        self.surface.fill(self.background)

    def refresh(self) -> None:
        """Show what has been drawn since the last refresh."""
        pygame.display.flip()

    def draw_fill_rectangle(self, x: int, y: int, w: int, h: int) -> pygame.Rect:
        """Fill a rectangle with the foreground colour."""
        return self.surface.fill(self.foreground, pygame.Rect(x, y, w, h))

    def load_image(self, path: str | os.PathLike[str]) -> pygame.Surface:
        """Load an image file; raises FileNotFoundError or pygame.error."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"image not found: {path}")
        return pygame.image.load(str(path)).convert_alpha()

    def draw_texture(
        self, texture: pygame.Surface | None, x: int, y: int, w: int, h: int
    ) -> None:
        """Draw ``texture`` scaled into the given rectangle; None draws nothing."""
        if texture is None or w <= 0 or h <= 0:
            return
        self.surface.blit(pygame.transform.scale(texture, (w, h)), (x, y))

    def draw_text(self, text: str, x: int, y: int, size: int = SMALL_FONT_SIZE) -> pygame.Rect:
        """Draw ``text`` at (x, y) and return the area it covers.

        Sizes of 60 and above use the large font, others the small one.
        """
        font = self._font_big if size >= _BIG_FONT_THRESHOLD else self._font
        image = font.render(text, True, self.foreground, self.background)
        return self.surface.blit(image, (x, y))