"""Window, drawing, image, text and keyboard handling on top of pygame."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

import pygame

from slingsim.color import Color
from slingsim.scene import Scene
from slingsim.vector import Vector

WINDOW_TITLE = "CS3"
WINDOW_WIDTH = 1000.0
WINDOW_HEIGHT = 500.0
MS_PER_S = 1e3
FONT_PATH = "assets/angrybirds-regular.ttf"
FONT_SIZE = 100

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


class Key(IntEnum):
    """Special key codes passed to a key handler."""

    LEFT_ARROW = 1
    UP_ARROW = 2
    RIGHT_ARROW = 3
    DOWN_ARROW = 4
    SPACEBAR = 5
    RETURN = 6
    D_KEY = 7
    S_KEY = 8
    P_KEY = 9
    I_KEY = 10
    KEY_1 = 11
    KEY_2 = 12
    KEY_3 = 13
    KEY_4 = 14
    KEY_5 = 15
    KEY_6 = 16
    M_KEY = 17
    R_KEY = 18
    N_KEY = 19
    B_KEY = 20


class KeyEventType(Enum):
    """Whether a key was pressed or released."""

    PRESSED = 0
    RELEASED = 1


KeyHandler = Callable[[Any, KeyEventType, float, Any], None]

_SPECIAL_KEYS = {
    pygame.K_LEFT: Key.LEFT_ARROW,
    pygame.K_UP: Key.UP_ARROW,
    pygame.K_RIGHT: Key.RIGHT_ARROW,
    pygame.K_DOWN: Key.DOWN_ARROW,
    pygame.K_SPACE: Key.SPACEBAR,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_d: Key.D_KEY,
    pygame.K_s: Key.S_KEY,
    pygame.K_p: Key.P_KEY,
    pygame.K_i: Key.I_KEY,
    pygame.K_1: Key.KEY_1,
    pygame.K_2: Key.KEY_2,
    pygame.K_3: Key.KEY_3,
    pygame.K_4: Key.KEY_4,
    pygame.K_5: Key.KEY_5,
    pygame.K_6: Key.KEY_6,
    pygame.K_m: Key.M_KEY,
    pygame.K_r: Key.R_KEY,
    pygame.K_n: Key.N_KEY,
    pygame.K_b: Key.B_KEY,
}


def key_for(pygame_key: int) -> Key | str | None:
    """Map a pygame key code to a special Key, a 7-bit ASCII character, or None."""
    special = _SPECIAL_KEYS.get(pygame_key)
    if special is not None:
        return special
    if 0 < pygame_key < 128:
        return chr(pygame_key)
    return None


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Viewport:
    """Maps scene coordinates (y up) onto window pixels (y down)."""

    center: Vector
    max_diff: Vector

    @classmethod
    def from_bounds(cls, minimum: Vector, maximum: Vector) -> Viewport:
        """Build a viewport showing the rectangle from minimum to maximum."""
        if not (minimum.x < maximum.x and minimum.y < maximum.y):
            raise ValueError("scene minimum must lie below and left of its maximum")
        center = (minimum + maximum) * 0.5
        return cls(center, maximum - center)

    def scale(self, window_center: Vector) -> float:
        """The largest uniform scale that keeps the whole scene in the window."""
        return min(window_center.x / self.max_diff.x, window_center.y / self.max_diff.y)

    def to_window(self, scene_pos: Vector, window_center: Vector) -> Vector:
        """Return the pixel position of a scene point, rounded to whole pixels."""
        offset = (scene_pos - self.center) * self.scale(window_center)
        return Vector(
            _round_half_away(window_center.x + offset.x),
            _round_half_away(window_center.y - offset.y),
        )


class TickClock:
    """Measures the time between successive calls."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last: float | None = None

    def time_since_last_tick(self) -> float:
        """Seconds since the previous call; 0.0 on the first call."""
        now = self._clock()
        difference = 0.0 if self._last is None else now - self._last
        self._last = now
        return difference


def _rgb(color: Color) -> tuple[int, int, int]:
    return (int(color.r * 255), int(color.g * 255), int(color.b * 255))


class Renderer:
    """Draws scenes, images and text, and dispatches keyboard events.

    Without a surface, a resizable window is opened; with one, drawing goes
    to that surface and nothing is presented to the screen.
    """

    def __init__(
        self,
        minimum: Vector,
        maximum: Vector,
        surface: pygame.Surface | None = None,
        title: str = WINDOW_TITLE,
        size: tuple[float, float] = (WINDOW_WIDTH, WINDOW_HEIGHT),
        font_path: str | None = FONT_PATH,
    ) -> None:
        self.viewport = Viewport.from_bounds(minimum, maximum)
        self._owns_display = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode(
                (int(size[0]), int(size[1])), pygame.RESIZABLE
            )
            pygame.display.set_caption(title)
        self._surface = surface
        self._font_path = font_path
        self._font: pygame.font.Font | None = None
        self._key_handler: KeyHandler | None = None
        self._held: set[int] = set()
        self._key_start = 0

    @property
    def surface(self) -> pygame.Surface:
        if self._owns_display:
            current = pygame.display.get_surface()
            if current is not None:
                self._surface = current
        return self._surface

    def window_center(self) -> Vector:
        """The center of the drawing surface in pixels."""
        width, height = self.surface.get_size()
        return Vector(width, height) * 0.5

    def clear(self) -> None:
        """Fill the surface with white."""
        self.surface.fill(_WHITE)

    def draw_polygon(self, points: Sequence[Vector], color: Color) -> None:
        """Fill a polygon given in scene coordinates."""
        if len(points) < 3:
            raise ValueError("a polygon needs at least 3 vertices")
        center = self.window_center()
        pixels = [
            (int(p.x), int(p.y))
            for p in (self.viewport.to_window(v, center) for v in points)
        ]
        pygame.draw.polygon(self.surface, _rgb(color), pixels)

    def show(self) -> None:
        """Outline the scene bounds in black and present the frame."""
        center = self.window_center()
        top_right = self.viewport.center + self.viewport.max_diff
        bottom_left = self.viewport.center - self.viewport.max_diff
        max_pixel = self.viewport.to_window(top_right, center)
        min_pixel = self.viewport.to_window(bottom_left, center)
        boundary = pygame.Rect(
            int(min_pixel.x),
            int(max_pixel.y),
            int(max_pixel.x - min_pixel.x),
            int(min_pixel.y - max_pixel.y),
        )
        pygame.draw.rect(self.surface, _BLACK, boundary, 1)
        if self._owns_display:
            pygame.display.flip()

    def render_scene(self, scene: Scene) -> None:
        """Draw every body of the scene in its color."""
        for body in scene:
            self.draw_polygon(body.shape, body.color)

    def on_key(self, handler: KeyHandler | None) -> None:
        """Register the function called as handler(key, type, held_time, state)."""
        self._key_handler = handler

    def is_done(self, state: Any) -> bool:
        """Process pending events; return True once the window has been closed."""
        while (event := pygame.event.poll()).type != pygame.NOEVENT:
            if event.type == pygame.QUIT:
                return True
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                self._dispatch_key(event, state)
        return False

    def _dispatch_key(self, event: pygame.event.Event, state: Any) -> None:
        if self._key_handler is None:
            return
        key = key_for(event.key)
        if key is None:
            return
        timestamp = pygame.time.get_ticks()
        pressed = event.type == pygame.KEYDOWN
        repeat = pressed and event.key in self._held
        if pressed:
            self._held.add(event.key)
        else:
            self._held.discard(event.key)
        if not repeat:
            self._key_start = timestamp
        held_time = (timestamp - self._key_start) / MS_PER_S
        kind = KeyEventType.PRESSED if pressed else KeyEventType.RELEASED
        self._key_handler(key, kind, held_time, state)

    def load_image(self, path: str) -> pygame.Surface:
        """Load an image file."""
        image = pygame.image.load(path)
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def render_image(
        self, image: pygame.Surface, corner: Vector, dimensions: Vector
    ) -> None:
        """Draw an image with its top-left corner at a scene point, sized in pixels."""
        window_corner = self.viewport.to_window(corner, self.window_center())
        scaled = pygame.transform.scale(image, (int(dimensions.x), int(dimensions.y)))
        self.surface.blit(scaled, (int(window_corner.x), int(window_corner.y)))

    def build_text(self, message: str) -> pygame.Surface:
        """Render a message in black, without antialiasing."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(self._font_path, FONT_SIZE)
        return self._font.render(message, False, _BLACK)

    def render_text(self, text: pygame.Surface, x: int, y: int, w: int, h: int) -> None:
        """Draw rendered text stretched into a pixel rectangle."""
        scaled = pygame.transform.scale(text, (int(w), int(h)))
        self.surface.blit(scaled, (int(x), int(y)))