"""A zoomable, draggable Cartesian scene with grid, axes, points and lines."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from matplotlib.patches import Ellipse

logger = logging.getLogger(__name__)

LEFT = "left"
GRID_COLOR = "#c8c8c8"
_LINESTYLES = {"solid": "-", "dotted": ":"}

_SCENE_RECT = (-400.0, -300.0, 800.0, 600.0)
_STEP = 50


@dataclass(frozen=True)
class SceneItem:
    """One drawable item of the scene.

    kind is "line" (geometry x1, y1, x2, y2), "ellipse" (x, y, width, height)
    or "text" (x, y). Scene y grows downwards.
    """

    kind: str
    geometry: tuple[float, ...]
    color: str = "black"
    width: float = 1.0
    style: str = "solid"
    text: str = ""


class CoordinateSystem:
    """A scene centred on the origin, viewed through a zoomable viewport."""

    def __init__(self, viewport_width: float = 900, viewport_height: float = 700):
        self.scene_rect = _SCENE_RECT
        self.viewport = (float(viewport_width), float(viewport_height))
        self.items: list[SceneItem] = []
        self.zoom = 1.0
        self.scroll = (0.0, 0.0)
        self.dragging = False
        self.last_mouse_pos = (0.0, 0.0)
        self._draw_grid()
        self._draw_axes()

    def _add_line(self, x1, y1, x2, y2, color, width=1.0, style="solid"):
        self.items.append(SceneItem("line", (x1, y1, x2, y2), color, width, style))

    def _add_text(self, x, y, text, color="black"):
        self.items.append(SceneItem("text", (x, y), color, text=text))

    def _draw_grid(self):
        for y in range(-300, 301, _STEP):
            self._add_line(-400, y, 400, y, GRID_COLOR, 1, "dotted")
        for x in range(-400, 401, _STEP):
            self._add_line(x, -300, x, 300, GRID_COLOR, 1, "dotted")

    def _draw_axes(self):
        self._add_line(-400, 0, 400, 0, "red", 2)
        self._add_line(0, -300, 0, 300, "blue", 2)
        self._add_text(380, -20, "X")
        self._add_text(20, -280, "Y")
        for x in range(-400, 401, _STEP):
            self._add_line(x, -5, x, 5, "black", 1)
            self._add_text(x - 5, 10, str(x))
        for y in range(-300, 301, _STEP):
            self._add_line(-5, y, 5, y, "black", 1)
            self._add_text(-20, y - 5, str(y))

    def plot_point(self, x: float, y: float, label: str, color: str = "red") -> None:
        """Add a filled dot of radius 3 at (x, y) with a label up and to the right."""
        self.items.append(SceneItem("ellipse", (x - 3, y - 3, 6, 6), color))
        self._add_text(x + 5, y - 15, label)

    def plot_line(self, x1: float, y1: float, x2: float, y2: float, label: str) -> None:
        """Add a solid green segment; the label is accepted but not drawn."""
        self._add_line(x1, y1, x2, y2, "green", 2)

    def calculate_distance(self, x1: float, y1: float, x2: float, y2: float) -> float:
        """Euclidean distance between two points."""
        return math.hypot(x2 - x1, y2 - y1)

    def fit_to_data(self, min_x: float, max_x: float, min_y: float, max_y: float) -> None:
        """Fit the whole scene into the viewport, keeping the aspect ratio.

        The data bounds are accepted but the scene rectangle itself is fitted.
        """
        _, _, width, height = self.scene_rect
        vw, vh = self.viewport
        self.zoom = min(vw / width, vh / height)
        self.scroll = (0.0, 0.0)

    def visible_rect(self) -> tuple[float, float, float, float]:
        """The part of the scene shown in the viewport: left, top, width, height."""
        left, top, width, height = self.scene_rect
        vw, vh = self.viewport
        cx = left + width / 2 + self.scroll[0] / self.zoom
        cy = top + height / 2 + self.scroll[1] / self.zoom
        shown_w, shown_h = vw / self.zoom, vh / self.zoom
        return (cx - shown_w / 2, cy - shown_h / 2, shown_w, shown_h)

    def wheel(self, delta: float) -> None:
        """Zoom in for a positive wheel delta, out otherwise."""
        logger.debug("wheel delta %s", delta)
        self.zoom *= 1.2 if delta > 0 else 0.8

    def press(self, x: float, y: float, button: str) -> None:
        """Start dragging when the left button goes down."""
        if button == LEFT:
            self.last_mouse_pos = (x, y)
            self.dragging = True

    def move(self, x: float, y: float, buttons: Iterable[str]) -> None:
        """Pan the view by the mouse movement while dragging with the left button."""
        if self.dragging and LEFT in set(buttons):
            dx = x - self.last_mouse_pos[0]
            dy = y - self.last_mouse_pos[1]
            self.last_mouse_pos = (x, y)
            self.scroll = (self.scroll[0] - dx, self.scroll[1] - dy)

    def release(self, button: str) -> None:
        """Stop dragging when the left button is released."""
        if button == LEFT:
            self.dragging = False

    def render(self, ax) -> None:
        """Draw every scene item onto a matplotlib Axes, showing the visible area."""
        ax.set_facecolor("white")
        for item in self.items:
            if item.kind == "line":
                x1, y1, x2, y2 = item.geometry
                ax.plot(
                    [x1, x2],
                    [y1, y2],
                    color=item.color,
                    linewidth=item.width,
                    linestyle=_LINESTYLES[item.style],
                )
            elif item.kind == "ellipse":
                x, y, w, h = item.geometry
                ax.add_patch(
                    Ellipse((x + w / 2, y + h / 2), w, h, facecolor=item.color, edgecolor="black")
                )
            else:
                x, y = item.geometry
                ax.text(x, y, item.text, color=item.color, fontsize=7, va="top")
        left, top, width, height = self.visible_rect()
        ax.set_xlim(left, left + width)
        ax.set_ylim(top + height, top)
        ax.set_aspect("equal")