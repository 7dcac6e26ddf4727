"""Projection of planning data onto the coordinate system scene."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .coordinates import CoordinateSystem
from .data import Dataset, Point

EARTH_RADIUS = 6378137.0

_TARGET_X = (-350.0, 350.0)
_TARGET_Y = (-250.0, 250.0)


def lat_lon_to_mercator(point: Point) -> Point:
    """Project a (longitude, latitude) pair in degrees with a spherical Mercator."""
    lon, lat = point
    x = EARTH_RADIUS * lon * math.pi / 180.0
    y = EARTH_RADIUS * math.log(math.tan(math.pi / 4.0 + lat * math.pi / 360.0))
    return (x, y)


def transform_coordinates(points: Sequence[Point]) -> list[Point]:
    """Scale points linearly so their bounding box fills [-350, 350] x [-250, 250]."""
    if not points:
        return []
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
    if max_x == min_x or max_y == min_y:
        raise ValueError("points must span a non-zero range in both axes")
    scale_x = (_TARGET_X[1] - _TARGET_X[0]) / (max_x - min_x)
    scale_y = (_TARGET_Y[1] - _TARGET_Y[0]) / (max_y - min_y)
    return [
        (_TARGET_X[0] + (x - min_x) * scale_x, _TARGET_Y[0] + (y - min_y) * scale_y)
        for x, y in points
    ]


class PlotView:
    """Draws every destination, truck and release site of a data set as a point."""

    def __init__(self, coordinates: CoordinateSystem | None = None):
        self.coordinates = coordinates if coordinates is not None else CoordinateSystem(900, 700)
        self.data = Dataset()
        self.needs_repaint = False

    def set_data(self, data: Dataset) -> None:
        """Replace the data set and mark the view for repainting."""
        self.data = data
        self.needs_repaint = True

    def _locations(self) -> Iterable[Point]:
        yield from (task.destination for task in self.data.tasks)
        yield from (truck.start for truck in self.data.trucks)
        yield from (site.coordinate for site in self.data.sites)

    def paint(self) -> list[Point]:
        """Plot all locations on the coordinate system; return their scene positions."""
        projected = [lat_lon_to_mercator(p) for p in self._locations()]
        xs = [p[0] for p in projected]
        ys = [p[1] for p in projected]
        self.coordinates.fit_to_data(
            min(xs, default=1e9), max(xs, default=-1e9),
            min(ys, default=1e9), max(ys, default=-1e9),
        )
        transformed = transform_coordinates(projected)
        for x, y in transformed:
            self.coordinates.plot_point(x, y, "")
        self.needs_repaint = False
        return transformed