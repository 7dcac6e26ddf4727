import pytest

from pigeonplan.coordinates import CoordinateSystem
from pigeonplan.data import Dataset, ReleaseSite, ReleaseTask, Truck
from pigeonplan.plotting import (
    EARTH_RADIUS,
    PlotView,
    lat_lon_to_mercator,
    transform_coordinates,
)


def test_mercator_origin():
    assert lat_lon_to_mercator((0.0, 0.0)) == pytest.approx((0.0, 0.0), abs=1e-6)


def test_mercator_x_linear_in_longitude():
    x, _ = lat_lon_to_mercator((180.0, 0.0))
    assert x == pytest.approx(20037508.342789244)
    assert lat_lon_to_mercator((90.0, 0.0))[0] == pytest.approx(x / 2)


def test_mercator_symmetric_in_latitude():
    north = lat_lon_to_mercator((10.0, 40.0))[1]
    south = lat_lon_to_mercator((10.0, -40.0))[1]
    assert north == pytest.approx(-south)
    assert north > EARTH_RADIUS * 0.0


def test_transform_empty():
    assert transform_coordinates([]) == []


def test_transform_maps_bounds_to_target():
    result = transform_coordinates([(10.0, 5.0), (20.0, 15.0), (15.0, 10.0)])
    assert result[0] == pytest.approx((-350, -250))
    assert result[1] == pytest.approx((350, 250))
    assert result[2] == pytest.approx((0, 0))


def test_transform_degenerate_range():
    with pytest.raises(ValueError):
        transform_coordinates([(1.0, 1.0), (1.0, 2.0)])


def _dataset():
    return Dataset(
        tasks=[ReleaseTask("rw1", "XinGe", "TypeA", 1, (116.4074, 39.9042), 3000.0)],
        trucks=[Truck("dy1", "XinGe", "TypeA", 3, (115.2, 35.3))],
        sites=[ReleaseSite("zd1", "Reg1", "Z", 1, (60.0, -10.0))],
    )


def test_paint_plots_every_location():
    coords = CoordinateSystem()
    view = PlotView(coords)
    view.set_data(_dataset())
    assert view.needs_repaint
    before = sum(1 for i in coords.items if i.kind == "ellipse")
    points = view.paint()
    after = sum(1 for i in coords.items if i.kind == "ellipse")
    assert len(points) == 3
    assert after - before == 3
    assert not view.needs_repaint
    for x, y in points:
        assert -350 <= x <= 350 and -250 <= y <= 250


def test_paint_without_data_adds_nothing():
    view = PlotView()
    count = len(view.coordinates.items)
    assert view.paint() == []
    assert len(view.coordinates.items) == count