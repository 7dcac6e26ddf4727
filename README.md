# pigeonplan

Generates a random sample scenario for moving homing pigeons by truck to
release sites, then plots every location on a zoomable, pannable coordinate
system drawn with matplotlib.

The scenario (`pigeonplan.data.Dataset`) contains:

- 20 **release tasks** (`ReleaseTask`): pigeon major and minor category,
  quantity (1 to 3), destination coordinate and flight distance;
- 36 **trucks** (`Truck`): the pigeon categories they carry, copied from a
  random task, a quantity of 3 and their starting position;
- 1500 **release sites** (`ReleaseSite`): region, site type (`"Z"` with
  capacity 1 for every twentieth site, `"L"` with capacity 50 to 70 otherwise)
  and coordinate.

Coordinates are `(longitude, latitude)` tuples in degrees.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pigeonplan
pigeonplan --seed 1
pigeonplan --seed 1 --output plot.png
```

The command generates a data set, projects all coordinates with a spherical
Mercator projection, scales them into the coordinate system's drawing area and
plots every location as a red dot on the grid. Without `--output` it opens a
matplotlib window; with `--output FILE` it saves the figure to that file
instead. `--seed` makes the generated data reproducible.

## Library use

```python
import random

from pigeonplan.data import generate_test_data, can_pigeons_reach_destination
from pigeonplan.plotting import PlotView, lat_lon_to_mercator, transform_coordinates

dataset = generate_test_data(random.Random(1))
task = dataset.tasks[0]
site = dataset.sites[0]
print(can_pigeons_reach_destination(task, site))

view = PlotView()
view.set_data(dataset)
positions = view.paint()   # scene positions of all plotted locations
```

### `pigeonplan.data`

- `generate_test_data(rng=None)` builds a `Dataset` from a `random.Random`
  (a fresh one if none is given).
- `can_pigeons_reach_destination(task, site)` is true when the straight-line
  distance from the site to the task's destination is at most the task's
  flight distance.

### `pigeonplan.plotting`

- `lat_lon_to_mercator(point)` projects a `(longitude, latitude)` pair with an
  earth radius of 6378137 m.
- `transform_coordinates(points)` scales points linearly so that their bounding
  box fills `[-350, 350] x [-250, 250]`; an empty sequence gives an empty list,
  and points with no spread along an axis raise `ValueError`.
- `PlotView` holds a `Dataset` and a `CoordinateSystem`. `set_data(data)`
  replaces the data; `paint()` plots the task destinations, truck starts and
  release sites, in that order, and returns their scene positions.

### `pigeonplan.coordinates`

`CoordinateSystem` holds the scene items (`SceneItem`): a dotted grid and axes
with ticks and labels every 50 units over `[-400, 400] x [-300, 300]`, plus
what you add with `plot_point(x, y, label, color="red")` and
`plot_line(x1, y1, x2, y2, label)` (the line's label is not drawn). Scene y
grows downwards.

It also offers `calculate_distance`, `fit_to_data` (fits the whole scene into
the viewport, keeping the aspect ratio), wheel zoom (`wheel(delta)`: ×1.2 for
a positive delta, ×0.8 otherwise), left-button panning (`press`, `move`,
`release`), `visible_rect()` and `render(ax)` to draw onto a matplotlib Axes.

### `pigeonplan.algotask`

`AlgoTask(i_max=500, j_max=500)` is a counting workload: each `run()` adds
`i_max * j_max` to its count and returns it. `run_tasks(tasks, max_workers)`
runs a batch on a thread pool and returns their counts in order;
`max_workers` below 1 raises `ValueError`.

## What it does not do

The package only generates and plots the scenario. It does not assign trucks
to release sites, schedule releases, or solve the planning problem in any
other way; `can_pigeons_reach_destination` is the only check it offers.