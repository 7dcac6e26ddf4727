"""Command line entry: generate a random data set and plot it."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from matplotlib.figure import Figure

from .data import generate_test_data
from .plotting import PlotView

_FIGSIZE = (9, 7)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pigeonplan",
        description="Plot release tasks, trucks and release sites of a random data set.",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--output", type=Path, default=None, help="save the plot to this file instead of showing it"
    )
    return parser


def main(argv=None) -> int:
    """Generate data, plot it, and save or show the result."""
    args = _build_parser().parse_args(argv)
    view = PlotView()
    view.set_data(generate_test_data(random.Random(args.seed)))
    view.paint()

    if args.output is not None:
        figure = Figure(figsize=_FIGSIZE)
        view.coordinates.render(figure.add_subplot())
        figure.savefig(args.output)
    else:
        import matplotlib.pyplot as plt

        _, ax = plt.subplots(figsize=_FIGSIZE)
        view.coordinates.render(ax)
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())