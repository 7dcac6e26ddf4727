"""Pigeon release planning data: tasks, trucks and release sites."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

Point = tuple[float, float]

DESTINATIONS: tuple[Point, ...] = (
    (116.4074, 39.9042),
    (121.4737, 31.2304),
    (113.2644, 23.1291),
    (114.0579, 22.5431),
    (120.1551, 30.2741),
)
MAJOR_CATEGORIES = ("XinGe", "SaiGe", "JunYongGe", "GuanShangGe", "ShiYanGe")
MINOR_CATEGORIES = ("TypeA", "TypeB", "TypeC", "TypeD", "TypeE")
REGIONS = ("Reg1", "Reg2", "Reg3")

TASK_COUNT = 20
TRUCK_COUNT = 36
SITE_COUNT = 1500


@dataclass
class ReleaseTask:
    """A release task: pigeons of one kind that must reach a destination."""

    task_id: str
    major_category: str
    minor_category: str
    quantity: int
    destination: Point
    flight_distance: float


@dataclass
class Truck:
    """A truck carrying pigeons of one kind from its starting position."""

    truck_id: str
    major_category: str
    minor_category: str
    quantity: int
    start: Point


@dataclass
class ReleaseSite:
    """A place where pigeons can be released, with a limited capacity."""

    site_id: str
    region: str
    site_type: str
    capacity: int
    coordinate: Point


@dataclass
class Dataset:
    """All tasks, trucks and release sites of one planning problem."""

    tasks: list[ReleaseTask] = field(default_factory=list)
    trucks: list[Truck] = field(default_factory=list)
    sites: list[ReleaseSite] = field(default_factory=list)


def can_pigeons_reach_destination(task: ReleaseTask, site: ReleaseSite) -> bool:
    """Whether the task's pigeons can fly from the site to their destination."""
    dx = task.destination[0] - site.coordinate[0]
    dy = task.destination[1] - site.coordinate[1]
    return math.hypot(dx, dy) <= task.flight_distance


def _generate_tasks(rng: random.Random) -> list[ReleaseTask]:
    return [
        ReleaseTask(
            task_id=f"rw{number}",
            major_category=rng.choice(MAJOR_CATEGORIES),
            minor_category=rng.choice(MINOR_CATEGORIES),
            quantity=rng.randrange(3) + 1,
            destination=rng.choice(DESTINATIONS),
            flight_distance=float(3000 + rng.randrange(200)),
        )
        for number in range(1, TASK_COUNT + 1)
    ]


def _generate_trucks(rng: random.Random, tasks: list[ReleaseTask]) -> list[Truck]:
    trucks = []
    for number in range(1, TRUCK_COUNT + 1):
        task = rng.choice(tasks)
        start = (
            115.0 + rng.randrange(50) / 100.0,
            35.0 + rng.randrange(50) / 100.0,
        )
        trucks.append(
            Truck(
                truck_id=f"dy{number}",
                major_category=task.major_category,
                minor_category=task.minor_category,
                quantity=3,
                start=start,
            )
        )
    return trucks


def _generate_sites(rng: random.Random) -> list[ReleaseSite]:
    sites = []
    for index in range(SITE_COUNT):
        if index % 20 == 0:
            site_type, capacity = "Z", 1
        else:
            site_type, capacity = "L", 50 + rng.randrange(21)
        coordinate = (
            110.0 - rng.randrange(800) / 10.0,
            20.0 - rng.randrange(500) / 10.0,
        )
        sites.append(
            ReleaseSite(
                site_id=f"zd{index + 1}",
                region=REGIONS[index % len(REGIONS)],
                site_type=site_type,
                capacity=capacity,
                coordinate=coordinate,
            )
        )
    return sites


def generate_test_data(rng: random.Random | None = None) -> Dataset:
    """Build a random data set of 20 tasks, 36 trucks and 1500 release sites."""
    if rng is None:
        rng = random.Random()
    tasks = _generate_tasks(rng)
    trucks = _generate_trucks(rng, tasks)
    sites = _generate_sites(rng)
    logger.debug("generated %d trucks", len(trucks))
    return Dataset(tasks=tasks, trucks=trucks, sites=sites)