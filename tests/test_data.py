import random

import pytest

from pigeonplan.data import (
    DESTINATIONS,
    MAJOR_CATEGORIES,
    MINOR_CATEGORIES,
    REGIONS,
    Dataset,
    ReleaseSite,
    ReleaseTask,
    can_pigeons_reach_destination,
    generate_test_data,
)


@pytest.fixture(scope="module")
def dataset():
    return generate_test_data(random.Random(42))


def _task(destination, distance):
    return ReleaseTask("rw1", "XinGe", "TypeA", 1, destination, distance)


def _site(coordinate):
    return ReleaseSite("zd1", "Reg1", "Z", 1, coordinate)


def test_counts(dataset):
    assert len(dataset.tasks) == 20
    assert len(dataset.trucks) == 36
    assert len(dataset.sites) == 1500


def test_identifiers(dataset):
    assert [t.task_id for t in dataset.tasks][0] == "rw1"
    assert dataset.tasks[-1].task_id == "rw20"
    assert dataset.trucks[-1].truck_id == "dy36"
    assert dataset.sites[-1].site_id == "zd1500"


def test_task_fields_in_range(dataset):
    for task in dataset.tasks:
        assert task.major_category in MAJOR_CATEGORIES
        assert task.minor_category in MINOR_CATEGORIES
        assert 1 <= task.quantity <= 3
        assert task.destination in DESTINATIONS
        assert 3000 <= task.flight_distance < 3200


def test_trucks_carry_existing_task_kinds(dataset):
    kinds = {(t.major_category, t.minor_category) for t in dataset.tasks}
    for truck in dataset.trucks:
        assert (truck.major_category, truck.minor_category) in kinds
        assert truck.quantity == 3
        assert 115.0 <= truck.start[0] < 115.5
        assert 35.0 <= truck.start[1] < 35.5


def test_site_types_and_capacities(dataset):
    for index, site in enumerate(dataset.sites):
        assert site.region == REGIONS[index % 3]
        if index % 20 == 0:
            assert site.site_type == "Z"
            assert site.capacity == 1
        else:
            assert site.site_type == "L"
            assert 50 <= site.capacity <= 70
        assert 30.1 <= site.coordinate[0] <= 110.0
        assert -29.9 <= site.coordinate[1] <= 20.0


def test_same_seed_same_data():
    first = generate_test_data(random.Random(7))
    second = generate_test_data(random.Random(7))
    assert [t.flight_distance for t in first.tasks] == [
        t.flight_distance for t in second.tasks
    ]
    assert [t.destination for t in first.tasks] == [
        t.destination for t in second.tasks
    ]
    assert [s.coordinate for s in first.sites] == [s.coordinate for s in second.sites]
    assert [h.start for h in first.trucks] == [h.start for h in second.trucks]
    assert len(first.sites) == 1500


def test_different_seed_different_sites():
    first = generate_test_data(random.Random(7))
    other = generate_test_data(random.Random(8))
    assert len(other.sites) == 1500
    assert [s.coordinate for s in first.sites] != [s.coordinate for s in other.sites]


def test_default_rng_works():
    data = generate_test_data()
    assert len(data.sites) == 1500


def test_empty_dataset():
    data = Dataset()
    assert data.tasks == [] and data.trucks == [] and data.sites == []


def test_reachable_within_distance():
    assert can_pigeons_reach_destination(_task((3.0, 4.0), 5.0), _site((0.0, 0.0)))


def test_unreachable_beyond_distance():
    assert not can_pigeons_reach_destination(_task((3.0, 4.0), 4.9), _site((0.0, 0.0)))


def test_reachable_from_same_place():
    assert can_pigeons_reach_destination(_task((1.0, 1.0), 0.0), _site((1.0, 1.0)))