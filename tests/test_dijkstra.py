import math

import pytest

from hoersaal.dijkstra import RoadMap, search


def nrw_map():
    return RoadMap(
        cities={
            "Aachen": (-100, 100),
            "Bonn": (0, 200),
            "Köln": (0, 0),
            "Düsseldorf": (50, -100),
        },
        streets=[
            ("Aachen", "Köln"),
            ("Bonn", "Köln"),
            ("Düsseldorf", "Köln"),
        ],
    )


def walk(road_map, start, path):
    city = start
    for street in path:
        city = road_map.opposite_city(street, city)
        assert city is not None
    return city


def test_nrw_route_through_koeln():
    road_map = nrw_map()
    path = search(road_map, "Aachen", "Bonn")
    assert path == [("Aachen", "Köln"), ("Bonn", "Köln")]


def test_path_leads_from_start_to_target():
    road_map = nrw_map()
    path = search(road_map, "Düsseldorf", "Aachen")
    assert len(path) == 2
    assert walk(road_map, "Düsseldorf", path) == "Aachen"


def test_direct_street_preferred_over_detour():
    road_map = RoadMap(
        cities={"A": (0, 0), "B": (10, 0), "C": (5, 8)},
        streets=[("A", "C"), ("C", "B"), ("A", "B")],
    )
    path = search(road_map, "A", "B")
    assert path == [("A", "B")]


def test_shortest_path_not_longer_than_alternative():
    road_map = RoadMap(
        cities={"A": (0, 0), "B": (4, 0), "C": (8, 0), "D": (4, 9)},
        streets=[("A", "D"), ("D", "C"), ("A", "B"), ("B", "C")],
    )
    path = search(road_map, "A", "C")
    assert walk(road_map, "A", path) == "C"
    total = sum(road_map.length(street) for street in path)
    detour = road_map.length(("A", "D")) + road_map.length(("D", "C"))
    assert total < detour
    assert path == [("A", "B"), ("B", "C")]


def test_disconnected_cities_give_empty_path():
    road_map = RoadMap(
        cities={"A": (0, 0), "B": (1, 0), "C": (5, 5)},
        streets=[("A", "B")],
    )
    assert search(road_map, "A", "C") == []


def test_same_start_and_target_give_empty_path():
    assert search(nrw_map(), "Köln", "Köln") == []


def test_unknown_city_raises():
    with pytest.raises(KeyError):
        search(nrw_map(), "Aachen", "Berlin")
    with pytest.raises(KeyError):
        search(nrw_map(), "Berlin", "Aachen")


def test_street_to_unknown_city_rejected():
    with pytest.raises(ValueError):
        RoadMap(cities={"A": (0, 0)}, streets=[("A", "B")])


def test_find_city():
    road_map = nrw_map()
    assert road_map.find_city("Bonn") == "Bonn"
    assert road_map.find_city("Berlin") is None


def test_street_list_contains_only_touching_streets():
    road_map = nrw_map()
    assert road_map.street_list("Köln") == road_map.streets
    assert road_map.street_list("Bonn") == [("Bonn", "Köln")]


def test_opposite_city():
    road_map = nrw_map()
    street = ("Aachen", "Köln")
    assert road_map.opposite_city(street, "Aachen") == "Köln"
    assert road_map.opposite_city(street, "Köln") == "Aachen"
    assert road_map.opposite_city(street, "Bonn") is None
    assert road_map.opposite_city(None, "Bonn") is None


def test_length_is_euclidean_and_symmetric():
    road_map = RoadMap(cities={"A": (0, 0), "B": (3, 4)}, streets=[("A", "B")])
    assert road_map.length(("A", "B")) == pytest.approx(5.0)
    assert road_map.length(("B", "A")) == road_map.length(("A", "B"))
    assert nrw_map().length(("Aachen", "Köln")) == pytest.approx(math.hypot(100, 100))