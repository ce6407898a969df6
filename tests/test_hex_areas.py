from __future__ import annotations

import pytest

from hexcoords import (
    ORIGIN,
    Direction,
    Hex,
    HexRange,
    WraparoundError,
    directions_to,
    distance_to,
    hex_range,
    lerp,
    line_to,
    range_count,
    ulength,
    wrap_in_range,
    wrap_with,
    wraparound_mirrors,
)


def test_line_along_x_axis():
    assert list(line_to(Hex(0, 0), Hex(5, 0))) == [Hex(i, 0) for i in range(6)]


def test_line_to_self_is_single_point():
    line = line_to(Hex(4, -2), Hex(4, -2))
    assert list(line) == [Hex(4, -2)]
    assert len(line) == 1


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (Hex(0, 0), Hex(2, -1), [Hex(0, 0), Hex(1, 0), Hex(2, -1)]),
        (Hex(0, 0), Hex(1, 1), [Hex(0, 0), Hex(0, 1), Hex(1, 1)]),
        (Hex(0, 0), Hex(-3, 3), [Hex(0, 0), Hex(-1, 1), Hex(-2, 2), Hex(-3, 3)]),
    ],
)
def test_line_known_paths(start: Hex, end: Hex, expected: list[Hex]):
    assert list(line_to(start, end)) == expected


def test_line_is_contiguous_and_restartable(random_hexes):
    for a, b in zip(random_hexes[:40], random_hexes[40:80]):
        line = line_to(a, b)
        points = list(line)
        assert len(points) == len(line) == distance_to(a, b) + 1
        assert points[0] == a and points[-1] == b
        assert all(distance_to(p, q) == 1 for p, q in zip(points, points[1:]))
        assert list(line) == points


def test_lerp_endpoints_and_midpoint():
    a, b = Hex(0, 0), Hex(4, -2)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, 0.5) == Hex(2, -1)
    assert lerp(a, b, 2.0) == Hex(8, -4)


def test_directions_to():
    assert list(directions_to(ORIGIN, Hex(3, 0))) == [Direction.BOTTOM_RIGHT] * 3
    assert list(directions_to(ORIGIN, ORIGIN)) == []
    steps = list(directions_to(Hex(1, 1), Hex(-4, 6)))
    assert len(steps) == 5


def test_range_order_radius_one():
    assert list(hex_range(ORIGIN, 1)) == [
        Hex(-1, 0),
        Hex(-1, 1),
        Hex(0, -1),
        Hex(0, 0),
        Hex(0, 1),
        Hex(1, -1),
        Hex(1, 0),
    ]


@pytest.mark.parametrize(("radius", "count"), [(0, 1), (1, 7), (2, 19), (15, 721)])
def test_range_count_known_values(radius: int, count: int):
    assert range_count(radius) == count


@pytest.mark.parametrize("radius", range(21))
def test_range_count_matches_enumeration(radius: int):
    cells = list(hex_range(ORIGIN, radius))
    assert len(cells) == range_count(radius) == len(hex_range(ORIGIN, radius))
    assert len(set(cells)) == len(cells)


def test_range_contains_exactly_the_close_cells():
    center = Hex(-3, 8)
    cells = set(hex_range(center, 3))
    for h in hex_range(center, 6):
        assert (h in cells) == (distance_to(center, h) <= 3)


def test_range_is_restartable():
    cells = hex_range(Hex(2, 2), 2)
    assert list(cells) == list(cells)


def test_negative_radius_is_rejected():
    with pytest.raises(ValueError):
        range_count(-1)
    with pytest.raises(ValueError):
        HexRange(ORIGIN, -2)
    with pytest.raises(ValueError):
        wraparound_mirrors(-1)


def test_wraparound_mirrors():
    assert wraparound_mirrors(1) == (
        Hex(2, -3),
        Hex(3, -1),
        Hex(1, 2),
        Hex(-2, 3),
        Hex(-3, 1),
        Hex(-1, -2),
    )
    for radius in range(6):
        mirrors = wraparound_mirrors(radius)
        assert all(ulength(m) == 2 * radius + 1 for m in mirrors)
        assert len(set(mirrors)) == 6


def test_wrap_known_value():
    assert wrap_in_range(Hex(2, -1), 1) == Hex(-1, 0)


@pytest.mark.parametrize("radius", range(5))
def test_wrap_always_lands_in_range(radius: int):
    for h in hex_range(ORIGIN, 4 * radius + 6):
        wrapped = wrap_in_range(h, radius)
        assert ulength(wrapped) <= radius
        if ulength(h) <= radius:
            assert wrapped == h


@pytest.mark.parametrize("radius", range(4))
def test_wrap_folds_each_mirror_tile_onto_the_center(radius: int):
    for mirror in wraparound_mirrors(radius):
        for offset in hex_range(ORIGIN, radius):
            assert wrap_in_range(mirror + offset, radius) == offset


def test_wrap_far_coordinates(random_hexes):
    for h in random_hexes[:20]:
        for radius in (0, 2, 7):
            assert ulength(wrap_in_range(h * 10, radius)) <= radius


def test_wrap_with_rejects_mirrors_that_do_not_shorten():
    with pytest.raises(WraparoundError):
        wrap_with(Hex(5, 0), 1, [ORIGIN] * 6)


def test_wrap_with_step_cap():
    mirrors = wraparound_mirrors(1)
    with pytest.raises(WraparoundError):
        wrap_with(Hex(20, 0), 1, mirrors, max_steps=1)
    assert ulength(wrap_with(Hex(20, 0), 1, mirrors, max_steps=20)) <= 1


def test_wrap_with_needs_six_mirrors():
    with pytest.raises(ValueError):
        wrap_with(Hex(5, 0), 1, wraparound_mirrors(1)[:3])
