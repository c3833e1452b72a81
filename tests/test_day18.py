import pytest

from adventgrid.day18 import (
    interesting_shortest_route,
    main,
    parse_bytes,
    shortest_route,
)

CORNER = [(1, 0), (0, 1)]


def test_parse_bytes():
    start, walls, finish = parse_bytes("5,4\r\n4,2\r\n4,5")
    assert start == (0, 0)
    assert finish == (70, 70)
    assert walls == [(5, 4), (4, 2), (4, 5)]


def test_parse_bytes_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_bytes("5")


@pytest.mark.parametrize("finish", [(1, 1), (3, 3), (4, 2), (0, 5)])
def test_open_grid_is_manhattan(finish):
    assert shortest_route((0, 0), finish, [], 0) == finish[0] + finish[1]


def test_unfallen_bytes_are_ignored():
    assert shortest_route((0, 0), (1, 1), CORNER, 0) == 2
    assert shortest_route((0, 0), (1, 1), CORNER, 1) == 2


def test_blocked_route_raises():
    with pytest.raises(ValueError):
        shortest_route((0, 0), (1, 1), CORNER, 2)


def test_count_beyond_bytes_raises():
    with pytest.raises(ValueError):
        shortest_route((0, 0), (1, 1), CORNER, 3)


def test_interesting_route_outruns_falling_bytes():
    assert interesting_shortest_route((0, 0), (1, 1), CORNER) == 2


def test_interesting_route_never_shorter_than_open_grid():
    walls = [(1, 0), (1, 1), (2, 2)]
    assert interesting_shortest_route((0, 0), (3, 3), walls) >= shortest_route(
        (0, 0), (3, 3), walls, 0
    )


def test_main_prints_both_routes(tmp_path, capsys):
    path = tmp_path / "bytes.txt"
    path.write_text("69,70\n")
    assert main([str(path), "--count", "1"]) == 0
    lines = capsys.readouterr().out.split()
    assert lines[0] == lines[1]
    assert int(lines[0]) == 70 + 70