from adventgrid.day08 import Tower, count_antinodes, main, parse_towers

EXAMPLE = "\r\n".join(
    [
        "............",
        "........0...",
        ".....0......",
        ".......0....",
        "....0.......",
        "......A.....",
        "............",
        "............",
        "........A...",
        ".........A..",
        "............",
        "............",
    ]
)


def test_example_count():
    assert count_antinodes(EXAMPLE) == 34


def test_parse_towers():
    towers, rows = parse_towers("A.\n.a")
    assert towers == [Tower((0, 0), "A"), Tower((1, 1), "a")]
    assert rows == ["A.", ".a"]


def test_lone_tower_has_no_antinodes():
    towers, grid = parse_towers("..A..")
    assert towers[0].find_antinodes(towers, grid) == []
    assert count_antinodes("..A..") == 0


def test_different_frequencies_do_not_pair():
    assert count_antinodes("A.b\n...") == 0


def test_pair_includes_both_towers():
    text = "A.A"
    towers, _ = parse_towers(text)
    assert count_antinodes(text) == len(towers)


def test_antinodes_stay_in_bounds():
    towers, grid = parse_towers(EXAMPLE)
    for tower in towers:
        for x, y in tower.find_antinodes(towers, grid):
            assert 0 <= x < len(grid[0])
            assert 0 <= y < len(grid)


def test_antinodes_are_collinear_with_partner():
    towers, grid = parse_towers("......\n.A....\n...A..\n......")
    first, second = towers
    dx = first.location[0] - second.location[0]
    dy = first.location[1] - second.location[1]
    for x, y in first.find_antinodes(towers, grid):
        assert (x - first.location[0]) * dy == (y - first.location[1]) * dx


def test_main_prints_count(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(count_antinodes(EXAMPLE))