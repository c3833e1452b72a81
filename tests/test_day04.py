import pytest

from adventgrid.day04 import DIRECTIONS, WordMatch, find_words, find_x_mas, main

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def test_example_xmas_count():
    assert len(find_words(EXAMPLE, ["XMAS"])) == 18


def test_example_x_mas_count():
    assert len(find_x_mas(EXAMPLE)) == 9


def test_forward_word_positions():
    assert find_words(["XMAS"], ["XMAS"]) == [WordMatch((0, 0), (0, 3))]


def test_backward_word_positions():
    assert find_words(["SAMX"], ["XMAS"]) == [WordMatch((0, 3), (0, 0))]


def test_single_letter_matches_every_direction():
    assert len(find_words(["X"], ["X"])) == len(DIRECTIONS)


def test_matches_span_word_length():
    for match in find_words(EXAMPLE, ["XMAS"]):
        (r0, c0), (r1, c1) = match.start, match.finish
        assert max(abs(r1 - r0), abs(c1 - c0)) == len("XMAS") - 1
        assert EXAMPLE[r0][c0] == "X"
        assert EXAMPLE[r1][c1] == "S"


def test_empty_word_rejected():
    with pytest.raises(ValueError):
        find_words(EXAMPLE, [""])


def test_x_mas_found_at_centre():
    assert find_x_mas(["M.S", ".A.", "M.S"]) == [(1, 1)]


def test_x_mas_requires_opposite_letters():
    assert find_x_mas(["M.M", ".A.", "M.M"]) == []


def test_main_prints_both_counts(tmp_path, capsys):
    path = tmp_path / "grid.txt"
    path.write_text("\r\n".join(EXAMPLE))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.split()
    assert out == [str(len(find_words(EXAMPLE, ["XMAS"]))), str(len(find_x_mas(EXAMPLE)))]