import pytest

from adventgrid.day03 import enabled_products, main, total_of_products

EXAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_example_total():
    assert total_of_products(EXAMPLE) == 48


def test_single_mul_is_yielded():
    assert list(enabled_products("mul(2,3)")) == [(2, 3)]


def test_dont_disables_until_do():
    text = "don't()mul(2,3)do()mul(4,5)"
    assert list(enabled_products(text)) == [(4, 5)]


@pytest.mark.parametrize("text", ["mul(2, 3)", "mul[3,7]", "mul(32,64]", "mul(,1)", ""])
def test_malformed_instructions_are_ignored(text):
    assert list(enabled_products(text)) == []


def test_disabled_everything_gives_zero():
    assert total_of_products("don't()mul(9,9)mul(8,8)") == 0


def test_later_do_reenables():
    text = "mul(1,2)don't()mul(3,4)do()mul(5,6)"
    assert list(enabled_products(text)) == [(1, 2), (5, 6)]


def test_main_prints_total(tmp_path, capsys):
    path = tmp_path / "memory.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == str(total_of_products(EXAMPLE))


def test_main_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "absent.txt")])