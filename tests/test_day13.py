import pytest

from adventgrid.day13 import (
    Machine,
    brute_force_cost,
    intersection_cost,
    main,
    parse_machines,
)

EXAMPLE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279"""


def test_parse_machines_reads_all_values():
    machines = parse_machines(EXAMPLE)
    assert len(machines) == 4
    assert machines[0] == Machine((94, 34), (22, 67), (8400, 5400))
    assert machines[3] == Machine((69, 23), (27, 71), (18641, 10279))


def test_parse_machines_negative_moves():
    machines = parse_machines("Button A: X-3, Y+4\nButton B: X+1, Y-2\nPrize: X=7, Y=8")
    assert machines == [Machine((-3, 4), (1, -2), (7, 8))]


def test_parse_machines_bad_prize():
    with pytest.raises(ValueError):
        parse_machines("Button A: X+1, Y+1\nPrize: X=5")


def test_brute_force_example_total():
    assert brute_force_cost(parse_machines(EXAMPLE)) == 480


def test_brute_force_is_additive():
    machines = parse_machines(EXAMPLE)
    assert brute_force_cost(machines) == sum(brute_force_cost([m]) for m in machines)


def test_brute_force_prefers_cheaper_button():
    # Either button alone reaches the prize; B costs a third as much per press.
    machine = Machine((1, 1), (1, 1), (5, 5))
    assert brute_force_cost([machine]) == brute_force_cost([Machine((9, 9), (1, 1), (5, 5))])
    assert brute_force_cost([machine]) == machine.prize[0]


def test_intersection_whole_presses_counted():
    machine = Machine((1, 0), (1, 1), (5, 7))
    assert intersection_cost([machine]) == machine.prize[0]


def test_intersection_fractional_presses_skipped():
    whole = Machine((1, 0), (1, 1), (5, 7))
    fractional = Machine((1, 0), (2, 1), (5, 7))
    assert intersection_cost([whole, fractional]) == intersection_cost([whole])


def test_intersection_parallel_buttons_raise():
    with pytest.raises(ZeroDivisionError):
        intersection_cost([Machine((1, 1), (2, 2), (10, 10))])


def test_intersection_is_additive():
    machines = [Machine((1, 0), (1, 1), (5, 7)), Machine((1, 0), (1, 3), (4, 2))]
    assert intersection_cost(machines) == sum(intersection_cost([m]) for m in machines)


def test_main_prints_both_costs(tmp_path, capsys):
    path = tmp_path / "machines.txt"
    path.write_text("Button A: X+1, Y+0\nButton B: X+1, Y+1\nPrize: X=5, Y=7")
    assert main(["--search", str(path), "--intersection", str(path)]) == 0
    lines = capsys.readouterr().out.split()
    machines = parse_machines(path.read_text())
    assert lines == [str(brute_force_cost(machines)), str(intersection_cost(machines))]