"""Follow a patrolling guard and find obstructions that would trap it in a loop."""

import argparse
from itertools import count
from pathlib import Path

Position = tuple[int, int]
Direction = tuple[int, int]
Room = list[list[str]]

UP: Direction = (-1, 0)
RIGHT: Direction = (0, 1)
DOWN: Direction = (1, 0)
LEFT: Direction = (0, -1)

_CLOCKWISE = (UP, RIGHT, DOWN, LEFT)
_GUARDS = {"^": UP, ">": RIGHT, "v": DOWN, "<": LEFT}
WALL = "#"


def parse_room(text: str) -> Room:
    """Return the room as a mutable grid of single characters."""
    return [list(line) for line in text.splitlines()]


def find_start(room: Room) -> tuple[Position, str]:
    """Return the (row, col) and symbol of the first cell that is neither '.' nor '#'."""
    for row, cells in enumerate(room):
        for col, cell in enumerate(cells):
            if cell not in (".", WALL):
                return (row, col), cell
    raise ValueError("no guard in the room")


def turn_right(direction: Direction) -> Direction:
    """Return the direction a quarter turn clockwise from ``direction``."""
    try:
        index = _CLOCKWISE.index(tuple(direction))
    except ValueError:
        raise ValueError(f"not a grid direction: {direction!r}") from None
    return _CLOCKWISE[(index + 1) % len(_CLOCKWISE)]


def _in_bounds(room: Room, position: Position) -> bool:
    row, col = position
    return 0 <= row < len(room) and 0 <= col < len(room[row])


def _step(position: Position, direction: Direction) -> Position:
    return position[0] + direction[0], position[1] + direction[1]


def _is_wall(room: Room, position: Position) -> bool:
    return room[position[0]][position[1]] == WALL


def _loops_after_turn(
    room: Room,
    position: Position,
    direction: Direction,
    visited: set[tuple[Position, Direction]],
) -> bool:
    """Turn right and keep walking; report whether a known state recurs."""
    seen: set[tuple[Position, Direction]] = set()
    while True:
        direction = turn_right(direction)
        ahead = _step(position, direction)
        if not _in_bounds(room, ahead):
            return False
        while not _is_wall(room, ahead):
            seen.add((position, direction))
            position = ahead
            ahead = _step(position, direction)
            if not _in_bounds(room, ahead):
                return False
            state = (position, direction)
            if state in visited or state in seen:
                return True
        seen.add((position, direction))


def _walk_leg(
    room: Room,
    position: Position,
    direction: Direction,
    visited: set[tuple[Position, Direction]],
    obstructions: set[Position],
) -> Position | None:
    """Walk straight until a wall; return where the guard stops, or None if it leaves."""
    ahead = _step(position, direction)
    if not _in_bounds(room, ahead):
        return None
    while not _is_wall(room, ahead):
        visited.add((position, direction))
        position = ahead
        ahead = _step(position, direction)
        if not _in_bounds(room, ahead):
            visited.add((position, direction))
            return None
        if (ahead, direction) not in visited:
            row, col = ahead
            stored = room[row][col]
            room[row][col] = WALL
            if _loops_after_turn(room, position, direction, visited):
                obstructions.add(ahead)
            room[row][col] = stored
    visited.add((position, direction))
    return position


def walk_room(room: Room) -> tuple[set[tuple[Position, Direction]], set[Position]]:
    """Walk the guard out of the room.

    Returns the (position, direction) states visited and the cells where a new
    obstruction was judged to send the guard into a loop. The room is not changed.
    """
    grid = [list(row) for row in room]
    position, guard = find_start(grid)
    if guard not in _GUARDS:
        raise ValueError(f"unknown guard symbol: {guard!r}")
    direction = _GUARDS[guard]
    visited: set[tuple[Position, Direction]] = set()
    obstructions: set[Position] = set()
    while True:
        stop = _walk_leg(grid, position, direction, visited, obstructions)
        if stop is None:
            return visited, obstructions
        position = stop
        direction = turn_right(direction)


def _creates_loop(room: Room, position: Position, direction: Direction) -> bool:
    limit = len(room) * len(room[0])
    seen: set[tuple[Position, Direction]] = set()
    for steps in count():
        ahead = _step(position, direction)
        if not _in_bounds(room, ahead):
            return False
        while _is_wall(room, ahead):
            direction = turn_right(direction)
            ahead = _step(position, direction)
            if not _in_bounds(room, ahead):
                return False
        position = ahead
        state = (position, direction)
        if state in seen:
            return True
        seen.add(state)
        if steps > limit or len(seen) > limit:
            raise RuntimeError("loop check walked further than the room allows")
    return False


def patrol(room: Room) -> tuple[set[Position], list[Position]]:
    """Patrol upwards from the guard, turning right at walls.

    Returns the cells stepped onto and, for every step after which a wall placed
    directly ahead would trap the guard, the cell the guard stood on.
    The room is not changed.
    """
    grid = [list(row) for row in room]
    position, _ = find_start(grid)
    direction = UP
    route: set[Position] = set()
    obstructions: list[Position] = []
    while True:
        ahead = _step(position, direction)
        if not _in_bounds(grid, ahead):
            return route, obstructions
        while _is_wall(grid, ahead):
            direction = turn_right(direction)
            ahead = _step(position, direction)
            if not _in_bounds(grid, ahead):
                return route, obstructions
        position = ahead
        route.add(position)
        ahead = _step(position, direction)
        if not _in_bounds(grid, ahead):
            return route, obstructions
        row, col = ahead
        stored = grid[row][col]
        grid[row][col] = WALL
        if _creates_loop(grid, position, direction):
            obstructions.append(position)
        grid[row][col] = stored


def _render_route(room: Room, route: set[Position]) -> str:
    return "\n".join(
        "".join("X" if (row, col) in route else cell for col, cell in enumerate(cells))
        for row, cells in enumerate(room)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trace the guard's patrol.")
    parser.add_argument("path", nargs="?", default="prod_input.txt")
    args = parser.parse_args(argv)
    room = parse_room(Path(args.path).read_text())

    start, guard = find_start(room)
    print(f"Starting at pos: {start}\nTravelling in dir: {_GUARDS.get(guard)}")
    visited, obstructions = walk_room(room)
    print(f"Squares walked: {len(visited)}")
    print(f"Obstructions for loop: {len(obstructions)}")

    route, loop_points = patrol(room)
    for point in loop_points:
        print(point)
    print(_render_route(room, route))
    print(len(route))
    print(len(loop_points))
    return 0