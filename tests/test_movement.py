"""
Tests for movement legality, intent buffering and collision checks.
"""
from maze_chase.gameplay.grid import CellKind, Direction, Position
from maze_chase.gameplay.entities import Hunter
from maze_chase.gameplay.level import parse_layout
from maze_chase.gameplay.movement import (
    can_move, next_position, resolve_intent, advance_hunter, caught, crossed
)


ALL_DIRECTIONS = list(Direction)

# A plus-shaped junction in a box:
#   #####
#   ##.##
#   #...#
#   ##.##
#   #####
JUNCTION = parse_layout([
    "#####",
    "##.##",
    "#.P.#",
    "##.##",
    "#####",
]).grid


class TestCanMove:
    """Tests for can_move."""

    def test_standing_still_is_never_a_move(self):
        """NONE is illegal on every cell of every board."""
        open_grid = parse_layout(["...", ".P.", "..."]).grid
        for grid in (open_grid, JUNCTION):
            for pos, _ in grid.iter_cells():
                assert not can_move(grid, pos, Direction.NONE)

    def test_walls_block(self):
        grid = parse_layout(["P#."]).grid
        assert not can_move(grid, Position(0, 0), Direction.RIGHT)

    def test_pickups_and_floor_are_walkable(self):
        grid = parse_layout(["P. "]).grid
        assert can_move(grid, Position(0, 0), Direction.RIGHT)
        assert can_move(grid, Position(1, 0), Direction.RIGHT)

    def test_board_edges_block(self):
        grid = parse_layout(["P"]).grid
        for direction in ALL_DIRECTIONS:
            assert not can_move(grid, Position(0, 0), direction)

    def test_legal_move_lands_in_bounds_on_non_wall(self):
        """can_move implies the target is on the board and not a wall."""
        grid = parse_layout([
            "#.#.",
            ".P..",
            "##.#",
        ]).grid
        for pos, _ in grid.iter_cells():
            for direction in ALL_DIRECTIONS:
                if can_move(grid, pos, direction):
                    target = next_position(pos, direction)
                    assert grid.in_bounds(target)
                    assert grid.cell_at(target) != CellKind.WALL

    def test_next_position_is_plain_addition(self):
        assert next_position(Position(0, 0), Direction.LEFT) == Position(-1, 0)


class TestIntentBuffering:
    """Tests for the hunter's wanted/committed direction."""

    def test_legal_wish_is_committed(self):
        hunter = Hunter(Position(2, 2))
        hunter.want(Direction.UP)

        resolve_intent(JUNCTION, hunter)
        assert hunter.direction == Direction.UP

    def test_blocked_wish_keeps_previous_direction(self):
        """A turn into a wall waits; the hunter keeps going."""
        grid = parse_layout([
            "#####",
            "P...#",
            "###.#",
        ]).grid
        hunter = Hunter(Position(0, 1), direction=Direction.RIGHT)
        hunter.want(Direction.DOWN)

        resolve_intent(grid, hunter)
        assert hunter.direction == Direction.RIGHT
        assert hunter.wanted_direction == Direction.DOWN

    def test_queued_turn_taken_at_corner(self):
        """A turn pressed early fires exactly when the corridor opens."""
        grid = parse_layout([
            "#####",
            "P...#",
            "###.#",
        ]).grid
        hunter = Hunter(Position(0, 1), direction=Direction.RIGHT)
        hunter.want(Direction.DOWN)

        path = []
        for _ in range(4):
            resolve_intent(grid, hunter)
            advance_hunter(grid, hunter)
            path.append(hunter.position)

        assert path == [Position(1, 1), Position(2, 1), Position(3, 1), Position(3, 2)]
        assert hunter.direction == Direction.DOWN

    def test_want_is_unconditional(self):
        hunter = Hunter(Position(0, 0))
        hunter.want(Direction.LEFT)
        hunter.want(Direction.NONE)
        assert hunter.wanted_direction == Direction.NONE

    def test_stalls_against_wall(self):
        """An illegal committed direction means no move, not an error."""
        grid = parse_layout(["P#"]).grid
        hunter = Hunter(Position(0, 0), direction=Direction.RIGHT)

        assert not advance_hunter(grid, hunter)
        assert hunter.position == Position(0, 0)

    def test_stationary_hunter_does_not_move(self):
        grid = parse_layout(["P.."]).grid
        hunter = Hunter(Position(0, 0))
        assert not advance_hunter(grid, hunter)

    def test_advance_reports_move(self):
        grid = parse_layout(["P.."]).grid
        hunter = Hunter(Position(0, 0), direction=Direction.RIGHT)
        assert advance_hunter(grid, hunter)
        assert hunter.position == Position(1, 0)


class TestCollision:
    """Tests for caught and crossed."""

    def test_caught_same_cell(self):
        assert caught(Position(1, 1), [Position(0, 0), Position(1, 1)])

    def test_not_caught(self):
        assert not caught(Position(1, 1), [Position(0, 1), Position(1, 0)])
        assert not caught(Position(1, 1), [])

    def test_crossed_swap(self):
        """Exchanging cells is a catch."""
        assert crossed(
            hunter_before=Position(1, 0), hunter_after=Position(2, 0),
            chaser_before=Position(2, 0), chaser_after=Position(1, 0),
        )

    def test_following_is_not_crossing(self):
        """Moving the same way in a line never swaps."""
        assert not crossed(
            hunter_before=Position(1, 0), hunter_after=Position(2, 0),
            chaser_before=Position(0, 0), chaser_after=Position(1, 0),
        )

    def test_standing_still_is_not_crossing(self):
        assert not crossed(
            Position(1, 0), Position(1, 0), Position(3, 0), Position(3, 0)
        )
