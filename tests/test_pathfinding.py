"""Shortest paths and their reading-order tie-breaks."""
from combat.parse import parse_initial_state
from combat.pathfinding import find_paths, shortest_distance, shortest_paths


def make_state(*rows: str):
    return parse_initial_state("\n".join(rows))


def test_equal_length_paths_take_reading_order_first_step():
    state = make_state(
        "#######",
        "#E....#",
        "#.....#",
        "#.....#",
        "#######",
    )
    # (1,2) and (2,1) both start a 2-step path to (2,2)
    assert shortest_distance(state, (1, 1), (2, 2)) == (2, (1, 2))
    # going down first is the only way to (3,1) in 2 steps
    assert shortest_distance(state, (1, 1), (3, 1)) == (2, (2, 1))


def test_first_step_prefers_upper_row_over_left_column():
    state = make_state(
        "#######",
        "#.....#",
        "#..E..#",
        "#.....#",
        "#######",
    )
    # up-left corner: up (1,3) beats left (2,2)
    assert shortest_distance(state, (2, 3), (1, 2)) == (2, (1, 3))
    # down-left corner: left (2,2) beats down (3,3)
    assert shortest_distance(state, (2, 3), (3, 2)) == (2, (2, 2))


def test_start_is_its_own_destination():
    state = make_state("#####", "#.E.#", "#####")
    assert shortest_distance(state, (1, 2), (1, 2)) == (0, (1, 2))


def test_occupied_and_walls_block():
    state = make_state(
        "#######",
        "#E#.G.#",
        "#G#...#",
        "#######",
    )
    # elf is boxed in by a wall and a goblin
    assert shortest_distance(state, (1, 1), (1, 3)) is None
    found = shortest_paths(state, (1, 1))
    assert found == {(1, 1): (0, (1, 1))}


def test_detour_around_wall():
    state = make_state(
        "#######",
        "#.E#G.#",
        "#..#..#",
        "#.....#",
        "#######",
    )
    paths = find_paths(state, (1, 2), [(2, 4), (1, 5), (0, 0)])
    assert paths[(2, 4)] == (5, (2, 2))
    assert paths[(1, 5)] == (7, (2, 2))
    assert paths[(0, 0)] is None


def test_goblins_block_paths_through_them():
    state = make_state(
        "#####",
        "#E.G#",
        "#.#.#",
        "#...#",
        "#####",
    )
    # (1,3) is occupied, so (2,3) is reached the long way round
    assert shortest_distance(state, (1, 1), (2, 3)) == (5, (2, 1))
