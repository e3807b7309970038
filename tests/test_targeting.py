"""Move and attack decisions for a single acting unit."""
from combat.config import BattleConfig
from combat.model import Faction
from combat.parse import parse_initial_state
from combat.targeting import MovePlan, choose_attack, choose_move


def make_state(*rows: str, **config):
    return parse_initial_state("\n".join(rows), BattleConfig(**config))


def unit_at(state, pos):
    return next(u for u in state.units if u.pos == pos and u.alive)


def test_targeting():
    state = make_state(
        "#######",
        "#E..G.#",
        "#...#.#",
        "#.G.#G#",
        "#######",
    )
    assert len(state.units) == 4
    assert len(state.occupied) == 4
    assert len(state.board) == 13

    elf = state.units[0]
    assert elf.pos == (1, 1)
    enemies_remaining, plan = choose_move(state, elf)
    assert enemies_remaining
    assert plan.first_step == (1, 2)
    assert plan.destination == (1, 3)
    assert plan.enemy_pos == (1, 4)


def test_tied_destinations_pick_reading_order():
    state = make_state(
        "#######",
        "#E..G.#",
        "#...#.#",
        "#.G.#E#",
        "#######",
    )
    # (1,3), (2,2) and (3,1) are all 2 steps away
    _, plan = choose_move(state, unit_at(state, (1, 1)))
    assert plan == MovePlan(distance=2, destination=(1, 3), enemy_pos=(1, 4), first_step=(1, 2))


def test_tied_destinations_with_tied_first_steps():
    state = make_state(
        "#######",
        "#.E...#",
        "#.....#",
        "#...G.#",
        "#######",
    )
    # (2,4) beats (3,3); of the two 3-step routes to it, (1,3) beats (2,2)
    _, plan = choose_move(state, unit_at(state, (1, 2)))
    assert plan.destination == (2, 4)
    assert plan.first_step == (1, 3)


def test_far_targeting():
    state = make_state(
        "#######",
        "#.....#",
        "#..E..#",
        "#.....#",
        "#..####",
        "#.....#",
        "#..##.#",
        "#####.#",
        "#...G.#",
        "#######",
    )
    elf = state.units[0]
    assert elf.pos == (2, 3)
    _, plan = choose_move(state, elf)
    assert plan.first_step == (2, 2)
    assert plan.enemy_pos == (8, 4)


def test_blocked_targeting():
    state = make_state(
        "#######",
        "#.E...#",
        "#..##.#",
        "#E##..#",
        "#G....#",
        "#######",
    )
    assert len(state.board) == 16
    elf = state.units[0]
    assert elf.pos == (1, 2)
    _, plan = choose_move(state, elf)
    assert plan.first_step == (1, 3)
    assert plan.enemy_pos == (4, 1)


def test_near_targeting_stays_put():
    state = make_state(
        "#######",
        "#.EG..#",
        "#..G..#",
        "#..#..#",
        "#G....#",
        "#######",
    )
    assert len(state.board) == 19
    elf = state.units[0]
    _, plan = choose_move(state, elf)
    assert plan.distance == 0
    assert plan.first_step == (1, 2)
    assert plan.enemy_pos == (1, 3)


def test_no_enemies_remain():
    state = make_state("######", "#E..E#", "######")
    assert choose_move(state, state.units[0]) == (False, None)


def test_unreachable_enemy_means_no_plan():
    state = make_state("#######", "#E.#.G#", "#######")
    assert choose_move(state, state.units[0]) == (True, None)


def test_attack_lowest_hp_then_reading_order():
    state = make_state(
        "#####",
        "#.G.#",
        "#GEG#",
        "#.G.#",
        "#####",
    )
    elf = unit_at(state, (2, 2))
    assert choose_attack(state, elf).pos == (1, 2)

    unit_at(state, (2, 3)).hp = 50
    unit_at(state, (3, 2)).hp = 50
    assert choose_attack(state, elf).pos == (2, 3)


def test_attack_ignores_dead_and_friendly_units():
    state = make_state(
        "#####",
        "#.G.#",
        "#EE.#",
        "#####",
    )
    elf = unit_at(state, (2, 2))
    goblin = unit_at(state, (1, 2))
    assert choose_attack(state, elf) is goblin

    goblin.hp = 0
    state.occupied.discard(goblin.pos)
    assert choose_attack(state, elf) is None
    assert choose_move(state, elf) == (False, None)


def test_attack_power_per_faction():
    state = make_state("#####", "#EG.#", "#####", protected_power=17)
    assert state.attack_power == {Faction.ELF: 17, Faction.GOBLIN: 3}
