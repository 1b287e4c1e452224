import random

import pytest

from cybersnake import config
from cybersnake.engine import GameEngine
from cybersnake.state import Phase, wrap


class FixedRng:
    """Always rolls the top-left cell."""

    def randrange(self, n):
        return 0


def playing(**kwargs):
    kwargs.setdefault("rng", FixedRng())
    engine = GameEngine(**kwargs)
    engine.start()
    return engine


def test_starts_in_menu_with_initial_state():
    engine = GameEngine()
    snap = engine.snapshot()
    assert snap.phase is Phase.MENU
    assert snap.snake == ((10, 10),)
    assert snap.direction == (1, 0)
    assert snap.food == (15, 15)
    assert snap.score == 0
    assert not engine.is_running


def test_five_ticks_move_right_without_eating():
    engine = playing()
    for _ in range(5):
        engine.tick()
    assert engine.snake == ((15, 10),)
    assert engine.score == 0
    assert engine.phase is Phase.PLAYING


def test_eating_grows_by_one_and_scores():
    engine = playing(initial_food=(11, 10))
    snap = engine.tick()
    assert snap.snake == ((11, 10), (10, 10))
    assert snap.score == 1
    assert snap.food == (0, 0)


def test_food_reroll_draws_x_then_y():
    engine = playing(initial_food=(11, 10), rng=random.Random(7))
    engine.tick()
    reference = random.Random(7)
    assert engine.food == (reference.randrange(20), reference.randrange(20))
    assert 0 <= engine.food[0] < config.GRID_SIZE
    assert 0 <= engine.food[1] < config.GRID_SIZE


def test_length_and_score_change_together():
    engine = playing(rng=random.Random(3), initial_food=(12, 10))
    for i in range(400):
        # Sweep the board row by row so food gets eaten along the way.
        engine.set_direction(config.DOWN if i % config.GRID_SIZE == config.GRID_SIZE - 1 else config.RIGHT)
        before = engine.snapshot()
        after = engine.tick()
        if after.phase is Phase.GAME_OVER:
            assert after.snake == before.snake
            break
        grown = len(after.snake) - len(before.snake)
        assert grown in (0, 1)
        assert after.score - before.score == grown
    assert engine.score >= 1


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((19, 4), (1, 0), (0, 4)),
        ((0, 4), (-1, 0), (19, 4)),
        ((4, 19), (0, 1), (4, 0)),
        ((4, 0), (0, -1), (4, 19)),
    ],
)
def test_wraps_around_edges(start, direction, expected):
    engine = playing(initial_snake=[start], initial_direction=direction, initial_food=(10, 10))
    assert engine.tick().snake == (expected,)


def test_wrap_handles_each_axis():
    assert wrap((-1, 20), 20) == (19, 0)
    assert wrap((20, -1), 20) == (0, 19)
    assert wrap((3, 4), 20) == (3, 4)


def test_reversal_is_ignored():
    engine = playing()
    engine.set_direction((-1, 0))
    assert engine.direction == (1, 0)


@pytest.mark.parametrize("turn", [(0, 1), (0, -1)])
def test_perpendicular_turn_is_applied(turn):
    engine = playing()
    engine.set_direction(turn)
    assert engine.direction == turn


def test_invalid_direction_is_ignored():
    engine = playing()
    engine.set_direction((2, 0))
    engine.set_direction((0, 0))
    assert engine.direction == (1, 0)


def test_last_direction_before_tick_wins():
    engine = playing()
    engine.set_direction((0, 1))
    engine.set_direction((1, 0))
    engine.set_direction((0, -1))
    assert engine.tick().snake == ((10, 9),)


def test_set_direction_outside_playing_is_ignored():
    engine = GameEngine()
    engine.set_direction((0, 1))
    assert engine.direction == (1, 0)

    engine.start()
    engine.toggle_pause()
    engine.set_direction((0, 1))
    assert engine.direction == (1, 0)


def test_self_collision_ends_game_and_keeps_snake():
    body = [(5, 5), (5, 4), (4, 4), (4, 5), (4, 6)]
    engine = playing(initial_snake=body, initial_direction=(-1, 0))
    before = engine.snake
    snap = engine.tick()
    assert snap.phase is Phase.GAME_OVER
    assert snap.snake == before


def test_moving_into_tail_cell_collides():
    # The tail has not moved away yet when the new head is checked.
    body = [(5, 5), (6, 5), (6, 6), (5, 6)]
    engine = playing(initial_snake=body, initial_direction=(0, 1))
    assert engine.tick().phase is Phase.GAME_OVER


def test_straight_snake_moving_up_survives():
    body = [(5, 5), (5, 6), (5, 7)]
    engine = playing(initial_snake=body, initial_direction=(0, -1))
    snap = engine.tick()
    assert snap.phase is Phase.PLAYING
    assert snap.snake == ((5, 4), (5, 5), (5, 6))


def test_tick_outside_playing_does_nothing():
    engine = GameEngine()
    engine.tick()
    assert engine.snake == ((10, 10),)

    engine.start()
    engine.toggle_pause()
    engine.tick()
    assert engine.snake == ((10, 10),)


def test_start_after_game_over_resets():
    body = [(5, 5), (5, 4), (4, 4), (4, 5), (4, 6)]
    engine = playing(initial_snake=body, initial_direction=(1, 0), initial_food=(6, 5))
    engine.tick()
    assert engine.score == 1
    engine.set_direction((0, -1))
    engine.tick()
    engine.set_direction((-1, 0))
    engine.tick()
    assert engine.phase is Phase.GAME_OVER

    snap = engine.start()
    assert snap.phase is Phase.PLAYING
    assert snap.score == 0
    assert snap.snake == tuple(body)
    assert snap.direction == (1, 0)
    assert snap.food == (6, 5)


def test_start_default_is_single_segment():
    engine = playing(initial_food=(11, 10))
    engine.tick()
    assert len(engine.snake) == 2
    snap = engine.start()
    assert snap.snake == ((10, 10),)
    assert snap.score == 0


def test_toggle_pause_twice_is_identity():
    engine = playing()
    engine.tick()
    before = engine.snapshot()
    assert engine.toggle_pause().phase is Phase.PAUSED
    assert engine.toggle_pause() == before


def test_toggle_pause_ignored_in_menu_and_game_over():
    engine = GameEngine()
    assert engine.toggle_pause().phase is Phase.MENU

    body = [(5, 5), (5, 4), (4, 4), (4, 5)]
    engine = playing(initial_snake=body, initial_direction=(-1, 0))
    engine.tick()
    assert engine.toggle_pause().phase is Phase.GAME_OVER


def test_return_to_menu_keeps_score_and_snake():
    engine = playing(initial_food=(11, 10))
    engine.tick()
    engine.toggle_pause()
    snap = engine.return_to_menu()
    assert snap.phase is Phase.MENU
    assert snap.score == 1
    assert len(snap.snake) == 2


def test_return_to_menu_from_game_over():
    body = [(5, 5), (5, 4), (4, 4), (4, 5)]
    engine = playing(initial_snake=body, initial_direction=(-1, 0))
    engine.tick()
    assert engine.return_to_menu().phase is Phase.MENU


def test_return_to_menu_ignored_while_playing():
    engine = playing()
    assert engine.return_to_menu().phase is Phase.PLAYING


def test_listeners_get_snapshots_on_change():
    engine = GameEngine()
    seen = []
    engine.add_listener(seen.append)
    engine.start()
    engine.tick()
    engine.set_direction((-1, 0))
    engine.toggle_pause()
    assert [s.phase for s in seen] == [Phase.PLAYING, Phase.PLAYING, Phase.PAUSED]
    assert seen[1].snake == ((11, 10),)

    engine.remove_listener(seen.append)
    engine.toggle_pause()
    assert len(seen) == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"grid_size": 0},
        {"initial_snake": []},
        {"initial_snake": [(20, 0)]},
        {"initial_snake": [(1, 1), (1, 1)]},
        {"initial_food": (-1, 3)},
        {"initial_direction": (1, 1)},
    ],
)
def test_rejects_bad_construction(kwargs):
    with pytest.raises(ValueError):
        GameEngine(**kwargs)


class CenterRng:
    def randrange(self, n):
        return n // 2


def test_food_can_respawn_on_the_snake():
    engine = playing(initial_food=(11, 10), rng=CenterRng())
    snap = engine.tick()
    assert snap.snake == ((11, 10), (10, 10))
    assert snap.food == (10, 10)
    assert snap.food in snap.snake
