import random

import pytest

from gapdodge.config import GameConfig
from gapdodge.constants import KEY_LEFT, KEY_RIGHT
from gapdodge.data_models import Obstacle
from gapdodge.game_engine import GameEngine, GameState


def test_engine_starts_idle(engine: GameEngine) -> None:
    assert engine.state is GameState.IDLE
    assert engine.obstacles == []
    assert engine.delta_time == pytest.approx(1 / 30)


def test_update_before_start_does_nothing(engine: GameEngine, renderer) -> None:
    engine.update()
    assert engine.tick_count == 0
    assert renderer.frames == []


def test_start_spawns_first_obstacle_and_schedules_ticks(engine: GameEngine, scheduler) -> None:
    engine.start()
    assert engine.state is GameState.RUNNING
    assert len(engine.obstacles) == 1
    assert scheduler.active_count == 1

    engine.start()
    assert len(engine.obstacles) == 1
    assert scheduler.active_count == 1


def test_scheduler_drives_updates(engine: GameEngine, scheduler, renderer, config) -> None:
    engine.start()
    for _ in range(10):
        scheduler.advance(config.tick_time)
    assert engine.tick_count == 10
    assert len(renderer.frames) == 10
    assert renderer.frames[-1]["tick"] == 10


def test_arrow_keys_move_player(engine: GameEngine, inputs) -> None:
    engine.start()
    start_x = engine.player.x

    inputs.press(KEY_LEFT)
    engine.update()
    assert engine.player.x == pytest.approx(start_x - 0.8)

    inputs.release(KEY_LEFT)
    inputs.press(KEY_RIGHT)
    engine.update()
    engine.update()
    assert engine.player.x == pytest.approx(start_x + 0.8)

    inputs.press(KEY_LEFT)
    engine.update()
    assert engine.player.x == pytest.approx(start_x + 0.8)


def test_obstacles_move_down_each_tick(engine: GameEngine) -> None:
    engine.start()
    engine.update()
    engine.update()
    assert engine.obstacles[0].y == pytest.approx(1.8)


def test_second_obstacle_spawns_after_delay(engine: GameEngine, config) -> None:
    engine.start()
    ticks = round(config.obstacle_spawn_delay / config.tick_time)
    assert ticks == config.spawn_interval_ticks == 60

    counts = []
    for _ in range(ticks):
        engine.update()
        counts.append(len(engine.obstacles))

    assert counts[:-1] == [1] * (ticks - 1)
    assert counts[-1] == 2
    assert engine.obstacles[-1].y == config.obstacle_start_y
    assert engine.state is GameState.RUNNING


def test_obstacles_are_never_removed(engine: GameEngine, config) -> None:
    engine.start()
    engine.player.x = 41
    engine.obstacles[0] = Obstacle(left_width=40, right_x=45, y=1)

    # Walls after the first would eventually hit the player; keep them harmless
    for _ in range(3 * config.spawn_interval_ticks):
        for obstacle in engine.obstacles:
            obstacle.left_width, obstacle.right_x = 40, 45
        engine.update()

    assert engine.state is GameState.RUNNING
    assert len(engine.obstacles) == 4
    assert engine.obstacles[0].y > config.rows


def test_collision_ends_the_game(engine: GameEngine, scheduler, renderer, config) -> None:
    engine.start()
    engine.player.x = 5
    engine.obstacles.append(Obstacle(left_width=20, right_x=25, y=engine.player.y + 1))

    engine.update()

    assert engine.state is GameState.GAME_OVER
    assert engine.is_game_over
    assert scheduler.active_count == 0
    assert renderer.destroyed
    assert renderer.frames == []

    tick = engine.tick_count
    engine.update()
    scheduler.advance(1.0)
    assert engine.tick_count == tick


def test_start_after_game_over_is_ignored(engine: GameEngine, scheduler) -> None:
    engine.start()
    engine.player.x = 0
    engine.obstacles.append(Obstacle(left_width=10, right_x=15, y=engine.player.y))
    engine.update()
    assert engine.is_game_over

    obstacle_count = len(engine.obstacles)
    engine.start()
    assert engine.state is GameState.GAME_OVER
    assert scheduler.active_count == 0
    assert len(engine.obstacles) == obstacle_count


def test_stop_pauses_and_start_resumes(engine: GameEngine, scheduler, config) -> None:
    engine.start()
    scheduler.advance(config.tick_time)
    engine.stop()

    assert engine.state is GameState.IDLE
    assert scheduler.active_count == 0
    assert len(engine.obstacles) == 1
    y = engine.obstacles[0].y

    scheduler.advance(1.0)
    assert engine.obstacles[0].y == y

    engine.start()
    assert len(engine.obstacles) == 1
    scheduler.advance(config.tick_time)
    assert engine.tick_count == 2
    assert engine.obstacles[0].y > y


def test_snapshot_is_a_copy(engine: GameEngine) -> None:
    engine.start()
    snapshot = engine.snapshot()
    assert snapshot["state"] == "running"
    assert snapshot["player"] == {"x": engine.player.x, "y": engine.player.y}
    assert len(snapshot["obstacles"]) == 1

    snapshot["obstacles"][0]["y"] = 99
    snapshot["player"]["x"] = 0
    assert engine.obstacles[0].y != 99
    assert engine.player.x != 0


@pytest.mark.parametrize("delay", [0.04, 0.0833, 0.1, 0.5, 2.0])
def test_no_spawn_before_delay_has_passed(delay: float, renderer, inputs, scheduler) -> None:
    config = GameConfig(obstacle_spawn_delay=delay)
    engine = GameEngine(renderer, inputs, scheduler, config, rng=random.Random(5))
    engine.start()

    ticks = 0
    while len(engine.obstacles) == 1:
        engine.update()
        ticks += 1
        assert ticks < 1000

    assert ticks * config.tick_time >= delay - 1e-9
    assert (ticks - 1) * config.tick_time < delay
