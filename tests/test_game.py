import pytest

from brickwall.display import Key
from brickwall.game import Controls, Game, GameState, run

PAUSE = Controls(pause=True)
IDLE = Controls()


def texts(recorder):
    return [call[1] for call in recorder.of_kind("text")]


def test_game_starts_paused(game):
    assert game.paused
    assert game.state is GameState.PAUSED
    assert game.ball.active
    assert game.wall.active_count() == game.config.wall_width * game.config.wall_height


def test_paused_frame_renders_menu_without_physics(game, recorder):
    pos = game.ball.pos.tolist()

    assert game.step(IDLE) is True

    assert game.ball.pos.tolist() == pos
    assert texts(recorder) == [
        "GAME PAUSED", "Press P to resume game", "Press R to reset game", "Press Q to quit game",
    ]
    assert recorder.of_kind("rect") == []


def test_pause_key_toggles_play(game, recorder, config):
    pos = game.ball.pos.tolist()

    game.step(PAUSE)

    assert game.state is GameState.PLAYING
    assert game.ball.pos.tolist() == [pos[0] + config.ball_velocity, pos[1] + config.ball_velocity]
    # Wall, ball and paddle are drawn
    assert len(recorder.of_kind("rect")) == 72 + 1
    assert len(recorder.of_kind("circle")) == 1
    assert texts(recorder) == []

    game.step(PAUSE)
    assert game.state is GameState.PAUSED


def test_playing_frame_moves_paddle(game, config):
    game.paused = False
    x = game.paddle.pos[0]

    game.step(Controls(left=True))

    assert game.paddle.pos[0] == x - config.paddle_velocity


def test_quit_stops_without_rendering(game, recorder):
    game.paused = False
    pos = game.ball.pos.tolist()

    assert game.step(Controls(quit=True, pause=True, reset=True)) is False

    assert recorder.calls == []
    assert game.ball.pos.tolist() == pos
    assert not game.paused


def test_lost_ball_shows_game_over_regardless_of_pause(game, recorder, config):
    game.paused = False
    game.ball.pos[:] = (game.paddle.pos[0] - 100, config.screen_height - 1)

    game.step(IDLE)
    assert not game.ball.active
    assert game.state is GameState.GAME_OVER

    recorder.calls.clear()
    game.step(PAUSE)
    assert game.paused
    assert game.state is GameState.GAME_OVER
    assert texts(recorder) == ["GAME OVER", "Press R to reset game", "Press Q to quit game"]

    recorder.calls.clear()
    pos = game.ball.pos.tolist()
    game.step(PAUSE)
    assert game.state is GameState.GAME_OVER
    assert game.ball.pos.tolist() == pos


def test_reset_rebuilds_every_entity(game, config):
    game.paused = False
    old_paddle, old_wall, old_ball = game.paddle, game.wall, game.ball
    old_wall.bricks[0].health = 0
    old_ball.active = False

    game.step(Controls(reset=True))

    assert game.paddle is not old_paddle
    assert game.wall is not old_wall
    assert game.ball is not old_ball
    assert game.wall.active_count() == 72
    assert game.ball.active
    assert game.state is GameState.PLAYING
    # The new round already advanced one frame
    assert game.ball.pos.tolist() == [
        config.screen_width / 2 + config.ball_velocity,
        config.screen_height * 7 / 8 - 30 + config.ball_velocity,
    ]


def test_reset_keeps_pause_flag(game):
    game.ball.active = False

    game.step(Controls(reset=True))

    assert game.state is GameState.PAUSED


def test_brick_is_destroyed_during_play(game, config):
    game.paused = False
    brick0, brick1 = game.wall.bricks[0], game.wall.bricks[1]
    # Overlapping bricks 0 and 1 once the ball has moved
    game.ball.pos[:] = (brick1.pos[0] - config.ball_velocity, brick0.pos[1] + 15 - config.ball_velocity)

    game.step(IDLE)

    assert brick0.health == 0
    assert brick1.health == 1
    assert game.wall.active_count() == 71
    assert game.ball.vel[1] == -config.ball_velocity


def test_frame_reads_held_keys(game, recorder):
    recorder.hold(Key.PAUSE)

    assert game.frame() is True
    assert game.state is GameState.PLAYING

    recorder.release_all()
    recorder.hold(Key.QUIT)
    assert game.frame() is False


def test_frame_stops_on_close_request(game, recorder):
    recorder.close_requested = True

    assert game.frame() is False
    assert recorder.calls == []


def test_read_controls_maps_every_key(game, recorder):
    recorder.hold(Key.LEFT, Key.RESET)

    assert game.read_controls() == Controls(left=True, reset=True)


def test_no_win_state_when_wall_is_cleared(game):
    game.paused = False
    for brick in game.wall:
        brick.health = 0

    game.step(IDLE)

    assert game.wall.active_count() == 0
    assert game.state is GameState.PLAYING


def test_run_loops_until_quit(monkeypatch, recorder, config):
    import brickwall.game as game_module

    frames = iter([False, False, True])
    recorder.should_close = lambda: next(frames)
    monkeypatch.setattr(game_module, "Display", lambda *args, **kwargs: recorder)

    game = run(config)

    assert isinstance(game, Game)
    assert game.frames == 2
    assert ("fps", config.target_fps) in recorder.calls


@pytest.mark.parametrize("frames", [1, 30])
def test_simulation_is_deterministic(recorder, make_recorder, config, frames):
    first = Game(recorder, config)
    second = Game(make_recorder(), config)
    first.paused = second.paused = False

    for _ in range(frames):
        first.step(Controls(right=True))
        second.step(Controls(right=True))

    assert first.ball.pos.tolist() == second.ball.pos.tolist()
    assert first.paddle.pos.tolist() == second.paddle.pos.tolist()
