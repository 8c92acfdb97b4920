import logging
from collections import namedtuple
from enum import Enum

from brickwall.ball import Ball
from brickwall.collision import resolve_frame
from brickwall.config import DEFAULT_CONFIG
from brickwall.display import Display, Key
from brickwall.paddle import Paddle
from brickwall.text import Align, TextLine
from brickwall.wall import Wall

logger = logging.getLogger(__name__)


class GameState(Enum):
    PAUSED = "paused"
    PLAYING = "playing"
    GAME_OVER = "game_over"


# Snapshot of the keys held during one frame
Controls = namedtuple("Controls", ["left", "right", "pause", "reset", "quit"], defaults=(False,) * 5)


class Game:
    """Owns the paddle, wall and ball and advances them one frame at a time.

    The game starts paused. Losing the ball puts it in GAME_OVER until a
    reset builds a fresh paddle, wall and ball.
    """

    def __init__(self, display, config=DEFAULT_CONFIG):
        self.display = display
        self.config = config
        self.paused = True
        self.frames = 0

        self.paddle = None
        self.wall = None
        self.ball = None
        self.reset()

        # On-screen messages
        text_color = config.color_text
        self.text_paused = TextLine.new(display, "GAME PAUSED", 40, Align.CENTER, 40, text_color)
        self.text_game_over = TextLine.new(display, "GAME OVER", 40, Align.CENTER, 40, text_color)
        self.text_resume = TextLine.new(display, "Press P to resume game", 120, Align.CENTER, 20, text_color)
        self.text_reset = TextLine.new(display, "Press R to reset game", 140, Align.CENTER, 20, text_color)
        self.text_quit = TextLine.new(display, "Press Q to quit game", 160, Align.CENTER, 20, text_color)

    @property
    def state(self):
        if not self.ball.active:
            return GameState.GAME_OVER
        if self.paused:
            return GameState.PAUSED
        return GameState.PLAYING

    def reset(self):
        # Rebinding drops the previous round's objects
        self.paddle = Paddle.new(self.config)
        self.wall = Wall.build(self.config.wall_height, self.config.wall_width, self.config)
        self.ball = Ball.new(self.config)

    def read_controls(self):
        held = self.display.key_held
        return Controls(
            left=held(Key.LEFT),
            right=held(Key.RIGHT),
            pause=held(Key.PAUSE),
            reset=held(Key.RESET),
            quit=held(Key.QUIT),
        )

    def step(self, controls):
        """Run one frame. Returns False when the game should stop."""
        if controls.quit:
            logger.debug("quit requested at frame %d", self.frames)
            return False

        if controls.pause:
            self.paused = not self.paused
            logger.debug("pause toggled, paused=%s", self.paused)
        if controls.reset:
            self.reset()
            logger.debug("game reset at frame %d", self.frames)

        self.frames += 1
        state = self.state
        if state is GameState.PLAYING:
            self.update(controls)
        self.draw(state)
        return True

    def update(self, controls):
        self.paddle.move(controls.left, controls.right)
        self.ball.move()
        hit = resolve_frame(self.ball, self.paddle, self.wall)
        if not self.ball.active:
            logger.debug("ball lost at frame %d", self.frames)
        return hit

    def draw(self, state=None):
        """Draw the screen for `state`, defaulting to the current one."""
        if state is None:
            state = self.state

        display = self.display
        display.begin_frame()
        display.clear(self.config.color_bg)
        if state is GameState.GAME_OVER:
            lines = (self.text_game_over, self.text_reset, self.text_quit)
        elif state is GameState.PAUSED:
            lines = (self.text_paused, self.text_resume, self.text_reset, self.text_quit)
        else:
            lines = ()
            self.wall.render(display)
            self.ball.render(display)
            self.paddle.render(display)
        for line in lines:
            line.render(display)
        display.end_frame()

    def frame(self):
        if self.display.should_close():
            return False
        return self.step(self.read_controls())


def run(config=DEFAULT_CONFIG):
    display = Display(config.screen_width, config.screen_height, config.window_title)
    display.set_target_frame_rate(config.target_fps)
    game = Game(display, config)
    try:
        while game.frame():
            pass
    finally:
        display.close()
    return game
