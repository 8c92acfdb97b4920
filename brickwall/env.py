import logging

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np

from brickwall.config import DEFAULT_CONFIG
from brickwall.display import Display
from brickwall.game import Controls, Game, GameState

logger = logging.getLogger(__name__)


class BrickwallEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: Use ← and → to move the paddle. P pauses or resumes, R resets the round."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "A classic brick breaker. Bounce the ball off the paddle to break the wall; the round ends when the ball falls."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    def __init__(self, render_mode="rgb_array", config=DEFAULT_CONFIG, max_steps=10000):
        super().__init__()

        self.config = config
        self.render_mode = render_mode
        self.WIDTH, self.HEIGHT = config.screen_width, config.screen_height
        self.MAX_STEPS = max_steps

        # --- Gymnasium Spaces ---
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.HEIGHT, self.WIDTH, 3), dtype=np.uint8
        )
        # movement (0=none, 3=left, 4=right), pause toggle, reset
        self.action_space = MultiDiscrete([5, 2, 2])

        # --- Pygame Setup ---
        self.display = Display(self.WIDTH, self.HEIGHT, config.window_title, headless=True)

        # --- State Variables ---
        # These are initialized in reset()
        self.game = None
        self.steps = 0

        self.reset()

    @property
    def paddle(self):
        return self.game.paddle

    @property
    def ball(self):
        return self.game.ball

    @property
    def wall(self):
        return self.game.wall

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.steps = 0
        self.game = Game(self.display, self.config)
        # Start in play unless the caller asks for the paused title screen
        self.game.paused = bool((options or {}).get("paused", False))
        self.game.draw()

        return self._get_observation(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(np.asarray(action, dtype=np.int64)):
            raise ValueError(f"action {action!r} is outside {self.action_space}")

        # Unpack factorized action
        movement, pause_action, reset_action = (int(a) for a in action)
        controls = Controls(
            left=movement == 3,
            right=movement == 4,
            pause=pause_action == 1,
            reset=reset_action == 1,
        )

        self.game.step(controls)
        self.steps += 1

        # No scoring: the environment only reports termination
        reward = 0.0
        terminated = self.game.state is GameState.GAME_OVER
        truncated = self.steps >= self.MAX_STEPS
        if terminated:
            logger.debug("episode terminated after %d steps", self.steps)

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info()
        )

    def _get_observation(self):
        return self.display.frame_array()

    def _get_info(self):
        return {
            "steps": self.steps,
            "state": self.game.state.value,
            "active_bricks": self.game.wall.active_count(),
            "ball_active": self.game.ball.active,
        }

    def render(self):
        return self._get_observation()

    def close(self):
        self.display.close()

    def validate_implementation(self):
        '''
        Call after construction to verify the environment wiring:
        '''
        print("Running implementation validation...")
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)

        self.reset()
        print("✓ Implementation validated successfully")
