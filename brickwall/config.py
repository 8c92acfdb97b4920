import dataclasses
from dataclasses import dataclass


# Colors
BLACK = (0, 0, 0)
GREEN = (0, 228, 48)
LIGHTGRAY = (200, 200, 200)


@dataclass(frozen=True)
class GameConfig:
    """Screen and gameplay constants shared by every builder."""

    # --- Screen ---
    screen_width: int = 800
    screen_height: int = 450
    window_title: str = "Brickwall"
    target_fps: int = 60

    # --- Paddle ---
    paddle_velocity: float = 4.0
    paddle_width: float = 80.0
    paddle_height: float = 20.0

    # --- Bricks ---
    brick_width: float = 60.0
    brick_height: float = 30.0
    wall_width: int = 12
    wall_height: int = 6

    # --- Ball ---
    ball_radius: float = 10.0
    ball_velocity: float = 2.0

    # --- Colors ---
    color_bg: tuple = BLACK
    color_paddle: tuple = GREEN
    color_ball: tuple = GREEN
    color_text: tuple = GREEN
    brick_colors: tuple = (LIGHTGRAY, GREEN)

    def __post_init__(self):
        for name in ("screen_width", "screen_height", "paddle_width", "paddle_height",
                     "brick_width", "brick_height", "ball_radius", "wall_width", "wall_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("paddle_velocity", "ball_velocity"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps!r}")
        if len(self.brick_colors) != 2:
            raise ValueError("brick_colors must hold exactly two colors")

        # The paddle and ball have to fit across the screen
        if self.paddle_width > self.screen_width:
            raise ValueError(
                f"paddle_width {self.paddle_width!r} does not fit in screen_width {self.screen_width!r}"
            )
        if 2 * self.ball_radius >= self.screen_width:
            raise ValueError(
                f"ball diameter {2 * self.ball_radius!r} does not fit in screen_width {self.screen_width!r}"
            )

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = GameConfig()
