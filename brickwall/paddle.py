from brickwall.config import DEFAULT_CONFIG
from brickwall.geometry import Rect, vec2


class Paddle:
    def __init__(self, pos, width, height, color, speed, screen_width):
        self.pos = vec2(pos[0], pos[1])
        self.size = vec2(width, height)
        self.color = color
        self.speed = speed
        self.screen_width = screen_width

    @classmethod
    def new(cls, config=DEFAULT_CONFIG):
        x = (config.screen_width - config.paddle_width) / 2.0
        y = config.screen_height - config.paddle_height
        return cls(
            (x, y),
            config.paddle_width,
            config.paddle_height,
            config.color_paddle,
            config.paddle_velocity,
            config.screen_width,
        )

    @property
    def rect(self):
        return Rect.from_pos_size(self.pos, self.size)

    def move(self, left_held, right_held):
        # Each direction is gated by its own bound; a move that would leave
        # the screen is dropped for this frame rather than clamped.
        if right_held and self.pos[0] + self.speed + self.size[0] <= self.screen_width:
            self.pos[0] += self.speed
        if left_held and self.pos[0] - self.speed >= 0:
            self.pos[0] -= self.speed

    def on_ball_hit(self, ball):
        ball.bounce_vertical()

    def render(self, display):
        display.draw_rect(self.pos, self.size, self.color)
