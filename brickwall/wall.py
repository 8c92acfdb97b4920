from brickwall.config import DEFAULT_CONFIG
from brickwall.geometry import Rect, vec2


class Brick:
    def __init__(self, pos, width, height, color, health=1):
        self.pos = vec2(pos[0], pos[1])
        self.size = vec2(width, height)
        self.color = color
        self.health = health

    @property
    def rect(self):
        return Rect.from_pos_size(self.pos, self.size)

    @property
    def is_active(self):
        return self.health > 0

    def on_ball_hit(self, ball):
        # Health is not floored; callers only test active bricks
        self.health -= 1
        ball.bounce_vertical()

    def render(self, display):
        display.draw_rect(self.pos, self.size, self.color)

    def __repr__(self):
        return f"Brick(pos=({self.pos[0]}, {self.pos[1]}), health={self.health})"


class Wall:
    """Grid of bricks, stored row-major and centered horizontally.

    The grid never changes shape and bricks never move; collisions only
    decrement brick health.
    """

    def __init__(self, height, width, bricks):
        self.height = height
        self.width = width
        self.bricks = bricks

    @classmethod
    def build(cls, height, width, config=DEFAULT_CONFIG):
        if height <= 0 or width <= 0:
            raise ValueError(f"wall dimensions must be positive, got {height}x{width}")

        bricks = []
        even = False
        start_x = (config.screen_width - width * config.brick_width) / 2.0
        x, y = start_x, 0.0
        for i in range(height * width):
            if i % width == 0:
                # New row: flip parity and drop one brick height
                even = not even
                x = start_x
                y += config.brick_height
            else:
                x += config.brick_width

            color = config.brick_colors[0] if even else config.brick_colors[1]
            bricks.append(Brick((x, y), config.brick_width, config.brick_height, color))

        return cls(height, width, bricks)

    def brick_count(self):
        return self.height * self.width

    def active_bricks(self):
        return (brick for brick in self.bricks if brick.is_active)

    def active_count(self):
        return sum(1 for _ in self.active_bricks())

    def render(self, display):
        for brick in self.active_bricks():
            brick.render(display)

    def __len__(self):
        return len(self.bricks)

    def __iter__(self):
        return iter(self.bricks)
