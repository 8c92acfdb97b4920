from brickwall.config import DEFAULT_CONFIG
from brickwall.geometry import Circle, vec2


class Ball:
    def __init__(self, pos, vel, radius, color, screen_width, screen_height):
        self.pos = vec2(pos[0], pos[1])
        self.vel = vec2(vel[0], vel[1])
        self.radius = radius
        self.color = color
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.active = True

    @classmethod
    def new(cls, config=DEFAULT_CONFIG):
        pos = (config.screen_width / 2.0, config.screen_height * 7.0 / 8 - 30)
        vel = (config.ball_velocity, config.ball_velocity)
        return cls(pos, vel, config.ball_radius, config.color_ball,
                   config.screen_width, config.screen_height)

    @property
    def circle(self):
        return Circle(self.pos, self.radius)

    def bounce_horizontal(self):
        self.vel[0] *= -1

    def bounce_vertical(self):
        self.vel[1] *= -1

    def move(self):
        if not self.active:
            return

        self.pos += self.vel

        # Bounces are checked against the already-moved position, each on its own
        if self.pos[0] + self.radius >= self.screen_width:
            self.bounce_horizontal()
        if self.pos[0] - self.radius <= 0:
            self.bounce_horizontal()
        if self.pos[1] - self.radius <= 0:
            self.bounce_vertical()

        # No floor: the ball is lost once its center reaches the bottom edge
        if self.pos[1] >= self.screen_height:
            self.active = False

    def render(self, display):
        if not self.active:
            return
        display.draw_circle(self.pos, self.radius, self.color)
