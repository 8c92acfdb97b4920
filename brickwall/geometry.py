import numpy as np


def vec2(x, y):
    return np.array([x, y], dtype=float)


class Rect:
    """Axis-aligned rectangle with a float top-left corner."""

    def __init__(self, x, y, width, height):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + self.width

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.height

    @classmethod
    def from_pos_size(cls, pos, size):
        return cls(pos[0], pos[1], size[0], size[1])

    def __repr__(self):
        return f"Rect({self.x}, {self.y}, {self.width}, {self.height})"


class Circle:
    def __init__(self, center, radius):
        self.center = vec2(center[0], center[1])
        self.radius = float(radius)

    def __repr__(self):
        return f"Circle(({self.center[0]}, {self.center[1]}), {self.radius})"


def circle_intersects_rect(circle, rect):
    """Return True if the circle overlaps or touches the rectangle."""
    # Closest point on the rectangle to the circle center
    closest_x = np.clip(circle.center[0], rect.left, rect.right)
    closest_y = np.clip(circle.center[1], rect.top, rect.bottom)
    dx = circle.center[0] - closest_x
    dy = circle.center[1] - closest_y
    return bool((dx * dx + dy * dy) <= circle.radius * circle.radius)
