from dataclasses import dataclass
from enum import Enum


class Align(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class TextLine:
    """A fixed message drawn at a given height, aligned across the screen."""

    body: str
    pos_y: int
    align: Align
    font_size: int
    color: tuple
    width: int

    @classmethod
    def new(cls, display, body, pos_y, align, font_size, color):
        return cls(body, pos_y, align, font_size, color,
                   display.measure_text_width(body, font_size))

    def pos_x(self, screen_width):
        if self.align is Align.LEFT:
            return 0
        if self.align is Align.CENTER:
            return screen_width // 2 - self.width // 2
        return screen_width - self.width

    def render(self, display):
        display.draw_text(self.body, self.pos_x(display.width), self.pos_y,
                          self.font_size, self.color)
