import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from brickwall.config import GameConfig
from brickwall.display import Display
from brickwall.game import Game


class RecordingDisplay:
    """Stand-in display that records draw calls instead of rendering them."""

    def __init__(self, width=800, height=450):
        self.width = width
        self.height = height
        self.calls = []
        self.held = set()
        self.close_requested = False

    def should_close(self):
        return self.close_requested

    def key_held(self, key):
        return key in self.held

    def hold(self, *keys):
        self.held.update(keys)

    def release_all(self):
        self.held.clear()

    def set_target_frame_rate(self, fps):
        self.calls.append(("fps", fps))

    def begin_frame(self):
        self.calls.append(("begin",))

    def end_frame(self):
        self.calls.append(("end",))

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_rect(self, pos, size, color):
        self.calls.append(("rect", (float(pos[0]), float(pos[1])), (float(size[0]), float(size[1])), color))

    def draw_circle(self, center, radius, color):
        self.calls.append(("circle", (float(center[0]), float(center[1])), radius, color))

    def draw_text(self, body, x, y, font_size, color):
        self.calls.append(("text", body, x, y, font_size, color))

    def measure_text_width(self, body, font_size):
        return len(body) * font_size // 2

    def close(self):
        pass

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def recorder(config):
    return RecordingDisplay(config.screen_width, config.screen_height)


@pytest.fixture
def game(recorder, config):
    return Game(recorder, config)


@pytest.fixture
def display(config):
    display = Display(config.screen_width, config.screen_height, headless=True)
    yield display
    display.close()


@pytest.fixture
def make_recorder():
    return RecordingDisplay
