"""pygame-backed drawing and input port used by the game loop.

A `Display` either opens a real window or, with ``headless=True``, draws to
an off-screen surface under SDL's dummy video driver. Headless displays take
their key state from `hold` / `release_all` instead of the keyboard.
"""

import os
from enum import Enum

import numpy as np
import pygame
import pygame.gfxdraw


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESET = "reset"
    QUIT = "quit"


KEY_BINDINGS = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.PAUSE: pygame.K_p,
    Key.RESET: pygame.K_r,
    Key.QUIT: pygame.K_q,
}


class Display:
    def __init__(self, width, height, title="Brickwall", headless=False):
        if headless:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

        pygame.init()
        pygame.font.init()

        self.width = width
        self.height = height
        self.headless = headless
        if headless:
            self.screen = pygame.Surface((width, height))
        else:
            pygame.display.set_caption(title)
            self.screen = pygame.display.set_mode((width, height))

        self.clock = pygame.time.Clock()
        self.fps = 0
        self.close_requested = False
        self._fonts = {}
        self._held = set()

    # --- Input ---

    def should_close(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close_requested = True
        return self.close_requested

    def key_held(self, key):
        if self.headless:
            return key in self._held
        return bool(pygame.key.get_pressed()[KEY_BINDINGS[key]])

    def hold(self, *keys):
        self._held.update(keys)

    def release_all(self):
        self._held.clear()

    # --- Frame pacing ---

    def set_target_frame_rate(self, fps):
        self.fps = fps

    def begin_frame(self):
        pass

    def end_frame(self):
        if self.headless:
            return
        pygame.display.flip()
        if self.fps:
            self.clock.tick(self.fps)

    # --- Drawing ---

    def clear(self, color):
        self.screen.fill(color)

    def draw_rect(self, pos, size, color):
        rect = pygame.Rect(int(pos[0]), int(pos[1]), int(size[0]), int(size[1]))
        pygame.draw.rect(self.screen, color, rect)

    def draw_circle(self, center, radius, color):
        x, y, r = int(center[0]), int(center[1]), int(radius)
        pygame.gfxdraw.filled_circle(self.screen, x, y, r, color)
        pygame.gfxdraw.aacircle(self.screen, x, y, r, color)

    def _font(self, font_size):
        font = self._fonts.get(font_size)
        if font is None:
            font = pygame.font.Font(None, font_size)
            self._fonts[font_size] = font
        return font

    def draw_text(self, body, x, y, font_size, color):
        text_surf = self._font(font_size).render(body, True, color)
        self.screen.blit(text_surf, (x, y))

    def measure_text_width(self, body, font_size):
        return self._font(font_size).size(body)[0]

    def frame_array(self):
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def close(self):
        self._fonts.clear()
        pygame.quit()
