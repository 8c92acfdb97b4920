from brickwall.ball import Ball
from brickwall.collision import CollisionTarget, handle_collision, resolve_frame
from brickwall.config import DEFAULT_CONFIG, GameConfig
from brickwall.display import Display, Key
from brickwall.game import Controls, Game, GameState, run
from brickwall.paddle import Paddle
from brickwall.text import Align, TextLine
from brickwall.wall import Brick, Wall

__all__ = [
    "Align",
    "Ball",
    "Brick",
    "CollisionTarget",
    "Controls",
    "DEFAULT_CONFIG",
    "Display",
    "Game",
    "GameConfig",
    "GameState",
    "Key",
    "Paddle",
    "TextLine",
    "Wall",
    "handle_collision",
    "resolve_frame",
    "run",
]
