"""Ball collision handling against the paddle and the bricks of a wall.

Only two kinds of object can be hit: a `Brick` or a `Paddle`. Each carries
its own response in `on_ball_hit`, so resolving a hit never needs a fallback
for an unknown kind.
"""

from typing import Optional, Union

from brickwall.geometry import circle_intersects_rect
from brickwall.paddle import Paddle
from brickwall.wall import Brick

CollisionTarget = Union[Brick, Paddle]


def handle_collision(ball, target: CollisionTarget) -> bool:
    """Test the ball against a single brick or paddle and apply the response.

    Returns:
        True if the ball touched the target. A brick loses one health and the
        ball's vertical velocity is inverted; a paddle only inverts the ball's
        vertical velocity. Nothing changes on a miss.
    """
    if not isinstance(target, (Brick, Paddle)):
        raise TypeError(f"cannot collide a ball with {type(target).__name__}")

    if not circle_intersects_rect(ball.circle, target.rect):
        return False

    target.on_ball_hit(ball)
    return True


def resolve_frame(ball, paddle, wall) -> Optional[CollisionTarget]:
    """Resolve at most one collision for the current frame.

    The paddle is tested first. Only if it misses are the active bricks
    scanned in storage order, stopping at the first one hit.
    """
    if handle_collision(ball, paddle):
        return paddle

    for brick in wall.active_bricks():
        if handle_collision(ball, brick):
            return brick

    return None
