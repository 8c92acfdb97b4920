import argparse
import logging
import time

from brickwall.config import DEFAULT_CONFIG
from brickwall.game import GameState, run


def main(argv=None):
    parser = argparse.ArgumentParser(prog="brickwall", description="Play Brickwall in a window.")
    parser.add_argument("--width", type=int, default=DEFAULT_CONFIG.screen_width, help="screen width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_CONFIG.screen_height, help="screen height in pixels")
    parser.add_argument("--fps", type=int, default=DEFAULT_CONFIG.target_fps, help="target frame rate")
    parser.add_argument("-v", "--verbose", action="store_true", help="log state transitions")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = DEFAULT_CONFIG.replace(screen_width=args.width, screen_height=args.height, target_fps=args.fps)
    except ValueError as exc:
        parser.error(str(exc))

    start_time = time.time()
    game = run(config)
    duration = time.time() - start_time

    fps = game.frames / duration if duration > 0 else 0
    print(f"\nGame closed ({'ball lost' if game.state is GameState.GAME_OVER else 'quit'})")
    print(f"Bricks left: {game.wall.active_count()} / {game.wall.brick_count()}")
    print(f"Total frames: {game.frames}")
    print(f"Avg FPS: {fps:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
