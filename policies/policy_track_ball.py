
def policy(env):
    # Strategy: Keep the paddle center under the ball's x position. The paddle only
    # moves while the ball is out of line by more than one paddle step, which
    # avoids jittering left and right around the target.
    paddle_center = env.paddle.pos[0] + env.paddle.size[0] / 2
    dx = env.ball.pos[0] - paddle_center

    if dx > env.paddle.speed:
        return [4, 0, 0]  # Move right
    elif dx < -env.paddle.speed:
        return [3, 0, 0]  # Move left
    else:
        return [0, 0, 0]  # No movement (already under the ball)


# Example of how to run the policy against the environment
if __name__ == '__main__':
    import time

    from brickwall.env import BrickwallEnv

    env = BrickwallEnv()
    obs, info = env.reset()
    done = False

    frame_count = 0
    start_time = time.time()

    while not done:
        obs, reward, terminated, truncated, info = env.step(policy(env))
        done = terminated or truncated
        frame_count += 1

    end_time = time.time()
    duration = end_time - start_time
    fps = frame_count / duration if duration > 0 else 0
    print(f"\nEpisode finished ({'ball lost' if terminated else 'step limit'})")
    print(f"Bricks left: {info['active_bricks']}")
    print(f"Total Steps: {info['steps']}")
    print(f"Avg FPS: {fps:.2f}")
    env.close()
