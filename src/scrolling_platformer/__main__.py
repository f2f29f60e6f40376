"""Command-line entry point.

    python -m scrolling_platformer                  # play the default preset
    python -m scrolling_platformer --config endless --seed 7
    python -m scrolling_platformer --policy climber --episodes 5
"""

import argparse
import os

from .config import CONFIGS, get_config


def run_policy(config_name: str, policy_name: str, episodes: int, seed, render: bool) -> None:
    """Run a scripted policy in ClimbEnv and print one line per episode."""
    if not render:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

    from .gym_env import ClimbEnv
    from .policies import POLICIES

    config = get_config(config_name)
    env = ClimbEnv(config=config, render_mode="human" if render else None)
    if policy_name == "climber":
        policy = POLICIES[policy_name](world_width=config.screen_width)
    else:
        policy = POLICIES[policy_name]()

    try:
        for episode in range(episodes):
            obs, info = env.reset(seed=None if seed is None else seed + episode)
            policy.reset()
            total = 0.0
            terminated = truncated = False
            while not (terminated or truncated):
                obs, reward, terminated, truncated, info = env.step(policy(obs))
                total += reward
            print(f"episode {episode}: steps={info['episode_steps']} "
                  f"height={info['height_climbed']:.0f} collected={len(info['collected'])} "
                  f"dead={info['player_dead']} reward={total:.1f}")
    finally:
        env.close()


def main() -> None:
    from .policies import POLICIES

    ap = argparse.ArgumentParser(description="Scrolling platformer: climb, dodge, collect.")
    ap.add_argument("--config", type=str, default="default", choices=sorted(CONFIGS),
                    help="Preset configuration")
    ap.add_argument("--seed", type=int, default=None, help="Level seed")
    ap.add_argument("--policy", type=str, default="", choices=[""] + sorted(POLICIES),
                    help="Run a scripted policy instead of keyboard play")
    ap.add_argument("--episodes", type=int, default=1, help="Episodes to run with --policy")
    ap.add_argument("--render", action="store_true", help="Show the window when running a policy")
    args = ap.parse_args()

    if args.policy:
        run_policy(args.config, args.policy, args.episodes, args.seed, args.render)
        return

    from .engine import PlatformerEngine

    engine = PlatformerEngine(get_config(args.config))
    engine.load_level(seed=args.seed)
    engine.run()


if __name__ == "__main__":
    main()
