"""Tests for Gymnasium environment wrapper."""

import os
import numpy as np
import pytest

# Headless rendering
os.environ['SDL_VIDEODRIVER'] = 'dummy'

from scrolling_platformer.config import GameConfig, PhysicsConfig
from scrolling_platformer.entities import Obstacle, Platform
from scrolling_platformer.gym_env import ClimbEnv, STATE_SIZE


IDLE = {"move_x": np.array([0.0], dtype=np.float32), "jump": 0}


@pytest.fixture
def env():
    e = ClimbEnv(max_episode_steps=100)
    yield e
    e.close()


class TestClimbEnvCreation:
    def test_create_default(self, env):
        assert env.observation_space is not None
        assert env.action_space is not None

    def test_create_with_config(self):
        env = ClimbEnv(config=GameConfig(physics=PhysicsConfig(gravity=0.6)))
        assert env.config.physics.gravity == 0.6
        env.close()

    def test_action_space_sample_is_accepted(self, env):
        env.reset(seed=0)
        env.action_space.seed(0)
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)


class TestClimbEnvReset:
    def test_reset_returns_obs_and_info(self, env):
        obs, info = env.reset(seed=42)
        assert "rgb" in obs
        assert "state" in obs
        assert "episode_steps" in info
        assert "level_seed" in info

    def test_obs_shapes(self):
        env = ClimbEnv(obs_resolution=(64, 64))
        obs, _ = env.reset(seed=42)
        assert obs["rgb"].shape == (64, 64, 3)
        assert obs["rgb"].dtype == np.uint8
        assert obs["state"].shape == (STATE_SIZE,)
        assert obs["state"].dtype == np.float32
        env.close()

    def test_obs_in_observation_space(self, env):
        obs, _ = env.reset(seed=42)
        assert env.observation_space.contains(obs)

    def test_reset_with_seed_reproducible(self, env):
        env.reset(seed=42)
        platforms1 = [(p.x, p.y) for p in env.world.platforms]
        env.reset(seed=42)
        platforms2 = [(p.x, p.y) for p in env.world.platforms]
        assert platforms1 == platforms2

    def test_initial_state_vector(self, env):
        obs, _ = env.reset(seed=42)
        state = obs["state"]
        assert state[0] == pytest.approx(50.0)
        assert state[1] == pytest.approx(500.0)
        assert state[7] == pytest.approx(-12.0)
        assert state[9] == 4  # power-ups
        assert state[11] == 0.0


class TestClimbEnvStep:
    def test_step_before_reset_fails(self, env):
        with pytest.raises(AssertionError):
            env.step(IDLE)

    def test_reward_signals(self, env):
        env.reset(seed=42)
        _, _, _, _, info = env.step(IDLE)
        assert set(info["reward_signals"]) == {"climb", "power_up", "death", "step"}
        assert info["episode_steps"] == 1

    def test_move_right(self, env):
        env.reset(seed=42)
        env.world.obstacles = []
        x0 = env.world.player.x
        action = {"move_x": np.array([1.0], dtype=np.float32), "jump": 0}
        env.step(action)
        assert env.world.player.x > x0

    def test_jump_is_edge_triggered(self, env):
        env.reset(seed=42)
        world = env.world
        world.platforms = [Platform(x=25, y=550)]
        world.obstacles = []
        world.power_ups = []
        world.player.y = 500

        jump = {"move_x": np.array([0.0], dtype=np.float32), "jump": 1}
        env.step(jump)
        assert world.jump_count == 1
        env.step(jump)  # still held, not a new press
        assert world.jump_count == 1

    def test_death_terminates(self, env):
        env.reset(seed=42)
        world = env.world
        world.platforms = [Platform(x=50, y=500)]
        world.obstacles = [Obstacle(x=80, y=490)]
        world.player.x, world.player.y = 75, 450

        obs, reward, terminated, truncated, info = env.step(IDLE)

        assert terminated
        assert info["player_dead"]
        assert info["reward_signals"]["death"] == 1.0
        assert obs["state"][11] == 1.0
        assert reward < 0

    def test_truncation(self):
        env = ClimbEnv(max_episode_steps=3)
        env.reset(seed=42)
        env.world.obstacles = []
        truncated = False
        for _ in range(3):
            _, _, terminated, truncated, _ = env.step(IDLE)
            assert not terminated
        assert truncated
        env.close()


class TestClimbEnvRender:
    def test_rgb_array_mode(self):
        env = ClimbEnv(render_mode="rgb_array", obs_resolution=(32, 48))
        obs, _ = env.reset(seed=1)
        assert obs["rgb"].shape == (32, 48, 3)
        assert obs["rgb"].any()
        frame = env.render()
        assert frame.shape == (32, 48, 3)
        env.close()

    def test_no_render_mode_gives_blank_frames(self, env):
        obs, _ = env.reset(seed=1)
        assert not obs["rgb"].any()
