"""Gymnasium environment wrapper for the platformer.

Provides standard Gym API for scripted agents and RL training.
Observations include both RGB frames and a structured state vector.
"""

import numpy as np
import gymnasium
from gymnasium import spaces
from typing import Optional, Dict, Tuple

import pygame

from .config import GameConfig
from .input import KeyState
from .level_gen import LevelGenerator
from .renderer import Renderer, COLOR_OBSTACLE, COLOR_SPEED_BOOST
from .simulation import Simulation
from .world import WorldState


STATE_SIZE = 12

# move_x magnitude below which no direction key is pressed
_MOVE_DEADZONE = 0.1


class ClimbEnv(gymnasium.Env):
    """Gymnasium wrapper for the platformer.

    Observation space (Dict):
        'rgb': uint8 array of shape (H, W, 3) - rendered frame
        'state': float32 array of shape (12,) - state vector containing:
            [0-1] player position (x, y)
            [2-3] player velocity (dx, dy)
            [4]   player jumping (0/1)
            [5]   jumps used since landing (0-2)
            [6]   speed boost active (0/1)
            [7]   current jump strength
            [8]   height climbed (px scrolled)
            [9]   power-ups remaining
            [10]  episode progress (steps / max_steps)
            [11]  player dead (0/1)

    Action space (Dict):
        'move_x': float in [-1, 1] - left below -0.1, right above 0.1
        'jump':   int in {0, 1} - jump key held; a 0 -> 1 change is a press

    Reward = weighted sum of raw signals (stored in info['reward_signals']):
        climb:    px scrolled this step
        power_up: power-ups collected this step
        death:    1.0 when player dies
        step:     1.0 every step
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        obs_resolution: Tuple[int, int] = (128, 128),
        max_episode_steps: int = 2000,
        reward_weights: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.obs_height, self.obs_width = obs_resolution
        self.max_episode_steps = max_episode_steps

        self.reward_weights = reward_weights or {
            "climb": 0.1,
            "power_up": 5.0,
            "death": -50.0,
            "step": -0.01,
        }

        self.action_space = spaces.Dict({
            "move_x": spaces.Box(
                low=-1.0, high=1.0, shape=(1,), dtype=np.float32,
            ),
            "jump": spaces.Discrete(2),
        })

        self.observation_space = spaces.Dict({
            "rgb": spaces.Box(
                low=0, high=255,
                shape=(self.obs_height, self.obs_width, 3),
                dtype=np.uint8,
            ),
            "state": spaces.Box(
                low=-np.inf, high=np.inf,
                shape=(STATE_SIZE,),
                dtype=np.float32,
            ),
        })

        # Initialize pygame (caller sets SDL_VIDEODRIVER for headless)
        if not pygame.get_init():
            pygame.init()

        # Offscreen render surface (native resolution)
        self._surface = pygame.Surface(
            (self.config.screen_width, self.config.screen_height)
        )
        self._renderer = Renderer(self._surface)

        # Display for human render mode
        self._display = None
        if render_mode == "human":
            self._display = pygame.display.set_mode(
                (self.config.screen_width, self.config.screen_height)
            )
            pygame.display.set_caption("ClimbEnv")

        # Game state (populated on reset)
        self._state: Optional[WorldState] = None
        self._simulation: Optional[Simulation] = None
        self._key_state = KeyState()
        self._episode_steps = 0
        self._prev_scroll = 0.0
        self._level_seed: int = 0

    @property
    def world(self) -> Optional[WorldState]:
        return self._state

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)

        level_seed = int(self.np_random.integers(0, 2**31))
        generator = LevelGenerator.from_config(self.config, seed=level_seed)
        self._state = WorldState.from_config(self.config)
        generator.populate(self._state)
        self._simulation = Simulation(self.config, generator=generator)
        self._level_seed = level_seed

        self._key_state.reset()
        self._episode_steps = 0
        self._prev_scroll = 0.0

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        assert self._state is not None, "Must call reset() before step()"

        snapshot = self._action_to_input(action)
        result = self._simulation.step(self._state, snapshot)
        self._episode_steps += 1

        reward_signals = {
            "climb": self._state.scroll_offset - self._prev_scroll,
            "power_up": float(len(result.collected)),
            "death": 1.0 if result.died else 0.0,
            "step": 1.0,
        }
        self._prev_scroll = self._state.scroll_offset
        reward = sum(
            self.reward_weights.get(k, 0.0) * v
            for k, v in reward_signals.items()
        )

        terminated = not self._state.player.is_alive
        truncated = self._episode_steps >= self.max_episode_steps

        obs = self._get_obs()
        info = self._get_info()
        info["reward_signals"] = reward_signals

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ------------------------------------------------------------------
    # Action handling
    # ------------------------------------------------------------------

    def _action_to_input(self, action):
        move_x = action["move_x"]
        if isinstance(move_x, np.ndarray):
            move_x = float(move_x.item())
        move_x = float(move_x)

        jump = action["jump"]
        if isinstance(jump, np.ndarray):
            jump = int(jump.item())

        return self._key_state.capture_buttons(
            left=move_x < -_MOVE_DEADZONE,
            right=move_x > _MOVE_DEADZONE,
            jump=bool(jump),
        )

    # ------------------------------------------------------------------
    # Observations
    # ------------------------------------------------------------------

    def _get_obs(self):
        # Only render RGB when someone will actually use it
        if self.render_mode in ("rgb_array", "human"):
            rgb = self._render_frame()
        else:
            rgb = np.zeros(
                (self.obs_height, self.obs_width, 3), dtype=np.uint8
            )
        return {"rgb": rgb, "state": self._get_state_vector()}

    def _get_state_vector(self):
        state = np.zeros(STATE_SIZE, dtype=np.float32)
        world = self._state
        if world is None:
            return state

        player = world.player
        state[0] = player.x
        state[1] = player.y
        state[2] = player.dx
        state[3] = player.dy
        state[4] = float(player.is_jumping)
        state[5] = float(world.jump_count)
        state[6] = float(player.speed_boost)
        state[7] = player.jump_strength
        state[8] = world.scroll_offset
        state[9] = float(len(world.power_ups))
        state[10] = float(self._episode_steps) / max(self.max_episode_steps, 1)
        state[11] = float(not player.is_alive)
        return state

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_frame(self):
        """Render current state to numpy array (H, W, 3) uint8."""
        if self._state is None:
            self._renderer.clear()
        else:
            self._renderer.draw(self._state)
        return self._renderer.to_array(self.obs_width, self.obs_height)

    def render(self):
        if self.render_mode == "rgb_array":
            return self._render_frame()
        elif self.render_mode == "human" and self._display:
            self._render_frame()  # updates self._surface
            self._display.blit(self._surface, (0, 0))
            self._draw_hud()
            pygame.display.flip()

    def _draw_hud(self):
        """Draw height/status text on the display surface."""
        font = pygame.font.Font(None, 28)
        text = f"Height: {self._state.scroll_offset:.0f}  |  Step: {self._episode_steps}"
        surface = font.render(text, True, COLOR_SPEED_BOOST)
        self._display.blit(surface, surface.get_rect(topright=(self.config.screen_width - 10, 10)))

        if not self._state.player.is_alive:
            big = pygame.font.Font(None, 48)
            over = big.render("GAME OVER!", True, COLOR_OBSTACLE)
            self._display.blit(over, over.get_rect(
                center=(self.config.screen_width // 2, self.config.screen_height // 2)
            ))

    def _get_info(self):
        info = {
            "episode_steps": self._episode_steps,
            "player_dead": not self._state.player.is_alive,
            "player_position": self._state.player.position,
            "height_climbed": self._state.scroll_offset,
            "collected": [kind.value for kind in self._state.collected],
            "level_seed": self._level_seed,
        }
        return info

    def close(self):
        if self._display:
            pygame.display.quit()
            self._display = None
