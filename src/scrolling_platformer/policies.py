"""Scripted players for ClimbEnv.

A policy maps an observation to the env's action dict. The climber is the
only one that plans around edge-triggered jumps; the others are baselines.
"""

import numpy as np
from typing import Dict, Any, Optional


class BasePolicy:
    """Observation in, ClimbEnv action out. Subclasses implement act()."""

    name: str = "base"

    def __call__(self, obs: Dict[str, np.ndarray]) -> Dict[str, Any]:
        return self.act(obs)

    def act(self, obs: Dict[str, np.ndarray]) -> Dict[str, Any]:
        raise NotImplementedError

    def reset(self):
        """Forget per-episode memory, e.g. a jump still being held."""

    def _make_action(self, move_x: float, jump: int) -> Dict[str, Any]:
        # move_x is a length-1 Box in [-1, 1]; jump is Discrete(2), 1 = held
        move = float(np.clip(move_x, -1.0, 1.0))
        return {"move_x": np.array([move], dtype=np.float32), "jump": int(jump)}


class IdlePolicy(BasePolicy):
    """Never moves or jumps. Shows how long the player survives standing still."""

    name = "idle"

    def act(self, obs):
        return self._make_action(0.0, 0)


class RandomPolicy(BasePolicy):
    """Random horizontal push every step, jump held on a few of them.

    Held steps are independent, so most jumps are one-tick presses that
    get little of the hold boost. Scrolling rarely triggers.
    """

    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None, jump_probability: float = 0.15):
        self.rng = rng or np.random.default_rng()
        self.jump_probability = jump_probability

    def act(self, obs):
        move_x = self.rng.uniform(-1.0, 1.0)
        jump = int(self.rng.random() < self.jump_probability)
        return self._make_action(move_x, jump)


class ClimberPolicy(BasePolicy):
    """Sweeps left and right, jumping whenever grounded.

    Holds jump for hold_steps to get the full variable-height boost, then
    releases so the next press registers as a new jump.
    """

    name = "climber"

    def __init__(self, world_width: float = 800.0, hold_steps: int = 20, edge_margin: float = 60.0):
        self.world_width = world_width
        self.hold_steps = hold_steps
        self.edge_margin = edge_margin
        self._direction = 1.0
        self._held = 0

    def reset(self):
        self._direction = 1.0
        self._held = 0

    def act(self, obs):
        state = obs["state"]
        x = state[0]
        jumping = state[4] > 0.5

        # Turn around near the world edges
        if x < self.edge_margin:
            self._direction = 1.0
        elif x > self.world_width - self.edge_margin:
            self._direction = -1.0

        if self._held > 0:
            self._held += 1
            if self._held > self.hold_steps:
                self._held = 0
            return self._make_action(self._direction, int(self._held > 0))

        jump = 0
        if not jumping:
            self._held = 1
            jump = 1
        return self._make_action(self._direction, jump)


POLICIES = {
    "idle": IdlePolicy,
    "random": RandomPolicy,
    "climber": ClimberPolicy,
}
