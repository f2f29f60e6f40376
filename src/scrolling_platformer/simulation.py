"""One simulation tick.

Simulation.step runs the phases in a fixed order on a WorldState:

    jump edges -> gravity + landing -> obstacles + death -> power-ups
    -> scrolling -> jump hold -> horizontal -> walls -> recycling

The caller draws the resulting state and schedules another tick only if
StepResult.running is True. A dead world is terminal: stepping it again
changes nothing.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import GameConfig
from .entities import PowerUpType
from .geometry import overlaps_box, overlaps_pickup
from .input import InputSnapshot, NO_INPUT
from .level_gen import LevelGenerator
from .physics import PhysicsWorld
from .scroller import scroll
from .world import WorldState


@dataclass
class StepResult:
    """What happened during a tick."""
    running: bool = True  # Whether another tick should be scheduled
    landed: bool = False
    died: bool = False
    scrolled: bool = False
    wall_contact: bool = False
    collected: List[PowerUpType] = field(default_factory=list)


class Simulation:
    """Orchestrates physics, collisions and scrolling for one world."""

    def __init__(self, config: Optional[GameConfig] = None, generator: Optional[LevelGenerator] = None):
        """Initialize simulation.

        Args:
            config: Game configuration. Uses defaults if None.
            generator: Used for platform recycling when the layout enables
                it. A fresh unseeded generator is created if None.
        """
        self.config = config or GameConfig()
        self.physics = PhysicsWorld(self.config.physics)
        self.generator = generator or LevelGenerator.from_config(self.config)

    def step(self, state: WorldState, snapshot: InputSnapshot = NO_INPUT) -> StepResult:
        """Advance the world by one tick."""
        if not state.player.is_alive:
            return StepResult(running=False)

        layout = self.config.layout
        result = StepResult()

        self.physics.handle_jump_input(state, snapshot)
        self.physics.apply_gravity(state)
        result.landed = self.physics.resolve_landings(state)

        result.died = self.update_obstacles(state)
        result.collected = self.collect_power_ups(state)
        result.scrolled = scroll(state, layout.scroll_speed, layout.scroll_threshold)

        self.physics.update_jump_hold(state)
        self.physics.apply_horizontal(state, snapshot)
        result.wall_contact = self.physics.apply_wall_contact(state, snapshot)

        if layout.recycle_platforms:
            self.generator.recycle_platforms(state)

        state.tick += 1
        result.running = state.player.is_alive
        return result

    def update_obstacles(self, state: WorldState) -> bool:
        """Move every obstacle and kill the player on contact.

        Returns:
            True if the player died this tick.
        """
        player = state.player
        was_alive = player.is_alive
        for obstacle in state.obstacles:
            obstacle.update(state.width, self.config.layout.obstacle_speed)
            if overlaps_box(player, obstacle):
                player.is_alive = False
        return was_alive and not player.is_alive

    def collect_power_ups(self, state: WorldState) -> List[PowerUpType]:
        """Apply and remove every power-up the player touches.

        The list is rebuilt rather than edited while iterating, so each
        power-up is examined once and removed at most once.
        """
        player = state.player
        boosted = self.config.physics.boosted_jump_strength
        collected = []
        remaining = []
        for power_up in state.power_ups:
            if overlaps_pickup(player, power_up):
                power_up.apply(player, boosted)
                collected.append(power_up.kind)
            else:
                remaining.append(power_up)
        state.power_ups = remaining
        state.collected.extend(collected)
        return collected
