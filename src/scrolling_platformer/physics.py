"""Player movement: gravity, landing, jumping, horizontal motion, walls.

All quantities are per tick. PhysicsWorld holds the movement constants and
applies each phase to a WorldState; Simulation decides the order.
"""

from typing import Optional

from .config import PhysicsConfig
from .geometry import overlaps_box, wall_contact
from .input import InputSnapshot
from .world import WorldState


class PhysicsWorld:
    """Applies the player's equations of motion to a world.

    Phases are separate methods because obstacle motion, power-up
    collection and scrolling run between landing and the jump-hold phase.
    """

    def __init__(self, config: Optional[PhysicsConfig] = None):
        """Initialize with movement constants.

        Args:
            config: Physics constants. Uses defaults if None.
        """
        self.config = config or PhysicsConfig()

    def handle_jump_input(self, state: WorldState, snapshot: InputSnapshot) -> None:
        """Apply jump key edges captured at the start of the tick.

        A press jumps if fewer than max_jumps jumps were made since the
        last landing; the second one is the double jump. A release ends
        the variable-height boost.
        """
        player = state.player
        if snapshot.jump_pressed and state.jump_count < self.config.max_jumps:
            player.dy = player.jump_strength
            player.is_jumping = True
            state.jump_count += 1
            state.jump_held = True

        if snapshot.jump_released:
            state.jump_held = False
            state.jump_hold_ticks = 0

    def apply_gravity(self, state: WorldState) -> None:
        player = state.player
        player.dy += player.gravity
        player.y += player.dy

    def resolve_landings(self, state: WorldState) -> bool:
        """Snap the player onto any platform its feet are inside.

        Only applies while falling or resting (dy >= 0). If several
        platforms match, the last one in collection order wins.

        Returns:
            True if the player landed this tick.
        """
        player = state.player
        landed = False
        for platform in state.platforms:
            if overlaps_box(player, platform) and player.dy >= 0:
                player.y = platform.y - player.height
                player.dy = 0.0
                player.is_jumping = False
                state.jump_count = 0
                landed = True
        return landed

    def update_jump_hold(self, state: WorldState) -> None:
        """Extra lift while the jump key stays held, capped in ticks."""
        player = state.player
        if state.jump_held and player.is_jumping:
            state.jump_hold_ticks += 1
            if state.jump_hold_ticks < self.config.jump_hold_ticks:
                player.dy -= self.config.jump_hold_force

    def apply_horizontal(self, state: WorldState, snapshot: InputSnapshot) -> None:
        """Accelerate from directional keys, apply friction, clamp to world."""
        player = state.player
        accel = self.config.accel_for(player.speed_boost)

        if snapshot.left:
            player.dx -= accel
        if snapshot.right:
            player.dx += accel

        player.dx *= self.config.friction
        if self.config.apply_speed_boost:
            limit = self.config.speed_limit(player.speed_boost)
            player.dx = max(-limit, min(limit, player.dx))
        player.x += player.dx

        if player.x < 0:
            player.x = 0.0
        if player.x + player.width > state.width:
            player.x = state.width - player.width

    def apply_wall_contact(self, state: WorldState, snapshot: InputSnapshot) -> bool:
        """Wall slide against platform sides, wall jump if jump is held.

        Returns:
            True if the player touched a wall this tick.
        """
        player = state.player
        touched = False
        state.wall_sliding = False
        for platform in state.platforms:
            if not wall_contact(player, platform, self.config.wall_margin):
                continue
            touched = True
            state.wall_sliding = True
            player.dy = self.config.wall_slide_speed

            if snapshot.jump_held:
                player.dy = player.jump_strength
                state.wall_sliding = False
        return touched
