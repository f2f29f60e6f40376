"""Game entities: player, platforms, obstacles, power-ups.

Entities are plain data with screen coordinates: (x, y) is the top-left
corner and y grows downward. Behavior lives in physics.py, simulation.py
and scroller.py; the only per-entity update here is obstacle patrol.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class PowerUpType(str, Enum):
    """Power-up kinds. Values match the names used in the HUD."""
    DOUBLE_JUMP = "doubleJump"
    SPEED_BOOST = "speedBoost"


@dataclass
class Player:
    """The player body and its movement flags.

    gravity and jump_strength are copied from PhysicsConfig at creation;
    jump_strength is overwritten by the doubleJump power-up.
    """
    x: float
    y: float
    width: float = 50.0
    height: float = 50.0
    dx: float = 0.0
    dy: float = 0.0
    gravity: float = 0.8
    jump_strength: float = -12.0
    is_jumping: bool = False
    is_alive: bool = True
    speed_boost: bool = False

    @property
    def position(self) -> Tuple[float, float]:
        """Current position (x, y)."""
        return self.x, self.y

    @property
    def velocity(self) -> Tuple[float, float]:
        """Current velocity (dx, dy)."""
        return self.dx, self.dy

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get (left, top, right, bottom) bounds."""
        return self.x, self.y, self.right, self.bottom


@dataclass
class Platform:
    """Static platform. Only y changes, when the world scrolls."""
    x: float
    y: float
    width: float = 100.0
    height: float = 20.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get (left, top, right, bottom) bounds."""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass
class Obstacle:
    """Hazard patrolling horizontally across the whole world width.

    Touching it kills the player.
    """
    x: float
    y: float
    width: float = 50.0
    height: float = 20.0
    direction: int = 1  # -1 = left, +1 = right

    def update(self, world_width: float, speed: float) -> None:
        """Advance one tick and bounce off the world edges.

        On reaching an edge the direction flips and x is pulled back inside
        [0, world_width - width].
        """
        self.x += self.direction * speed
        if self.x <= 0 or self.x + self.width >= world_width:
            self.direction *= -1
            self.x = min(max(self.x, 0.0), max(world_width - self.width, 0.0))

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get (left, top, right, bottom) bounds."""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass
class PowerUp:
    """Collectible pickup. Drawn as a circle, collected via its square box."""
    x: float
    y: float
    kind: PowerUpType = PowerUpType.DOUBLE_JUMP
    size: float = 20.0

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size

    @property
    def center(self) -> Tuple[float, float]:
        half = self.size / 2
        return self.x + half, self.y + half

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Get (left, top, right, bottom) bounds."""
        return self.x, self.y, self.x + self.size, self.y + self.size

    def apply(self, player: Player, boosted_jump_strength: float) -> None:
        """Apply this power-up's permanent effect to the player."""
        if self.kind == PowerUpType.DOUBLE_JUMP:
            player.jump_strength = boosted_jump_strength
        elif self.kind == PowerUpType.SPEED_BOOST:
            player.speed_boost = True
