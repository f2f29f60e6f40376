"""World state aggregate passed through every simulation step."""

from dataclasses import dataclass, field
from typing import List, Dict, Any

from .config import GameConfig
from .entities import Player, Platform, Obstacle, PowerUp, PowerUpType


@dataclass
class WorldState:
    """Everything the simulation mutates during a tick.

    Collections keep generation order (bottom to top). The platform list
    never changes length after generation.
    """
    player: Player
    width: float
    height: float
    platforms: List[Platform] = field(default_factory=list)
    obstacles: List[Obstacle] = field(default_factory=list)
    power_ups: List[PowerUp] = field(default_factory=list)

    # Jump bookkeeping
    jump_count: int = 0
    jump_held: bool = False
    jump_hold_ticks: int = 0
    wall_sliding: bool = False

    # Progress tracking
    tick: int = 0
    scroll_offset: float = 0.0  # Total px scrolled, i.e. height climbed
    collected: List[PowerUpType] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: GameConfig) -> "WorldState":
        """Empty world with a fresh player at the configured start."""
        x, y = config.player_start
        player = Player(
            x=x,
            y=y,
            width=config.player_width,
            height=config.player_height,
            gravity=config.physics.gravity,
            jump_strength=config.physics.jump_strength,
        )
        return cls(
            player=player,
            width=float(config.screen_width),
            height=float(config.screen_height),
        )

    @property
    def is_over(self) -> bool:
        return not self.player.is_alive

    def get_state(self) -> Dict[str, Any]:
        """Snapshot of the world for observation/logging."""
        return {
            "tick": self.tick,
            "player_alive": self.player.is_alive,
            "player_position": self.player.position,
            "player_velocity": self.player.velocity,
            "player_jumping": self.player.is_jumping,
            "jump_count": self.jump_count,
            "wall_sliding": self.wall_sliding,
            "speed_boost": self.player.speed_boost,
            "jump_strength": self.player.jump_strength,
            "scroll_offset": self.scroll_offset,
            "platforms": len(self.platforms),
            "obstacles": len(self.obstacles),
            "power_ups": len(self.power_ups),
            "collected": [kind.value for kind in self.collected],
        }
