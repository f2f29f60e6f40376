"""Configuration system for the scrolling platformer.

PhysicsConfig holds the per-tick movement constants of the player.
LayoutConfig holds the sizes and spacing used by the entity generators and
the world scroller. GameConfig combines both with display settings.

All velocities are in pixels per tick, not per second. The simulation has no
fixed timestep: one tick is one displayed frame.
"""

from dataclasses import dataclass, field
from typing import Tuple, Dict, Any, ClassVar
import random


@dataclass
class PhysicsConfig:
    """Player movement constants."""

    gravity: float = 0.8  # Added to dy every tick (px/tick²)
    jump_strength: float = -12.0  # dy applied by a jump (negative = up)
    boosted_jump_strength: float = -15.0  # jump_strength after a doubleJump power-up

    move_accel: float = 0.5  # dx nudge per tick while a direction key is held
    friction: float = 0.9  # dx multiplier applied every tick
    move_speed: float = 5.0  # Nominal max speed
    boosted_speed: float = 10.0  # Nominal max speed with speed boost

    jump_hold_ticks: int = 20  # Ticks of extra lift while jump is held
    jump_hold_force: float = 0.4  # Extra upward dy per held tick

    wall_slide_speed: float = 0.5  # Max descent speed while wall sliding
    wall_margin: float = 10.0  # Distance from a platform edge that counts as wall contact

    max_jumps: int = 2  # Jumps allowed between landings

    # The boosted speed is computed but ignored by the accel/friction model
    # unless this is set.
    apply_speed_boost: bool = False

    GRAVITY_RANGE: ClassVar[Tuple[float, float]] = (0.5, 1.2)
    JUMP_STRENGTH_RANGE: ClassVar[Tuple[float, float]] = (-14.0, -10.0)
    FRICTION_RANGE: ClassVar[Tuple[float, float]] = (0.8, 0.95)
    MOVE_ACCEL_RANGE: ClassVar[Tuple[float, float]] = (0.3, 0.8)

    def speed_limit(self, speed_boost: bool) -> float:
        """Nominal max speed for the current boost state."""
        return self.boosted_speed if speed_boost else self.move_speed

    def accel_for(self, speed_boost: bool) -> float:
        """Horizontal acceleration per tick for the current boost state."""
        if self.apply_speed_boost and speed_boost:
            return self.move_accel * self.boosted_speed / self.move_speed
        return self.move_accel

    @classmethod
    def sample(cls) -> "PhysicsConfig":
        """Sample random movement constants."""
        return cls(
            gravity=random.uniform(*cls.GRAVITY_RANGE),
            jump_strength=random.uniform(*cls.JUMP_STRENGTH_RANGE),
            friction=random.uniform(*cls.FRICTION_RANGE),
            move_accel=random.uniform(*cls.MOVE_ACCEL_RANGE),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gravity": self.gravity,
            "jump_strength": self.jump_strength,
            "boosted_jump_strength": self.boosted_jump_strength,
            "move_accel": self.move_accel,
            "friction": self.friction,
            "move_speed": self.move_speed,
            "boosted_speed": self.boosted_speed,
            "jump_hold_ticks": self.jump_hold_ticks,
            "jump_hold_force": self.jump_hold_force,
            "wall_slide_speed": self.wall_slide_speed,
            "wall_margin": self.wall_margin,
            "max_jumps": self.max_jumps,
            "apply_speed_boost": self.apply_speed_boost,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PhysicsConfig":
        """Create from dictionary. Missing keys fall back to defaults."""
        defaults = cls()
        return cls(**{k: d.get(k, v) for k, v in defaults.to_dict().items()})


@dataclass
class LayoutConfig:
    """Entity generation and scrolling parameters."""
    platform_count: int = 10
    platform_gap: float = 150.0  # Vertical distance between platforms
    platform_width: float = 100.0
    platform_height: float = 20.0
    bottom_margin: float = 20.0  # Distance of the first platform from the bottom

    obstacle_width: float = 50.0
    obstacle_height: float = 20.0
    obstacle_speed: float = 2.0  # px/tick
    obstacle_stride: int = 2  # One obstacle on every Nth platform

    power_up_size: float = 20.0
    power_up_stride: int = 3  # One power-up on every Nth platform

    scroll_speed: float = 5.0  # px shifted per scrolling tick
    scroll_threshold: float = 0.5  # Fraction of world height that triggers scrolling

    recycle_platforms: bool = False  # Move platforms that leave the bottom back to the top

    PLATFORM_GAP_RANGE: ClassVar[Tuple[float, float]] = (110.0, 170.0)
    OBSTACLE_SPEED_RANGE: ClassVar[Tuple[float, float]] = (1.0, 4.0)

    def validate(self) -> None:
        """Raise ValueError on values the generators cannot work with."""
        if self.platform_count < 1:
            raise ValueError(f"platform_count must be >= 1, got {self.platform_count}")
        if self.obstacle_stride < 1 or self.power_up_stride < 1:
            raise ValueError("obstacle_stride and power_up_stride must be >= 1")
        if self.platform_gap <= 0:
            raise ValueError(f"platform_gap must be positive, got {self.platform_gap}")
        if not 0.0 < self.scroll_threshold < 1.0:
            raise ValueError(f"scroll_threshold must be in (0, 1), got {self.scroll_threshold}")

    @classmethod
    def sample(cls) -> "LayoutConfig":
        """Sample random layout config."""
        return cls(
            platform_gap=random.uniform(*cls.PLATFORM_GAP_RANGE),
            obstacle_speed=random.uniform(*cls.OBSTACLE_SPEED_RANGE),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform_count": self.platform_count,
            "platform_gap": self.platform_gap,
            "platform_width": self.platform_width,
            "platform_height": self.platform_height,
            "bottom_margin": self.bottom_margin,
            "obstacle_width": self.obstacle_width,
            "obstacle_height": self.obstacle_height,
            "obstacle_speed": self.obstacle_speed,
            "obstacle_stride": self.obstacle_stride,
            "power_up_size": self.power_up_size,
            "power_up_stride": self.power_up_stride,
            "scroll_speed": self.scroll_speed,
            "scroll_threshold": self.scroll_threshold,
            "recycle_platforms": self.recycle_platforms,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "LayoutConfig":
        defaults = cls()
        return cls(**{k: d.get(k, v) for k, v in defaults.to_dict().items()})


@dataclass
class GameConfig:
    """Complete game configuration combining all parameter groups."""
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    # Display settings
    screen_width: int = 800
    screen_height: int = 600
    fps: int = 60

    # Player body
    player_width: float = 50.0
    player_height: float = 50.0
    player_start_x: float = 50.0
    player_start_offset: float = 100.0  # Start y is screen_height minus this

    @property
    def player_start(self) -> Tuple[float, float]:
        return self.player_start_x, self.screen_height - self.player_start_offset

    @classmethod
    def sample_full(cls) -> "GameConfig":
        """Sample complete random configuration."""
        return cls(physics=PhysicsConfig.sample(), layout=LayoutConfig.sample())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary."""
        return {
            "physics": self.physics.to_dict(),
            "layout": self.layout.to_dict(),
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "fps": self.fps,
            "player_width": self.player_width,
            "player_height": self.player_height,
            "player_start_x": self.player_start_x,
            "player_start_offset": self.player_start_offset,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameConfig":
        return cls(
            physics=PhysicsConfig.from_dict(d.get("physics", {})),
            layout=LayoutConfig.from_dict(d.get("layout", {})),
            screen_width=d.get("screen_width", 800),
            screen_height=d.get("screen_height", 600),
            fps=d.get("fps", 60),
            player_width=d.get("player_width", 50.0),
            player_height=d.get("player_height", 50.0),
            player_start_x=d.get("player_start_x", 50.0),
            player_start_offset=d.get("player_start_offset", 100.0),
        )


def get_config(name: str) -> GameConfig:
    """Look up a preset by name."""
    if name not in CONFIGS:
        raise ValueError(f"Unknown config: {name} (choose from {', '.join(sorted(CONFIGS))})")
    return CONFIGS[name]


# Predefined configurations for play and testing
CONFIGS = {
    # Reference behavior: 10 platforms, bounded world, boost is cosmetic
    "default": GameConfig(),

    # Platforms that scroll off the bottom come back at the top
    "endless": GameConfig(layout=LayoutConfig(recycle_platforms=True)),

    # Speed boost actually doubles horizontal acceleration
    "boosted": GameConfig(physics=PhysicsConfig(apply_speed_boost=True)),

    # Low gravity, long jump hold
    "floaty": GameConfig(physics=PhysicsConfig(
        gravity=0.5,
        jump_strength=-10.0,
        jump_hold_ticks=30,
    )),

    # Heavy player, tight gaps, fast obstacles
    "tight": GameConfig(
        physics=PhysicsConfig(gravity=1.1, jump_strength=-13.0, friction=0.85),
        layout=LayoutConfig(platform_gap=120.0, obstacle_speed=3.5),
    ),
}
