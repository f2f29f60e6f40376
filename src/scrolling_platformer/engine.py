"""Desktop game engine: pygame window, event pump and frame loop.

Coordinates the simulation, keyboard input and rendering into a playable
game. One loop iteration is one tick; the frame rate is only a cap, there
is no fixed timestep.
"""

import pygame
from typing import Optional, Dict, Any, Tuple

from .config import GameConfig
from .input import KeyState
from .level_gen import LevelGenerator
from .renderer import Renderer, COLOR_OBSTACLE, COLOR_TEXT, COLOR_SPEED_BOOST
from .simulation import Simulation, StepResult
from .world import WorldState


class PlatformerEngine:
    """Main game engine coordinating all systems.

    Handles:
    - Frame loop capped at config.fps
    - Pygame rendering
    - Keyboard input (arrows to move, space to jump, R to restart, Esc to quit)
    - Level generation and restart
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """Initialize game engine.

        Args:
            config: Game configuration. Uses defaults if None.
        """
        self.config = config or GameConfig()

        # Initialize pygame
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.screen_width, self.config.screen_height)
        )
        pygame.display.set_caption("Scrolling Platformer")
        self.clock = pygame.time.Clock()

        self.renderer = Renderer(self.screen)
        self.simulation: Optional[Simulation] = None

        # Game state
        self.state: Optional[WorldState] = None
        self.running = False
        self.last_result: Optional[StepResult] = None

        # Input state
        self._keys_pressed: Dict[int, bool] = {}
        self.key_state = KeyState()

        self._seed: Optional[int] = None

    @property
    def player_dead(self) -> bool:
        return self.state is not None and not self.state.player.is_alive

    def load_level(self, seed: Optional[int] = None) -> WorldState:
        """Generate a fresh world and reset input tracking.

        Args:
            seed: Random seed for reproducible generation.

        Returns:
            The new WorldState.
        """
        generator = LevelGenerator.from_config(self.config, seed=seed)
        self.state = WorldState.from_config(self.config)
        generator.populate(self.state)
        self.simulation = Simulation(self.config, generator=generator)

        self._keys_pressed = {}
        self.key_state.reset()
        self.last_result = None
        self._seed = seed

        print(f"NEW LEVEL: {len(self.state.platforms)} platforms | "
              f"{len(self.state.obstacles)} obstacles | {len(self.state.power_ups)} power-ups")
        return self.state

    def reset(self) -> None:
        """Restart with a newly generated level."""
        self.load_level(seed=None)

    def handle_events(self) -> None:
        """Process pygame events into the key-state map."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._keys_pressed[event.key] = True
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.reset()
            elif event.type == pygame.KEYUP:
                self._keys_pressed[event.key] = False

    def update(self) -> Optional[StepResult]:
        """Run one tick if the player is alive.

        Returns:
            The tick's StepResult, or None if no tick was run.
        """
        if self.state is None or self.player_dead:
            return None

        snapshot = self.key_state.capture(self._keys_pressed)
        result = self.simulation.step(self.state, snapshot)
        self.last_result = result

        if result.died:
            print(f"Game Over (climbed {self.state.scroll_offset:.0f}px in {self.state.tick} ticks)")
        return result

    def render(self) -> None:
        """Render current game state."""
        if self.state is None:
            self.renderer.clear()
            pygame.display.flip()
            return

        self.renderer.draw(self.state)

        # Height climbed and active power-ups (top right)
        font = pygame.font.Font(None, 28)
        boosts = []
        if self.state.player.speed_boost:
            boosts.append("speed")
        if self.state.player.jump_strength != self.config.physics.jump_strength:
            boosts.append("jump")
        hud_text = f"Height: {self.state.scroll_offset:.0f}  |  Boosts: {', '.join(boosts) or '-'}"
        hud_surface = font.render(hud_text, True, COLOR_SPEED_BOOST)
        hud_rect = hud_surface.get_rect(topright=(self.config.screen_width - 10, 10))
        self.screen.blit(hud_surface, hud_rect)

        # Debug info
        player = self.state.player
        debug_text = (f"Vel: ({player.dx:.1f}, {player.dy:.1f}) | Jumps: {self.state.jump_count} "
                      f"| Wall: {'Yes' if self.state.wall_sliding else 'No'}")
        debug_font = pygame.font.Font(None, 24)
        self.screen.blit(debug_font.render(debug_text, True, COLOR_TEXT), (10, 10))

        if self.player_dead:
            self._draw_text("GAME OVER! Press R to restart", COLOR_OBSTACLE)

        pygame.display.flip()

    def _draw_text(self, text: str, color: Tuple[int, int, int]) -> None:
        """Draw centered text on screen."""
        font = pygame.font.Font(None, 48)
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(
            center=(self.config.screen_width // 2, self.config.screen_height // 2)
        )
        self.screen.blit(text_surface, text_rect)

    def run(self) -> None:
        """Main game loop.

        Ticks stop once the player dies; the window stays open on the
        final frame until the player restarts or quits.
        """
        if self.state is None:
            self.load_level(self._seed)

        self.running = True
        while self.running:
            self.handle_events()
            self.update()
            self.render()
            self.clock.tick(self.config.fps)

        pygame.quit()

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for observation/logging."""
        if self.state is None:
            return {"player_dead": False}
        state = self.state.get_state()
        state["player_dead"] = self.player_dead
        return state
