"""Tests for game engine."""

import os
import pytest

# Use dummy video driver for headless testing
os.environ['SDL_VIDEODRIVER'] = 'dummy'

import pygame

from scrolling_platformer.config import GameConfig
from scrolling_platformer.engine import PlatformerEngine
from scrolling_platformer.entities import Obstacle, Platform
from scrolling_platformer.world import WorldState


class TestPlatformerEngine:
    def test_initialization(self):
        engine = PlatformerEngine(GameConfig())
        assert engine.state is None  # No world until level loaded
        assert not engine.player_dead

    def test_load_level(self):
        engine = PlatformerEngine(GameConfig())
        state = engine.load_level(seed=42)

        assert isinstance(state, WorldState)
        assert len(state.platforms) == 10
        assert len(state.obstacles) == 5
        assert len(state.power_ups) == 4

    def test_load_level_is_reproducible(self):
        engine1 = PlatformerEngine(GameConfig())
        engine2 = PlatformerEngine(GameConfig())
        assert engine1.load_level(seed=123).platforms == engine2.load_level(seed=123).platforms

    def test_update_advances_tick(self):
        engine = PlatformerEngine(GameConfig())
        engine.load_level(seed=42)
        result = engine.update()
        assert result is not None
        assert engine.state.tick == 1

    def test_update_without_level_is_noop(self):
        engine = PlatformerEngine(GameConfig())
        assert engine.update() is None

    def test_death_stops_ticks(self):
        engine = PlatformerEngine(GameConfig())
        state = engine.load_level(seed=42)
        state.platforms = [Platform(x=50, y=500)]
        state.obstacles = [Obstacle(x=80, y=490)]
        state.power_ups = []
        state.player.x, state.player.y = 75, 450

        result = engine.update()
        assert result.died
        assert engine.player_dead

        assert engine.update() is None
        assert engine.state.tick == 1

    def test_key_events_feed_simulation(self):
        engine = PlatformerEngine(GameConfig())
        state = engine.load_level(seed=42)
        state.obstacles = []

        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        engine.handle_events()
        assert engine._keys_pressed[pygame.K_RIGHT]

        x0 = state.player.x
        engine.update()
        assert state.player.x > x0

        pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT))
        engine.handle_events()
        assert not engine._keys_pressed[pygame.K_RIGHT]

    def test_escape_stops_running(self):
        engine = PlatformerEngine(GameConfig())
        engine.running = True
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        engine.handle_events()
        assert not engine.running

    def test_reset_generates_new_world(self):
        engine = PlatformerEngine(GameConfig())
        engine.load_level(seed=42)
        engine.state.player.is_alive = False

        engine.reset()

        assert not engine.player_dead
        assert engine.state.tick == 0

    def test_render_after_death(self):
        engine = PlatformerEngine(GameConfig())
        engine.load_level(seed=42)
        engine.state.player.is_alive = False
        engine.render()  # Should draw the final frame without the player

    def test_get_state(self):
        engine = PlatformerEngine(GameConfig())
        engine.load_level(seed=42)
        state = engine.get_state()

        assert "player_dead" in state
        assert "player_position" in state
        assert "player_velocity" in state
        assert "scroll_offset" in state
        assert state["platforms"] == 10
