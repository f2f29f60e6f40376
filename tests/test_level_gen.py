"""Tests for level generation."""

import pytest

from scrolling_platformer.config import GameConfig, LayoutConfig
from scrolling_platformer.entities import PowerUpType
from scrolling_platformer.level_gen import LevelGenerator, build_world
from scrolling_platformer.world import WorldState


class TestGeneratePlatforms:
    def test_ten_platforms_five_obstacles(self, empty_world):
        gen = LevelGenerator(seed=42)
        gen.generate_platforms(empty_world)
        assert len(empty_world.platforms) == 10
        assert len(empty_world.obstacles) == 5

    def test_fixed_vertical_gap_from_bottom(self, empty_world):
        LevelGenerator(seed=1).generate_platforms(empty_world)
        ys = [p.y for p in empty_world.platforms]
        assert ys == [600 - i * 150 - 20 for i in range(10)]

    def test_platforms_fit_world_width(self, empty_world):
        LevelGenerator(seed=3).generate_platforms(empty_world)
        for p in empty_world.platforms:
            assert 0 <= p.x <= empty_world.width - p.width
            assert (p.width, p.height) == (100, 20)

    def test_obstacles_on_even_platforms(self, empty_world):
        LevelGenerator(seed=42).generate_platforms(empty_world)
        carriers = empty_world.platforms[0::2]
        assert len(carriers) == len(empty_world.obstacles)
        for platform, obstacle in zip(carriers, empty_world.obstacles):
            assert obstacle.y == platform.y - obstacle.height
            assert platform.x <= obstacle.x < platform.x + platform.width
            assert obstacle.direction in (-1, 1)
            assert (obstacle.width, obstacle.height) == (50, 20)

    def test_both_directions_occur(self):
        directions = set()
        for seed in range(20):
            state = build_world(GameConfig(), seed=seed)
            directions.update(o.direction for o in state.obstacles)
        assert directions == {-1, 1}


class TestGeneratePowerUps:
    def test_power_ups_on_every_third_platform(self, world):
        assert len(world.power_ups) == 4
        for index, power_up in zip((0, 3, 6, 9), world.power_ups):
            platform = world.platforms[index]
            assert power_up.x == platform.x + platform.width / 2 - power_up.size / 2
            assert power_up.y == platform.y - power_up.size

    def test_types(self):
        kinds = set()
        for seed in range(20):
            kinds.update(p.kind for p in build_world(GameConfig(), seed=seed).power_ups)
        assert kinds == {PowerUpType.DOUBLE_JUMP, PowerUpType.SPEED_BOOST}


class TestReproducibility:
    def test_same_seed_same_level(self):
        a = build_world(GameConfig(), seed=123)
        b = build_world(GameConfig(), seed=123)
        assert a.platforms == b.platforms
        assert a.obstacles == b.obstacles
        assert a.power_ups == b.power_ups

    def test_different_seeds_different_levels(self):
        a = build_world(GameConfig(), seed=1)
        b = build_world(GameConfig(), seed=2)
        assert a.platforms != b.platforms


class TestLayoutValidation:
    def test_invalid_platform_count(self):
        with pytest.raises(ValueError):
            LevelGenerator(LayoutConfig(platform_count=0))

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            LevelGenerator(LayoutConfig(scroll_threshold=1.5))


class TestRecycling:
    def test_platform_below_world_moves_to_top(self, world):
        gen = LevelGenerator(seed=5)
        world.platforms[0].y = world.height + 10
        top_before = min(p.y for p in world.platforms)

        moved = gen.recycle_platforms(world)

        assert moved == 1
        assert len(world.platforms) == 10
        assert world.platforms[0].y == top_before - gen.layout.platform_gap
        assert 0 <= world.platforms[0].x <= world.width - world.platforms[0].width

    def test_nothing_to_recycle(self, world):
        before = [(p.x, p.y) for p in world.platforms]
        assert LevelGenerator(seed=5).recycle_platforms(world) == 0
        assert [(p.x, p.y) for p in world.platforms] == before
