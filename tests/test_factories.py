"""
Tests for entity construction.
"""

import math
from dataclasses import replace

import numpy as np
import pytest

from asteroids.config import GameConfig
from asteroids.constants import frames
from asteroids.factories import new_asteroid, new_laser, new_ship, spawn_position
from asteroids.simulation import Simulation


class TestFrames:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0.1, 3), (0.3, 9), (2.5, 75), (3, 90), (0.01, 1)],
    )
    def test_frames_at_30_fps(self, seconds, expected):
        assert frames(seconds, 30) == expected


class TestConfigValidation:
    def test_default_config_is_valid(self, config):
        assert config.ship_radius == 15
        assert config.medium_radius == 50
        assert config.blink_cycles == 30
        assert config.laser_range == pytest.approx(480)

    def test_zero_lives_rejected(self):
        with pytest.raises(AssertionError, match="lives"):
            GameConfig(game_lives=0)

    def test_negative_asteroid_size_rejected(self, config):
        with pytest.raises(AssertionError, match="Asteroid size"):
            replace(config, roid_size=-1)

    def test_unsplittable_asteroid_size_rejected(self, config):
        with pytest.raises(AssertionError, match="too small to split"):
            replace(config, roid_size=2)

    def test_field_without_safe_spawn_rejected(self):
        # Farthest corner of a 300x300 field is 212 from centre, the spawn clearance is 215
        with pytest.raises(AssertionError, match="Field too small"):
            GameConfig(width=300, height=300)

    def test_small_field_with_safe_spawn_starts(self, rng, store):
        config = GameConfig(width=400, height=300)
        sim = Simulation(config, rng, store)
        assert len(sim.state.asteroids) == config.roid_num


class TestNewShip:
    def test_ship_starts_centred_and_invulnerable(self, config):
        ship = new_ship(config)
        assert ship.pos.x == config.width / 2
        assert ship.pos.y == config.height / 2
        assert ship.a == pytest.approx(math.pi / 2)
        assert ship.r == 15
        assert ship.thrust.length() == 0
        assert ship.blink_num == 30
        assert ship.blink_time == 3
        assert ship.invulnerable
        assert not ship.exploding
        assert not ship.dead
        assert ship.lasers == []

    def test_ships_do_not_share_vectors(self, config):
        a = new_ship(config)
        b = new_ship(config)
        a.thrust.x = 5
        assert b.thrust.x == 0


class TestNewAsteroid:
    def test_attributes_within_bounds(self, config, rng):
        level = 5
        max_speed = config.roid_spd * (1 + 0.1 * level) / config.fps
        for _ in range(200):
            roid = new_asteroid(10, 20, 50, level, config, rng)
            assert roid.pos.x == 10 and roid.pos.y == 20
            assert roid.r == 50
            assert abs(roid.velocity.x) <= max_speed
            assert abs(roid.velocity.y) <= max_speed
            assert 0 <= roid.a < 2 * math.pi
            assert 5 <= roid.vert <= 15
            assert all(1 - config.roid_jag <= o <= 1 + config.roid_jag for o in roid.offs)

    def test_velocity_sign_is_random(self, config, rng):
        signs = {np.sign(new_asteroid(0, 0, 50, 0, config, rng).velocity.x) for _ in range(50)}
        assert signs == {-1.0, 1.0}

    def test_same_seed_same_shape(self, config):
        a = new_asteroid(0, 0, 100, 0, config, np.random.default_rng(7))
        b = new_asteroid(0, 0, 100, 0, config, np.random.default_rng(7))
        assert a == b

    def test_non_positive_radius_rejected(self, config, rng):
        with pytest.raises(AssertionError):
            new_asteroid(0, 0, 0, 0, config, rng)


class TestSpawnPosition:
    def test_never_near_the_ship(self, config, rng):
        ship = new_ship(config)
        safe_dist = config.roid_size * 2 + ship.r
        for _ in range(200):
            pos = spawn_position(ship, config, rng)
            assert pos.distance_to(ship.pos) >= safe_dist
            assert 0 <= pos.x < config.width
            assert 0 <= pos.y < config.height


class TestNewLaser:
    def test_laser_leaves_the_nose(self, config):
        ship = new_ship(config)
        laser = new_laser(ship, config)
        assert laser.pos.x == pytest.approx(ship.pos.x)
        assert laser.pos.y == pytest.approx(ship.pos.y - 20)
        assert laser.velocity.y == pytest.approx(-config.laser_spd / config.fps)
        assert laser.dist == 0
        assert not laser.exploding
