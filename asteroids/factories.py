import math

import numpy as np
from pygame import Vector2

from .config import GameConfig
from .entities import Asteroid, Laser, Ship
from .geometry import dist_between_points


def new_ship(config: GameConfig) -> Ship:
    """Create a ship in the centre of the field, pointing up and invulnerable"""
    return Ship(
        pos=Vector2(config.width / 2, config.height / 2),
        r=config.ship_radius,
        a=90 / 180 * math.pi,
        blink_num=config.blink_cycles,
        blink_time=config.frames(config.ship_blink_dur),
    )


def new_asteroid(
    x: float, y: float, r: float, level: int, config: GameConfig, rng: np.random.Generator
) -> Asteroid:
    assert r > 0, "Asteroid radius must be positive"

    # Asteroids get faster each level
    lvl_mult = 1 + 0.1 * level
    xv = rng.random() * config.roid_spd * lvl_mult / config.fps * (1 if rng.random() < 0.5 else -1)
    yv = rng.random() * config.roid_spd * lvl_mult / config.fps * (1 if rng.random() < 0.5 else -1)
    a = rng.random() * math.pi * 2
    vert = math.floor(rng.random() * (config.roid_vert + 1) + config.roid_vert / 2)

    # Vary the radius of each vertex to make it jagged
    offs = [rng.random() * config.roid_jag * 2 + 1 - config.roid_jag for _ in range(vert)]

    return Asteroid(pos=Vector2(x, y), velocity=Vector2(xv, yv), r=r, a=a, offs=offs)


def spawn_position(ship: Ship, config: GameConfig, rng: np.random.Generator) -> Vector2:
    """Random point in the field, far enough from the ship to be safe"""
    safe_dist = config.roid_size * 2 + ship.r
    while True:
        x = math.floor(rng.random() * config.width)
        y = math.floor(rng.random() * config.height)
        if dist_between_points(ship.pos.x, ship.pos.y, x, y) >= safe_dist:
            return Vector2(x, y)


def new_laser(ship: Ship, config: GameConfig) -> Laser:
    """Laser leaving the ship's nose along its heading"""
    cos_a = math.cos(ship.a)
    sin_a = math.sin(ship.a)
    return Laser(
        pos=Vector2(ship.pos.x + 4 / 3 * ship.r * cos_a, ship.pos.y - 4 / 3 * ship.r * sin_a),
        velocity=Vector2(config.laser_spd * cos_a / config.fps, -config.laser_spd * sin_a / config.fps),
    )
