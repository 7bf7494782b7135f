from dataclasses import dataclass, field
from enum import StrEnum
from typing import List

from pygame import Vector2


class AsteroidTier(StrEnum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


@dataclass
class Laser:
    pos: Vector2
    velocity: Vector2
    dist: float = 0.0  # cumulative distance travelled
    explode_time: int = 0  # 0 = flying, > 0 = exploding

    @property
    def exploding(self) -> bool:
        return self.explode_time > 0

    @property
    def speed(self) -> float:
        return self.velocity.length()


@dataclass
class Ship:
    pos: Vector2
    r: float
    a: float  # heading in radians, counter-clockwise from +x
    blink_num: int
    blink_time: int
    thrust: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    rot: float = 0.0  # radians per tick
    thrusting: bool = False
    can_shoot: bool = True
    dead: bool = False
    explode_time: int = 0
    lasers: List[Laser] = field(default_factory=list)

    @property
    def exploding(self) -> bool:
        return self.explode_time > 0

    @property
    def invulnerable(self) -> bool:
        return self.blink_num > 0

    @property
    def blink_on(self) -> bool:
        """Whether the ship is visible in the current blink cycle"""
        return self.blink_num % 2 == 0


@dataclass
class Asteroid:
    pos: Vector2
    velocity: Vector2
    r: float
    a: float  # heading offset of the first vertex
    offs: List[float]  # radius multiplier per vertex

    @property
    def vert(self) -> int:
        return len(self.offs)
