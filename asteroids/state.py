"""
Session state of one game.

Everything the simulation mutates lives on a single SimulationState so the tick
driver can pass it around explicitly and renderers can read it directly.
"""

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import List

from .entities import Asteroid, Ship
from .events import Event


class GamePhase(StrEnum):
    PLAYING = auto()
    SHIP_EXPLODING = auto()
    GAME_OVER = auto()


@dataclass
class SimulationState:
    """
    Attributes:
        width, height: Size of the wraparound field in pixels.
        ship: The player's ship (kept, marked dead, after game over).
        asteroids: Every asteroid currently in the field.
        level: Zero-based level number; shown to the player as level + 1.
        roids_left, roids_total: Asteroids (including future children) left
            to destroy in this level and the level's total.
        text, text_alpha: Centre-screen message and its fading opacity.
        pending_events: Events raised between ticks (input), flushed by the
            next tick.
    """

    width: int
    height: int
    ship: Ship
    asteroids: List[Asteroid] = field(default_factory=list)
    score: int = 0
    score_high: int = 0
    lives: int = 0
    level: int = 0
    roids_left: int = 0
    roids_total: int = 0
    text: str = ""
    text_alpha: float = 0.0
    phase: GamePhase = GamePhase.PLAYING
    tick: int = 0
    thrust_sounding: bool = False
    pending_events: List[Event] = field(default_factory=list)

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    @property
    def asteroid_ratio(self) -> float:
        if self.roids_total == 0:
            return 1.0
        return self.roids_left / self.roids_total


@dataclass
class TickResult:
    tick: int
    events: List[Event]
    score_delta: int = 0
    game_over: bool = False  # game over was reached during this tick
