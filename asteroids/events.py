from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Optional


class EventType(StrEnum):
    THRUST_START = auto()
    THRUST_STOP = auto()
    LASER_FIRED = auto()
    ASTEROID_DESTROYED = auto()
    SHIP_EXPLODED = auto()
    SHIP_RESPAWNED = auto()
    LEVEL_STARTED = auto()
    NEW_GAME = auto()
    GAME_OVER = auto()


@dataclass
class Event:
    event_type: EventType
    tier: Optional[str] = None  # asteroid size class for ASTEROID_DESTROYED
    points: int = 0
    level: Optional[int] = None
