import math
from dataclasses import dataclass

from . import constants as c


@dataclass(frozen=True)
class GameConfig:
    # Field
    width: int = c.DEFAULT_WIDTH
    height: int = c.DEFAULT_HEIGHT
    fps: int = c.FPS

    # Game
    friction: float = c.FRICTION
    game_lives: int = c.GAME_LIVES
    text_fade_time: float = c.TEXT_FADE_TIME
    auto_restart: bool = True  # start a new game once the game-over text fades

    # Lasers
    laser_dist: float = c.LASER_DIST
    laser_explode_dur: float = c.LASER_EXPLODE_DUR
    laser_max: int = c.LASER_MAX
    laser_spd: float = c.LASER_SPD

    # Asteroids
    roid_jag: float = c.ROID_JAG
    roid_pts_lge: int = c.ROID_PTS_LGE
    roid_pts_med: int = c.ROID_PTS_MED
    roid_pts_sml: int = c.ROID_PTS_SML
    roid_num: int = c.ROID_NUM
    roid_size: int = c.ROID_SIZE
    roid_spd: float = c.ROID_SPD
    roid_vert: int = c.ROID_VERT

    # Ship
    ship_blink_dur: float = c.SHIP_BLINK_DUR
    ship_explode_dur: float = c.SHIP_EXPLODE_DUR
    ship_inv_dur: float = c.SHIP_INV_DUR
    ship_size: float = c.SHIP_SIZE
    ship_thrust: float = c.SHIP_THRUST
    ship_turn_spd: float = c.SHIP_TURN_SPD

    def __post_init__(self) -> None:
        assert self.width > 0 and self.height > 0, "Field size must be positive"
        assert self.fps > 0, "fps must be positive"
        assert self.game_lives > 0, "Starting lives must be positive"
        assert 0 <= self.friction <= self.fps, "Friction out of range"
        assert self.laser_max > 0, "Laser cap must be positive"
        assert self.laser_dist > 0, "Laser range must be positive"
        assert 0 <= self.roid_jag < 1, "Jaggedness must be in [0, 1)"
        assert self.roid_size > 0, "Asteroid size must be positive"
        assert self.roid_size >= 4, "Asteroid size too small to split down to the small tier"
        assert self.roid_num >= 0, "Asteroid count cannot be negative"
        assert self.roid_vert >= 3, "Asteroids need at least 3 vertices"
        assert self.ship_size > 0, "Ship size must be positive"
        assert self.ship_blink_dur > 0, "Blink duration must be positive"
        assert self.ship_explode_dur > 0, "Explosion duration must be positive"
        assert self.laser_explode_dur > 0, "Laser explosion duration must be positive"
        assert self.text_fade_time > 0, "Text fade time must be positive"
        # Belt asteroids spawn at least this far from the ship; some corner must qualify
        safe_dist = self.roid_size * 2 + self.ship_radius
        assert math.hypot(self.width, self.height) / 2 > safe_dist, "Field too small for a safe asteroid spawn"

    def frames(self, seconds: float) -> int:
        return c.frames(seconds, self.fps)

    @property
    def ship_radius(self) -> float:
        return self.ship_size / 2

    @property
    def medium_radius(self) -> int:
        return math.ceil(self.roid_size / 2)

    @property
    def turn_rate(self) -> float:
        """Ship rotation per tick in radians"""
        return self.ship_turn_spd / 180 * math.pi / self.fps

    @property
    def blink_cycles(self) -> int:
        return math.ceil(round(self.ship_inv_dur / self.ship_blink_dur, 9))

    @property
    def laser_range(self) -> float:
        return self.laser_dist * self.width

    @property
    def text_fade_step(self) -> float:
        return 1.0 / self.text_fade_time / self.fps


default_config = GameConfig()
