import math

# Field
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
FPS = 30  # ticks per second

# Game
FRICTION = 0.7  # friction coefficient of space (0 = none, 1 = lots)
GAME_LIVES = 3
SAVE_KEY_SCORE = "Highscore"  # key of the persisted high score
TEXT_FADE_TIME = 2.5  # seconds
TEXT_SIZE = 40  # font height in pixels

# Lasers
LASER_DIST = 0.6  # max travel as a fraction of the field width
LASER_EXPLODE_DUR = 0.1  # seconds
LASER_MAX = 10  # max lasers on screen at once
LASER_SPD = 500  # pixels per second

# Asteroids
ROID_JAG = 0.4  # jaggedness (0 = none, 1 = lots)
ROID_PTS_LGE = 20
ROID_PTS_MED = 50
ROID_PTS_SML = 100
ROID_NUM = 3  # starting number of asteroids
ROID_SIZE = 100  # radius of a large asteroid in pixels
ROID_SPD = 50  # max starting speed in pixels per second
ROID_VERT = 10  # average number of vertices

# Ship
SHIP_BLINK_DUR = 0.1  # seconds per blink while invulnerable
SHIP_EXPLODE_DUR = 0.3  # seconds
SHIP_INV_DUR = 3  # seconds of invulnerability after spawning
SHIP_SIZE = 30  # ship height in pixels
SHIP_THRUST = 5  # pixels per second per second
SHIP_TURN_SPD = 360  # degrees per second

# Presentation
SHOW_BOUNDING = False
SHOW_CENTRE_DOT = False
MUSIC_ON = True
SOUND_ON = True


def frames(seconds: float, fps: int = FPS) -> int:
    """Number of whole ticks needed to cover a duration"""
    # Round away float noise first (0.1 * 30 would otherwise give 4 ticks)
    return math.ceil(round(seconds * fps, 9))
