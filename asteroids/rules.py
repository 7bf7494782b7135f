import logging
import math
from typing import Optional

import numpy as np

from .config import GameConfig
from .constants import SAVE_KEY_SCORE
from .entities import AsteroidTier
from .events import Event, EventType
from .factories import new_asteroid, new_ship, spawn_position
from .state import GamePhase, SimulationState
from .storage import ScoreStore

logger = logging.getLogger(__name__)

# Asteroids destroyed per large one: itself, two medium, four small
ROIDS_PER_LARGE = 7


def tier_for(radius: float, config: GameConfig) -> AsteroidTier:
    if radius >= config.roid_size:
        return AsteroidTier.LARGE
    if radius >= config.medium_radius:
        return AsteroidTier.MEDIUM
    return AsteroidTier.SMALL


def points_for(tier: AsteroidTier, config: GameConfig) -> int:
    if tier is AsteroidTier.LARGE:
        return config.roid_pts_lge
    if tier is AsteroidTier.MEDIUM:
        return config.roid_pts_med
    return config.roid_pts_sml


def create_asteroid_belt(state: SimulationState, config: GameConfig, rng: np.random.Generator) -> None:
    count = config.roid_num + state.level
    state.asteroids = []
    state.roids_total = count * ROIDS_PER_LARGE
    state.roids_left = state.roids_total
    for _ in range(count):
        pos = spawn_position(state.ship, config, rng)
        state.asteroids.append(new_asteroid(pos.x, pos.y, config.roid_size, state.level, config, rng))


def new_level(state: SimulationState, config: GameConfig, rng: np.random.Generator) -> None:
    state.text = f"Level {state.level + 1}"
    state.text_alpha = 1.0
    create_asteroid_belt(state, config, rng)
    state.pending_events.append(Event(EventType.LEVEL_STARTED, level=state.level))
    logger.info("Level %d started with %d asteroids", state.level + 1, len(state.asteroids))


def new_game(
    state: SimulationState,
    config: GameConfig,
    rng: np.random.Generator,
    store: Optional[ScoreStore] = None,
) -> None:
    """Reset score, lives, level and the asteroid field"""
    state.level = 0
    state.lives = config.game_lives
    state.score = 0
    state.ship = new_ship(config)
    state.phase = GamePhase.PLAYING

    if store is not None:
        stored = store.get(SAVE_KEY_SCORE)
        state.score_high = stored if stored is not None else 0

    state.pending_events.append(Event(EventType.NEW_GAME))
    logger.info("New game (high score %d)", state.score_high)
    new_level(state, config, rng)


def update_high_score(state: SimulationState, store: Optional[ScoreStore] = None) -> None:
    if state.score <= state.score_high:
        return
    state.score_high = state.score
    if store is not None:
        store.set(SAVE_KEY_SCORE, state.score_high)


def destroy_asteroid(
    state: SimulationState,
    index: int,
    config: GameConfig,
    rng: np.random.Generator,
    store: Optional[ScoreStore] = None,
) -> bool:
    """
    Remove the asteroid at index, score it and split it into two children
    when it is large or medium.

    Returns True when this cleared the level and a new field was generated.
    """
    asteroid = state.asteroids.pop(index)
    tier = tier_for(asteroid.r, config)
    points = points_for(tier, config)

    if tier is not AsteroidTier.SMALL:
        child_r = math.ceil(asteroid.r / 2)
        for _ in range(2):
            state.asteroids.append(
                new_asteroid(asteroid.pos.x, asteroid.pos.y, child_r, state.level, config, rng)
            )

    state.score += points
    update_high_score(state, store)
    state.pending_events.append(Event(EventType.ASTEROID_DESTROYED, tier=str(tier), points=points))
    logger.debug("Destroyed %s asteroid at (%.1f, %.1f)", tier, asteroid.pos.x, asteroid.pos.y)

    state.roids_left -= 1
    if state.roids_left <= 0:
        state.level += 1
        new_level(state, config, rng)
        return True
    return False


def explode_ship(state: SimulationState, config: GameConfig) -> None:
    state.ship.explode_time = config.frames(config.ship_explode_dur)
    state.phase = GamePhase.SHIP_EXPLODING
    state.pending_events.append(Event(EventType.SHIP_EXPLODED))
    logger.info("Ship destroyed with %d lives remaining", state.lives - 1)


def game_over(state: SimulationState) -> None:
    state.ship.dead = True
    state.ship.thrusting = False
    state.ship.rot = 0.0
    state.text = "Game Over"
    state.text_alpha = 1.0
    state.phase = GamePhase.GAME_OVER
    state.pending_events.append(Event(EventType.GAME_OVER, level=state.level))
    logger.info("Game over at level %d with score %d", state.level + 1, state.score)


def finish_explosion(state: SimulationState, config: GameConfig) -> None:
    """Lose a life once the ship's explosion has played out"""
    state.lives -= 1
    if state.lives == 0:
        game_over(state)
    else:
        state.ship = new_ship(config)
        state.phase = GamePhase.PLAYING
        state.pending_events.append(Event(EventType.SHIP_RESPAWNED))
