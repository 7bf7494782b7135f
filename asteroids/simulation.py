import logging
import math
from enum import Enum, auto
from typing import Optional

import numpy as np

from .config import GameConfig, default_config
from .events import Event, EventType
from .factories import new_laser, new_ship
from .geometry import circles_overlap, point_in_circle, wrap_position
from .rules import destroy_asteroid, explode_ship, finish_explosion, new_game
from .state import GamePhase, SimulationState, TickResult
from .storage import ScoreStore

logger = logging.getLogger(__name__)


class Action(Enum):
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    THRUST = auto()
    FIRE = auto()


def _fade_text(state: SimulationState, config: GameConfig, rng: np.random.Generator,
               store: Optional[ScoreStore]) -> None:
    if state.text_alpha >= 0:
        state.text_alpha -= config.text_fade_step
    elif state.phase is GamePhase.GAME_OVER and config.auto_restart:
        # The only way out of game over besides an explicit new game
        new_game(state, config, rng, store)


def _apply_thrust(state: SimulationState, config: GameConfig) -> None:
    ship = state.ship
    if ship.thrusting and not ship.dead:
        ship.thrust.x += config.ship_thrust * math.cos(ship.a) / config.fps
        ship.thrust.y -= config.ship_thrust * math.sin(ship.a) / config.fps
        if not state.thrust_sounding:
            state.thrust_sounding = True
            state.pending_events.append(Event(EventType.THRUST_START))
    else:
        # Friction slows the ship down when not thrusting
        ship.thrust.x -= config.friction * ship.thrust.x / config.fps
        ship.thrust.y -= config.friction * ship.thrust.y / config.fps
        if state.thrust_sounding:
            state.thrust_sounding = False
            state.pending_events.append(Event(EventType.THRUST_STOP))


def _update_blink(state: SimulationState, config: GameConfig) -> None:
    ship = state.ship
    if ship.blink_num > 0:
        ship.blink_time -= 1
        if ship.blink_time == 0:
            ship.blink_time = config.frames(config.ship_blink_dur)
            ship.blink_num -= 1


def _update_explosion(state: SimulationState, config: GameConfig) -> None:
    state.ship.explode_time -= 1
    if state.ship.explode_time == 0:
        finish_explosion(state, config)


def _laser_hits(state: SimulationState, config: GameConfig, rng: np.random.Generator,
                store: Optional[ScoreStore]) -> None:
    lasers = state.ship.lasers
    # Back to front so removals and appended children never shift unvisited asteroids
    for i in range(len(state.asteroids) - 1, -1, -1):
        asteroid = state.asteroids[i]
        for j in range(len(lasers) - 1, -1, -1):
            laser = lasers[j]
            if laser.exploding:
                continue
            if point_in_circle(laser.pos, asteroid.pos, asteroid.r):
                laser.explode_time = config.frames(config.laser_explode_dur)
                logger.debug("Laser hit asteroid %d", i)
                if destroy_asteroid(state, i, config, rng, store):
                    return  # level cleared, the field was regenerated
                break


def _ship_collisions(state: SimulationState, config: GameConfig, rng: np.random.Generator,
                     store: Optional[ScoreStore]) -> None:
    ship = state.ship
    if ship.blink_num != 0 or ship.dead:
        return
    for i, asteroid in enumerate(state.asteroids):
        if circles_overlap(ship.pos, ship.r, asteroid.pos, asteroid.r):
            explode_ship(state, config)
            destroy_asteroid(state, i, config, rng, store)
            break


def _move_lasers(state: SimulationState, config: GameConfig) -> None:
    lasers = state.ship.lasers
    for i in range(len(lasers) - 1, -1, -1):
        laser = lasers[i]

        # Out of range
        if laser.dist > config.laser_range:
            del lasers[i]
            continue

        if laser.exploding:
            laser.explode_time -= 1
            if laser.explode_time == 0:
                del lasers[i]
                continue
        else:
            laser.pos += laser.velocity
            laser.dist += laser.speed

        wrap_position(laser.pos, state.width, state.height)


def _move_asteroids(state: SimulationState) -> None:
    for asteroid in state.asteroids:
        asteroid.pos += asteroid.velocity
        wrap_position(asteroid.pos, state.width, state.height, asteroid.r)


def step(
    state: SimulationState,
    config: GameConfig,
    rng: np.random.Generator,
    store: Optional[ScoreStore] = None,
) -> TickResult:
    """Advance the game by one fixed tick"""
    exploding = state.ship.exploding
    was_game_over = state.game_over

    _fade_text(state, config, rng, store)
    _apply_thrust(state, config)

    if not exploding:
        _update_blink(state, config)
    else:
        _update_explosion(state, config)

    _laser_hits(state, config, rng, store)

    if not exploding:
        _ship_collisions(state, config, rng, store)

        ship = state.ship
        ship.a += ship.rot
        ship.pos += ship.thrust

    wrap_position(state.ship.pos, state.width, state.height, state.ship.r)
    _move_lasers(state, config)
    _move_asteroids(state)

    events, state.pending_events = state.pending_events, []
    result = TickResult(
        tick=state.tick,
        events=events,
        score_delta=sum(e.points for e in events if e.event_type is EventType.ASTEROID_DESTROYED),
        game_over=state.game_over and not was_game_over,
    )
    state.tick += 1
    return result


def shoot_laser(state: SimulationState, config: GameConfig) -> bool:
    """Fire one laser if the trigger was released and the cap allows it"""
    ship = state.ship
    fired = False
    if ship.can_shoot and len(ship.lasers) < config.laser_max:
        ship.lasers.append(new_laser(ship, config))
        state.pending_events.append(Event(EventType.LASER_FIRED))
        fired = True
    ship.can_shoot = False
    return fired


class Simulation:
    """
    Owns the session state, the random source and the score store, and turns
    key edges into ship controls between ticks.
    """

    def __init__(
        self,
        config: GameConfig = default_config,
        rng: Optional[np.random.Generator] = None,
        store: Optional[ScoreStore] = None,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.store = store
        self.state = SimulationState(width=config.width, height=config.height, ship=new_ship(config))
        self.new_game()

    def new_game(self) -> None:
        new_game(self.state, self.config, self.rng, self.store)

    def step(self) -> TickResult:
        return step(self.state, self.config, self.rng, self.store)

    def key_down(self, action: Action) -> None:
        ship = self.state.ship
        if ship.dead:
            return

        if action is Action.FIRE:
            shoot_laser(self.state, self.config)
        elif action is Action.ROTATE_LEFT:
            ship.rot = self.config.turn_rate
        elif action is Action.ROTATE_RIGHT:
            ship.rot = -self.config.turn_rate
        elif action is Action.THRUST:
            ship.thrusting = True

    def key_up(self, action: Action) -> None:
        ship = self.state.ship
        if ship.dead:
            return

        if action is Action.FIRE:
            ship.can_shoot = True
        elif action in (Action.ROTATE_LEFT, Action.ROTATE_RIGHT):
            ship.rot = 0.0
        elif action is Action.THRUST:
            ship.thrusting = False
