import math
from typing import Optional, Tuple

import pygame
from pygame import Surface, Vector2

from .config import GameConfig
from .constants import SHOW_BOUNDING, SHOW_CENTRE_DOT, TEXT_SIZE
from .entities import Asteroid, Laser, Ship
from .geometry import polygon_points, ship_points
from .state import SimulationState

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
SLATE_GREY = (112, 128, 144)
ASTEROID_FILL = (255, 255, 255, 26)
LIME = (0, 255, 0)
SALMON = (250, 128, 114)
ORANGE_RED = (255, 69, 0)
PINK = (255, 192, 203)
YELLOW = (255, 255, 0)

# Ship explosion rings, outermost first
EXPLOSION_RINGS = (
    ((139, 0, 0), 1.7),
    (RED, 1.4),
    ((255, 165, 0), 1.1),
    (YELLOW, 0.8),
    (WHITE, 0.5),
)


def _centre(pos: Vector2) -> Tuple[int, int]:
    return int(pos.x), int(pos.y)


def draw_ship(surface: Surface, pos: Vector2, angle: float, radius: float,
              colour=WHITE, fill: Optional[Tuple[int, int, int]] = None) -> None:
    points = ship_points(pos, radius, angle)
    if fill is not None:
        pygame.draw.polygon(surface, fill, points)
    pygame.draw.polygon(surface, colour, points, max(1, int(radius / 10)))


def draw_thruster(surface: Surface, ship: Ship) -> None:
    cos_a = math.cos(ship.a)
    sin_a = math.sin(ship.a)
    points = [
        # rear left
        (ship.pos.x - ship.r * (2 / 3 * cos_a + 0.5 * sin_a),
         ship.pos.y + ship.r * (2 / 3 * sin_a - 0.5 * cos_a)),
        # rear centre, behind the ship
        (ship.pos.x - ship.r * 5 / 3 * cos_a,
         ship.pos.y + ship.r * 5 / 3 * sin_a),
        # rear right
        (ship.pos.x - ship.r * (2 / 3 * cos_a - 0.5 * sin_a),
         ship.pos.y + ship.r * (2 / 3 * sin_a + 0.5 * cos_a)),
    ]
    pygame.draw.polygon(surface, RED, points)
    pygame.draw.polygon(surface, YELLOW, points, max(1, int(ship.r / 7)))


def draw_ship_explosion(surface: Surface, ship: Ship) -> None:
    for colour, scale in EXPLOSION_RINGS:
        pygame.draw.circle(surface, colour, _centre(ship.pos), int(ship.r * scale))


def draw_asteroid(surface: Surface, overlay: Surface, asteroid: Asteroid, line_width: int) -> None:
    points = polygon_points(asteroid.pos, asteroid.r, asteroid.a, asteroid.offs)
    pygame.draw.polygon(overlay, ASTEROID_FILL, points)
    pygame.draw.polygon(surface, SLATE_GREY, points, line_width)


def draw_laser(surface: Surface, laser: Laser, ship_r: float, laser_r: float) -> None:
    if not laser.exploding:
        pygame.draw.circle(surface, SALMON, _centre(laser.pos), max(1, int(laser_r)))
        return
    pygame.draw.circle(surface, ORANGE_RED, _centre(laser.pos), int(ship_r * 0.75))
    pygame.draw.circle(surface, SALMON, _centre(laser.pos), int(ship_r * 0.5))
    pygame.draw.circle(surface, PINK, _centre(laser.pos), int(ship_r * 0.25))


class Renderer:
    """Draws a SimulationState onto a pygame surface"""

    def __init__(self, config: GameConfig, show_bounding: bool = SHOW_BOUNDING,
                 show_centre_dot: bool = SHOW_CENTRE_DOT) -> None:
        self.config = config
        self.show_bounding = show_bounding
        self.show_centre_dot = show_centre_dot
        self.font = pygame.font.SysFont('dejavusansmono', TEXT_SIZE)
        self.small_font = pygame.font.SysFont('dejavusansmono', int(TEXT_SIZE * 0.75))

    def draw(self, surface: Surface, state: SimulationState) -> None:
        surface.fill(BLACK)
        self.draw_asteroids(surface, state)
        self.draw_player(surface, state)
        for laser in state.ship.lasers:
            draw_laser(surface, laser, state.ship.r, self.config.ship_size / 15)
        self.draw_ui(surface, state)

    def draw_asteroids(self, surface: Surface, state: SimulationState) -> None:
        overlay = Surface(surface.get_size(), pygame.SRCALPHA)
        line_width = max(1, int(self.config.ship_size / 20))
        for asteroid in state.asteroids:
            draw_asteroid(surface, overlay, asteroid, line_width)
            if self.show_bounding:
                pygame.draw.circle(surface, LIME, _centre(asteroid.pos), int(asteroid.r), 1)
        surface.blit(overlay, (0, 0))

    def draw_player(self, surface: Surface, state: SimulationState) -> None:
        ship = state.ship
        if ship.exploding:
            draw_ship_explosion(surface, ship)
        elif ship.blink_on and not ship.dead:
            if ship.thrusting:
                draw_thruster(surface, ship)
            draw_ship(surface, ship.pos, ship.a, ship.r)

        if self.show_bounding:
            pygame.draw.circle(surface, LIME, _centre(ship.pos), int(ship.r), 1)
        if self.show_centre_dot:
            pygame.draw.rect(surface, RED, (ship.pos.x - 1, ship.pos.y - 1, 2, 2))

    def draw_ui(self, surface: Surface, state: SimulationState) -> None:
        width = surface.get_width()
        size = self.config.ship_size

        # Fading message in the lower middle
        if state.text_alpha >= 0 and state.text:
            text = self.font.render(state.text, True, WHITE)
            text.set_alpha(int(255 * min(1.0, state.text_alpha)))
            surface.blit(text, text.get_rect(center=(width / 2, surface.get_height() * 0.75)))

        # Lives, the one being lost in red
        for i in range(state.lives):
            colour = RED if state.ship.exploding and i == state.lives - 1 else WHITE
            draw_ship(surface, Vector2(size + i * size * 1.2, size), 0.5 * math.pi,
                      size / 2, colour, BLACK)

        score_text = self.font.render(str(state.score), True, WHITE)
        surface.blit(score_text, score_text.get_rect(midright=(width - size / 2 - 1, size)))

        high_text = self.small_font.render(f"HIGH-SCORE: {state.score_high}", True, WHITE)
        surface.blit(high_text, high_text.get_rect(center=(width / 2, size)))
