import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygame

from .audio import Music, SoundEffects, synthesize_sounds
from .config import GameConfig
from .constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, MUSIC_ON, SOUND_ON
from .render import Renderer
from .simulation import Action, Simulation
from .storage import HIGH_SCORE_FILE, JsonScoreStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s][%(name)s][%(levelname)s] - %(message)s"


def seeded_generators(seed: Optional[int] = None) -> Tuple[np.random.Generator, np.random.Generator]:
    """Independent streams for the simulation and for sound synthesis"""
    sim_seq, audio_seq = np.random.SeedSequence(seed).spawn(2)
    return np.random.default_rng(sim_seq), np.random.default_rng(audio_seq)


KEY_BINDINGS: Dict[int, Action] = {
    pygame.K_LEFT: Action.ROTATE_LEFT,
    pygame.K_RIGHT: Action.ROTATE_RIGHT,
    pygame.K_UP: Action.THRUST,
    pygame.K_SPACE: Action.FIRE,
}


def dispatch_key_event(simulation: Simulation, event: pygame.event.Event) -> bool:
    """Forward a bound key press/release to the simulation"""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return False
    action = KEY_BINDINGS.get(event.key)
    if action is None:
        return False

    if event.type == pygame.KEYDOWN:
        simulation.key_down(action)
    else:
        simulation.key_up(action)
    return True


class Game:
    def __init__(
        self,
        config: GameConfig,
        seed: Optional[int] = None,
        scores_file: Path = HIGH_SCORE_FILE,
        sound_on: bool = SOUND_ON,
        music_on: bool = MUSIC_ON,
    ) -> None:
        pygame.init()
        self.config = config
        self.screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption("Asteroids")
        self.clock = pygame.time.Clock()

        rng, audio_rng = seeded_generators(seed)
        self.simulation = Simulation(config, rng, JsonScoreStore(scores_file))
        self.renderer = Renderer(config)

        sounds = {}
        try:
            pygame.mixer.init(44100, -16, 2, 1024)
            sounds = synthesize_sounds(audio_rng)
        except pygame.error as e:
            logger.warning("Audio unavailable, playing silently: %s", e)
            sound_on = music_on = False

        self.sound_effects = SoundEffects(sounds, enabled=sound_on)
        self.music = Music(sounds, enabled=music_on, fps=config.fps) if sounds else None

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    dispatch_key_event(self.simulation, event)

            if self.music is not None:
                self.music.set_asteroid_ratio(self.simulation.state.asteroid_ratio)
                self.music.tick()

            result = self.simulation.step()
            self.sound_effects.handle(result.events)

            self.renderer.draw(self.screen, self.simulation.state)
            pygame.display.flip()
            self.clock.tick(self.config.fps)

        self.sound_effects.stop_all_sounds()
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Asteroids arcade game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for asteroid generation")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Field width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Field height in pixels")
    parser.add_argument("--scores-file", type=Path, default=HIGH_SCORE_FILE,
                        help="JSON file holding the high score")
    parser.add_argument("--mute", action="store_true", help="Disable sound effects and music")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    config = GameConfig(width=args.width, height=args.height)
    game = Game(
        config,
        seed=args.seed,
        scores_file=args.scores_file,
        sound_on=SOUND_ON and not args.mute,
        music_on=MUSIC_ON and not args.mute,
    )
    game.run()


if __name__ == "__main__":
    main()
