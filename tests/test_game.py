import pygame
import pytest

from asteroids.game import KEY_BINDINGS, dispatch_key_event, parse_args, seeded_generators
from asteroids.simulation import Action


class TestKeyDispatch:
    def test_bindings_cover_every_action(self):
        assert set(KEY_BINDINGS.values()) == set(Action)

    def test_space_fires(self, empty_sim):
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        assert dispatch_key_event(empty_sim, event)
        assert len(empty_sim.state.ship.lasers) == 1

    def test_arrow_release_stops_turning(self, empty_sim):
        dispatch_key_event(empty_sim, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
        assert empty_sim.state.ship.rot > 0
        dispatch_key_event(empty_sim, pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
        assert empty_sim.state.ship.rot == 0

    def test_thrust_key(self, empty_sim):
        dispatch_key_event(empty_sim, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
        assert empty_sim.state.ship.thrusting

    @pytest.mark.parametrize(
        "event",
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)),
        ],
    )
    def test_other_events_ignored(self, empty_sim, event):
        assert not dispatch_key_event(empty_sim, event)


class TestArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.seed is None
        assert args.width == 800
        assert args.height == 600
        assert not args.mute
        assert args.log_level == "INFO"

    def test_overrides(self, tmp_path):
        args = parse_args(["--seed", "3", "--mute", "--scores-file", str(tmp_path / "s.json"),
                           "--log-level", "DEBUG"])
        assert args.seed == 3
        assert args.mute
        assert args.scores_file == tmp_path / "s.json"
        assert args.log_level == "DEBUG"


class TestSeeding:
    def test_audio_draws_leave_simulation_stream_alone(self):
        sim_rng, audio_rng = seeded_generators(7)
        audio_rng.random(10_000)
        quiet_sim_rng, _ = seeded_generators(7)

        assert (sim_rng.random(5) == quiet_sim_rng.random(5)).all()

    def test_streams_differ(self):
        sim_rng, audio_rng = seeded_generators(7)
        assert sim_rng.random() != audio_rng.random()
