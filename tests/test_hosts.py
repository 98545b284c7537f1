"""Tests for the thin host layer: text renderer, audio player and headless CLI."""

import logging

import pygame
import pytest

from emoji_snake import audio as audio_mod
from emoji_snake.audio import AudioPlayer
from emoji_snake.main import build_config, parse_args, run_headless
from emoji_snake.render import TextRenderer
from emoji_snake.state import Snapshot


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.volume = None
        self.log = []

    def set_volume(self, v):
        self.volume = v

    def stop(self):
        self.log.append("stop")

    def play(self):
        self.log.append("play")


@pytest.fixture
def mixer_ready(monkeypatch):
    monkeypatch.setattr(pygame.mixer, "get_init", lambda: (44100, -16, 2))


class TestAudioPlayer:
    def test_missing_files_stay_silent(self, mixer_ready, monkeypatch, tmp_path, caplog):
        def missing(path):
            raise FileNotFoundError(path)

        monkeypatch.setattr(pygame.mixer, "Sound", missing)
        with caplog.at_level(logging.WARNING):
            player = AudioPlayer(str(tmp_path), volume=0.4)
        assert player.sounds == {}
        assert player.music_loaded is False
        assert "unavailable" in caplog.text
        player.play("eat")
        player.start_music()

    def test_volume_applies_to_all_sounds(self, mixer_ready, monkeypatch, tmp_path):
        monkeypatch.setattr(pygame.mixer, "Sound", FakeSound)
        player = AudioPlayer(str(tmp_path), volume=0.4)
        assert set(player.sounds) == set(audio_mod.SOUND_FILES)
        assert all(s.volume == 0.4 for s in player.sounds.values())
        player.set_volume(0.9)
        assert all(s.volume == 0.9 for s in player.sounds.values())

    def test_play_restarts_sound(self, mixer_ready, monkeypatch, tmp_path):
        monkeypatch.setattr(pygame.mixer, "Sound", FakeSound)
        player = AudioPlayer(str(tmp_path))
        player.play("eat")
        player.play("unknown")
        assert player.sounds["eat"].log == ["stop", "play"]

    def test_no_audio_device(self, monkeypatch, caplog):
        def broken():
            raise pygame.error("no device")

        monkeypatch.setattr(pygame.mixer, "get_init", broken)
        with caplog.at_level(logging.WARNING):
            player = AudioPlayer("assets")
        assert player.enabled is False
        assert player.sounds == {}


class TestTextRenderer:
    def test_logs_board(self, grid, make_state, caplog):
        snap = Snapshot.of(make_state([(1, 0), (0, 0)]))
        with caplog.at_level(logging.INFO, logger="emoji_snake.render"):
            TextRenderer(grid).draw(snap)
        assert "o@" in caplog.text
        assert "score=0" in caplog.text


class TestHeadless:
    def test_run_headless(self, caplog):
        args = parse_args(["--headless", "--ticks", "40", "--seed", "2"])
        with caplog.at_level(logging.INFO):
            score = run_headless(build_config(args), args)
        assert score >= 0
        assert "Headless run done: 40 ticks" in caplog.text

    def test_bad_cli_interval_keeps_default(self, caplog):
        args = parse_args(["--headless", "--ticks", "1", "--interval", "5"])
        cfg = build_config(args)
        with caplog.at_level(logging.WARNING):
            run_headless(cfg, args)
        assert cfg.tick_ms == 100
        assert "Rejected tick interval" in caplog.text

    def test_cli_interval_applied(self):
        args = parse_args(["--headless", "--ticks", "1", "--interval", "250", "--volume", "0.2"])
        cfg = build_config(args)
        run_headless(cfg, args)
        assert cfg.tick_ms == 250
        assert cfg.volume == 0.2
