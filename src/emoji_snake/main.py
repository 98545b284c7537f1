# src/emoji_snake/main.py
from __future__ import annotations
import argparse
import logging
from typing import Optional

import pygame  # type: ignore

from .audio import AudioPlayer
from .config import Config, CELL_SIZE
from .controls import direction_from_name, direction_from_swipe
from .render import PygameRenderer, TextRenderer
from .scheduler import ManualScheduler, PygameScheduler
from .session import GameListener, GameSession, make_grid
from .state import Snapshot

logger = logging.getLogger(__name__)

GAME_OVER_PAUSE_MS = 3000
INTERVAL_STEP_MS = 10
VOLUME_STEP = 0.1

KEY_NAMES = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}


class PygameListener(GameListener):
    def __init__(self, renderer: PygameRenderer, audio: AudioPlayer):
        self.renderer = renderer
        self.audio = audio
        self.quit_requested = False

    def on_render(self, snapshot: Snapshot) -> None:
        self.renderer.draw(snapshot)

    def on_eat(self) -> None:
        self.audio.play("eat")

    def on_game_over(self, score: int) -> None:
        self.audio.play("game_over")
        self.renderer.draw_game_over(score)
        self.quit_requested = not wait_for_ack(GAME_OVER_PAUSE_MS)

    def on_volume(self, volume: float) -> None:
        self.audio.set_volume(volume)


class HeadlessListener(GameListener):
    def __init__(self, renderer: TextRenderer):
        self.renderer = renderer
        self.games_over = 0

    def on_render(self, snapshot: Snapshot) -> None:
        self.renderer.draw(snapshot)

    def on_game_over(self, score: int) -> None:
        self.games_over += 1


def wait_for_ack(timeout_ms: int) -> bool:
    """Block until a key/click or timeout. Returns False if the window was closed."""
    deadline = pygame.time.get_ticks() + timeout_ms
    clock = pygame.time.Clock()
    while pygame.time.get_ticks() < deadline:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
                return True
        clock.tick(30)
    return True


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Emoji snake")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--interval", type=int, default=Config.tick_ms, help="ms between ticks (50-1000)")
    p.add_argument("--volume", type=float, default=Config.volume)
    p.add_argument("--resizable", action="store_true", help="derive the grid from the window size")
    p.add_argument("--assets", default=None, help="directory with eat.wav, gameover.wav, music.ogg")
    p.add_argument("--headless", action="store_true", help="no window; log frames as text")
    p.add_argument("--ticks", type=int, default=50, help="ticks to run in headless mode")
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(seed=args.seed, resizable=args.resizable, assets_dir=args.assets)


def apply_settings(session: GameSession, args: argparse.Namespace) -> None:
    # Same validation as the live controls; rejected values keep the defaults
    session.set_interval(args.interval)
    session.set_volume(args.volume)


def run_headless(cfg: Config, args: argparse.Namespace) -> int:
    scheduler = ManualScheduler()
    grid = make_grid(cfg)
    listener = HeadlessListener(TextRenderer(grid))
    session = GameSession(cfg, scheduler, listener, grid=grid)
    apply_settings(session, args)
    session.start()
    scheduler.advance(cfg.tick_ms * args.ticks)
    logger.info("Headless run done: %d ticks, score=%d, games over=%d",
                args.ticks, session.state.score, listener.games_over)
    return session.state.score


def run_window(cfg: Config, args: argparse.Namespace) -> None:
    pygame.init()
    size = (cfg.grid_cells * cfg.cell_size, cfg.grid_cells * cfg.cell_size)
    flags = pygame.RESIZABLE if cfg.resizable else 0
    screen = pygame.display.set_mode(size, flags)
    pygame.display.set_caption("Emoji Snake")

    grid = make_grid(cfg, *size)
    renderer = PygameRenderer(screen, grid, cfg.cell_size)
    audio = AudioPlayer(cfg.assets_dir, cfg.volume)
    listener = PygameListener(renderer, audio)
    scheduler = PygameScheduler()
    session = GameSession(cfg, scheduler, listener, grid=grid)
    apply_settings(session, args)
    session.start()
    renderer.draw(session.snapshot())

    clock = pygame.time.Clock()
    drag_start: Optional[tuple] = None
    running = True
    while running and not listener.quit_requested:
        for event in pygame.event.get():
            if scheduler.dispatch(event):
                continue
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                audio.start_music()
                if event.key in KEY_NAMES:
                    session.request_direction(direction_from_name(KEY_NAMES[event.key]))
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    session.set_interval(cfg.tick_ms + INTERVAL_STEP_MS)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    session.set_interval(cfg.tick_ms - INTERVAL_STEP_MS)
                elif event.key == pygame.K_RIGHTBRACKET:
                    session.set_volume(round(min(1.0, cfg.volume + VOLUME_STEP), 2))
                elif event.key == pygame.K_LEFTBRACKET:
                    session.set_volume(round(max(0.0, cfg.volume - VOLUME_STEP), 2))
                elif event.key == pygame.K_ESCAPE:
                    running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                audio.start_music()
                drag_start = event.pos
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and drag_start:
                d = direction_from_swipe(event.pos[0] - drag_start[0], event.pos[1] - drag_start[1])
                drag_start = None
                if d is not None:
                    session.request_direction(d)
            elif event.type == pygame.FINGERMOTION:
                # Finger deltas are normalized to [0, 1] of the window
                w, h = screen.get_size()
                d = direction_from_swipe(event.dx * w, event.dy * h, threshold=CELL_SIZE / 2)
                if d is not None:
                    session.request_direction(d)
            elif event.type == pygame.VIDEORESIZE and cfg.resizable:
                session.resize(event.w, event.h)
        clock.tick(60)

    session.stop()
    pygame.quit()


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)
    if args.headless:
        run_headless(cfg, args)
    else:
        run_window(cfg, args)


if __name__ == "__main__":
    main()
