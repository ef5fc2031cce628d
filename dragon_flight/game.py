"""Game loop, input mapping and command-line entry point for Dragon Flight."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from .assets import AssetLoader, AssetLoadError, load_assets_or_fail
from .config import ASSET_DIR, DEFAULT_TUNING, FPS, WINDOW_HEIGHT, WINDOW_WIDTH, FieldGeometry, Tuning
from .log import setup_logging
from .renderer import Renderer
from .session import GameSession
from .state import GameState, InputEvent

logger = logging.getLogger(__name__)

# Enter starts a fresh round from either the start screen or the game-over screen;
# the session drops whichever of the two events the current state doesn't accept.
KEY_BINDINGS: dict[int, tuple[InputEvent, ...]] = {
    pygame.K_SPACE: (InputEvent.FLAP,),
    pygame.K_UP: (InputEvent.FLAP,),
    pygame.K_w: (InputEvent.FLAP,),
    pygame.K_RETURN: (InputEvent.BEGIN, InputEvent.RESET),
    pygame.K_KP_ENTER: (InputEvent.BEGIN, InputEvent.RESET),
    pygame.K_r: (InputEvent.RESET,),
}


class Game:
    """Top-level driver: owns the window, the clock and the run/pause lifecycle."""

    def __init__(
        self,
        sprites: dict[str, pygame.Surface],
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        fps: int = FPS,
        tuning: Tuning = DEFAULT_TUNING,
        seed: int | None = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Dragon Flight")
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.session = GameSession(FieldGeometry(width, height), tuning, seed)
        self.renderer = Renderer(sprites)
        # Simulation clock, only advanced while not paused
        self.sim_time_ms = 0.0
        self.paused = False
        self.running = True

    def dispatch(self, event: InputEvent) -> bool:
        if self.paused:
            return False
        return self.session.handle(event, self.sim_time_ms)

    def toggle_pause(self) -> None:
        if self.session.state is not GameState.PLAYING:
            return
        self.paused = not self.paused
        logger.debug("paused" if self.paused else "resumed")

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.session.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_p:
                self.toggle_pause()
            else:
                for logical in KEY_BINDINGS.get(event.key, ()):
                    self.dispatch(logical)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.dispatch(InputEvent.FLAP)

    def step(self, dt_ms: float) -> None:
        if self.paused:
            return
        self.sim_time_ms += dt_ms
        self.session.tick(self.sim_time_ms)

    def draw(self) -> None:
        self.renderer.draw(self.screen, self.session.snapshot(), self.paused)
        pygame.display.flip()

    def run(self) -> None:
        logger.info("starting at %dx%d, %d fps", *self.screen.get_size(), self.fps)
        try:
            while self.running:
                dt_ms = self.clock.tick(self.fps)
                for event in pygame.event.get():
                    self.handle_input(event)
                self.step(dt_ms)
                self.draw()
        finally:
            pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="dragon-flight", description="Fly the dragon through the pillars.")
    p.add_argument("--width", type=int, default=WINDOW_WIDTH, help="Initial window width.")
    p.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="Initial window height.")
    p.add_argument("--fps", type=int, default=FPS, help="Tick rate; physics is per tick.")
    p.add_argument("--assets", type=Path, default=ASSET_DIR, help="Directory holding the sprite files.")
    p.add_argument("--seed", type=int, default=None, help="Seed for pillar gap placement.")
    p.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        sprites = load_assets_or_fail(AssetLoader(args.assets))
    except AssetLoadError:
        return 1
    Game(sprites, args.width, args.height, args.fps, seed=args.seed).run()
    return 0
