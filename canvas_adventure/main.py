#!/usr/bin/env python3
"""
Canvas Adventure - Main Entry Point

Collect every coin and defeat every enemy to clear a level.
Clear all three levels to win; your five most recent completion
times are kept in the history panel.

Usage:
    python -m canvas_adventure.main

Controls:
    W, A, S, D: Move
    Space: Shoot
    R: Revive after dying / restart after winning
    Escape: Quit
"""
import logging

import pygame

from canvas_adventure.config import get_settings
from canvas_adventure.gameplay.game import Game, GameWonEvent
from canvas_adventure.gameplay.history import HistoryRecorder, JsonFileStore
from canvas_adventure.ui.renderer import Renderer
from canvas_adventure.ui.input_handler import InputHandler

logger = logging.getLogger(__name__)


def handle_game_events(events, renderer: Renderer) -> None:
    """Log gameplay events and refresh the history panel after a win."""
    for event in events:
        logger.debug(f"Game event: {event}")
        if isinstance(event, GameWonEvent):
            renderer.set_history(event.history)


def main():
    """Main entry point."""
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Canvas Adventure - Starting...")
    logger.info(f"History file: {settings.history_file}")

    recorder = HistoryRecorder(
        JsonFileStore(settings.history_file),
        key=settings.history_key,
        limit=settings.history_limit,
    )
    game = Game(
        width=settings.field_width,
        height=settings.field_height,
        history=recorder,
    )

    pygame.init()
    renderer = Renderer(game)
    renderer.set_history(recorder.load())
    screen = pygame.display.set_mode(renderer.size)
    pygame.display.set_caption("Canvas Adventure")
    clock = pygame.time.Clock()

    input_handler = InputHandler()

    should_quit = False
    try:
        while not should_quit:
            for event in pygame.event.get():
                if input_handler.handle_event(event):
                    should_quit = True

            # The frame step is a no-op while halted, except for a pending revive
            events = game.tick(
                input_handler.state.snapshot(),
                input_handler.state.drain_actions(),
            )
            handle_game_events(events, renderer)

            renderer.render(screen)
            pygame.display.flip()
            clock.tick(settings.fps)
    finally:
        pygame.quit()
        logger.info("Canvas Adventure stopped.")


if __name__ == "__main__":
    main()
