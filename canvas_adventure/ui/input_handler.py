"""
Input Handler - Translates pygame key events to gameplay key names.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Optional

import pygame

from canvas_adventure.gameplay.controls import InputState


# pygame key codes the game knows about, by gameplay key name
KEY_NAMES = {
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_SPACE: "space",
    pygame.K_r: "r",
}


class InputHandler:
    """
    Feeds key presses and releases into an InputState.

    Unrecognized keys are ignored; Escape and closing the window quit.
    """

    def __init__(self, state: Optional[InputState] = None):
        self.state = state if state is not None else InputState()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns True if the game should quit.
        """
        if event.type == pygame.QUIT:
            return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return True
            name = KEY_NAMES.get(event.key)
            if name is not None:
                self.state.key_down(name)

        elif event.type == pygame.KEYUP:
            name = KEY_NAMES.get(event.key)
            if name is not None:
                self.state.key_up(name)

        return False
