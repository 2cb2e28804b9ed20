"""
Renderer - Reads gameplay state and draws it onto a pygame Surface.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Dict, List

import pygame

from canvas_adventure.gameplay.game import Game, GamePhase
from canvas_adventure.gameplay.history import HistoryRecord, format_history


# Layout
SIDEBAR_WIDTH = 240
SIDEBAR_PADDING = 16
LINE_HEIGHT = 26

# Colors
COLOR_BACKGROUND = (20, 20, 30)
COLOR_SIDEBAR = (30, 30, 42)
COLOR_PLAYER = (0, 255, 255)
COLOR_ENEMY = (255, 0, 0)
COLOR_COIN = (255, 215, 0)
COLOR_BULLET = (0, 255, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DIM = (204, 204, 204)
COLOR_OVERLAY = (0, 0, 0, 204)


class Renderer:
    """
    Renders game state to a pygame surface.

    This class reads from Game but never modifies it.
    The field occupies the left of the surface; the HUD and
    run history sit in a panel to its right.
    """

    def __init__(self, game: Game):
        self.game = game
        self.history_lines: List[str] = format_history([])
        self._fonts: Dict[int, pygame.font.Font] = {}

    @property
    def size(self):
        """Surface size needed to show the field plus sidebar."""
        return (self.game.width + SIDEBAR_WIDTH, self.game.height)

    def set_history(self, records: List[HistoryRecord]) -> None:
        """Refresh the displayed history list."""
        self.history_lines = format_history(records)

    def font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def render(self, surface: pygame.Surface) -> None:
        """Render entire game state."""
        surface.fill(COLOR_BACKGROUND, pygame.Rect(0, 0, self.game.width, self.game.height))

        self.render_coins(surface)
        self.render_enemies(surface)
        self.render_bullets(surface)
        self.render_player(surface)

        phase = self.game.phase
        if phase == GamePhase.DEAD:
            self.render_death_screen(surface)
        elif phase == GamePhase.WON:
            self.render_win_screen(surface)

        self.render_sidebar(surface)

    def render_coins(self, surface: pygame.Surface):
        for coin in self.game.state.coins:
            if not coin.collected:
                pygame.draw.circle(surface, COLOR_COIN, (round(coin.x), round(coin.y)), coin.radius)

    def render_enemies(self, surface: pygame.Surface):
        for enemy in self.game.state.enemies:
            pygame.draw.rect(surface, COLOR_ENEMY, self._rect(enemy.box))

    def render_bullets(self, surface: pygame.Surface):
        for bullet in self.game.state.bullets:
            pygame.draw.rect(surface, COLOR_BULLET, self._rect(bullet.box))

    def render_player(self, surface: pygame.Surface):
        pygame.draw.rect(surface, COLOR_PLAYER, self._rect(self.game.state.player.box))

    def render_death_screen(self, surface: pygame.Surface):
        self._render_overlay(surface)
        self.draw_centered_text(surface, "YOU DIED", 180, 40, COLOR_ENEMY)
        self.draw_centered_text(surface, "Press R to Revive", 250, 26, COLOR_TEXT)

    def render_win_screen(self, surface: pygame.Surface):
        state = self.game.state
        self._render_overlay(surface)
        self.draw_centered_text(surface, "YOU WIN!", 170, 40, COLOR_COIN)
        self.draw_centered_text(surface, f"Total Time: {state.final_time:.1f}s", 230, 24, COLOR_TEXT)
        self.draw_centered_text(surface, f"Final Score: {state.score}", 270, 24, COLOR_TEXT)
        self.draw_centered_text(surface, "Press R to Restart", 320, 22, COLOR_TEXT_DIM)

    def render_sidebar(self, surface: pygame.Surface):
        """HUD values on top, run history below."""
        left = self.game.width
        surface.fill(COLOR_SIDEBAR, pygame.Rect(left, 0, SIDEBAR_WIDTH, self.game.height))

        hud = self.game.get_hud()
        lines = [
            f"Level: {hud['level']}",
            f"Score: {hud['score']}",
            f"Time: {hud['time']:.1f}s",
        ]
        y = SIDEBAR_PADDING
        for line in lines:
            self._blit(surface, line, left + SIDEBAR_PADDING, y, 24, COLOR_TEXT)
            y += LINE_HEIGHT

        y += LINE_HEIGHT
        self._blit(surface, "History", left + SIDEBAR_PADDING, y, 24, COLOR_COIN)
        y += LINE_HEIGHT
        for line in self.history_lines:
            self._blit(surface, line, left + SIDEBAR_PADDING, y, 18, COLOR_TEXT_DIM)
            y += LINE_HEIGHT - 6

    def draw_centered_text(self, surface: pygame.Surface, text: str, y: int,
                           size: int = 24, color=COLOR_TEXT):
        """Draw text centred horizontally over the play field (y is the baseline)."""
        font = self.font(size)
        width, _ = font.size(text)
        x = (self.game.width - width) // 2
        self._blit(surface, text, x, y - font.get_ascent(), size, color)

    def _render_overlay(self, surface: pygame.Surface):
        overlay = pygame.Surface((self.game.width, self.game.height), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        surface.blit(overlay, (0, 0))

    def _blit(self, surface, text, x, y, size, color):
        image = self.font(size).render(text, True, color)
        surface.blit(image, (x, y))

    @staticmethod
    def _rect(box) -> pygame.Rect:
        return pygame.Rect(round(box.x), round(box.y), round(box.width), round(box.height))
