"""
Main Game class - owns the session state and runs the frame step.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework: feed it held keys and actions, read
back state and events.
"""
import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Iterable, List, Optional

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, PLAYER_START_X, PLAYER_START_Y, PLAYER_SIZE,
    KILL_BONUS, FIRST_LEVEL, MAX_LEVEL
)
from .controls import Action, movement_from_keys
from .entities import Player, Enemy, Coin, Bullet
from .history import HistoryRecord, HistoryRecorder
from .level import build_level

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Session-level state machine."""
    PLAYING = auto()    # Ticking normally
    DEAD = auto()       # Touched an enemy, waiting for revive
    WON = auto()        # Cleared the last level, waiting for restart


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class LevelStartedEvent(GameEvent):
    level: int


@dataclass
class LevelClearedEvent(GameEvent):
    level: int
    seconds: float


@dataclass
class BulletFiredEvent(GameEvent):
    x: float
    y: float


@dataclass
class CoinCollectedEvent(GameEvent):
    points: int
    score: int


@dataclass
class EnemyKilledEvent(GameEvent):
    score: int


@dataclass
class PlayerDiedEvent(GameEvent):
    level: int
    score: int


@dataclass
class GameWonEvent(GameEvent):
    """The last level was cleared. `history` is the refreshed record list."""
    total_seconds: float
    score: int
    history: List[HistoryRecord] = field(default_factory=list)


@dataclass
class SessionState:
    """Everything that changes during a playthrough."""
    player: Player
    enemies: List[Enemy] = field(default_factory=list)
    coins: List[Coin] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)
    level: int = FIRST_LEVEL
    score: int = 0
    level_start: float = 0.0
    total_time: float = 0.0
    player_dead: bool = False
    game_over: bool = False
    halted_at: Optional[float] = None
    final_time: Optional[float] = None


class Game:
    """
    The main game class.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts input once per tick.

    Usage:
        game = Game()
        while True:
            events = game.tick(input_state.snapshot(), input_state.drain_actions())
            # UI reads game.state and renders
    """

    def __init__(
        self,
        width: int = FIELD_WIDTH,
        height: int = FIELD_HEIGHT,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        history: Optional[HistoryRecorder] = None,
    ):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.history = history

        self.state = SessionState(player=Player(*self._player_start()))

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

        self.init_level()

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def phase(self) -> GamePhase:
        if self.state.player_dead:
            return GamePhase.DEAD
        if self.state.game_over:
            return GamePhase.WON
        return GamePhase.PLAYING

    @property
    def is_running(self) -> bool:
        """True while the loop should keep ticking."""
        return not (self.state.player_dead or self.state.game_over)

    def level_elapsed(self) -> float:
        """Seconds spent in the current level; frozen once the loop halts."""
        end = self.state.halted_at if self.state.halted_at is not None else self.clock()
        return end - self.state.level_start

    def get_hud(self) -> dict:
        """HUD values as plain data."""
        return {
            'level': self.state.level,
            'score': self.state.score,
            'time': round(self.level_elapsed(), 1),
        }

    def is_level_complete(self) -> bool:
        return all(c.collected for c in self.state.coins) and not self.state.enemies

    # =========================================================================
    # FLOW COMMANDS
    # =========================================================================

    def init_level(self) -> None:
        """
        Replace every level-scoped entity with a fresh set for the
        current level and put the player back at the start.
        """
        state = self.state
        layout = build_level(state.level, self.width, self.height, self.rng)
        state.bullets = []
        state.enemies = layout.enemies
        state.coins = layout.coins
        state.player_dead = False
        state.game_over = False
        state.halted_at = None
        state.player.reset(*self._player_start())
        state.level_start = self.clock()

        logger.info(f"Level {state.level} started: "
                    f"{len(state.enemies)} enemies, {len(state.coins)} coins")
        self._events.append(LevelStartedEvent(state.level))

    def restart(self) -> None:
        """Reset the whole session back to a clean first level."""
        self.state.level = FIRST_LEVEL
        self.state.score = 0
        self.state.total_time = 0.0
        self.state.final_time = None
        self.init_level()

    def fire(self) -> Optional[Bullet]:
        """Spawn a bullet at the player's top-centre, unless halted."""
        if not self.is_running:
            return None
        player = self.state.player
        bullet = Bullet(x=player.x + player.size / 2, y=player.y)
        self.state.bullets.append(bullet)
        logger.debug(f"Bullet fired from ({bullet.x:.0f}, {bullet.y:.0f})")
        self._events.append(BulletFiredEvent(bullet.x, bullet.y))
        return bullet

    def revive(self) -> bool:
        """Restart after death or victory. Returns True if it did anything."""
        if self.is_running:
            return False
        logger.info("Restarting from level 1")
        self.restart()
        return True

    def handle_action(self, action: Action) -> None:
        if action == Action.FIRE:
            self.fire()
        elif action == Action.REVIVE:
            self.revive()

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def tick(self, pressed: Iterable[str] = (), actions: Iterable[Action] = ()) -> List[GameEvent]:
        """
        Run one frame step.

        Pending actions are applied first (revive works even while halted).
        Then, if the loop is running: movement, coin pickup, enemy contact,
        bullet hits, level completion. Returns events that occurred.
        """
        self._events = []

        for action in actions:
            self.handle_action(action)

        if not self.is_running:
            return self._events

        self._move(pressed)
        self._check_coin_collisions()
        self._check_enemy_contact()
        self._check_bullet_hits()

        # Dying on the frame that clears the level still counts as dying
        if not self.state.player_dead:
            self._check_level_complete()

        return self._events

    def _move(self, pressed: Iterable[str]) -> None:
        state = self.state
        dx, dy = movement_from_keys(pressed)
        state.player.move(dx, dy, self.width, self.height)

        for enemy in state.enemies:
            enemy.step(self.width, self.height)

        for bullet in state.bullets:
            bullet.step()
        state.bullets = [b for b in state.bullets if b.is_active]

    def _check_coin_collisions(self) -> None:
        state = self.state
        player_box = state.player.box
        for coin in state.coins:
            if not coin.collected and player_box.overlaps(coin.box):
                points = coin.collect()
                state.score += points
                logger.debug(f"Coin collected (+{points}), score {state.score}")
                self._events.append(CoinCollectedEvent(points, state.score))

    def _check_enemy_contact(self) -> None:
        state = self.state
        player_box = state.player.box
        if any(player_box.overlaps(e.box) for e in state.enemies):
            state.player_dead = True
            state.halted_at = self.clock()
            logger.info(f"Player died on level {state.level} with score {state.score}")
            self._events.append(PlayerDiedEvent(state.level, state.score))

    def _check_bullet_hits(self) -> None:
        """
        Test every (bullet, enemy) pair. A hit kills the enemy, consumes the
        bullet and scores the kill bonus; a consumed bullet tests no further
        enemies. Bullets stacked on one enemy each score their own hit.
        Dead enemies and spent bullets are compacted out afterwards.
        """
        state = self.state
        for bullet in state.bullets:
            bullet_box = bullet.box
            for enemy in state.enemies:
                if not bullet_box.overlaps(enemy.box):
                    continue
                enemy.dead = True
                bullet.spent = True
                state.score += KILL_BONUS
                logger.debug(f"Enemy killed, score {state.score}")
                self._events.append(EnemyKilledEvent(state.score))
                break

        state.enemies = [e for e in state.enemies if not e.dead]
        state.bullets = [b for b in state.bullets if not b.spent]

    def _check_level_complete(self) -> None:
        if not self.is_level_complete():
            return

        state = self.state
        seconds = self.clock() - state.level_start
        state.total_time += seconds
        logger.info(f"Level {state.level} cleared in {seconds:.1f}s")
        self._events.append(LevelClearedEvent(state.level, seconds))

        if state.level < MAX_LEVEL:
            state.level += 1
            self.init_level()
        else:
            self._end_game()

    def _end_game(self) -> None:
        state = self.state
        state.game_over = True
        state.halted_at = self.clock()
        state.final_time = round(state.total_time, 1)

        history: List[HistoryRecord] = []
        if self.history is not None:
            history = self.history.record(state.final_time)

        logger.info(f"Game won in {state.final_time:.1f}s with score {state.score}")
        self._events.append(GameWonEvent(state.final_time, state.score, history))

    def _player_start(self):
        """Starting position, pulled inside the field if the field is small."""
        return (
            min(PLAYER_START_X, max(0, self.width - PLAYER_SIZE)),
            min(PLAYER_START_Y, max(0, self.height - PLAYER_SIZE)),
        )

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, ticks: int, pressed: Iterable[str] = ()) -> List[GameEvent]:
        """
        Run up to `ticks` frame steps with the same keys held.
        Stops early once the loop halts. Returns all events.
        """
        pressed = frozenset(pressed)
        all_events: List[GameEvent] = []
        for _ in range(ticks):
            if not self.is_running:
                break
            all_events.extend(self.tick(pressed))
        return all_events
