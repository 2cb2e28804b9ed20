"""
Level definitions - how many enemies and coins each level gets.
NO UI DEPENDENCIES.

Counts and values are fixed per level; positions (and the vertical
jitter of enemy speed) come from the random generator passed in.
"""
import random
from dataclasses import dataclass
from typing import List

from .entities import Enemy, Coin
from .constants import (
    ENEMY_SPAWN_MARGIN, ENEMY_SPAWN_HEIGHT, ENEMY_BASE_SPEED, ENEMY_BASE_VERTICAL,
    COIN_MARGIN_X, COIN_TOP, COIN_BOTTOM_MARGIN, COIN_BASE_POINTS, COIN_POINTS_PER_LEVEL
)


@dataclass
class LevelLayout:
    """Freshly spawned entities for one level."""
    level: int
    enemies: List[Enemy]
    coins: List[Coin]


def enemy_count(level: int) -> int:
    return level + 1


def coin_count(level: int) -> int:
    return level * 2 + 2


def coin_points(level: int) -> int:
    return COIN_BASE_POINTS + level * COIN_POINTS_PER_LEVEL


def spawn_enemy(level: int, field_width: int, rng: random.Random) -> Enemy:
    """
    Spawn an enemy somewhere in the upper part of the field.
    Horizontal speed grows with the level; vertical speed gets
    random jitter scaled by the level.
    """
    return Enemy(
        x=rng.random() * (field_width - ENEMY_SPAWN_MARGIN),
        y=rng.random() * ENEMY_SPAWN_HEIGHT,
        dx=ENEMY_BASE_SPEED + level,
        dy=ENEMY_BASE_VERTICAL + rng.random() * level,
    )


def spawn_coin(level: int, field_width: int, field_height: int, rng: random.Random) -> Coin:
    """Spawn a coin inside the field margins."""
    return Coin(
        x=rng.random() * (field_width - 2 * COIN_MARGIN_X) + COIN_MARGIN_X,
        y=rng.random() * (field_height - COIN_TOP - COIN_BOTTOM_MARGIN) + COIN_TOP,
        points=coin_points(level),
    )


def build_level(level: int, field_width: int, field_height: int,
                rng: random.Random) -> LevelLayout:
    """Create the full set of enemies and coins for a level."""
    enemies = [spawn_enemy(level, field_width, rng) for _ in range(enemy_count(level))]
    coins = [spawn_coin(level, field_width, field_height, rng) for _ in range(coin_count(level))]
    return LevelLayout(level=level, enemies=enemies, coins=coins)
