"""
Play field entities: Player, Enemy, Coin, Bullet.
NO UI DEPENDENCIES.

Every collision in the game is an axis-aligned bounding box test,
so each entity exposes its box through a `box` property.
"""
from dataclasses import dataclass

from .constants import (
    PLAYER_SIZE, PLAYER_SPEED, ENEMY_SIZE, COIN_RADIUS,
    BULLET_WIDTH, BULLET_HEIGHT, BULLET_SPEED
)


@dataclass(frozen=True)
class Box:
    """An axis-aligned bounding box (top-left corner plus size)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: "Box") -> bool:
        """Strict overlap: boxes that only share an edge don't collide."""
        return (
            self.x < other.right and
            self.right > other.x and
            self.y < other.bottom and
            self.bottom > other.y
        )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Player:
    """
    The player-controlled square.
    One instance per game; it is repositioned, never destroyed.
    """
    x: float
    y: float
    size: int = PLAYER_SIZE
    speed: int = PLAYER_SPEED

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.size, self.size)

    def move(self, dx: int, dy: int, field_width: int, field_height: int) -> None:
        """
        Move by one step in direction (dx, dy), each in {-1, 0, 1}.
        The player is clamped to the field; it can't leave through an edge.
        """
        self.x = _clamp(self.x + dx * self.speed, 0, field_width - self.size)
        self.y = _clamp(self.y + dy * self.speed, 0, field_height - self.size)

    def reset(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


@dataclass
class Enemy:
    """
    A square that bounces around the field.
    Marked `dead` by a bullet hit, then dropped from the active set.
    """
    x: float
    y: float
    dx: float
    dy: float
    size: int = ENEMY_SIZE
    dead: bool = False

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.size, self.size)

    def step(self, field_width: int, field_height: int) -> None:
        """
        Advance by one tick of velocity.

        When the next position on an axis would leave the field, that
        velocity component is reflected and the position is clamped to
        the edge.
        """
        self.x, self.dx = self._advance(self.x, self.dx, field_width - self.size)
        self.y, self.dy = self._advance(self.y, self.dy, field_height - self.size)

    @staticmethod
    def _advance(position: float, velocity: float, limit: float):
        next_position = position + velocity
        if next_position < 0 or next_position > limit:
            return _clamp(next_position, 0, limit), -velocity
        return next_position, velocity


@dataclass
class Coin:
    """
    A collectible drawn as a circle centred on (x, y).
    Coins are never removed; they are only flagged collected.
    """
    x: float
    y: float
    points: int
    radius: int = COIN_RADIUS
    collected: bool = False

    @property
    def box(self) -> Box:
        """Bounding square of the coin's circle."""
        return Box(self.x - self.radius, self.y - self.radius,
                   self.radius * 2, self.radius * 2)

    def collect(self) -> int:
        """
        Flag the coin collected.
        Returns the points earned: the coin's value the first time, then 0.
        """
        if self.collected:
            return 0
        self.collected = True
        return self.points


@dataclass
class Bullet:
    """A projectile travelling straight up from the player."""
    x: float
    y: float
    dy: float = BULLET_SPEED
    width: int = BULLET_WIDTH
    height: int = BULLET_HEIGHT
    spent: bool = False

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def is_active(self) -> bool:
        """Still in flight: not consumed by a hit and below the top edge."""
        return not self.spent and self.y > 0

    def step(self) -> None:
        self.y += self.dy
