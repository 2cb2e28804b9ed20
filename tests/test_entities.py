"""
Tests for play field entities and AABB collision.
"""
import random

import pytest
from canvas_adventure.gameplay.entities import Box, Player, Enemy, Coin, Bullet
from canvas_adventure.gameplay.constants import (
    FIELD_WIDTH, FIELD_HEIGHT, PLAYER_SIZE, PLAYER_SPEED, ENEMY_SIZE, BULLET_SPEED
)


class TestBox:
    """Tests for axis-aligned overlap."""

    def test_overlapping_boxes(self):
        """Boxes sharing area overlap in both directions."""
        a = Box(0, 0, 10, 10)
        b = Box(5, 5, 10, 10)
        assert a.overlaps(b)
        assert b.overlaps(a)

    def test_touching_edges_do_not_overlap(self):
        """Boxes that only share an edge don't collide."""
        a = Box(0, 0, 10, 10)
        assert not a.overlaps(Box(10, 0, 10, 10))
        assert not a.overlaps(Box(0, 10, 10, 10))

    def test_separated_boxes(self):
        """Overlap on one axis only isn't a collision."""
        a = Box(0, 0, 10, 10)
        assert not a.overlaps(Box(5, 50, 10, 10))
        assert not a.overlaps(Box(50, 5, 10, 10))

    def test_contained_box(self):
        """A box fully inside another overlaps it."""
        assert Box(0, 0, 100, 100).overlaps(Box(40, 40, 4, 10))


class TestPlayer:
    """Tests for player movement."""

    def test_moves_by_speed(self):
        """Each step moves exactly one speed unit per axis."""
        player = Player(100, 100)
        player.move(1, -1, FIELD_WIDTH, FIELD_HEIGHT)
        assert player.x == 100 + PLAYER_SPEED
        assert player.y == 100 - PLAYER_SPEED

    def test_clamped_to_left_and_top(self):
        """Player can't leave through the top-left corner."""
        player = Player(1, 2)
        player.move(-1, -1, FIELD_WIDTH, FIELD_HEIGHT)
        assert player.x == 0
        assert player.y == 0

    def test_clamped_to_right_and_bottom(self):
        """Player can't leave through the bottom-right corner."""
        player = Player(FIELD_WIDTH - PLAYER_SIZE - 1, FIELD_HEIGHT - PLAYER_SIZE - 1)
        player.move(1, 1, FIELD_WIDTH, FIELD_HEIGHT)
        assert player.x == FIELD_WIDTH - PLAYER_SIZE
        assert player.y == FIELD_HEIGHT - PLAYER_SIZE

    def test_stays_in_bounds_for_any_key_sequence(self):
        """Random held-key combinations never push the player outside."""
        rng = random.Random(7)
        player = Player(300, 350)
        for _ in range(2000):
            player.move(rng.choice((-1, 0, 1)), rng.choice((-1, 0, 1)), FIELD_WIDTH, FIELD_HEIGHT)
            assert 0 <= player.x <= FIELD_WIDTH - PLAYER_SIZE
            assert 0 <= player.y <= FIELD_HEIGHT - PLAYER_SIZE


class TestEnemy:
    """Tests for enemy bouncing."""

    def test_moves_by_velocity(self):
        """Enemy advances by its velocity away from edges."""
        enemy = Enemy(100, 100, dx=2.5, dy=-1.0)
        enemy.step(FIELD_WIDTH, FIELD_HEIGHT)
        assert enemy.x == pytest.approx(102.5)
        assert enemy.y == pytest.approx(99.0)
        assert enemy.dx == 2.5
        assert enemy.dy == -1.0

    def test_bounces_off_right_edge(self):
        """Velocity flips when the next step would cross the right edge."""
        limit = FIELD_WIDTH - ENEMY_SIZE
        enemy = Enemy(limit - 1, 100, dx=3, dy=0)
        enemy.step(FIELD_WIDTH, FIELD_HEIGHT)
        assert enemy.dx == -3
        assert enemy.x == limit

        enemy.step(FIELD_WIDTH, FIELD_HEIGHT)
        assert enemy.x == limit - 3

    def test_bounces_off_top_edge(self):
        """Vertical velocity flips at the top without touching dx."""
        enemy = Enemy(100, 1, dx=2, dy=-4)
        enemy.step(FIELD_WIDTH, FIELD_HEIGHT)
        assert enemy.dy == 4
        assert enemy.y == 0
        assert enemy.dx == 2

    def test_landing_exactly_on_edge_does_not_flip(self):
        """Reaching the boundary exactly is still inside the field."""
        limit = FIELD_HEIGHT - ENEMY_SIZE
        enemy = Enemy(100, limit - 2, dx=0, dy=2)
        enemy.step(FIELD_WIDTH, FIELD_HEIGHT)
        assert enemy.y == limit
        assert enemy.dy == 2

    def test_never_leaves_field(self):
        """A fast enemy bouncing for a long time stays inside."""
        enemy = Enemy(10, 10, dx=7.3, dy=5.9)
        for _ in range(1000):
            enemy.step(FIELD_WIDTH, FIELD_HEIGHT)
            assert 0 <= enemy.x <= FIELD_WIDTH - ENEMY_SIZE
            assert 0 <= enemy.y <= FIELD_HEIGHT - ENEMY_SIZE


class TestCoin:
    """Tests for coin collection."""

    def test_box_bounds_the_circle(self):
        """Coin box is the bounding square of its circle."""
        coin = Coin(100, 60, points=8, radius=10)
        assert coin.box == Box(90, 50, 20, 20)

    def test_collect_once(self):
        """Points are paid out only on the first collection."""
        coin = Coin(100, 100, points=8)
        assert coin.collect() == 8
        assert coin.collected
        assert coin.collect() == 0
        assert coin.collected


class TestBullet:
    """Tests for bullets."""

    def test_moves_up(self):
        bullet = Bullet(50, 100)
        bullet.step()
        assert bullet.y == 100 + BULLET_SPEED
        assert bullet.is_active

    def test_inactive_at_top(self):
        """A bullet at or above y=0 is out of play."""
        assert not Bullet(50, 0).is_active
        assert not Bullet(50, -3).is_active

    def test_inactive_when_spent(self):
        bullet = Bullet(50, 100, spent=True)
        assert not bullet.is_active
