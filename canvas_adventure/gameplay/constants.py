"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# PLAY FIELD (pixels)
# =============================================================================
FIELD_WIDTH = 600
FIELD_HEIGHT = 400

# =============================================================================
# PLAYER
# =============================================================================
PLAYER_START_X = 300
PLAYER_START_Y = 350
PLAYER_SIZE = 30
PLAYER_SPEED = 4              # pixels per tick

# =============================================================================
# ENEMIES
# =============================================================================
ENEMY_SIZE = 25
ENEMY_SPAWN_MARGIN = 30       # keep spawns away from the right edge
ENEMY_SPAWN_HEIGHT = 200      # enemies spawn in the upper part of the field
ENEMY_BASE_SPEED = 1.5        # horizontal speed before level bonus
ENEMY_BASE_VERTICAL = 1.0     # vertical speed before random jitter
KILL_BONUS = 10

# =============================================================================
# COINS
# =============================================================================
COIN_RADIUS = 10
COIN_MARGIN_X = 10
COIN_TOP = 50
COIN_BOTTOM_MARGIN = 100
COIN_BASE_POINTS = 5
COIN_POINTS_PER_LEVEL = 3

# =============================================================================
# BULLETS
# =============================================================================
BULLET_WIDTH = 4
BULLET_HEIGHT = 10
BULLET_SPEED = -6             # negative = upward

# =============================================================================
# PROGRESSION
# =============================================================================
FIRST_LEVEL = 1
MAX_LEVEL = 3

# =============================================================================
# CONTROLS (lowercase key names)
# =============================================================================
MOVE_KEYS = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}
FIRE_KEY = "space"
REVIVE_KEY = "r"

# =============================================================================
# HISTORY
# =============================================================================
HISTORY_KEY = "gameHistory"
HISTORY_LIMIT = 5
HISTORY_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
