"""
Canvas Adventure - a single-screen arcade game.

Collect every coin and shoot every enemy to clear a level.
Clear three levels to win; touching an enemy kills you.
"""

__version__ = "0.1.0"
