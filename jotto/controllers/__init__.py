"""
Controllers Package

HTTP endpoints exposing the game to the browser client.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
