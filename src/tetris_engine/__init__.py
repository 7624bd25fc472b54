"""Falling-block puzzle engine.

The game core lives in `tetris_engine.game` and has no display dependency;
`tetris_engine.visualization` and `tetris_engine.env` drive it from pygame
and gymnasium respectively.
"""

from tetris_engine.game import Command, GameConfig, GameSession, Snapshot

__all__ = ["Command", "GameConfig", "GameSession", "Snapshot"]
