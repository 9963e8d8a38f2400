"""Service layer for running battles."""

from .battles import BattleResult, BattleSession, GameStatus

__all__ = [
    "BattleSession",
    "BattleResult",
    "GameStatus",
]
