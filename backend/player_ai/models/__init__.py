"""
player_ai.models

Package ORM (SQLAlchemy) : une seule entité persistée, PlayerPerformance.
"""

from player_ai.models.player_performance import PlayerPerformance

__all__ = ["PlayerPerformance"]
