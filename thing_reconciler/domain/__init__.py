"""
Domain Layer Package

Things, channels, their builders and the equality rules, without
dependencies on frameworks or infrastructure.
"""

from thing_reconciler.domain import builders, entities, services

__all__ = ["entities", "builders", "services"]
