"""
Application Layer Package

Orchestrates the domain: turns update DTOs into new things and exposes the
comparison and channel operations as use cases.
"""

# Re-export submodules
from thing_reconciler.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
