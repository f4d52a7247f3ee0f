"""
Infrastructure Layer for the Workout Analytics engine.

This package contains concrete implementations of the application ports:
- history/: Session history providers
"""

from infrastructure.history import InMemorySessionHistory

__all__ = [
    "InMemorySessionHistory",
]
