"""
Application Layer for the Workout Analytics engine.

This package contains:
- ports/: Abstract interfaces (what the analytics engine needs)
"""
