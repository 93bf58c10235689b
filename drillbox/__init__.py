"""Beginner programming exercises: number drills, text patterns, an event scheduler and a small shop."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "digits", "patterns", "events", "shopping", "cli"]