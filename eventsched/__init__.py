"""Conflict-aware event scheduling, slot-assignment algorithms and a JSON web service."""

__version__ = "0.1.0"