"""Sample data for demos and tests."""

from .generator import RosterGenerator

__all__ = ['RosterGenerator']
