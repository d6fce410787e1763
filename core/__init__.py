"""
Core package - cross-cutting building blocks shared by services and the API.
"""

from core.clock import Clock, FixedClock, SystemClock

__all__ = ["Clock", "FixedClock", "SystemClock"]
