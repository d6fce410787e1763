"""API routes package"""

from . import canteens, health, meals

__all__ = ["canteens", "health", "meals"]
