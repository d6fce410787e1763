"""
Domain layer - Meal values, upstream payload schemas, response schemas and mappers.
"""

from domain import mappers, models, schemas

__all__ = ["mappers", "models", "schemas"]
