"""API routes package"""

from . import auth, meals, recipes, documents, user, health

__all__ = ["auth", "meals", "recipes", "documents", "user", "health"]
