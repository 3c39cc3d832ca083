"""API routes package"""

from . import users, galleries, health

__all__ = ["users", "galleries", "health"]
