"""Complete system recommendation."""

from .system import SystemRecommendation, recommend_system

__all__ = ["SystemRecommendation", "recommend_system"]
