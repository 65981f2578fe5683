"""
Media proxy request models
"""

from .fields import OutputFormat, ResizeStrategy
from .query import Query, Request

__all__ = ["OutputFormat", "ResizeStrategy", "Query", "Request"]
