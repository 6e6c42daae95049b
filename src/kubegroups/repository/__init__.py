"""
Repository objects handed to downstream policy consumers
"""

from .entity_group import EntityGroup

__all__ = [
    "EntityGroup"
]
