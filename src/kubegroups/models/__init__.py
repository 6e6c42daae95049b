"""
Models package for group discovery data structures
"""

from .groups import EntityGroupSummary, GroupCollectionResult

__all__ = [
    "EntityGroupSummary",
    "GroupCollectionResult",
]
