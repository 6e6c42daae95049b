#!/usr/bin/env python3
"""
Errors raised while resolving the owner of a discovered entity
"""


class OwnerResolutionError(Exception):
    """Owner of an entity could not be resolved; the entity is left ungrouped"""

    def __init__(self, entity_key: str, message: str):
        super().__init__(message)
        self.entity_key = entity_key


class MetricLookupError(OwnerResolutionError, LookupError):
    """The metric sink has no entry, or failed, for a required owner property"""


class EmptyValueError(OwnerResolutionError, ValueError):
    """An owner property resolved to a missing, non-string or empty value"""
