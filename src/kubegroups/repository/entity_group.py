#!/usr/bin/env python3
"""
Entity group record produced by group discovery
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from kubegroups.metrics.sink import EntityType


@dataclass
class EntityGroup:
    """
    Group of pods and containers sharing a parent controller

    A group is instance-scoped (one parent in one namespace, group_id
    kind/namespace/name) or kind-scoped (every parent of one kind, empty
    parent_name and group_id equal to the kind).
    """
    parent_kind: str
    parent_name: str
    group_id: str

    # Containers of this parent bucketed by container name, in discovery order
    container_groups: Dict[str, List[str]] = field(default_factory=dict)

    # Ordered set of member ids per entity type
    _members: Dict[EntityType, Dict[str, None]] = field(default_factory=dict, init=False, repr=False)

    def add_member(self, entity_type: EntityType, member_id: str) -> None:
        """Add a member; adding the same member again has no effect"""
        self._members.setdefault(EntityType(entity_type), {})[member_id] = None

    def get_members(self, entity_type: EntityType) -> List[str]:
        return list(self._members.get(EntityType(entity_type), {}))

    @property
    def members(self) -> Dict[EntityType, List[str]]:
        return {etype: list(ids) for etype, ids in self._members.items()}

    def member_count(self, entity_type: Optional[EntityType] = None) -> int:
        if entity_type is not None:
            return len(self._members.get(EntityType(entity_type), {}))
        return sum(len(ids) for ids in self._members.values())

    @property
    def is_kind_scoped(self) -> bool:
        return self.parent_name == ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for downstream consumers"""
        return {
            "group_id": self.group_id,
            "parent_kind": self.parent_kind,
            "parent_name": self.parent_name,
            "members": {etype.value: ids for etype, ids in self.members.items()},
            "container_groups": {name: list(ids) for name, ids in self.container_groups.items()}
        }
