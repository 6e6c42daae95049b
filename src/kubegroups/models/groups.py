#!/usr/bin/env python3
"""
Pydantic models summarizing a group collection pass
"""

from datetime import datetime, timezone
from typing import Dict, List, Sequence

from pydantic import BaseModel, Field

from kubegroups.metrics.sink import EntityType
from kubegroups.repository.entity_group import EntityGroup


class EntityGroupSummary(BaseModel):
    """Summary of a single entity group"""
    group_id: str = Field(..., description="kind/namespace/name, or kind for kind-scoped groups")
    parent_kind: str = Field(..., description="Kind of the parent controller")
    parent_name: str = Field("", description="Parent name, empty for kind-scoped groups")
    kind_scoped: bool = Field(..., description="Whether the group spans every parent of its kind")
    pod_count: int = Field(0, ge=0, description="Number of pod members")
    container_count: int = Field(0, ge=0, description="Number of container members")
    container_groups: Dict[str, List[str]] = Field(default_factory=dict, description="Container ids by container name")

    @classmethod
    def from_group(cls, group: EntityGroup) -> "EntityGroupSummary":
        return cls(
            group_id=group.group_id,
            parent_kind=group.parent_kind,
            parent_name=group.parent_name,
            kind_scoped=group.is_kind_scoped,
            pod_count=group.member_count(EntityType.POD),
            container_count=group.member_count(EntityType.CONTAINER),
            container_groups={name: list(ids) for name, ids in group.container_groups.items()}
        )


class GroupCollectionResult(BaseModel):
    """Outcome of one collection pass"""
    worker_id: str = Field(..., description="Discovery worker that ran the pass")
    task_id: str = Field(..., description="Task whose pods were grouped")
    pod_count: int = Field(..., ge=0, description="Pods in the task")
    skipped_pods: List[str] = Field(default_factory=list, description="Pods whose owner did not resolve")
    instance_group_count: int = Field(0, ge=0, description="Number of per-parent groups")
    kind_group_count: int = Field(0, ge=0, description="Number of per-kind groups")
    groups: List[EntityGroupSummary] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Time of the pass")

    @classmethod
    def from_groups(cls, worker_id: str, task_id: str, pod_count: int,
                    groups: Sequence[EntityGroup], skipped_pods: Sequence[str]) -> "GroupCollectionResult":
        summaries = [EntityGroupSummary.from_group(group) for group in groups]
        kind_groups = sum(1 for summary in summaries if summary.kind_scoped)
        return cls(
            worker_id=worker_id,
            task_id=task_id,
            pod_count=pod_count,
            skipped_pods=list(skipped_pods),
            instance_group_count=len(summaries) - kind_groups,
            kind_group_count=kind_groups,
            groups=summaries
        )

    @property
    def grouped_pod_count(self) -> int:
        return self.pod_count - len(self.skipped_pods)
