#!/usr/bin/env python3
"""
Group metrics collector: folds pods and their containers into entity groups
keyed by the pod's parent controller
"""

import concurrent.futures
from typing import Dict, List, Optional, Sequence, Tuple

from kubernetes.client import V1Pod

from kubegroups.metrics.sink import (
    EntityMetricSink,
    EntityType,
    MetricProp,
    MetricStoreError,
    generate_entity_state_metric_uid
)
from kubegroups.repository.entity_group import EntityGroup
from .errors import EmptyValueError, MetricLookupError, OwnerResolutionError
from .keys import container_id, pod_key
from .logging_config import get_logger
from .observability import GroupMetricsRecorder, metrics_recorder

logger = get_logger(__name__)


def resolve_owner(sink: EntityMetricSink, entity_type: EntityType, entity_key: str) -> Tuple[str, str]:
    """
    Resolve the parent controller kind and name of an entity from the sink

    Args:
        sink: Metric sink holding OwnerType and Owner metrics
        entity_type: Type of the entity, e.g. EntityType.POD
        entity_key: Key of the entity in the sink

    Returns:
        (owner_kind, owner_name), both non-empty

    Raises:
        MetricLookupError: a metric is missing or the sink failed
        EmptyValueError: a metric value is None, not a string, or empty
    """
    owner_type_uid = generate_entity_state_metric_uid(entity_type, entity_key, MetricProp.OWNER_TYPE)
    owner_uid = generate_entity_state_metric_uid(entity_type, entity_key, MetricProp.OWNER)

    owner_type = _get_string_value(sink, owner_type_uid, entity_type, entity_key, "owner type")
    owner = _get_string_value(sink, owner_uid, entity_type, entity_key, "owner")
    return owner_type, owner


def _get_string_value(sink: EntityMetricSink, uid: str, entity_type: EntityType,
                      entity_key: str, label: str) -> str:
    etype = EntityType(entity_type).value.lower()
    try:
        metric = sink.get_metric(uid)
    except MetricStoreError as e:
        raise MetricLookupError(entity_key, f"Error getting {label} for {etype} {entity_key} --> {e}") from e

    value = metric.get_value()
    if not isinstance(value, str) or value == "":
        raise EmptyValueError(entity_key, f"Empty {label} for {etype} {entity_key}")
    return value


class GroupMetricsCollector:
    """Collects parent info for pods and containers and converts it to EntityGroup objects"""

    def __init__(self, pod_list: Sequence[V1Pod], metrics_sink: EntityMetricSink, worker_id: str = "",
                 include_pod_members: bool = False, resolve_workers: int = 1,
                 recorder: Optional[GroupMetricsRecorder] = None):
        """
        Initialize group metrics collector

        Args:
            pod_list: Pods of the current discovery task
            metrics_sink: Sink holding the owner metrics of those pods
            worker_id: Id of the discovery worker running the collection
            include_pod_members: Also add pods to their per-parent group
            resolve_workers: Threads used for owner resolution
            recorder: Metrics recorder, defaults to the global one
        """
        self.pod_list = list(pod_list)
        self.metrics_sink = metrics_sink
        self.worker_id = worker_id
        self.include_pod_members = include_pod_members
        self.resolve_workers = max(1, resolve_workers)
        self.recorder = recorder or metrics_recorder
        self.skipped_pods: List[str] = []

    @classmethod
    def from_worker(cls, worker, task) -> "GroupMetricsCollector":
        """Build a collector for a task using the worker's sink and discovery settings"""
        return cls(
            pod_list=task.pod_list,
            metrics_sink=worker.sink,
            worker_id=worker.worker_id,
            include_pod_members=worker.include_pod_members,
            resolve_workers=worker.resolve_workers
        )

    def collect_group_metrics(self) -> List[EntityGroup]:
        """
        Build the entity groups for the pod list

        Returns:
            Per-parent groups and per-kind groups in the order they were first seen
        """
        entity_group_list: List[EntityGroup] = []
        entity_groups: Dict[str, EntityGroup] = {}
        entity_groups_by_parent_kind: Dict[str, EntityGroup] = {}
        self.skipped_pods = []

        for pod, owner in zip(self.pod_list, self._resolve_owners()):
            if owner is None:
                continue
            owner_kind, owner_name = owner

            pod_id = pod.metadata.uid
            group_key = f"{owner_kind}/{pod.metadata.namespace}/{owner_name}"

            # group1: one group per parent, qualified as kind/namespace/name
            entity_group = entity_groups.get(group_key)
            if entity_group is None:
                entity_group = EntityGroup(owner_kind, owner_name, group_key)
                entity_groups[group_key] = entity_group
                entity_group_list.append(entity_group)

            # group2: one global group per parent kind
            group_by_parent_kind = entity_groups_by_parent_kind.get(owner_kind)
            if group_by_parent_kind is None:
                group_by_parent_kind = EntityGroup(owner_kind, "", owner_kind)
                entity_groups_by_parent_kind[owner_kind] = group_by_parent_kind
                entity_group_list.append(group_by_parent_kind)

            # Pods stay out of group1 by default: groups of pods per parent
            # are not needed downstream and are costly in large topologies.
            if self.include_pod_members:
                entity_group.add_member(EntityType.POD, pod_id)
            group_by_parent_kind.add_member(EntityType.POD, pod_id)

            containers = pod.spec.containers if pod.spec and pod.spec.containers else []
            for i, container in enumerate(containers):
                cid = container_id(pod_id, i)
                entity_group.add_member(EntityType.CONTAINER, cid)
                group_by_parent_kind.add_member(EntityType.CONTAINER, cid)

                # Containers sharing a name within one parent, for consistent resizing
                entity_group.container_groups.setdefault(container.name, []).append(cid)

        logger.debug(
            f"[{self.worker_id}] Collected {len(entity_group_list)} groups from "
            f"{len(self.pod_list)} pods ({len(self.skipped_pods)} skipped)"
        )
        return entity_group_list

    def _resolve_owners(self) -> List[Optional[Tuple[str, str]]]:
        """Resolve every pod's owner, keeping pod order; None marks a skipped pod"""
        if self.resolve_workers > 1 and len(self.pod_list) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.resolve_workers) as executor:
                results = list(executor.map(self._get_group_name_or_error, self.pod_list))
        else:
            results = [self._get_group_name_or_error(pod) for pod in self.pod_list]

        owners: List[Optional[Tuple[str, str]]] = []
        for pod, result in zip(self.pod_list, results):
            if isinstance(result, OwnerResolutionError):
                logger.debug(str(result))
                self.skipped_pods.append(pod_key(pod))
                reason = "empty_value" if isinstance(result, EmptyValueError) else "lookup"
                self.recorder.record_skipped_pod(reason)
                owners.append(None)
            else:
                owners.append(result)
        return owners

    def _get_group_name_or_error(self, pod: V1Pod):
        try:
            return self.get_group_name(EntityType.POD, pod_key(pod))
        except OwnerResolutionError as e:
            return e

    def get_group_name(self, entity_type: EntityType, entity_key: str) -> Tuple[str, str]:
        """Resolve (owner_kind, owner_name) for an entity of this collector's sink"""
        return resolve_owner(self.metrics_sink, entity_type, entity_key)
