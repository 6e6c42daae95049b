#!/usr/bin/env python3
"""
Records pod owner lineage into the entity metric sink
"""

from typing import Iterable, Optional

from kubernetes.client import V1OwnerReference, V1Pod

from kubegroups.core.keys import pod_key
from kubegroups.core.logging_config import get_logger
from .sink import EntityMetricSink, EntityStateMetric, EntityType, MetricProp

logger = get_logger(__name__)


def controller_reference(pod: V1Pod) -> Optional[V1OwnerReference]:
    """Return the controlling owner reference, or the first one if none is marked"""
    references = pod.metadata.owner_references or []
    for reference in references:
        if reference.controller:
            return reference
    return references[0] if references else None


def record_pod_owner_metrics(sink: EntityMetricSink, pods: Iterable[V1Pod]) -> int:
    """
    Add OwnerType and Owner metrics for every pod that has an owner reference

    Args:
        sink: Metric sink to populate
        pods: Pods to inspect

    Returns:
        Number of pods whose owner was recorded
    """
    recorded = 0
    for pod in pods:
        key = pod_key(pod)
        reference = controller_reference(pod)
        if reference is None:
            logger.debug(f"Pod {key} has no owner references")
            continue

        sink.add_new_metric_entries(
            EntityStateMetric(EntityType.POD, key, MetricProp.OWNER_TYPE, reference.kind),
            EntityStateMetric(EntityType.POD, key, MetricProp.OWNER, reference.name),
        )
        recorded += 1

    logger.debug(f"Recorded owner metrics for {recorded} pods")
    return recorded
