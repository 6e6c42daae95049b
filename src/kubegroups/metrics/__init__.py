"""
Entity metric sink and owner lineage recording
"""

from .sink import (
    EntityType,
    MetricProp,
    MetricStoreError,
    MetricNotFoundError,
    EntityStateMetric,
    EntityMetricSink,
    generate_entity_state_metric_uid
)
from .owner import controller_reference, record_pod_owner_metrics

__all__ = [
    "EntityType",
    "MetricProp",
    "MetricStoreError",
    "MetricNotFoundError",
    "EntityStateMetric",
    "EntityMetricSink",
    "generate_entity_state_metric_uid",
    "controller_reference",
    "record_pod_owner_metrics"
]
