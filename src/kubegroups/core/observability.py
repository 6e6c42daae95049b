#!/usr/bin/env python3
"""
Prometheus metrics for group discovery
"""

from prometheus_client import Counter, Gauge, Histogram

from .logging_config import get_logger

logger = get_logger(__name__)

GROUPS_DISCOVERED = Gauge(
    'kubegroups_groups_discovered',
    'Entity groups produced by the last collection pass',
    ['worker_id', 'scope']  # scope is 'instance' or 'kind'
)

PODS_SKIPPED_TOTAL = Counter(
    'kubegroups_pods_skipped_total',
    'Pods left out of grouping because their owner did not resolve',
    ['reason']
)

PODS_GROUPED_TOTAL = Counter(
    'kubegroups_pods_grouped_total',
    'Pods folded into entity groups',
    ['worker_id']
)

COLLECTION_DURATION = Histogram(
    'kubegroups_collection_duration_seconds',
    'Time taken by one group collection pass',
    ['worker_id'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0]
)


class GroupMetricsRecorder:
    """Updates the discovery metrics"""

    def record_skipped_pod(self, reason: str):
        PODS_SKIPPED_TOTAL.labels(reason=reason).inc()

    def record_collection(self, worker_id: str, instance_groups: int, kind_groups: int,
                          grouped_pods: int, duration: float):
        """Record the outcome of one collection pass"""
        GROUPS_DISCOVERED.labels(worker_id=worker_id, scope='instance').set(instance_groups)
        GROUPS_DISCOVERED.labels(worker_id=worker_id, scope='kind').set(kind_groups)
        PODS_GROUPED_TOTAL.labels(worker_id=worker_id).inc(grouped_pods)
        COLLECTION_DURATION.labels(worker_id=worker_id).observe(duration)


# Global metrics recorder instance
metrics_recorder = GroupMetricsRecorder()
