#!/usr/bin/env python3
"""
Discovery worker running group collection over tasks
"""

import time
from typing import Dict, List, Optional

from kubegroups.config.settings import Settings
from kubegroups.metrics.sink import EntityMetricSink
from kubegroups.models.groups import GroupCollectionResult
from kubegroups.repository.entity_group import EntityGroup
from .group_collector import GroupMetricsCollector
from .logging_config import get_logger
from .observability import metrics_recorder
from .task import Task

logger = get_logger(__name__)


class DiscoveryWorker:
    """Groups the pods of discovery tasks using a shared metric sink"""

    def __init__(self, worker_id: Optional[str] = None, sink: Optional[EntityMetricSink] = None,
                 config: Optional[Dict] = None):
        """
        Initialize discovery worker

        Args:
            worker_id: Worker id, defaults to the configured one
            sink: Metric sink with pod owner metrics; a new one is created if omitted
            config: Config dict as returned by Settings.get_config_dict(); read from
                the environment when omitted
        """
        self.config = config if config is not None else Settings().get_config_dict()
        discovery_config = self.config.get('discovery', {})

        self.worker_id = worker_id or discovery_config.get('worker_id', 'worker-0')
        self.sink = sink if sink is not None else EntityMetricSink()
        self.include_pod_members = discovery_config.get('include_pod_members', False)
        self.resolve_workers = discovery_config.get('resolve_workers', 1)
        self.last_result: Optional[GroupCollectionResult] = None

        logger.info(
            f"Discovery worker {self.worker_id} initialized "
            f"(include_pod_members={self.include_pod_members}, resolve_workers={self.resolve_workers})"
        )

    def collect_groups(self, task: Task) -> List[EntityGroup]:
        """
        Run one collection pass over the task's pods

        Args:
            task: Task holding the pod batch

        Returns:
            Entity groups in discovery order
        """
        start_time = time.monotonic()
        collector = GroupMetricsCollector.from_worker(self, task)
        groups = collector.collect_group_metrics()
        duration = time.monotonic() - start_time

        result = GroupCollectionResult.from_groups(
            worker_id=self.worker_id,
            task_id=task.task_id,
            pod_count=len(task),
            groups=groups,
            skipped_pods=collector.skipped_pods
        )
        self.last_result = result

        metrics_recorder.record_collection(
            worker_id=self.worker_id,
            instance_groups=result.instance_group_count,
            kind_groups=result.kind_group_count,
            grouped_pods=result.grouped_pod_count,
            duration=duration
        )

        logger.info(
            f"[{self.worker_id}] Task {task.task_id}: {result.instance_group_count} parent groups, "
            f"{result.kind_group_count} kind groups, {len(result.skipped_pods)}/{result.pod_count} pods skipped "
            f"in {duration:.3f}s"
        )
        return groups
