#!/usr/bin/env python3
"""
In-memory sink of entity state metrics keyed by metric UID
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from kubegroups.core.logging_config import get_logger

logger = get_logger(__name__)


class EntityType(str, Enum):
    """Discovered entity types"""
    POD = "Pod"
    CONTAINER = "Container"
    NODE = "Node"
    CLUSTER = "Cluster"


class MetricProp(str, Enum):
    """Entity state properties kept in the sink"""
    OWNER_TYPE = "OwnerType"
    OWNER = "Owner"


class MetricStoreError(Exception):
    """Base error reported by the metric sink"""


class MetricNotFoundError(MetricStoreError, KeyError):
    """Raised when the sink holds no metric for a UID"""

    def __init__(self, uid: str):
        super().__init__(uid)
        self.uid = uid

    def __str__(self) -> str:
        return f"Missing metric entry {self.uid}"


def generate_entity_state_metric_uid(entity_type: EntityType, entity_key: str, prop: MetricProp) -> str:
    """Build the sink key for a state property of one entity"""
    return f"{EntityType(entity_type).value}-{entity_key}-{MetricProp(prop).value}"


@dataclass(frozen=True)
class EntityStateMetric:
    """A single state value recorded for an entity"""
    entity_type: EntityType
    entity_key: str
    prop: MetricProp
    value: Any

    @property
    def uid(self) -> str:
        return generate_entity_state_metric_uid(self.entity_type, self.entity_key, self.prop)

    def get_value(self) -> Any:
        return self.value


class EntityMetricSink:
    """Thread-safe store of entity metrics shared by discovery workers"""

    def __init__(self):
        self._metrics: Dict[str, EntityStateMetric] = {}
        self._lock = threading.Lock()

    def add_new_metric_entries(self, *metrics: EntityStateMetric) -> None:
        """Insert metrics, replacing any entry with the same UID"""
        with self._lock:
            for metric in metrics:
                self._metrics[metric.uid] = metric

    def update_metric_entry(self, metric: EntityStateMetric) -> None:
        """Replace an existing metric; raises MetricNotFoundError if it is not stored"""
        with self._lock:
            if metric.uid not in self._metrics:
                raise MetricNotFoundError(metric.uid)
            self._metrics[metric.uid] = metric

    def get_metric(self, uid: str) -> EntityStateMetric:
        with self._lock:
            try:
                return self._metrics[uid]
            except KeyError:
                raise MetricNotFoundError(uid) from None

    def get_all_metrics(self) -> List[EntityStateMetric]:
        with self._lock:
            return list(self._metrics.values())

    def clear(self) -> None:
        with self._lock:
            count = len(self._metrics)
            self._metrics.clear()
        logger.debug(f"Cleared {count} metric entries")

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def __contains__(self, uid: object) -> bool:
        with self._lock:
            return uid in self._metrics
