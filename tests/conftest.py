"""
Shared fixtures for the group discovery tests
"""

from typing import List, Optional

import pytest
from kubernetes.client import V1Container, V1ObjectMeta, V1OwnerReference, V1Pod, V1PodSpec

from kubegroups.core.keys import pod_key
from kubegroups.metrics.sink import EntityMetricSink, EntityStateMetric, EntityType, MetricProp


def make_pod(name: str, namespace: str = "ns1", containers: Optional[List[str]] = None,
             owner_kind: Optional[str] = None, owner_name: Optional[str] = None,
             uid: Optional[str] = None) -> V1Pod:
    """Build a pod with the given container names and an optional controller reference"""
    owner_references = None
    if owner_kind and owner_name:
        owner_references = [
            V1OwnerReference(
                api_version="apps/v1",
                kind=owner_kind,
                name=owner_name,
                uid=f"{owner_name}-uid",
                controller=True
            )
        ]
    return V1Pod(
        metadata=V1ObjectMeta(
            name=name,
            namespace=namespace,
            uid=uid or f"uid-{name}",
            owner_references=owner_references
        ),
        spec=V1PodSpec(containers=[V1Container(name=c) for c in (containers or [])])
    )


def add_owner(sink: EntityMetricSink, pod: V1Pod, owner_kind, owner_name) -> None:
    """Record raw owner metric values for a pod, including malformed ones"""
    key = pod_key(pod)
    sink.add_new_metric_entries(
        EntityStateMetric(EntityType.POD, key, MetricProp.OWNER_TYPE, owner_kind),
        EntityStateMetric(EntityType.POD, key, MetricProp.OWNER, owner_name),
    )


@pytest.fixture
def sink():
    return EntityMetricSink()


@pytest.fixture
def example_pods(sink):
    """Two ReplicaSet pods and one DaemonSet pod in ns1, owners recorded in the sink"""
    pod1 = make_pod("rs-a-1", containers=["c1", "c2"])
    pod2 = make_pod("rs-a-2", containers=["c1"])
    pod3 = make_pod("ds-b-1", containers=[])
    add_owner(sink, pod1, "ReplicaSet", "rs-a")
    add_owner(sink, pod2, "ReplicaSet", "rs-a")
    add_owner(sink, pod3, "DaemonSet", "ds-b")
    return [pod1, pod2, pod3]


def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
