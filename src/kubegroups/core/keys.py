"""
Identifier derivation for pods and containers
"""

from kubernetes.client import V1Pod


def pod_key(pod: V1Pod) -> str:
    """Key of a pod in the metric sink: namespace/name"""
    return f"{pod.metadata.namespace}/{pod.metadata.name}"


def container_id(pod_id: str, index: int) -> str:
    """Identifier of the container at position index in the pod spec"""
    return f"{pod_id}-{index}"
