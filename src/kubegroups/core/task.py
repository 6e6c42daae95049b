"""
Discovery task holding the pod batch of one collection pass
"""

import uuid
from dataclasses import dataclass, field
from typing import Tuple

from kubernetes.client import V1Pod


@dataclass(frozen=True)
class Task:
    """Immutable snapshot of the pods assigned to a discovery worker"""
    pod_list: Tuple[V1Pod, ...] = ()
    task_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        # Freeze whatever sequence the caller handed in
        object.__setattr__(self, "pod_list", tuple(self.pod_list))

    def __len__(self) -> int:
        return len(self.pod_list)
