#!/usr/bin/env python3
"""
Group discovery service - wires settings, logging and the discovery worker
"""

import os
from typing import Iterable, List, Optional

from kubernetes.client import V1Pod

from kubegroups.config import Settings
from kubegroups.core.logging_config import get_logger, setup_logging
from kubegroups.core.task import Task
from kubegroups.core.worker import DiscoveryWorker
from kubegroups.metrics.owner import record_pod_owner_metrics
from kubegroups.repository.entity_group import EntityGroup


class GroupDiscoveryService:
    """Main service that coordinates group discovery components"""

    def __init__(self, config_path: Optional[str] = None, enable_colors: bool = True):
        """Initialize the discovery service from a YAML file or the environment"""
        if config_path and os.path.exists(config_path):
            self.settings = Settings.load_from_yaml_with_env_override(config_path)
        else:
            self.settings = Settings()

        self.config = self.settings.get_config_dict()

        setup_logging(self.settings.logging, enable_colors=enable_colors)
        self.logger = get_logger(__name__)

        self.worker = DiscoveryWorker(config=self.config)

        self.logger.info(f"Group discovery service initialized ({self.settings.environment})")
        if self.settings.debug:
            self.logger.info(f"Debug mode enabled. Settings: {self.settings.model_dump()}")

    def discover(self, pods: Iterable[V1Pod]) -> List[EntityGroup]:
        """
        Record pod owners from their owner references and group the pods

        Args:
            pods: Pod batch of one discovery pass

        Returns:
            Entity groups in discovery order
        """
        task = Task(pod_list=tuple(pods))
        recorded = record_pod_owner_metrics(self.worker.sink, task.pod_list)
        self.logger.debug(f"Recorded owners for {recorded}/{len(task)} pods")
        return self.worker.collect_groups(task)
