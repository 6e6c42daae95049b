"""
Tests for the group discovery service wiring
"""

import logging

import pytest

from conftest import make_pod
from kubegroups.main import GroupDiscoveryService
from kubegroups.metrics.sink import EntityType


@pytest.fixture
def restore_logging():
    """Put the root logger back the way the test found it"""
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


class TestGroupDiscoveryService:
    """Test settings, logging and worker wiring"""

    def test_environment_configures_logging_and_worker(self, tmp_path, monkeypatch, restore_logging):
        log_file = tmp_path / "logs" / "discovery.log"
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FILE", str(log_file))
        monkeypatch.setenv("DISCOVERY_WORKER_ID", "svc-worker")
        monkeypatch.setenv("DISCOVERY_INCLUDE_POD_MEMBERS", "true")

        service = GroupDiscoveryService(enable_colors=False)
        groups = service.discover([
            make_pod("web-1", containers=["app"], owner_kind="ReplicaSet", owner_name="web"),
            make_pod("static-1", containers=["app"]),
        ])
        for handler in restore_logging.handlers:
            handler.flush()

        assert restore_logging.level == logging.DEBUG
        assert service.worker.worker_id == "svc-worker"
        assert [g.group_id for g in groups] == ["ReplicaSet/ns1/web", "ReplicaSet"]
        assert groups[0].get_members(EntityType.POD) == ["uid-web-1"]
        assert service.worker.last_result.skipped_pods == ["ns1/static-1"]
        assert "[svc-worker] Task" in log_file.read_text()

    def test_yaml_config(self, tmp_path, monkeypatch, restore_logging):
        monkeypatch.delenv("LOG_FILE", raising=False)
        monkeypatch.delenv("DISCOVERY_INCLUDE_POD_MEMBERS", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "environment: production\n"
            "logging:\n"
            "  level: WARNING\n"
            "discovery:\n"
            "  worker_id: yaml-worker\n"
            "  resolve_workers: 2\n"
        )

        service = GroupDiscoveryService(str(config_file), enable_colors=False)

        assert service.settings.environment == "production"
        assert restore_logging.level == logging.WARNING
        assert service.worker.worker_id == "yaml-worker"
        assert service.worker.resolve_workers == 2
        assert service.worker.include_pod_members is False
