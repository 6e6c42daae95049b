"""
Tests for the EntityGroup record
"""

from kubegroups.metrics.sink import EntityType
from kubegroups.repository.entity_group import EntityGroup


def test_add_member_is_idempotent():
    group = EntityGroup("ReplicaSet", "web", "ReplicaSet/ns1/web")

    group.add_member(EntityType.CONTAINER, "uid-1-0")
    group.add_member(EntityType.CONTAINER, "uid-1-0")
    group.add_member(EntityType.CONTAINER, "uid-2-0")

    assert group.get_members(EntityType.CONTAINER) == ["uid-1-0", "uid-2-0"]
    assert group.member_count() == 2


def test_members_by_type():
    group = EntityGroup("DaemonSet", "", "DaemonSet")

    group.add_member(EntityType.POD, "uid-1")
    group.add_member("Container", "uid-1-0")

    assert group.members == {EntityType.POD: ["uid-1"], EntityType.CONTAINER: ["uid-1-0"]}
    assert group.member_count(EntityType.POD) == 1
    assert group.get_members(EntityType.NODE) == []
    assert group.is_kind_scoped


def test_to_dict():
    group = EntityGroup("ReplicaSet", "web", "ReplicaSet/ns1/web")
    group.add_member(EntityType.CONTAINER, "uid-1-0")
    group.container_groups["app"] = ["uid-1-0"]

    assert group.to_dict() == {
        "group_id": "ReplicaSet/ns1/web",
        "parent_kind": "ReplicaSet",
        "parent_name": "web",
        "members": {"Container": ["uid-1-0"]},
        "container_groups": {"app": ["uid-1-0"]},
    }
    assert not group.is_kind_scoped
