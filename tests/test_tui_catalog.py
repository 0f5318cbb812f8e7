from __future__ import annotations

import dataclasses

import pytest

from oc_nav.tui.actions import ACTIONS
from oc_nav.tui.catalog import COMMAND_HISTORY, CUSTOM_COMMANDS, MenuNode, build_catalog, walk


def test_sibling_names_are_unique():
    def _check(nodes):
        names = [n.name for n in nodes]
        assert len(names) == len(set(names))
        for n in nodes:
            _check(n.children)

    _check(build_catalog())


def test_every_leaf_is_runnable_or_a_registered_action():
    for node in walk(build_catalog()):
        if node.is_group:
            assert not node.is_executable
            continue
        assert node.is_executable or node.name in ACTIONS, node.name


def test_top_level_ends_with_custom_and_history():
    names = [n.name for n in build_catalog()]
    assert names[-2:] == [CUSTOM_COMMANDS, COMMAND_HISTORY]
    assert names[0] == "Projects & Namespaces"


def test_commands_use_configured_binary():
    commands = [n.command for n in walk(build_catalog("kubectl")) if n.command]
    assert commands
    assert all(c.split()[0] == "kubectl" for c in commands)


def test_group_with_exec_flag_is_not_executable():
    child = MenuNode(name="child", command="oc get pods", is_exec=True)
    group = MenuNode(name="group", command="oc get all", is_exec=True, children=(child,))

    assert group.is_group
    assert group.is_executable is False
    assert child.is_executable is True


def test_nodes_are_immutable():
    node = build_catalog()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.name = "changed"  # type: ignore[misc]
