from __future__ import annotations

from conftest import FakeExecutor

from oc_nav.tui.history import HistoryLog


def test_append_assigns_increasing_sequence_numbers():
    log = HistoryLog()
    commands = ["oc get pods", ["oc", "logs", "web-1"], "oc get svc", ""]

    entries = [log.append(c) for c in commands]

    assert len(log) == len(commands)
    assert [e.sequence for e in entries] == [1, 2, 3, 4]
    assert [e.sequence for e in log.entries()] == [1, 2, 3, 4]


def test_entries_newest_first_is_a_view():
    log = HistoryLog()
    log.append("oc get pods")
    log.append("oc get svc")

    assert [e.command_line for e in log.entries(newest_first=True)] == ["oc get svc", "oc get pods"]
    assert [e.command_line for e in log.entries()] == ["oc get pods", "oc get svc"]
    assert log.latest().command_line == "oc get svc"


def test_string_and_argv_forms():
    log = HistoryLog()
    split = log.append("oc  get   pods")
    structured = log.append(["oc", "new-project", "demo", "--description=My demo app"])

    assert split.argv == ("oc", "get", "pods")
    assert split.command_line == "oc  get   pods"
    assert structured.argv[-1] == "--description=My demo app"
    assert structured.command_line == "oc new-project demo '--description=My demo app'"


def test_reexecute_records_a_new_entry():
    log = HistoryLog()
    executor = FakeExecutor(log)
    executor.execute(["oc", "logs", "web-1"])
    original = log.entries()[0]

    result = log.reexecute(original, executor)

    assert result.argv == ("oc", "logs", "web-1")
    assert len(log) == 2
    assert log.entries()[0] is original
    assert log.latest().sequence == 2
    assert log.latest().argv == original.argv


def test_snapshot_is_not_live():
    log = HistoryLog()
    log.append("oc get pods")
    snapshot = log.entries()
    log.append("oc get svc")

    assert len(snapshot) == 1
    assert len(list(log)) == 2
