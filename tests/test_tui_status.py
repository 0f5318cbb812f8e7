"""StatusNotifier tests.

Overlapping flashes follow the generation-counted policy: a superseded
flash never restores anything, and once the newest flash ends the bar
shows the current baseline.
"""
from __future__ import annotations

import threading
import time

from oc_nav.tui.status import StatusNotifier, format_baseline


class _Clock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_baseline_is_shown_without_overlay():
    status = StatusNotifier("ctx")
    assert status.displayed == "ctx"

    status.set_baseline("other")
    assert status.displayed == "other"


def test_flash_then_restore_to_baseline():
    status = StatusNotifier("base")
    status.flash("hello", 0.05)
    assert status.displayed == "hello"

    time.sleep(0.2)
    assert status.displayed == "base"
    status.close()


def test_overlapping_flashes_never_resurrect_the_older_one():
    """Flash A (100ms), then B (50ms) 10ms later: after 200ms the baseline shows."""
    seen: list[str] = []
    lock = threading.Lock()

    def _record(text):
        with lock:
            seen.append(text)

    status = StatusNotifier("base", on_change=_record)

    gen_a = status.flash("A", 0.1)
    time.sleep(0.01)
    gen_b = status.flash("B", 0.05)
    assert gen_b == gen_a + 1
    assert status.displayed == "B"

    time.sleep(0.19)
    assert status.displayed == "base"
    with lock:
        assert seen == ["A", "B", "base"]
    status.close()


def test_baseline_change_during_overlay_applies_after_it():
    clock = _Clock()
    status = StatusNotifier("old", clock=clock)

    status.flash("busy", 60)
    status.set_baseline("new")
    assert status.displayed == "busy"

    clock.now += 61
    assert status.displayed == "new"
    status.close()


def test_expiry_uses_clock_even_before_timer_fires():
    clock = _Clock()
    status = StatusNotifier("base", clock=clock, default_duration=2.0)

    status.flash("msg")
    clock.now += 1.9
    assert status.displayed == "msg"
    clock.now += 0.2
    assert status.displayed == "base"
    status.close()


def test_stale_restore_is_ignored():
    clock = _Clock()
    status = StatusNotifier("base", clock=clock)

    first = status.flash("A", 60)
    status.flash("B", 60)
    status._restore(first)

    assert status.displayed == "B"
    status.close()


def test_close_cancels_pending_timers():
    calls: list[str] = []
    status = StatusNotifier("base", on_change=calls.append)
    status.flash("A", 0.05)
    status.close()

    time.sleep(0.15)
    assert calls == ["A"]


def test_zero_duration_flash_notifies_overlay_before_restore():
    calls: list[str] = []
    restored = threading.Event()

    def _record(text):
        calls.append(text)
        if text == "base":
            restored.set()

    status = StatusNotifier("base", on_change=_record)
    status.flash("A", 0)

    assert restored.wait(timeout=2)
    assert calls == ["A", "base"]
    assert status.displayed == "base"
    status.close()


def test_on_change_errors_do_not_break_flash():
    def _boom(text):
        raise RuntimeError("render failed")

    status = StatusNotifier("base", on_change=_boom)
    status.flash("A", 30)
    assert status.displayed == "A"
    status.close()


def test_format_baseline_mentions_context_and_project():
    line = format_baseline("admin/cluster", "demo")
    assert "admin/cluster" in line
    assert "demo" in line
    assert "Ctrl+R: Refresh" in line
