"""Single-line status bar with a persistent baseline and transient overlays.

Overlays are generation counted. Each ``flash`` bumps the generation and
its delayed restore only applies while that generation is still the
newest one, so an older flash can never overwrite a newer message. When an
overlay ends the bar falls back to the *current* baseline, not to whatever
text happened to be on screen when the flash started.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from rich.markup import escape

logger = logging.getLogger(__name__)

DEFAULT_FLASH_SECONDS = 2.0


def format_baseline(context: str, project: str) -> str:
    """Build the persistent status line for the current cluster context."""
    return (
        f" Context: [cyan]{escape(context)}[/cyan] | Project: [green]{escape(project)}[/green] | "
        "Esc: Back | Ctrl+C: Quit | Ctrl+H: History | Ctrl+X: Custom | Ctrl+R: Refresh "
    )


@dataclass(frozen=True)
class Overlay:
    text: str
    expires_at: float
    generation: int


class StatusNotifier:
    """Owns the status text shown by the shell.

    Args:
        baseline: Initial persistent text
        on_change: Called with the displayed text whenever it may have changed
        default_duration: Flash duration used when none is given
        clock: Monotonic time source (seconds)
    """

    def __init__(
        self,
        baseline: str = "",
        on_change: Callable[[str], None] | None = None,
        default_duration: float = DEFAULT_FLASH_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._baseline = baseline
        self._overlay: Overlay | None = None
        self._generation = 0
        self._timers: dict[int, threading.Timer] = {}
        self._lock = threading.Lock()
        self.on_change = on_change
        self.default_duration = default_duration
        self.clock = clock

    @property
    def baseline(self) -> str:
        return self._baseline

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def displayed(self) -> str:
        with self._lock:
            return self._displayed_locked()

    def _displayed_locked(self) -> str:
        overlay = self._overlay
        if overlay is not None and self.clock() < overlay.expires_at:
            return overlay.text
        return self._baseline

    def set_baseline(self, text: str) -> None:
        with self._lock:
            self._baseline = text
            shown = self._displayed_locked()
        self._notify(shown)

    def flash(self, text: str, duration: float | None = None) -> int:
        """Show ``text`` for ``duration`` seconds, then fall back to the baseline.

        Returns:
            The generation assigned to this overlay
        """
        seconds = self.default_duration if duration is None else max(0.0, float(duration))
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._overlay = Overlay(text=text, expires_at=self.clock() + seconds, generation=generation)
            timer = threading.Timer(seconds, self._restore, args=(generation,))
            timer.daemon = True
            self._timers[generation] = timer
        # Listeners must see the overlay before its restore can fire
        self._notify(text)
        timer.start()
        return generation

    def _restore(self, generation: int) -> None:
        with self._lock:
            self._timers.pop(generation, None)
            if generation != self._generation:
                logger.debug("Overlay %d superseded by %d; skipping restore", generation, self._generation)
                return
            self._overlay = None
            shown = self._baseline
        self._notify(shown)

    def close(self) -> None:
        """Cancel pending restore timers."""
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()

    def _notify(self, text: str) -> None:
        if self.on_change is None:
            return
        try:
            self.on_change(text)
        except Exception:
            logger.exception("Status change callback failed")
