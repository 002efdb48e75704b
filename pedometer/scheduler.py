"""Cooperative scheduler running tasks at fixed rates off a millisecond tick."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import dataclass

TICK_FREQUENCY_HZ = 1000

IMU_FREQUENCY_HZ = 100
POLL_BUTTONS_FREQUENCY_HZ = 100
JOYSTICK_FREQUENCY_HZ = 8
ADC_FREQUENCY_HZ = 8
LEDS_FREQUENCY_HZ = 4
DISPLAY_FREQUENCY_HZ = 4
BUZZER_FREQUENCY_HZ = 1

_U32 = 1 << 32


def hz_to_ticks(frequency_hz: int) -> int:
    """Return the period, in ticks, of a task run at the given frequency."""
    if not isinstance(frequency_hz, int) or frequency_hz <= 0:
        raise ValueError(f"frequency must be a positive integer: {frequency_hz!r}")
    return TICK_FREQUENCY_HZ // frequency_hz


@dataclass
class PeriodicTask:
    """An action with its period and the tick it next becomes due after."""

    action: Callable[[], object]
    period_ticks: int
    next_run: int
    runs: int = 0

    def due(self, ticks: int) -> bool:
        """True once the clock has passed the task's next run time."""
        return ticks > self.next_run

    def fire(self) -> None:
        """Run the action and move the next run time on by one period."""
        self.action()
        self.next_run = (self.next_run + self.period_ticks) % _U32
        self.runs += 1


class Scheduler:
    """Runs each task whose time has come, in the order the tasks were added."""

    def __init__(self, clock: Callable[[], int]) -> None:
        self.clock = clock
        self.tasks: list[PeriodicTask] = []

    def _now(self) -> int:
        now = self.clock()
        if not isinstance(now, int):
            raise TypeError(f"clock must return an integer tick count: {now!r}")
        return now % _U32

    def add(
        self,
        action: Callable[[], object],
        frequency_hz: int,
        first_run: int | None = None,
    ) -> PeriodicTask:
        """Register an action; it first runs once the clock passes ``first_run``.

        Without ``first_run`` the task waits one period from now.
        """
        period = hz_to_ticks(frequency_hz)
        if first_run is None:
            first_run = self._now() + period
        task = PeriodicTask(action, period, first_run % _U32)
        self.tasks.append(task)
        return task

    def run_pending(self) -> int:
        """Read the clock once, run every due task and return how many ran."""
        ticks = self._now()
        ran = 0
        for task in self.tasks:
            if task.due(ticks):
                task.fire()
                ran += 1
        return ran

    def run(self, iterations: int | None = None) -> int:
        """Poll the tasks ``iterations`` times, or forever; return the runs made."""
        if iterations is not None and iterations < 0:
            raise ValueError(f"iterations must not be negative: {iterations!r}")
        loops = itertools.count() if iterations is None else range(iterations)
        return sum(self.run_pending() for _ in loops)