"""Counter animation: reveals headline integers from zero over a fixed duration.

The animator is a small finite-state loop driven by a scheduler with an
asyncio-style ``call_later(delay, callback) -> handle`` method (an asyncio
event loop qualifies). Each tick re-arms the next one, so there is at most
one pending handle at any time, and ``cancel()`` always has it in hand.
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, Protocol

logger = logging.getLogger(__name__)

DURATION_MS = 2000
STEPS = 60


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class AnimationState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
    CANCELLED = "cancelled"


def value_at(target: int, step: int, steps: int = STEPS) -> int:
    """Displayed value after ``step`` of ``steps``: floor(progress * target), progress clamped to [0, 1]."""
    target = max(0, target)
    step = min(max(0, step), steps)
    return target * step // steps


def counter_sequence(target: int, steps: int = STEPS) -> list[int]:
    """Every value a counter displays, from the initial 0 to the final target."""
    return [value_at(target, step, steps) for step in range(steps + 1)]


class CounterAnimator:
    """Animate a set of named integer targets from 0 in lockstep.

    Args:
        targets: Name → target value. Negative targets are clamped to 0.
        scheduler: Provides ``call_later``; usually the running asyncio loop.
        on_update: Called with the full name → value mapping after every tick.
    """

    def __init__(
        self,
        targets: Mapping[str, int],
        scheduler: Scheduler,
        on_update: Callable[[dict[str, int]], None] | None = None,
        duration_ms: int = DURATION_MS,
        steps: int = STEPS,
    ) -> None:
        if steps <= 0:
            raise ValueError(f"steps must be positive, got {steps}")
        self.scheduler = scheduler
        self.on_update = on_update
        self.duration_ms = duration_ms
        self.steps = steps
        self.targets = {name: max(0, value) for name, value in targets.items()}
        self.values = {name: 0 for name in self.targets}
        self.step = 0
        self.state = AnimationState.IDLE
        self._handle: TimerHandle | None = None

    @property
    def step_delay(self) -> float:
        """Seconds between ticks."""
        return self.duration_ms / self.steps / 1000

    @property
    def progress(self) -> float:
        return min(self.step / self.steps, 1.0)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Begin animating. A no-op unless the animator is idle."""
        if self.state is not AnimationState.IDLE:
            return
        self.state = AnimationState.RUNNING
        logger.debug("Counter animation started: %s", self.targets)
        self._schedule()

    def cancel(self) -> None:
        """Tear down: drop the pending tick so no update can fire afterwards."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self.state is AnimationState.RUNNING or self.state is AnimationState.IDLE:
            self.state = AnimationState.CANCELLED

    def retarget(self, targets: Mapping[str, int]) -> None:
        """Restart cleanly from zero toward new targets."""
        was_started = self.state is not AnimationState.IDLE
        self.cancel()
        self.targets = {name: max(0, value) for name, value in targets.items()}
        self.values = {name: 0 for name in self.targets}
        self.step = 0
        self.state = AnimationState.IDLE
        if was_started:
            self.start()

    def _schedule(self) -> None:
        self._handle = self.scheduler.call_later(self.step_delay, self._tick)

    def _tick(self) -> None:
        self._handle = None
        if self.state is not AnimationState.RUNNING:
            return

        self.step += 1
        self.values = {name: value_at(target, self.step, self.steps) for name, target in self.targets.items()}
        if self.on_update is not None:
            self.on_update(dict(self.values))

        if self.progress >= 1.0:
            self.state = AnimationState.FINISHED
            logger.debug("Counter animation finished after %d steps", self.step)
            return
        self._schedule()
