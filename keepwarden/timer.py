"""Tagged delayed, repeating, continuous and tweening callbacks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, MutableMapping, Mapping, Optional

from keepwarden.tweening import tween_value

Action = Callable[[float], None]
AfterAction = Callable[[], None]

_HEX = "0123456789abcdef"


class TimerTaskType(Enum):
    """Kinds of scheduled task."""

    AFTER = auto()
    EVERY = auto()
    TWEEN = auto()
    DURING = auto()


def _noop() -> None:
    return None


def generate_uuid() -> str:
    """Return a random 36-character hex identifier in 8-4-4-4-12 form."""
    return "".join(
        "-" if i in (8, 13, 18, 23) else random.choice(_HEX) for i in range(36)
    )


def collect_payload(
    subject: MutableMapping[str, float], target: Mapping[str, float]
) -> list[tuple[str, float]]:
    """Return the per-key distance from ``subject`` to ``target``.

    Keys missing from ``subject`` are added to it with value 0.
    """
    return [(key, value - subject.setdefault(key, 0.0)) for key, value in target.items()]


@dataclass
class _TimerTask:
    type: TimerTaskType
    delay: float
    action: Action = lambda dt: None
    after_action: AfterAction = _noop
    time: float = 0.0
    count: int = 0
    counter: int = 0
    subject: Optional[MutableMapping[str, float]] = None
    method: str = "linear"
    args: dict = field(default_factory=dict)
    payload: list = field(default_factory=list)
    last_s: float = 0.0


class Timer:
    """Runs callbacks keyed by tag as time is fed in through :meth:`update`."""

    def __init__(self) -> None:
        self._tasks: dict[str, _TimerTask] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tasks

    def _schedule(self, tag: str, task: _TimerTask) -> str:
        if not tag:
            tag = generate_uuid()
        self.cancel(tag)
        self._tasks[tag] = task
        return tag

    def after(self, delay: float, action: Action, tag: str = "") -> str:
        """Call ``action(dt)`` once after ``delay`` seconds."""
        return self._schedule(tag, _TimerTask(TimerTaskType.AFTER, delay, action))

    def during(
        self,
        delay: float,
        action: Action,
        after_action: Optional[AfterAction] = None,
        tag: str = "",
    ) -> str:
        """Call ``action(dt)`` every update for ``delay`` seconds, then ``after_action``."""
        task = _TimerTask(TimerTaskType.DURING, delay, action, after_action or _noop)
        return self._schedule(tag, task)

    def every(
        self,
        delay: float,
        action: Action,
        count: int = 0,
        after_action: Optional[AfterAction] = None,
        tag: str = "",
    ) -> str:
        """Call ``action(dt)`` every ``delay`` seconds; ``count`` 0 repeats forever."""
        task = _TimerTask(
            TimerTaskType.EVERY, delay, action, after_action or _noop, count=count
        )
        return self._schedule(tag, task)

    def tween(
        self,
        delay: float,
        subject: MutableMapping[str, float],
        target: Mapping[str, float],
        method: str = "linear",
        after_action: Optional[AfterAction] = None,
        tag: str = "",
        args: Optional[Mapping[str, float]] = None,
    ) -> str:
        """Move the values of ``subject`` towards ``target`` over ``delay`` seconds."""
        task = _TimerTask(
            TimerTaskType.TWEEN,
            delay,
            after_action=after_action or _noop,
            subject=subject,
            method=method,
            args=dict(args or {}),
            payload=collect_payload(subject, target),
        )
        return self._schedule(tag, task)

    def cancel(self, tag: str) -> None:
        """Drop the task with this tag, if any."""
        self._tasks.pop(tag, None)

    def _finish(self, tag: str, task: _TimerTask) -> None:
        if self._tasks.get(tag) is task:
            del self._tasks[tag]

    def update(self, dt: float) -> None:
        """Advance every task by ``dt`` seconds."""
        for tag, task in list(self._tasks.items()):
            if self._tasks.get(tag) is not task:
                continue
            task.time += dt

            if task.type is TimerTaskType.AFTER:
                if task.time >= task.delay:
                    task.action(dt)
                    self._finish(tag, task)

            elif task.type is TimerTaskType.EVERY:
                if task.time >= task.delay:
                    task.action(dt)
                    task.time -= task.delay
                    if task.count > 0:
                        task.counter += 1
                        if task.counter >= task.count:
                            task.after_action()
                            self._finish(tag, task)

            elif task.type is TimerTaskType.TWEEN:
                progress = 1.0 if task.delay == 0 else min(1.0, task.time / task.delay)
                s = tween_value(task.method, progress, task.args)
                ds = s - task.last_s
                task.last_s = s
                for key, delta in task.payload:
                    task.subject[key] = task.subject.get(key, 0.0) + delta * ds
                if task.time >= task.delay:
                    task.after_action()
                    self._finish(tag, task)

            elif task.type is TimerTaskType.DURING:
                task.action(dt)
                if task.time >= task.delay:
                    task.after_action()
                    self._finish(tag, task)