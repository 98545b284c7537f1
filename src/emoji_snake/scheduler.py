# src/emoji_snake/scheduler.py
from __future__ import annotations
from typing import Callable, List, Optional

import pygame  # type: ignore


class RepeatingTask:
    """Handle for a callback fired every `interval_ms`; cancel() stops it for good."""

    def __init__(self, interval_ms: int, callback: Callable[[], None]):
        self.interval_ms = interval_ms
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        self.active = False


# ---------- Virtual clock (tests, headless) ----------
class _ManualTask(RepeatingTask):
    def __init__(self, interval_ms: int, callback: Callable[[], None], due_ms: int):
        super().__init__(interval_ms, callback)
        self.due_ms = due_ms


class ManualScheduler:
    """
    Deterministic scheduler driven by advance(). Tasks fire once per elapsed
    interval, in due-time order; a task cancelled mid-advance stops firing.
    """

    def __init__(self):
        self.now_ms = 0
        self.tasks: List[_ManualTask] = []

    def every(self, interval_ms: int, callback: Callable[[], None]) -> RepeatingTask:
        task = _ManualTask(interval_ms, callback, self.now_ms + interval_ms)
        self.tasks.append(task)
        return task

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            self.tasks = [t for t in self.tasks if t.active]
            due = [t for t in self.tasks if t.due_ms <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due_ms)
            self.now_ms = task.due_ms
            task.due_ms += task.interval_ms
            task.callback()
        self.now_ms = target


# ---------- pygame timers ----------
class _PygameTask(RepeatingTask):
    def __init__(self, interval_ms: int, callback: Callable[[], None], owner: "PygameScheduler", task_id: int):
        super().__init__(interval_ms, callback)
        self.owner = owner
        self.task_id = task_id

    def cancel(self) -> None:
        if self.active and self.owner.current is self:
            pygame.time.set_timer(self.owner.event_type, 0)
            self.owner.current = None
        super().cancel()


class PygameScheduler:
    """
    Repeating task on top of pygame.time.set_timer. pygame keeps one timer
    per event type, so each scheduler runs one task at a time: every()
    cancels the running task. Timer events carry a `task_id`, and events
    still queued for a cancelled task are dropped. The main loop must pass
    every event to dispatch().
    """

    def __init__(self):
        self.event_type = pygame.event.custom_type()
        self.current: Optional[_PygameTask] = None
        self._next_id = 0

    def every(self, interval_ms: int, callback: Callable[[], None]) -> RepeatingTask:
        if self.current is not None:
            self.current.cancel()
        self._next_id += 1
        task = _PygameTask(interval_ms, callback, self, self._next_id)
        self.current = task
        pygame.time.set_timer(pygame.event.Event(self.event_type, task_id=task.task_id), interval_ms)
        return task

    def dispatch(self, event) -> bool:
        """Run the task owning `event`; True if the event was one of ours."""
        if event.type != self.event_type:
            return False
        task = self.current
        if task is not None and task.active and getattr(event, "task_id", None) == task.task_id:
            task.callback()
        return True
