"""Tests for scheduler.py - virtual clock and pygame timer tasks."""

import pygame

from emoji_snake.scheduler import ManualScheduler, PygameScheduler


class TestManualScheduler:
    def test_fires_once_per_interval(self):
        calls = []
        sched = ManualScheduler()
        sched.every(100, lambda: calls.append(sched.now_ms))
        sched.advance(350)
        assert calls == [100, 200, 300]
        assert sched.now_ms == 350

    def test_cancel_stops_firing(self):
        calls = []
        sched = ManualScheduler()
        task = sched.every(50, lambda: calls.append(1))
        sched.advance(100)
        task.cancel()
        sched.advance(100)
        assert len(calls) == 2
        assert sched.tasks == []

    def test_replacement_inside_callback(self):
        """A callback that cancels itself and schedules a new task (reset)."""
        sched = ManualScheduler()
        fired = []
        holder = {}

        def first():
            fired.append(("first", sched.now_ms))
            holder["task"].cancel()
            holder["task"] = sched.every(30, lambda: fired.append(("second", sched.now_ms)))

        holder["task"] = sched.every(100, first)
        sched.advance(200)
        assert fired == [("first", 100), ("second", 130), ("second", 160), ("second", 190)]

    def test_interleaves_tasks_by_due_time(self):
        sched = ManualScheduler()
        order = []
        sched.every(30, lambda: order.append("a"))
        sched.every(50, lambda: order.append("b"))
        sched.advance(100)
        assert order == ["a", "b", "a", "a", "b"]


class TestPygameScheduler:
    def _patch_timer(self, monkeypatch):
        calls = []
        monkeypatch.setattr(pygame.time, "set_timer", lambda event, ms: calls.append((event, ms)))
        return calls

    def test_every_sets_timer(self, monkeypatch):
        calls = self._patch_timer(monkeypatch)
        sched = PygameScheduler()
        task = sched.every(120, lambda: None)
        event, ms = calls[-1]
        assert ms == 120
        assert event.type == sched.event_type
        assert event.task_id == task.task_id

    def test_dispatch_runs_current_task(self, monkeypatch):
        self._patch_timer(monkeypatch)
        sched = PygameScheduler()
        hits = []
        task = sched.every(100, lambda: hits.append(1))
        assert sched.dispatch(pygame.event.Event(sched.event_type, task_id=task.task_id)) is True
        assert hits == [1]

    def test_stale_event_dropped_after_replacement(self, monkeypatch):
        calls = self._patch_timer(monkeypatch)
        sched = PygameScheduler()
        hits = []
        old = sched.every(100, lambda: hits.append("old"))
        old.cancel()
        assert calls[-1][1] == 0
        sched.every(100, lambda: hits.append("new"))
        sched.dispatch(pygame.event.Event(sched.event_type, task_id=old.task_id))
        assert hits == []

    def test_foreign_events_pass_through(self, monkeypatch):
        self._patch_timer(monkeypatch)
        sched = PygameScheduler()
        sched.every(100, lambda: None)
        assert sched.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)) is False
