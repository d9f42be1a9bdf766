"""Tests for the list order and the recommendation order."""

from datetime import datetime, timedelta

from studywell.engine.ranking import list_order, rank_by_score, score_task
from studywell.models.task import Task


NOW = datetime(2025, 6, 1, 12, 0, 0)


def _task(sample_task_base, task_id, **overrides):
    return Task(**{**sample_task_base, "id": task_id, "title": task_id, **overrides})


class TestRankByScore:
    def test_done_tasks_are_excluded(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "open"),
            _task(sample_task_base, "done", is_done=True, importance=5),
        ]
        ranked = rank_by_score(tasks, condition=3, mood=3, now=NOW)
        assert [s.task.id for s in ranked] == ["open"]

    def test_highest_score_first(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "low", importance=2),
            _task(sample_task_base, "urgent", importance=3, due_date=NOW + timedelta(hours=5)),
            _task(sample_task_base, "high", importance=5),
        ]
        ranked = rank_by_score(tasks, condition=2, mood=4, now=NOW)
        assert [s.task.id for s in ranked] == ["high", "urgent", "low"]

    def test_ties_keep_input_order(self, sample_task_base):
        tasks = [_task(sample_task_base, f"t{i}") for i in range(5)]
        ranked = rank_by_score(tasks, now=NOW)
        assert [s.task.id for s in ranked] == ["t0", "t1", "t2", "t3", "t4"]

    def test_deterministic(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "a", importance=4),
            _task(sample_task_base, "b", importance=4, due_date=NOW + timedelta(days=2)),
            _task(sample_task_base, "c", importance=1),
        ]
        first = [s.task.id for s in rank_by_score(tasks, 1, 2, NOW)]
        second = [s.task.id for s in rank_by_score(tasks, 1, 2, NOW)]
        assert first == second

    def test_worked_example(self, sample_task_base):
        # importance 4, condition normal, mood 4, due in 10h: 4 * 0.9 * 1.2 * 1.2
        task = _task(sample_task_base, "x", importance=4, due_date=NOW + timedelta(hours=10))
        scored = score_task(task, condition=2, mood=4, now=NOW)
        assert round(scored.score, 4) == 5.184
        assert scored.due_status == "due_soon"


    def test_due_soon_outranks_same_importance(self, sample_task, task_due_soon):
        ranked = rank_by_score([sample_task.model_copy(update={"id": "later"}), task_due_soon], condition=3, mood=3)

        assert ranked[0].task.id == task_due_soon.id
        assert ranked[0].due_coef == 1.2
        assert ranked[1].due_coef == 1.0


class TestListOrder:
    def test_open_first_then_due_then_importance(self, sample_task_base):
        tasks = [
            _task(sample_task_base, "done-early", is_done=True, due_date=NOW),
            _task(sample_task_base, "no-due-high", importance=5),
            _task(sample_task_base, "due-later", due_date=NOW + timedelta(days=3)),
            _task(sample_task_base, "due-soon-low", importance=1, due_date=NOW + timedelta(days=1)),
            _task(sample_task_base, "due-soon-high", importance=4, due_date=NOW + timedelta(days=1)),
            _task(sample_task_base, "no-due-low", importance=2),
        ]
        ordered = [t.id for t in list_order(tasks)]
        assert ordered == [
            "due-soon-high",
            "due-soon-low",
            "due-later",
            "no-due-high",
            "no-due-low",
            "done-early",
        ]
