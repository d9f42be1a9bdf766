"""Tests for task lifecycle operations."""

import pytest
from datetime import datetime, timedelta

from studywell.engine.civil_time import today_key
from studywell.errors import NotFound, ValidationError
from studywell.services.task_service import clamp_snooze_days
from studywell.services.view_cache import DASHBOARD_VIEW, TASK_LIST_VIEW


class TestCreate:
    def test_defaults(self, task_service):
        task = task_service.create(title="  Read chapter 3  ")

        assert task.title == "Read chapter 3"
        assert task.importance == 3
        assert task.is_done is False
        assert task.due_date is None
        assert task.estimate_min is None

    @pytest.mark.parametrize("title", [None, "", "   ", 42])
    def test_title_required(self, task_service, title):
        with pytest.raises(ValidationError):
            task_service.create(title=title)
        assert task_service.list() == []

    @pytest.mark.parametrize("importance", [0, 6, True, 2.5])
    def test_importance_out_of_range(self, task_service, importance):
        with pytest.raises(ValidationError):
            task_service.create(title="x", importance=importance)

    def test_negative_estimate(self, task_service):
        with pytest.raises(ValidationError):
            task_service.create(title="x", estimate_min=-5)

    def test_aware_due_date_stored_as_utc(self, task_service):
        from datetime import timezone

        due = datetime(2025, 6, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))
        task = task_service.create(title="x", due_date=due)
        assert task.due_date == datetime(2025, 6, 1, 0, 0)


class TestUpdate:
    def test_full_replace(self, task_service):
        task = task_service.create(title="Old", description="desc", estimate_min=20, importance=2)

        updated = task_service.update(task.id, title="New", importance=5)

        assert updated.title == "New"
        assert updated.importance == 5
        assert updated.description is None
        assert updated.estimate_min is None
        assert updated.created_at == task.created_at

    def test_is_done_kept_when_omitted(self, task_service):
        task = task_service.create(title="x")
        task_service.mark_done(task.id)

        assert task_service.update(task.id, title="y", importance=3).is_done is True
        assert task_service.update(task.id, title="y", importance=3, is_done=False).is_done is False

    def test_blank_title_leaves_task_unchanged(self, task_service):
        task = task_service.create(title="Keep me", importance=4)

        with pytest.raises(ValidationError):
            task_service.update(task.id, title="  ", importance=1)

        stored = task_service.get(task.id)
        assert stored.title == "Keep me"
        assert stored.importance == 4

    def test_missing_task(self, task_service):
        with pytest.raises(NotFound):
            task_service.update("missing", title="x", importance=3)


class TestDeleteAndDone:
    def test_delete_twice(self, task_service):
        task = task_service.create(title="x")
        task_service.delete(task.id)

        with pytest.raises(NotFound):
            task_service.delete(task.id)
        with pytest.raises(NotFound):
            task_service.get(task.id)

    def test_mark_done_is_idempotent(self, task_service):
        task = task_service.create(title="x")
        assert task_service.mark_done(task.id).is_done is True
        assert task_service.mark_done(task.id).is_done is True

    def test_mark_done_missing(self, task_service):
        with pytest.raises(NotFound):
            task_service.mark_done("missing")


class TestSnooze:
    @pytest.mark.parametrize("days,expected", [
        (None, 1), ("abc", 1), (float("nan"), 1), (True, 1),
        (0, 1), (-4, 1), (3, 3), ("2", 2), (2.5, 2.5), (100, 30),
    ])
    def test_clamp_snooze_days(self, days, expected):
        assert clamp_snooze_days(days) == expected

    def test_extends_existing_due_date(self, task_service):
        due = datetime(2030, 1, 1, 9, 0)
        task = task_service.create(title="x", due_date=due)

        snoozed = task_service.snooze(task.id, days=3)

        assert snoozed.due_date == due + timedelta(days=3)
        assert snoozed.is_done is False

    def test_clamped_to_thirty_days(self, task_service):
        due = datetime(2030, 1, 1, 9, 0)
        task = task_service.create(title="x", due_date=due)

        assert task_service.snooze(task.id, days=100).due_date == due + timedelta(days=30)

    def test_without_due_date_counts_from_now(self, task_service):
        now = datetime(2025, 6, 1, 12, 0)
        task = task_service.create(title="x")

        assert task_service.snooze(task.id, now=now).due_date == now + timedelta(days=1)

    def test_out_of_range_due_date(self, task_service):
        task = task_service.create(title="x", due_date=datetime(9999, 12, 20))

        with pytest.raises(ValidationError):
            task_service.snooze(task.id, days=30)
        assert task_service.get(task.id).due_date == datetime(9999, 12, 20)

    def test_missing_task(self, task_service):
        with pytest.raises(NotFound):
            task_service.snooze("missing", days=2)


class TestListing:
    def test_status_filter(self, task_service):
        open_task = task_service.create(title="open")
        done_task = task_service.create(title="done")
        task_service.mark_done(done_task.id)

        assert [t.id for t in task_service.list(status="open")] == [open_task.id]
        assert [t.id for t in task_service.list(status="done")] == [done_task.id]
        assert len(task_service.list()) == 2

    def test_invalid_filters(self, task_service):
        with pytest.raises(ValidationError):
            task_service.list(status="archived")
        with pytest.raises(ValidationError):
            task_service.list(sort="random")

    def test_score_sort(self, task_service):
        low = task_service.create(title="low", importance=1)
        high = task_service.create(title="high", importance=5)
        done = task_service.create(title="done", importance=5)
        task_service.mark_done(done.id)

        assert [t.id for t in task_service.list(sort="score")] == [high.id, low.id]


class TestDashboardInputs:
    def test_no_records_today(self, task_service):
        assert task_service.today_inputs() == (None, None)

    def test_uses_today_health_and_latest_mood(self, task_service, health_repository, mood_repository):
        now = datetime(2025, 6, 1, 3, 0)  # 12:00 JST
        health_repository.upsert(today_key(now), 1, None)
        mood_repository.create(2, None, at=now - timedelta(minutes=10))
        mood_repository.create(5, None, at=now - timedelta(minutes=1))

        assert task_service.today_inputs(now) == (1, 5)

    def test_top_by_score_limits_to_three(self, task_service):
        for importance in (1, 2, 3, 4, 5):
            task_service.create(title=f"i{importance}", importance=importance)

        top = task_service.top_by_score()

        assert [s.task.title for s in top] == ["i5", "i4", "i3"]
        assert top[0].health_coef == 0.9
        assert top[0].mood_coef == 1.0


class TestInvalidation:
    def test_every_mutation_invalidates_task_views(self, task_service, view_cache):
        def warm():
            view_cache.get_or_render(DASHBOARD_VIEW, lambda: "d")
            view_cache.get_or_render(TASK_LIST_VIEW, lambda: "l", variant="all/default")

        warm()
        task = task_service.create(title="x")
        assert not view_cache.is_cached(DASHBOARD_VIEW)
        assert not view_cache.is_cached(TASK_LIST_VIEW, "all/default")

        for mutate in (
            lambda: task_service.update(task.id, title="y", importance=2),
            lambda: task_service.snooze(task.id),
            lambda: task_service.mark_done(task.id),
            lambda: task_service.delete(task.id),
        ):
            warm()
            mutate()
            assert not view_cache.is_cached(DASHBOARD_VIEW)
            assert not view_cache.is_cached(TASK_LIST_VIEW, "all/default")

    def test_failed_validation_keeps_cache(self, task_service, view_cache):
        view_cache.get_or_render(DASHBOARD_VIEW, lambda: "d")
        with pytest.raises(ValidationError):
            task_service.create(title="")
        assert view_cache.is_cached(DASHBOARD_VIEW)
