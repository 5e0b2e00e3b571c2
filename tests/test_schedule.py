"""Tests for the schedule (Gantt) layout engine."""

from datetime import date

import pytest

from projecthub.models import Milestone, Project, Task
from projecthub.schemas.schedule import BarKind
from projecthub.services.schedule import (
    MIN_BAR_WIDTH,
    bar_geometry,
    compute_layout,
    schedule_layout,
    schedule_window,
)

EPS = 1e-9


def make_project(start=date(2026, 1, 15), end=date(2026, 4, 30)):
    return Project(id="px", name="Scratch", code="PX", start_date=start, end_date=end)


def make_milestone(milestone_id, start, due, progress=0):
    return Milestone(
        id=milestone_id, project_id="px", name=milestone_id,
        start_date=start, due_date=due, progress=progress,
    )


def make_task(task_id, start, due, estimated=10, actual=0):
    return Task(
        id=task_id, milestone_id="ma", project_id="px", title=task_id,
        start_date=start, due_date=due, estimated_hours=estimated, actual_hours=actual,
    )


def bar(layout, item_id):
    return next(b for b in layout.bars if b.item_id == item_id)


class TestWindow:
    def test_snaps_to_whole_months(self):
        milestones = [
            make_milestone("ma", date(2026, 1, 15), date(2026, 2, 28)),
            make_milestone("mb", date(2026, 3, 1), date(2026, 4, 30)),
        ]
        assert schedule_window(make_project(), milestones) == (date(2026, 1, 1), date(2026, 4, 30))

    def test_uses_earliest_start_and_latest_due(self):
        milestones = [
            make_milestone("ma", date(2026, 3, 15), date(2026, 5, 15)),
            make_milestone("mb", date(2026, 1, 15), date(2026, 2, 28)),
        ]
        assert schedule_window(make_project(), milestones) == (date(2026, 1, 1), date(2026, 5, 31))

    def test_project_dates_without_milestones(self):
        project = make_project(start=date(2026, 2, 10), end=date(2026, 3, 5))
        assert schedule_window(project, []) == (date(2026, 2, 1), date(2026, 3, 31))

    def test_inverted_window_falls_back_to_one_month(self):
        milestones = [make_milestone("ma", date(2026, 5, 10), date(2026, 3, 1))]
        assert schedule_window(make_project(), milestones) == (date(2026, 5, 1), date(2026, 5, 31))


class TestTwoMilestoneScenario:
    @pytest.fixture
    def layout(self):
        milestones = [
            make_milestone("ma", date(2026, 1, 15), date(2026, 2, 28), progress=100),
            make_milestone("mb", date(2026, 3, 1), date(2026, 4, 30), progress=45),
        ]
        return compute_layout(make_project(), milestones, {}, today=date(2026, 3, 20))

    def test_window_and_total_days(self, layout):
        assert layout.window_start == date(2026, 1, 1)
        assert layout.window_end == date(2026, 4, 30)
        assert layout.total_days == 120

    def test_month_buckets(self, layout):
        assert [(b.year, b.month, b.days) for b in layout.month_buckets] == [
            (2026, 1, 31), (2026, 2, 28), (2026, 3, 31), (2026, 4, 30),
        ]
        assert layout.month_buckets[0].label == "2026-01"
        assert sum(b.width_percent for b in layout.month_buckets) == pytest.approx(100)

    def test_first_bar(self, layout):
        first = bar(layout, "ma")
        assert first.left_percent == pytest.approx(14 / 120 * 100)
        assert first.width_percent == pytest.approx(45 / 120 * 100)
        assert first.fill_percent == 100
        assert first.kind == BarKind.MILESTONE

    def test_second_bar_ends_at_window_edge(self, layout):
        second = bar(layout, "mb")
        assert second.left_percent == pytest.approx(59 / 120 * 100)
        assert second.left_percent + second.width_percent == pytest.approx(100)
        assert second.fill_percent == 45

    def test_today_marker(self, layout):
        assert layout.today_offset_percent == pytest.approx(78 / 120 * 100)


class TestBarGeometry:
    WINDOW = (date(2026, 1, 1), date(2026, 12, 31))

    def geometry(self, start, due):
        window_start, window_end = self.WINDOW
        return bar_geometry(start, due, window_start, window_end, 365)

    def test_full_window(self):
        left, width = self.geometry(date(2026, 1, 1), date(2026, 12, 31))
        assert left == 0
        assert width == pytest.approx(100)

    def test_clamps_range_before_window(self):
        left, width = self.geometry(date(2025, 11, 1), date(2026, 1, 31))
        assert left == 0
        assert width == pytest.approx(31 / 365 * 100)

    def test_entirely_before_window(self):
        left, width = self.geometry(date(2025, 12, 1), date(2025, 12, 10))
        assert left == 0
        assert width == MIN_BAR_WIDTH

    def test_inverted_range_gets_minimum_width(self):
        left, width = self.geometry(date(2026, 3, 10), date(2026, 3, 1))
        assert width == MIN_BAR_WIDTH
        assert left >= 0

    def test_last_day_stays_inside(self):
        left, width = self.geometry(date(2026, 12, 31), date(2026, 12, 31))
        assert width == MIN_BAR_WIDTH
        assert left + width <= 100 + EPS

    def test_entirely_after_window(self):
        left, width = self.geometry(date(2027, 2, 1), date(2027, 2, 10))
        assert 0 <= left
        assert left + width <= 100 + EPS

    def test_custom_minimum(self):
        window_start, window_end = self.WINDOW
        _, width = bar_geometry(
            date(2026, 6, 1), date(2026, 6, 1), window_start, window_end, 365, min_width=2.0,
        )
        assert width == 2.0


class TestTasks:
    @pytest.fixture
    def layout(self):
        milestone = make_milestone("ma", date(2026, 1, 1), date(2026, 12, 31), progress=30)
        tasks = [
            make_task("ta", date(2026, 2, 1), date(2026, 2, 14), estimated=35, actual=20),
            make_task("tb", date(2027, 2, 1), date(2027, 3, 1), estimated=0, actual=5),
            make_task("tc", date(2026, 12, 31), date(2026, 12, 31), estimated=10, actual=15),
        ]
        return compute_layout(make_project(), [milestone], {"ma": tasks}, today=date(2027, 6, 1))

    def test_tasks_follow_their_milestone(self, layout):
        assert [b.item_id for b in layout.bars] == ["ma", "ta", "tb", "tc"]
        assert all(b.parent_id == "ma" for b in layout.bars[1:])
        assert layout.bars[1].kind == BarKind.TASK

    def test_tasks_do_not_widen_window(self, layout):
        assert layout.window_end == date(2026, 12, 31)
        assert layout.total_days == 365

    def test_task_fill(self, layout):
        assert bar(layout, "ta").fill_percent == 57
        assert bar(layout, "tb").fill_percent == 0
        assert bar(layout, "tc").fill_percent == 100

    def test_bars_inside_timeline(self, layout):
        for b in layout.bars:
            assert b.left_percent >= 0
            assert b.width_percent >= MIN_BAR_WIDTH
            assert b.left_percent + b.width_percent <= 100 + EPS

    def test_today_outside_window(self, layout):
        assert layout.today_offset_percent is None


class TestTodayMarker:
    def layout_for(self, today):
        milestones = [make_milestone("ma", date(2026, 1, 1), date(2026, 1, 31))]
        return compute_layout(make_project(), milestones, {}, today=today)

    def test_first_day(self):
        assert self.layout_for(date(2026, 1, 1)).today_offset_percent == 0

    def test_last_day(self):
        offset = self.layout_for(date(2026, 1, 31)).today_offset_percent
        assert offset == pytest.approx(30 / 31 * 100)
        assert offset < 100

    def test_before_and_after(self):
        assert self.layout_for(date(2025, 12, 31)).today_offset_percent is None
        assert self.layout_for(date(2026, 2, 1)).today_offset_percent is None


class TestDegenerateInput:
    def test_malformed_milestone(self):
        milestones = [make_milestone("ma", date(2026, 3, 10), date(2026, 3, 1))]
        layout = compute_layout(make_project(), milestones, {}, today=date(2026, 3, 5))
        assert layout.total_days == 31
        only = layout.bars[0]
        assert only.width_percent == MIN_BAR_WIDTH
        assert only.left_percent == pytest.approx(9 / 31 * 100)

    def test_inverted_window_still_renders(self):
        milestones = [make_milestone("ma", date(2026, 5, 10), date(2026, 3, 1))]
        layout = compute_layout(make_project(), milestones, {}, today=date(2026, 5, 20))
        assert layout.total_days >= 1
        assert layout.window_end >= layout.window_start
        assert layout.bars[0].left_percent + layout.bars[0].width_percent <= 100 + EPS

    def test_project_without_milestones(self):
        project = make_project(start=date(2026, 2, 10), end=date(2026, 3, 5))
        layout = compute_layout(project, [], {}, today=date(2026, 2, 1))
        assert layout.total_days == 59
        assert layout.bars == []
        assert len(layout.month_buckets) == 2
        assert layout.today_offset_percent == 0


class TestFixtureSchedule:
    def test_project_one(self, store):
        layout = schedule_layout(store, store.find_project("p1"), today=date(2026, 3, 20))
        assert layout.window_start == date(2026, 1, 1)
        assert layout.window_end == date(2026, 5, 31)
        assert layout.total_days == 151
        assert len(layout.month_buckets) == 5
        assert [b.item_id for b in layout.bars] == [
            "m1", "t1", "t2", "t3", "m2", "t4", "t5", "t6", "t7", "m3", "t8", "t9", "t10",
        ]
        m1 = bar(layout, "m1")
        assert m1.left_percent == pytest.approx(14 / 151 * 100)
        assert m1.width_percent == pytest.approx(45 / 151 * 100)
        assert layout.today_offset_percent == pytest.approx(78 / 151 * 100)

    def test_every_fixture_project_is_well_formed(self, store):
        for project in store.list_projects():
            layout = schedule_layout(store, project, today=date(2026, 3, 20))
            assert layout.total_days >= 1
            for b in layout.bars:
                assert b.left_percent >= 0
                assert b.left_percent + b.width_percent <= 100 + EPS
                assert 0 <= b.fill_percent <= 100
            if layout.today_offset_percent is not None:
                assert 0 <= layout.today_offset_percent <= 100

    def test_completed_project_today_outside(self, store):
        layout = schedule_layout(store, store.find_project("p5"), today=date(2026, 10, 19))
        assert layout.window_end == date(2026, 3, 31)
        assert layout.total_days == 90
        assert layout.today_offset_percent is None
        m14 = bar(layout, "m14")
        assert m14.left_percent == pytest.approx(59 / 90 * 100)
        assert m14.width_percent == pytest.approx(15 / 90 * 100)
