"""Tests for the progress aggregator."""

from datetime import date

import pytest

from projecthub.models import (
    Milestone, MilestoneStatus, Project, Task, TaskStatus,
)
from projecthub.services.progress import (
    budget_percent,
    milestone_fill_percent,
    milestone_rollup,
    project_progress,
    round_half_up,
    task_fill_percent,
    task_stats,
)


def make_project(**overrides):
    values = dict(
        id="px", name="Scratch", code="PX", start_date=date(2026, 1, 1),
        end_date=date(2026, 3, 31), budget=1000, budget_used=0,
    )
    values.update(overrides)
    return Project(**values)


def make_task(task_id, status=TaskStatus.TODO, estimated=10, actual=0, project_id="px"):
    return Task(
        id=task_id, milestone_id="mx", project_id=project_id, title=task_id,
        status=status, start_date=date(2026, 1, 5), due_date=date(2026, 1, 9),
        estimated_hours=estimated, actual_hours=actual,
    )


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [
        (0.5, 1), (1.5, 2), (2.5, 3), (37.5, 38), (44.49, 44), (-2.5, -3), (0, 0),
    ])
    def test_ties_away_from_zero(self, value, expected):
        assert round_half_up(value) == expected


class TestProjectProgress:
    def test_fixture_projects(self, store):
        assert project_progress(store, "p1") == 50
        assert project_progress(store, "p2") == 25
        assert project_progress(store, "p3") == 0
        assert project_progress(store, "p4") == 33

    def test_no_tasks_is_zero(self, store):
        assert project_progress(store, "p5") == 0
        assert project_progress(store, "p99") == 0

    def test_nine_of_twenty_done(self, session, store):
        session.add(make_project())
        session.add(Milestone(
            id="mx", project_id="px", name="All", start_date=date(2026, 1, 1),
            due_date=date(2026, 3, 31),
        ))
        session.add_all(
            make_task(f"x{i}", status=TaskStatus.DONE if i < 9 else TaskStatus.IN_PROGRESS)
            for i in range(20)
        )
        session.commit()
        assert project_progress(store, "px") == 45

    def test_recomputed_after_status_change(self, session, store):
        before = project_progress(store, "p1")
        task = store.find_task("t5")
        task.status = TaskStatus.DONE
        session.add(task)
        session.commit()
        after = project_progress(store, "p1")
        assert before == 50
        assert after == 60

    def test_monotonic_in_done_count(self, session, store):
        seen = [project_progress(store, "p1")]
        for task_id in ("t5", "t6", "t7", "t9", "t10"):
            task = store.find_task(task_id)
            task.status = TaskStatus.DONE
            session.add(task)
            session.commit()
            seen.append(project_progress(store, "p1"))
        assert seen == sorted(seen)
        assert seen[-1] == 100
        assert all(0 <= p <= 100 for p in seen)


class TestBudgetPercent:
    def test_fixture_values(self, store):
        assert budget_percent(store.find_project("p1")) == 38  # 37.5 rounds up
        assert budget_percent(store.find_project("p2")) == 45
        assert budget_percent(store.find_project("p4")) == 78  # 77.5 rounds up

    def test_zero_budget(self):
        assert budget_percent(make_project(budget=0, budget_used=500)) == 0

    def test_overspent(self):
        assert budget_percent(make_project(budget=1000, budget_used=1250)) == 125

    def test_exact_half_rounds_up(self):
        # 145 / 1000 * 100 is 14.499999... in floating point
        assert budget_percent(make_project(budget=1000, budget_used=145)) == 15
        assert budget_percent(make_project(budget=200, budget_used=29)) == 15


class TestFillPercent:
    def test_task_fill(self):
        assert task_fill_percent(make_task("a", estimated=35, actual=20)) == 57
        assert task_fill_percent(make_task("b", estimated=40, actual=42)) == 100
        assert task_fill_percent(make_task("c", estimated=30, actual=0)) == 0

    def test_task_fill_tie(self):
        assert task_fill_percent(make_task("e", estimated=1000, actual=145)) == 15

    def test_task_without_estimate(self):
        assert task_fill_percent(make_task("d", estimated=0, actual=12)) == 0

    def test_milestone_fill_clamped(self):
        milestone = Milestone(
            id="m", project_id="p", name="m", start_date=date(2026, 1, 1),
            due_date=date(2026, 1, 2), progress=130,
        )
        assert milestone_fill_percent(milestone) == 100


class TestRollups:
    def test_task_stats(self, store):
        stats = task_stats(store.tasks_by_project("p1"))
        assert (stats.total, stats.done, stats.in_progress, stats.blocked) == (10, 5, 2, 0)
        stats = task_stats(store.tasks_by_project("p4"))
        assert (stats.total, stats.done, stats.in_progress, stats.blocked) == (3, 1, 0, 1)

    def test_task_stats_empty(self):
        assert task_stats([]).total == 0

    def test_milestone_rollup(self, store):
        rollup = milestone_rollup(store.milestones_of("p1"))
        assert (rollup.total, rollup.completed, rollup.percent) == (3, 1, 33)
        rollup = milestone_rollup(store.milestones_of("p5"))
        assert rollup.percent == 100
        assert milestone_rollup([]).percent == 0

    def test_milestone_statuses(self, store):
        assert store.find_milestone("m10").status == MilestoneStatus.OVERDUE
