"""Tests for dashboard, report, work-list, team, dependency and navigation rollups."""

from datetime import date

from projecthub.models import DelayRequestStatus, TaskStatus, UserRole
from projecthub.services.dashboard import (
    dashboard_overview,
    my_tasks,
    reports_overview,
    visible_delay_requests,
)
from projecthub.schemas.project import DependencyType
from projecthub.services.navigation import visible_navigation
from projecthub.services.projects import (
    dependency_chain,
    list_project_summaries,
    project_activity,
    project_dependencies,
    project_detail,
    project_team,
)

TODAY = date(2026, 3, 20)


class TestDashboardOverview:
    def test_kpis(self, store):
        kpis = dashboard_overview(store, TODAY).kpis
        assert kpis.total_projects == 5
        assert kpis.in_progress == 3
        assert kpis.completed == 1
        assert kpis.red_health == 1

    def test_upcoming_milestones(self, store):
        overview = dashboard_overview(store, TODAY, upcoming_days=30)
        assert [m.id for m in overview.upcoming_milestones] == ["m7", "m10", "m5"]

    def test_upcoming_window_is_configurable(self, store):
        overview = dashboard_overview(store, TODAY, upcoming_days=11)
        assert [m.id for m in overview.upcoming_milestones] == ["m7", "m10"]

    def test_open_risks_by_severity(self, store):
        overview = dashboard_overview(store, TODAY)
        assert [r.id for r in overview.open_risks] == ["r3", "r7", "r2", "r5", "r6", "r1", "r4"]

    def test_pending_delays_and_warnings(self, store):
        overview = dashboard_overview(store, TODAY)
        assert [d.id for d in overview.pending_delay_requests] == ["dr1", "dr3"]
        assert [p.id for p in overview.warning_projects] == ["p2", "p4"]


class TestReportsOverview:
    def test_distributions(self, store):
        report = reports_overview(store)
        status = {e.key: (e.count, e.percent) for e in report.status_distribution}
        assert status == {
            "planning": (1, 20),
            "in_progress": (3, 60),
            "on_hold": (0, 0),
            "completed": (1, 20),
            "cancelled": (0, 0),
        }
        health = {e.key: (e.count, e.percent) for e in report.health_distribution}
        assert health == {"green": (3, 60), "yellow": (1, 20), "red": (1, 20)}

    def test_top_risks(self, store):
        assert [r.id for r in reports_overview(store).top_risks] == ["r3", "r2", "r7", "r5"]
        assert [r.id for r in reports_overview(store, top_risks_limit=2).top_risks] == ["r3", "r2"]


class TestMyTasks:
    def test_sorted_by_priority_then_due(self, store):
        result = my_tasks(store, store.find_user("u2"))
        assert [t.id for t in result.tasks] == [
            "t18", "t4", "t11", "t19", "t8", "t5", "t12", "t9", "t7", "t20", "t6", "t10",
        ]

    def test_counts_ignore_filter(self, store):
        result = my_tasks(store, store.find_user("u2"), status=TaskStatus.TODO)
        assert [t.id for t in result.tasks] == ["t7", "t20", "t6", "t10"]
        assert result.counts == {"todo": 4, "in_progress": 3, "review": 0, "done": 4, "blocked": 1}

    def test_user_without_tasks(self, store):
        result = my_tasks(store, store.find_user("u4"))
        assert result.tasks == []
        assert sum(result.counts.values()) == 0


class TestDelayRequestVisibility:
    def test_privileged_roles_see_all(self, store):
        for user_id in ("u1", "u4"):
            result = visible_delay_requests(store, store.find_user(user_id))
            assert len(result.requests) == 5
            assert result.counts == {"pending": 2, "approved": 2, "rejected": 1}

    def test_member_sees_own(self, store):
        result = visible_delay_requests(store, store.find_user("u3"))
        assert [r.id for r in result.requests] == ["dr3", "dr4"]
        assert result.counts == {"pending": 1, "approved": 1, "rejected": 0}

    def test_status_filter(self, store):
        result = visible_delay_requests(store, store.find_user("u3"), DelayRequestStatus.APPROVED)
        assert [r.id for r in result.requests] == ["dr4"]


class TestProjectPages:
    def test_summaries(self, store):
        summaries = {s.id: s for s in list_project_summaries(store)}
        assert summaries["p1"].progress == 50
        assert summaries["p1"].budget_percent == 38
        assert summaries["p5"].progress == 0

    def test_detail(self, store):
        detail = project_detail(store, store.find_project("p4"))
        assert detail.progress == 33
        assert detail.owner.name == "Wang PM"
        assert detail.task_stats.blocked == 1
        assert detail.milestones.completed == 1
        assert set(detail.smart_goals) == {"S", "M", "A", "R", "T"}

    def test_team(self, store):
        team = project_team(store, store.find_project("p1"))
        assert [(m.user_id, m.task_count, m.is_owner) for m in team] == [
            ("u1", 1, True), ("u3", 2, False), ("u2", 7, False),
        ]

    def test_team_of_project_without_tasks(self, store):
        team = project_team(store, store.find_project("p5"))
        assert [(m.user_id, m.task_count) for m in team] == [("u1", 0)]

    def test_activity_grouped_by_day(self, store):
        days = project_activity(store, "p4")
        assert [d.day for d in days] == [date(2026, 3, 15), date(2026, 2, 27)]
        assert [e.id for e in days[0].entries] == ["tl8", "tl7"]
        assert days[0].entries[0].task_title == "Model fine-tuning"

    def test_activity_empty(self, store):
        assert project_activity(store, "p5") == []


class TestNavigation:
    def test_pm_sees_everything(self):
        hrefs = [item.href for item in visible_navigation(UserRole.PM)]
        assert hrefs == ["/dashboard", "/projects", "/my-tasks", "/delay-requests", "/reports", "/drafts"]

    def test_member(self):
        hrefs = [item.href for item in visible_navigation(UserRole.MEMBER)]
        assert "/delay-requests" not in hrefs
        assert "/drafts" not in hrefs
        assert len(hrefs) == 4

    def test_executive(self):
        hrefs = [item.href for item in visible_navigation(UserRole.EXECUTIVE)]
        assert "/delay-requests" in hrefs
        assert "/drafts" not in hrefs


class TestDependencies:
    def test_six_or_more_tasks_give_five_edges(self, store):
        edges = project_dependencies(store, store.find_project("p1"))
        assert [(e.upstream_task_id, e.downstream_task_id, e.type) for e in edges] == [
            ("t1", "t2", DependencyType.FS),
            ("t2", "t3", DependencyType.FS),
            ("t3", "t4", DependencyType.SS),
            ("t4", "t5", DependencyType.FF),
            ("t5", "t6", DependencyType.SF),
        ]
        assert edges[0].id == "p1-dep1"
        assert edges[0].upstream_title == "User interviews"

    def test_short_chain(self, store):
        edges = project_dependencies(store, store.find_project("p3"))
        assert [(e.upstream_task_id, e.downstream_task_id) for e in edges] == [
            ("t15", "t16"), ("t16", "t17"),
        ]

    def test_fewer_than_two_tasks(self, store):
        assert project_dependencies(store, store.find_project("p5")) == []
        assert dependency_chain("p1", [store.find_task("t1")]) == []
