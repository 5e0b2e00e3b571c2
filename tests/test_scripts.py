"""Tests for the command line schedule printer."""

from datetime import date

from projecthub.db.session import make_engine
from scripts.print_schedule import print_schedule


def test_prints_project_schedule(capsys):
    db_engine = make_engine("sqlite://")
    assert print_schedule("p1", today=date(2026, 3, 20), db_engine=db_engine) is True

    out = capsys.readouterr().out
    assert "EC-2026" in out
    assert "Progress: 50%" in out
    assert "Budget used: 38%" in out
    assert "(151 days)" in out
    assert "2026-01 | 2026-02 | 2026-03 | 2026-04 | 2026-05" in out
    assert "Today (2026-03-20) at 51.66%" in out


def test_today_outside_window(capsys):
    db_engine = make_engine("sqlite://")
    print_schedule("p5", today=date(2026, 10, 19), db_engine=db_engine)
    assert "outside the window" in capsys.readouterr().out


def test_unknown_project(capsys):
    db_engine = make_engine("sqlite://")
    assert print_schedule("p99", db_engine=db_engine) is False
    assert "Project p99 not found." in capsys.readouterr().out
