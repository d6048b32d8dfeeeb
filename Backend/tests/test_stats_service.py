from datetime import date, datetime, timezone

from pomodoro.models.session import Session
from pomodoro.services.profile_service import compute_level, default_profile
from pomodoro.services.stats_service import (
    build_stats,
    format_day,
    local_date,
    task_breakdown,
    weekday_label,
)

# A Wednesday
TODAY = date(2024, 5, 15)


def _session(day: str, task: str = "focus", duration: int = 25) -> Session:
    return Session(
        task=task,
        duration=duration,
        type="focus",
        timestamp=datetime(2024, 5, 1, tzinfo=timezone.utc),
        date=day,
        user_id="default_user",
    )


def test_format_day_is_iso():
    assert format_day(date(2024, 1, 2)) == "2024-01-02"


def test_weekday_label():
    assert weekday_label(TODAY) == "Wed"
    assert weekday_label(date(2024, 5, 12)) == "Sun"


def test_local_date_uses_configured_timezone(monkeypatch):
    from pomodoro.config import settings

    instant = datetime(2024, 5, 15, 23, 30, tzinfo=timezone.utc)
    monkeypatch.setattr(settings, "TIMEZONE", "UTC")
    assert local_date(instant) == date(2024, 5, 15)
    monkeypatch.setattr(settings, "TIMEZONE", "Asia/Tokyo")
    assert local_date(instant) == date(2024, 5, 16)


def test_local_date_treats_naive_as_utc(monkeypatch):
    from pomodoro.config import settings

    monkeypatch.setattr(settings, "TIMEZONE", "UTC")
    assert local_date(datetime(2024, 5, 15, 12, 0)) == date(2024, 5, 15)


def test_compute_level():
    assert compute_level(0) == 1
    assert compute_level(1499) == 1
    assert compute_level(1500) == 2
    assert compute_level(3000) == 3


def test_build_stats_empty():
    stats = build_stats([], default_profile("default_user"), TODAY)
    assert stats["today_total"] == 0
    assert stats["today_sessions"] == 0
    assert stats["total_sessions"] == 0
    assert stats["task_breakdown"] == []
    assert [d["date"] for d in stats["weekly_data"]] == ["Thu", "Fri", "Sat", "Sun", "Mon", "Tue", "Wed"]
    assert [d["iso_date"] for d in stats["weekly_data"]][0] == "2024-05-09"
    assert all(d["sessions"] == 0 and d["minutes"] == 0 for d in stats["weekly_data"])
    assert stats["user"].level == 1


def test_build_stats_today_and_window():
    sessions = [
        _session("2024-05-15", "a", 25),
        _session("2024-05-15", "b", 50),
        _session("2024-05-14", "a", 10),
        _session("2024-05-09", "c", 5),
        _session("2024-05-08", "c", 99),  # just outside the window
        _session("2023-01-01", "d", 1),
    ]
    stats = build_stats(sessions, default_profile("default_user"), TODAY)

    assert stats["today_total"] == 75
    assert stats["today_sessions"] == 2
    assert stats["total_sessions"] == 6

    weekly = stats["weekly_data"]
    assert len(weekly) == 7
    assert weekly[0] == {"date": "Thu", "iso_date": "2024-05-09", "sessions": 1, "minutes": 5}
    assert weekly[5] == {"date": "Tue", "iso_date": "2024-05-14", "sessions": 1, "minutes": 10}
    assert weekly[6] == {"date": "Wed", "iso_date": "2024-05-15", "sessions": 2, "minutes": 75}
    assert sum(d["sessions"] for d in weekly) == 4

    assert sum(t["count"] for t in stats["task_breakdown"]) == stats["total_sessions"]


def test_build_stats_window_spans_month_boundary():
    sessions = [_session("2024-02-28"), _session("2024-03-01")]
    stats = build_stats(sessions, default_profile("u"), date(2024, 3, 1))
    iso_days = [d["iso_date"] for d in stats["weekly_data"]]
    assert iso_days == [
        "2024-02-24", "2024-02-25", "2024-02-26", "2024-02-27",
        "2024-02-28", "2024-02-29", "2024-03-01",
    ]
    assert stats["weekly_data"][4]["sessions"] == 1
    assert stats["weekly_data"][6]["sessions"] == 1


def test_task_breakdown_keeps_first_occurrence_order():
    sessions = [_session("2024-05-15", t) for t in ["write", "read", "write", "code", "read", "write"]]
    assert task_breakdown(sessions) == [
        {"task": "write", "count": 3},
        {"task": "read", "count": 2},
        {"task": "code", "count": 1},
    ]


def test_default_profile_is_transient():
    profile = default_profile("someone")
    assert profile.id is None
    assert profile.user_id == "someone"
    assert profile.name == "Guest"
    assert profile.total_focus == 0
    assert profile.streak == 0
    assert profile.level == 1
