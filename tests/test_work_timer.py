"""Work timer tests."""

from datetime import datetime, timedelta

from workhours.services.work_timer import WorkTimer, format_elapsed


def test_format_elapsed() -> None:
    """Elapsed seconds should format as HH:MM:SS."""
    assert format_elapsed(0) == "00:00:00"
    assert format_elapsed(3725.9) == "01:02:05"
    assert format_elapsed(100 * 3600) == "100:00:00"


def test_timer_accumulates_runs() -> None:
    """Time from several start/stop runs should add up."""
    timer = WorkTimer()
    start = datetime(2025, 3, 29, 8, 0, 0)

    timer.start(start)
    assert timer.is_running
    assert timer.elapsed(start + timedelta(minutes=5)) == 300

    timer.stop(start + timedelta(minutes=30))
    timer.start(start + timedelta(hours=1))
    timer.stop(start + timedelta(hours=1, minutes=15))

    assert not timer.is_running
    assert timer.total_seconds == 45 * 60
    assert format_elapsed(timer.elapsed()) == "00:45:00"


def test_stop_without_start_is_noop() -> None:
    """Stopping an idle timer should change nothing."""
    timer = WorkTimer()
    timer.stop(datetime(2025, 1, 1))
    assert timer.total_seconds == 0


def test_start_while_running_keeps_original_start() -> None:
    """Starting a running timer should keep the first start time."""
    timer = WorkTimer()
    start = datetime(2025, 1, 1, 9, 0)
    timer.start(start)
    timer.start(start + timedelta(minutes=10))
    timer.stop(start + timedelta(minutes=20))

    assert timer.total_seconds == 20 * 60

    timer.reset()
    assert timer.total_seconds == 0
    assert not timer.is_running
