"""Start/stop stopwatch for tracking time spent on a job."""

from __future__ import annotations

from datetime import datetime


def format_elapsed(seconds: float) -> str:
    """Format seconds as HH:MM:SS."""
    total: int = int(seconds)
    hours: int = total // 3600
    minutes: int = (total % 3600) // 60
    secs: int = total % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class WorkTimer:
    """Accumulates running time across several start/stop runs."""

    def __init__(self) -> None:
        self.started_at: datetime | None = None
        self.total_seconds: float = 0.0

    @property
    def is_running(self) -> bool:
        return self.started_at is not None

    def start(self, now: datetime | None = None) -> None:
        if self.is_running:
            return
        self.started_at = now or datetime.now()

    def stop(self, now: datetime | None = None) -> None:
        if self.started_at is None:
            return
        current: datetime = now or datetime.now()
        self.total_seconds += (current - self.started_at).total_seconds()
        self.started_at = None

    def elapsed(self, now: datetime | None = None) -> float:
        """Return accumulated seconds including the current run."""
        if self.started_at is None:
            return self.total_seconds
        current: datetime = now or datetime.now()
        return self.total_seconds + (current - self.started_at).total_seconds()

    def reset(self) -> None:
        self.started_at = None
        self.total_seconds = 0.0
