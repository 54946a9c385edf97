"""Completion percentages and the progress bands callers colour them by."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from vikfit.settings import get_settings


class ProgressBand(str, Enum):
    on_track = "on_track"
    moderate = "moderate"
    behind = "behind"
    at_risk = "at_risk"


@dataclass(frozen=True, slots=True)
class BandThresholds:
    on_track: float = 90.0
    moderate: float = 70.0
    behind: float = 50.0

    @classmethod
    def from_settings(cls) -> "BandThresholds":
        s = get_settings()
        return cls(on_track=s.PROGRESS_ON_TRACK, moderate=s.PROGRESS_MODERATE, behind=s.PROGRESS_BEHIND)


def completion_ratio(completed: int, assigned: int) -> float:
    """Unclamped completed/assigned; over-completion shows up as > 1.0."""
    if assigned <= 0:
        return 0.0
    return completed / assigned


def completion_percentage(completed: int, assigned: int) -> float:
    """Percent of assigned sessions completed, clamped to [0, 100].

    Nothing assigned means no progress is possible, so the answer is 0
    rather than 100 or undefined.
    """
    return max(0.0, min(100.0, completion_ratio(completed, assigned) * 100))


def progress_band(percentage: float, thresholds: BandThresholds | None = None) -> ProgressBand:
    t = thresholds or BandThresholds.from_settings()
    if percentage >= t.on_track:
        return ProgressBand.on_track
    if percentage >= t.moderate:
        return ProgressBand.moderate
    if percentage >= t.behind:
        return ProgressBand.behind
    return ProgressBand.at_risk
