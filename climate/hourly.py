# ABOUTME: Builds the rolling hourly forecast window anchored on the current hour.
# ABOUTME: Concatenates consecutive days so the window crosses midnight without special cases.

from collections.abc import Sequence
from datetime import datetime
from itertools import chain

from climate.models import HourlySample

HOURLY_WINDOW_SIZE = 12


def current_index(samples: Sequence[HourlySample], now: datetime) -> int:
    """Index of the first sample at or after the start of now's hour.

    Returns the last index when every sample is in the past, and 0 for an empty sequence.
    """
    if not samples:
        return 0
    anchor = now.replace(minute=0, second=0, microsecond=0)
    for i, sample in enumerate(samples):
        if sample.timestamp >= anchor:
            return i
    return len(samples) - 1


def build_window(
    recent_days: Sequence[Sequence[HourlySample]],
    now: datetime,
    size: int = HOURLY_WINDOW_SIZE,
) -> list[HourlySample]:
    """Select `size` consecutive samples starting one hour before the current hour.

    Args:
        recent_days: Per-day hourly samples in chronological order, usually today and tomorrow.
        now: Reference time; must be comparable with the sample timestamps.
        size: Maximum number of samples to return.
    """
    samples = list(chain.from_iterable(recent_days))
    start = max(0, current_index(samples, now) - 1)
    return samples[start : start + size]
