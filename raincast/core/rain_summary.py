"""
Rain Pattern Classification

Reduces a nowcast to one of six narratives:

- Dry: no rain within the horizon
- RainingStopsDry: raining now, then dry for the rest of the horizon
- RainingOnAndOff: raining now, a dry break, then more rain
- RainingContinues: raining now without a dry spell ahead
- DryRainComing: dry now, one spell of rain ahead
- DryIntermittentComing: dry now, more than one spell of rain ahead

Every lookup is a scan over the segments in ascending start order and the
earliest match wins, so the result only depends on the inputs.

Usage:
    from raincast.core.rain_summary import classify

    pattern = classify(points, now)
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from raincast.config import (
    DEFAULT_BUCKET_MINUTES,
    DEFAULT_HORIZON_MINUTES,
    DEFAULT_RAIN_THRESHOLD,
)
from raincast.core.intensity import peak_intensity
from raincast.core.segments import build_segments
from raincast.models.nowcast import (
    Dry,
    DryIntermittentComing,
    DryRainComing,
    ForecastPoint,
    RainingContinues,
    RainingOnAndOff,
    RainingStopsDry,
    RainPattern,
    Segment,
)
from raincast.utils.log_util import app_logger

logger = app_logger(__name__)


def _first(
    segments: List[Segment], predicate: Callable[[Segment], bool]
) -> Optional[Segment]:
    return next((segment for segment in segments if predicate(segment)), None)


def current_segment(segments: List[Segment]) -> Optional[Segment]:
    """Return the segment straddling now (start <= 0 < end), if any."""
    return _first(segments, lambda s: s.start_minutes <= 0 < s.end_minutes)


def classify(
    points: Sequence[ForecastPoint],
    now: Optional[datetime] = None,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
    bucket_minutes: int = DEFAULT_BUCKET_MINUTES,
    threshold: float = DEFAULT_RAIN_THRESHOLD,
) -> RainPattern:
    """
    Classify a nowcast into a rain pattern.

    :param points: Forecast points in any order
    :param now: Reference instant, defaults to the current UTC time
    :param horizon_minutes: Forecast window of interest in minutes
    :param bucket_minutes: Width of each forecast sample in minutes
    :param threshold: Signal value above which a sample counts as rain
    :return: One RainPattern variant
    """
    if now is None:
        now = datetime.now(timezone.utc)

    segments = build_segments(points, now, horizon_minutes, bucket_minutes, threshold)
    if not any(segment.is_rain for segment in segments):
        logger.debug("No rain segments within horizon")
        return Dry()

    current = current_segment(segments)

    if current is not None and current.is_rain:
        dry_in = max(0, current.end_minutes)
        intensity = peak_intensity(
            points, now, current.start_minutes, current.end_minutes
        )
        next_dry = _first(
            segments,
            lambda s: not s.is_rain and s.start_minutes >= current.end_minutes,
        )
        if next_dry is None:
            return RainingContinues(intensity=intensity)

        later_rain = _first(
            segments,
            lambda s: s.is_rain and s.start_minutes >= next_dry.end_minutes,
        )
        if later_rain is not None:
            return RainingOnAndOff(dry_break_in_minutes=dry_in, intensity=intensity)

        return RainingStopsDry(dry_in_minutes=dry_in, intensity=intensity)

    next_rain = _first(segments, lambda s: s.is_rain and s.start_minutes >= 0)
    if next_rain is None:
        logger.debug("Rain only before now, reporting dry")
        return Dry()

    starts_in = max(0, next_rain.start_minutes)
    intensity = peak_intensity(
        points, now, next_rain.start_minutes, next_rain.end_minutes
    )
    later_rain = _first(
        segments,
        lambda s: s.is_rain and s.start_minutes >= next_rain.end_minutes,
    )
    if later_rain is not None:
        return DryIntermittentComing(starts_in_minutes=starts_in, intensity=intensity)

    return DryRainComing(
        starts_in_minutes=starts_in,
        lasts_minutes=max(bucket_minutes, next_rain.duration),
        intensity=intensity,
    )
