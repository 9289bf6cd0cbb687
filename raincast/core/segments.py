"""
Nowcast Bucketing and Segmentation

Places forecast samples on a minute axis relative to a reference time and
merges them into rain/dry segments.

Algorithm:
1. Sort points by timestamp
2. start = floor((timestamp - now) / 60s), end = start + bucket width
3. Drop buckets entirely in the past (end <= 0) or past the horizon
4. Flag a bucket as rain when value > threshold or precipitation > 0
5. Merge consecutive same-state buckets that touch or overlap

Buckets of the same state separated by a sampling gap are not bridged;
each side of the gap becomes its own segment.
"""

import math
from datetime import datetime
from typing import Iterable, List

from raincast.config import (
    DEFAULT_BUCKET_MINUTES,
    DEFAULT_HORIZON_MINUTES,
    DEFAULT_RAIN_THRESHOLD,
)
from raincast.models.nowcast import Bucket, ForecastPoint, Segment
from raincast.utils.log_util import app_logger

logger = app_logger(__name__)


def minutes_offset(timestamp: datetime, now: datetime) -> int:
    """Whole minutes from now to timestamp, floored (earlier is negative)."""
    return int(math.floor((timestamp - now).total_seconds() / 60))


def is_rain_point(point: ForecastPoint, threshold: float = DEFAULT_RAIN_THRESHOLD) -> bool:
    if point.value > threshold:
        return True
    return point.precipitation is not None and point.precipitation > 0


def bucketize(
    points: Iterable[ForecastPoint],
    now: datetime,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
    bucket_minutes: int = DEFAULT_BUCKET_MINUTES,
    threshold: float = DEFAULT_RAIN_THRESHOLD,
) -> List[Bucket]:
    """
    Map forecast points onto buckets relative to now.

    :param points: Forecast points in any order
    :param now: Reference instant
    :param horizon_minutes: Buckets starting after this offset are dropped
    :param bucket_minutes: Width of each bucket in minutes
    :param threshold: Signal value above which a point counts as rain
    :return: Buckets in ascending time order
    :raises ValueError: If bucket_minutes is not positive
    """
    if bucket_minutes <= 0:
        raise ValueError(f"bucket_minutes must be positive, got {bucket_minutes}")

    buckets = []
    for point in sorted(points, key=lambda p: p.timestamp):
        start = minutes_offset(point.timestamp, now)
        end = start + bucket_minutes
        if end <= 0 or start > horizon_minutes:
            continue
        buckets.append(
            Bucket(
                start_minutes=start,
                end_minutes=end,
                is_rain=is_rain_point(point, threshold),
            )
        )

    return buckets


def merge_buckets(buckets: Iterable[Bucket]) -> List[Segment]:
    """
    Collapse ordered buckets into rain/dry segments.

    :param buckets: Buckets in ascending time order
    :return: Segments covering the same time ranges, empty for no buckets
    """
    segments = []
    current = None

    for bucket in buckets:
        if current is None:
            current = [bucket.is_rain, bucket.start_minutes, bucket.end_minutes]
        elif bucket.is_rain == current[0] and bucket.start_minutes <= current[2]:
            current[2] = max(current[2], bucket.end_minutes)
        else:
            segments.append(Segment(*current))
            current = [bucket.is_rain, bucket.start_minutes, bucket.end_minutes]

    if current is not None:
        segments.append(Segment(*current))

    return segments


def build_segments(
    points: Iterable[ForecastPoint],
    now: datetime,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
    bucket_minutes: int = DEFAULT_BUCKET_MINUTES,
    threshold: float = DEFAULT_RAIN_THRESHOLD,
) -> List[Segment]:
    """
    Bucketize points and merge the buckets into segments.

    :param points: Forecast points in any order
    :param now: Reference instant
    :param horizon_minutes: Forecast window of interest in minutes
    :param bucket_minutes: Width of each bucket in minutes
    :param threshold: Signal value above which a point counts as rain
    :return: Segments in ascending time order
    """
    buckets = bucketize(points, now, horizon_minutes, bucket_minutes, threshold)
    segments = merge_buckets(buckets)
    logger.debug(f"Built {len(segments)} segments from {len(buckets)} buckets")
    return segments
