"""
Rain Intensity Classification

Converts forecast samples into precipitation rates and rates into one of
four intensity tiers.

Key concepts:
- A reported precipitation rate (mm/h) is used as is
- Without one, the dimensionless radar signal is converted with
  rate = 10 ** ((value - 109) / 32)
- The peak rate over a minute window relative to now picks the tier

Thresholds (mm/h):
- Heavy: >= 4
- Moderate: >= 1
- Light: >= 0.1
- Trace: below light

Usage:
    from raincast.core.intensity import peak_intensity

    intensity = peak_intensity(points, now, 0, 15)
"""

from datetime import datetime, timedelta
from typing import Sequence

import numpy as np
import pandas as pd

from raincast.config import REFLECTIVITY_OFFSET, REFLECTIVITY_SCALE
from raincast.models.nowcast import ForecastPoint, RainIntensity
from raincast.utils.dataframe_helpers import points_to_frame
from raincast.utils.log_util import app_logger

logger = app_logger(__name__)


def signal_to_rate(value: float) -> float:
    """
    Convert a radar signal value to an approximate rate in mm/h.

    :param value: Dimensionless forecast signal (0-255 scale, 0 is dry)
    :return: Rate in mm/h, 0.0 for non-positive signals
    """
    if value <= 0:
        return 0.0
    return 10 ** ((value - REFLECTIVITY_OFFSET) / REFLECTIVITY_SCALE)


def rate_for_point(point: ForecastPoint) -> float:
    """
    Return the precipitation rate of a forecast point in mm/h.

    :param point: Forecast point
    :return: Reported rate if present, otherwise the converted signal
    """
    if point.precipitation is not None:
        return float(point.precipitation)
    return signal_to_rate(point.value)


def intensity_for_rate(mm_per_hour: float) -> RainIntensity:
    return RainIntensity.from_mm_per_hour(mm_per_hour)


def frame_rates(df: pd.DataFrame) -> pd.Series:
    """
    Vectorised rate_for_point over a points DataFrame.

    :param df: DataFrame from points_to_frame
    :return: Series of rates in mm/h aligned with df
    """
    values = df["value"].to_numpy(dtype=float)
    with np.errstate(over="ignore"):
        converted = np.where(
            values > 0,
            np.power(10.0, (values - REFLECTIVITY_OFFSET) / REFLECTIVITY_SCALE),
            0.0,
        )
    rates = df["precipitation"].where(df["has_precipitation"], converted)
    return rates.astype(float)


def peak_rate(
    points: Sequence[ForecastPoint],
    now: datetime,
    start_minutes: int,
    end_minutes: int,
) -> float:
    """
    Return the maximum rate of the points inside a window.

    The window is [now + start_minutes, now + end_minutes), both ends in
    minutes relative to now.

    :param points: Forecast points in any order
    :param now: Reference instant
    :param start_minutes: Window start offset (inclusive)
    :param end_minutes: Window end offset (exclusive)
    :return: Peak rate in mm/h, 0.0 if no point falls in the window
    """
    df = points_to_frame(points)
    if df.empty:
        return 0.0

    start = now + timedelta(minutes=start_minutes)
    end = now + timedelta(minutes=end_minutes)
    mask = (df["timestamp"] >= start) & (df["timestamp"] < end)
    window = df[mask]
    if window.empty:
        return 0.0

    return float(frame_rates(window).max())


def peak_intensity(
    points: Sequence[ForecastPoint],
    now: datetime,
    start_minutes: int,
    end_minutes: int,
) -> RainIntensity:
    """
    Classify the peak rate of a window into an intensity tier.

    :param points: Forecast points in any order
    :param now: Reference instant
    :param start_minutes: Window start offset (inclusive)
    :param end_minutes: Window end offset (exclusive)
    :return: RainIntensity of the window's peak rate
    """
    rate = peak_rate(points, now, start_minutes, end_minutes)
    intensity = intensity_for_rate(rate)
    logger.debug(
        f"Peak rate {rate:.3f}mm/h in [{start_minutes}, {end_minutes}) -> {intensity.value}"
    )
    return intensity
