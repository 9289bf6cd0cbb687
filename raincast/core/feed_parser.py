"""
Forecast Feed Parsing

Translates a decoded nowcast payload into ForecastPoints before it reaches
the classifier.

Payload shape (graphdata Rain3Hour / Rain24Hour):
    {
        "forecasts": [
            {"datetime": "2024-05-01T14:05:00", "value": 12.0, "precipitation": 0.3},
            ...
        ]
    }

- datetime is local time of the feed zone without an offset
- value defaults to 0 when missing; numeric fields must be JSON numbers (no
  strings or booleans)
- the rate may be published under the misspelt "precipation" key
- entries without a usable datetime are dropped, the rest are sorted

Usage:
    from raincast.core.feed_parser import parse_forecast_payload

    points = parse_forecast_payload(response.json())
"""

from typing import Any, Dict, List, Optional

from raincast.config import FEED_TIMEZONE, SPARKLINE_MAX_POINTS
from raincast.models.nowcast import ForecastPoint
from raincast.utils.date_util import to_date
from raincast.utils.log_util import app_logger

logger = app_logger(__name__)

PRECIPITATION_KEYS = ("precipitation", "precipation")


class FeedFormatError(ValueError):
    """Raised when a payload does not carry a forecasts list."""


def _optional_float(raw: Any) -> Optional[float]:
    if raw is None:
        return None
    # JSON numbers only; bool is an int subclass
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise TypeError(f"Expected a number, got {type(raw).__name__}: {raw!r}")
    return float(raw)


def parse_forecast_entry(
    entry: Dict[str, Any], tz_name: str = FEED_TIMEZONE
) -> Optional[ForecastPoint]:
    """
    Parse one forecast entry.

    :param entry: Decoded forecast entry
    :param tz_name: Zone of the naive feed timestamps
    :return: ForecastPoint, or None if the entry cannot be used
    """
    raw_datetime = entry.get("datetime")
    if not isinstance(raw_datetime, str):
        logger.warning(f"Skipping forecast entry without datetime: {entry}")
        return None

    try:
        timestamp = to_date(raw_datetime, tz_name)
        value = _optional_float(entry.get("value"))
        precipitation = None
        for key in PRECIPITATION_KEYS:
            precipitation = _optional_float(entry.get(key))
            if precipitation is not None:
                break
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(f"Skipping malformed forecast entry {entry}: {e}")
        return None

    return ForecastPoint(
        timestamp=timestamp,
        value=0.0 if value is None else value,
        precipitation=precipitation,
    )


def parse_forecast_payload(
    payload: Dict[str, Any], tz_name: str = FEED_TIMEZONE
) -> List[ForecastPoint]:
    """
    Parse a forecast payload into points sorted by timestamp.

    :param payload: Decoded JSON payload
    :param tz_name: Zone of the naive feed timestamps
    :return: Forecast points in ascending time order
    :raises FeedFormatError: If the payload has no forecasts list
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("forecasts"), list):
        raise FeedFormatError("Payload does not contain a 'forecasts' list")

    entries = payload["forecasts"]
    points = []
    for entry in entries:
        if not isinstance(entry, dict):
            logger.warning(f"Skipping non-object forecast entry: {entry!r}")
            continue
        point = parse_forecast_entry(entry, tz_name)
        if point is not None:
            points.append(point)

    dropped = len(entries) - len(points)
    if dropped:
        logger.info(f"Parsed {len(points)} forecast points, dropped {dropped}")

    return sorted(points, key=lambda p: p.timestamp)


def first_hour(points: List[ForecastPoint]) -> List[ForecastPoint]:
    """First hour of 5-minute samples, the slice drawn as a sparkline."""
    return points[:SPARKLINE_MAX_POINTS]
