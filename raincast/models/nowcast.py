"""
Nowcast data models and type definitions.

This module provides the value types that flow through the summariser:
forecast samples in, buckets and segments in the middle, a rain pattern
and its display copy out. All of them are immutable.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from raincast.config import (
    HEAVY_MM_PER_HOUR,
    LIGHT_MM_PER_HOUR,
    MODERATE_MM_PER_HOUR,
)


@dataclass(frozen=True)
class ForecastPoint:
    """A single nowcast sample."""

    timestamp: datetime
    value: float
    precipitation: Optional[float] = None


@dataclass(frozen=True)
class Bucket:
    """A forecast sample placed on the minute axis relative to now."""

    start_minutes: int
    end_minutes: int
    is_rain: bool


@dataclass(frozen=True)
class Segment:
    """A maximal run of contiguous same-state buckets."""

    is_rain: bool
    start_minutes: int
    end_minutes: int

    @property
    def duration(self) -> int:
        return max(0, self.end_minutes - self.start_minutes)


class RainIntensity(Enum):
    """Peak intensity tier derived from a mm/h rate."""

    TRACE = "Trace"
    LIGHT = "Light"
    MODERATE = "Moderate"
    HEAVY = "Heavy"

    @classmethod
    def from_mm_per_hour(cls, mm_per_hour: float) -> "RainIntensity":
        """
        Classify a precipitation rate.

        NaN fails every comparison and lands on TRACE, so the mapping is total.

        :param mm_per_hour: Precipitation rate in mm/h
        :return: Matching RainIntensity tier
        """
        if mm_per_hour >= HEAVY_MM_PER_HOUR:
            return cls.HEAVY
        elif mm_per_hour >= MODERATE_MM_PER_HOUR:
            return cls.MODERATE
        elif mm_per_hour >= LIGHT_MM_PER_HOUR:
            return cls.LIGHT
        else:
            return cls.TRACE


@dataclass(frozen=True)
class Dry:
    """No rain now or within the horizon."""


@dataclass(frozen=True)
class RainingStopsDry:
    """Raining now, stops and stays dry."""

    dry_in_minutes: int
    intensity: RainIntensity


@dataclass(frozen=True)
class RainingOnAndOff:
    """Raining now, a dry break follows, then rain returns."""

    dry_break_in_minutes: int
    intensity: RainIntensity


@dataclass(frozen=True)
class RainingContinues:
    """Raining now with no dry spell in sight."""

    intensity: RainIntensity


@dataclass(frozen=True)
class DryRainComing:
    """Dry now, a single spell of rain arrives."""

    starts_in_minutes: int
    lasts_minutes: int
    intensity: RainIntensity


@dataclass(frozen=True)
class DryIntermittentComing:
    """Dry now, several spells of rain arrive."""

    starts_in_minutes: int
    intensity: RainIntensity


RainPattern = Union[
    Dry,
    RainingStopsDry,
    RainingOnAndOff,
    RainingContinues,
    DryRainComing,
    DryIntermittentComing,
]

RAIN_PATTERN_TYPES = (
    Dry,
    RainingStopsDry,
    RainingOnAndOff,
    RainingContinues,
    DryRainComing,
    DryIntermittentComing,
)


@dataclass(frozen=True)
class DisplayCopy:
    """The four strings rendered for a rain pattern."""

    menu_bar_text: str
    header_title: str
    header_subtitle: str
    icon_token: str


class LocationAccess(Enum):
    NOT_DETERMINED = "not_determined"
    DENIED = "denied"
    RESTRICTED = "restricted"
    AUTHORIZED = "authorized"

    @property
    def is_blocked(self) -> bool:
        return self in (LocationAccess.DENIED, LocationAccess.RESTRICTED)


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    NEEDS_LOCATION = "needs_location"
    ERROR = "error"


class MenuBarStyle(Enum):
    MINUTES = "minutes"
    SPARKLINE = "sparkline"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class HeaderCopy:
    """Title and optional subtitle shown above the forecast."""

    title: str
    subtitle: Optional[str] = None


@dataclass(frozen=True)
class MenuBarDisplay:
    """What the menu bar item shows: text plus either an icon or a sparkline."""

    title: str
    icon_token: Optional[str] = None
    sparkline_values: Optional[List[float]] = None
