"""
Rain pattern copy.

Turns a RainPattern into the strings shown in the menu bar and the popover
header. Minute values never render below 1 so that "in 0m" cannot appear.
"""

from raincast.config import (
    ICON_DRY,
    ICON_RAIN,
    INTENSITY_LABELS,
    MIN_DISPLAY_MINUTES,
    SHOWER_MAX_MINUTES,
)
from raincast.models.nowcast import (
    DisplayCopy,
    Dry,
    DryIntermittentComing,
    DryRainComing,
    RAIN_PATTERN_TYPES,
    RainingContinues,
    RainingOnAndOff,
    RainingStopsDry,
    RainIntensity,
    RainPattern,
)


def display_minutes(minutes: int) -> int:
    return max(MIN_DISPLAY_MINUTES, minutes)


def intensity_label(intensity: RainIntensity) -> str:
    return INTENSITY_LABELS[intensity.name.lower()]


def _unknown_pattern(pattern) -> TypeError:
    return TypeError(f"Unsupported rain pattern: {pattern!r}")


def menu_bar_text(pattern: RainPattern) -> str:
    """
    Short label for the menu bar item.

    :param pattern: Classified rain pattern
    :return: Menu bar text, e.g. "Dry in 12m"
    """
    if isinstance(pattern, Dry):
        return "Dry"
    elif isinstance(pattern, RainingStopsDry):
        return f"Dry in {display_minutes(pattern.dry_in_minutes)}m"
    elif isinstance(pattern, RainingOnAndOff):
        return f"On/off · dry in {display_minutes(pattern.dry_break_in_minutes)}m"
    elif isinstance(pattern, RainingContinues):
        return "Raining"
    elif isinstance(pattern, DryRainComing):
        minutes = display_minutes(pattern.starts_in_minutes)
        if pattern.lasts_minutes <= SHOWER_MAX_MINUTES:
            return f"Shower in {minutes}m"
        return f"Rain in {minutes}m"
    elif isinstance(pattern, DryIntermittentComing):
        return f"Showers in {display_minutes(pattern.starts_in_minutes)}m"
    raise _unknown_pattern(pattern)


def header_text(pattern: RainPattern) -> str:
    """
    Popover header title.

    :param pattern: Classified rain pattern
    :return: Header title, e.g. "Rain on and off"
    """
    if isinstance(pattern, Dry):
        return "Dry"
    elif isinstance(pattern, RainingStopsDry):
        return f"Dry in ~{display_minutes(pattern.dry_in_minutes)}m"
    elif isinstance(pattern, RainingOnAndOff):
        return "Rain on and off"
    elif isinstance(pattern, RainingContinues):
        return "Raining"
    elif isinstance(pattern, DryRainComing):
        return f"Rain in {display_minutes(pattern.starts_in_minutes)}m"
    elif isinstance(pattern, DryIntermittentComing):
        return f"Showers from {display_minutes(pattern.starts_in_minutes)}m"
    raise _unknown_pattern(pattern)


def subtitle_text(pattern: RainPattern) -> str:
    """
    Popover header subtitle, carrying the intensity.

    :param pattern: Classified rain pattern
    :return: Subtitle, e.g. "Light rain for ~10m"
    """
    if isinstance(pattern, Dry):
        return "No rain expected"
    elif isinstance(pattern, RainingStopsDry):
        return f"{intensity_label(pattern.intensity)} rain"
    elif isinstance(pattern, RainingOnAndOff):
        label = intensity_label(pattern.intensity)
        minutes = display_minutes(pattern.dry_break_in_minutes)
        return f"{label} · dry break in ~{minutes}m"
    elif isinstance(pattern, RainingContinues):
        return f"{intensity_label(pattern.intensity)} rain continues"
    elif isinstance(pattern, DryRainComing):
        label = intensity_label(pattern.intensity)
        return f"{label} rain for ~{display_minutes(pattern.lasts_minutes)}m"
    elif isinstance(pattern, DryIntermittentComing):
        return f"{intensity_label(pattern.intensity)} showers on and off"
    raise _unknown_pattern(pattern)


def icon_token(pattern: RainPattern) -> str:
    if isinstance(pattern, Dry):
        return ICON_DRY
    elif isinstance(pattern, RAIN_PATTERN_TYPES):
        return ICON_RAIN
    raise _unknown_pattern(pattern)


def display_copy(pattern: RainPattern) -> DisplayCopy:
    """
    Build all four display strings for a pattern.

    :param pattern: Classified rain pattern
    :return: DisplayCopy with menu bar text, header title, subtitle and icon
    :raises TypeError: If pattern is not a RainPattern variant
    """
    return DisplayCopy(
        menu_bar_text=menu_bar_text(pattern),
        header_title=header_text(pattern),
        header_subtitle=subtitle_text(pattern),
        icon_token=icon_token(pattern),
    )
