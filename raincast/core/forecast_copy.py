"""
Forecast state copy.

Chooses what the popover header and the menu bar item show for the
combination of location access, load state and the classified pattern.
"""

import math
from typing import List, Optional, Sequence

from raincast.config import (
    ICON_DRY,
    ICON_ERROR,
    ICON_LOCATION_OFF,
    SPARKLINE_MAX_POINTS,
)
from raincast.core import rain_copy
from raincast.models.nowcast import (
    ForecastPoint,
    HeaderCopy,
    LoadState,
    LocationAccess,
    MenuBarDisplay,
    MenuBarStyle,
    RainPattern,
)

LOAD_STATE_HEADERS = {
    LoadState.NEEDS_LOCATION: HeaderCopy("Waiting for location…", "Allow Location to continue"),
    LoadState.LOADING: HeaderCopy("Loading forecast…", "Fetching Buienradar data"),
    LoadState.ERROR: HeaderCopy("Update failed", "Check your connection"),
    LoadState.IDLE: HeaderCopy("Loading forecast…", None),
}


def header_copy(
    location_access: LocationAccess,
    load_state: LoadState,
    pattern: Optional[RainPattern],
) -> HeaderCopy:
    """
    Pick the popover header for the current app state.

    :param location_access: Location permission state
    :param load_state: Forecast loading state
    :param pattern: Classified pattern, None when not available
    :return: HeaderCopy with title and optional subtitle
    """
    if location_access.is_blocked:
        return HeaderCopy("Location required", "Enable Location in System Settings")

    if load_state in LOAD_STATE_HEADERS:
        return LOAD_STATE_HEADERS[load_state]

    if pattern is None:
        return HeaderCopy("—", None)

    return HeaderCopy(
        title=rain_copy.header_text(pattern),
        subtitle=rain_copy.subtitle_text(pattern),
    )


def sample_sparkline_values(
    points: Sequence[ForecastPoint], max_count: int = SPARKLINE_MAX_POINTS
) -> List[float]:
    """
    Evenly resample point values down to at most max_count entries.

    :param points: Forecast points in display order
    :param max_count: Maximum number of values to keep
    :return: Signal values, unchanged when there are max_count or fewer
    """
    values = [float(point.value) for point in points]
    if len(values) <= max_count or max_count <= 1:
        return values

    stride = (len(values) - 1) / (max_count - 1)
    return [
        values[min(int(math.floor(index * stride + 0.5)), len(values) - 1)]
        for index in range(max_count)
    ]


def menu_bar_display(
    pattern: Optional[RainPattern],
    load_state: LoadState,
    location_access: LocationAccess,
    style: MenuBarStyle = MenuBarStyle.MINUTES,
    points: Sequence[ForecastPoint] = (),
) -> MenuBarDisplay:
    """
    Decide what the menu bar item shows.

    In sparkline style the icon is replaced by the first hour of forecast
    values, but only when some of them are wet.

    :param pattern: Classified pattern, None when not available
    :param load_state: Forecast loading state
    :param location_access: Location permission state
    :param style: Minutes text or sparkline
    :param points: The first hour of forecast points, used for the sparkline
    :return: MenuBarDisplay
    """
    if load_state == LoadState.ERROR:
        return MenuBarDisplay("", ICON_ERROR, None)

    if location_access.is_blocked:
        return MenuBarDisplay("", ICON_LOCATION_OFF, None)

    if load_state != LoadState.LOADED or pattern is None:
        return MenuBarDisplay("…", ICON_DRY, None)

    title = rain_copy.menu_bar_text(pattern)
    icon = rain_copy.icon_token(pattern)

    if style == MenuBarStyle.SPARKLINE:
        values = sample_sparkline_values(points)
        if any(value > 0 for value in values):
            return MenuBarDisplay(title, None, values)

    return MenuBarDisplay(title, icon, None)
