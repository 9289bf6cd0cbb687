"""
Tests for rain pattern copy.
"""

import pytest

from raincast.config import ICON_DRY, ICON_RAIN
from raincast.core.rain_copy import (
    display_copy,
    display_minutes,
    header_text,
    icon_token,
    intensity_label,
    menu_bar_text,
    subtitle_text,
)
from raincast.models.nowcast import (
    DisplayCopy,
    Dry,
    DryIntermittentComing,
    DryRainComing,
    RainingContinues,
    RainingOnAndOff,
    RainingStopsDry,
    RainIntensity,
)


def assert_copy(pattern, menu_bar, header, subtitle):
    assert menu_bar_text(pattern) == menu_bar
    assert header_text(pattern) == header
    assert subtitle_text(pattern) == subtitle


class TestPatternCopy:
    """Test the literal strings for every narrative."""

    def test_dry(self):
        """Test copy for dry."""
        assert_copy(Dry(), "Dry", "Dry", "No rain expected")

    def test_raining_stops_dry(self):
        """Test copy for rain that stops."""
        assert_copy(
            RainingStopsDry(dry_in_minutes=12, intensity=RainIntensity.LIGHT),
            "Dry in 12m",
            "Dry in ~12m",
            "Light rain",
        )

    def test_raining_on_and_off(self):
        """Test copy for on-and-off rain."""
        assert_copy(
            RainingOnAndOff(dry_break_in_minutes=12, intensity=RainIntensity.MODERATE),
            "On/off · dry in 12m",
            "Rain on and off",
            "Moderate · dry break in ~12m",
        )

    def test_raining_continues(self):
        """Test copy for continuing rain."""
        assert_copy(
            RainingContinues(intensity=RainIntensity.HEAVY),
            "Raining",
            "Raining",
            "Heavy rain continues",
        )

    def test_dry_rain_coming_shower(self):
        """Test copy for a short shower ahead."""
        assert_copy(
            DryRainComing(
                starts_in_minutes=20, lasts_minutes=10, intensity=RainIntensity.LIGHT
            ),
            "Shower in 20m",
            "Rain in 20m",
            "Light rain for ~10m",
        )

    def test_dry_rain_coming_longer_spell(self):
        """Test copy for a spell longer than a shower."""
        pattern = DryRainComing(
            starts_in_minutes=20, lasts_minutes=16, intensity=RainIntensity.MODERATE
        )

        assert menu_bar_text(pattern) == "Rain in 20m"
        assert subtitle_text(pattern) == "Moderate rain for ~16m"

    def test_shower_limit_is_inclusive(self):
        """Test that a 15 minute spell is still a shower."""
        pattern = DryRainComing(
            starts_in_minutes=5, lasts_minutes=15, intensity=RainIntensity.LIGHT
        )

        assert menu_bar_text(pattern) == "Shower in 5m"

    def test_dry_intermittent_coming(self):
        """Test copy for showers ahead."""
        assert_copy(
            DryIntermittentComing(starts_in_minutes=15, intensity=RainIntensity.TRACE),
            "Showers in 15m",
            "Showers from 15m",
            "Drizzle showers on and off",
        )


class TestDisplayMinutes:
    """Test that zero minutes never render."""

    def test_floor_at_one(self):
        """Test the minimum displayed minutes."""
        assert display_minutes(0) == 1
        assert display_minutes(-3) == 1
        assert display_minutes(7) == 7

    def test_zero_minutes_in_copy(self):
        """Test that 0 minutes renders as 1m."""
        pattern = RainingStopsDry(dry_in_minutes=0, intensity=RainIntensity.LIGHT)

        assert menu_bar_text(pattern) == "Dry in 1m"
        assert header_text(pattern) == "Dry in ~1m"

    def test_rain_arriving_now(self):
        """Test rain starting now renders as 1m."""
        pattern = DryRainComing(
            starts_in_minutes=0, lasts_minutes=5, intensity=RainIntensity.HEAVY
        )

        assert menu_bar_text(pattern) == "Shower in 1m"


class TestIntensityLabels:
    """Test intensity wording."""

    @pytest.mark.parametrize(
        "intensity,label",
        [
            (RainIntensity.TRACE, "Drizzle"),
            (RainIntensity.LIGHT, "Light"),
            (RainIntensity.MODERATE, "Moderate"),
            (RainIntensity.HEAVY, "Heavy"),
        ],
    )
    def test_labels(self, intensity, label):
        """Test intensity labels."""
        assert intensity_label(intensity) == label


class TestIconAndDisplayCopy:
    """Test icon tokens and the combined copy."""

    def test_icons(self):
        """Test icon tokens for dry and wet patterns."""
        assert icon_token(Dry()) == ICON_DRY
        assert icon_token(RainingContinues(RainIntensity.LIGHT)) == ICON_RAIN
        assert icon_token(DryIntermittentComing(5, RainIntensity.LIGHT)) == ICON_RAIN

    def test_display_copy(self):
        """Test the combined display copy."""
        copy = display_copy(
            DryRainComing(
                starts_in_minutes=20, lasts_minutes=10, intensity=RainIntensity.LIGHT
            )
        )

        assert copy == DisplayCopy(
            menu_bar_text="Shower in 20m",
            header_title="Rain in 20m",
            header_subtitle="Light rain for ~10m",
            icon_token=ICON_RAIN,
        )

    @pytest.mark.parametrize(
        "func", [menu_bar_text, header_text, subtitle_text, icon_token, display_copy]
    )
    def test_unknown_pattern_rejected(self, func):
        """Test that values outside the pattern union raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported rain pattern"):
            func("dry")
