"""Tests for FaderSettings."""
import math

import pytest

from tick_fade import Ease, FadeConfig, FadeConfigError, FaderSettings, PropertyKind


class TestFaderSettings:
    """Test settings validation and conversion."""

    def test_defaults(self):
        """Only property_name is required."""
        settings = FaderSettings(property_name="_Glow")
        assert settings.property_kind is PropertyKind.FLOAT
        assert settings.ease is Ease.LINEAR
        assert settings.trigger is None

    def test_string_enums_coerced(self):
        """Kind and ease accept their string values."""
        settings = FaderSettings(
            property_name="_EmissionColor", property_kind="color", ease="ease_out_quad"
        )
        assert settings.property_kind is PropertyKind.COLOR
        assert settings.ease is Ease.EASE_OUT_QUAD

    def test_fade_config(self):
        """fade_config() carries endpoints, duration and ease."""
        settings = FaderSettings(
            property_name="_Glow",
            minimum_value=0.5,
            maximum_value=3.0,
            duration=2.0,
            ease=Ease.EASE_IN_QUAD,
        )
        assert settings.fade_config() == FadeConfig(0.5, 3.0, 2.0, Ease.EASE_IN_QUAD)

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"property_name": ""}, "property_name"),
            ({"property_name": "_Glow", "property_kind": "texture"}, "texture"),
            ({"property_name": "_Glow", "ease": "bounce"}, "bounce"),
            ({"property_name": "_Glow", "duration": 0.0}, "duration"),
            ({"property_name": "_Glow", "duration": -2.0}, "duration"),
            ({"property_name": "_Glow", "duration": math.nan}, "duration"),
            ({"property_name": "_Glow", "duration": math.inf}, "duration"),
        ],
    )
    def test_invalid_rejected(self, kwargs, match):
        """Bad settings fail at construction."""
        with pytest.raises(FadeConfigError, match=match):
            FaderSettings(**kwargs)


class TestFromMapping:
    """Test FaderSettings.from_mapping."""

    def test_builds_settings(self):
        """A plain dict maps onto the dataclass fields."""
        settings = FaderSettings.from_mapping(
            {
                "property_name": "_EmissionColor",
                "property_kind": "color",
                "minimum_value": 0.0,
                "maximum_value": 4.0,
                "duration": 0.5,
                "ease": "ease_in_quad",
                "trigger": "space",
            }
        )
        assert settings.property_kind is PropertyKind.COLOR
        assert settings.maximum_value == 4.0
        assert settings.trigger == "space"

    def test_unknown_keys_rejected(self):
        """Typos are reported rather than ignored."""
        with pytest.raises(FadeConfigError, match="durration"):
            FaderSettings.from_mapping({"property_name": "_Glow", "durration": 1.0})

    def test_missing_name_rejected(self):
        """property_name is required."""
        with pytest.raises(FadeConfigError, match="property_name"):
            FaderSettings.from_mapping({"duration": 1.0})
