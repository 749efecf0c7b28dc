"""Tests for version-dependent flag rendering."""

import pytest

from consul_exporter.flags import (
    FLAG_STYLE_RULES,
    FlagStyle,
    flag_style_for,
    render_flag,
)
from consul_exporter.types import Version


class TestFlagStyleFor:
    @pytest.mark.parametrize("raw", ["0.3.0", "0.3.5", "0.3.99"])
    def test_single_dash_below_threshold(self, raw):
        assert flag_style_for(Version(raw)) is FlagStyle.SINGLE_DASH

    @pytest.mark.parametrize("raw", ["0.4.0", "0.4", "0.5.0", "0.10.0", "1.0.0"])
    def test_double_dash_at_or_above_threshold(self, raw):
        assert flag_style_for(Version(raw)) is FlagStyle.DOUBLE_DASH

    def test_rules_are_ordered(self):
        minimums = [min_version for min_version, _ in FLAG_STYLE_RULES]
        assert minimums == sorted(minimums)

    def test_custom_rule_table(self):
        rules = (
            (Version("1.0.0"), FlagStyle.SINGLE_DASH),
            (Version("2.0.0"), FlagStyle.DOUBLE_DASH),
        )
        assert flag_style_for(Version("1.5.0"), rules) is FlagStyle.SINGLE_DASH
        assert flag_style_for(Version("2.0.0"), rules) is FlagStyle.DOUBLE_DASH

    def test_version_below_every_rule(self):
        rules = ((Version("1.0.0"), FlagStyle.DOUBLE_DASH),)
        with pytest.raises(ValueError, match="No flag style rule"):
            flag_style_for(Version("0.9.0"), rules)


class TestRenderFlag:
    def test_flag_with_value(self):
        assert (
            render_flag(FlagStyle.DOUBLE_DASH, "web.listen-address", ":9107")
            == "--web.listen-address=:9107"
        )

    def test_boolean_flag(self):
        assert (
            render_flag(FlagStyle.SINGLE_DASH, "consul.health-summary")
            == "-consul.health-summary"
        )

    def test_empty_value_still_rendered(self):
        assert render_flag(FlagStyle.DOUBLE_DASH, "log.level", "") == "--log.level="
