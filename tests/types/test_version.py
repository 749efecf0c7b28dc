"""Tests for Version value object."""

from dataclasses import FrozenInstanceError

import pytest

from consul_exporter.exceptions import ValidationError
from consul_exporter.types import Version


class TestVersion:
    """Tests for Version comparison and parsing."""

    def test_segments_parsed(self):
        assert Version("0.7.1").segments == (0, 7, 1)

    def test_numeric_not_lexicographic(self):
        assert Version("0.10.0") > Version("0.9.0")
        assert Version("0.3.10") > Version("0.3.9")

    def test_missing_segments_are_zero(self):
        assert Version("0.4") == Version("0.4.0")
        assert Version("0.4") >= Version("0.4.0")
        assert not Version("0.4") < Version("0.4.0")

    def test_longer_version_compares_by_padding(self):
        assert Version("0.4.0.1") > Version("0.4")
        assert Version("0.3.9.9") < Version("0.4")

    @pytest.mark.parametrize("raw", ["v0.5.0", "V0.5.0", " 0.5.0", "0.5.0\n"])
    def test_prefixed_or_padded_version_rejected(self, raw):
        with pytest.raises(ValidationError):
            Version(raw)

    def test_prerelease_suffix_ignored(self):
        assert Version("0.4.0-rc.1") == Version("0.4.0")
        assert str(Version("0.4.0-rc.1")) == "0.4.0-rc.1"

    def test_compares_with_strings(self):
        assert Version("0.3.0") == "0.3.0"
        assert Version("0.2.9") < "0.3.0"

    def test_malformed_string_compares_unequal(self):
        assert (Version("0.3.0") == "latest") is False
        assert Version("0.3.0") != "latest"
        assert Version("0.3.0") in ["latest", "0.3"]
        assert "latest" not in [Version("0.3.0")]

    def test_ordering_against_malformed_string_is_type_error(self):
        with pytest.raises(TypeError):
            Version("0.3.0") < "latest"  # noqa: B015

    def test_equal_versions_hash_equal(self):
        assert hash(Version("0.4")) == hash(Version("0.4.0"))
        assert len({Version("0.4"), Version("0.4.0")}) == 1

    @pytest.mark.parametrize("raw", ["", "latest", "0..1", "1.x", "0.3.0 beta"])
    def test_malformed_version_rejected(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Version(raw)
        assert exc_info.value.field == "version"

    def test_immutability(self):
        version = Version("0.5.0")
        with pytest.raises(FrozenInstanceError):
            version.raw = "0.6.0"  # pyrefly: ignore

    def test_repr(self):
        assert repr(Version("0.5.0")) == "Version('0.5.0')"
