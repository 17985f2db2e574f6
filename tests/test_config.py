from __future__ import annotations

import pytest

from envscalar import InvalidArgError, Kind, ParseError, Ref, parse, parse_int, parse_str
from envscalar.config import EnvScalarSettings, default_native_width, get_settings
from envscalar.utils.pydantic_v1 import ValidationError


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so each test reads its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Test EnvScalarSettings."""

    def test_default(self, monkeypatch):
        """Without overrides the interpreter's width is used."""
        monkeypatch.delenv("ENVSCALAR_NATIVE_WIDTH", raising=False)
        assert EnvScalarSettings().native_width == default_native_width()
        assert default_native_width() in (32, 64)

    def test_from_env(self, monkeypatch):
        """The width can be set through the environment."""
        monkeypatch.setenv("ENVSCALAR_NATIVE_WIDTH", "32")
        assert EnvScalarSettings().native_width == 32

    @pytest.mark.parametrize("width", ["16", "128", "wide"])
    def test_invalid(self, monkeypatch, width):
        """Only 32 and 64 are valid."""
        monkeypatch.setenv("ENVSCALAR_NATIVE_WIDTH", width)
        with pytest.raises(ValidationError):
            EnvScalarSettings()

    def test_cached(self, monkeypatch):
        """Settings are read once and reused."""
        monkeypatch.setenv("ENVSCALAR_NATIVE_WIDTH", "32")
        assert get_settings() is get_settings()


def test_parse_uses_settings(mocker, monkeypatch):
    """`parse` falls back to the settings for native kinds."""
    mocker.patch("envscalar.config.get_settings", return_value=EnvScalarSettings(native_width=32))
    monkeypatch.setenv("ENVSCALAR_CONFIG_TEST", "4294967296")
    with pytest.raises(ParseError):
        parse("ENVSCALAR_CONFIG_TEST", Ref(0, Kind.UINT))

    ref = Ref(0, Kind.UINT)
    parse("ENVSCALAR_CONFIG_TEST", ref, native_width=64)
    assert ref.value == 2**32


class TestInvalidNativeWidth:
    """A bad ENVSCALAR_NATIVE_WIDTH only affects native-width kinds."""

    @pytest.fixture(autouse=True)
    def bad_width(self, monkeypatch):
        """Set an unsupported native width and a value to parse."""
        monkeypatch.setenv("ENVSCALAR_NATIVE_WIDTH", "16")
        monkeypatch.setenv("ENVSCALAR_CONFIG_TEST", "42")

    def test_str_unaffected(self):
        """String destinations never read the setting."""
        assert parse_str("ENVSCALAR_CONFIG_TEST") == "42"

    def test_fixed_width_unaffected(self):
        """Fixed-width kinds never read the setting."""
        assert parse_int("ENVSCALAR_CONFIG_TEST", 32) == 42

    def test_explicit_native_width_unaffected(self):
        """An explicit native width overrides the setting."""
        ref = Ref(0)
        parse("ENVSCALAR_CONFIG_TEST", ref, native_width=64)
        assert ref.value == 42

    def test_native_int_rejected(self):
        """Native kinds report the bad setting as an invalid argument."""
        ref = Ref(7)
        with pytest.raises(InvalidArgError) as exc:
            parse("ENVSCALAR_CONFIG_TEST", ref)
        assert "ENVSCALAR_NATIVE_WIDTH" in str(exc.value)
        assert isinstance(exc.value.__cause__, ValidationError)
        assert ref.value == 7

    def test_recovers_after_fix(self, monkeypatch):
        """A failed read is not cached."""
        with pytest.raises(InvalidArgError):
            parse_int("ENVSCALAR_CONFIG_TEST")
        monkeypatch.setenv("ENVSCALAR_NATIVE_WIDTH", "64")
        assert parse_int("ENVSCALAR_CONFIG_TEST") == 42
