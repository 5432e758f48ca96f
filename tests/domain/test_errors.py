"""Tests for InvalidConfigurationError context."""

from identlint.domain.errors import InvalidConfigurationError


class TestInvalidConfigurationError:
    def test_plain_message(self) -> None:
        err = InvalidConfigurationError("bad value")
        assert str(err) == "bad value"
        assert err.location is None

    def test_key_context(self) -> None:
        err = InvalidConfigurationError("bad value", key="min_length")
        assert str(err) == "min_length: bad value"

    def test_with_rule(self) -> None:
        err = InvalidConfigurationError("bad value", key="min_length").with_rule("type_name")
        assert err.rule == "type_name"
        assert str(err) == "type_name.min_length: bad value"

    def test_is_value_error(self) -> None:
        assert isinstance(InvalidConfigurationError("x"), ValueError)
