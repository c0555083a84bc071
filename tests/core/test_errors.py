"""Tests for error types and codes."""

import pytest

from typelens.core.errors import (
    ConfigError,
    ErrorCode,
    TypeLensError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.CONFIG_FILE_NOT_FOUND, 2000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        # Given
        error_code = code

        # When
        value = error_code.value

        # Then
        assert expected_range <= value < expected_range + 1000


class TestTypeLensError:
    """Base error behavior tests."""

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = TypeLensError(code=ErrorCode.CONFIG_PARSE_ERROR, message="Something broke")

        # When
        result = str(error)

        # Then
        assert result == "[2001] CONFIG_PARSE_ERROR: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Errors are real exceptions."""
        with pytest.raises(TypeLensError):
            raise ConfigError.file_not_found("/missing.yaml")


class TestConfigError:
    """ConfigError factory method tests."""

    def test_parse_error(self) -> None:
        """parse_error carries path and reason."""
        error = ConfigError.parse_error("/tmp/config.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert error.details == {"path": "/tmp/config.yaml", "reason": "bad indent"}
        assert "/tmp/config.yaml" in error.message

    def test_invalid_value(self) -> None:
        """invalid_value stringifies the offending value."""
        error = ConfigError.invalid_value("reflection.cache_enabled", 42, "not a bool")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["value"] == "42"
        assert error.details["field"] == "reflection.cache_enabled"

    def test_file_not_found(self) -> None:
        """file_not_found carries the path."""
        error = ConfigError.file_not_found("/nope.yaml")

        assert error.code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert error.details == {"path": "/nope.yaml"}
        assert str(error) == "[2004] CONFIG_FILE_NOT_FOUND: No config file at /nope.yaml"

