"""Tests for public exceptions."""

import pytest

from mambu_sdk.exceptions import (
    INVALID_INPUT,
    MambuApiException,
    MambuConfigError,
    MambuError,
)


class TestMambuError:
    """Tests for base MambuError."""

    def test_is_exception(self):
        """MambuError should be an Exception."""
        assert issubclass(MambuError, Exception)


class TestMambuApiException:
    """Tests for MambuApiException."""

    def test_inherits_from_mambu_error(self):
        """MambuApiException should inherit from MambuError."""
        assert issubclass(MambuApiException, MambuError)

    def test_code_and_message(self):
        """Should store code and message."""
        error = MambuApiException(404, "Not found")
        assert error.error_code == 404
        assert error.message == "Not found"
        assert str(error) == "[404] Not found"

    def test_error_message_defaults_to_message(self):
        """Should fall back to the message without a structured server message."""
        assert MambuApiException(500, "boom").error_message == "boom"

    def test_structured_fields(self):
        """Should keep the server's structured error fields."""
        error = MambuApiException(
            400, "raw body", error_message="INVALID_PARAMETERS", return_code=4, error_source="limit"
        )
        assert error.error_message == "INVALID_PARAMETERS"
        assert error.return_code == 4
        assert error.error_source == "limit"

    def test_preserves_cause(self):
        """Should keep the chained cause."""
        cause = OSError("network down")
        with pytest.raises(MambuApiException) as exc_info:
            try:
                raise cause
            except OSError as e:
                raise MambuApiException(INVALID_INPUT, "failed") from e
        assert exc_info.value.__cause__ is cause


class TestMambuConfigError:
    """Tests for MambuConfigError."""

    def test_inherits_from_mambu_error(self):
        """MambuConfigError should inherit from MambuError."""
        assert issubclass(MambuConfigError, MambuError)

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(MambuConfigError) as exc_info:
            raise MambuConfigError("MAMBU_DOMAIN is not set")
        assert str(exc_info.value) == "MAMBU_DOMAIN is not set"
