"""Tests for core error hierarchy."""

from zotsync.core.errors import (
    ConfigurationError,
    InvalidConfigError,
    MissingConfigError,
    RequestEntryInvalidError,
    StorageError,
    StoreReadError,
    ValidationError,
    ZotsyncError,
)


class TestErrorHierarchy:
    """Test exception inheritance."""

    def test_all_errors_inherit_from_zotsync_error(self):
        """All custom errors should inherit from ZotsyncError."""
        errors = [
            ConfigurationError("test"),
            MissingConfigError("extension_api"),
            InvalidConfigError("context", "roam/x", "unknown"),
            ValidationError("test"),
            RequestEntryInvalidError(0, "no API key"),
            StorageError("test"),
            StoreReadError("/tmp/settings.json", "bad json"),
        ]

        for error in errors:
            assert isinstance(error, ZotsyncError)

    def test_configuration_errors(self):
        """Fatal errors share ConfigurationError."""
        assert isinstance(MissingConfigError("x"), ConfigurationError)
        assert isinstance(InvalidConfigError("x", 1, "bad"), ConfigurationError)

    def test_request_entry_error_is_not_fatal(self):
        """Request entry errors are validation errors, not configuration errors."""
        error = RequestEntryInvalidError(2, "no dataURI")
        assert isinstance(error, ValidationError)
        assert not isinstance(error, ConfigurationError)


class TestErrorCodes:
    """Test error codes are set correctly."""

    def test_base_error_code(self):
        assert ZotsyncError("test").error_code == "ZOTSYNC_ERROR"

    def test_missing_config_code(self):
        assert MissingConfigError("x").error_code == "MISSING_CONFIG"

    def test_request_entry_code(self):
        assert RequestEntryInvalidError(0, "x").error_code == "REQUEST_ENTRY_INVALID"

    def test_custom_code_overrides_default(self):
        error = ZotsyncError("test", error_code="CUSTOM")
        assert error.error_code == "CUSTOM"


class TestErrorDetails:
    """Test message and details content."""

    def test_missing_config_message(self):
        error = MissingConfigError("extension_api", source="roam/depot context")
        assert "extension_api" in error.message
        assert "roam/depot context" in error.message
        assert error.details == {"config_key": "extension_api", "source": "roam/depot context"}

    def test_request_entry_details_include_name(self):
        error = RequestEntryInvalidError(1, "no API key", {"name": "Lab library"})
        assert error.index == 1
        assert error.reason == "no API key"
        assert error.details["name"] == "Lab library"
        assert "#1" in str(error)

    def test_request_entry_without_entry(self):
        error = RequestEntryInvalidError(3, "expected an object")
        assert error.details["name"] is None

    def test_to_dict(self):
        error = StoreReadError("settings.json", "expected a JSON object")
        result = error.to_dict()
        assert result["error"] is True
        assert result["error_code"] == "STORE_READ"
        assert "settings.json" in result["message"]
        assert result["details"]["reason"] == "expected a JSON object"
