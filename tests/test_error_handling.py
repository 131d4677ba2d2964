"""
Tests for the error_handling module.

This module tests:
- Exception hierarchy and context
- Error logging on construction
- Performance logging decorator
- Configuration validation logging
"""

import logging

import pytest

from cookie_signature import Signer
from cookie_signature.config import HmacCacheConfig
from cookie_signature.error_handling import (
    InvalidArgument,
    SignatureConfigurationError,
    SignatureError,
    log_config_validation,
    log_signing_performance,
)


class TestSignatureErrorHierarchy:
    def test_base_initialization(self):
        error = SignatureError("Test message")
        assert str(error) == "Test message"
        assert error.context == {}

        context = {"key1": "value1", "key2": 42}
        error = SignatureError("Test message", context)
        assert error.context == context

    def test_error_logging(self, caplog):
        with caplog.at_level(logging.ERROR):
            SignatureError("Test error", {"operation": "sign"})

        assert "Signature error: Test error" in caplog.text
        assert "operation=sign" in caplog.text

    def test_specific_error_types(self):
        assert issubclass(InvalidArgument, SignatureError)
        assert issubclass(InvalidArgument, TypeError)
        assert issubclass(SignatureConfigurationError, SignatureError)
        assert issubclass(SignatureConfigurationError, ValueError)

    def test_invalid_argument_context(self):
        with pytest.raises(InvalidArgument) as exc_info:
            Signer().sign(42, "secret")
        assert exc_info.value.context == {"value_type": "int"}

    def test_secret_never_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cookie_signature"):
            signer = Signer()
            token = signer.sign("visible-value", "super-secret-key")
            signer.unsign(token, "super-secret-key")
            signer.unsign(token, "other-secret-key")
            with pytest.raises(InvalidArgument):
                signer.sign(42, "super-secret-key")

        assert "super-secret-key" not in caplog.text
        assert "other-secret-key" not in caplog.text


class TestLogSigningPerformance:
    def test_success_logged(self, caplog):
        @log_signing_performance
        def operation():
            return "ok"

        with caplog.at_level(logging.DEBUG, logger="cookie_signature"):
            assert operation() == "ok"
        assert "Signing operation operation completed" in caplog.text

    def test_failure_logged_and_reraised(self, caplog):
        @log_signing_performance
        def operation():
            raise RuntimeError("boom")

        with caplog.at_level(logging.WARNING, logger="cookie_signature"):
            with pytest.raises(RuntimeError, match="boom"):
                operation()
        assert "Signing operation operation failed" in caplog.text

    def test_preserves_metadata(self):
        @log_signing_performance
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestLogConfigValidation:
    def test_accepted_section_logged(self, caplog):
        class Dummy:
            @log_config_validation("dummy")
            def check(self):
                pass

        with caplog.at_level(logging.DEBUG, logger="cookie_signature"):
            Dummy().check()
        assert "Signing config section dummy accepted" in caplog.text

    def test_rejected_section_logged_and_reraised(self, caplog):
        class Dummy:
            @log_config_validation("dummy")
            def check(self):
                raise SignatureConfigurationError("maxsize must be positive")

        with caplog.at_level(logging.ERROR, logger="cookie_signature"):
            with pytest.raises(SignatureConfigurationError):
                Dummy().check()
        assert "Signing config section dummy rejected: maxsize must be positive" in caplog.text
        assert "accepted" not in caplog.text

    def test_other_errors_pass_through_unlogged(self, caplog):
        class Dummy:
            @log_config_validation("dummy")
            def check(self):
                raise RuntimeError("unexpected")

        with caplog.at_level(logging.DEBUG, logger="cookie_signature"):
            with pytest.raises(RuntimeError):
                Dummy().check()
        assert "Signing config section dummy" not in caplog.text

    def test_rejection_from_real_config(self, caplog):
        with caplog.at_level(logging.ERROR, logger="cookie_signature"):
            with pytest.raises(SignatureConfigurationError):
                HmacCacheConfig(maxsize=0)
        assert "Signing config section hmac_cache rejected" in caplog.text
