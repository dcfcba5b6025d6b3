"""Tests for sweep._errors."""

from sweep._errors import ConfigError, SweepError, TransportError


class TestErrorHierarchy:
    """All sweep errors inherit from SweepError."""

    def test_sweep_error_is_exception(self) -> None:
        assert issubclass(SweepError, Exception)

    def test_config_error_inherits(self) -> None:
        assert issubclass(ConfigError, SweepError)

    def test_transport_error_inherits(self) -> None:
        assert issubclass(TransportError, SweepError)

    def test_catch_all_sweep_errors(self) -> None:
        """All specific errors are catchable via SweepError."""
        for error_cls in (ConfigError, TransportError):
            try:
                raise error_cls("test")
            except SweepError:
                pass  # Expected: all caught by base class
