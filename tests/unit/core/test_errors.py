"""Unit tests for parasail_lsp.core.errors module."""

from parasail_lsp.core.errors import ConfigError, ParasailError, ValidatorError


class TestParasailError:
    """Tests for ParasailError base class."""

    def test_accepts_message(self) -> None:
        err = ParasailError("Something went wrong")
        assert err.message == "Something went wrong"
        assert str(err) == "Something went wrong"

    def test_subclasses(self) -> None:
        for cls in (ConfigError, ValidatorError):
            assert issubclass(cls, ParasailError)


class TestValidatorError:
    """Tests for ValidatorError."""

    def test_records_interpreter(self) -> None:
        err = ValidatorError("Cannot start interp.csh", "interp.csh")

        assert err.message == "Cannot start interp.csh"
        assert err.interpreter == "interp.csh"

    def test_interpreter_optional(self) -> None:
        assert ValidatorError("timeout").interpreter is None
