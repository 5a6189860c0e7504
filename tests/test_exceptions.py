"""Tests for public exceptions."""

import pytest

from trello_sdk.exceptions import (
    ErrorKind,
    TrelloConfigError,
    TrelloError,
    TrelloHttpError,
    TrelloValidationError,
)


class TestTrelloError:
    """Tests for base TrelloError."""

    def test_is_exception(self):
        assert issubclass(TrelloError, Exception)

    def test_can_be_raised(self):
        with pytest.raises(TrelloError) as exc_info:
            raise TrelloError("test error")
        assert str(exc_info.value) == "test error"


class TestTrelloHttpError:
    """Tests for TrelloHttpError."""

    def test_inherits_from_trello_error(self):
        assert issubclass(TrelloHttpError, TrelloError)

    def test_client_logic_kind(self):
        error = TrelloHttpError("Invalid URL", kind=ErrorKind.CLIENT_LOGIC)
        assert str(error) == "Invalid URL"
        assert error.code is None
        assert error.is_client_logic
        assert not error.is_transport_runtime

    def test_transport_runtime_kind_with_code(self):
        error = TrelloHttpError("Not found", kind=ErrorKind.TRANSPORT_RUNTIME, code=404)
        assert error.code == 404
        assert error.is_transport_runtime
        assert not error.is_client_logic

    def test_keeps_cause(self):
        original = OSError("connection reset")
        with pytest.raises(TrelloHttpError) as exc_info:
            try:
                raise original
            except OSError as e:
                raise TrelloHttpError(str(e), kind=ErrorKind.TRANSPORT_RUNTIME) from e
        assert exc_info.value.__cause__ is original

    def test_kind_values(self):
        assert ErrorKind.CLIENT_LOGIC == "client_logic"
        assert ErrorKind.TRANSPORT_RUNTIME == "transport_runtime"


class TestOtherErrors:
    """Tests for TrelloConfigError and TrelloValidationError."""

    @pytest.mark.parametrize("error_cls", [TrelloConfigError, TrelloValidationError])
    def test_inherit_from_trello_error(self, error_cls):
        assert issubclass(error_cls, TrelloError)
        with pytest.raises(TrelloError):
            raise error_cls("bad")
