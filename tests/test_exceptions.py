"""
Tests for domain exceptions.

Simple tests to ensure exceptions work correctly.
"""

from userstream.domain.exceptions import (
    ChannelClosedException,
    FetchFailedException,
    MalformedRecordException,
    UserNotFoundException,
    UserStreamException,
)


class TestExceptions:
    """Test custom exceptions."""

    def test_base_exception(self):
        """Test UserStreamException defaults."""
        exc = UserStreamException("Test error")
        assert exc.message == "Test error"
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_malformed_record_exception(self):
        """Test MalformedRecordException."""
        exc = MalformedRecordException("email", "missing required key", {"id": 1})
        assert "email" in str(exc)
        assert "missing required key" in str(exc)
        assert exc.details["field"] == "email"

    def test_fetch_failed_exception_keeps_cause(self):
        """Test FetchFailedException carries its cause."""
        cause = ConnectionError("backend down")
        exc = FetchFailedException("users", cause)
        assert exc.cause is cause
        assert "users" in str(exc)
        assert "backend down" in str(exc)
        assert exc.details["cause"] == "ConnectionError"

    def test_user_not_found_exception(self):
        """Test UserNotFoundException."""
        exc = UserNotFoundException(999)
        assert exc.user_id == 999
        assert "999" in str(exc)

    def test_channel_closed_exception(self):
        """Test ChannelClosedException."""
        exc = ChannelClosedException("publish")
        assert exc.operation == "publish"
        assert "closed" in str(exc)

    def test_hierarchy(self):
        """Test all errors share the base class."""
        for exc in (
            MalformedRecordException("id", "bad"),
            FetchFailedException("users", ValueError("x")),
            UserNotFoundException(1),
            ChannelClosedException("subscribe"),
        ):
            assert isinstance(exc, UserStreamException)

    def test_not_found_is_not_fetch_failure(self):
        """Test the two lookup failure modes stay distinct."""
        assert not isinstance(UserNotFoundException(1), FetchFailedException)
