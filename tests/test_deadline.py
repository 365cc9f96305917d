"""
Tests for cooperative cancellation and timeouts.
"""

import pytest

from quant_toolkit import Deadline, DeadlineExceeded, OperationCancelled


class TestDeadline:

    def test_no_timeout_never_expires(self):
        deadline = Deadline()
        assert not deadline.expired
        assert deadline.remaining() is None
        deadline.check()

    def test_zero_timeout_is_already_expired(self):
        deadline = Deadline(timeout=0)
        assert deadline.expired
        assert deadline.remaining() == 0.0
        with pytest.raises(DeadlineExceeded):
            deadline.check()

    def test_generous_timeout(self):
        deadline = Deadline(timeout=3600)
        assert 0 < deadline.remaining() <= 3600
        deadline.check()

    def test_cancel(self):
        deadline = Deadline(timeout=3600)
        deadline.cancel()
        assert deadline.cancelled
        with pytest.raises(OperationCancelled):
            deadline.check()

    def test_cancellation_wins_over_expiry(self):
        deadline = Deadline(timeout=0)
        deadline.cancel()
        with pytest.raises(OperationCancelled):
            deadline.check()

    def test_negative_timeout(self):
        with pytest.raises(ValueError):
            Deadline(timeout=-1)

    def test_exception_hierarchy(self):
        assert issubclass(DeadlineExceeded, TimeoutError)
        assert issubclass(OperationCancelled, RuntimeError)
