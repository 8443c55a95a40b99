"""Tests for status codes and check_status."""

from __future__ import annotations

import pytest

from exploration.exceptions import BadRangeError, ExplorationError, SizeMismatchError
from exploration.status import ExplorationStatus, check_status


class TestExplorationStatus:
    """The numeric codes are part of the public contract."""

    def test_codes(self) -> None:
        assert ExplorationStatus.SUCCESS == 0
        assert ExplorationStatus.BAD_RANGE == 1
        assert ExplorationStatus.PDF_RANKING_SIZE_MISMATCH == 2


class TestCheckStatus:
    """Tests for converting statuses into exceptions."""

    def test_success_does_not_raise(self) -> None:
        check_status(ExplorationStatus.SUCCESS, "op")
        check_status(0, "op")

    def test_bad_range(self) -> None:
        with pytest.raises(BadRangeError, match="generate_softmax") as exc_info:
            check_status(ExplorationStatus.BAD_RANGE, "generate_softmax")
        assert exc_info.value.status == ExplorationStatus.BAD_RANGE

    def test_size_mismatch(self) -> None:
        with pytest.raises(SizeMismatchError) as exc_info:
            check_status(2, "generate_bag")
        assert exc_info.value.status == ExplorationStatus.PDF_RANKING_SIZE_MISMATCH

    def test_errors_share_base_class(self) -> None:
        """Both status errors can be caught as ExplorationError."""
        with pytest.raises(ExplorationError):
            check_status(ExplorationStatus.BAD_RANGE, "op")

    def test_unknown_code(self) -> None:
        with pytest.raises(ValueError, match="Unknown"):
            check_status(7, "op")
