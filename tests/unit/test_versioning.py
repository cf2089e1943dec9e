"""Unit tests for the version token helpers shared by the store adapters."""

import pytest

from authzman.domain.exceptions import ConcurrentModification
from authzman.infrastructure.persistence.versioning import (
    INITIAL_VERSION,
    check_version,
    next_version,
)


class TestNextVersion:
    def test_initial(self) -> None:
        assert next_version(None) == INITIAL_VERSION == "1"

    def test_increments(self) -> None:
        assert next_version("7") == "8"

    def test_non_numeric_restarts(self) -> None:
        assert next_version("abc") == "1"


class TestCheckVersion:
    def test_matching_version_passes(self) -> None:
        check_version("role", "r", "3", "3")

    def test_empty_version_is_not_checked(self) -> None:
        check_version("role", "r", None, "3")
        check_version("role", "r", "", "3")

    def test_stale_version_raises(self) -> None:
        with pytest.raises(ConcurrentModification):
            check_version("privilege", "p", "2", "3")
