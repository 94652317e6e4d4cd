"""Shared fixtures for pathmapper tests."""

import pytest

from pathmapper.mapper import PathMapper


class RecordingExtraMapper:
    """Extra mapper that records every path it is asked about."""

    def __init__(self, answer: str | None) -> None:
        self.answer = answer
        self.calls: list[str] = []

    def map_path(self, path: str) -> str | None:
        self.calls.append(path)
        return self.answer


@pytest.fixture
def mapper() -> PathMapper:
    """Create a mapper with only the built-in rules."""
    return PathMapper()


@pytest.fixture
def claiming_extra_mapper() -> RecordingExtraMapper:
    """Create an extra mapper that claims every path."""
    return RecordingExtraMapper("workspace:claimed")


@pytest.fixture
def declining_extra_mapper() -> RecordingExtraMapper:
    """Create an extra mapper that never claims a path."""
    return RecordingExtraMapper(None)


@pytest.fixture
def empty_answer_extra_mapper() -> RecordingExtraMapper:
    """Create an extra mapper that answers with an empty string."""
    return RecordingExtraMapper("")
