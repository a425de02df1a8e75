"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from choreo import RampTo, Sequence


@dataclass
class StubPhrase:
    """Finite phrase whose value is its local time scaled by *rate*."""

    rate: float
    phrase_duration: float

    @property
    def duration(self) -> float:
        return self.phrase_duration

    @property
    def start_value(self) -> float:
        return 0.0

    @property
    def end_value(self) -> float:
        return self.rate * self.phrase_duration

    def get_value(self, t: float) -> float:
        return self.rate * t


@dataclass
class RecordingPhrase:
    """Phrase that remembers the local times it was asked for."""

    phrase_duration: float
    calls: list

    @property
    def duration(self) -> float:
        return self.phrase_duration

    @property
    def start_value(self) -> float:
        return 0.0

    @property
    def end_value(self) -> float:
        return self.phrase_duration

    def get_value(self, t: float) -> float:
        self.calls.append(t)
        return t


@pytest.fixture
def stub_phrase() -> StubPhrase:
    return StubPhrase(rate=2.0, phrase_duration=5.0)


@pytest.fixture
def empty_sequence() -> Sequence:
    return Sequence(0.0)


@pytest.fixture
def up_down() -> Sequence:
    """0 -> 10 over 2s, then back to 0 over 1s."""
    return Sequence(0.0).then(10.0, 2.0, RampTo).then(0.0, 1.0, RampTo)
