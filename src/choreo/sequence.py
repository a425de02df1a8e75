"""Sequences of phrases and the phrase wrapper that lets them nest."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Self, TypeVar

from .phrase import Hold, Phrase, RampTo, Time, wrap_time

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Sequence(Generic[T]):
    """An ordered chain of phrases describing the motion of one value.

    A sequence always has a value: before any phrase is appended it reports
    *initial_value* at every time.  Each appended phrase starts from the
    sequence's end value at the moment it is appended.  Appended phrases are
    shared, not copied, so their durations must never change.

    >>> seq = Sequence(0.0).then(10.0, 2.0).then(0.0, 1.0)
    >>> seq.duration, seq.get_value(1.0), seq.get_value(2.5)
    (3.0, 5.0, 5.0)
    """

    initial_value: T
    _phrases: list[Phrase[T]] = field(default_factory=list, init=False, repr=False)
    _duration: Time = field(default=0.0, init=False, repr=False)

    def copy(self) -> Sequence[T]:
        """Duplicate this sequence; later changes to either side stay separate."""
        dup = Sequence(self.initial_value)
        dup._phrases = list(self._phrases)
        dup._duration = dup.calc_duration()
        return dup

    __copy__ = copy

    def set(self, value: T) -> Self:
        """Set the end value of the sequence.

        With no phrases this replaces the initial value.  Otherwise an
        instantaneous Hold is appended, so earlier phrases keep their timing.
        """
        if not self._phrases:
            self.initial_value = value
        else:
            self._append(Hold(0.0, self.end_value, value))
        return self

    def then(self, target, duration: Time | None = None, kind=None, *args, **kwargs) -> Self:
        """Append motion to the end of the sequence.

        ``then(value, duration, kind=RampTo, *args, **kwargs)`` builds
        ``kind(duration, self.end_value, value, *args, **kwargs)``; extra
        arguments (easing and the like) are passed through untouched.

        ``then(phrase)`` appends an existing phrase and ``then(sequence)``
        appends each phrase of another sequence in order, ignoring its
        initial value.  Phrases are recognized by a ``get_value`` method on
        their type, so their value properties are not read to dispatch.
        """
        if duration is None:
            if kind is not None or args or kwargs:
                raise TypeError("then() got phrase arguments without a duration")
            if isinstance(target, Sequence):
                return self._extend(target)
            if callable(getattr(type(target), "get_value", None)):
                return self._append(target)
            raise TypeError(f"then() needs a duration to move to {target!r}")

        if kind is None:
            kind = RampTo
        return self._append(kind(duration, self.end_value, target, *args, **kwargs))

    def _append(self, phrase: Phrase[T]) -> Self:
        self._phrases.append(phrase)
        self._duration += phrase.duration
        return self

    def _extend(self, other: Sequence[T]) -> Self:
        log.debug("Appending %d phrases (%.3fs)", len(other._phrases), other.duration)
        for p in list(other._phrases):
            self._append(p)
        return self

    def as_phrase(self) -> SequencePhrase[T]:
        """Freeze a copy of this sequence into a phrase for nesting."""
        log.debug("Freezing sequence of %d phrases (%.3fs)", len(self._phrases), self._duration)
        return SequencePhrase(self.copy())

    def get_value(self, t: Time) -> T:
        if t < 0:
            return self.initial_value
        if t >= self._duration:
            return self.end_value

        # An exact boundary belongs to the earlier phrase, at its full duration.
        for p in self._phrases:
            if p.duration < t:
                t -= p.duration
            else:
                return p.get_value(t)
        return self.end_value

    def get_value_wrapped(self, t: Time, inflection_point: Time = 0.0) -> T:
        """Value at *t*, looping back to *inflection_point* past the end."""
        return self.get_value(wrap_time(t, self._duration, inflection_point))

    @property
    def start_value(self) -> T:
        return self.initial_value

    @property
    def end_value(self) -> T:
        if not self._phrases:
            return self.initial_value
        return self._phrases[-1].end_value

    @property
    def duration(self) -> Time:
        return self._duration

    @property
    def phrase_count(self) -> int:
        return len(self._phrases)

    @property
    def phrases(self) -> tuple[Phrase[T], ...]:
        return tuple(self._phrases)

    def calc_duration(self) -> Time:
        """Sum phrase durations from scratch (cross-check for ``duration``)."""
        return sum((p.duration for p in self._phrases), 0.0)


def create_sequence(initial_value: T) -> Sequence[T]:
    return Sequence(initial_value)


class SequencePhrase(Generic[T]):
    """Wraps a sequence so it can be used as a phrase.

    The wrapped sequence must not be shared with anyone who could still
    change it; :meth:`Sequence.as_phrase` hands over a private copy.  The
    duration is captured once here and never recomputed.
    """

    def __init__(self, sequence: Sequence[T]) -> None:
        self._sequence = sequence
        self._duration = sequence.duration

    @property
    def duration(self) -> Time:
        return self._duration

    @property
    def start_value(self) -> T:
        return self._sequence.start_value

    @property
    def end_value(self) -> T:
        return self._sequence.end_value

    def get_value(self, t: Time) -> T:
        return self._sequence.get_value(t)

    def __repr__(self) -> str:
        return f"SequencePhrase(duration={self._duration!r}, phrases={self._sequence.phrase_count})"
