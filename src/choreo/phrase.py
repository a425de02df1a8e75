"""Phrase protocol, stock phrases, and time helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Time = float

EaseFn = Callable[[float], float]


def lerp(a, b, x: float):
    return a + (b - a) * x


def wrap_time(time: Time, duration: Time, inflection_point: Time = 0.0) -> Time:
    """Wrap *time* past *duration* back to *inflection_point*.

    Times at or before *duration* are returned unchanged, so a sequence
    plays through once and then loops over ``[inflection_point, duration)``.

    >>> wrap_time(5.0, 4.0)
    1.0
    >>> wrap_time(5.0, 4.0, 2.0)
    3.0
    """
    span = duration - inflection_point
    if time > duration and span > 0:
        return inflection_point + math.fmod(time - inflection_point, span)
    return time


@runtime_checkable
class Phrase(Protocol[T_co]):

    @property
    def duration(self) -> Time: ...

    @property
    def start_value(self) -> T_co: ...

    @property
    def end_value(self) -> T_co: ...

    def get_value(self, t: Time) -> T_co: ...


@dataclass(frozen=True)
class Hold(Generic[T]):
    """Stays at *end_value* for *duration*."""

    duration: Time
    start_value: T
    end_value: T

    def get_value(self, t: Time) -> T:
        return self.end_value


@dataclass(frozen=True)
class RampTo(Generic[T]):
    """Interpolates from *start_value* to *end_value* over *duration*.

    *ease_fn* maps normalized progress (0.0-1.0) to eased progress and
    *lerp_fn* blends the two values; both default to linear.
    """

    duration: Time
    start_value: T
    end_value: T
    ease_fn: EaseFn | None = None
    lerp_fn: Callable[[T, T, float], T] = lerp

    def get_value(self, t: Time) -> T:
        if self.duration <= 0:
            return self.end_value
        x = max(0.0, min(1.0, t / self.duration))
        if self.ease_fn is not None:
            x = self.ease_fn(x)
        return self.lerp_fn(self.start_value, self.end_value, x)


class _FnPhrase:
    def __init__(self, duration, value_fn):
        self._duration = duration
        self._value_fn = value_fn

    @property
    def duration(self):
        return self._duration

    @property
    def start_value(self):
        return self._value_fn(0.0)

    @property
    def end_value(self):
        return self._value_fn(self._duration)

    def get_value(self, t):
        return self._value_fn(t)


def phrase(duration: Time, value_fn: Callable[[Time], T]) -> Phrase[T]:
    """Create a phrase from a duration and a function of local time.

    >>> p = phrase(2.0, lambda t: t * 3)
    >>> p.duration
    2.0
    >>> p.get_value(1.0), p.end_value
    (3.0, 6.0)
    """
    return _FnPhrase(duration, value_fn)
