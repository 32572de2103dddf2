# src/scor/score.py
"""
The ``Score`` value object.

A Score maps a numeric value onto ``[0, 1]`` using an inclusive
``[min, max]`` range:

    value <= min            -> 0
    value >= max            -> 1
    anything in between     -> linear interpolation
    not a finite number     -> 0

A Score may be built without a range (or with only one side of it) so that
the range can be filled in later, e.g. by ``scor_for_items``.  Such a Score
carries its data but refuses to score anything.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import InvalidRangeError, MissingToValueError

T = TypeVar("T")

ToValue = Callable[[T], float]


def is_numeric(value: Any) -> bool:
    """True for finite real numbers only (``bool`` is not a number here)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def get_zero(*_: Any) -> int:
    return 0


@dataclass(frozen=True)
class Score(Generic[T]):
    """
    Immutable scoring configuration.

    All fields are optional.  ``weight`` is only used when several Scores are
    combined; ``None`` means "not decided yet" (see ``distribute_weights``).
    """

    min: Optional[float] = None
    max: Optional[float] = None
    to_value: Optional[ToValue] = None
    weight: Optional[float] = None

    def __post_init__(self) -> None:
        if self.min is not None and not is_numeric(self.min):
            raise InvalidRangeError()
        if self.max is not None and not is_numeric(self.max):
            raise InvalidRangeError()
        if self.weight is not None and (
            not is_numeric(self.weight) or self.weight < 0
        ):
            raise InvalidRangeError()
        if self.has_range and self.min > self.max:
            raise InvalidRangeError()

    @property
    def has_range(self) -> bool:
        """Both ends of the range are known."""
        return self.min is not None and self.max is not None

    def for_value(self, value: Any) -> float:
        """
        Return the score for ``value``.

        If the range has no length (``min == max``) the score is always 0.

        :raises InvalidRangeError: if the range is not limited on both sides.
        """
        if not self.has_range:
            raise InvalidRangeError()
        if self.min == self.max:
            return 0
        if not is_numeric(value) or value <= self.min:
            return 0
        if value >= self.max:
            return 1
        return (value - self.min) / (self.max - self.min)

    def for_item(self, item: T) -> float:
        """
        Return the score for ``item`` by passing it through ``to_value``.

        An empty range scores 0 without calling ``to_value``.

        :raises InvalidRangeError: if the range is not limited on both sides.
        :raises MissingToValueError: if no ``to_value`` is configured.
        """
        if not self.has_range:
            raise InvalidRangeError()
        if self.min == self.max:
            return 0
        if self.to_value is None:
            raise MissingToValueError()
        return self.for_value(self.to_value(item))


def scor(
    min: Optional[float] = None,
    max: Optional[float] = None,
    to_value: Optional[ToValue] = None,
    weight: Optional[float] = None,
) -> Score:
    """
    Create a Score.  A score is always between 0 and 1, even if a value is
    outside the range.

    :raises InvalidRangeError: if ``min``/``max`` is not a finite number,
        ``min > max``, or ``weight`` is not a finite non-negative number.
    """
    return Score(min=min, max=max, to_value=to_value, weight=weight)


# -----------------------------------------------------------------
# Updaters – every one of them returns a new Score
# -----------------------------------------------------------------
def set_min(score: Score, min: Optional[float]) -> Score:
    return replace(score, min=min)


def set_max(score: Score, max: Optional[float]) -> Score:
    return replace(score, max=max)


def set_range(score: Score, min: Optional[float], max: Optional[float]) -> Score:
    return replace(score, min=min, max=max)


def set_to_value(score: Score, to_value: Optional[ToValue]) -> Score:
    return replace(score, to_value=to_value)


def set_weight(score: Score, weight: Optional[float] = None) -> Score:
    """Passing ``None`` makes the Score eligible for weight distribution again."""
    return replace(score, weight=weight)
