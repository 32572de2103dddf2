# src/scor/weights.py
"""
Weight distribution.

Given a set of optional weights, every ``None`` receives an equal share of
whatever is left of ``1`` after the defined weights are summed.  If nothing
is left (the defined weights already add up to ``>= 1``) the share is ``0``.

Sequences and mappings go through separate entry points with the same rules:

    distribute_weights([0.5, None, None])          -> [0.5, 0.25, 0.25]
    distribute_weights_by_key({"a": 1.0, "b": None}) -> {"a": 1.0, "b": 0}
"""
import logging
from functools import reduce
from typing import Iterable, Mapping, Optional, Sequence, TypeVar

from .errors import AT_LEAST_ONE, EmptyInputError, InvalidRangeError
from .score import Score, is_numeric, set_weight

logger = logging.getLogger(__name__)

K = TypeVar("K")

Weight = float
OptionalWeight = Optional[float]


def to_numeric_sum(total: float, value) -> float:
    """
    Reducer that only adds numeric values.

    :raises InvalidRangeError: if ``total`` itself is not numeric.
    """
    if not is_numeric(total):
        raise InvalidRangeError()
    return total + value if is_numeric(value) else total


def check_weight(weight) -> None:
    """:raises InvalidRangeError: unless ``weight`` is a finite number >= 0."""
    if not is_numeric(weight) or weight < 0:
        raise InvalidRangeError()


def _share(weights: Iterable[OptionalWeight], kind: str) -> Optional[float]:
    """
    Validate ``weights`` and return the share for every undefined entry, or
    ``None`` when all of them are already defined.
    """
    weights = list(weights)
    if not weights:
        raise EmptyInputError(f"{AT_LEAST_ONE} {kind} is required")

    defined = [w for w in weights if w is not None]
    for w in defined:
        check_weight(w)

    total = reduce(to_numeric_sum, defined, 0)
    missing = len(weights) - len(defined)
    if missing == 0:
        if total == 0:
            raise InvalidRangeError()
        return None

    remaining = 1 - total
    share = remaining / missing if remaining > 0 else 0
    logger.debug(
        "distributing %s remaining weight over %d of %d %ss",
        remaining, missing, len(weights), kind,
    )
    return share


def distribute_weights(weights: Sequence[OptionalWeight]) -> Sequence[Weight]:
    """
    Fill every ``None`` in ``weights`` with its share of the remaining weight.

    Returns ``weights`` itself when no entry is ``None``, a new list otherwise.

    :raises EmptyInputError: if ``weights`` is empty.
    :raises InvalidRangeError: for a negative or non-finite weight, or when
        all weights are defined and sum up to 0.
    """
    share = _share(weights, "weight")
    if share is None:
        return weights
    return [share if w is None else w for w in weights]


def distribute_weights_by_key(
    weights: Mapping[K, OptionalWeight]
) -> Mapping[K, Weight]:
    """Mapping flavour of :func:`distribute_weights`; keys and order are kept."""
    share = _share(weights.values(), "weight")
    if share is None:
        return weights
    return {k: share if w is None else w for k, w in weights.items()}


def distribute_score_weights(scores: Sequence[Score]) -> Sequence[Score]:
    """
    Apply :func:`distribute_weights` to the ``weight`` of each Score.

    Only Scores without a weight are replaced; the rest are returned as is.
    """
    share = _share((s.weight for s in scores), "score")
    if share is None:
        return scores
    return [set_weight(s, share) if s.weight is None else s for s in scores]


def distribute_score_weights_by_key(
    scores: Mapping[K, Score]
) -> Mapping[K, Score]:
    share = _share((s.weight for s in scores.values()), "score")
    if share is None:
        return scores
    return {
        k: set_weight(s, share) if s.weight is None else s
        for k, s in scores.items()
    }


def weights_total(weights: Iterable[Weight]) -> float:
    """Validate fully defined weights and return their (positive) sum."""
    weights = list(weights)
    for w in weights:
        check_weight(w)
    total = reduce(to_numeric_sum, weights, 0)
    if total == 0:
        raise InvalidRangeError()
    return total
