# src/scor/mean.py
import logging
from typing import Callable, Hashable, List, Mapping, Optional, Sequence, Tuple

from .errors import AT_LEAST_ONE, EmptyInputError, IncompleteScoreError
from .score import Score
from .weights import Weight, weights_total

logger = logging.getLogger(__name__)


class Mean:
    """
    Takes a list of (score, weight) tuples.
    The result for an item = Σ weight_i * score_i.for_item(item) / Σ weight_i

    Without weights every component counts once and the divisor is the number
    of components.
    """

    def __init__(
        self,
        components: List[Tuple[Score, Weight]],
        weighted: bool,
    ):
        self.components = components
        self.weighted = weighted
        self.total = (
            weights_total(w for _, w in components) if weighted else len(components)
        )

    def __call__(self, item) -> float:
        if self.weighted:
            return sum(
                score.for_item(item) * weight for score, weight in self.components
            ) / self.total
        return sum(score.for_item(item) for score, _ in self.components) / self.total

    def __repr__(self) -> str:
        kind = "weighted" if self.weighted else "arithmetic"
        return f"Mean({kind}, {len(self.components)} scores)"


def _check_complete(label: Hashable, score: Score) -> None:
    missing = []
    if score.to_value is None:
        missing.append("to_value")
    if score.min is None:
        missing.append("min")
    if score.max is None:
        missing.append("max")
    if missing:
        raise IncompleteScoreError(
            f"score {label!r} has no {', '.join(missing)}"
        )


def _build(
    labelled: List[Tuple[Hashable, Score]],
    weights: Optional[List[Weight]],
) -> Callable[[object], float]:
    if not labelled:
        raise EmptyInputError(f"{AT_LEAST_ONE} score is required")
    for label, score in labelled:
        _check_complete(label, score)

    scores = [score for _, score in labelled]
    if weights is None and any(s.weight is not None for s in scores):
        # configured weights have to be complete, see distribute_score_weights
        weights = [s.weight for s in scores]
    if weights is None:
        if len(scores) == 1:
            return scores[0].for_item
        to_mean = Mean([(s, 1) for s in scores], weighted=False)
    else:
        to_mean = Mean(list(zip(scores, weights)), weighted=True)

    logger.debug("created %r", to_mean)
    return to_mean


def create_to_mean(
    scores: Sequence[Score],
    weights: Optional[Sequence[Weight]] = None,
) -> Callable[[object], float]:
    """
    Return a function mapping an item to the (weighted) arithmetic mean of
    ``score.for_item(item)`` over ``scores``.

    Without ``weights`` the Scores' own ``weight`` is used as soon as one of
    them has it set; then all of them need one.  With a single unweighted
    Score that Score's ``for_item`` is returned.

    :raises EmptyInputError: if ``scores`` is empty.
    :raises IncompleteScoreError: if a Score has no ``to_value``/``min``/``max``.
    :raises TypeError: if ``weights`` does not have one entry per Score.
    :raises InvalidRangeError: for a negative or non-numeric weight, a
        missing Score weight, or weights that sum up to 0.
    """
    if weights is not None and len(weights) != len(scores):
        raise TypeError(
            f"expected {len(scores)} weights, got {len(weights)}"
        )
    return _build(
        list(enumerate(scores)),
        None if weights is None else list(weights),
    )


def create_to_mean_by_key(
    scores: Mapping[Hashable, Score],
    weights: Optional[Mapping[Hashable, Weight]] = None,
) -> Callable[[object], float]:
    """Mapping flavour of :func:`create_to_mean`; weights are matched by key."""
    if weights is not None and set(weights) != set(scores):
        raise TypeError(
            f"weight keys {sorted(map(str, weights))} do not match "
            f"score keys {sorted(map(str, scores))}"
        )
    return _build(
        list(scores.items()),
        None if weights is None else [weights[k] for k in scores],
    )
