"""Normalise measurements into ``[0, 1]`` scores and combine them.

Build one ``Score`` per measurement (directly with ``scor`` or from a data
set with ``scor_for_items``), optionally fill in missing weights with
``distribute_weights``, then rank items with ``create_to_mean``::

    stars = scor_for_items(lambda repo: repo["stars"], repos)
    age = scor(min=0, max=365, to_value=lambda repo: repo["days_since_push"])
    to_mean = create_to_mean([stars, age], weights=[0.7, 0.3])
    ranked = sorted(repos, key=to_mean, reverse=True)
"""

from .errors import (
    AT_LEAST_ONE,
    INVALID_RANGE,
    MISSING_TO_VALUE,
    EmptyInputError,
    IncompleteScoreError,
    InvalidRangeError,
    MissingToValueError,
    ScorError,
)
from .mean import create_to_mean, create_to_mean_by_key
from .ranges import get_item_range, scor_for_items
from .score import (
    Score,
    ToValue,
    get_zero,
    is_numeric,
    scor,
    set_max,
    set_min,
    set_range,
    set_to_value,
    set_weight,
)
from .weights import (
    OptionalWeight,
    Weight,
    distribute_score_weights,
    distribute_score_weights_by_key,
    distribute_weights,
    distribute_weights_by_key,
    to_numeric_sum,
)

__all__ = [
    "AT_LEAST_ONE",
    "INVALID_RANGE",
    "MISSING_TO_VALUE",
    "EmptyInputError",
    "IncompleteScoreError",
    "InvalidRangeError",
    "MissingToValueError",
    "ScorError",
    "Score",
    "ToValue",
    "Weight",
    "OptionalWeight",
    "scor",
    "set_min",
    "set_max",
    "set_range",
    "set_to_value",
    "set_weight",
    "is_numeric",
    "get_zero",
    "get_item_range",
    "scor_for_items",
    "to_numeric_sum",
    "distribute_weights",
    "distribute_weights_by_key",
    "distribute_score_weights",
    "distribute_score_weights_by_key",
    "create_to_mean",
    "create_to_mean_by_key",
]
