# src/scor/ranges.py
import logging
from typing import Iterable, Optional, Tuple

from .errors import InvalidRangeError
from .score import Score, ToValue, is_numeric, scor

logger = logging.getLogger(__name__)


def get_item_range(to_value: ToValue, items: Iterable) -> Tuple[float, float]:
    """
    Return ``(min, max)`` of ``to_value(item)`` over ``items``.

    Every item is passed through ``to_value`` (errors propagate).  Values
    that are not finite numbers are ignored.

    :raises TypeError: if ``to_value`` is not callable.
    :raises InvalidRangeError: if no numeric value is left.
    """
    if not callable(to_value):
        raise TypeError(f"to_value must be callable, got {to_value!r}")

    raw = [to_value(item) for item in items]
    numeric = [value for value in raw if is_numeric(value)]
    if not numeric:
        raise InvalidRangeError()

    lo, hi = min(numeric), max(numeric)

    logger.debug(
        "inferred range [%s, %s] from %d values (%d dropped)",
        lo, hi, len(numeric), len(raw) - len(numeric),
    )
    return lo, hi


def scor_for_items(
    to_value: ToValue, items: Iterable, weight: Optional[float] = None
) -> Score:
    """Create a Score whose range covers every numeric value in ``items``."""
    lo, hi = get_item_range(to_value, items)
    return scor(min=lo, max=hi, to_value=to_value, weight=weight)
