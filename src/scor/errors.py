# src/scor/errors.py
"""
Exception hierarchy for the ``scor`` package.

Two categories matter to callers:

* range problems (bad bounds, bad weights, nothing to infer a range from)
  surface as :class:`InvalidRangeError`, which is also a ``ValueError``;
* missing pieces (no ``to_value``, no bounds on a Score that is being
  aggregated, an empty input) surface as ``TypeError`` subclasses.

Errors raised by caller-supplied extractors are never wrapped.
"""

INVALID_RANGE = "invalid range"
MISSING_TO_VALUE = "missing to_value"
AT_LEAST_ONE = "at least one"


class ScorError(Exception):
    """Base class for every error raised by ``scor``."""


class InvalidRangeError(ScorError, ValueError):
    def __init__(self, message: str = INVALID_RANGE):
        super().__init__(message)


class MissingToValueError(ScorError, TypeError):
    def __init__(self, message: str = MISSING_TO_VALUE):
        super().__init__(message)


class EmptyInputError(ScorError, TypeError):
    """Raised when an operation needs at least one entry and got none."""


class IncompleteScoreError(ScorError, TypeError):
    """A Score passed to an aggregate lacks ``to_value``, ``min`` or ``max``."""
