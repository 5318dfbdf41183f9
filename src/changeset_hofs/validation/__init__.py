"""Validation: the and_ combinator, FieldChange, Outcome."""

from __future__ import annotations

from .change import FieldChange
from .combinators import and_, compose
from .result import Failure, Outcome, Success, evaluate, is_success

__all__ = [
    "Failure",
    "FieldChange",
    "Outcome",
    "Success",
    "and_",
    "compose",
    "evaluate",
    "is_success",
]
