"""Outcome — tagged success/failure for a single validator result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class Success:
    """The validator returned exactly ``True``."""

    value: Literal[True] = True


@dataclass(frozen=True)
class Failure:
    """The validator returned anything but ``True``.

    ``value`` is the payload exactly as the validator produced it
    (message string, ``False``, structured errors, an exception...).
    """

    value: Any


Outcome = Success | Failure

SUCCESS = Success()


def is_success(value: object) -> bool:
    """Only the ``True`` singleton counts; ``1`` and ``"ok"`` do not."""
    return value is True


def evaluate(value: object) -> Outcome:
    """Classify an immediate result. Shared by the sync and async paths."""
    if is_success(value):
        return SUCCESS
    return Failure(value)
