"""changeset-hofs — higher-order validators for changeset pipelines.

Composes field validators that return ``True`` or a failure payload,
synchronously or through an awaitable.
"""

from __future__ import annotations

# ── Ports ────────────────────────────────────────────────────────
from .ports import IValidator, is_deferred

# ── Primitives ──────────────────────────────────────────────────
from .primitives import ChangesetHofsError, InvalidValidatorError

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    Failure,
    FieldChange,
    Outcome,
    Success,
    and_,
    compose,
    evaluate,
    is_success,
)

__all__: list[str] = [
    # Ports
    "IValidator",
    "is_deferred",
    # Primitives
    "ChangesetHofsError",
    "InvalidValidatorError",
    # Validation
    "Failure",
    "FieldChange",
    "Outcome",
    "Success",
    "and_",
    "compose",
    "evaluate",
    "is_success",
]
