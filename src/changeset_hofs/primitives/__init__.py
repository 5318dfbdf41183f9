"""Primitives: exception hierarchy."""

from __future__ import annotations

from .exceptions import ChangesetHofsError, InvalidValidatorError

__all__ = [
    "ChangesetHofsError",
    "InvalidValidatorError",
]
