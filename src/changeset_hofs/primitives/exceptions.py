"""Exceptions for changeset-hofs."""

from __future__ import annotations


class ChangesetHofsError(Exception):
    """Root exception for the entire changeset-hofs package."""


class InvalidValidatorError(ChangesetHofsError, TypeError):
    """Raised at composition time when a member is not callable.

    Usage: :func:`~changeset_hofs.validation.combinators.and_` raises this
    before building the composed validator, so a bad composition fails
    where it is written rather than on the first field change.
    """

    def __init__(self, position: int, candidate: object) -> None:
        self.position = position
        self.candidate = candidate
        super().__init__(
            f"Validator at position {position} is not callable: "
            f"{type(candidate).__name__}"
        )
