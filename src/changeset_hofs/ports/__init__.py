"""Ports: protocols the validation layer is written against."""

from __future__ import annotations

from changeset_hofs.ports.validation import IValidator, is_deferred

__all__ = [
    "IValidator",
    "is_deferred",
]
