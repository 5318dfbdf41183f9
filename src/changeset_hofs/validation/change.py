"""FieldChange — the argument record forwarded to every validator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class FieldChange(BaseModel):
    """One pending field change, as handed to a validator.

    The host pipeline calls validators positionally; this record names
    those positions and hands them back, untouched and by identity,
    through :meth:`as_args`.

    Usage::

        change = FieldChange.from_args("name", "Bob", "Al", changes, user)
        validator(*change.as_args())
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: Any = None
    new_value: Any = None
    old_value: Any = None
    changes: Any = None
    obj: Any = None

    @classmethod
    def from_args(
        cls,
        key: Any = None,
        new_value: Any = None,
        old_value: Any = None,
        changes: Any = None,
        obj: Any = None,
    ) -> FieldChange:
        return cls(
            key=key,
            new_value=new_value,
            old_value=old_value,
            changes=changes,
            obj=obj,
        )

    def as_args(self) -> tuple[Any, Any, Any, Any, Any]:
        """Positional arguments in host-pipeline order."""
        return (self.key, self.new_value, self.old_value, self.changes, self.obj)
