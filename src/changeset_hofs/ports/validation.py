"""IValidator — the five-argument changeset validator protocol."""

from __future__ import annotations

from inspect import isawaitable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IValidator(Protocol):
    """Protocol for changeset field validators.

    A validator is called once per field change with
    ``(key, new_value, old_value, changes, obj)`` and returns either an
    immediate result or an awaitable settling to one. Exactly ``True``
    means success; any other value is a failure payload handed back to
    the host pipeline unchanged.

    Validators are composable via
    :func:`~changeset_hofs.validation.combinators.and_`.
    """

    def __call__(
        self,
        key: Any,
        new_value: Any,
        old_value: Any,
        changes: Any,
        obj: Any,
        /,
    ) -> Any: ...


def is_deferred(result: object) -> bool:
    """Return ``True`` if *result* settles later (anything awaitable).

    Structural: coroutines, futures, tasks and any object implementing
    ``__await__`` qualify. Callback-only futures such as
    ``concurrent.futures.Future`` are not awaitable and count as immediate
    results; wrap them with ``asyncio.wrap_future`` first.
    """
    return isawaitable(result)
