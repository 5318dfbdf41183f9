"""and_ — short-circuiting conjunction over sync and async validators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.validation import is_deferred
from ..primitives.exceptions import InvalidValidatorError
from .change import FieldChange
from .result import Failure, Outcome, evaluate

if TYPE_CHECKING:
    from collections.abc import Awaitable, Sequence

    from ..ports.validation import IValidator

logger = logging.getLogger("changeset_hofs.validation")


def and_(*validators: IValidator, capture_sync_faults: bool = False) -> IValidator:
    """Compose *validators* into one that passes only if all of them pass.

    Validators run left to right and evaluation stops at the first result
    that is not exactly ``True``; that result is returned as-is.

    Results are consumed synchronously until the first awaitable shows up.
    From there on the remaining validators are chained behind it and the
    composed validator returns a coroutine instead, so callers get a plain
    value when every member was synchronous and an awaitable otherwise.
    The synchronous prefix is never re-run and later members, sync or not,
    are only invoked once their predecessor has settled to ``True``.

    Exceptions raised inside the asynchronous chain are caught and become
    the settled value. Exceptions raised before the switch propagate unless
    ``capture_sync_faults`` is set, in which case they are returned as the
    failure payload too.

    The coroutine returned in the asynchronous case is lazy: nothing after
    the first awaitable runs until the caller awaits it (or schedules it as
    a task). A result that is never awaited never finishes validating.

    Usage::

        validate_name = and_(validate_presence, validate_length, check_unique)
        result = validate_name("name", "Bob", "Al", changes, user)
        if inspect.isawaitable(result):
            result = await result
    """
    for position, validator in enumerate(validators):
        if not callable(validator):
            raise InvalidValidatorError(position, validator)

    chain = tuple(validators)

    def validate(
        key: Any = None,
        new_value: Any = None,
        old_value: Any = None,
        changes: Any = None,
        obj: Any = None,
    ) -> Any:
        change = FieldChange.from_args(key, new_value, old_value, changes, obj)
        args = change.as_args()

        for index, validator in enumerate(chain):
            try:
                result = validator(*args)
            except Exception as exc:
                if not capture_sync_faults:
                    raise
                logger.debug(
                    "Validator %d raised %s; returning it as failure payload",
                    index,
                    type(exc).__name__,
                    exc_info=True,
                )
                return exc

            if is_deferred(result):
                logger.debug("Validator %d deferred; chaining the rest", index)
                return _settle_chain(result, chain[index + 1 :], change)

            outcome = evaluate(result)
            if isinstance(outcome, Failure):
                return outcome.value

        return True

    return validate


compose = and_


async def _resolve(result: Any) -> Any:
    # Awaitables settling to awaitables are flattened, like promise assimilation.
    while is_deferred(result):
        result = await result
    return result


async def _settle_chain(
    pending: Awaitable[Any],
    remaining: Sequence[IValidator],
    change: FieldChange,
) -> Any:
    args = change.as_args()
    try:
        outcome: Outcome = evaluate(await _resolve(pending))
        for validator in remaining:
            if isinstance(outcome, Failure):
                break
            outcome = evaluate(await _resolve(validator(*args)))
    except Exception as exc:
        logger.debug(
            "Asynchronous chain raised %s; settling with it as failure payload",
            type(exc).__name__,
            exc_info=True,
        )
        return exc
    return outcome.value
