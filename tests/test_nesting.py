"""Tests for and_() composed of and_() validators."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from changeset_hofs import and_

NAMES = [
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
]


def sync_returning(value: Any):
    def validator(*_args: Any) -> Any:
        return value

    return validator


def async_returning(value: Any):
    async def validator(*_args: Any) -> Any:
        await asyncio.sleep(0)
        return value

    return validator


def nest(validators: list[Any]):
    return and_(
        and_(
            and_(*validators[0:3]),
            and_(*validators[3:6]),
        ),
        and_(*validators[6:9]),
    )


def test_nesting_returns_first_error() -> None:
    validate = nest([sync_returning(f"{name} error") for name in NAMES])

    assert validate() == "first error"


@pytest.mark.parametrize("failing", range(9))
def test_nesting_returns_single_failure(failing: int) -> None:
    values = [True] * 9
    values[failing] = "leeroy jenkins"

    validate = nest([sync_returning(v) for v in values])

    assert validate() == "leeroy jenkins"


def test_nesting_all_true() -> None:
    assert nest([sync_returning(True) for _ in NAMES])() is True


@pytest.mark.asyncio
async def test_async_nesting_returns_first_error() -> None:
    validate = nest([async_returning(f"{name} error") for name in NAMES])

    assert await validate() == "first error"


@pytest.mark.asyncio
@pytest.mark.parametrize("failing", range(9))
async def test_async_nesting_returns_single_failure(failing: int) -> None:
    values = [True] * 9
    values[failing] = "leeroy jenkins"

    validate = nest([async_returning(v) for v in values])

    assert await validate() == "leeroy jenkins"


@pytest.mark.asyncio
async def test_mixed_nesting_evaluates_in_order() -> None:
    order: list[str] = []

    def tracked(name: str, value: Any, *, deferred: bool):
        def validator(*_args: Any) -> Any:
            order.append(name)
            return value

        def async_validator(*_args: Any) -> Any:
            order.append(name)
            return async_returning(value)()

        return async_validator if deferred else validator

    validators = [
        tracked(name, True, deferred=index % 2 == 1)
        for index, name in enumerate(NAMES)
    ]
    validators[7] = tracked("eighth", "stop here", deferred=False)

    result = nest(validators)()

    assert order == ["first", "second"]
    assert await result == "stop here"
    assert order == NAMES[:8]


@pytest.mark.asyncio
async def test_async_inner_composition_defers_outer() -> None:
    invoked: list[str] = []

    def outer_tail(*_args: Any) -> bool:
        invoked.append("tail")
        return True

    validate = and_(and_(async_returning(True)), outer_tail)

    result = validate()
    assert invoked == []
    assert await result is True
    assert invoked == ["tail"]
