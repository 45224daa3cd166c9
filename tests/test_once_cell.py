"""Tests for the write-once memoisation cell."""

import pytest

from shared.helper.OnceCell import OnceCell


async def test_factory_runs_once() -> None:
    cell: OnceCell[list[str]] = OnceCell()
    calls = 0

    async def factory() -> list[str]:
        nonlocal calls
        calls += 1
        return ["guide"]

    assert await cell.get_or_init(factory) == ["guide"]
    assert await cell.get_or_init(factory) == ["guide"]
    assert calls == 1


async def test_failing_factory_leaves_cell_empty() -> None:
    cell: OnceCell[int] = OnceCell()

    async def broken() -> int:
        raise RuntimeError("backend down")

    async def working() -> int:
        return 7

    with pytest.raises(RuntimeError):
        await cell.get_or_init(broken)
    assert not cell.is_set()

    assert await cell.get_or_init(working) == 7
    assert cell.is_set()


def test_first_set_wins() -> None:
    cell: OnceCell[str] = OnceCell()

    assert cell.set("first") == "first"
    assert cell.set("second") == "first"
    assert cell.get() == "first"
