from __future__ import annotations

import asyncio
import operator

import pytest

import when as W
from fakes import later


class TestReduce:
    @pytest.mark.asyncio
    async def test_sum_with_initial(self) -> None:
        assert await W.reduce([1, W.resolve(2), 3], lambda a, b: a + b, 0) == 6

    @pytest.mark.asyncio
    async def test_first_element_seeds(self) -> None:
        assert await W.reduce([1, 2, later(3)], operator.add) == 6

    @pytest.mark.asyncio
    async def test_initial_may_be_a_promise(self) -> None:
        assert await W.reduce([1], lambda a, b: a + b, W.resolve(10)) == 11

    @pytest.mark.asyncio
    async def test_reducer_receives_index_and_length(self) -> None:
        result = await W.reduce(["a", "b"], lambda acc, v, i, n: acc + [(v, i, n)], [])
        assert result == [("a", 0, 2), ("b", 1, 2)]

    @pytest.mark.asyncio
    async def test_builtin_reducers_get_accumulator_and_value(self) -> None:
        assert await W.reduce([0, 0, 0], max) == 0
        assert await W.reduce([5, 3, 4], min) == 3

    @pytest.mark.asyncio
    async def test_defaulted_parameters_are_not_filled(self) -> None:
        def add(acc: int, x: int, scale: int = 1) -> int:
            return acc + x * scale

        assert await W.reduce([1, 2, 3], add, 0) == 6
        assert await W.reduce_right([1, 2, 3], add, 0) == 6

    @pytest.mark.asyncio
    async def test_empty_with_initial(self) -> None:
        assert await W.reduce([], operator.add, "seed") == "seed"

    @pytest.mark.asyncio
    async def test_empty_without_initial(self) -> None:
        with pytest.raises(W.EmptyReduceError, match="reduce"):
            await W.reduce([], operator.add)

    @pytest.mark.asyncio
    async def test_steps_never_overlap(self) -> None:
        events: list[tuple[str, int]] = []

        async def step(acc: int, value: int) -> int:
            events.append(("start", value))
            await asyncio.sleep(0)
            events.append(("end", value))
            return acc + value

        assert await W.reduce([1, 2, 3], step, 0) == 6
        assert events == [
            ("start", 1),
            ("end", 1),
            ("start", 2),
            ("end", 2),
            ("start", 3),
            ("end", 3),
        ]

    @pytest.mark.asyncio
    async def test_failure_skips_remaining_steps(self) -> None:
        seen: list[int] = []

        def f(acc: int, value: int) -> int:
            seen.append(value)
            if value == 2:
                raise ValueError("stop")
            return acc + value

        with pytest.raises(ValueError, match="stop"):
            await W.reduce([1, 2, 3], f, 0)
        assert seen == [1, 2]

    @pytest.mark.asyncio
    async def test_element_rejection(self) -> None:
        with pytest.raises(W.RejectionError) as info:
            await W.reduce([1, W.reject("bad"), 3], operator.add, 0)
        assert info.value.reason == "bad"

    @pytest.mark.asyncio
    async def test_outer_promise(self) -> None:
        assert await W.reduce(W.resolve([1, 2]), operator.add, 0) == 3


class TestReduceRight:
    @pytest.mark.asyncio
    async def test_folds_from_the_end(self) -> None:
        assert await W.reduce_right(["a", "b", "c"], lambda acc, v: acc + v) == "cba"

    @pytest.mark.asyncio
    async def test_index_counts_from_the_left(self) -> None:
        assert await W.reduce_right([1, 2, 3], lambda acc, v, i: acc + [i], []) == [2, 1, 0]

    @pytest.mark.asyncio
    async def test_empty_without_initial(self) -> None:
        with pytest.raises(W.EmptyReduceError, match="reduce_right"):
            await W.reduce_right([], operator.add)
