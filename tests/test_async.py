"""Tests for the awaitable combinators of Option and Result."""

import asyncio

import pytest

from optres import NONE, Err, Ok, Option, Result, Some


async def _length(value: str) -> int:
    await asyncio.sleep(0)
    return len(value)


async def _never(*_: object) -> object:
    pytest.fail("the callback should not have been called")


class TestOptionAsync:
    """Test the awaitable Option combinators."""

    @pytest.mark.asyncio
    async def test_and_then_async_some(self) -> None:
        """The callback result is awaited on a Some."""

        async def _some_length(value: str) -> Option[int]:
            return Some(await _length(value))

        assert await Some("foo").and_then_async(_some_length) == Some(3)

    @pytest.mark.asyncio
    async def test_and_then_async_none(self) -> None:
        """NONE short-circuits without calling the callback."""
        assert await NONE.and_then_async(_never) == NONE

    @pytest.mark.asyncio
    async def test_or_else_async_some(self) -> None:
        """A Some is returned as is."""
        first = Some("foo")
        assert await first.or_else_async(_never) is first

    @pytest.mark.asyncio
    async def test_or_else_async_none(self) -> None:
        """The fallback is awaited on NONE."""

        async def _fallback() -> Option[str]:
            return Some("bar")

        assert await NONE.or_else_async(_fallback) == Some("bar")

    @pytest.mark.asyncio
    async def test_map_async(self) -> None:
        """map_async awaits the mapped value."""
        assert await Some("foo").map_async(_length) == Some(3)
        assert await NONE.map_async(_never) == NONE


class TestResultAsync:
    """Test the awaitable Result combinators."""

    @pytest.mark.asyncio
    async def test_wrap_async_resolves(self) -> None:
        """A resolving awaitable gives an Ok."""
        assert await Result.wrap_async(_length("foo")) == Ok(3)

    @pytest.mark.asyncio
    async def test_wrap_async_raises(self) -> None:
        """A raising awaitable gives an Err of Some of the exception."""
        error = RuntimeError("bar")

        async def _boom() -> int:
            raise error

        assert await Result.wrap_async(_boom()) == Err(Some(error))

    @pytest.mark.asyncio
    async def test_wrap_async_future(self) -> None:
        """Futures are accepted as well as coroutines."""
        future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        future.set_exception(ValueError("baz"))
        result = await Result.wrap_async(future)
        assert result.is_err_and(
            lambda e: e.is_some_and(lambda exc: isinstance(exc, ValueError))
        )

    @pytest.mark.asyncio
    async def test_wrap_async_cancellation_propagates(self) -> None:
        """Cancellation is not captured as an Err."""
        task = asyncio.create_task(asyncio.sleep(10))
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await Result.wrap_async(task)

    @pytest.mark.asyncio
    async def test_and_then_async(self) -> None:
        """and_then_async chains on Ok and keeps the Err."""

        async def _ok_length(value: str) -> Result[int, str]:
            return Ok(await _length(value))

        assert await Ok("foo").and_then_async(_ok_length) == Ok(3)
        first = Err(ValueError("foo"))
        assert await first.and_then_async(_never) is first

    @pytest.mark.asyncio
    async def test_or_else_async(self) -> None:
        """or_else_async recovers from the error."""

        async def _recover(error: str) -> Result[str, str]:
            return Ok(error + "bar")

        assert await Err("foo").or_else_async(_recover) == Ok("foobar")
        first = Ok("foo")
        assert await first.or_else_async(_never) is first

    @pytest.mark.asyncio
    async def test_map_async(self) -> None:
        """map_async maps only the Ok value."""
        assert await Ok("foo").map_async(_length) == Ok(3)
        assert await Err("foo").map_async(_never) == Err("foo")

    @pytest.mark.asyncio
    async def test_map_err_async(self) -> None:
        """map_err_async maps only the error."""
        assert await Err("foo").map_err_async(_length) == Err(3)
        first = Ok("foo")
        assert await first.map_err_async(_never) is first

    @pytest.mark.asyncio
    async def test_sequential_chain(self) -> None:
        """Each step starts only once the previous one is settled."""
        order: list[str] = []

        async def _step(name: str, value: int) -> Result[int, str]:
            order.append(f"start {name}")
            await asyncio.sleep(0)
            order.append(f"end {name}")
            return Ok(value + 1)

        first = await Ok(0).and_then_async(lambda v: _step("a", v))
        second = await first.and_then_async(lambda v: _step("b", v))
        assert second == Ok(2)
        assert order == ["start a", "end a", "start b", "end b"]
