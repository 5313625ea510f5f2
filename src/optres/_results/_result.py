from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import TypeIs, cast

from .._core import Pipeable, inner_repr
from ._option import NONE, Option, Some

logger = logging.getLogger(__name__)


class ResultShapeError(TypeError): ...


class Result[T, E](Pipeable, ABC):
    """Type representing either success (`Ok`) or failure (`Err`).

    Failure is an ordinary value: combinators propagate an `Err` unchanged until the caller decides to handle it, with `match()`, `unwrap_or()` or one of the `or_*` methods.

    Use `Result.wrap()` and `Result.wrap_async()` to turn code that raises into a `Result`.

    Example:
    ```python
    >>> import optres as opt
    >>> def parse(text: str) -> opt.Result[int, str]:
    ...     return opt.Result.wrap(int, text).map_err(lambda _: f"not a number: {text!r}")
    >>> parse("21").map(lambda x: x * 2)
    Ok(42)
    >>> parse("abc").map(lambda x: x * 2)
    Err("not a number: 'abc'")

    ```
    """

    __slots__ = ()

    @staticmethod
    def collect[V, F](results: Iterable[Result[V, F]]) -> Result[list[V], F]:
        """Gather the values of many results into a single `Result[list[V], F]`.

        Iteration stops at the first `Err`, which is returned as is; the rest of **results** is never consumed.

        Args:
            results (Iterable[Result[V, F]]): The results to collect.

        Returns:
            Result[list[V], F]: `Ok` of every value in order, or the first `Err` found.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Result.collect([opt.Ok(1), opt.Ok(2), opt.Ok(3)])
        Ok([1, 2, 3])
        >>> opt.Result.collect([opt.Ok(1), opt.Err(2), opt.Err(3)])
        Err(2)

        ```
        """
        values: list[V] = []
        for result in results:
            if result.is_err():
                return cast(Result[list[V], F], result)
            values.append(result.value)  # type: ignore[union-attr]
        return Ok(values)

    @staticmethod
    def wrap[**P, V](
        func: Callable[P, V], *args: P.args, **kwargs: P.kwargs
    ) -> Result[V, Option[Exception]]:
        """Call **func** and capture any raised `Exception` as an `Err`.

        The error channel is an `Option` of the exception, built with `Option.wrap()`.

        `BaseException` subclasses which are not `Exception` (`KeyboardInterrupt`, `SystemExit`, ...) are not captured.

        Args:
            func (Callable[P, V]): The function to call.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Result[V, Option[Exception]]: `Ok` of the return value, or `Err` of the raised exception.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Result.wrap(int, "42")
        Ok(42)
        >>> opt.Result.wrap(int, "foo")
        Err(Some(ValueError("invalid literal for int() with base 10: 'foo'")))

        ```
        """
        try:
            return Ok(func(*args, **kwargs))
        except Exception as e:
            logger.debug("captured %r raised by %r", e, func)
            return Err(Option.wrap(e))

    @staticmethod
    async def wrap_async[V](
        awaitable: Awaitable[V],
    ) -> Result[V, Option[Exception]]:
        """Await **awaitable** and capture any raised `Exception` as an `Err`.

        Same semantics as `Result.wrap()`, for a coroutine, task or future.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def boom() -> int:
        ...     raise RuntimeError("bar")
        >>> asyncio.run(opt.Result.wrap_async(asyncio.sleep(0, "foo")))
        Ok('foo')
        >>> asyncio.run(opt.Result.wrap_async(boom()))
        Err(Some(RuntimeError('bar')))

        ```
        """
        try:
            return Ok(await awaitable)
        except Exception as e:
            logger.debug("captured %r raised by awaitable %r", e, awaitable)
            return Err(Option.wrap(e))

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Ok`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok(-3).is_ok()
        True
        >>> opt.Err("foo").is_ok()
        False

        ```
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Err`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok(-3).is_err()
        False
        >>> opt.Err("foo").is_err()
        True

        ```
        """
        ...

    @abstractmethod
    def match[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Call exactly one of the two arms, depending on the variant.

        Args:
            ok (Callable[[T], U]): Called with the contained value if `Ok`.
            err (Callable[[E], U]): Called with the contained error if `Err`.

        Returns:
            U: The return value of the called arm.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").match(ok=lambda v: v + "baz", err=lambda e: "bar")
        'foobaz'
        >>> opt.Err("bar").match(ok=lambda v: "foo", err=lambda e: e + "baz")
        'barbaz'

        ```
        """
        ...

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Returns `True` if the result is `Ok` and its value satisfies **predicate**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok(2).is_ok_and(lambda x: x > 1)
        True
        >>> opt.Ok(0).is_ok_and(lambda x: x > 1)
        False
        >>> opt.Err("foo").is_ok_and(lambda x: x > 1)
        False

        ```
        """
        return self.is_ok() and predicate(self.value)

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Returns `True` if the result is `Err` and its error satisfies **predicate**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Err("foo").is_err_and(lambda e: e.startswith("f"))
        True
        >>> opt.Err("bar").is_err_and(lambda e: e.startswith("f"))
        False
        >>> opt.Ok("foo").is_err_and(lambda e: e.startswith("f"))
        False

        ```
        """
        return self.is_err() and predicate(self.error)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Ok` value or a provided default.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").unwrap_or("bar")
        'foo'
        >>> opt.Err("foo").unwrap_or("bar")
        'bar'

        ```
        """
        return self.value if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Returns the contained `Ok` value or computes it from the error with **f**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Err(KeyError("foo")).unwrap_or_else(lambda e: f"missing {e}")
        "missing 'foo'"

        ```
        """
        if self.is_ok():
            return self.value
        return f(self.error)  # type: ignore[union-attr]

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls **f** if the result is `Ok`, otherwise returns the `Err` unchanged.

        Args:
            f (Callable[[T], Result[U, E]]): Function that takes the `Ok` value and returns a new `Result`.

        Returns:
            Result[U, E]: The result of **f** if `Ok`, otherwise `self`.

        Example:
        ```python
        >>> import optres as opt
        >>> def half(x: int) -> opt.Result[int, str]:
        ...     return opt.Ok(x // 2) if x % 2 == 0 else opt.Err(f"{x} is odd")
        >>> opt.Ok(8).and_then(half).and_then(half)
        Ok(2)
        >>> opt.Ok(6).and_then(half).and_then(half)
        Err('3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.value)
        return cast(Result[U, E], self)

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Returns **other** if the result is `Ok`, otherwise returns the `Err` unchanged.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok(2).and_(opt.Ok("bar"))
        Ok('bar')
        >>> opt.Err("foo").and_(opt.Err("bar"))
        Err('foo')

        ```
        """
        return other if self.is_ok() else cast(Result[U, E], self)

    async def and_then_async[U](
        self, f: Callable[[T], Awaitable[Result[U, E]]]
    ) -> Result[U, E]:
        """Awaitable variant of `and_then()`. **f** is only called if the result is `Ok`.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def half(x: int) -> opt.Result[int, str]:
        ...     return opt.Ok(x // 2) if x % 2 == 0 else opt.Err(f"{x} is odd")
        >>> asyncio.run(opt.Ok(8).and_then_async(half))
        Ok(4)
        >>> asyncio.run(opt.Ok(3).and_then_async(half))
        Err('3 is odd')
        >>> asyncio.run(opt.Err("foo").and_then_async(half))
        Err('foo')

        ```
        """
        if self.is_ok():
            return await f(self.value)
        return cast(Result[U, E], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Calls **f** with the error if the result is `Err`, otherwise returns the `Ok` unchanged.

        The fallback may carry a different error type.

        Args:
            f (Callable[[E], Result[T, F]]): Function that takes the `Err` value and returns a new `Result`.

        Returns:
            Result[T, F]: `self` if `Ok`, otherwise the result of **f**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Err("foo").or_else(lambda e: opt.Ok(f"recovered from {e}"))
        Ok('recovered from foo')
        >>> opt.Ok("foo").or_else(lambda e: opt.Ok("bar"))
        Ok('foo')

        ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return f(self.error)  # type: ignore[union-attr]

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Returns **other** if the result is `Err`, otherwise returns the `Ok` unchanged.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").or_(opt.Err("bar"))
        Ok('foo')
        >>> opt.Err("foo").or_(opt.Ok("bar"))
        Ok('bar')

        ```
        """
        return cast(Result[T, F], self) if self.is_ok() else other

    async def or_else_async[F](
        self, f: Callable[[E], Awaitable[Result[T, F]]]
    ) -> Result[T, F]:
        """Awaitable variant of `or_else()`. **f** is only called if the result is `Err`.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def recover(e: str) -> opt.Result[str, str]:
        ...     return opt.Ok(f"recovered from {e}")
        >>> asyncio.run(opt.Err("foo").or_else_async(recover))
        Ok('recovered from foo')
        >>> asyncio.run(opt.Ok("bar").or_else_async(recover))
        Ok('bar')

        ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return await f(self.error)  # type: ignore[union-attr]

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a `Result[T, E]` to `Result[U, E]` by applying **f** to a contained `Ok` value, leaving `Err` untouched.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").map(len)
        Ok(3)
        >>> opt.Err("foo").map(len)
        Err('foo')

        ```
        """
        if self.is_ok():
            return Ok(f(self.value))
        return cast(Result[U, E], self)

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Result[U, E]:
        """Awaitable variant of `map()`.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def length(value: str) -> int:
        ...     return len(value)
        >>> asyncio.run(opt.Ok("foo").map_async(length))
        Ok(3)
        >>> asyncio.run(opt.Err("bar").map_async(length))
        Err('bar')

        ```
        """
        if self.is_ok():
            return Ok(await f(self.value))
        return cast(Result[U, E], self)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Returns **default** if the result is `Err`, otherwise applies **f** to the `Ok` value.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").map_or(42, len)
        3
        >>> opt.Err("foo").map_or(42, len)
        42

        ```
        """
        return self.map(f).unwrap_or(default)

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Applies **default** to the error if `Err`, otherwise applies **f** to the `Ok` value.

        Args:
            default (Callable[[E], U]): Callable to handle the `Err` value.
            f (Callable[[T], U]): Callable to handle the `Ok` value.

        Returns:
            U: The result of the called function.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").map_or_else(lambda e: len(e) * 2, len)
        3
        >>> opt.Err("bar").map_or_else(lambda e: len(e) * 2, len)
        6

        ```
        """
        return self.match(ok=f, err=default)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a `Result[T, E]` to `Result[T, F]` by applying **f** to a contained `Err` value, leaving `Ok` untouched.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Err(ValueError("foo")).map_err(lambda e: len(str(e)))
        Err(3)
        >>> opt.Ok("foo").map_err(lambda e: len(str(e)))
        Ok('foo')

        ```
        """
        if self.is_err():
            return Err(f(self.error))
        return cast(Result[T, F], self)

    async def map_err_async[F](self, f: Callable[[E], Awaitable[F]]) -> Result[T, F]:
        """Awaitable variant of `map_err()`.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def describe(e: str) -> str:
        ...     return f"failed: {e}"
        >>> asyncio.run(opt.Err("foo").map_err_async(describe))
        Err('failed: foo')
        >>> asyncio.run(opt.Ok("bar").map_err_async(describe))
        Ok('bar')

        ```
        """
        if self.is_err():
            return Err(await f(self.error))
        return cast(Result[T, F], self)

    def ok(self) -> Option[T]:
        """Converts the `Result` into an `Option`, mapping `Ok(v)` to `Some(v)` and `Err(e)` to `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").ok()
        Some('foo')
        >>> opt.Err("foo").ok()
        NONE

        ```
        """
        if self.is_ok():
            return Some(self.value)
        return NONE

    def err(self) -> Option[E]:
        """Converts the `Result` into an `Option`, mapping `Err(e)` to `Some(e)` and `Ok(v)` to `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok("foo").err()
        NONE
        >>> opt.Err("foo").err()
        Some('foo')

        ```
        """
        if self.is_err():
            return Some(self.error)
        return NONE

    def transpose[U](self: Result[Option[U], E]) -> Option[Result[U, E]]:
        """Transposes a `Result` of an `Option` into an `Option` of a `Result`.

        `Ok(NONE)` is mapped to `NONE`, `Ok(Some(v))` to `Some(Ok(v))` and `Err(e)` to `Some(Err(e))`.

        Raises:
            ResultShapeError: If the result is `Ok` but its value is not an `Option`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Ok(opt.Some("foo")).transpose()
        Some(Ok('foo'))
        >>> opt.Ok(opt.NONE).transpose()
        NONE
        >>> opt.Err("foo").transpose()
        Some(Err('foo'))

        ```
        """
        if self.is_err():
            return Some(cast(Result[U, E], self))
        inner = self.value  # type: ignore[union-attr]
        if not isinstance(inner, Option):
            msg = f"called `transpose` on an `Ok` that does not hold an `Option`: {inner!r}"
            raise ResultShapeError(msg)
        return inner.map(Ok)


@dataclass(slots=True, frozen=True, repr=False)
class Ok[T, E](Result[T, E]):
    """Result variant representing a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({inner_repr(self.value)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return ok(self.value)


@dataclass(slots=True, frozen=True, repr=False)
class Err[T, E](Result[T, E]):
    """Result variant representing an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({inner_repr(self.error)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return err(self.error)
