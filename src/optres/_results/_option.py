from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeIs

from .._core import Pipeable, inner_repr

if TYPE_CHECKING:
    from ._result import Result


class OptionShapeError(TypeError): ...


class Option[T](Pipeable, ABC):
    """Type representing an optional value.

    Every `Option` is either `Some` and contains a value, or `NONE`, and does not.

    Instances are immutable: every combinator returns an `Option` (or a `Result`) without touching the original.

    Use `Option.wrap()` to convert a possibly `None` Python value, and `match()` (or a `match` statement) to branch on the variant.

    Example:
    ```python
    >>> import optres as opt
    >>> def divide(numerator: float, denominator: float) -> opt.Option[float]:
    ...     if denominator == 0:
    ...         return opt.NONE
    ...     return opt.Some(numerator / denominator)
    >>> divide(2.0, 3.0).map(lambda x: round(x, 2))
    Some(0.67)
    >>> divide(2.0, 0.0).unwrap_or(0.0)
    0.0

    ```
    """

    __slots__ = ()

    @staticmethod
    def wrap[V](value: V | None) -> Option[V]:
        """Build an `Option` from a value that may be `None`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `NONE` if **value** is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Option.wrap("foo")
        Some('foo')
        >>> opt.Option.wrap(None)
        NONE
        >>> opt.Option.wrap(0)
        Some(0)

        ```
        """
        return NONE if value is None else Some(value)

    @staticmethod
    def collect[V](options: Iterable[Option[V]]) -> Option[list[V]]:
        """Gather the values of many options into a single `Option[list[V]]`.

        Iteration stops at the first `NONE`, so the rest of **options** is never consumed.

        Args:
            options (Iterable[Option[V]]): The options to collect.

        Returns:
            Option[list[V]]: `Some` of every value in order if all options are `Some`, `NONE` otherwise.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Option.collect([opt.Some(1), opt.Some(2), opt.Some(3)])
        Some([1, 2, 3])
        >>> opt.Option.collect([opt.Some(1), opt.NONE, opt.Some(3)])
        NONE
        >>> opt.Option.collect([])
        Some([])

        ```
        """
        values: list[V] = []
        for option in options:
            if option.is_none():
                return NONE
            values.append(option.value)  # type: ignore[union-attr]
        return Some(values)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(2).is_some()
        True
        >>> opt.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(2).is_none()
        False
        >>> opt.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Call exactly one of the two arms, depending on the variant.

        Both arms are required, so the absent case can never be forgotten.

        Args:
            some (Callable[[T], U]): Called with the contained value if `Some`.
            none (Callable[[], U]): Called without arguments if `NONE`.

        Returns:
            U: The return value of the called arm.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some("foo").match(some=lambda v: v + "baz", none=lambda: "bar")
        'foobaz'
        >>> opt.NONE.match(some=lambda v: v + "baz", none=lambda: "bar")
        'bar'

        ```
        """
        ...

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Returns `True` if the option is `Some` and its value satisfies **predicate**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(2).is_some_and(lambda x: x > 1)
        True
        >>> opt.Some(0).is_some_and(lambda x: x > 1)
        False
        >>> opt.NONE.is_some_and(lambda x: x > 1)
        False

        ```
        """
        return self.is_some() and predicate(self.value)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or **default**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some("foo").unwrap_or("bar")
        'foo'
        >>> opt.NONE.unwrap_or("bar")
        'bar'

        ```
        """
        return self.value if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained value or computes it from **f**.

        **f** is only called when the option is `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> k = 10
        >>> opt.Some(4).unwrap_or_else(lambda: 2 * k)
        4
        >>> opt.NONE.unwrap_or_else(lambda: 2 * k)
        20

        ```
        """
        return self.value if self.is_some() else f()

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls **f** with the contained value if the option is `Some`, otherwise returns `NONE`.

        Some languages call this operation flatmap.

        Args:
            f (Callable[[T], Option[U]]): The function to call with the `Some` value.

        Returns:
            Option[U]: The result of **f** if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> def sq(x: int) -> opt.Option[int]:
        ...     return opt.Some(x * x)
        >>> def nope(x: int) -> opt.Option[int]:
        ...     return opt.NONE
        >>> opt.Some(2).and_then(sq).and_then(sq)
        Some(16)
        >>> opt.Some(2).and_then(sq).and_then(nope)
        NONE
        >>> opt.NONE.and_then(sq)
        NONE

        ```
        """
        if self.is_some():
            return f(self.value)
        return NONE

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Returns `NONE` if the option is `NONE`, otherwise returns **other**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(2).and_(opt.Some("foo"))
        Some('foo')
        >>> opt.Some(2).and_(opt.NONE)
        NONE
        >>> opt.NONE.and_(opt.Some("foo"))
        NONE

        ```
        """
        return other if self.is_some() else NONE

    async def and_then_async[U](
        self, f: Callable[[T], Awaitable[Option[U]]]
    ) -> Option[U]:
        """Awaitable variant of `and_then()`.

        **f** must return an awaitable, which is only created and awaited if the option is `Some`.

        Args:
            f (Callable[[T], Awaitable[Option[U]]]): The function to call with the `Some` value.

        Returns:
            Option[U]: The awaited result of **f** if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def fetch(key: str) -> opt.Option[int]:
        ...     return opt.Option.wrap({"a": 1}.get(key))
        >>> asyncio.run(opt.Some("a").and_then_async(fetch))
        Some(1)
        >>> asyncio.run(opt.Some("b").and_then_async(fetch))
        NONE

        ```
        """
        if self.is_some():
            return await f(self.value)
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option itself if it contains a value, otherwise calls **f** and returns the result.

        Args:
            f (Callable[[], Option[T]]): The function to call if the option is `NONE`.

        Returns:
            Option[T]: The original `Option` if it is `Some`, otherwise the result of **f**.

        Example:
        ```python
        >>> import optres as opt
        >>> def nobody() -> opt.Option[str]:
        ...     return opt.NONE
        >>> def vikings() -> opt.Option[str]:
        ...     return opt.Some("vikings")
        >>> opt.Some("barbarians").or_else(vikings)
        Some('barbarians')
        >>> opt.NONE.or_else(vikings)
        Some('vikings')
        >>> opt.NONE.or_else(nobody)
        NONE

        ```
        """
        return self if self.is_some() else f()

    def or_(self, other: Option[T]) -> Option[T]:
        """Returns the option itself if it contains a value, otherwise returns **other**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(2).or_(opt.Some(100))
        Some(2)
        >>> opt.NONE.or_(opt.Some(100))
        Some(100)
        >>> opt.NONE.or_(opt.NONE)
        NONE

        ```
        """
        return self if self.is_some() else other

    async def or_else_async(self, f: Callable[[], Awaitable[Option[T]]]) -> Option[T]:
        """Awaitable variant of `or_else()`. **f** is only called if the option is `NONE`.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def fallback() -> opt.Option[str]:
        ...     return opt.Some("vikings")
        >>> asyncio.run(opt.NONE.or_else_async(fallback))
        Some('vikings')
        >>> asyncio.run(opt.Some("barbarians").or_else_async(fallback))
        Some('barbarians')

        ```
        """
        if self.is_some():
            return self
        return await f()

    def xor(self, other: Option[T]) -> Option[T]:
        """Returns `Some` if exactly one of `self`, **other** is `Some`, otherwise returns `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(2).xor(opt.NONE)
        Some(2)
        >>> opt.NONE.xor(opt.Some(2))
        Some(2)
        >>> opt.Some(2).xor(opt.Some(3))
        NONE
        >>> opt.NONE.xor(opt.NONE)
        NONE

        ```
        """
        match (self.is_some(), other.is_some()):
            case (True, False):
                return self
            case (False, True):
                return other
            case _:
                return NONE

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value, leaving `NONE` untouched.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: `Some(f(value))` if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some("Hello, World!").map(len)
        Some(13)
        >>> opt.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.value))
        return NONE

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Option[U]:
        """Awaitable variant of `map()`.

        Example:
        ```python
        >>> import asyncio
        >>> import optres as opt
        >>> async def length(value: str) -> int:
        ...     return len(value)
        >>> asyncio.run(opt.Some("foo").map_async(length))
        Some(3)
        >>> asyncio.run(opt.NONE.map_async(length))
        NONE

        ```
        """
        if self.is_some():
            return Some(await f(self.value))
        return NONE

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Returns **default** if the option is `NONE`, otherwise applies **f** to the contained value.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some("foo").map_or(42, len)
        3
        >>> opt.NONE.map_or(42, len)
        42

        ```
        """
        return self.map(f).unwrap_or(default)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Like `map_or()`, but the default is computed lazily by calling **default**.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some("foo").map_or_else(lambda: 42, len)
        3
        >>> opt.NONE.map_or_else(lambda: 42, len)
        42

        ```
        """
        return f(self.value) if self.is_some() else default()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Returns `NONE` if the option is `NONE` or **predicate** fails on the contained value.

        When the option is kept, the very same instance is returned.

        Args:
            predicate (Callable[[T], bool]): The test to apply to the contained value.

        Returns:
            Option[T]: `self` if it is `Some` and **predicate** holds, otherwise `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> def is_even(n: int) -> bool:
        ...     return n % 2 == 0
        >>> opt.NONE.filter(is_even)
        NONE
        >>> opt.Some(3).filter(is_even)
        NONE
        >>> opt.Some(4).filter(is_even)
        Some(4)

        ```
        """
        if self.is_some() and not predicate(self.value):
            return NONE
        return self

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Zips `self` with **other** into an option of a pair.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(1).zip(opt.Some("hi"))
        Some((1, 'hi'))
        >>> opt.Some(1).zip(opt.NONE)
        NONE

        ```
        """
        if self.is_some() and other.is_some():
            return Some((self.value, other.value))
        return NONE

    def unzip[U, V](self: Option[tuple[U, V]]) -> tuple[Option[U], Option[V]]:
        """Splits an option of a pair into a pair of options.

        Raises:
            OptionShapeError: If the option is `Some` but its value is not a pair.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some((1, "hi")).unzip()
        (Some(1), Some('hi'))
        >>> opt.NONE.unzip()
        (NONE, NONE)

        ```
        """
        if self.is_none():
            return NONE, NONE
        match self.value:  # type: ignore[union-attr]
            case (left, right):
                return Some(left), Some(right)
            case other:
                msg = f"called `unzip` on a `Some` that does not hold a pair: {other!r}"
                raise OptionShapeError(msg)

    def ok_or[E](self, error: E) -> Result[T, E]:
        """Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `NONE` to `Err(error)`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some("foo").ok_or(0)
        Ok('foo')
        >>> opt.NONE.ok_or(0)
        Err(0)

        ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.value)
        return Err(error)

    def ok_or_else[E](self, error: Callable[[], E]) -> Result[T, E]:
        """Like `ok_or()`, but the error is only computed, by calling **error**, if the option is `NONE`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some("foo").ok_or_else(lambda: "missing")
        Ok('foo')
        >>> opt.NONE.ok_or_else(lambda: "missing")
        Err('missing')

        ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.value)
        return Err(error())

    def transpose[U, E](self: Option[Result[U, E]]) -> Result[Option[U], E]:
        """Transposes an `Option` of a `Result` into a `Result` of an `Option`.

        `NONE` is mapped to `Ok(NONE)`, `Some(Ok(v))` to `Ok(Some(v))` and `Some(Err(e))` to `Err(e)`.

        Raises:
            OptionShapeError: If the option is `Some` but its value is not a `Result`.

        Example:
        ```python
        >>> import optres as opt
        >>> opt.Some(opt.Ok("foo")).transpose()
        Ok(Some('foo'))
        >>> opt.Some(opt.Err("foo")).transpose()
        Err('foo')
        >>> opt.NONE.transpose()
        Ok(NONE)

        ```
        """
        from ._result import Ok, Result

        if self.is_none():
            return Ok(NONE)
        inner = self.value  # type: ignore[union-attr]
        if not isinstance(inner, Result):
            msg = f"called `transpose` on a `Some` that does not hold a `Result`: {inner!r}"
            raise OptionShapeError(msg)
        return inner.map(Some)


@dataclass(slots=True, frozen=True, repr=False)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import optres as opt
    >>> opt.Some(42)
    Some(42)
    >>> match opt.Some(42):
    ...     case opt.Some(value):
    ...         print(value)
    42

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({inner_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        return some(self.value)


@dataclass(slots=True, frozen=True, repr=False)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Prefer the `NONE` singleton over building new instances; all instances compare equal.
    """

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def match[U](self, *, some: Callable[[Any], U], none: Callable[[], U]) -> U:
        return none()


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
