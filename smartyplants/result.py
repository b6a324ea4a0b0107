"""Result type for player moves that may be rejected.

Splicing two plants or planting a seed can fail for ordinary reasons (the
seed tray is full, the target slot is occupied). Those outcomes are part of
normal play, so instead of raising, the operations return a Result that
the caller must inspect.

Usage:
------
    result = state.splice(0, 1)
    if result.is_ok():
        seed = result.unwrap()
    else:
        logger.info("Splice rejected: %s", result.error)

    # Safe unwrap with default
    seed = result.unwrap_or(None)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from smartyplants.exceptions import InvalidMoveError

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transformed value type


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A move that went through, carrying what it produced.

    Example:
        def take_seed(seeds: Seeds, index: int) -> Result[Seed, str]:
            seed = seeds.take_with_id(index)
            if seed is None:
                return Err(f"No seed at index {index}")
            return Ok(seed)
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    @property
    def error(self) -> None:
        """Ok has no error, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value.

        Example:
            Ok(seed).map(lambda s: len(s.genes))  # Ok(8)
        """
        return Ok(f(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """A move that was rejected, carrying the reason."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raises InvalidMoveError since Err has no success value.

        Don't call this without checking is_ok() first!
        """
        raise InvalidMoveError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    @property
    def value(self) -> None:
        """Err has no value, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Err[E]":
        """Transform value (no-op for Err, returns self)."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
