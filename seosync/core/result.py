"""Result — two-variant success/failure value used at every component boundary.

Invariants:
    - Ok carries a value, Err carries a SeoSyncError; nothing else
    - Combinators never raise for Err inputs: map/and_then short-circuit
    - from_try is the only place unexpected exceptions become Err(GenerationError)

Design Decisions:
    - Frozen dataclasses over a tagged dict: pattern-matchable, typed, hashable
      when the payload is (ADR: components chain meta → schema → history → analytics)
    - Errors as values, not raised: a page always renders with best-effort
      metadata, so callers branch on is_ok instead of try/except
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar, Union

from seosync.core.errors import GenerationError, SeoSyncError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=SeoSyncError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result"]) -> "Result":
        return fn(self.value)

    def map_err(self, fn: Callable[[Any], Any]) -> "Ok[T]":
        return self

    def fold(self, on_err: Callable[[Any], U], on_ok: Callable[[T], U]) -> U:
        return on_ok(self.value)

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self

    def and_then(self, fn: Callable[[Any], "Result"]) -> "Err[E]":
        return self

    def map_err(self, fn: Callable[[E], SeoSyncError]) -> "Err":
        return Err(fn(self.error))

    def fold(self, on_err: Callable[[E], U], on_ok: Callable[[Any], U]) -> U:
        return on_err(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]


def from_try(fn: Callable[..., T], *args: Any, component: str | None = None) -> Result:
    """Run fn and capture its outcome. SeoSyncErrors pass through as-is."""
    try:
        return Ok(fn(*args))
    except SeoSyncError as e:
        return Err(e)
    except Exception as e:
        return Err(GenerationError(str(e), component=component, causes=[e]))


def partition(results: Iterable[Result]) -> tuple[list, list[SeoSyncError]]:
    """Split results into (values, errors), preserving order within each."""
    values, errors = [], []
    for result in results:
        if result.is_ok:
            values.append(result.value)
        else:
            errors.append(result.error)
    return values, errors
