"""Tests for Result combinators and from_try — pure, no IO."""

from seosync.core.errors import EntryValidationError, GenerationError
from seosync.core.result import Err, Ok, from_try, partition


def test_ok_map_and_then_chain():
    result = Ok(2).map(lambda v: v + 1).and_then(lambda v: Ok(v * 10))
    assert result == Ok(30)


def test_err_short_circuits_map_and_and_then():
    error = EntryValidationError("bad", field="url")
    calls = []
    result = Err(error).map(calls.append).and_then(lambda v: calls.append(v))
    assert result.error is error
    assert calls == []


def test_map_err_only_touches_err():
    wrapped = Err(EntryValidationError("bad", field="url")).map_err(
        lambda e: GenerationError(f"wrapped: {e.message}"),
    )
    assert wrapped.error.message == "wrapped: bad"
    assert Ok(1).map_err(lambda e: 1 / 0) == Ok(1)


def test_fold_and_unwrap_or():
    assert Ok(3).fold(lambda e: "err", lambda v: v * 2) == 6
    assert Err(GenerationError("x")).fold(lambda e: e.message, lambda v: v) == "x"
    assert Err(GenerationError("x")).unwrap_or("fallback") == "fallback"
    assert Ok("value").unwrap_or("fallback") == "value"


def test_from_try_wraps_unexpected_exception_as_generation_error():
    result = from_try(lambda: {}["missing"], component="test.component")
    assert not result.is_ok
    assert isinstance(result.error, GenerationError)
    assert result.error.context.component == "test.component"
    assert isinstance(result.error.causes[0], KeyError)


def test_from_try_passes_domain_errors_through():
    def raise_domain():
        raise EntryValidationError("Page URL is required", field="url")

    result = from_try(raise_domain)
    assert isinstance(result.error, EntryValidationError)
    assert result.error.code == "VALIDATION_ERROR"


def test_from_try_forwards_positional_args():
    assert from_try(pow, 2, 5) == Ok(32)


def test_partition_keeps_order_within_each_side():
    first, second = GenerationError("a"), GenerationError("b")
    values, errors = partition([Ok(1), Err(first), Ok(2), Err(second)])
    assert values == [1, 2]
    assert errors == [first, second]
