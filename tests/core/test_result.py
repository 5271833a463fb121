"""Tests for the Result type and its composition operators."""

import pytest

from project_core import Err, Ok, Result, is_err, is_ok


class CallCounter:
    """Transform wrapper that records how often it was invoked."""

    def __init__(self, transform=lambda value: value) -> None:
        self.calls = 0
        self.transform = transform

    def __call__(self, value):
        self.calls += 1
        return self.transform(value)


def _positive(x: int) -> Result[int, str]:
    return Ok(x) if x > 0 else Err("negative")


SAMPLES: list[Result[int, str]] = [Ok(5), Ok(0), Err("bad input")]


def test_map_success_applies_transform():
    """map on Ok returns Ok of the transformed value."""
    assert Ok(5).map(lambda x: x * 2) == Ok(10)


def test_map_error_variant_never_calls_transform():
    """map on Err passes the error through without calling the transform."""
    multiplier = CallCounter(lambda x: x * 2)
    assert Err("bad input").map(multiplier) == Err("bad input")
    assert multiplier.calls == 0


@pytest.mark.parametrize("result", SAMPLES)
def test_map_identity_law(result):
    """map(identity) yields a structurally equal Result."""
    assert result.map(lambda x: x) == result


@pytest.mark.parametrize("result", SAMPLES)
def test_map_composition_law(result):
    """map(f).map(g) equals map(g . f)."""
    f = lambda x: x + 1  # noqa: E731
    g = lambda x: x * 3  # noqa: E731
    assert result.map(f).map(g) == result.map(lambda x: g(f(x)))


def test_bind_success_flattens():
    """bind on Ok returns exactly what the transform produced."""
    assert Ok(5).bind(_positive) == Ok(5)
    assert Ok(-1).bind(_positive) == Err("negative")
    assert Ok(5).bind(_positive) == _positive(5)


def test_bind_does_not_double_wrap():
    """bind never nests the transform's Result inside another Ok."""
    inner = Ok(7)
    result = Ok(1).bind(lambda _: inner)
    assert result is inner
    assert not isinstance(result.value, Ok)


def test_bind_error_variant_short_circuits():
    """bind on Err returns the same error and never calls the transform."""
    step = CallCounter(_positive)
    result = Err("boom").bind(step).bind(step).map(step)
    assert result == Err("boom")
    assert step.calls == 0


def test_bind_chain_stops_at_first_failure():
    """A failing step aborts every later step in a bind chain."""
    later = CallCounter(lambda x: Ok(x * 100))
    result = Ok(-3).bind(_positive).bind(later)
    assert result == Err("negative")
    assert later.calls == 0


def test_map_error_transforms_error_channel():
    """map_error rewrites the error value and can change its type."""
    assert Err(404).map_error(lambda code: f"HTTP {code}") == Err("HTTP 404")


def test_map_error_on_success_passes_through():
    """map_error on Ok keeps the value and never calls the transform."""
    transform = CallCounter(str)
    assert Ok(10).map_error(transform) == Ok(10)
    assert transform.calls == 0


def test_bind_error_recovers():
    """bind_error lets the caller replace a failure with a success."""
    recovered = Err("timeout").bind_error(lambda e: Ok(0) if e == "timeout" else Err(e))
    assert recovered == Ok(0)


def test_bind_error_flattens_and_can_fail_again():
    """bind_error returns exactly the transform's Result."""
    replacement = Err(500)
    assert Err("upstream").bind_error(lambda _: replacement) is replacement


def test_bind_error_on_success_passes_through():
    """bind_error on Ok never calls the transform."""
    transform = CallCounter(lambda e: Ok(-1))
    assert Ok(3).bind_error(transform) == Ok(3)
    assert transform.calls == 0


def test_success_value_accessor():
    """success_value returns the payload for Ok and None for Err."""
    assert Ok(10).success_value() == 10
    assert Err("x").success_value() is None


def test_error_value_accessor():
    """error_value mirrors success_value."""
    assert Err("x").error_value() == "x"
    assert Ok(10).error_value() is None


def test_operators_return_new_instances():
    """Every operator yields a fresh Result instead of mutating."""
    ok = Ok(1)
    err = Err("e")
    assert ok.map(lambda x: x) is not ok
    assert ok.map_error(str) is not ok
    assert err.map(lambda x: x) is not err
    assert err.bind(_positive) is not err


def test_variants_are_frozen():
    """Ok and Err cannot be mutated after construction."""
    ok = Ok(1)
    with pytest.raises(AttributeError):
        ok.value = 2  # type: ignore[misc]


def test_error_type_is_unconstrained():
    """Any value can be carried on the error channel."""
    for error in ("message", 404, {"code": 1}, ValueError("boom"), None):
        assert Err(error).error_value() is error


def test_transform_exceptions_propagate():
    """Exceptions raised inside a transform are not swallowed."""
    def explode(_):
        raise RuntimeError("transform failed")

    with pytest.raises(RuntimeError):
        Ok(1).map(explode)


def test_predicates_and_helpers():
    """is_ok / is_err work both as methods and as module helpers."""
    assert Ok(1).is_ok() and not Ok(1).is_err()
    assert Err(1).is_err() and not Err(1).is_ok()
    assert is_ok(Ok(1)) and not is_ok(Err(1))
    assert is_err(Err(1)) and not is_err(Ok(1))


def test_ok_and_err_with_same_payload_differ():
    """Structural equality distinguishes the two variants."""
    assert Ok(1) != Err(1)


def test_pattern_matching():
    """Both variants support positional structural pattern matching."""
    match Ok(3):
        case Ok(value):
            assert value == 3
        case _:
            pytest.fail("expected Ok")

    match Err("nope"):
        case Err(error):
            assert error == "nope"
        case _:
            pytest.fail("expected Err")
