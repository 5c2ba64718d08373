"""Tests for mk.core.result module."""

from __future__ import annotations

import pytest

from mk.core.result import Err, Ok, Result


def _half(n: int) -> Result[int, str]:
    if n % 2:
        return Err(f"{n} is odd")
    return Ok(n // 2)


class TestOk:
    def test_flat_map_chains(self) -> None:
        assert Ok(8).flat_map(_half).flat_map(_half) == Ok(2)

    def test_flat_map_stops_at_first_failure(self) -> None:
        assert Ok(6).flat_map(_half).flat_map(_half) == Err("3 is odd")

    def test_repr(self) -> None:
        assert repr(Ok("x")) == "Ok('x')"


class TestErr:
    def test_flat_map_is_skipped(self) -> None:
        calls: list[int] = []

        def step(n: int) -> Result[int, str]:
            calls.append(n)
            return Ok(n)

        assert Err("boom").flat_map(step) == Err("boom")
        assert calls == []

    def test_pattern_matching(self) -> None:
        match _half(3):
            case Err(error):
                assert error == "3 is odd"
            case Ok(_):
                pytest.fail("expected Err")

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"
