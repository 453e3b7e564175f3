"""Unit tests for kernel value types — Option."""

from __future__ import annotations

import pytest

from querypage.kernel.types import Nothing, Some, some_if


class TestOption:
    def test_some_unwrap(self) -> None:
        s = Some(10)
        assert s.is_some()
        assert not s.is_none()
        assert s.unwrap() == 10
        assert s.value == 10

    def test_nothing_unwrap_raises(self) -> None:
        n: Nothing[int] = Nothing()
        assert n.is_none()
        with pytest.raises(ValueError):
            n.unwrap()

    def test_unwrap_or(self) -> None:
        assert Some(1).unwrap_or(2) == 1
        assert Nothing().unwrap_or(2) == 2

    def test_iteration(self) -> None:
        assert list(Some(5)) == [5]
        assert list(Nothing()) == []

    def test_map(self) -> None:
        assert Some(3).map(lambda x: x * 2) == Some(6)
        assert Nothing().map(lambda x: x * 2) == Nothing()

    def test_equality(self) -> None:
        assert Some("a") == Some("a")
        assert Some("a") != Some("b")
        assert Some(None) != Nothing()
        assert Nothing() == Nothing()


class TestSomeIf:
    def test_true_condition_builds_value(self) -> None:
        assert some_if(True, lambda: "x") == Some("x")

    def test_false_condition_never_calls_factory(self) -> None:
        def factory() -> str:
            raise AssertionError("factory called")

        assert some_if(False, factory) == Nothing()
