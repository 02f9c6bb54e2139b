"""Tests for token helpers."""

from __future__ import annotations

from tiny_ioc.core.tokens import (
    INJECT,
    Symbol,
    dependencies_of,
    describe_token,
    inject,
    is_valid_token,
)


def test_symbols_with_same_description_are_distinct() -> None:
    first = Symbol("db")
    second = Symbol("db")

    assert first != second
    assert len({first, second}) == 2
    assert repr(first) == "Symbol(db)"


def test_inject_records_ordered_dependencies() -> None:
    token = Symbol("collection")

    @inject(token, "ID_GENERATOR")
    class Repository:
        pass

    assert getattr(Repository, INJECT) == (token, "ID_GENERATOR")
    assert dependencies_of(Repository) == (token, "ID_GENERATOR")


def test_marker_can_be_assigned_directly() -> None:
    class Service:
        __ioc_inject__ = ["repository"]

    assert dependencies_of(Service) == ("repository",)


def test_undeclared_dependencies_are_empty() -> None:
    class Plain:
        pass

    assert dependencies_of(Plain) == ()


def test_valid_token_classification() -> None:
    assert is_valid_token(int)
    assert is_valid_token("name")
    assert is_valid_token(Symbol())
    assert not is_valid_token(False)
    assert not is_valid_token(3)
    assert not is_valid_token(print)


def test_describe_token() -> None:
    class Provider:
        pass

    assert describe_token(Provider) == "Provider"
    assert describe_token("key") == "key"
    assert describe_token(Symbol("id")) == "Symbol(id)"
