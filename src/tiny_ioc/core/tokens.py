"""Token classification and dependency declaration helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, Union

C = TypeVar("C", bound=type)

INJECT = "__ioc_inject__"


class Symbol:
    """Opaque token that is only ever equal to itself."""

    __slots__ = ("description",)

    def __init__(self, description: str = "") -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description})"


Token = Union[type, str, Symbol]


def inject(*tokens: Token) -> Callable[[C], C]:
    """Declare the ordered constructor dependencies of a class."""

    def decorator(cls: C) -> C:
        setattr(cls, INJECT, tuple(tokens))
        return cls

    return decorator


def dependencies_of(cls: type) -> tuple[Token, ...]:
    """Return the dependency tokens declared on ``cls``, if any."""
    return tuple(getattr(cls, INJECT, ()))


def is_type_token(value: Any) -> bool:
    return isinstance(value, type)


def is_valid_token(value: Any) -> bool:
    """Return ``True`` for classes, strings and :class:`Symbol` instances."""
    return is_type_token(value) or isinstance(value, (str, Symbol))


def describe_token(token: Any) -> str:
    """Return a human readable form of ``token`` for messages."""
    if is_type_token(token):
        return token.__name__
    if isinstance(token, str):
        return token
    return repr(token)


__all__ = [
    "INJECT",
    "Symbol",
    "Token",
    "dependencies_of",
    "describe_token",
    "inject",
    "is_type_token",
    "is_valid_token",
]
