"""Error types raised by the container."""

from __future__ import annotations

from collections.abc import Sequence

from .tokens import Token, describe_token


class ContainerError(RuntimeError):
    """Base class for registration and resolution failures."""


class InvalidTokenError(ContainerError):
    """Raised when a token is not a class, string or symbol."""

    def __init__(self) -> None:
        super().__init__("Invalid token type")


class MissingProviderValueError(ContainerError):
    """Raised when a string or symbol token is registered without a provider."""

    def __init__(self) -> None:
        super().__init__("For a normal token a value or a factory provider is required")


class UnregisteredProviderError(ContainerError, LookupError):
    """Raised when resolving a token that has no registration."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(f"The provider {describe_token(token)} is not registered")


class CyclicDependencyError(ContainerError):
    """Raised when a token is requested again while it is being resolved."""

    def __init__(self, chain: Sequence[Token]) -> None:
        self.chain = tuple(chain)
        path = " -> ".join(describe_token(token) for token in self.chain)
        super().__init__(f"Cyclic dependency detected: {path}")


__all__ = [
    "ContainerError",
    "CyclicDependencyError",
    "InvalidTokenError",
    "MissingProviderValueError",
    "UnregisteredProviderError",
]
