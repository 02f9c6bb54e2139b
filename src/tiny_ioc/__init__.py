"""Minimal inversion-of-control container."""

from .core import (
    INJECT,
    Container,
    ContainerError,
    CyclicDependencyError,
    InvalidTokenError,
    Lifetime,
    MissingProviderValueError,
    Symbol,
    UnregisteredProviderError,
    inject,
)

__all__ = [
    "INJECT",
    "Container",
    "ContainerError",
    "CyclicDependencyError",
    "InvalidTokenError",
    "Lifetime",
    "MissingProviderValueError",
    "Symbol",
    "UnregisteredProviderError",
    "inject",
]
