"""Core container, tokens, configuration and logging."""

from .config import AppSettings, ContainerSettings, load_app_settings
from .container import Container
from .interfaces import (
    ContainerError,
    CyclicDependencyError,
    InvalidTokenError,
    MissingProviderValueError,
    UnregisteredProviderError,
)
from .logging import configure_logging
from .models import Lifetime, ProviderKind, Registration
from .tokens import INJECT, Symbol, Token, inject

__all__ = [
    "AppSettings",
    "Container",
    "ContainerError",
    "ContainerSettings",
    "CyclicDependencyError",
    "INJECT",
    "InvalidTokenError",
    "Lifetime",
    "MissingProviderValueError",
    "ProviderKind",
    "Registration",
    "Symbol",
    "Token",
    "UnregisteredProviderError",
    "configure_logging",
    "inject",
    "load_app_settings",
]
