"""Registration records stored by the container."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .tokens import Token


class ProviderKind(str, Enum):
    """How a registration produces its instance."""

    TYPE = "type"
    VALUE = "value"
    FACTORY = "factory"


class Lifetime(str, Enum):
    """How long a resolved instance is reused."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass(slots=True, frozen=True)
class Registration:
    """Provider bound to a token, classified once at registration time."""

    token: Token
    kind: ProviderKind
    provider: Any
    dependencies: tuple[Token, ...] = ()
    passes_container: bool = False
    lifetime: Lifetime = Lifetime.SINGLETON


__all__ = ["Lifetime", "ProviderKind", "Registration"]
