"""Inversion-of-control container with lazy singleton semantics."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from .config import ContainerSettings
from .interfaces import (
    CyclicDependencyError,
    InvalidTokenError,
    MissingProviderValueError,
    UnregisteredProviderError,
)
from .models import Lifetime, ProviderKind, Registration
from .tokens import (
    Token,
    dependencies_of,
    describe_token,
    is_type_token,
    is_valid_token,
)

LOGGER = logging.getLogger(__name__)

_MISSING: Any = object()

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


class Container:
    """Registry of providers that wires object graphs on demand.

    Tokens are classes, strings or :class:`~tiny_ioc.core.tokens.Symbol`
    instances. Each token is bound to one provider:

    * a class, constructed with its declared dependencies resolved first;
    * a factory, called with the container when it takes a positional
      argument and with no arguments otherwise;
    * any other value, returned as-is.

    Singleton registrations are built on first resolve and cached for the
    lifetime of the container. The container is not thread-safe; guard it
    with a lock or keep one container per thread.
    """

    def __init__(self, settings: ContainerSettings | None = None) -> None:
        """Initialise container storage."""
        self.settings = settings or ContainerSettings()
        self._registry: dict[Hashable, Registration] = {}
        self._singletons: dict[Hashable, Any] = {}
        self._in_flight: dict[Hashable, Token] = {}

    def register(
        self,
        token: Token,
        value_or_factory: Any = _MISSING,
        *,
        lifetime: Lifetime | None = None,
    ) -> Container:
        """Register a provider, classifying it from its shape.

        A class token is its own provider and ``value_or_factory`` is
        ignored. String and symbol tokens require a provider: classes are
        constructed, other callables are factories, anything else is a value.
        """
        if not is_valid_token(token):
            raise InvalidTokenError()
        if is_type_token(token):
            return self.register_type(token, lifetime=lifetime)
        if _is_missing(value_or_factory):
            raise MissingProviderValueError()
        if is_type_token(value_or_factory):
            return self.register_type(token, value_or_factory, lifetime=lifetime)
        if callable(value_or_factory):
            return self.register_factory(token, value_or_factory, lifetime=lifetime)
        return self.register_value(token, value_or_factory)

    def register_type(
        self,
        token: Token,
        cls: type | None = None,
        *,
        dependencies: Iterable[Token] | None = None,
        lifetime: Lifetime | None = None,
    ) -> Container:
        """Bind ``token`` to a class constructed with resolved dependencies.

        ``cls`` defaults to ``token`` itself. ``dependencies`` overrides the
        list declared with :func:`~tiny_ioc.core.tokens.inject`.
        """
        self._check_token(token)
        provider = token if cls is None else cls
        if not is_type_token(provider):
            msg = f"{provider!r} is not a class"
            raise TypeError(msg)
        declared = (
            tuple(dependencies)
            if dependencies is not None
            else dependencies_of(provider)
        )
        return self._store(
            Registration(
                token=token,
                kind=ProviderKind.TYPE,
                provider=provider,
                dependencies=declared,
                lifetime=lifetime or self.settings.default_lifetime,
            )
        )

    def register_value(self, token: Token, value: Any) -> Container:
        """Bind ``token`` to a ready-made value."""
        self._check_token(token)
        if _is_missing(value):
            raise MissingProviderValueError()
        return self._store(
            Registration(token=token, kind=ProviderKind.VALUE, provider=value)
        )

    def register_factory(
        self,
        token: Token,
        factory: Callable[..., Any],
        *,
        lifetime: Lifetime | None = None,
    ) -> Container:
        """Bind ``token`` to a callable producing the instance."""
        self._check_token(token)
        if not callable(factory):
            msg = f"{factory!r} is not callable"
            raise TypeError(msg)
        return self._store(
            Registration(
                token=token,
                kind=ProviderKind.FACTORY,
                provider=factory,
                passes_container=_accepts_container(factory),
                lifetime=lifetime or self.settings.default_lifetime,
            )
        )

    def resolve(self, token: Token) -> Any:
        """Return the instance for ``token``, building it on first use."""
        if not is_valid_token(token):
            raise UnregisteredProviderError(token)
        key = self._key(token)
        registration = self._registry.get(key)
        if registration is None:
            raise UnregisteredProviderError(token)
        if key in self._singletons:
            return self._singletons[key]

        instance = self._build(key, registration)
        if registration.lifetime is Lifetime.SINGLETON:
            self._singletons[key] = instance
        return instance

    def try_resolve(self, token: Token) -> Any | None:
        """Resolve ``token`` if it is registered; return None otherwise."""
        if not self.is_registered(token):
            return None
        return self.resolve(token)

    def is_registered(self, token: Any) -> bool:
        """Return whether ``token`` has a provider, without resolving it."""
        return is_valid_token(token) and self._key(token) in self._registry

    def __contains__(self, token: Any) -> bool:
        return self.is_registered(token)

    def registered_tokens(self) -> tuple[str, ...]:
        """Return display names of registered tokens in registration order."""
        return tuple(
            describe_token(registration.token)
            for registration in self._registry.values()
        )

    def _check_token(self, token: Any) -> None:
        if not is_valid_token(token):
            raise InvalidTokenError()

    def _key(self, token: Token) -> Hashable:
        if is_type_token(token) and self.settings.type_keys == "name":
            return token.__name__
        return token

    def _store(self, registration: Registration) -> Container:
        self._registry[self._key(registration.token)] = registration
        LOGGER.debug(
            "Registered %s as %s provider",
            describe_token(registration.token),
            registration.kind.value,
        )
        return self

    def _build(self, key: Hashable, registration: Registration) -> Any:
        if not self.settings.detect_cycles:
            return self._instantiate(registration)

        if key in self._in_flight:
            pending = list(self._in_flight)
            chain = [self._in_flight[item] for item in pending[pending.index(key) :]]
            raise CyclicDependencyError([*chain, registration.token])

        self._in_flight[key] = registration.token
        try:
            return self._instantiate(registration)
        finally:
            del self._in_flight[key]

    def _instantiate(self, registration: Registration) -> Any:
        if registration.kind is ProviderKind.TYPE:
            arguments = [
                self.resolve(dependency) for dependency in registration.dependencies
            ]
            LOGGER.debug(
                "Constructing %s with %d dependencies",
                describe_token(registration.token),
                len(arguments),
            )
            return registration.provider(*arguments)
        if registration.kind is ProviderKind.FACTORY:
            if registration.passes_container:
                return registration.provider(self)
            return registration.provider()
        return registration.provider


def _accepts_container(factory: Callable[..., Any]) -> bool:
    """Return whether ``factory`` takes a positional argument."""
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        return True
    return any(
        parameter.kind in _POSITIONAL_KINDS
        for parameter in signature.parameters.values()
    )


def _is_missing(value: Any) -> bool:
    """Return whether ``value`` is absent, ``None`` or an empty scalar.

    Empty containers such as ``{}`` and ``[]`` are real providers; ``False``,
    zero, NaN and empty strings are not.
    """
    if value is _MISSING or value is None:
        return True
    if isinstance(value, (bool, int, float, complex, str, bytes)):
        return not value or value != value
    return False


__all__ = ["Container"]
