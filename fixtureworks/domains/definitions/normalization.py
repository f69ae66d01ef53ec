"""Normalization of caller-supplied field definitions into field providers."""

from typing import Any, Callable

from fixtureworks.domains.definitions.types import (
    CallableProvider,
    ConstantProvider,
    FieldProvider,
)


def normalize_field_def(definition: Any) -> FieldProvider:
    """Turn a plain value or a callable into a field provider.

    Existing providers are returned unchanged. Any other callable, including
    classes and objects defining ``__call__``, is wrapped so that it is
    invoked per build. Everything else is captured as a constant.
    """
    if isinstance(definition, (ConstantProvider, CallableProvider)):
        return definition
    if callable(definition):
        return ensure_invokable(definition)
    return ConstantProvider(definition)


def ensure_invokable(func: Callable[..., Any]) -> CallableProvider:
    """Wrap ``func`` so it can be called with any number of context arguments."""
    if isinstance(func, CallableProvider):
        return func
    return CallableProvider.wrap(func)
