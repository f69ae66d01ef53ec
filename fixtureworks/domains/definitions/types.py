"""Field providers.

A field provider produces the value assigned to one field when a fixture
factory builds an entity. Providers are called with zero or more positional
context arguments (the partially built entity, a seed, ...) and must
tolerate all of them.

There are two kinds:

- ``ConstantProvider`` ignores its arguments and returns a value captured once.
- ``CallableProvider`` forwards arguments to a wrapped callable, passing only
  as many positionals as that callable accepts.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union


def _max_positional_args(func: Callable[..., Any]) -> Optional[int]:
    """Return how many positional arguments ``func`` accepts, None if unbounded."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins and C callables expose no signature.
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


@dataclass(frozen=True)
class ConstantProvider:
    """Provider that always returns the same captured value."""

    value: Any

    def __call__(self, *args: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class CallableProvider:
    """Provider that forwards positional context arguments to ``func``.

    Arguments beyond what ``func`` accepts are dropped, so a zero-argument
    lambda keeps working when the caller passes context.
    """

    func: Callable[..., Any]
    max_args: Optional[int] = field(default=None, compare=False)

    @classmethod
    def wrap(cls, func: Callable[..., Any]) -> "CallableProvider":
        """Wrap ``func``, reading its positional arity once."""
        if isinstance(func, type):
            # Classes are factories; context would become constructor input.
            return cls(func=func, max_args=0)
        return cls(func=func, max_args=_max_positional_args(func))

    def __call__(self, *args: Any) -> Any:
        if self.max_args is not None:
            args = args[: self.max_args]
        return self.func(*args)


FieldProvider = Union[ConstantProvider, CallableProvider]
