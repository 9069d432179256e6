"""Registry entry variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from wirebox.core.container import Container


@dataclass(frozen=True)
class ResolutionContext:
    """What a contextual producer receives instead of positional arguments.

    ``args`` is None when the key was resolved without extra arguments and a
    tuple (possibly empty) when it was resolved through ``resolve_array``.
    """

    container: Container
    key: str
    args: tuple[Any, ...] | None = None

    @property
    def has_args(self) -> bool:
        return self.args is not None


@dataclass(frozen=True)
class ConcreteValue:
    """An already-resolved object."""

    value: Any


@dataclass(frozen=True)
class SingletonProducer:
    """Producer invoked once; its result replaces the entry."""

    producer: Callable[..., Any]
    contextual: bool = False


@dataclass(frozen=True)
class FactoryProducer:
    """Producer invoked on every resolution."""

    producer: Callable[..., Any]
    contextual: bool = False


Entry = Union[ConcreteValue, SingletonProducer, FactoryProducer]


def classify(obj: Any, contextual: bool = False) -> Entry:
    """Build the entry ``register`` stores for ``obj``.

    Callables become singleton producers, everything else a concrete value.
    """
    if callable(obj):
        return SingletonProducer(obj, contextual=contextual)
    return ConcreteValue(obj)


def invoke(
    entry: SingletonProducer | FactoryProducer,
    container: Container,
    key: str,
    args: tuple[Any, ...] | None = None,
) -> Any:
    """Call a producer using the convention its entry was registered with."""
    if entry.contextual:
        return entry.producer(ResolutionContext(container, key, args))
    if args is None:
        return entry.producer(container)
    return entry.producer(*args)
