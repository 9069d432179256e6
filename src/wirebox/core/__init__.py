"""Core container components."""

from wirebox.core.entries import (
    ConcreteValue,
    Entry,
    FactoryProducer,
    ResolutionContext,
    SingletonProducer,
)
from wirebox.core.errors import (
    ContainerError,
    CyclicResolutionError,
    InvalidArgumentError,
)
from wirebox.core.container import Container

__all__ = [
    "ConcreteValue",
    "Container",
    "ContainerError",
    "CyclicResolutionError",
    "Entry",
    "FactoryProducer",
    "InvalidArgumentError",
    "ResolutionContext",
    "SingletonProducer",
]
