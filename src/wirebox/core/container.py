"""Dependency injection container."""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator, Sequence
from typing import Any, Callable

from wirebox.core.entries import (
    ConcreteValue,
    Entry,
    FactoryProducer,
    SingletonProducer,
    classify,
    invoke,
)
from wirebox.core.errors import CyclicResolutionError, InvalidArgumentError

logger = logging.getLogger(__name__)


class Container:
    """Keyed registry of values, singleton producers and factories.

    Resolution order is always: cached value, singleton producer, factory.
    Unknown keys resolve to None.

    The registry lock is never held while a producer runs, so producers may
    block or hand resolution of other keys to other threads. A singleton is
    created at most once: concurrent resolvers of the same key wait on a
    per-key lock. Re-entering a key with the same arguments from inside its
    own producer raises ``CyclicResolutionError``; recursion through the
    argument path with different arguments is allowed.
    """

    def __init__(self, thread_safe: bool = True, detect_cycles: bool = True) -> None:
        self._entries: dict[str, Entry] = {}
        self._thread_safe = thread_safe
        self._lock: Any = threading.RLock() if thread_safe else contextlib.nullcontext()
        self._key_locks: dict[str, Any] = {}
        self._detect_cycles = detect_cycles
        self._local = threading.local()

    def register(self, key: str, value: Any, *, contextual: bool = False) -> None:
        """Register a value, or a producer whose result is cached on first resolve.

        Callables are stored as singleton producers and are called with the
        container (or with the arguments given to ``resolve_array``). Any
        other object is stored as-is. A previous entry for ``key`` of any
        kind is replaced.
        """
        if contextual and not callable(value):
            raise InvalidArgumentError(key, value)
        entry = classify(value, contextual=contextual)
        with self._lock:
            self._entries[key] = entry
        logger.debug("Registered %s as %s", key, type(entry).__name__)

    def register_value(self, key: str, value: Any) -> None:
        """Register ``value`` as a concrete object even if it is callable."""
        with self._lock:
            self._entries[key] = ConcreteValue(value)
        logger.debug("Registered %s as ConcreteValue", key)

    def factory(
        self, key: str, producer: Callable[..., Any], *, contextual: bool = False
    ) -> None:
        """Register a producer that is invoked on every resolution."""
        if not callable(producer):
            raise InvalidArgumentError(key, producer)
        with self._lock:
            self._entries[key] = FactoryProducer(producer, contextual=contextual)
        logger.debug("Registered %s as FactoryProducer", key)

    def resolve(self, key: str, *args: Any) -> Any:
        """Resolve ``key`` to a value.

        Extra positional arguments are forwarded to the producer in place of
        the container, as with ``resolve_array``. Cached values are returned
        without calling anything, whatever arguments are given.
        """
        if args:
            return self.resolve_array(key, args)
        return self._resolve(key, None)

    def resolve_array(self, key: str, args: Sequence[Any] = ()) -> Any:
        """Resolve ``key`` calling its producer with ``args`` as positional arguments."""
        return self._resolve(key, tuple(args))

    get = resolve

    def extend(self, key: str, transform: Callable[[Any, Container], Any]) -> None:
        """Replace the entry for ``key`` with ``transform(current, container)``.

        The transform runs even when ``key`` is unknown, receiving None. Its
        return value is registered the same way ``register`` would.
        """
        current = self.resolve(key)
        self.register(key, transform(current, self))
        logger.debug("Extended %s", key)

    def has(self, key: str) -> bool:
        """Check if a key is registered."""
        return key in self._entries

    def entry(self, key: str) -> Entry | None:
        """Return the raw entry stored for ``key``."""
        return self._entries.get(key)

    def remove(self, key: str) -> None:
        """Remove a key. Unknown keys are ignored."""
        with self._lock:
            removed = self._entries.pop(key, None)
        if removed is not None:
            logger.debug("Removed %s", key)

    def clear(self) -> None:
        """Clear all registrations."""
        with self._lock:
            self._entries.clear()
            self._key_locks.clear()
        logger.debug("Cleared all registrations")

    def count(self) -> int:
        """Number of registered keys."""
        return len(self._entries)

    def __len__(self) -> int:
        return self.count()

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the container state for debugging."""
        values: dict[str, Any] = {}
        registered: dict[str, Callable[..., Any]] = {}
        factories: dict[str, Callable[..., Any]] = {}
        with self._lock:
            items = list(self._entries.items())
        for key, entry in items:
            if isinstance(entry, ConcreteValue):
                values[key] = entry.value
            elif isinstance(entry, SingletonProducer):
                registered[key] = entry.producer
            else:
                factories[key] = entry.producer
        return {
            "keys": [key for key, _ in items],
            "values": values,
            "registered": registered,
            "factories": factories,
        }

    def __repr__(self) -> str:
        return f"<Container keys={len(self._entries)}>"

    def _resolve(self, key: str, args: tuple[Any, ...] | None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if isinstance(entry, ConcreteValue):
            return entry.value
        if isinstance(entry, SingletonProducer):
            return self._materialize(key, entry, args)

        with self._resolving(key, args):
            value = invoke(entry, self, key, args)
        logger.debug("Invoked factory %s", key)
        return value

    def _materialize(
        self, key: str, entry: SingletonProducer, args: tuple[Any, ...] | None
    ) -> Any:
        # Only the per-key lock is held while the producer runs.
        with self._key_lock(key):
            with self._lock:
                current = self._entries.get(key)
            if current is not entry:
                # Cached by another thread, or replaced or removed meanwhile.
                return self._resolve(key, args)

            with self._resolving(key, args):
                value = invoke(entry, self, key, args)

            with self._lock:
                # The producer may have replaced or removed its own key.
                if self._entries.get(key) is entry:
                    self._entries[key] = ConcreteValue(value)
        logger.debug("Materialized singleton %s", key)
        return value

    def _key_lock(self, key: str) -> Any:
        if not self._thread_safe:
            return contextlib.nullcontext()
        with self._lock:
            return self._key_locks.setdefault(key, threading.RLock())

    @contextlib.contextmanager
    def _resolving(self, key: str, args: tuple[Any, ...] | None) -> Iterator[None]:
        if not self._detect_cycles:
            yield
            return
        stack: list[tuple[str, tuple[Any, ...] | None]] | None = getattr(
            self._local, "stack", None
        )
        if stack is None:
            stack = self._local.stack = []
        frame = (key, args)
        for index, (other_key, other_args) in enumerate(stack):
            if other_key == key and other_args == args:
                chain = tuple(k for k, _ in stack[index:])
                logger.debug("Cycle detected resolving %s", key)
                raise CyclicResolutionError(key, chain)
        stack.append(frame)
        try:
            yield
        finally:
            stack.pop()
