"""Exceptions raised by the container."""


class ContainerError(Exception):
    """Base class for container errors."""


class InvalidArgumentError(ContainerError, TypeError):
    """A producer was required but something non-callable was given."""

    def __init__(self, key: str, value: object) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"Producer for {key!r} must be callable, got {type(value).__name__}"
        )


class CyclicResolutionError(ContainerError, RuntimeError):
    """A key was resolved again from inside its own producer."""

    def __init__(self, key: str, chain: tuple[str, ...]) -> None:
        self.key = key
        self.chain = chain
        path = " -> ".join((*chain, key))
        super().__init__(f"Cyclic resolution of {key!r}: {path}")
