"""Registry for selection range implementations.

Uses a decorator pattern for registration. ``wrap()`` either looks up an
explicitly requested kind or detects the first registered kind whose
``accepts()`` check matches the buffer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from qselect.exceptions import UnsupportedBufferError

if TYPE_CHECKING:
    from collections.abc import Callable

    from qselect.config import QSelectConfig
    from qselect.ranges.base import OrderedRange


class RangeRegistry:
    """Registry mapping kind names to OrderedRange classes.

    Built-in ranges register via the ``@RangeRegistry.register()``
    decorator when ``qselect.ranges`` is imported.
    """

    _registry: ClassVar[dict[str, type[OrderedRange]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[OrderedRange]], type[OrderedRange]]:
        """Decorator that registers an OrderedRange class under *name*.

        Args:
            name: Kind identifier, e.g. ``"numeric"``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[OrderedRange]) -> type[OrderedRange]:
            if name in cls._registry:
                raise ValueError(f"Range kind '{name}' is already registered")
            cls._registry[name] = klass
            klass.kind = name
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[OrderedRange]:
        """Return the range class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown range kind '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def detect(cls, data: Any) -> type[OrderedRange]:
        """Return the first registered range class that accepts *data*.

        Raises:
            UnsupportedBufferError: If no registered kind accepts the buffer.
        """
        for klass in cls._registry.values():
            if klass.accepts(data):
                return klass
        raise UnsupportedBufferError(
            f"No range kind accepts a buffer of type {type(data).__name__}"
        )

    @classmethod
    def wrap(
        cls,
        data: Any,
        start: int = 0,
        end: int | None = None,
        kind: str | None = None,
        config: QSelectConfig | None = None,
    ) -> OrderedRange:
        """Wrap *data* in the appropriate range.

        Args:
            data: Mutable buffer to select from.
            start: First index of the range.
            end: Last index of the range (inclusive), ``None`` for the last element.
            kind: Explicit kind name; detected from *data* when ``None``.
            config: Optional config passed through to the range constructor.

        Returns:
            A validated OrderedRange over ``data[start..=end]``.

        Raises:
            KeyError: If *kind* is not registered.
            UnsupportedBufferError: If the buffer cannot be wrapped.
            InvalidRangeError: If the bounds do not fit the buffer.
        """
        klass = cls.detect(data) if kind is None else cls.get(kind)
        if kind is not None and not klass.accepts(data):
            raise UnsupportedBufferError(
                f"Range kind '{kind}' does not accept a buffer of type {type(data).__name__}"
            )
        return klass.from_config(data, start, end, config)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered kind names."""
        return sorted(cls._registry)
