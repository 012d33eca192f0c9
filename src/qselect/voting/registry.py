"""Registry for ensemble voting rules.

Uses a decorator pattern for registration, mirroring the range registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from qselect.config import QSelectConfig
    from qselect.voting.base import EnsembleVoting


class VotingRegistry:
    """Registry mapping rule names to EnsembleVoting classes.

    Built-in rules register via the ``@VotingRegistry.register()``
    decorator. ``build()`` instantiates the rule named by the config's
    ``voting_rule`` field.
    """

    _registry: ClassVar[dict[str, type[EnsembleVoting]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[EnsembleVoting]], type[EnsembleVoting]]:
        """Decorator that registers an EnsembleVoting class under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[EnsembleVoting]) -> type[EnsembleVoting]:
            if name in cls._registry:
                raise ValueError(f"Voting rule '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EnsembleVoting]:
        """Return the rule class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown voting rule '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: QSelectConfig) -> EnsembleVoting:
        """Instantiate the rule specified by *config.voting_rule*."""
        return cls.get(config.voting_rule)(config)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered rule names."""
        return sorted(cls._registry)
