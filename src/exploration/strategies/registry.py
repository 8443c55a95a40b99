"""Registry for PMF strategy implementations.

Uses a decorator pattern for registration, enabling both built-in and
third-party strategies to register themselves at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from exploration.config import ExplorationConfig
    from exploration.strategies.base import PmfStrategy


class PmfStrategyRegistry:
    """Registry mapping string names to PmfStrategy classes.

    Built-in strategies register via the ``@PmfStrategyRegistry.register()``
    decorator. The ``build()`` class method instantiates the strategy named
    by the config's ``strategy`` field.
    """

    _registry: ClassVar[dict[str, type[PmfStrategy]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[PmfStrategy]], type[PmfStrategy]]:
        """Decorator that registers a PmfStrategy class under *name*.

        Args:
            name: Identifier used in config ``strategy``.

        Returns:
            Decorator that registers the class and returns it with ``name`` set.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[PmfStrategy]) -> type[PmfStrategy]:
            if name in cls._registry:
                raise ValueError(f"PMF strategy '{name}' is already registered")
            klass.name = name
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[PmfStrategy]:
        """Return the strategy class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown PMF strategy '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: ExplorationConfig) -> PmfStrategy:
        """Instantiate the strategy specified by *config.strategy*."""
        return cls.get(config.strategy)(config)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry)
