"""Strategy registry — every cone strategy is a class registered via decorator.

Usage:
    @strategy(name="approximate", description="Floating-point trigonometry")
    class ApproximateConeBoundaries(ConeBoundaryComputer):
        ...

Selection order in ``create_computer``: an explicit name, then the
capabilities of a supplied kernel, then ``settings.default_strategy``.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from conespan.config import settings
from conespan.engine.kernels import supports_exact
from conespan.errors import UnknownStrategy

if TYPE_CHECKING:
    from conespan.engine.cones import ConeBoundaryComputer

logger = logging.getLogger(__name__)

EXACT = "exact"
APPROXIMATE = "approximate"


@dataclass
class StrategySpec:
    name: str
    factory: Callable[..., "ConeBoundaryComputer"]
    description: str = ""


class StrategyRegistry:
    """Registry of cone-boundary strategies keyed by name."""

    def __init__(self) -> None:
        self._strategies: dict[str, StrategySpec] = {}

    def register(self, spec: StrategySpec) -> None:
        if spec.name in self._strategies:
            raise ValueError(f"Duplicate strategy name: {spec.name}")
        self._strategies[spec.name] = spec
        logger.debug("Registered strategy %s", spec.name)

    def get(self, name: str) -> StrategySpec:
        try:
            return self._strategies[name]
        except KeyError:
            known = ", ".join(sorted(self._strategies)) or "none"
            raise UnknownStrategy(f"Unknown strategy {name!r} (known: {known})") from None

    def names(self) -> list[str]:
        return sorted(self._strategies)

    def all(self) -> list[StrategySpec]:
        return [self._strategies[n] for n in self.names()]

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    _register_strategies()
    return _registry


def _register_strategies() -> None:
    """Import the strategy module so @strategy decorators fire."""
    importlib.import_module("conespan.engine.cones")


def strategy(*, name: str, description: str = ""):
    """Class decorator to register a cone strategy."""

    def decorator(cls):
        _registry.register(StrategySpec(name=name, factory=cls, description=description))
        return cls

    return decorator


def create_computer(name: str | None = None, kernel: Any = None) -> "ConeBoundaryComputer":
    """Build a cone-boundary computer.

    An explicit ``name`` wins. Otherwise a supplied ``kernel`` picks the exact
    strategy when it offers root isolation and exact square roots, and the
    approximate one when it does not. With neither, the configured default
    strategy is used.
    """
    registry = get_registry()
    if name is None:
        if kernel is not None:
            name = EXACT if supports_exact(kernel) else APPROXIMATE
        else:
            name = settings.default_strategy

    spec = registry.get(name)
    logger.debug("Selected strategy %s", spec.name)
    if kernel is None:
        return spec.factory()
    return spec.factory(kernel=kernel)
