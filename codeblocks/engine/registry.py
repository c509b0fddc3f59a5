"""Style-policy registry — every policy is a factory registered via decorator.

Usage:
    @style_policy("class-variation", description="CSS class per width and variation")
    def _class_variation(config: LayoutConfig, styles: list[BlockStyle], rng: Generator) -> StylePolicy:
        return ClassVariationPolicy(config.code_block_min_width, config.style_variations_count, rng)

Adding a new policy = one decorated factory. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from codeblocks.engine.styles import StylePolicy

logger = logging.getLogger(__name__)


@dataclass
class PolicySpec:
    name: str
    factory: Callable[..., "StylePolicy"]
    description: str = ""


class PolicyRegistry:
    """Registry of style-resolution policies keyed by name."""

    def __init__(self) -> None:
        self._policies: dict[str, PolicySpec] = {}

    def register(self, spec: PolicySpec) -> None:
        if spec.name in self._policies:
            raise ValueError(f"Duplicate style policy: {spec.name}")
        self._policies[spec.name] = spec
        logger.debug("Registered style policy %s", spec.name)

    def get(self, name: str) -> PolicySpec:
        try:
            return self._policies[name]
        except KeyError:
            known = ", ".join(sorted(self._policies)) or "none"
            raise ValueError(f"Unknown style policy {name!r} (known: {known})") from None

    def create(self, name: str, *args: Any, **kwargs: Any) -> "StylePolicy":
        return self.get(name).factory(*args, **kwargs)

    def all(self) -> list[PolicySpec]:
        return sorted(self._policies.values(), key=lambda s: s.name)

    @property
    def count(self) -> int:
        return len(self._policies)


# Module-level singleton
_registry = PolicyRegistry()


def get_registry() -> PolicyRegistry:
    return _registry


def style_policy(name: str, description: str = "") -> Callable:
    """Decorator that registers a style-policy factory in the global registry."""

    def decorator(fn: Callable[..., "StylePolicy"]) -> Callable[..., "StylePolicy"]:
        _registry.register(PolicySpec(name=name, factory=fn, description=description or (fn.__doc__ or "").strip()))
        return fn

    return decorator
