"""Extractor registry and factory."""

from __future__ import annotations

from typing import Any, Callable

from mtuvalidator.extractors.base import BaseMtuExtractor

_EXTRACTOR_REGISTRY: dict[str, type[BaseMtuExtractor]] = {}


def register_extractor(name: str) -> Callable[[type[BaseMtuExtractor]], type[BaseMtuExtractor]]:
    """Decorator to register an extractor class under a short name.

    Usage::

        @register_extractor("regex")
        class RegexMtuExtractor(BaseMtuExtractor):
            ...
    """

    def decorator(cls: type[BaseMtuExtractor]) -> type[BaseMtuExtractor]:
        _EXTRACTOR_REGISTRY[name.lower()] = cls
        return cls

    return decorator


def extractor_class(name: str) -> type[BaseMtuExtractor]:
    """Return the extractor class registered as ``name``.

    Raises:
        ValueError: If no extractor is registered under that name.
    """
    name_lower = name.lower()
    if name_lower not in _EXTRACTOR_REGISTRY:
        available = ", ".join(sorted(_EXTRACTOR_REGISTRY.keys()))
        raise ValueError(f"Unknown extractor '{name}'. Available: {available}")
    return _EXTRACTOR_REGISTRY[name_lower]


def create_extractor(name: str, **kwargs: Any) -> BaseMtuExtractor:
    """Create an extractor by registry name.

    Args:
        name: Extractor name (e.g. "map", "regex", "json").
        **kwargs: Extractor-specific configuration.

    Returns:
        A configured extractor instance.

    Raises:
        ValueError: If the name is not registered or the configuration is invalid.
    """
    return extractor_class(name)(**kwargs)


def list_extractors() -> list[str]:
    """Return a sorted list of registered extractor names."""
    return sorted(_EXTRACTOR_REGISTRY.keys())
