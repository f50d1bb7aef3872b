"""Domain registry for factory-based domain creation.

This module provides a central registry for domain factories,
keeping the builder, scanner and CLI domain-agnostic and enabling
automatic domain discovery.
"""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .core.patterns import Patterns
    from .domains.base import Domain


class DomainRegistry:
    """Central registry for domain factories.

    Domains register themselves when imported, and the registry can
    automatically discover all available domains.
    """

    _factories: dict[str, Callable[..., "Domain"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "Domain"]) -> None:
        """Register a factory function for creating domains.

        Args:
            name: Name of the domain (e.g., 'images', 'music')
            factory: Callable taking compiled Patterns and returning a Domain

        Example:
            >>> def create_images(patterns: Patterns) -> ImagesDomain:
            ...     return ImagesDomain(patterns)
            >>> DomainRegistry.register_factory('images', create_images)
        """
        cls._factories[name] = factory

    @classmethod
    def create(cls, name: str, patterns: "Patterns", **kwargs) -> "Domain":
        """Create a registered domain.

        Args:
            name: Name of the registered domain
            patterns: Compiled patterns shared by every domain
            **kwargs: Arguments passed to the domain factory

        Raises:
            ValueError: If name is not registered
        """
        if name not in cls._factories:
            available = ", ".join(cls.list_domains()) or "none"
            raise ValueError(f"Unknown domain: '{name}'. Available domains: {available}")

        return cls._factories[name](patterns, **kwargs)

    @classmethod
    def create_all(
        cls,
        patterns: "Patterns",
        names: list[str] | None = None,
    ) -> list["Domain"]:
        """Create every registered domain, or only those in names.

        Domains are returned in the order of list_domains().
        """
        selected = names or cls.list_domains()

        unknown = [name for name in selected if name not in cls._factories]
        if unknown:
            available = ", ".join(cls.list_domains()) or "none"
            raise ValueError(f"Unknown domain: '{unknown[0]}'. Available domains: {available}")

        return [cls.create(name, patterns) for name in cls.list_domains() if name in selected]

    @classmethod
    def list_domains(cls) -> list[str]:
        """List all registered domain names, sorted.

        Example:
            >>> DomainRegistry.list_domains()
            ['images', 'localization', 'music', 'sounds']
        """
        return sorted(cls._factories.keys())

    @classmethod
    def discover_domains(cls) -> None:
        """Auto-discover and import all domains.

        Iterates through the domains/ directory and imports each domain
        package; the packages register themselves via their __init__.py.
        """
        domains_dir = Path(__file__).parent / "domains"

        if not domains_dir.exists():
            return

        for domain_path in sorted(domains_dir.iterdir()):
            if not domain_path.is_dir():
                continue

            if not (domain_path / "__init__.py").exists():
                continue

            importlib.import_module(
                f".domains.{domain_path.name}",
                package="pack_diagnostic",
            )
