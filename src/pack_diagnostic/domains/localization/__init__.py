"""Localization domain for reference generation and scanning."""

from ...core.patterns import Patterns
from .domain import LocalizationDomain, LocalizationRow, LocalizationValidator
from .model import LocalizationKey

# Auto-register with the registry
from ...registry import DomainRegistry


def _create_localization_domain(patterns: Patterns, **kwargs) -> LocalizationDomain:
    return LocalizationDomain(patterns)


DomainRegistry.register_factory("localization", _create_localization_domain)

__all__ = [
    "LocalizationDomain",
    "LocalizationKey",
    "LocalizationRow",
    "LocalizationValidator",
]
