"""Sound domain for reference generation and scanning."""

from ...core.patterns import Patterns
from .domain import SoundsDomain, SoundValidator, load_sound_groups
from .model import SoundEntry

# Auto-register with the registry
from ...registry import DomainRegistry


def _create_sounds_domain(patterns: Patterns, **kwargs) -> SoundsDomain:
    return SoundsDomain(patterns)


DomainRegistry.register_factory("sounds", _create_sounds_domain)

__all__ = [
    "SoundEntry",
    "SoundValidator",
    "SoundsDomain",
    "load_sound_groups",
]
