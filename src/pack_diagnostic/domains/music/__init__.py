"""Music domain for reference generation and scanning."""

from ...core.patterns import Patterns
from .domain import MusicDomain, MusicValidator, split_extension
from .model import EXTENSIONS, MusicEntry

# Auto-register with the registry
from ...registry import DomainRegistry


def _create_music_domain(patterns: Patterns, **kwargs) -> MusicDomain:
    return MusicDomain(patterns)


DomainRegistry.register_factory("music", _create_music_domain)

__all__ = [
    "EXTENSIONS",
    "MusicDomain",
    "MusicEntry",
    "MusicValidator",
    "split_extension",
]
