"""Content domains of a resource pack.

Each subpackage (images, localization, music, sounds) provides a
Domain and its Validator, and registers itself with the
DomainRegistry when imported.
"""

# Domain packages are imported by DomainRegistry.discover_domains()
from .base import Domain, FileValidator, ReferenceEntry, Validator

__all__ = ["Domain", "FileValidator", "ReferenceEntry", "Validator"]
