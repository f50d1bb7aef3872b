"""Image domain for reference generation and scanning.

Images are referenced by directory, file name and pixel size.
"""

from ...core.patterns import Patterns
from .domain import ImagesDomain, ImageValidator, load_image_groups
from .model import ImageEntry

# Auto-register with the registry
from ...registry import DomainRegistry


def _create_images_domain(patterns: Patterns, **kwargs) -> ImagesDomain:
    """Factory function for creating the image domain.

    Args:
        patterns: Compiled file name patterns (unused for images)
        **kwargs: Optional `read_size` replacing the Pillow size reader

    Returns:
        ImagesDomain instance
    """
    return ImagesDomain(patterns, **kwargs)


# Auto-register at module import
DomainRegistry.register_factory("images", _create_images_domain)

__all__ = [
    "ImageEntry",
    "ImageValidator",
    "ImagesDomain",
    "load_image_groups",
]
