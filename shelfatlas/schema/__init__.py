"""Atlas schema definitions."""
from .atlas import (
    AtlasConfig,
    AtlasManifest,
    ManifestEntry,
)

__all__ = [
    "AtlasConfig",
    "AtlasManifest",
    "ManifestEntry",
]
