"""
Atlas schema: build configuration and the JSON manifest.

COORDINATES:
- Origin at the top-left corner of the atlas, +X right, +Y down (PNG order)
- rect is [x, y, width, height] in pixels
- uv is [u1, v1, u2, v2] normalized to 0-1 against the atlas size

EXAMPLE MANIFEST:
    {
      "image": "atlas.png",
      "resolution": [150, 100],
      "entries": [
        {"id": 1, "source": "sprites/a.png", "rect": [0, 0, 50, 100],
         "uv": [0.0, 0.0, 0.3333, 1.0]}
      ]
    }
"""

from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

#########################
# CONFIGURATION
#########################

class AtlasConfig(BaseModel):
    model_config = ConfigDict(extra='forbid')

    row_width_limit: int = Field(1080, ge=0, description="Maximum cumulative width of one shelf (CLI: --maxheight).")
    max_workers: Optional[int] = Field(None, ge=1, description="Image loading thread pool size (None = automatic).")
    compress_level: int = Field(9, ge=0, le=9, description="PNG zlib compression level (9 = best).")

#########################
# MANIFEST
#########################

class ManifestEntry(BaseModel):
    model_config = ConfigDict(extra='forbid')

    id: int = Field(..., ge=1, description="Rectangle id (1-based collected order).")
    source: Optional[str] = Field(None, description="Source image path.")
    rect: List[int] = Field(..., description="[x, y, width, height] pixels.", min_length=4, max_length=4)
    uv: List[float] = Field(..., description="[u1, v1, u2, v2] normalized (0-1).", min_length=4, max_length=4)

    @field_validator('rect')
    @classmethod
    def validate_rect(cls, v):
        if v[0] < 0 or v[1] < 0 or v[2] <= 0 or v[3] <= 0:
            raise ValueError("rect must have non-negative origin and positive size")
        return v

class AtlasManifest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    image: str = Field(..., description="Atlas image file name.")
    resolution: List[int] = Field(..., description="[width, height] pixels.", min_length=2, max_length=2)
    entries: List[ManifestEntry] = Field(default_factory=list, description="One entry per packed image, by id.")

    @model_validator(mode='after')
    def validate_entries_inside(self):
        width, height = self.resolution
        for entry in self.entries:
            x, y, w, h = entry.rect
            if x + w > width or y + h > height:
                raise ValueError(f"Entry {entry.id} extends outside the {width}x{height} atlas")
        return self
