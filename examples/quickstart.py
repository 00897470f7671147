"""
shelfatlas Quick Start Example

This example shows the basic usage of shelfatlas to pack a sprite folder.
"""

from shelfatlas import AtlasBuilder

# Rows up to 1080 pixels wide (the CLI's --maxheight default)
builder = AtlasBuilder()

print("Packing sprites/ ...")
result = builder.build("sprites")
result.save("atlas.png")
print(f"✅ Saved {result.width}x{result.height} atlas to atlas.png")
