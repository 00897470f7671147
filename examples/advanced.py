"""
shelfatlas Advanced Example

This example narrows the rows, inspects placements and writes a JSON
manifest with normalized UVs next to the atlas.
"""

from shelfatlas import AtlasBuilder

builder = AtlasBuilder(row_width_limit=512, max_workers=8)

print("Packing sprites/ ...")
result = builder.build("sprites")

print("\n--- Report ---")
for line in result.report_lines():
    print(line)

print("\n--- UVs ---")
manifest = result.to_manifest()
for entry in manifest.entries:
    print(f"{entry.source}: {[round(u, 4) for u in entry.uv]}")

result.save("atlas.png")
result.save_manifest("atlas.json")
print("\n✅ Saved atlas.png and atlas.json")
