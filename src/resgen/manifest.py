"""Manifest generation for resgen.

The manifest is an optional JSON artifact listing every generated image,
grouped by platform and resource type. Each group carries the catalog's
``node_name`` and each entry exactly the catalog's ``node_attributes`` for
that type, which is what a platform config writer (``<icon src=...
density=...>`` and friends) needs.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .catalog import RESOURCES, ResourceKey
from .platform import GeneratedImage

__all__ = ["manifest_dict", "build_manifest"]


def _attribute(
    key: ResourceKey, image: GeneratedImage, base_dir: Optional[Path]
) -> Any:
    spec = image.spec
    if key is ResourceKey.SRC:
        dest = image.dest
        if base_dir is not None:
            dest = Path(os.path.relpath(dest, base_dir))
        return dest.as_posix()
    if key is ResourceKey.NAME:
        return spec.name
    if key is ResourceKey.WIDTH:
        return spec.width
    if key is ResourceKey.HEIGHT:
        return spec.height
    if key is ResourceKey.DENSITY:
        return spec.density.value if spec.density else None
    if key is ResourceKey.ORIENTATION:
        return spec.orientation.value if spec.orientation else None
    raise KeyError(key)


def manifest_dict(
    images: Iterable[GeneratedImage], base_dir: str | Path | None = None
) -> Dict[str, Any]:
    base = Path(base_dir) if base_dir is not None else None
    platforms: Dict[str, Dict[str, Any]] = {}
    total = 0
    for image in images:
        config = RESOURCES[image.platform][image.resource_type]
        group = platforms.setdefault(image.platform.value, {}).setdefault(
            image.resource_type.value,
            {"node": config.node_name, "images": []},
        )
        entry = {
            key.value: _attribute(key, image, base)
            for key in config.node_attributes
        }
        group["images"].append(
            {k: v for k, v in entry.items() if v is not None}
        )
        total += 1
    return {
        "version": 1,
        "platforms": platforms,
        "counts": {"images": total},
    }


def build_manifest(
    images: Iterable[GeneratedImage], output_path: Path
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = manifest_dict(images, output_path.parent)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)
        f.write("\n")
    return output_path
