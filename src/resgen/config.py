"""Run configuration loading (JSON/YAML) for resgen.

Example ``resgen.yaml``::

    resources_dir: resources
    platforms: [android, ios]
    types: [icon, splash]
    sources:
      icon: [art/icon-master.png, resources/icon.png]
      splash: [art/splash.png]
    png:
      compress_level: 9
      optimize: true
    manifest: resources/manifest.json

Relative paths are resolved against the directory holding the file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .catalog import (
    DEFAULT_RESOURCES_DIRECTORY,
    PLATFORMS,
    RESOURCE_TYPES,
    Platform,
    ResourceType,
    validate_platforms,
    validate_resource_types,
)
from .image import PngOptions

__all__ = ["RunConfig", "load_config", "parse_config"]


@dataclass(slots=True)
class RunConfig:
    resources_dir: Path = Path(DEFAULT_RESOURCES_DIRECTORY)
    platforms: List[Platform] = field(default_factory=lambda: list(PLATFORMS))
    types: List[ResourceType] = field(
        default_factory=lambda: list(RESOURCE_TYPES)
    )
    sources: Dict[ResourceType, List[Path]] = field(default_factory=dict)
    png: Optional[PngOptions] = None
    manifest: Optional[Path] = None


def load_config(path: str | Path) -> RunConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in {".yaml", ".yml"}:
        data: Any = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Root of configuration must be an object")
    return parse_config(data, p.parent)


def _as_list(data: Dict[str, Any], key: str) -> Optional[List[Any]]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list")
    return value


def parse_config(data: Dict[str, Any], base_dir: Path) -> RunConfig:
    def _resolve(value: Any) -> Path:
        if not isinstance(value, str):
            raise ValueError(f"Path entries must be strings (got {value!r})")
        return base_dir / value

    cfg = RunConfig(
        resources_dir=_resolve(
            data.get("resources_dir", DEFAULT_RESOURCES_DIRECTORY)
        )
    )

    platforms = _as_list(data, "platforms")
    if platforms is not None:
        cfg.platforms = validate_platforms(platforms)
    types = _as_list(data, "types")
    if types is not None:
        cfg.types = validate_resource_types(types)

    sources = data.get("sources") or {}
    if not isinstance(sources, dict):
        raise ValueError("'sources' must be a mapping of type to paths")
    for name in sources:
        (rtype,) = validate_resource_types([name])
        entries = _as_list(sources, name)
        if entries is None:
            continue
        cfg.sources[rtype] = [_resolve(s) for s in entries]

    png = data.get("png")
    if png is not None:
        if not isinstance(png, dict):
            raise ValueError("'png' must be a mapping")
        cfg.png = PngOptions.from_dict(png)

    manifest = data.get("manifest")
    if manifest is not None:
        cfg.manifest = _resolve(manifest)
    return cfg
