"""Static resource catalog for resgen.

Describes, per platform and resource type, every image that has to be
produced (file name, exact size and optional density/orientation tags) and
the source requirements each resource type imposes. Everything here is
immutable data: frozen dataclasses, tuples and read-only mappings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from .errors import UnsupportedValueError

__all__ = [
    "DEFAULT_RESOURCES_DIRECTORY",
    "Platform",
    "ResourceType",
    "Density",
    "Orientation",
    "ResourceKey",
    "ImageSpec",
    "ResourceTypeConfig",
    "ValidationRequirement",
    "PLATFORMS",
    "RESOURCE_TYPES",
    "RESOURCES",
    "REQUIREMENTS",
    "is_supported_platform",
    "is_supported_resource_type",
    "validate_platforms",
    "validate_resource_types",
    "default_sources",
    "platform_type_directory",
]

DEFAULT_RESOURCES_DIRECTORY = "resources"


class Platform(str, Enum):
    ANDROID = "android"
    IOS = "ios"


class ResourceType(str, Enum):
    ICON = "icon"
    SPLASH = "splash"


class Orientation(str, Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class Density(str, Enum):
    LDPI = "ldpi"
    MDPI = "mdpi"
    HDPI = "hdpi"
    XHDPI = "xhdpi"
    XXHDPI = "xxhdpi"
    XXXHDPI = "xxxhdpi"
    LAND_LDPI = "land-ldpi"
    LAND_MDPI = "land-mdpi"
    LAND_HDPI = "land-hdpi"
    LAND_XHDPI = "land-xhdpi"
    LAND_XXHDPI = "land-xxhdpi"
    LAND_XXXHDPI = "land-xxxhdpi"
    PORT_LDPI = "port-ldpi"
    PORT_MDPI = "port-mdpi"
    PORT_HDPI = "port-hdpi"
    PORT_XHDPI = "port-xhdpi"
    PORT_XXHDPI = "port-xxhdpi"
    PORT_XXXHDPI = "port-xxxhdpi"


class ResourceKey(str, Enum):
    """Attribute keys a manifest writer emits for a generated image."""

    SRC = "src"
    NAME = "name"
    WIDTH = "width"
    HEIGHT = "height"
    DENSITY = "density"
    ORIENTATION = "orientation"


PLATFORMS: Tuple[Platform, ...] = (Platform.ANDROID, Platform.IOS)
RESOURCE_TYPES: Tuple[ResourceType, ...] = (
    ResourceType.ICON,
    ResourceType.SPLASH,
)


@dataclass(frozen=True, slots=True)
class ImageSpec:
    name: str
    width: int
    height: int
    density: Optional[Density] = None
    orientation: Optional[Orientation] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"ImageSpec {self.name!r} must have positive dimensions "
                f"(got {self.width}x{self.height})"
            )


@dataclass(frozen=True, slots=True)
class ResourceTypeConfig:
    images: Tuple[ImageSpec, ...]
    node_name: str
    node_attributes: Tuple[ResourceKey, ...]

    @property
    def max_width(self) -> int:
        return max(i.width for i in self.images)

    @property
    def max_height(self) -> int:
        return max(i.height for i in self.images)


@dataclass(frozen=True, slots=True)
class ValidationRequirement:
    required_format: str
    required_width: int
    required_height: int


_L = Orientation.LANDSCAPE
_P = Orientation.PORTRAIT


def _android_icon(density: Density, size: int) -> ImageSpec:
    return ImageSpec(
        f"drawable-{density.value}-icon.png", size, size, density=density
    )


def _android_splash(density: Density, width: int, height: int) -> ImageSpec:
    orientation = _L if density.value.startswith("land-") else _P
    return ImageSpec(
        f"drawable-{density.value}-screen.png",
        width,
        height,
        density=density,
        orientation=orientation,
    )


_ANDROID_ICON = ResourceTypeConfig(
    images=(
        _android_icon(Density.LDPI, 36),
        _android_icon(Density.MDPI, 48),
        _android_icon(Density.HDPI, 72),
        _android_icon(Density.XHDPI, 96),
        _android_icon(Density.XXHDPI, 144),
        _android_icon(Density.XXXHDPI, 192),
    ),
    node_name="icon",
    node_attributes=(ResourceKey.SRC, ResourceKey.DENSITY),
)

_ANDROID_SPLASH = ResourceTypeConfig(
    images=(
        _android_splash(Density.LAND_LDPI, 320, 240),
        _android_splash(Density.LAND_MDPI, 480, 320),
        _android_splash(Density.LAND_HDPI, 800, 480),
        _android_splash(Density.LAND_XHDPI, 1280, 720),
        _android_splash(Density.LAND_XXHDPI, 1600, 960),
        _android_splash(Density.LAND_XXXHDPI, 1920, 1280),
        _android_splash(Density.PORT_LDPI, 240, 320),
        _android_splash(Density.PORT_MDPI, 320, 480),
        _android_splash(Density.PORT_HDPI, 480, 800),
        _android_splash(Density.PORT_XHDPI, 720, 1280),
        _android_splash(Density.PORT_XXHDPI, 960, 1600),
        _android_splash(Density.PORT_XXXHDPI, 1280, 1920),
    ),
    node_name="splash",
    node_attributes=(ResourceKey.SRC, ResourceKey.DENSITY),
)

_IOS_ICON = ResourceTypeConfig(
    images=(
        ImageSpec("icon.png", 57, 57),
        ImageSpec("icon@2x.png", 114, 114),
        ImageSpec("icon-40.png", 40, 40),
        ImageSpec("icon-40@2x.png", 80, 80),
        ImageSpec("icon-40@3x.png", 120, 120),
        ImageSpec("icon-50.png", 50, 50),
        ImageSpec("icon-50@2x.png", 100, 100),
        ImageSpec("icon-60.png", 60, 60),
        ImageSpec("icon-60@2x.png", 120, 120),
        ImageSpec("icon-60@3x.png", 180, 180),
        ImageSpec("icon-72.png", 72, 72),
        ImageSpec("icon-72@2x.png", 144, 144),
        ImageSpec("icon-76.png", 76, 76),
        ImageSpec("icon-76@2x.png", 152, 152),
        ImageSpec("icon-83.5@2x.png", 167, 167),
        ImageSpec("icon-small.png", 29, 29),
        ImageSpec("icon-small@2x.png", 58, 58),
        ImageSpec("icon-small@3x.png", 87, 87),
        ImageSpec("icon-1024.png", 1024, 1024),
    ),
    node_name="icon",
    node_attributes=(ResourceKey.SRC, ResourceKey.WIDTH, ResourceKey.HEIGHT),
)

_IOS_SPLASH = ResourceTypeConfig(
    images=(
        ImageSpec("Default-568h@2x~iphone.png", 640, 1136, orientation=_P),
        ImageSpec("Default-667h.png", 750, 1334, orientation=_P),
        ImageSpec("Default-736h.png", 1242, 2208, orientation=_P),
        ImageSpec("Default-2436h.png", 1125, 2436, orientation=_P),
        ImageSpec("Default-Landscape-736h.png", 2208, 1242, orientation=_L),
        ImageSpec("Default-Landscape-2436h.png", 2436, 1125, orientation=_L),
        ImageSpec(
            "Default-Landscape@2x~ipad.png", 2048, 1536, orientation=_L
        ),
        ImageSpec(
            "Default-Landscape@~ipadpro.png", 2732, 2048, orientation=_L
        ),
        ImageSpec("Default-Landscape~ipad.png", 1024, 768, orientation=_L),
        ImageSpec("Default-Portrait@2x~ipad.png", 1536, 2048, orientation=_P),
        ImageSpec(
            "Default-Portrait@~ipadpro.png", 2048, 2732, orientation=_P
        ),
        ImageSpec("Default-Portrait~ipad.png", 768, 1024, orientation=_P),
        ImageSpec("Default@2x~iphone.png", 640, 960, orientation=_P),
        ImageSpec("Default~iphone.png", 320, 480, orientation=_P),
        ImageSpec("Default@2x~ipad~anyany.png", 2732, 2732),
        ImageSpec("Default@2x~ipad~comany.png", 1278, 2732, orientation=_P),
        ImageSpec("Default@2x~iphone~anyany.png", 1334, 1334),
        ImageSpec("Default@2x~iphone~comany.png", 750, 1334, orientation=_P),
        ImageSpec("Default@2x~iphone~comcom.png", 1334, 750, orientation=_L),
        ImageSpec("Default@3x~iphone~anyany.png", 2436, 2436),
        ImageSpec("Default@3x~iphone~anycom.png", 2436, 1242, orientation=_L),
        ImageSpec("Default@3x~iphone~comany.png", 1242, 2436, orientation=_P),
    ),
    node_name="splash",
    node_attributes=(ResourceKey.SRC, ResourceKey.WIDTH, ResourceKey.HEIGHT),
)

RESOURCES: Mapping[Platform, Mapping[ResourceType, ResourceTypeConfig]] = (
    MappingProxyType(
        {
            Platform.ANDROID: MappingProxyType(
                {
                    ResourceType.ICON: _ANDROID_ICON,
                    ResourceType.SPLASH: _ANDROID_SPLASH,
                }
            ),
            Platform.IOS: MappingProxyType(
                {
                    ResourceType.ICON: _IOS_ICON,
                    ResourceType.SPLASH: _IOS_SPLASH,
                }
            ),
        }
    )
)

# Sources must cover the largest output of each type on every platform.
REQUIREMENTS: Mapping[ResourceType, ValidationRequirement] = MappingProxyType(
    {
        ResourceType.ICON: ValidationRequirement("png", 1024, 1024),
        ResourceType.SPLASH: ValidationRequirement("png", 2732, 2732),
    }
)


def is_supported_platform(value: object) -> bool:
    return isinstance(value, str) and value in tuple(
        p.value for p in PLATFORMS
    )


def is_supported_resource_type(value: object) -> bool:
    return isinstance(value, str) and value in tuple(
        t.value for t in RESOURCE_TYPES
    )


def validate_platforms(names: Iterable[str]) -> List[Platform]:
    result: List[Platform] = []
    for name in names:
        if not is_supported_platform(name):
            raise UnsupportedValueError.for_value("platform", name, PLATFORMS)
        result.append(Platform(name))
    return result


def validate_resource_types(names: Iterable[str]) -> List[ResourceType]:
    result: List[ResourceType] = []
    for name in names:
        if not is_supported_resource_type(name):
            raise UnsupportedValueError.for_value(
                "resource type", name, RESOURCE_TYPES
            )
        result.append(ResourceType(name))
    return result


def default_sources(
    resources_dir: str | Path, resource_type: ResourceType
) -> List[Path]:
    """Conventional source candidates, e.g. ``resources/icon.png``."""
    return [Path(resources_dir) / f"{ResourceType(resource_type).value}.png"]


def platform_type_directory(
    resources_dir: str | Path,
    platform: Platform,
    resource_type: ResourceType,
) -> Path:
    return (
        Path(resources_dir)
        / Platform(platform).value
        / ResourceType(resource_type).value
    )
