"""Catalog consistency tests."""

import dataclasses
from pathlib import Path

import pytest

from resgen.catalog import (
    PLATFORMS,
    REQUIREMENTS,
    RESOURCE_TYPES,
    RESOURCES,
    Density,
    ImageSpec,
    Platform,
    ResourceKey,
    ResourceType,
    default_sources,
    is_supported_platform,
    is_supported_resource_type,
    platform_type_directory,
    validate_platforms,
    validate_resource_types,
)
from resgen.errors import UnsupportedValueError


@pytest.mark.parametrize("rtype", RESOURCE_TYPES)
def test_requirements_match_largest_catalog_image(rtype):
    configs = [RESOURCES[p][rtype] for p in PLATFORMS]
    req = REQUIREMENTS[rtype]
    assert req.required_width == max(c.max_width for c in configs)
    assert req.required_height == max(c.max_height for c in configs)
    assert req.required_format == "png"


@pytest.mark.parametrize("platform", PLATFORMS)
@pytest.mark.parametrize("rtype", RESOURCE_TYPES)
def test_image_names_unique_per_type(platform, rtype):
    names = [i.name for i in RESOURCES[platform][rtype].images]
    assert len(names) == len(set(names))


def test_catalog_sizes():
    assert len(RESOURCES[Platform.ANDROID][ResourceType.ICON].images) == 6
    assert len(RESOURCES[Platform.ANDROID][ResourceType.SPLASH].images) == 12
    assert len(RESOURCES[Platform.IOS][ResourceType.ICON].images) == 19
    assert len(RESOURCES[Platform.IOS][ResourceType.SPLASH].images) == 22


def test_android_icon_densities():
    icon = RESOURCES[Platform.ANDROID][ResourceType.ICON]
    assert [i.density for i in icon.images] == [
        Density.LDPI,
        Density.MDPI,
        Density.HDPI,
        Density.XHDPI,
        Density.XXHDPI,
        Density.XXXHDPI,
    ]
    assert icon.images[0] == ImageSpec(
        "drawable-ldpi-icon.png", 36, 36, density=Density.LDPI
    )
    assert icon.node_name == "icon"
    assert icon.node_attributes == (ResourceKey.SRC, ResourceKey.DENSITY)


def test_android_splash_orientation_follows_density():
    for spec in RESOURCES[Platform.ANDROID][ResourceType.SPLASH].images:
        if spec.density.value.startswith("land-"):
            assert spec.width > spec.height
            assert spec.orientation.value == "landscape"
        else:
            assert spec.width < spec.height
            assert spec.orientation.value == "portrait"


def test_ios_uses_width_height_attributes():
    for rtype in RESOURCE_TYPES:
        cfg = RESOURCES[Platform.IOS][rtype]
        assert cfg.node_attributes == (
            ResourceKey.SRC,
            ResourceKey.WIDTH,
            ResourceKey.HEIGHT,
        )
        assert all(i.density is None for i in cfg.images)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        RESOURCES[Platform.ANDROID] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        RESOURCES[Platform.IOS][ResourceType.ICON] = None  # type: ignore
    spec = RESOURCES[Platform.IOS][ResourceType.ICON].images[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.width = 1  # type: ignore[misc]


def test_image_spec_rejects_non_positive_dimensions():
    with pytest.raises(ValueError):
        ImageSpec("bad.png", 0, 10)


def test_supported_platform_and_type():
    assert is_supported_platform("android")
    assert is_supported_platform("ios")
    assert not is_supported_platform("garbage")
    assert not is_supported_platform(None)
    assert is_supported_resource_type("icon")
    assert is_supported_resource_type(ResourceType.SPLASH)
    assert not is_supported_resource_type("favicon")


def test_validate_names():
    assert validate_platforms(["ios", "android"]) == [
        Platform.IOS,
        Platform.ANDROID,
    ]
    assert validate_resource_types(["splash"]) == [ResourceType.SPLASH]
    with pytest.raises(UnsupportedValueError) as ei:
        validate_resource_types(["icon", "banner"])
    assert ei.value.context["value"] == "banner"
    assert "Unsupported resource type: banner" in str(ei.value)
    # still a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        validate_platforms(["windows"])


def test_default_paths():
    assert default_sources("res", ResourceType.ICON) == [
        Path("res") / "icon.png"
    ]
    assert platform_type_directory(
        "res", Platform.ANDROID, ResourceType.SPLASH
    ) == Path("res/android/splash")
