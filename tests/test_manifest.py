from pathlib import Path

from resgen.catalog import RESOURCES, Platform, ResourceType
from resgen.manifest import build_manifest, manifest_dict
from resgen.platform import GeneratedImage


def _images(platform, rtype, root=Path("res")):
    return [
        GeneratedImage(
            root / platform.value / rtype.value / spec.name,
            spec,
            "src.png",
            platform,
            rtype,
        )
        for spec in RESOURCES[platform][rtype].images
    ]


def test_attributes_follow_catalog_node_definition():
    images = _images(Platform.IOS, ResourceType.SPLASH) + _images(
        Platform.ANDROID, ResourceType.SPLASH
    )
    data = manifest_dict(images, base_dir="res")

    ios = data["platforms"]["ios"]["splash"]
    assert ios["node"] == "splash"
    assert ios["images"][0] == {
        "src": "ios/splash/Default-568h@2x~iphone.png",
        "width": 640,
        "height": 1136,
    }
    android = data["platforms"]["android"]["splash"]
    assert android["images"][0] == {
        "src": "android/splash/drawable-land-ldpi-screen.png",
        "density": "land-ldpi",
    }
    assert data["counts"]["images"] == 22 + 12


def test_src_without_base_dir_is_dest():
    data = manifest_dict(_images(Platform.ANDROID, ResourceType.ICON))
    first = data["platforms"]["android"]["icon"]["images"][0]
    assert first["src"] == "res/android/icon/drawable-ldpi-icon.png"


def test_build_manifest_writes_sorted_json(tmp_path):
    path = tmp_path / "out" / "manifest.json"
    images = _images(Platform.ANDROID, ResourceType.ICON, tmp_path / "out")
    assert build_manifest(images, path) == path
    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '"src": "android/icon/drawable-ldpi-icon.png"' in text
