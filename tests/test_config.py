import json

import pytest

from resgen.catalog import PLATFORMS, Platform, ResourceType
from resgen.config import load_config
from resgen.errors import UnsupportedValueError


def test_load_yaml_config(tmp_path):
    cfg_path = tmp_path / "resgen.yaml"
    cfg_path.write_text(
        "\n".join(
            [
                "resources_dir: out",
                "platforms: [ios]",
                "types: icon",
                "sources:",
                "  icon: [art/master.png, out/icon.png]",
                "png:",
                "  compress_level: 9",
                "  optimize: true",
                "manifest: out/manifest.json",
            ]
        ),
        encoding="utf-8",
    )
    cfg = load_config(cfg_path)
    assert cfg.resources_dir == tmp_path / "out"
    assert cfg.platforms == [Platform.IOS]
    assert cfg.types == [ResourceType.ICON]
    assert cfg.sources == {
        ResourceType.ICON: [
            tmp_path / "art" / "master.png",
            tmp_path / "out" / "icon.png",
        ]
    }
    assert cfg.png.compress_level == 9 and cfg.png.optimize
    assert cfg.manifest == tmp_path / "out" / "manifest.json"


def test_load_json_config_defaults(tmp_path):
    cfg_path = tmp_path / "resgen.json"
    cfg_path.write_text(json.dumps({}), encoding="utf-8")
    cfg = load_config(cfg_path)
    assert cfg.resources_dir == tmp_path / "resources"
    assert cfg.platforms == list(PLATFORMS)
    assert cfg.sources == {}
    assert cfg.png is None


def test_empty_yaml_is_default(tmp_path):
    cfg_path = tmp_path / "resgen.yml"
    cfg_path.write_text("", encoding="utf-8")
    assert load_config(cfg_path).types == [
        ResourceType.ICON,
        ResourceType.SPLASH,
    ]


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "content,exc",
    [
        ("- a\n- b\n", ValueError),
        ("platforms: [windows]\n", UnsupportedValueError),
        ("sources:\n  banner: [a.png]\n", UnsupportedValueError),
        ("sources: [a.png]\n", ValueError),
        ("png:\n  quality: 500\n", ValueError),
    ],
)
def test_invalid_configs(tmp_path, content, exc):
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text(content, encoding="utf-8")
    with pytest.raises(exc):
        load_config(cfg_path)


def test_source_entries_null_vs_empty(tmp_path):
    cfg_path = tmp_path / "resgen.yaml"
    cfg_path.write_text("sources:\n  icon:\n  splash: []\n", encoding="utf-8")
    cfg = load_config(cfg_path)
    # a null entry falls back to the default, an empty list is kept
    assert cfg.sources == {ResourceType.SPLASH: []}
