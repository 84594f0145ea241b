"""CLI tests (argument handling, exit codes, reporter selection)."""

import json

from resgen import cli


def test_cli_generates_android_icons(tmp_path, icon_png, capsys):
    out = tmp_path / "out"
    rc = cli.main(
        [
            "android",
            "--type",
            "icon",
            "--resources",
            str(out),
            "--icon-source",
            str(icon_png),
            "--png-compress-level",
            "6",
        ]
    )
    assert rc == 0
    files = sorted(p.name for p in (out / "android" / "icon").iterdir())
    assert len(files) == 6
    assert "drawable-xxxhdpi-icon.png" in files
    err = capsys.readouterr().err
    assert "Run summary: platforms=1 images=6 errors=0" in err


def test_cli_reports_missing_sources(tmp_path, make_image, capsys):
    small = make_image("small.png", 32, 32)
    rc = cli.main(
        [
            "ios",
            "-t",
            "icon",
            "--resources",
            str(tmp_path / "out"),
            "--icon-source",
            str(small),
        ]
    )
    assert rc == 1
    err = capsys.readouterr().err
    assert f"WARN: Error with source file {small}" in err
    assert "ERROR: ios icon: Could not find suitable source image" in err


def test_cli_fail_fast_stops_early(tmp_path, capsys):
    rc = cli.main(
        ["--resources", str(tmp_path), "--fail-fast", "-r", "silent"]
    )
    assert rc == 1
    assert not (tmp_path / "ios").exists()


def test_cli_rejects_unknown_platform(tmp_path, capsys):
    rc = cli.main(["windows", "--resources", str(tmp_path)])
    assert rc == 2
    assert "Unsupported platform: windows" in capsys.readouterr().err


def test_cli_json_reporter_and_manifest(tmp_path, icon_png, capsys):
    manifest = tmp_path / "manifest.json"
    rc = cli.main(
        [
            "-r",
            "json",
            "android",
            "-t",
            "icon",
            "--resources",
            str(tmp_path / "res"),
            "--icon-source",
            str(icon_png),
            "--emit-manifest",
            str(manifest),
        ]
    )
    assert rc == 0
    events = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    summaries = {
        e["summary_type"]: e for e in events if e["event"] == "summary"
    }
    assert summaries["run"]["images"] == "6"
    assert summaries["manifest"]["images"] == "6"
    ends = [e for e in events if e["event"] == "task_end"]
    assert ends[0]["id"] == "android.icon"
    assert ends[0]["status"] == "success"
    assert manifest.exists()


def test_cli_config_file(tmp_path, icon_png):
    cfg = tmp_path / "resgen.yaml"
    cfg.write_text(
        "resources_dir: gen\n"
        "platforms: [android]\n"
        "types: [icon]\n"
        f"sources:\n  icon: [{icon_png.name}]\n",
        encoding="utf-8",
    )
    assert cli.main(["--config", str(cfg), "-r", "silent"]) == 0
    assert len(list((tmp_path / "gen" / "android" / "icon").iterdir())) == 6


def test_png_options_merge_with_config():
    args = cli.build_parser().parse_args(["--png-quality", "80"])
    from resgen.image import PngOptions

    merged = cli._png_options(args, PngOptions(compress_level=9))
    assert merged == PngOptions(compress_level=9, quality=80)
    none_args = cli.build_parser().parse_args([])
    assert cli._png_options(none_args, None) is None
