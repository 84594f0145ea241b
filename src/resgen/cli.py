"""Command line interface for resgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List

from ._version import __version__
from .api import GenerateOptions, generate_resources
from .catalog import (
    DEFAULT_RESOURCES_DIRECTORY,
    PLATFORMS,
    RESOURCE_TYPES,
    ResourceType,
    validate_platforms,
    validate_resource_types,
)
from .config import load_config
from .errors import NoViableSource, ResgenError
from .image import PngOptions
from .logging import configure_logging, get_logger
from .reporting import (
    JsonLinesReporter,
    PlainReporter,
    RichReporter,
    SilentReporter,
    get_reporter,
    set_reporter,
    set_verbosity,
)

EXIT_OK = 0
EXIT_NO_SOURCE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resgen",
        description=(
            "Generate Android and iOS icon and splash screen images "
            "from source images"
        ),
    )
    p.add_argument(
        "platforms",
        nargs="*",
        metavar="PLATFORM",
        help=(
            "Platforms to generate for ("
            + ", ".join(pl.value for pl in PLATFORMS)
            + "); default: all"
        ),
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=["plain", "rich", "json", "silent"],
        default="plain",
        help=(
            "Select reporter backend: plain (default), rich, "
            "json (JSONL events), silent"
        ),
    )
    p.add_argument(
        "-t",
        "--type",
        dest="types",
        action="append",
        metavar="TYPE",
        help=(
            "Resource type to generate ("
            + ", ".join(t.value for t in RESOURCE_TYPES)
            + "); repeatable, default: all"
        ),
    )
    p.add_argument(
        "--resources",
        type=Path,
        help=f"Resources directory (default: {DEFAULT_RESOURCES_DIRECTORY})",
    )
    p.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Run configuration file (YAML or JSON)",
    )
    for rtype in RESOURCE_TYPES:
        p.add_argument(
            f"--{rtype.value}-source",
            dest=f"{rtype.value}_sources",
            action="append",
            type=Path,
            metavar="PATH",
            help=(
                f"Candidate {rtype.value} source image, tried in order "
                f"(default: <resources>/{rtype.value}.png)"
            ),
        )
    p.add_argument(
        "--png-quality",
        type=int,
        help="PNG quality 0-100; below 100 reduces the palette",
    )
    p.add_argument(
        "--png-compress-level",
        type=int,
        help="zlib compression level 0-9",
    )
    p.add_argument(
        "--png-optimize",
        action="store_true",
        help="Let the PNG encoder search for the smallest encoding",
    )
    p.add_argument(
        "--emit-manifest",
        dest="emit_manifest",
        type=Path,
        help="Optional path to write a JSON manifest of generated images",
    )
    p.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first resource type without a usable source",
    )
    p.add_argument(
        "--version", action="version", version=f"resgen {__version__}"
    )
    return p


def _select_reporter(name: str) -> None:
    if name == "json":
        set_reporter(JsonLinesReporter())
    elif name == "silent":
        set_reporter(SilentReporter())
    elif name == "rich" and sys.stderr.isatty():
        set_reporter(RichReporter())
    else:
        # plain, or rich without a TTY
        set_reporter(PlainReporter())


def _png_options(args: argparse.Namespace, base: PngOptions | None):
    overrides: Dict[str, object] = {}
    if args.png_quality is not None:
        overrides["quality"] = args.png_quality
    if args.png_compress_level is not None:
        overrides["compress_level"] = args.png_compress_level
    if args.png_optimize:
        overrides["optimize"] = True
    if not overrides:
        return base
    fields = {
        "quality": base.quality if base else None,
        "compress_level": base.compress_level if base else None,
        "optimize": base.optimize if base else False,
    }
    fields.update(overrides)
    return PngOptions(**fields)


def _build_options(args: argparse.Namespace) -> GenerateOptions:
    if args.config is not None:
        opts = GenerateOptions.from_config(load_config(args.config))
    else:
        opts = GenerateOptions()
    if args.resources is not None:
        opts.resources_dir = args.resources
    if args.platforms:
        opts.platforms = validate_platforms(args.platforms)
    if args.types:
        opts.types = validate_resource_types(args.types)
    sources = dict(opts.sources)
    for rtype in RESOURCE_TYPES:
        given: List[Path] | None = getattr(args, f"{rtype.value}_sources")
        if given:
            sources[ResourceType(rtype)] = given
    opts.sources = sources
    opts.png_options = _png_options(args, opts.png_options)
    if args.emit_manifest is not None:
        opts.manifest_path = args.emit_manifest
    opts.errstream = sys.stderr
    opts.fail_fast = args.fail_fast
    return opts


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    _select_reporter(args.reporter)
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    logger = get_logger()

    try:
        opts = _build_options(args)
    except (ResgenError, ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return EXIT_USAGE

    try:
        result = generate_resources(opts)
    except NoViableSource:
        # already reported by generate_resources
        return EXIT_NO_SOURCE
    finally:
        get_reporter().flush()
    return EXIT_OK if result.ok else EXIT_NO_SOURCE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
