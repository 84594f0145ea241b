"""High-level API for resgen.

:func:`generate_resources` drives :func:`resgen.platform.run` for every
requested platform and resource type, isolating each (platform, type) pair
so that a missing source for one type does not stop the others.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, TextIO

from .catalog import (
    DEFAULT_RESOURCES_DIRECTORY,
    PLATFORMS,
    RESOURCE_TYPES,
    Platform,
    ResourceType,
    default_sources,
)
from .config import RunConfig
from .errors import NoViableSource
from .image import PngOptions
from .logging import get_logger
from .manifest import build_manifest
from .platform import GeneratedImage, ResourceRequest, run
from .reporting import get_reporter

__all__ = [
    "GenerateOptions",
    "ResourceFailure",
    "GenerateResult",
    "generate_resources",
]


@dataclass(slots=True)
class GenerateOptions:
    resources_dir: Path = Path(DEFAULT_RESOURCES_DIRECTORY)
    platforms: Sequence[Platform] = PLATFORMS
    types: Sequence[ResourceType] = RESOURCE_TYPES
    # Candidate sources per type; types without an entry use default_sources.
    # An empty list is kept as given and fails resolution.
    sources: Mapping[ResourceType, Sequence[str | Path]] = field(
        default_factory=dict
    )
    png_options: Optional[PngOptions] = None
    manifest_path: Optional[Path] = None
    # Receives one WARN line per rejected source candidate
    errstream: Optional[TextIO] = None
    # Re-raise the first NoViableSource instead of continuing
    fail_fast: bool = False

    @classmethod
    def from_config(cls, cfg: RunConfig, **overrides) -> "GenerateOptions":
        opts = cls(
            resources_dir=cfg.resources_dir,
            platforms=list(cfg.platforms),
            types=list(cfg.types),
            sources=dict(cfg.sources),
            png_options=cfg.png,
            manifest_path=cfg.manifest,
        )
        for key, value in overrides.items():
            setattr(opts, key, value)
        return opts

    def sources_for(self, resource_type: ResourceType) -> List[str | Path]:
        explicit = self.sources.get(resource_type)
        if explicit is not None:
            return list(explicit)
        return list(default_sources(self.resources_dir, resource_type))


@dataclass(slots=True)
class ResourceFailure:
    platform: Platform
    resource_type: ResourceType
    error: NoViableSource


@dataclass(slots=True)
class GenerateResult:
    images: List[GeneratedImage] = field(default_factory=list)
    errors: List[ResourceFailure] = field(default_factory=list)
    manifest_path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def by_platform(self) -> Dict[Platform, List[GeneratedImage]]:
        grouped: Dict[Platform, List[GeneratedImage]] = {}
        for image in self.images:
            grouped.setdefault(image.platform, []).append(image)
        return grouped


def _report_failure(failure: ResourceFailure) -> None:
    logger = get_logger()
    err = failure.error
    logger.error(
        "%s %s: %s",
        failure.platform.value,
        failure.resource_type.value,
        err.message,
    )
    for attempt in err.attempts:
        logger.debug("  %s: %s", attempt.source, attempt.error)


def generate_resources(options: GenerateOptions) -> GenerateResult:
    rep = get_reporter()
    result = GenerateResult()

    for platform in options.platforms:
        platform = Platform(platform)
        rep.section(f"Generating {platform.value} resources")
        produced = 0
        failed = 0
        for rtype in options.types:
            rtype = ResourceType(rtype)
            request = ResourceRequest(sources=options.sources_for(rtype))
            try:
                images = run(
                    platform,
                    options.resources_dir,
                    {rtype: request},
                    png_options=options.png_options,
                    errstream=options.errstream,
                )
            except NoViableSource as e:
                failure = ResourceFailure(platform, rtype, e)
                _report_failure(failure)
                if options.fail_fast:
                    raise
                result.errors.append(failure)
                failed += 1
                continue
            result.images.extend(images)
            produced += len(images)
        rep.status(
            f"Platform summary: platform={platform.value} "
            f"images={produced} failed_types={failed}"
        )

    if options.manifest_path is not None:
        result.manifest_path = build_manifest(
            result.images, options.manifest_path
        )
        rep.status(
            f"Manifest summary: file={result.manifest_path} "
            f"images={len(result.images)}"
        )

    rep.status(
        f"Run summary: platforms={len(options.platforms)} "
        f"images={len(result.images)} errors={len(result.errors)}"
    )
    return result
