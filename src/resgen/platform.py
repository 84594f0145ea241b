"""Per-platform generation of every requested resource type."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, TextIO

from .catalog import (
    RESOURCES,
    ImageSpec,
    Platform,
    ResourceType,
    platform_type_directory,
)
from .image import PngOptions, generate_image, resolve_source_image
from .logging import get_logger
from .reporting import task
from .utils.io import ensure_dir

__all__ = ["ResourceRequest", "GeneratedImage", "run"]


@dataclass(frozen=True)
class ResourceRequest:
    sources: Sequence[str | Path] = field(default_factory=tuple)
    png_options: Optional[PngOptions] = None


@dataclass(frozen=True, slots=True)
class GeneratedImage:
    dest: Path
    spec: ImageSpec
    src: str
    platform: Platform
    resource_type: ResourceType


def run(
    platform: Platform,
    resources_dir: str | Path,
    requests: Mapping[ResourceType, ResourceRequest],
    png_options: Optional[PngOptions] = None,
    errstream: Optional[TextIO] = None,
) -> List[GeneratedImage]:
    """Generate all catalog images of ``platform`` for the requested types.

    Types are processed in the order of ``requests``. Each type resolves its
    source exactly once and then writes every catalog image of that type to
    ``<resources_dir>/<platform>/<type>/``. Resolution and generation errors
    propagate to the caller. The result lists the generated images by type
    in request order and, within a type, in catalog order.
    """
    logger = get_logger()
    platform = Platform(platform)
    generated: List[GeneratedImage] = []

    for rtype, request in requests.items():
        rtype = ResourceType(rtype)
        images = RESOURCES[platform][rtype].images
        out_dir = ensure_dir(
            platform_type_directory(resources_dir, platform, rtype)
        )
        source = resolve_source_image(rtype, request.sources, errstream)
        options = request.png_options or png_options
        task_id = f"{platform.value}.{rtype.value}"
        written = 0
        with task(
            task_id,
            f"{platform.value} {rtype.value}",
            total=len(images),
            source=source.path,
        ) as rep:
            for index, spec in enumerate(images, start=1):
                dest = out_dir / spec.name
                written += generate_image(spec, source, dest, options)
                generated.append(
                    GeneratedImage(dest, spec, source.path, platform, rtype)
                )
                rep.advance(
                    task_id,
                    current_item=spec.name,
                    images=index,
                    bytes=written,
                )
        logger.debug(
            "Generated %d %s %s image(s) from %s (%d bytes)",
            len(images),
            platform.value,
            rtype.value,
            source.path,
            written,
        )

    return generated
