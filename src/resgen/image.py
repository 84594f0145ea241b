"""Source resolution and image generation.

Decoding, resizing and encoding are delegated to Pillow. A source is decoded
once by :func:`resolve_source_image` and the resulting :class:`ImageHandle`
is reused for every output image of its resource type.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TextIO

from PIL import Image

from .catalog import REQUIREMENTS, ImageSpec, ResourceType
from .errors import (
    E_GENERATE_ENCODE,
    GenerationError,
    NoViableSource,
    SourceAttempt,
    ValidationFailure,
)
from .logging import get_logger
from .utils.io import read_file, write_file
from .validation import RESOURCE_VALIDATORS

__all__ = [
    "PngOptions",
    "ImageHandle",
    "ResolvedSource",
    "resolve_source_image",
    "transform_image",
    "encode_image",
    "generate_image",
]

# Errors that disqualify a single candidate without aborting resolution.
# Pillow reports some truncated/broken files as SyntaxError.
_CANDIDATE_ERRORS = (
    OSError,
    ValueError,
    SyntaxError,
    Image.DecompressionBombError,
    ValidationFailure,
)

_PIL_FORMATS = {"png": "PNG"}


@dataclass(frozen=True, slots=True)
class PngOptions:
    compress_level: Optional[int] = None
    optimize: bool = False
    # 0-100; below 100 the image is reduced to a proportionally smaller palette
    quality: Optional[int] = None

    def __post_init__(self) -> None:
        if self.compress_level is not None and not (
            0 <= self.compress_level <= 9
        ):
            raise ValueError("compress_level must be within 0..9")
        if self.quality is not None and not (0 <= self.quality <= 100):
            raise ValueError("quality must be within 0..100")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PngOptions":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown png option(s): {', '.join(unknown)}")
        return cls(**data)

    def save_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self.compress_level is not None:
            kwargs["compress_level"] = self.compress_level
        if self.optimize:
            kwargs["optimize"] = True
        return kwargs


class ImageHandle:
    """Decoded image with its metadata captured at decode time."""

    def __init__(self, image: Image.Image, fmt: Optional[str]) -> None:
        self._image = image
        self._format = fmt.lower() if fmt else None

    @classmethod
    def decode(cls, data: bytes) -> "ImageHandle":
        image = Image.open(io.BytesIO(data))
        image.load()
        fmt = image.format
        # Palette and bilevel images would otherwise be resized with NEAREST.
        if image.mode not in ("RGB", "RGBA", "L"):
            image = image.convert("RGBA")
        return cls(image, fmt)

    @property
    def format(self) -> Optional[str]:
        return self._format

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def resize(self, width: int, height: int) -> Image.Image:
        return self._image.resize(
            (width, height), Image.Resampling.LANCZOS
        )

    def __repr__(self) -> str:
        return (
            f"ImageHandle(format={self._format!r}, "
            f"size={self.width}x{self.height})"
        )


@dataclass(frozen=True, slots=True)
class ResolvedSource:
    path: str
    image: ImageHandle
    resource_type: ResourceType


def resolve_source_image(
    resource_type: ResourceType,
    sources: Iterable[str | Path],
    errstream: Optional[TextIO] = None,
) -> ResolvedSource:
    """Return the first candidate in ``sources`` that passes validation.

    Candidates are tried in order and the search stops at the first one that
    decodes and satisfies the rule of ``resource_type``; later candidates are
    never read. Every rejected candidate is recorded and, when ``errstream``
    is given, reported there as a ``WARN:`` line right away. If no candidate
    passes, :class:`NoViableSource` is raised with all recorded attempts.
    """
    logger = get_logger()
    rtype = ResourceType(resource_type)
    validator = RESOURCE_VALIDATORS[rtype]
    candidates: List[str] = [str(s) for s in sources]
    attempts: List[SourceAttempt] = []

    for source in candidates:
        try:
            handle = ImageHandle.decode(read_file(source))
            validator(source, handle)
        except _CANDIDATE_ERRORS as e:
            attempts.append(SourceAttempt(source, e))
            logger.debug("Rejected %s source %s: %s", rtype.value, source, e)
            if errstream is not None:
                errstream.write(
                    f"WARN: Error with source file {source}: {e}\n"
                )
            continue
        logger.debug("Using %s source %s (%r)", rtype.value, source, handle)
        return ResolvedSource(source, handle, rtype)

    raise NoViableSource.from_attempts(rtype.value, candidates, attempts)


def transform_image(spec: ImageSpec, image: ImageHandle) -> Image.Image:
    return image.resize(spec.width, spec.height)


def encode_image(
    image: Image.Image, fmt: str, options: Optional[PngOptions] = None
) -> bytes:
    kwargs: Dict[str, Any] = {}
    if options is not None:
        kwargs = options.save_kwargs()
        if options.quality is not None and options.quality < 100:
            colors = max(2, round(256 * options.quality / 100))
            if image.mode == "L":
                image = image.convert("RGB")
            method = (
                Image.Quantize.FASTOCTREE
                if image.mode == "RGBA"
                else Image.Quantize.MEDIANCUT
            )
            image = image.quantize(colors=colors, method=method)
    buf = io.BytesIO()
    image.save(buf, format=_PIL_FORMATS.get(fmt, fmt.upper()), **kwargs)
    return buf.getvalue()


def generate_image(
    spec: ImageSpec,
    source: ResolvedSource,
    dest: str | Path,
    options: Optional[PngOptions] = None,
) -> int:
    """Resize ``source`` to ``spec`` and write it to ``dest``.

    Encoding failures raise :class:`GenerationError`; filesystem errors
    from the write propagate unchanged. Returns the number of bytes written.
    """
    logger = get_logger()
    logger.debug("Generating %s (%dx%d)", dest, spec.width, spec.height)
    if options is not None:
        logger.debug("Generating using options %r", options)

    fmt = REQUIREMENTS[source.resource_type].required_format
    try:
        data = encode_image(transform_image(spec, source.image), fmt, options)
    except (OSError, ValueError) as e:
        raise GenerationError(
            code=E_GENERATE_ENCODE,
            message=f"Failed to encode {spec.name} from {source.path}: {e}",
            context={
                "source": source.path,
                "dest": str(dest),
                "width": spec.width,
                "height": spec.height,
            },
        ) from e
    return write_file(dest, data)
