"""Source image validation rules, one per resource type.

A rule inspects the metadata of an already decoded image and raises
:class:`~resgen.errors.ValidationFailure` when a constraint is not met.
Larger than required sources always pass; they are downscaled later.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional, Protocol

from .catalog import REQUIREMENTS, ResourceType
from .errors import E_BAD_IMAGE_FORMAT, E_BAD_IMAGE_SIZE, ValidationFailure

__all__ = [
    "ImageMetadata",
    "ResourceValidator",
    "RESOURCE_VALIDATORS",
    "validate",
]


class ImageMetadata(Protocol):
    @property
    def format(self) -> Optional[str]: ...

    @property
    def width(self) -> Optional[int]: ...

    @property
    def height(self) -> Optional[int]: ...


ResourceValidator = Callable[[str, ImageMetadata], None]

_LABELS = {
    ResourceType.ICON: "Icon",
    ResourceType.SPLASH: "Splash Screen",
}


def _make_validator(resource_type: ResourceType) -> ResourceValidator:
    req = REQUIREMENTS[resource_type]
    label = _LABELS[resource_type]

    def _validate(source: str, metadata: ImageMetadata) -> None:
        fmt = metadata.format
        width = metadata.width
        height = metadata.height

        if fmt != req.required_format:
            raise ValidationFailure(
                code=E_BAD_IMAGE_FORMAT,
                message=(
                    f"{label} source must be {req.required_format} format "
                    f'(image format is "{fmt}").'
                ),
                context={
                    "source": source,
                    "type": resource_type.value,
                    "format": fmt,
                    "required_format": req.required_format,
                },
            )

        if (
            not width
            or not height
            or width < req.required_width
            or height < req.required_height
        ):
            raise ValidationFailure(
                code=E_BAD_IMAGE_SIZE,
                message=(
                    f"{label} source does not meet minimum size requirements: "
                    f"{req.required_width}x{req.required_height} "
                    f"(image is {width}x{height})."
                ),
                context={
                    "source": source,
                    "type": resource_type.value,
                    "width": width,
                    "height": height,
                    "required_width": req.required_width,
                    "required_height": req.required_height,
                },
            )

    _validate.__name__ = f"validate_{resource_type.value}"
    return _validate


RESOURCE_VALIDATORS: Mapping[ResourceType, ResourceValidator] = (
    MappingProxyType({t: _make_validator(t) for t in ResourceType})
)


def validate(
    resource_type: ResourceType, source: str, metadata: ImageMetadata
) -> None:
    RESOURCE_VALIDATORS[ResourceType(resource_type)](source, metadata)
