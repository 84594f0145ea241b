"""Error definitions for resgen."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

E_BAD_IMAGE_FORMAT = "BAD_IMAGE_FORMAT"
E_BAD_IMAGE_SIZE = "BAD_IMAGE_SIZE"
E_NO_VIABLE_SOURCE = "NO_VIABLE_SOURCE"
E_GENERATE_ENCODE = "GENERATE_ENCODE"
E_UNSUPPORTED_VALUE = "E_UNSUPPORTED_VALUE"


@dataclass(eq=False)
class ResgenError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class ValidationFailure(ResgenError):
    """A source image failed the rule of its resource type.

    ``context`` carries ``source`` and ``type`` plus the observed and
    required values of the failed constraint.
    """

    @property
    def source(self) -> str:
        return str((self.context or {}).get("source", ""))

    @property
    def resource_type(self) -> str:
        return str((self.context or {}).get("type", ""))


@dataclass
class SourceAttempt:
    source: str
    error: Exception

    @property
    def is_validation_failure(self) -> bool:
        return isinstance(self.error, ValidationFailure)


@dataclass(eq=False)
class NoViableSource(ResgenError):
    attempts: List[SourceAttempt] = field(default_factory=list)

    @classmethod
    def from_attempts(
        cls,
        resource_type: str,
        sources: Iterable[str | Path],
        attempts: List[SourceAttempt],
    ) -> "NoViableSource":
        looked_at = ", ".join(str(s) for s in sources) or "<none>"
        return cls(
            code=E_NO_VIABLE_SOURCE,
            message=(
                "Could not find suitable source image. "
                f"Looked at: {looked_at}"
            ),
            context={"type": resource_type},
            attempts=list(attempts),
        )

    @property
    def failures(self) -> List[ValidationFailure]:
        return [
            a.error  # type: ignore[misc]
            for a in self.attempts
            if isinstance(a.error, ValidationFailure)
        ]

    @property
    def load_errors(self) -> List[Tuple[str, Exception]]:
        return [
            (a.source, a.error)
            for a in self.attempts
            if not a.is_validation_failure
        ]

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["failures"] = [f.to_dict() for f in self.failures]
        d["load_errors"] = [
            {"source": s, "error": str(e)} for s, e in self.load_errors
        ]
        return d


class GenerationError(ResgenError):
    pass


class UnsupportedValueError(ResgenError, ValueError):
    @classmethod
    def for_value(
        cls, kind: str, value: object, supported: Iterable[Any]
    ) -> "UnsupportedValueError":
        names = [getattr(s, "value", s) for s in supported]
        return cls(
            code=E_UNSUPPORTED_VALUE,
            message=f"Unsupported {kind}: {value}",
            context={"kind": kind, "value": value, "supported": names},
        )


__all__ = [
    "ResgenError",
    "ValidationFailure",
    "SourceAttempt",
    "NoViableSource",
    "GenerationError",
    "UnsupportedValueError",
    "E_BAD_IMAGE_FORMAT",
    "E_BAD_IMAGE_SIZE",
    "E_NO_VIABLE_SOURCE",
    "E_GENERATE_ENCODE",
    "E_UNSUPPORTED_VALUE",
]
