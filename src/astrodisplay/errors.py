"""Local error taxonomy for astrodisplay.

Invalid arguments raise plain ``ValueError`` with a message naming the valid
choices. The small enum/envelope below lets downstream applications (and the
CLI) report those failures in a structured form.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_NAME = "UNKNOWN_NAME"
    MISSING_DEPENDENCY = "MISSING_DEPENDENCY"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


def error_from_exception(exc: BaseException, **context: Any) -> ErrorEnvelope:
    """Classify an exception raised by an astrodisplay operation."""
    if isinstance(exc, MissingOptionalDependencyError):
        return make_error(ErrorType.MISSING_DEPENDENCY, str(exc), extra=exc.extra, **context)
    if isinstance(exc, UnknownNameError):
        return make_error(
            ErrorType.UNKNOWN_NAME, str(exc), valid=list(exc.valid), **context
        )
    if isinstance(exc, ValueError):
        return make_error(ErrorType.INVALID_INPUT, str(exc), **context)
    return make_error(ErrorType.INTERNAL_ERROR, f"{type(exc).__name__}: {exc}", **context)


class UnknownNameError(ValueError):
    """Raised when a table, palette, color or element name is not recognized.

    Attributes:
        kind: What was being looked up (e.g. "palette", "rgb table").
        name: The name that was requested.
        valid: The accepted names.
    """

    def __init__(self, kind: str, name: object, valid: tuple[str, ...] | list[str]) -> None:
        self.kind = kind
        self.name = name
        self.valid = tuple(valid)
        super().__init__(f"Unknown {kind} {name!r}. Valid: {', '.join(self.valid)}")


class MissingOptionalDependencyError(ImportError):
    """Raised when an optional dependency is required but not installed.

    Attributes:
        extra: The pip extra that provides the dependency (e.g., "plotting").
        install_hint: Installation command hint.
    """

    def __init__(self, extra: str, install_hint: str | None = None) -> None:
        self.extra = extra
        self.install_hint = install_hint or f"pip install 'astrodisplay[{extra}]'"
        super().__init__(
            f"This feature requires the '{extra}' extra. Install with: {self.install_hint}"
        )


def require_matplotlib() -> None:
    """Raise MissingOptionalDependencyError if matplotlib cannot be imported."""
    import importlib.util

    if importlib.util.find_spec("matplotlib") is None:
        raise MissingOptionalDependencyError("plotting")
