"""Shared helpers for click-based `astrodisplay` commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
import numpy as np

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_RUNTIME_ERROR = 2


class AstrodisplayCliError(click.ClickException):
    """Click exception with explicit exit-code control."""

    def __init__(self, message: str, *, exit_code: int = EXIT_INPUT_ERROR) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def dump_json_output(payload: dict[str, Any], out_path: Path | None) -> None:
    """Write JSON payload to file or stdout."""
    text = json.dumps(_to_jsonable(payload), sort_keys=True, indent=2)
    if out_path is None:
        click.echo(text)
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")


def resolve_optional_output_path(output_arg: str | None) -> Path | None:
    """Map '-', empty, or None to stdout; otherwise return filesystem path."""
    if output_arg is None:
        return None
    value = str(output_arg).strip()
    if value in {"", "-"}:
        return None
    return Path(value)


def parse_float_list(text: str, *, label: str) -> list[float]:
    """Parse comma- or whitespace-separated numbers with user-facing errors."""
    items = [item for item in text.replace(",", " ").split() if item]
    if not items:
        raise AstrodisplayCliError(f"{label} is empty")
    try:
        return [float(item) for item in items]
    except ValueError as exc:
        raise AstrodisplayCliError(f"Invalid number in {label}: {exc}") from exc
