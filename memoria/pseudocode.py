"""Locating and reading pseudocode instruction files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path


class PseudocodeError(OSError):
    """Raised when a pseudocode file cannot be read."""


def resolve_script_path(instructions_path: str, argument_path: str, relative: bool) -> str:
    """Build the path of a pseudocode file.

    Absolute requests use the given path as is; relative ones are joined to
    the instructions directory when one is configured.
    """
    if not relative or not instructions_path:
        return argument_path
    return f"{instructions_path}/{argument_path}"


def parse_pseudocode(lines: Iterable[str]) -> list[str]:
    """Return the instructions in the lines, stripped, skipping blank lines."""
    return [stripped for stripped in (line.strip() for line in lines) if stripped]


def load_pseudocode_file(path: str | os.PathLike[str]) -> list[str]:
    """Read a pseudocode file and return its list of instructions."""
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            return parse_pseudocode(handle)
    except OSError as exc:
        raise PseudocodeError(f"{path}: cannot open the pseudocode file") from exc