"""Version text shown in the About window."""

from __future__ import annotations

import os
from pathlib import Path

TITLE = "About - Notepanda"


def version_string(version: str, suffix: str, build_version: str) -> str:
    """Join version, suffix and build number as "<version><suffix> BV<build>"."""
    return f"{version}{suffix} BV{build_version}".replace("\n", "")


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return ""


def read_version_string(directory: str | os.PathLike) -> str:
    """Build the version text from VERSION, VERSIONSUFFIX and BUILDVERSION files.

    A missing file counts as empty.
    """
    base = Path(directory)
    return version_string(
        _read(base / "VERSION"),
        _read(base / "VERSIONSUFFIX"),
        _read(base / "BUILDVERSION"),
    )