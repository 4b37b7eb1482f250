"""Filesystem enumeration of pack directories and card definition files."""

from __future__ import annotations

from pathlib import Path

from hashdo.errors import ErrorCode, HashdoError


def _entries(directory: Path) -> list[Path]:
    try:
        return list(directory.iterdir())
    except OSError as exc:
        raise HashdoError(
            ErrorCode.CARDS_DIRECTORY_UNREADABLE,
            f"Cannot read directory {directory}: {exc.strerror or exc}",
            path=str(directory),
        ) from exc


def list_pack_dirs(root: str | Path, prefix: str) -> list[str]:
    """Names of the subdirectories of *root* that start with *prefix*, sorted."""
    return sorted(
        entry.name
        for entry in _entries(Path(root))
        if entry.name.startswith(prefix) and entry.is_dir()
    )


def list_card_keys(pack_dir: str | Path, extension: str) -> list[str]:
    """Base names of the card definition files directly inside *pack_dir*, sorted.

    *extension* may span several dots, e.g. ``.card.yaml``. Subdirectories are
    not searched.
    """
    return sorted(
        entry.name[: -len(extension)]
        for entry in _entries(Path(pack_dir))
        if len(entry.name) > len(extension)
        and entry.name.endswith(extension)
        and entry.is_file()
    )
