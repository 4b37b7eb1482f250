"""Package manifest reading.

A directory is a pack candidate only if it holds a manifest. A missing
manifest is normal (the directory is skipped); a manifest that exists but
cannot be parsed halts startup.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from hashdo.errors import ErrorCode, HashdoError
from hashdo.models.manifest import PackageManifest


def read_manifest(pack_dir: str | Path, filename: str) -> PackageManifest | None:
    """Parse ``<pack_dir>/<filename>``, or return None if it does not exist."""
    path = Path(pack_dir) / filename
    if not path.exists():
        return None

    try:
        return PackageManifest.model_validate_json(path.read_bytes())
    except OSError as exc:
        raise HashdoError(
            ErrorCode.MANIFEST_INVALID,
            f"Cannot read manifest {path}: {exc.strerror or exc}",
            path=str(path),
        ) from exc
    except ValidationError as exc:
        raise HashdoError(
            ErrorCode.MANIFEST_INVALID,
            f"Malformed manifest {path}: {exc.error_count()} error(s)\n{exc}",
            path=str(path),
        ) from exc
