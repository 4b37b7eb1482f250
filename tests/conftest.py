"""Shared fixtures: pack trees written under tmp_path."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest
import yaml

from hashdo.registry import CardRegistry, load_registry

if TYPE_CHECKING:
    from pathlib import Path


def write_pack(
    root: Path,
    dir_name: str,
    *,
    manifest: dict[str, Any] | str | None,
    cards: dict[str, dict[str, Any] | str] | None = None,
) -> Path:
    """Create ``root/dir_name`` with a package.json and one YAML file per card.

    ``manifest=None`` writes no manifest; a str manifest is written verbatim,
    as is a str card body.
    """
    pack_dir = root / dir_name
    pack_dir.mkdir(parents=True)
    if manifest is not None:
        text = manifest if isinstance(manifest, str) else json.dumps(manifest)
        (pack_dir / "package.json").write_text(text, encoding="utf-8")
    for card_key, body in (cards or {}).items():
        text = body if isinstance(body, str) else yaml.safe_dump(body)
        (pack_dir / f"{card_key}.yaml").write_text(text, encoding="utf-8")
    return pack_dir


@pytest.fixture()
def cards_dir(tmp_path: Path) -> Path:
    """A weather pack with one card and a hidden secret pack."""
    root = tmp_path / "packs"
    root.mkdir()
    write_pack(
        root,
        "hashdo-weather",
        manifest={"name": "hashdo-weather", "pack": {"friendlyName": "Weather"}},
        cards={"today": {"name": "Today's Weather"}},
    )
    write_pack(
        root,
        "hashdo-secret",
        manifest={"name": "hashdo-secret", "pack": {"friendlyName": "Secret", "hidden": True}},
        cards={"plans": {"name": "Secret Plans"}},
    )
    return root


@pytest.fixture()
def catalog_dir(tmp_path: Path) -> Path:
    """Several visible packs, a hidden one, and directories that are not packs."""
    root = tmp_path / "catalog"
    root.mkdir()
    write_pack(
        root,
        "hashdo-weather",
        manifest={"name": "hashdo-weather", "pack": {"friendlyName": "Weather"}},
        cards={
            "today": {"name": "Today's Weather", "description": "Current conditions"},
            "forecast": {
                "name": "Weekly Forecast",
                "icon": "https://cdn.example.com/forecast.png",
                "inputs": {"city": {"example": "Cape Town", "required": True}},
            },
        },
    )
    write_pack(
        root,
        "hashdo-analytics",
        manifest={
            "name": "hashdo-analytics",
            "version": "1.0.0",
            "pack": {"friendlyName": "Analytics"},
        },
        cards={
            "visitors": {"name": "Site Visitors"},
            "bounce": {"name": "Bounce Rate", "description": None},
        },
    )
    write_pack(
        root,
        "hashdo-secret",
        manifest={"name": "hashdo-secret", "pack": {"friendlyName": "Secret", "hidden": True}},
        cards={"plans": {"name": "Secret Plans"}},
    )
    # manifest but no pack section: a plain package
    write_pack(root, "hashdo-utils", manifest={"name": "hashdo-utils"})
    # no manifest at all
    write_pack(root, "hashdo-scratch", manifest=None, cards={"draft": {"name": "Draft"}})
    # wrong prefix
    write_pack(
        root,
        "other-pack",
        manifest={"name": "other-pack", "pack": {"friendlyName": "Other"}},
        cards={"thing": {"name": "Other Thing"}},
    )
    return root


@pytest.fixture()
def registry(catalog_dir: Path) -> CardRegistry:
    return load_registry("https://example.com/", catalog_dir)


@pytest.fixture()
def pack_writer():
    """Expose ``write_pack`` to tests that build their own trees."""
    return write_pack
