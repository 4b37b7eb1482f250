from __future__ import annotations

from hashdo.models.manifest import CardDefinition, PackageManifest, PackSection
from hashdo.models.registry import Card, CardSummary, Pack, RegistryStats

__all__ = [
    # manifest
    "PackageManifest",
    "PackSection",
    "CardDefinition",
    # registry
    "Pack",
    "Card",
    "CardSummary",
    "RegistryStats",
]
