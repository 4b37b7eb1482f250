"""hashdo card pack registry."""

from __future__ import annotations

from hashdo.registry import CardRegistry, load_registry

__all__ = ["CardRegistry", "load_registry"]
