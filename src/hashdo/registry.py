"""Card registry: pack discovery at startup, the in-memory index, and queries.

The registry is built once by ``CardRegistry.init`` and treated as read-only
afterwards. The only state touched by queries is the memoised unfiltered card
count, which is guarded by a lock.
"""

from __future__ import annotations

import threading
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from hashdo.fuzzy import fuzzy_match
from hashdo.loader import load_card_definition
from hashdo.manifest import read_manifest
from hashdo.models.registry import Card, CardSummary, Pack, RegistryStats
from hashdo.scanner import list_card_keys, list_pack_dirs

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from hashdo.config import PacksSettings

log = structlog.get_logger()


class CardRegistry:
    """Index of every visible pack and card under a cards directory."""

    def __init__(
        self,
        *,
        prefix: str = "hashdo-",
        manifest_filename: str = "package.json",
        card_extension: str = ".yaml",
    ) -> None:
        self.prefix = prefix
        self.manifest_filename = manifest_filename
        self.card_extension = card_extension

        self._packs: dict[str, Pack] = {}
        self._total_count: int | None = None
        self._count_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: PacksSettings) -> CardRegistry:
        return cls(
            prefix=settings.prefix,
            manifest_filename=settings.manifest_filename,
            card_extension=settings.card_extension,
        )

    @property
    def packs(self) -> Mapping[str, Pack]:
        return MappingProxyType(self._packs)

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def init(self, base_url: str, cards_directory: str | Path) -> RegistryStats:
        """Scan *cards_directory* and replace the index with what is found there.

        Must complete before any query is served. Calling it again rescans
        from scratch and resets the cached count. Any unreadable directory,
        malformed manifest or broken card definition raises ``HashdoError``
        and leaves the previous index in place.
        """
        root = Path(cards_directory)
        log.info("packs_loading", cards_directory=str(root))

        stats = RegistryStats()
        packs: dict[str, Pack] = {}

        for dir_name in list_pack_dirs(root, self.prefix):
            pack_dir = root / dir_name
            manifest = read_manifest(pack_dir, self.manifest_filename)
            if manifest is None:
                log.debug("pack_skipped", directory=dir_name, reason="no_manifest")
                continue
            if manifest.pack is None:
                stats.skipped += 1
                log.debug("pack_skipped", directory=dir_name, reason="no_pack_section")
                continue

            stats.packs += 1
            if manifest.pack.hidden:
                stats.hidden += 1
                log.debug("pack_hidden", directory=dir_name, pack=manifest.name)
                continue

            pack_key = manifest.pack_key(self.prefix)
            pack = self._build_pack(
                pack_key, manifest.pack.friendly_name or pack_key, pack_dir, base_url
            )
            if pack.key in packs:
                log.warning("duplicate_pack_key", pack=pack.key, directory=dir_name)
            packs[pack.key] = pack
            stats.cards += len(pack.cards)

        with self._count_lock:
            self._packs = packs
            self._total_count = None

        log.info(
            "packs_loaded",
            packs=stats.packs,
            cards=stats.cards,
            hidden=stats.hidden,
            skipped=stats.skipped,
        )
        return stats

    def _build_pack(self, pack_key: str, name: str, pack_dir: Path, base_url: str) -> Pack:
        base = base_url.rstrip("/")

        cards: dict[str, Card] = {}
        for card_key in list_card_keys(pack_dir, self.card_extension):
            definition = load_card_definition(pack_dir / f"{card_key}{self.card_extension}")
            card_base_url = f"{base}/{pack_key}/{card_key}"
            cards[card_key] = Card(
                pack=pack_key,
                card=card_key,
                name=definition.name,
                description=definition.description,
                icon=definition.icon or f"{card_base_url}/icon.png",
                base_url=card_base_url,
                inputs=definition.inputs,
            )

        return Pack(key=pack_key, name=name, cards=cards)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _iter_cards(self) -> Iterator[Card]:
        for pack in self._packs.values():
            yield from pack.cards.values()

    def count(self, filter: str | None = None) -> int:
        """Number of cards whose name fuzzy-matches *filter*.

        The unfiltered total is computed once and memoised; filtered counts
        are recomputed on every call.
        """
        if filter:
            return sum(1 for card in self._iter_cards() if fuzzy_match(filter, card.name))

        with self._count_lock:
            if self._total_count is None:
                self._total_count = sum(len(pack.cards) for pack in self._packs.values())
            return self._total_count

    def cards(self, filter: str | None = None) -> list[CardSummary]:
        """Summaries of the cards whose name fuzzy-matches *filter*, by pack then card."""
        matches = [
            card.summary() for card in self._iter_cards() if fuzzy_match(filter, card.name)
        ]
        return sorted(matches, key=lambda c: (c.pack, c.card))

    def card(self, pack: str, card: str) -> Card | None:
        """Exact lookup by pack key and card key; None if either is unknown.

        Returns a deep copy so callers cannot reach the indexed ``inputs``.
        """
        found = self._packs.get(pack)
        if found is None or card not in found.cards:
            return None
        return found.cards[card].model_copy(deep=True)


def load_registry(
    base_url: str,
    cards_directory: str | Path,
    *,
    prefix: str = "hashdo-",
    manifest_filename: str = "package.json",
    card_extension: str = ".yaml",
) -> CardRegistry:
    """Build and return a fully initialised registry."""
    registry = CardRegistry(
        prefix=prefix,
        manifest_filename=manifest_filename,
        card_extension=card_extension,
    )
    registry.init(base_url, cards_directory)
    return registry
