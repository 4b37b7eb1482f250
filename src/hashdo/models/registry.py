from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)


class CardSummary(BaseModel):
    """Listing view of a card returned by ``CardRegistry.cards``."""

    model_config = ConfigDict(frozen=True)

    pack: str
    card: str
    name: str
    description: str
    icon: str


class Card(BaseModel):
    """Full card record returned by ``CardRegistry.card``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pack: str  # key of the owning pack
    card: str  # key within the pack, the definition file's base name
    name: str
    description: str = ""
    icon: str
    base_url: str = Field(alias="baseUrl")
    inputs: Any = None

    def summary(self) -> CardSummary:
        return CardSummary(
            pack=self.pack,
            card=self.card,
            name=self.name,
            description=self.description,
            icon=self.icon,
        )


# Stored behind a read-only proxy; serialised back to a plain dict
ReadOnlyCards = Annotated[
    Mapping[str, Card],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict, return_type=dict[str, Card]),
]


class Pack(BaseModel):
    """A visible pack and its cards, keyed by card key. Read-only once built."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    cards: ReadOnlyCards

    @model_validator(mode="after")
    def check_card_ownership(self) -> Pack:
        for card_key, card in self.cards.items():
            if card.pack != self.key or card.card != card_key:
                raise ValueError(
                    f"Card {card.pack}/{card.card} stored as {self.key}/{card_key}"
                )
        return self


class RegistryStats(BaseModel):
    """Counters collected while building the registry."""

    packs: int = 0  # valid packs found, hidden ones included
    cards: int = 0
    hidden: int = 0
    skipped: int = 0  # manifest present but no pack section
