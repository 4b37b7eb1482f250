from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackSection(BaseModel):
    """The ``pack`` section of a package manifest."""

    model_config = ConfigDict(populate_by_name=True)

    friendly_name: str | None = Field(default=None, alias="friendlyName")
    hidden: bool = False


class PackageManifest(BaseModel):
    """The subset of a pack's ``package.json`` the registry reads.

    Any other manifest fields (version, dependencies, scripts...) are ignored.
    """

    name: str
    pack: PackSection | None = None  # absent → not a content pack

    def pack_key(self, prefix: str) -> str:
        return self.name.removeprefix(prefix)


class CardDefinition(BaseModel):
    """Declarative definition of a single card, one YAML document per card."""

    name: str
    description: str = ""
    icon: str | None = None
    inputs: Any = None  # opaque input schema, passed through untouched

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Any) -> Any:
        return "" if v is None else v
