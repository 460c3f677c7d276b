from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
from uuid import UUID, uuid4


def slugify(label: str) -> str:
    return "_".join(label.lower().split())


@dataclass(frozen=True)
class SectionCategory:
    key: str
    label: str
    ordinal: int

    @classmethod
    def from_label(cls, label: str, ordinal: int) -> "SectionCategory":
        return cls(key=slugify(label), label=label, ordinal=ordinal)


@dataclass(frozen=True)
class ListEntry:
    """One row of the list; ``section`` names the category by its label."""
    section: str
    item: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class SectionCatalog:
    title: str
    categories: Tuple[SectionCategory, ...]
    items: Tuple[ListEntry, ...]
