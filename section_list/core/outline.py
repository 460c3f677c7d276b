from __future__ import annotations
from dataclasses import dataclass
from typing import List, Union

from .models import ListEntry, SectionCategory
from .section_model import SectionListModel

UP = "▲"
DOWN = "▼"
DIAMOND = "◇"


@dataclass(frozen=True)
class HeaderRow:
    category: SectionCategory
    expanded: bool

    @property
    def indicator(self) -> str:
        return UP if self.expanded else DOWN


@dataclass(frozen=True)
class ItemRow:
    entry: ListEntry


Row = Union[HeaderRow, ItemRow]


def build_rows(model: SectionListModel) -> List[Row]:
    """Rows to display for the model's current state, top to bottom."""
    rows: List[Row] = []
    for cat in model.categories:
        expanded = model.is_expanded(cat)
        rows.append(HeaderRow(cat, expanded))
        if expanded:
            rows.extend(ItemRow(e) for e in model.items_for(cat))
    return rows


def render_text(rows: List[Row], title: str | None = None) -> str:
    out: List[str] = []
    if title:
        out.append(title)
    for r in rows:
        if isinstance(r, HeaderRow):
            out.append(f"{r.category.label}  {r.indicator}")
        else:
            out.append(f"    {DIAMOND} {r.entry.item}")
    return "\n".join(out)
