from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .errors import SectionDataError
from .models import ListEntry, SectionCatalog, SectionCategory

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Title of View Here"

DEFAULT_SECTIONS: List[str] = [
    "Section 1 Name Here",
    "Section 2 Name Here",
    "Section 3 Name Here",
]

DEFAULT_ITEMS: List[Dict[str, str]] = [
    {"section": "Section 1 Name Here", "item": "First item in section"},
    {"section": "Section 1 Name Here", "item": "Second item in section"},
    {"section": "Section 1 Name Here", "item": "Third item in section"},
    {"section": "Section 2 Name Here", "item": "First item in section"},
    {"section": "Section 2 Name Here", "item": "Second item in section"},
    {"section": "Section 2 Name Here", "item": "Third item in section"},
    {"section": "Section 3 Name Here", "item": "First item in section"},
    {"section": "Section 3 Name Here", "item": "Second item in section"},
    {"section": "Section 3 Name Here", "item": "Third item in section"},
    {"section": "Section 1 Name Here", "item": "Notice it can be out of order"},
    {"section": "Section 3 Name Here", "item": "But it still works"},
]


class SectionRepository:
    """Read-only source of the section catalog.

    Understands two JSON shapes::

        {"title": "...", "sections": ["A", "B"],
         "items": [{"section": "A", "item": "x1"}, ...]}

    and the flat legacy mapping ``{"A": ["x1", ...], "B": [...]}``. A missing
    file yields the built-in demo catalog.
    """

    def __init__(self, json_path: Path | str) -> None:
        self.json_path = Path(json_path)

    def load(self) -> SectionCatalog:
        if not self.json_path.exists():
            logger.info("%s not found, using built-in sections", self.json_path)
            return self._build(DEFAULT_TITLE, DEFAULT_SECTIONS, DEFAULT_ITEMS)

        try:
            with self.json_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SectionDataError(self.json_path, f"not valid JSON ({exc})") from exc
        except UnicodeDecodeError as exc:
            raise SectionDataError(self.json_path, f"not valid UTF-8 ({exc})") from exc
        except OSError as exc:
            raise SectionDataError(self.json_path, f"cannot be read ({exc})") from exc

        if not isinstance(data, dict):
            raise SectionDataError(self.json_path, "top level must be an object")

        logger.info("Loading sections from %s", self.json_path)
        if "sections" not in data:
            return self._load_legacy(data)

        title = data.get("title", DEFAULT_TITLE)
        if not isinstance(title, str):
            raise SectionDataError(self.json_path, "'title' must be a string")
        items = data.get("items", []) or []
        if not isinstance(items, list):
            raise SectionDataError(self.json_path, "'items' must be a list")
        return self._build(title, data["sections"], items)

    def _load_legacy(self, data: Dict[str, Any]) -> SectionCatalog:
        items: List[Any] = []
        for label, entries in data.items():
            if not isinstance(entries, list):
                raise SectionDataError(self.json_path, f"section {label!r} must map to a list")
            items.extend({"section": label, "item": text} for text in entries)
        return self._build(DEFAULT_TITLE, list(data.keys()), items)

    def _build(self, title: str, sections: Any, raw_items: List[Any]) -> SectionCatalog:
        if not isinstance(sections, list):
            raise SectionDataError(self.json_path, "'sections' must be a list")

        cats: List[SectionCategory] = []
        seen_keys: Dict[str, str] = {}
        for ordinal, label in enumerate(sections):
            if not isinstance(label, str) or not label.strip():
                raise SectionDataError(self.json_path, f"section #{ordinal} has no label")
            cat = SectionCategory.from_label(label, ordinal)
            if cat.key in seen_keys:
                raise SectionDataError(
                    self.json_path,
                    f"section {label!r} clashes with {seen_keys[cat.key]!r}",
                )
            seen_keys[cat.key] = label
            cats.append(cat)

        entries: List[ListEntry] = []
        for pos, raw in enumerate(raw_items):
            if not isinstance(raw, dict):
                logger.warning("Skipping item #%d: expected an object, got %r", pos, raw)
                continue
            section = raw.get("section")
            text = raw.get("item")
            if not isinstance(section, str) or not isinstance(text, str):
                logger.warning("Skipping item #%d: 'section' and 'item' must be strings", pos)
                continue
            entries.append(ListEntry(section=section, item=text))

        return SectionCatalog(title=title, categories=tuple(cats), items=tuple(entries))
