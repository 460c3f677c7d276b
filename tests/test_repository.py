"""Tests for SectionRepository and the catalog data types."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import pytest

from section_list.core.errors import SectionDataError
from section_list.core.models import ListEntry, SectionCategory
from section_list.core.repository import DEFAULT_TITLE, SectionRepository


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestModels:
    def test_entry_ids_are_unique(self) -> None:
        a = ListEntry("A", "same")
        b = ListEntry("A", "same")

        assert a.id != b.id
        assert a != b

    def test_entry_is_immutable(self) -> None:
        entry = ListEntry("A", "x1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.item = "changed"  # type: ignore[misc]

    def test_category_key_from_label(self) -> None:
        cat = SectionCategory.from_label("Section 1  Name Here", 4)

        assert cat.key == "section_1_name_here"
        assert cat.ordinal == 4


class TestSectionRepository:
    """Tests for SectionRepository.load()."""

    def test_missing_file_uses_builtin_sections(self, tmp_path: Path) -> None:
        catalog = SectionRepository(tmp_path / "nope.json").load()

        assert catalog.title == DEFAULT_TITLE
        assert [c.label for c in catalog.categories] == [
            "Section 1 Name Here",
            "Section 2 Name Here",
            "Section 3 Name Here",
        ]
        assert [c.ordinal for c in catalog.categories] == [0, 1, 2]
        assert len(catalog.items) == 11
        assert catalog.items[-2].item == "Notice it can be out of order"
        assert not (tmp_path / "nope.json").exists()

    def test_canonical_shape(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "sections.json",
            {
                "title": "Groceries",
                "sections": ["Fruit", "Dairy"],
                "items": [
                    {"section": "Dairy", "item": "Milk"},
                    {"section": "Fruit", "item": "Apple"},
                    {"section": "Bakery", "item": "Bread"},
                ],
            },
        )

        catalog = SectionRepository(path).load()

        assert catalog.title == "Groceries"
        assert [c.key for c in catalog.categories] == ["fruit", "dairy"]
        assert [(e.section, e.item) for e in catalog.items] == [
            ("Dairy", "Milk"),
            ("Fruit", "Apple"),
            ("Bakery", "Bread"),
        ]

    def test_title_and_items_optional(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "s.json", {"sections": ["Only"]})

        catalog = SectionRepository(path).load()

        assert catalog.title == DEFAULT_TITLE
        assert catalog.items == ()

    def test_legacy_flat_shape(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "s.json", {"Fruit": ["Apple", "Pear"], "Dairy": ["Milk"]})

        catalog = SectionRepository(path).load()

        assert [c.label for c in catalog.categories] == ["Fruit", "Dairy"]
        assert [e.item for e in catalog.items] == ["Apple", "Pear", "Milk"]

    def test_malformed_items_are_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = _write(
            tmp_path / "s.json",
            {
                "sections": ["A"],
                "items": ["bare", {"section": "A"}, {"section": "A", "item": 3},
                          {"section": "A", "item": "ok"}],
            },
        )

        with caplog.at_level(logging.WARNING):
            catalog = SectionRepository(path).load()

        assert [e.item for e in catalog.items] == ["ok"]
        assert caplog.text.count("Skipping item") == 3

    @pytest.mark.parametrize(
        "data",
        [
            [1, 2, 3],
            {"sections": "A"},
            {"sections": ["A", ""]},
            {"sections": ["A", 5]},
            {"sections": ["A", "A"]},
            {"sections": ["New York", "new  york"]},
            {"sections": ["A"], "items": {"section": "A"}},
            {"sections": ["A"], "title": 7},
            {"Fruit": "Apple"},
        ],
    )
    def test_invalid_data_raises(self, tmp_path: Path, data: object) -> None:
        path = _write(tmp_path / "bad.json", data)

        with pytest.raises(SectionDataError):
            SectionRepository(path).load()

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SectionDataError) as excinfo:
            SectionRepository(path).load()

        assert excinfo.value.source == path
        assert isinstance(excinfo.value, ValueError)

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"sections": ["\xff"]}')

        with pytest.raises(SectionDataError, match="UTF-8"):
            SectionRepository(path).load()

    def test_directory_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SectionDataError, match="cannot be read") as excinfo:
            SectionRepository(tmp_path).load()

        assert isinstance(excinfo.value.__cause__, OSError)
