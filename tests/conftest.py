"""Shared fixtures for section list tests."""

from __future__ import annotations

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from section_list.core.models import ListEntry, SectionCategory  # noqa: E402
from section_list.core.section_model import SectionListModel  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every widget test."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


@pytest.fixture
def categories() -> list[SectionCategory]:
    return [SectionCategory.from_label(label, i) for i, label in enumerate("ABC")]


@pytest.fixture
def entries() -> list[ListEntry]:
    """Interleaved items across A, B and C."""
    return [
        ListEntry("A", "x1"),
        ListEntry("A", "x2"),
        ListEntry("B", "y1"),
        ListEntry("C", "z1"),
        ListEntry("A", "x3"),
        ListEntry("C", "z2"),
    ]


@pytest.fixture
def model(categories, entries) -> SectionListModel:
    return SectionListModel(categories, entries)
