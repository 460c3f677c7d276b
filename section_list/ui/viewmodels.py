from __future__ import annotations
import logging
from typing import List

from PySide6.QtCore import QObject, Signal, Slot

from section_list.core.errors import InvalidCategoryError
from section_list.core.models import ListEntry, SectionCategory
from section_list.core.outline import build_rows, render_text
from section_list.core.section_model import CategoryRef, SectionListModel

logger = logging.getLogger(__name__)


class SectionListViewModel(QObject):
    categories_changed = Signal(list)
    expansion_changed = Signal(object, bool)  # SectionCategory, expanded
    warning = Signal(str)

    def __init__(self, model: SectionListModel, title: str = "") -> None:
        super().__init__()
        self._model = model
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    def initialize(self) -> None:
        """Emit initial state signals."""
        self.categories_changed.emit(list(self._model.categories))

    def categories(self) -> List[SectionCategory]:
        return list(self._model.categories)

    def _reject(self, exc: InvalidCategoryError) -> None:
        logger.warning("%s", exc)
        self.warning.emit(str(exc))

    @Slot(object)
    def toggle_expansion(self, ref: CategoryRef) -> None:
        try:
            cat = self._model.category(ref)
            expanded = self._model.toggle_expansion(cat)
        except InvalidCategoryError as exc:
            self._reject(exc)
            return
        self.expansion_changed.emit(cat, expanded)

    def is_expanded(self, ref: CategoryRef) -> bool:
        try:
            return self._model.is_expanded(ref)
        except InvalidCategoryError as exc:
            self._reject(exc)
            return False

    def items_for(self, ref: CategoryRef) -> List[ListEntry]:
        try:
            return self._model.items_for(ref)
        except InvalidCategoryError as exc:
            self._reject(exc)
            return []

    def outline_text(self) -> str:
        return render_text(build_rows(self._model), self._title)
