"""Header button plus item body for a single section."""

from __future__ import annotations
from typing import List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QSizePolicy, QToolButton, QVBoxLayout, QWidget

from section_list.core.commands import Command
from section_list.core.models import ListEntry, SectionCategory
from section_list.core.outline import DIAMOND


class SectionWidget(QWidget):
    def __init__(
        self,
        category: SectionCategory,
        entries: List[ListEntry],
        on_toggle: Command,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.category = category
        self._on_toggle = on_toggle

        self.header = QToolButton(self)
        self.header.setObjectName(f"section-header-{category.key}")
        self.header.setText(category.label)
        self.header.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.header.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.header.setFixedHeight(30)
        self.header.clicked.connect(lambda: self._on_toggle())

        self.body = QFrame(self)
        self.body.setObjectName(f"section-body-{category.key}")
        self.body.setFrameShape(QFrame.Shape.NoFrame)
        body_layout = QVBoxLayout(self.body)
        body_layout.setContentsMargins(12, 0, 0, 0)
        self.item_labels: List[QLabel] = []
        for entry in entries:
            lbl = QLabel(f"{DIAMOND}  {entry.item}", self.body)
            body_layout.addWidget(lbl)
            self.item_labels.append(lbl)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 5, 0, 5)
        layout.setSpacing(4)
        layout.addWidget(self.header)
        layout.addWidget(self.body)

        self.set_expanded(False)

    def set_expanded(self, expanded: bool) -> None:
        self.header.setArrowType(Qt.ArrowType.UpArrow if expanded else Qt.ArrowType.DownArrow)
        self.body.setVisible(expanded)

    def is_expanded(self) -> bool:
        return not self.body.isHidden()
