from __future__ import annotations
from typing import Dict, List

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QLabel, QMainWindow, QMessageBox, QScrollArea, QVBoxLayout, QWidget
)

from section_list.core.commands import ToggleSectionCommand
from section_list.core.models import SectionCategory
from .section_widget import SectionWidget
from .viewmodels import SectionListViewModel


class MainWindow(QMainWindow):
    def __init__(self, vm: SectionListViewModel) -> None:
        super().__init__()
        self.setWindowTitle(vm.title or "Sections")
        self.resize(480, 640)
        self._vm = vm
        self.sections: Dict[str, SectionWidget] = {}
        self._setup_ui()
        self._wire_vm()
        self._vm.initialize()

    def _setup_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        self.lbl_title = QLabel(self._vm.title)
        font = self.lbl_title.font()
        font.setPointSize(max(font.pointSize(), 10) + 8)
        self.lbl_title.setFont(font)
        self.lbl_title.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        self._sections_host = QWidget()
        self._sections_layout = QVBoxLayout(self._sections_host)
        self._sections_layout.setContentsMargins(8, 0, 8, 0)
        self._sections_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._sections_host)

        layout = QVBoxLayout(central)
        layout.addWidget(self.lbl_title)
        layout.addWidget(scroll, 1)

        self.act_copy = QAction("Copy Outline", self)
        self.act_copy.triggered.connect(self._on_copy_outline)
        self.menuBar().addAction(self.act_copy)

        act_quit = QAction("Quit", self)
        act_quit.triggered.connect(self.close)
        self.menuBar().addAction(act_quit)

    def _wire_vm(self) -> None:
        self._vm.categories_changed.connect(self._on_categories_changed)
        self._vm.expansion_changed.connect(self._on_expansion_changed)
        self._vm.warning.connect(self._on_warning)

    @Slot(list)
    def _on_categories_changed(self, cats: List[SectionCategory]) -> None:
        for widget in self.sections.values():
            self._sections_layout.removeWidget(widget)
            widget.setParent(None)
            widget.deleteLater()
        self.sections.clear()

        # keep the trailing stretch last
        insert_at = self._sections_layout.count() - 1
        for offset, cat in enumerate(cats):
            widget = SectionWidget(
                cat,
                self._vm.items_for(cat),
                ToggleSectionCommand(self._vm, cat),
                self._sections_host,
            )
            widget.set_expanded(self._vm.is_expanded(cat))
            self._sections_layout.insertWidget(insert_at + offset, widget)
            self.sections[cat.key] = widget

    @Slot(object, bool)
    def _on_expansion_changed(self, cat: SectionCategory, expanded: bool) -> None:
        widget = self.sections.get(cat.key)
        if widget is not None:
            widget.set_expanded(expanded)

    @Slot()
    def _on_copy_outline(self) -> None:
        QGuiApplication.clipboard().setText(self._vm.outline_text())
        self.statusBar().showMessage("Outline copied to clipboard.", 2000)

    @Slot(str)
    def _on_warning(self, msg: str) -> None:
        QMessageBox.warning(self, "Warning", msg)
