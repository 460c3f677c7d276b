from __future__ import annotations
import logging
import sys
from PySide6.QtWidgets import QApplication
from section_list.config.settings import Settings
from section_list.core.errors import SectionDataError
from section_list.core.repository import SectionRepository
from section_list.core.section_model import SectionListModel
from section_list.ui.viewmodels import SectionListViewModel
from section_list.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        catalog = SectionRepository(settings.sections_json_path).load()
    except SectionDataError as exc:
        logger.error("%s", exc)
        return 1

    app = QApplication(sys.argv)
    model = SectionListModel(
        catalog.categories,
        catalog.items,
        fallback_to_first=not settings.strict_categories,
    )
    vm = SectionListViewModel(model, title=catalog.title)
    win = MainWindow(vm)
    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
