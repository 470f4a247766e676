import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from app.controllers.game_controller import GameController
from app.controllers.word_repository import WordRepository
from app.services.settings_store import SettingsStore
from app.ui.main_window import create_main_window

logger = logging.getLogger(__name__)

# -------------------------------------------------
#          SETTINGS (TOP-LEVEL)
# -------------------------------------------------
SETTINGS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.yaml")


def configure_logging() -> None:
    level_name = os.getenv("HANGUL_WORDLE_LOG_LEVEL", "INFO").strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_controller(settings_path: str | None = None) -> GameController:
    """Wire settings, word list and game controller (no Qt event loop)."""
    store = SettingsStore(settings_path or SETTINGS_PATH)
    repo = WordRepository(data_path=store.get_word_list_path())
    logger.info("Loaded %d words from %s", len(repo.entries), repo.data_path)
    return GameController(
        repo.choose,
        max_guesses=store.get_max_guesses(),
        reject_signal_ms=store.get_reject_signal_ms(),
    )


def main() -> int:
    configure_logging()
    app = QApplication(sys.argv)

    controller = build_controller()
    window = create_main_window(controller)
    window.resize(480, 860)
    window.show()
    window.setFocus()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
