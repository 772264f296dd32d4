import logging, sys, os

os.environ.setdefault("PYTHONUTF8", "1")
try:
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")
except Exception:
    pass

from PySide6.QtWidgets import QApplication
from config.config_loader import load_config
from config.app_info import APP_NAME, APP_VERSION
from data.local_store import LocalDataStore
from services.command_service import CommandService
from ui.command_bridge import CommandBridge
from ui.main_window import MainWindow

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

def main():
    try:
        load_config()
        logging.getLogger().setLevel(os.getenv("IPROMPT_LOG_LEVEL", "INFO").upper())
        store = LocalDataStore()
        logging.info("Data directory: %s", store.resolve_app_dir())

        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)
        app.setApplicationVersion(APP_VERSION)
        bridge = CommandBridge(CommandService(store))
        win = MainWindow(bridge)
        win.show()
        sys.exit(app.exec())
    except Exception:
        logging.exception("❌ Error while starting the application")
        sys.exit(1)

if __name__ == "__main__":
    main()
