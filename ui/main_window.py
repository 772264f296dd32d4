# ui/main_window.py – hosts the web front-end and hands it the command bridge

import os
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QTextEdit
from PySide6.QtCore import QUrl

from data.local_store import StoreError
from ui.command_bridge import CommandBridge
from config.app_info import APP_NAME, APP_VERSION

# Optional WebEngine (front-end needs it; without it only a notice is shown)
try:
    from PySide6.QtWebEngineWidgets import QWebEngineView  # type: ignore
    from PySide6.QtWebChannel import QWebChannel  # type: ignore
    _HAS_WEB = True
except Exception:
    QWebEngineView = None  # type: ignore
    QWebChannel = None  # type: ignore
    _HAS_WEB = False

log = logging.getLogger(__name__)


def frontend_path() -> Optional[Path]:
    raw = os.environ.get("IPROMPT_FRONTEND")
    if not raw:
        return None
    p = Path(raw).expanduser()
    return p if p.exists() else None


class MainWindow(QMainWindow):
    def __init__(self, bridge: Optional[CommandBridge] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"{APP_NAME} {APP_VERSION}")
        self.resize(1200, 800)

        self.bridge = bridge if bridge is not None else CommandBridge(parent=self)
        self.bridge.commandFailed.connect(self.on_command_failed)
        self.bridge.backupCreated.connect(self.on_backup_created)

        page = frontend_path()
        if _HAS_WEB and page is not None:
            self.view = QWebEngineView(self)
            self.channel = QWebChannel(self.view.page())
            self.channel.registerObject("backend", self.bridge)
            self.view.page().setWebChannel(self.channel)
            self.view.setUrl(QUrl.fromLocalFile(str(page.resolve())))
            self._is_web = True
        else:
            self.view = QTextEdit(self)
            self.view.setReadOnly(True)
            self.view.setPlainText(self._notice(page))
            self._is_web = False
        self.setCentralWidget(self.view)

    def _notice(self, page: Optional[Path]) -> str:
        try:
            data_dir = str(self.bridge.service.store.resolve_app_dir())
        except StoreError as e:
            data_dir = f"(unavailable: {e})"
        if not _HAS_WEB:
            reason = "QtWebEngine is not installed."
        elif page is None:
            reason = "IPROMPT_FRONTEND is not set or does not exist."
        else:
            reason = ""
        return f"Front-end not loaded. {reason}\nData directory: {data_dir}"

    def on_command_failed(self, command: str, error: str):
        self.statusBar().showMessage(f"{command}: {error}", 8000)

    def on_backup_created(self, path: str):
        self.statusBar().showMessage(f"Backup saved: {path}", 5000)
