from __future__ import annotations

import json
import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from models.command_result import CommandResult
from services.command_service import CommandService

log = logging.getLogger(__name__)


class CommandBridge(QObject):
    """QWebChannel object ("backend"): the web front-end calls invoke(command, args_json)."""

    commandFailed = Signal(str, str)   # command, error text
    backupCreated = Signal(str)        # backup path
    dataWritten = Signal()

    def __init__(self, service: Optional[CommandService] = None, parent=None):
        super().__init__(parent)
        self.service = service or CommandService()

    @Slot(str, str, result=str)
    def invoke(self, command: str, args_json: str = "") -> str:
        try:
            args = json.loads(args_json) if args_json else {}
        except json.JSONDecodeError as e:
            error = f"Invalid arguments for {command}: {e}"
        else:
            error = None if isinstance(args, dict) else f"Invalid arguments for {command}: expected a JSON object"

        if error:
            log.warning("%s", error)
            self.commandFailed.emit(command, error)
            return CommandResult.failure(command, error).model_dump_json()

        result = self.service.invoke(command, args)
        if not result.ok:
            self.commandFailed.emit(command, result.error or "")
        elif command == "create_backup":
            self.backupCreated.emit(str(result.value))
        elif command in ("write_data_file", "restore_backup"):
            self.dataWritten.emit()
        return result.model_dump_json()

    @Slot(result=str)
    def commands(self) -> str:
        return json.dumps(self.service.commands())
