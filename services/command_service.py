"""Command table exposed to the front-end.

invoke() never raises for store failures or bad arguments: the error text travels back in a CommandResult.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, List, Optional

from data.local_store import LocalDataStore, StoreError, platform_info, app_version
from models.command_result import CommandResult

log = logging.getLogger(__name__)


class CommandArgumentError(ValueError):
    pass


class CommandService:
    def __init__(self, store: Optional[LocalDataStore] = None) -> None:
        self.store = store or LocalDataStore()
        self._commands: Dict[str, Callable[..., Any]] = {
            "platform_info": platform_info,
            "app_version": app_version,
            "read_data_file": self.store.read_data,
            "write_data_file": self._write_data_file,
            "create_backup": self._create_backup,
            "list_backups": self.store.list_backups,
            "get_data_file_size": self.store.data_file_size,
            "restore_backup": self._restore_backup,
            "list_backup_details": self._list_backup_details,
        }

    def commands(self) -> List[str]:
        return sorted(self._commands)

    def invoke(self, name: str, args: Optional[Dict[str, Any]] = None) -> CommandResult:
        handler = self._commands.get(name)
        if handler is None:
            log.warning("Unknown command: %s", name)
            return CommandResult.failure(name, f"Unknown command: {name}")
        try:
            bound = inspect.signature(handler).bind(**(args or {}))
        except TypeError as e:
            log.warning("Bad arguments for %s: %s", name, e)
            return CommandResult.failure(name, f"Invalid arguments for {name}: {e}")
        try:
            value = handler(*bound.args, **bound.kwargs)
        except CommandArgumentError as e:
            log.warning("Bad arguments for %s: %s", name, e)
            return CommandResult.failure(name, f"Invalid arguments for {name}: {e}")
        except StoreError as e:
            log.warning("Command %s failed: %s", name, e)
            return CommandResult.failure(name, str(e))
        return CommandResult.success(name, value)

    # ----------------- adapters -----------------
    def _write_data_file(self, data: str) -> None:
        if not isinstance(data, str):
            raise CommandArgumentError("'data' must be a string")
        self.store.write_data(data)

    def _create_backup(self) -> str:
        return str(self.store.create_backup())

    def _restore_backup(self, name: str) -> str:
        if not isinstance(name, str):
            raise CommandArgumentError("'name' must be a string")
        return str(self.store.restore_backup(name))

    def _list_backup_details(self) -> List[Dict[str, Any]]:
        return [b.model_dump(mode="json") for b in self.store.backup_details()]
