"""Local data store for iPrompt.

- One opaque JSON text file in the per-user app directory (never parsed here)
- Timestamped backup copies under ``backups/`` (local time, second granularity)
- Every operation is a single filesystem step; failures raise StoreError subclasses
- No locking: concurrent writers from other processes are last-writer-wins
"""
from __future__ import annotations

import logging, shutil, stat, sys
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from config import app_paths
from config.app_info import APP_VERSION
from models.backup_info import BackupInfo

log = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class; str(err) is the text handed back to the UI."""


class StoreIOError(StoreError):
    pass


class StoreNotFoundError(StoreError):
    pass


_PLATFORM_NAMES = {"win32": "windows", "darwin": "macos"}


def platform_info() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    return _PLATFORM_NAMES.get(sys.platform, sys.platform)


def app_version() -> str:
    return APP_VERSION


class LocalDataStore:
    def __init__(self, data_root: Optional[Path] = None, clock: Callable[[], datetime] = datetime.now) -> None:
        # data_root=None -> platform root, looked up on every call
        self.data_root = Path(data_root) if data_root is not None else None
        self.clock = clock

    # ----------------- paths -----------------
    def resolve_app_dir(self) -> Path:
        root = self.data_root if self.data_root is not None else app_paths.user_data_root()
        if root is None:
            raise StoreIOError("Failed to get home directory")
        app_dir = app_paths.app_dir_for(root)
        try:
            app_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(f"Failed to create app directory: {e}") from e
        return app_dir

    def data_file_path(self) -> Path:
        return self.resolve_app_dir() / app_paths.DATA_FILE_NAME

    def backup_dir_path(self) -> Path:
        return self.resolve_app_dir() / app_paths.BACKUP_DIR_NAME

    # ----------------- data file -----------------
    def read_data(self) -> str:
        path = self.data_file_path()
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            raise StoreIOError(f"Failed to read data file: {e}") from e

    def write_data(self, text: str) -> None:
        path = self.data_file_path()
        # encode before open(): a failed encode must not truncate the old file
        try:
            raw = text.encode("utf-8")
            with open(path, "wb") as f:
                f.write(raw)
        except (OSError, UnicodeEncodeError) as e:
            raise StoreIOError(f"Failed to write data file: {e}") from e

    def data_file_size(self) -> int:
        path = self.data_file_path()
        try:
            return path.stat().st_size
        except FileNotFoundError:
            return 0
        except OSError as e:
            raise StoreIOError(f"Failed to read data file metadata: {e}") from e

    # ----------------- backups -----------------
    def create_backup(self) -> Path:
        src = self.data_file_path()
        try:
            src.stat()
        except FileNotFoundError:
            raise StoreNotFoundError("No data file to backup") from None
        except OSError as e:
            raise StoreIOError(f"Failed to create backup: {e}") from e

        stamp = self.clock().strftime(app_paths.BACKUP_STAMP_FORMAT)
        backups = self.backup_dir_path()
        try:
            backups.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(f"Failed to create backups directory: {e}") from e

        dst = backups / app_paths.backup_name(stamp)
        try:
            shutil.copy2(src, dst)
        except OSError as e:
            raise StoreIOError(f"Failed to create backup: {e}") from e
        log.info("Backup created: %s", dst)
        return dst

    def list_backups(self) -> List[str]:
        backups = self.backup_dir_path()
        try:
            names = [p.name for p in backups.iterdir()]
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StoreIOError(f"Failed to read backups directory: {e}") from e
        # fixed-width stamps: lexicographic order == chronological order
        return sorted((n for n in names if app_paths.is_backup_name(n)), reverse=True)

    def backup_details(self) -> List[BackupInfo]:
        backups = self.backup_dir_path()
        out: List[BackupInfo] = []
        for name in self.list_backups():
            stamp = app_paths.backup_stamp(name)
            try:
                created = datetime.strptime(stamp, app_paths.BACKUP_STAMP_FORMAT)
            except ValueError:
                created = None
            try:
                size = (backups / name).stat().st_size
            except OSError as e:
                raise StoreIOError(f"Failed to read backup metadata: {e}") from e
            out.append(BackupInfo(id=stamp, name=name, created_at=created, size=size))
        return out

    def restore_backup(self, name: str) -> Path:
        # plain file names only, nothing that could leave backups/
        if not app_paths.is_backup_name(name) or Path(name).name != name:
            raise StoreNotFoundError(f"Backup not found: {name}")
        src = self.backup_dir_path() / name
        try:
            found = stat.S_ISREG(src.stat().st_mode)
        except FileNotFoundError:
            found = False
        except OSError as e:
            raise StoreIOError(f"Failed to restore backup: {e}") from e
        if not found:
            raise StoreNotFoundError(f"Backup not found: {name}")

        dst = self.data_file_path()
        try:
            shutil.copyfile(src, dst)
        except OSError as e:
            raise StoreIOError(f"Failed to restore backup: {e}") from e
        log.info("Backup restored: %s -> %s", src, dst)
        return dst
