"""Per-user filesystem locations for iPrompt.

Windows:  %APPDATA%\\iPrompt
macOS:    ~/Library/Application Support/iPrompt
other:    $XDG_DATA_HOME/iPrompt (fallback ~/.local/share/iPrompt)

``IPROMPT_DATA_ROOT`` replaces the platform root, the app folder is still appended.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from config.app_info import APP_NAME

DATA_FILE_NAME = "iprompt-data.json"
BACKUP_DIR_NAME = "backups"
BACKUP_PREFIX = "iprompt-backup-"
BACKUP_SUFFIX = ".json"
BACKUP_STAMP_FORMAT = "%Y%m%d_%H%M%S"


def _home() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        return None


def user_data_root() -> Optional[Path]:
    """Return the OS data root, or None if it cannot be determined."""
    override = os.environ.get("IPROMPT_DATA_ROOT")
    if override:
        return Path(override).expanduser()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None

    home = _home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" if home else None

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return home / ".local" / "share" if home else None


def app_dir_for(root: Path) -> Path:
    return root / APP_NAME


def backup_name(stamp: str) -> str:
    return f"{BACKUP_PREFIX}{stamp}{BACKUP_SUFFIX}"


def is_backup_name(name: str) -> bool:
    return name.startswith(BACKUP_PREFIX) and name.endswith(BACKUP_SUFFIX)


def backup_stamp(name: str) -> str:
    # caller checks is_backup_name() first
    return name[len(BACKUP_PREFIX):-len(BACKUP_SUFFIX)]
