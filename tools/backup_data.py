# Inspect / back up / restore the iPrompt data file. Usage: python -m tools.backup_data {info,backup,list,restore}
from __future__ import annotations

import argparse, sys
from pathlib import Path

from config.config_loader import load_config
from data.local_store import LocalDataStore, StoreError, platform_info, app_version


def cmd_info(store: LocalDataStore, args) -> int:
    print(f"iPrompt {app_version()} on {platform_info()}")
    print(f"App dir: {store.resolve_app_dir()}")
    p = store.data_file_path()
    print(f"Data file: {p}  Exists: {p.exists()}  Size: {store.data_file_size()} bytes")
    print(f"Backups: {len(store.list_backups())}")
    return 0


def cmd_backup(store: LocalDataStore, args) -> int:
    print(store.create_backup())
    return 0


def cmd_list(store: LocalDataStore, args) -> int:
    if args.details:
        for b in store.backup_details():
            created = b.created_at.isoformat(sep=" ") if b.created_at else "?"
            print(f"{b.name}\t{created}\t{b.size} bytes")
    else:
        for name in store.list_backups():
            print(name)
    return 0


def cmd_restore(store: LocalDataStore, args) -> int:
    if args.backup_first:
        try:
            print(f"Safety backup: {store.create_backup()}")
        except StoreError as e:
            # nothing to protect yet
            print(f"Safety backup skipped: {e}", file=sys.stderr)
    print(f"Restored into {store.restore_backup(args.name)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="iPrompt data file maintenance")
    ap.add_argument("--data-root", type=Path, default=None, help="User data root (default: platform location / IPROMPT_DATA_ROOT)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("info", help="Show paths, data file size and backup count")
    p.set_defaults(func=cmd_info)

    p = sub.add_parser("backup", help="Copy the data file into backups/")
    p.set_defaults(func=cmd_backup)

    p = sub.add_parser("list", help="List backups, newest first")
    p.add_argument("--details", action="store_true", help="Include creation time and size")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("restore", help="Overwrite the data file with a backup")
    p.add_argument("name", help="Backup file name as printed by 'list'")
    p.add_argument("--backup-first", action="store_true", help="Back up the current data file before restoring")
    p.set_defaults(func=cmd_restore)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    load_config()
    store = LocalDataStore(args.data_root)
    try:
        return args.func(store, args)
    except StoreError as e:
        print(f"[backup_data] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
