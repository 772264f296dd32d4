import json
import os
import sys
from pathlib import Path

import pytest

from services.command_service import CommandService


def test_commands_listed(store):
    svc = CommandService(store)
    for name in ("platform_info", "app_version", "read_data_file", "write_data_file",
                 "create_backup", "list_backups"):
        assert name in svc.commands()


def test_write_read_roundtrip(store):
    svc = CommandService(store)
    assert svc.invoke("read_data_file").value == ""
    res = svc.invoke("write_data_file", {"data": '{"prompts": []}'})
    assert res.ok and res.value is None
    assert svc.invoke("read_data_file").value == '{"prompts": []}'
    assert svc.invoke("get_data_file_size").value == len('{"prompts": []}')


def test_backup_errors_come_back_as_text(store):
    svc = CommandService(store)
    res = svc.invoke("create_backup")
    assert not res.ok
    assert res.error == "No data file to backup"


def test_backup_and_list(store):
    svc = CommandService(store)
    svc.invoke("write_data_file", {"data": "x"})
    res = svc.invoke("create_backup")
    assert res.ok and res.value.endswith("iprompt-backup-20240101_100000.json")
    assert svc.invoke("list_backups").value == ["iprompt-backup-20240101_100000.json"]
    details = svc.invoke("list_backup_details").value
    assert details[0]["name"] == "iprompt-backup-20240101_100000.json"
    assert details[0]["created_at"] == "2024-01-01T10:00:00"
    json.dumps(details)


def test_restore(store):
    svc = CommandService(store)
    svc.invoke("write_data_file", {"data": "old"})
    path = svc.invoke("create_backup").value
    svc.invoke("write_data_file", {"data": "new"})
    res = svc.invoke("restore_backup", {"name": Path(path).name})
    assert res.ok
    assert svc.invoke("read_data_file").value == "old"


def test_unknown_command_and_bad_args(store):
    svc = CommandService(store)
    res = svc.invoke("delete_everything")
    assert not res.ok and "Unknown command" in res.error
    res = svc.invoke("write_data_file", {})
    assert not res.ok and "Invalid arguments" in res.error
    res = svc.invoke("write_data_file", {"data": 42})
    assert not res.ok and "Invalid arguments" in res.error
    assert not store.data_file_path().exists()


def test_unencodable_data_comes_back_as_error(store):
    svc = CommandService(store)
    svc.invoke("write_data_file", {"data": "precious"})
    res = svc.invoke("write_data_file", {"data": "bad \ud800"})
    assert not res.ok and res.error.startswith("Failed to write data file")
    assert svc.invoke("read_data_file").value == "precious"


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced (root or Windows)",
)
def test_permission_denied_comes_back_as_error(store):
    svc = CommandService(store)
    svc.invoke("write_data_file", {"data": "x"})
    app_dir = store.resolve_app_dir()
    app_dir.chmod(0o600)
    try:
        for cmd in ("read_data_file", "get_data_file_size", "create_backup", "list_backups"):
            res = svc.invoke(cmd)
            assert res.ok is False, cmd
            assert "Permission denied" in res.error, cmd
    finally:
        app_dir.chmod(0o700)


def test_store_type_errors_are_not_argument_errors(store, monkeypatch):
    def broken():
        raise TypeError("internal bug")
    monkeypatch.setattr(store, "read_data", broken)
    svc = CommandService(store)
    with pytest.raises(TypeError, match="internal bug"):
        svc.invoke("read_data_file")
