# tests/test_main.py

from __future__ import annotations

import logging

import pytest

from todo_app.cli import main as main_mod
from todo_app.logging_setup import resolve_level, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file_and_filters_console(tmp_path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.INFO)

    logging.getLogger("todo_app.test").debug("debug line for the file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "todo.log"
    assert "debug line for the file" in log_file.read_text("utf-8")

    console = next(
        h for h in logging.getLogger().handlers if not isinstance(h, logging.FileHandler)
    )
    ours = logging.LogRecord("todo_app.x", logging.INFO, __file__, 1, "m", None, None)
    theirs = logging.LogRecord("urllib3", logging.WARNING, __file__, 1, "m", None, None)
    assert all(f.filter(ours) for f in console.filters)
    assert not all(f.filter(theirs) for f in console.filters)


def test_main_without_console(settings, monkeypatch, restore_root_logging) -> None:
    settings.console_enabled = False
    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)

    assert main_mod.main() == 0
    assert settings.db_path.exists()
    assert (settings.log_dir / "todo.log").exists()


def test_main_reports_unavailable_database(settings, monkeypatch, restore_root_logging, capsys) -> None:
    settings.data_dir.mkdir(parents=True)
    settings.db_path.write_bytes(b"garbage, not sqlite " * 50)
    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)

    assert main_mod.main() == 1
    assert "Cannot open the task database" in capsys.readouterr().err


def test_main_reports_unusable_db_directory(settings, monkeypatch, restore_root_logging, capsys) -> None:
    settings.data_dir.mkdir(parents=True)
    (settings.data_dir / "blocker").write_text("x")
    settings.db_path = settings.data_dir / "blocker" / "todo.db"
    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)

    assert main_mod.main() == 1
    assert "Cannot open the task database" in capsys.readouterr().err


def test_resolve_level() -> None:
    assert resolve_level("info") == logging.INFO
    assert resolve_level(" DEBUG ") == logging.DEBUG
    assert resolve_level("nonsense") == logging.WARNING
    assert resolve_level("nonsense", default=logging.ERROR) == logging.ERROR
