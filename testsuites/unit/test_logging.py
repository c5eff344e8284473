import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from autotest_tools.common import global_config


@pytest.fixture
def fake_logger(monkeypatch):
    global_config.reset_logger()
    fake = MagicMock(name="logger")
    monkeypatch.setattr(global_config, "logger", fake)
    return fake


def test_init_logger_is_idempotent(fake_logger):
    global_config.init_logger(level="debug")
    global_config.init_logger(level="error")

    assert global_config.is_logger_initialized()
    fake_logger.remove.assert_called_once_with()
    fake_logger.add.assert_called_once()
    assert fake_logger.add.call_args.kwargs["level"] == "DEBUG"


def test_file_sink(fake_logger, tmp_path):
    log_file = tmp_path / "logs" / "run.log"

    global_config.init_logger(log_file=str(log_file))

    assert log_file.parent.is_dir()
    sink = fake_logger.add.call_args_list[-1]
    assert sink.args == (str(log_file),)
    assert sink.kwargs["rotation"] == "10 MB"
    assert sink.kwargs["colorize"] is False


def test_reset_allows_reinitialisation(fake_logger):
    global_config.init_logger()
    global_config.reset_logger()
    assert not global_config.is_logger_initialized()

    global_config.get_logger()
    assert fake_logger.add.call_count == 2


def test_logging_setup_does_not_import_ui_framework():
    code = (
        "import sys, autotest_tools.common; "
        "print(any(name.startswith(('testsuites', 'playwright')) for name in sys.modules))"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=Path(__file__).resolve().parents[2],
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "False"
