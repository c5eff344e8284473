import json
from pathlib import Path
from types import SimpleNamespace

import pytest

import run_tests
from run_tests import TestRunner, build_parser


def test_ui_command():
    runner = TestRunner(
        suite="ui",
        tags=["smoke", "cart"],
        parallel=4,
        headless=False,
        retries=1,
        base_url="http://shop.test",
        allure_report=False,
    )

    cmd = runner.build_pytest_command("firefox")

    assert cmd[1:4] == ["-m", "pytest", "testsuites/ui_testing/tests"]
    assert cmd[cmd.index("-m", 2) + 1] == "smoke or cart"
    assert cmd[cmd.index("-n") + 1] == "4"
    assert "--ui-browser=firefox" in cmd
    assert "--headed" in cmd
    assert "--base-url=http://shop.test" in cmd
    assert cmd[cmd.index("--reruns") + 1] == "1"
    assert "--alluredir" not in cmd


def test_unit_command_has_no_browser_options():
    runner = TestRunner(suite="unit", retries=3)

    cmd = runner.build_pytest_command()

    assert "testsuites/unit" in cmd
    assert "testsuites/ui_testing/tests" not in cmd
    assert cmd[cmd.index("--alluredir") + 1].endswith("unit")
    assert not any(part.startswith("--ui-browser") for part in cmd)
    assert "--reruns" not in cmd


def test_retries_default_from_config():
    assert TestRunner(suite="ui").retries == 2
    assert "--reruns" not in TestRunner(suite="ui", retries=0).build_pytest_command("chromium")


def test_browser_all_runs_each_engine_and_keeps_worst_exit_code(monkeypatch, tmp_path):
    codes = iter([0, 1, 0])
    commands = []

    def fake_run(cmd, cwd):
        commands.append(cmd)
        return SimpleNamespace(returncode=next(codes))

    monkeypatch.setattr(run_tests.subprocess, "run", fake_run)
    runner = TestRunner(suite="ui", browser="all", allure_report=False)
    runner.reports_dir = tmp_path / "reports"

    assert runner.run() == 1
    assert [cmd[-3] for cmd in commands] == [
        "--ui-browser=chromium",
        "--ui-browser=firefox",
        "--ui-browser=webkit",
    ]


def test_parser_rejects_unknown_browser():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--browser", "opera"])


def test_suite_all_runs_unit_tests_once(monkeypatch, tmp_path):
    commands = []

    def fake_run(cmd, **kwargs):
        commands.append(cmd)
        return SimpleNamespace(returncode=0)

    monkeypatch.setattr(run_tests.subprocess, "run", fake_run)
    runner = TestRunner(suite="all", browser="all", allure_report=False)
    runner.reports_dir = tmp_path / "reports"

    assert runner.planned_runs() == [None, "chromium", "firefox", "webkit"]
    assert runner.run() == 0
    assert sum("testsuites/unit" in cmd for cmd in commands) == 1
    assert sum("testsuites/ui_testing/tests" in cmd for cmd in commands) == 3


def test_browser_matrix_summary_counts_each_browser(monkeypatch, tmp_path):
    def fake_run(cmd, **kwargs):
        if cmd[0] == "allure":
            raise FileNotFoundError("allure")
        results_dir = Path(cmd[cmd.index("--alluredir") + 1])
        status = "failed" if "--ui-browser=chromium" in cmd else "passed"
        (results_dir / "a-result.json").write_text(
            json.dumps({"historyId": "h1", "status": status, "start": 0, "stop": 10}),
            encoding="utf-8",
        )
        return SimpleNamespace(returncode=1 if status == "failed" else 0)

    monkeypatch.setattr(run_tests.subprocess, "run", fake_run)
    runner = TestRunner(suite="ui", browser="all", retries=0)
    runner.reports_dir = tmp_path / "reports"
    runner.allure_results = tmp_path / "reports" / "allure-results"
    runner.allure_report_dir = tmp_path / "reports" / "allure-report"

    assert runner.run() == 1
    assert runner.summary.total == 3
    assert runner.summary.failed == 1
    assert runner.summary.passed == 2


def test_previous_results_are_cleared(monkeypatch, tmp_path):
    monkeypatch.setattr(run_tests.subprocess, "run", lambda cmd, **kwargs: SimpleNamespace(returncode=0))
    runner = TestRunner(suite="unit")
    runner.reports_dir = tmp_path / "reports"
    runner.allure_results = tmp_path / "reports" / "allure-results"
    runner.allure_report_dir = tmp_path / "reports" / "allure-report"
    stale = runner.results_dir_for(None) / "old-result.json"
    stale.parent.mkdir(parents=True)
    stale.write_text("{}", encoding="utf-8")

    runner.run()

    assert not stale.exists()
    assert runner.summary.total == 0
