"""
================================================================================
Allure Report Utilities
================================================================================

Helpers for enriching Allure results produced by the UI suite and for
summarising a finished run.

Features:
- Attachment helpers (text, JSON, PNG)
- environment.properties writer (base URL, browser, headless)
- Result parsing and summary generation
- Delegation of HTML generation to the `allure` CLI

================================================================================
"""

import json
import shutil
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data") -> None:
    """Attach JSON-serialisable data to the current Allure test."""
    allure.attach(
        json.dumps(data, indent=2, default=str),
        name=name,
        attachment_type=allure.attachment_type.JSON,
    )


def attach_text(text: str, name: str = "Text") -> None:
    """Attach plain text to the current Allure test."""
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT,
    )


def attach_png(data: bytes, name: str = "Screenshot") -> None:
    """Attach a PNG screenshot to the current Allure test."""
    allure.attach(
        data,
        name=name,
        attachment_type=allure.attachment_type.PNG,
    )


def write_environment_properties(results_dir: Path, properties: Dict[str, Any]) -> Path:
    """
    Write the Allure ``environment.properties`` file.

    Args:
        results_dir: Allure results directory
        properties: Key/value pairs shown on the report overview

    Returns:
        Path of the written file
    """
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)
    path = results_dir / "environment.properties"
    lines = [f"{key}={value}" for key, value in sorted(properties.items())]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


# ================================================================================
# Report Processing
# ================================================================================

@dataclass
class TestResultSummary:
    """Summary of test execution results."""
    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0
    unknown: int = 0
    duration_ms: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        """Calculate pass rate percentage."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "broken": self.broken,
            "skipped": self.skipped,
            "unknown": self.unknown,
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
        }


class AllureReportProcessor:
    """
    Processes Allure results and generates reports.

    Retries recorded by pytest-rerunfailures produce several result files for
    one test; only the latest attempt (highest ``stop``) per ``historyId`` is
    counted.

    Each pytest run (one per browser, plus the unit run) writes to its own
    sub-directory of ``results_dir``. The browser is a CLI option, not a test
    parameter, so the same test shares a ``historyId`` across browsers;
    attempts are therefore grouped per directory as well.
    """

    def __init__(
        self,
        results_dir: Path,
        report_dir: Optional[Path] = None,
    ):
        """
        Initialize processor.

        Args:
            results_dir: Allure results directory
            report_dir: Output report directory
        """
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir or self.results_dir.parent / "allure-report")

    def result_dirs(self) -> List[Path]:
        """results_dir itself plus every sub-directory holding result files."""
        found = {path.parent for path in self.results_dir.rglob("*-result.json")}
        return sorted(found | {self.results_dir})

    def parse_results(self) -> List[Dict[str, Any]]:
        """
        Parse Allure result files below results_dir.

        Returns:
            List of test result dictionaries, one per test and run directory
        """
        latest: Dict[Tuple[Path, str], Dict[str, Any]] = {}

        for result_file in sorted(self.results_dir.rglob("*-result.json")):
            try:
                with open(result_file, encoding="utf-8") as f:
                    result = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to parse {result_file}: {e}")
                continue

            key = (
                result_file.parent,
                result.get("historyId") or result.get("uuid") or result_file.name,
            )
            previous = latest.get(key)
            if previous is None or result.get("stop", 0) >= previous.get("stop", 0):
                latest[key] = result

        return list(latest.values())

    def generate_summary(self) -> TestResultSummary:
        """Build a TestResultSummary from the parsed results."""
        results = self.parse_results()
        summary = TestResultSummary(total=len(results))

        for result in results:
            status = result.get("status", "unknown")
            if status == "passed":
                summary.passed += 1
            elif status == "failed":
                summary.failed += 1
            elif status == "broken":
                summary.broken += 1
            elif status == "skipped":
                summary.skipped += 1
            else:
                summary.unknown += 1

            summary.duration_ms += result.get("stop", 0) - result.get("start", 0)

        return summary

    def copy_history(self) -> None:
        """Copy history from previous report so trends survive regeneration."""
        history_source = self.report_dir / "history"
        history_dest = self.results_dir / "history"

        if history_source.exists():
            if history_dest.exists():
                shutil.rmtree(history_dest)
            shutil.copytree(history_source, history_dest)
            logger.info("Copied history from previous report")

    def generate_report(self) -> bool:
        """
        Generate Allure HTML report via the allure CLI.

        Returns:
            True if successful
        """
        self.copy_history()
        cmd = [
            "allure", "generate",
            *(str(path) for path in self.result_dirs()),
            "-o", str(self.report_dir),
            "--clean",
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Install allure-commandline to build HTML reports.")
            return False

        if result.returncode != 0:
            logger.error(f"Report generation failed: {result.stderr}")
            return False

        logger.info(f"Report generated at {self.report_dir}")
        return True

    def log_summary(self) -> TestResultSummary:
        """Log the run summary and return it."""
        summary = self.generate_summary()

        logger.info("=" * 60)
        logger.info("TEST EXECUTION SUMMARY")
        logger.info("=" * 60)
        logger.info(f"Total Tests:    {summary.total}")
        logger.info(f"Passed:         {summary.passed}")
        logger.info(f"Failed:         {summary.failed}")
        logger.info(f"Broken:         {summary.broken}")
        logger.info(f"Skipped:        {summary.skipped}")
        logger.info(f"Pass Rate:      {summary.pass_rate:.2f}%")
        logger.info(f"Duration:       {summary.duration_ms / 1000:.2f}s")
        logger.info("=" * 60)
        return summary


__all__ = [
    "AllureReportProcessor",
    "TestResultSummary",
    "attach_json",
    "attach_png",
    "attach_text",
    "write_environment_properties",
]
