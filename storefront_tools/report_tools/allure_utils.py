"""
================================================================================
Allure Report Utilities
================================================================================

This module provides utilities for enhancing Allure test reports with
failure artifacts, and for generating and summarizing reports after a run.

Features:
- Text/PNG/file attachment helpers
- Failure artifacts for browser tests (screenshot, URL, trace)
- Report generation with history carry-over
- Summary generation

================================================================================
"""

import json
import shutil
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_text(text: str, name: str = "Text"):
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(data: bytes, name: str = "Screenshot"):
    allure.attach(
        data,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def attach_file(path: Path, name: str, extension: str = "zip"):
    """
    Attach a file from disk, e.g. a Playwright trace archive.

    Args:
        path: File to attach
        name: Attachment name
        extension: File extension shown in the report
    """
    allure.attach.file(str(path), name=name, extension=extension)


async def attach_failure_artifacts(page: Page, test_name: str) -> None:
    """
    Attach a full-page screenshot and the current URL of a failed test.

    Capture errors are logged; they never mask the original failure.

    Args:
        page: Page the test was driving
        test_name: Node name used in attachment titles
    """
    try:
        attach_text(page.url, name=f"{test_name} - URL")
        screenshot = await page.screenshot(full_page=True)
        attach_png(screenshot, name=f"{test_name} - failure screenshot")
    except PlaywrightError as e:
        logger.warning(f"Failed to capture failure artifacts for {test_name}: {e}")


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

    Retried scenarios leave one result file per attempt; only the latest
    attempt of each test (by `historyId`) is counted.
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

    def parse_results(self) -> List[Dict[str, Any]]:
        """
        Parse Allure result files, keeping the latest attempt per test.

        Returns:
            List of test result dictionaries
        """
        latest: Dict[str, Dict[str, Any]] = {}

        for result_file in self.results_dir.glob("*-result.json"):
            try:
                with open(result_file, encoding="utf-8") as f:
                    result = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to parse {result_file}: {e}")
                continue

            key = result.get("historyId") or result.get("uuid") or result_file.name
            previous = latest.get(key)
            if previous is None or result.get("start", 0) >= previous.get("start", 0):
                latest[key] = result

        return list(latest.values())

    def generate_summary(self) -> TestResultSummary:
        results = self.parse_results()
        summary = TestResultSummary()
        summary.total = len(results)

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

    def copy_history(self):
        """Copy history from previous report to results."""
        history_source = self.report_dir / "history"
        history_dest = self.results_dir / "history"

        if history_source.exists():
            if history_dest.exists():
                shutil.rmtree(history_dest)
            shutil.copytree(history_source, history_dest)
            logger.info("Copied history from previous report")

    def generate_report(self) -> bool:
        """
        Generate Allure HTML report.

        Returns:
            True if successful
        """
        self.copy_history()

        cmd = [
            "allure", "generate",
            str(self.results_dir),
            "-o", str(self.report_dir),
            "--clean"
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.error("Allure command not found. Install allure-commandline.")
            return False

        if result.returncode == 0:
            logger.info(f"Report generated at {self.report_dir}")
            return True
        logger.error(f"Report generation failed: {result.stderr}")
        return False

    def print_summary(self):
        """Print summary to console."""
        summary = self.generate_summary()

        print("\n" + "=" * 60)
        print("TEST EXECUTION SUMMARY")
        print("=" * 60)
        print(f"Total Tests:    {summary.total}")
        print(f"Passed:         {summary.passed}")
        print(f"Failed:         {summary.failed}")
        print(f"Broken:         {summary.broken}")
        print(f"Skipped:        {summary.skipped}")
        print(f"Pass Rate:      {summary.pass_rate:.2f}%")
        print(f"Duration:       {summary.duration_ms / 1000:.2f}s")
        print("=" * 60 + "\n")


# ================================================================================
# Convenience Functions
# ================================================================================

def generate_allure_report(
    results_dir: str,
    output_dir: Optional[str] = None,
    open_report: bool = False
) -> bool:
    """
    Generate Allure report from results.

    Args:
        results_dir: Path to allure-results directory
        output_dir: Optional output directory
        open_report: Whether to open report in browser

    Returns:
        True if successful
    """
    processor = AllureReportProcessor(
        Path(results_dir),
        Path(output_dir) if output_dir else None
    )

    success = processor.generate_report()

    if success:
        processor.print_summary()
        if open_report:
            subprocess.run(["allure", "open", str(processor.report_dir)])

    return success


__all__ = [
    "AllureReportProcessor",
    "TestResultSummary",
    "attach_failure_artifacts",
    "attach_file",
    "attach_png",
    "attach_text",
    "generate_allure_report",
]
