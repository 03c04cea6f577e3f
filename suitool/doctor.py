"""Diagnostic checks of the local installation environment."""

from __future__ import annotations

import json
import os
import subprocess
import sys
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO

from suitool.fs_utils import read_json_file

GITHUB_API_URL = "https://api.github.com"
USER_AGENT = "suitool"
_NETWORK_TIMEOUT = 10.0
_DEPENDENCIES = ("rustc", "cargo", "git")


class Status(Enum):
    """How a single check turned out."""

    OK = "✓"
    WARN = "!"
    ERROR = "✗"


@dataclass(frozen=True)
class Outcome:
    """The result of one check: its status and an explanatory text."""

    status: Status
    text: str = ""

    @classmethod
    def ok(cls, info: str = "") -> "Outcome":
        return cls(Status.OK, info)

    @classmethod
    def warn(cls, text: str) -> "Outcome":
        return cls(Status.WARN, text)

    @classmethod
    def error(cls, text: str) -> "Outcome":
        return cls(Status.ERROR, text)


@dataclass
class CheckReport:
    """Collects check outcomes, prints each one and counts problems."""

    stream: Optional[TextIO] = None
    entries: list[tuple[str, Outcome]] = field(default_factory=list)
    warnings: int = 0
    errors: int = 0

    def _write(self, line: str) -> None:
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def check(self, message: str, result: Outcome) -> str:
        """Record ``result`` for the check described by ``message`` and print it."""
        self.entries.append((message, result))
        if result.status is Status.OK:
            line = f"[{Status.OK.value}] {message}"
            if result.text:
                line = f"{line} {result.text}"
        else:
            if result.status is Status.WARN:
                self.warnings += 1
            else:
                self.errors += 1
            line = f"[{result.status.value}] {result.text.strip()}"
        self._write(line)
        return line

    def summary(self) -> str:
        """Return a one-line verdict on all checks recorded so far."""
        if self.errors > 0:
            return f"Found {self.errors} error(s) and {self.warnings} warning(s)."
        if self.warnings > 0:
            return f"Found {self.warnings} warning(s)."
        return "Your environment looks good!"


def check_data_dir(path: str | Path) -> Outcome:
    """Check that the data directory exists."""
    path = Path(path)
    if path.is_dir():
        return Outcome.ok(f"at {path}")
    return Outcome.error(f"data directory not found at {path}")


def check_path_variables(
    report: CheckReport,
    bin_dir: str | Path,
    path_var: Optional[str],
    home: Optional[str | Path],
) -> None:
    """Check that ``bin_dir`` is on ``path_var`` and comes before cargo's bin directory."""
    bin_dir = Path(bin_dir)
    report.check("Default binary directory", Outcome.ok(f"is {bin_dir}"))

    if path_var is None:
        report.check(
            "PATH variable",
            Outcome.error("Could not read PATH environment variable."),
        )
        return

    paths = [Path(entry) for entry in path_var.split(os.pathsep) if entry]
    if bin_dir not in paths:
        report.check(
            "Default binary directory in PATH",
            Outcome.warn(
                "Not found in PATH. Binaries managed by this tool may not be accessible."
            ),
        )
        return

    report.check("Default binary directory in PATH", Outcome.ok())

    if home is None:
        return
    cargo_bin = Path(home) / ".cargo" / "bin"
    if cargo_bin not in paths:
        return
    if paths.index(bin_dir) > paths.index(cargo_bin):
        report.check(
            "PATH order",
            Outcome.warn(
                f"Default binary directory ({bin_dir}) is after cargo's binary "
                f"directory ({cargo_bin}). This may cause conflicts if you have also "
                "installed sui via `cargo install`."
            ),
        )
    else:
        report.check("PATH order", Outcome.ok("is correct"))


def check_config_files(
    report: CheckReport,
    installed_path: str | Path,
    default_path: str | Path,
) -> None:
    """Check that the installed-binaries and default-version files are valid JSON."""
    installed_path = Path(installed_path)
    if not installed_path.exists():
        report.check(
            "Installed binaries config",
            Outcome.warn(f"File not found at {installed_path}"),
        )
    else:
        try:
            read_json_file(installed_path)
        except (OSError, ValueError) as exc:
            report.check(
                "Installed binaries config", Outcome.error(f"Failed to parse: {exc}")
            )
        else:
            report.check("Installed binaries config", Outcome.ok("is valid"))

    default_path = Path(default_path)
    if not default_path.exists():
        report.check(
            "Default version config",
            Outcome.warn(f"File not found at {default_path}"),
        )
        return
    try:
        content = default_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        report.check("Default version config", Outcome.error(f"Failed to read: {exc}"))
        return
    try:
        json.loads(content)
    except ValueError:
        report.check(
            "Default version config",
            Outcome.error("Failed to parse as valid JSON."),
        )
    else:
        report.check("Default version config", Outcome.ok("is valid"))


def _tool_version(tool: str) -> Optional[str]:
    try:
        completed = subprocess.run(
            [tool, "--version"], capture_output=True, check=False
        )
    except OSError:
        return None
    if completed.returncode != 0:
        return None
    return completed.stdout.decode("utf-8", errors="replace").strip()


def check_dependencies(report: CheckReport) -> None:
    """Check that the tools needed for nightly builds are available."""
    for tool in _DEPENDENCIES:
        version = _tool_version(tool)
        if version is None:
            report.check(
                tool, Outcome.warn("Not found. Required for --nightly builds.")
            )
        else:
            report.check(tool, Outcome.ok(version))


def check_network_connectivity(report: CheckReport, url: str = GITHUB_API_URL) -> None:
    """Check that ``url`` answers with a success status."""
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=_NETWORK_TIMEOUT) as response:
            success = 200 <= response.status < 300
    except (urllib.error.URLError, OSError, ValueError):
        success = False
    if success:
        report.check("GitHub API connectivity", Outcome.ok())
    else:
        report.check(
            "GitHub API connectivity",
            Outcome.error("Cannot connect to GitHub API. Downloads will fail."),
        )


def run_doctor_checks(
    data_dir: str | Path,
    bin_dir: str | Path,
    installed_path: str | Path,
    default_path: str | Path,
) -> CheckReport:
    """Run every diagnostic check, print the results and return the report."""
    report = CheckReport()
    print("\nEnvironment Doctor")
    print("------------------")

    report.check("data directory exists", check_data_dir(data_dir))
    check_path_variables(report, bin_dir, os.environ.get("PATH"), Path.home())
    check_config_files(report, installed_path, default_path)
    check_dependencies(report)
    check_network_connectivity(report)

    print("\nCheckup complete.")
    print(report.summary())
    return report