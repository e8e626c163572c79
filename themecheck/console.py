"""Line-oriented console output for check runs."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .result import Finding
from .severity import Severity

RESET = "\033[0m"
COLORS = {
    "header": "\033[1;34m",
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "success": "\033[0;32m",
}


class Console:
    """Print the four message classes of a report: header, error, warning, success."""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            color = bool(getattr(self.stream, "isatty", lambda: False)())
        self.color = color

    def _emit(self, kind: str, text: str) -> None:
        if self.color:
            text = f"{COLORS[kind]}{text}{RESET}"
        print(text, file=self.stream)

    def header(self, title: str) -> None:
        print("", file=self.stream)
        self._emit("header", f"==> {title}")

    def error(self, message: str) -> None:
        self._emit("error", f"[ERROR] {message}")

    def warning(self, message: str) -> None:
        self._emit("warning", f"[WARN] {message}")

    def success(self, message: str) -> None:
        self._emit("success", f"[OK] {message}")

    def raw(self, text: str) -> None:
        """Write delegated tool output verbatim."""

        text = text.rstrip("\n")
        if text:
            print(text, file=self.stream)

    def finding(self, finding: Finding) -> None:
        message = finding.message
        if finding.location:
            message = f"{finding.location}: {message}"
        if finding.severity is Severity.ERROR:
            self.error(message)
        elif finding.severity is Severity.WARNING:
            self.warning(message)
        else:
            self.success(message)
        if finding.detail:
            self.raw(finding.detail)

    def summary(self, text: str, passed: bool) -> None:
        print("", file=self.stream)
        self._emit("success" if passed else "error", text)
