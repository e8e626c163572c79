"""Checks over the theme's SCSS files."""

from __future__ import annotations

from typing import List

from themecheck.result import Finding, ScanResult
from themecheck.severity import Severity

from . import FileRule, ScanContext
from .patterns import CSS_VARIABLE, HEX_COLOR, IMPORTANT, LEGACY_ALPHA_COLOR, is_comment_line


class LegacyAlphaColorRule(FileRule):
    """Flag ``rgba()`` calls; colors use ``rgb(r g b / alpha)`` only."""

    name = "legacy-alpha-color"
    ok_message = "No legacy rgba() color syntax"
    kind = "style"

    def check_file(self, path: str, text: str) -> List[Finding]:
        return [
            self.finding(
                Severity.ERROR,
                "Legacy rgba() syntax; use rgb(r g b / alpha) instead",
                path,
                number,
            )
            for number, line in enumerate(text.splitlines(), start=1)
            if LEGACY_ALPHA_COLOR.search(line)
        ]


class HardcodedHexColorRule(FileRule):
    name = "hardcoded-hex-color"
    ok_message = "No hardcoded hex colors"
    kind = "style"

    def check_file(self, path: str, text: str) -> List[Finding]:
        findings: List[Finding] = []
        for number, line in enumerate(text.splitlines(), start=1):
            match = HEX_COLOR.search(line)
            if not match or CSS_VARIABLE.search(line) or is_comment_line(line):
                continue
            findings.append(
                self.finding(
                    Severity.WARNING,
                    f"Hardcoded color {match.group(0)}; prefer a color variable such as var(--primary)",
                    path,
                    number,
                )
            )
        return findings


class ExcessImportantRule(FileRule):
    name = "excess-important"
    ok_message = "!important usage within limits"
    kind = "style"

    def __init__(self, threshold: int = 10) -> None:
        self.threshold = threshold

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        self.threshold = context.config.important_threshold
        super().scan(context, result)

    def check_file(self, path: str, text: str) -> List[Finding]:
        count = len(IMPORTANT.findall(text))
        if count <= self.threshold:
            return []
        return [
            self.finding(
                Severity.WARNING,
                f"{count} uses of !important (limit {self.threshold}); raise selector specificity instead",
                path,
            )
        ]
