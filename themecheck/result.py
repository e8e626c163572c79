"""Core result data structures for the checker."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

from .severity import Severity


@dataclass(frozen=True)
class Finding:
    """Capture a single rule evaluation result."""

    rule: str
    severity: Severity
    message: str
    path: Optional[str] = None
    line: Optional[int] = None
    detail: Optional[str] = None

    @property
    def location(self) -> Optional[str]:
        if self.path is None:
            return None
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    errors: int = 0
    warnings: int = 0
    info: int = 0

    def increment(self, severity: Severity) -> None:
        if severity is Severity.ERROR:
            self.errors += 1
        elif severity is Severity.WARNING:
            self.warnings += 1
        else:
            self.info += 1

    def to_dict(self) -> Dict[str, int]:
        return {"errors": self.errors, "warnings": self.warnings}


@dataclass
class ScanResult:
    """Accumulate findings for one run and decide its exit status."""

    summary: Summary = field(default_factory=Summary)
    findings: List[Finding] = field(default_factory=list)

    @property
    def errors(self) -> int:
        return self.summary.errors

    @property
    def warnings(self) -> int:
        return self.summary.warnings

    @property
    def passed(self) -> bool:
        return self.summary.errors == 0

    def add_finding(self, finding: Finding) -> None:
        self.summary.increment(finding.severity)
        self.findings.append(finding)

    def extend(self, findings) -> None:
        for finding in findings:
            self.add_finding(finding)

    def since(self, mark: int) -> List[Finding]:
        """Return the findings recorded after ``mark`` findings existed."""

        return self.findings[mark:]

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "findings": [finding.to_dict() for finding in self.findings],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        return 0 if self.passed else 1


def format_summary(result: ScanResult) -> str:
    """Create the one-line count summary printed at the end of a run."""

    return f"Summary: {result.errors} error(s), {result.warnings} warning(s)"
