"""Delegate formatting and linting to the theme's JavaScript tooling."""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional

from themecheck.result import Finding, ScanResult
from themecheck.severity import Severity
from themecheck.tools import DEPENDENCY_DIR, CommandTool, ExternalTool, ToolSpec

from . import ScanContext

logger = logging.getLogger(__name__)


def dependencies_installed(context: ScanContext) -> bool:
    return (context.root / DEPENDENCY_DIR).is_dir()


class ToolDependencyRule:
    """Emit one warning when the tooling dependencies are not installed."""

    name = "tool-dependencies"
    ok_message = f"{DEPENDENCY_DIR} present"

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        if dependencies_installed(context):
            return
        result.add_finding(
            Finding(
                rule=self.name,
                severity=Severity.WARNING,
                message=f"{DEPENDENCY_DIR} not found; skipping stylelint, prettier and eslint "
                "(run 'pnpm install' to enable them)",
            )
        )


class DelegatedToolRule:
    """Run one external tool in check or fix mode and turn its exit code into findings."""

    def __init__(self, spec: ToolSpec, tool: Optional[ExternalTool] = None) -> None:
        self.spec = spec
        self.tool = tool
        self.name = spec.name
        self.skip_reason: Optional[str] = None

    @property
    def ok_message(self) -> str:
        if self.skip_reason:
            return f"{self.spec.name} skipped: {self.skip_reason}"
        return f"{self.spec.name} passed"

    def applies(self, context: ScanContext) -> bool:
        return dependencies_installed(context) and self.spec.name not in context.config.skip_tools

    def _targets(self, context: ScanContext) -> List[str]:
        return [target for target in self.spec.targets if (context.root / target.split("/", 1)[0]).exists()]

    def _finding(self, severity: Severity, message: str, detail: Optional[str] = None) -> Finding:
        return Finding(rule=self.name, severity=severity, message=message, detail=detail)

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        self.skip_reason = None
        if not self.spec.is_configured(context.root):
            result.add_finding(
                self._finding(
                    Severity.WARNING,
                    f"No {self.spec.name} configuration found "
                    f"({', '.join(self.spec.config_markers[:2])}, ...); skipping {self.spec.name}",
                )
            )
            return

        targets = self._targets(context)
        if not targets:
            self.skip_reason = f"nothing to check ({', '.join(self.spec.targets)} not found)"
            logger.debug("%s: %s", self.name, self.skip_reason)
            return

        tool = self.tool or CommandTool(self.spec, context.root, context.config.tool_timeout)
        fix = context.config.fix
        try:
            exit_code, output = tool.fix(targets) if fix else tool.check(targets)
        except subprocess.TimeoutExpired:
            result.add_finding(
                self._finding(
                    Severity.ERROR,
                    f"{self.spec.name} timed out after {context.config.tool_timeout:g}s",
                )
            )
            return
        except OSError as exc:
            result.add_finding(
                self._finding(Severity.WARNING, f"Could not start {self.spec.name}: {exc}")
            )
            return

        if fix:
            if exit_code == 0:
                result.add_finding(self._finding(Severity.INFO, f"{self.spec.name} applied fixes"))
            else:
                result.add_finding(
                    self._finding(
                        Severity.WARNING,
                        f"{self.spec.name} could not fix everything (exit {exit_code})",
                        output,
                    )
                )
            return

        if exit_code != 0:
            result.add_finding(
                self._finding(
                    Severity.ERROR,
                    f"{self.spec.name} failed (exit {exit_code}); run "
                    f"themecheck --fix or: {self.spec.remediation(targets)}",
                    output,
                )
            )
