"""Run the rule catalogue over a theme and report the outcome."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from .config import RunConfig
from .console import Console
from .result import Finding, ScanResult, format_summary
from .rules import Rule, ScanContext
from .rules.metadata import RequiredMetadataRule, SettingsUxRule
from .rules.scripts import DeprecatedWidgetRule, OwnershipTagRule, TemplateOverrideRule
from .rules.styles import ExcessImportantRule, HardcodedHexColorRule, LegacyAlphaColorRule
from .rules.tooling import DelegatedToolRule, ToolDependencyRule
from .severity import Severity
from .tools import ExternalTool, ToolSpec, default_tool_specs

logger = logging.getLogger(__name__)

Section = Tuple[str, List[Rule]]


class CheckRunner:
    """Execute every check in a fixed order and produce one report.

    ``tools`` maps a tool name to an ``ExternalTool`` used instead of the
    subprocess-backed default, which is how tests avoid real linters.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        tools: Optional[Mapping[str, ExternalTool]] = None,
        tool_specs: Optional[Sequence[ToolSpec]] = None,
    ) -> None:
        self.console = console or Console()
        self.tools = dict(tools or {})
        self.tool_specs = tool_specs

    def sections(self, config: RunConfig) -> List[Section]:
        specs = self.tool_specs or default_tool_specs(config.styles_dir, config.scripts_dir)
        return [
            (
                f"Styles ({config.styles_dir}/)",
                [LegacyAlphaColorRule(), HardcodedHexColorRule(), ExcessImportantRule()],
            ),
            (
                f"Scripts ({config.scripts_dir}/)",
                [DeprecatedWidgetRule(), TemplateOverrideRule(), OwnershipTagRule()],
            ),
            ("Metadata", [RequiredMetadataRule()]),
            ("Settings", [SettingsUxRule()]),
            (
                "Formatting and linting" + (" (fix mode)" if config.fix else ""),
                [ToolDependencyRule(), *(DelegatedToolRule(spec, self.tools.get(spec.name)) for spec in specs)],
            ),
        ]

    def run(self, config: RunConfig) -> ScanResult:
        result = ScanResult()
        try:
            context = ScanContext.discover(config)
        except OSError as exc:
            context = ScanContext(config=config)
            result.add_finding(
                Finding(rule="discover", severity=Severity.ERROR, message=f"Could not list theme files: {exc}")
            )
            self.console.finding(result.findings[-1])
        logger.debug(
            "Discovered %d style and %d script files under %s",
            len(context.style_files),
            len(context.script_files),
            config.root,
        )

        for title, rules in self.sections(config):
            self.console.header(title)
            ran = False
            for rule in rules:
                applies = getattr(rule, "applies", None)
                if applies is not None and not applies(context):
                    continue
                ran = True
                self._run_rule(rule, context, result)
            if not ran:
                self.console.success("Nothing to check")

        if context.unreadable:
            self.console.header("Unreadable files")
            for path, reason in sorted(context.unreadable.items()):
                finding = Finding(
                    rule="read",
                    severity=Severity.WARNING,
                    message=f"Could not read file: {reason}",
                    path=context.relpath(path),
                )
                result.add_finding(finding)
                self.console.finding(finding)

        self.console.summary(format_summary(result), result.passed)
        return result

    def _run_rule(self, rule: Rule, context: ScanContext, result: ScanResult) -> None:
        mark = len(result.findings)
        try:
            rule.scan(context, result)
        except Exception as exc:  # pylint: disable=broad-except
            logger.debug("Rule %s raised", rule.name, exc_info=True)
            result.add_finding(
                Finding(
                    rule=rule.name,
                    severity=Severity.ERROR,
                    message=f"Check '{rule.name}' crashed: {exc}",
                )
            )

        new = result.since(mark)
        for finding in new:
            self.console.finding(finding)
        if not new and rule.ok_message:
            self.console.success(rule.ok_message)


def run_checks(config: RunConfig, console: Optional[Console] = None) -> ScanResult:
    """Run all checks with the default tools."""

    return CheckRunner(console=console).run(config)
