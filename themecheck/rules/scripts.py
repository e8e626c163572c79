"""Checks over the theme's JavaScript and Glimmer component files."""

from __future__ import annotations

from typing import List

from themecheck.result import Finding, ScanResult
from themecheck.severity import Severity

from . import FileRule, ScanContext
from .patterns import (
    DEPRECATED_WIDGET_APIS,
    MODIFY_CLASS,
    OWNERSHIP_TAG,
    TEMPLATE_OVERRIDE_APIS,
    matched_labels,
)


class DeprecatedWidgetRule(FileRule):
    name = "deprecated-widget"
    ok_message = "No deprecated widget APIs"
    kind = "script"

    def check_file(self, path: str, text: str) -> List[Finding]:
        labels = matched_labels(DEPRECATED_WIDGET_APIS, text)
        if not labels:
            return []
        return [
            self.finding(
                Severity.WARNING,
                f"Deprecated widget API ({', '.join(labels)}); migrate to Glimmer components",
                path,
            )
        ]


class TemplateOverrideRule(FileRule):
    name = "template-override"
    ok_message = "No template overrides"
    kind = "script"

    def check_file(self, path: str, text: str) -> List[Finding]:
        labels = matched_labels(TEMPLATE_OVERRIDE_APIS, text)
        if not labels:
            return []
        return [
            self.finding(
                Severity.WARNING,
                f"Override-style API ({', '.join(labels)}); render into plugin outlets "
                "with api.renderInOutlet or use value transformers instead",
                path,
            )
        ]


class OwnershipTagRule:
    """Require ``pluginId`` somewhere when ``api.modifyClass`` is used.

    Evaluated over the whole script tree: a single tag anywhere satisfies
    every call.
    """

    name = "ownership-tag"
    ok_message = "modifyClass calls carry a pluginId"

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        uses_modify_class = False
        declares_tag = False
        for path in context.script_files:
            text = context.read(path)
            if text is None:
                continue
            uses_modify_class = uses_modify_class or bool(MODIFY_CLASS.search(text))
            declares_tag = declares_tag or OWNERSHIP_TAG in text

        if uses_modify_class and not declares_tag:
            result.add_finding(
                Finding(
                    rule=self.name,
                    severity=Severity.ERROR,
                    message=f"api.modifyClass is used but no {OWNERSHIP_TAG} is declared; "
                    f"pass {{ {OWNERSHIP_TAG}: \"<theme-name>\" }} to every modifyClass call",
                )
            )
