"""Checks over the root-level ``about.json`` and ``settings.yml`` files.

Both files are searched as plain text, not parsed, so a malformed file is
still checked for the phrases below.
"""

from __future__ import annotations

from typing import List

from themecheck.result import Finding, ScanResult
from themecheck.severity import Severity

from . import ScanContext
from .patterns import (
    CATEGORY_LIST_SETTING,
    CATEGORY_LIST_TYPE,
    COMPONENT_TRUE,
    GROUP_LIST_SETTING,
    GROUP_LIST_TYPE,
    MIN_VERSION_KEY,
    has_list_setting,
)

METADATA_FILENAME = "about.json"
SETTINGS_FILENAME = "settings.yml"


class RequiredMetadataRule:
    name = "required-metadata"
    ok_message = f"{METADATA_FILENAME} present and complete"

    def __init__(self) -> None:
        self.ok_message = type(self).ok_message

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        path = context.root / METADATA_FILENAME
        if not path.is_file():
            result.add_finding(
                Finding(
                    rule=self.name,
                    severity=Severity.ERROR,
                    message=f"Missing {METADATA_FILENAME} in the theme root",
                )
            )
            return
        text = context.read(path)
        if text is None:
            self.ok_message = ""
            return
        result.extend(self.check_text(text))

    def check_text(self, text: str) -> List[Finding]:
        findings: List[Finding] = []
        if not MIN_VERSION_KEY.search(text):
            findings.append(
                Finding(
                    rule=self.name,
                    severity=Severity.WARNING,
                    message='about.json has no "minimum_discourse_version"',
                    path=METADATA_FILENAME,
                )
            )
        if not COMPONENT_TRUE.search(text):
            findings.append(
                Finding(
                    rule=self.name,
                    severity=Severity.WARNING,
                    message='about.json does not declare "component": true',
                    path=METADATA_FILENAME,
                )
            )
        return findings


class SettingsUxRule:
    name = "settings-ux"
    ok_message = "List settings declare their list_type"

    def applies(self, context: ScanContext) -> bool:
        return (context.root / SETTINGS_FILENAME).is_file()

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        text = context.read(context.root / SETTINGS_FILENAME)
        if text is not None:
            result.extend(self.check_text(text))

    def check_text(self, text: str) -> List[Finding]:
        findings: List[Finding] = []
        checks = (
            (CATEGORY_LIST_SETTING, CATEGORY_LIST_TYPE, "category", "a category selector"),
            (GROUP_LIST_SETTING, GROUP_LIST_TYPE, "group", "a group selector"),
        )
        for setting, declaration, list_type, widget in checks:
            if has_list_setting(setting, text) and not declaration.search(text):
                findings.append(
                    Finding(
                        rule=self.name,
                        severity=Severity.WARNING,
                        message=f"List setting looks like it holds {list_type} ids; "
                        f"add 'list_type: {list_type}' so admins get {widget}",
                        path=SETTINGS_FILENAME,
                    )
                )
        return findings
