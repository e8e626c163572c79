"""Named text patterns used by the rule catalogue.

Each entry is matched against raw file text; rules decide how a match
becomes a finding.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern, Tuple


@dataclass(frozen=True)
class ApiPattern:
    label: str
    regex: Pattern[str]


LEGACY_ALPHA_COLOR = re.compile(r"\brgba\s*\(")
HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b")
CSS_VARIABLE = re.compile(r"var\(\s*--")
COMMENT_OPENERS = ("//", "/*")
IMPORTANT = re.compile(r"!\s*important\b", re.IGNORECASE)

DEPRECATED_WIDGET_APIS: Tuple[ApiPattern, ...] = (
    ApiPattern("createWidget", re.compile(r"\bcreateWidget\s*\(")),
    ApiPattern("decorateWidget", re.compile(r"\bdecorateWidget\s*\(")),
    ApiPattern("reopenWidget", re.compile(r"\breopenWidget\s*\(")),
)

TEMPLATE_OVERRIDE_APIS: Tuple[ApiPattern, ...] = (
    ApiPattern("Ember.TEMPLATES", re.compile(r"\bEmber\.TEMPLATES\s*\[")),
    ApiPattern("registerConnectorClass", re.compile(r"\bregisterConnectorClass\s*\(")),
    ApiPattern("decoratePluginOutlet", re.compile(r"\bdecoratePluginOutlet\s*\(")),
)

MODIFY_CLASS = re.compile(r"\bapi\.modifyClass(?:Static)?\s*\(")
OWNERSHIP_TAG = "pluginId"

MIN_VERSION_KEY = re.compile(r'"minimum_discourse_version"')
COMPONENT_TRUE = re.compile(r'"component"\s*:\s*true\b')

# A top-level setting whose name contains the hint, followed by an indented
# block declaring ``type: list``.
_LIST_SETTING = r"^(?P<name>[\w-]*{hint}[\w-]*):[ \t]*\n(?P<body>(?:[ \t]+.*(?:\n|$))*)"
CATEGORY_LIST_SETTING = re.compile(_LIST_SETTING.format(hint="categor"), re.MULTILINE)
GROUP_LIST_SETTING = re.compile(_LIST_SETTING.format(hint="group"), re.MULTILINE)
LIST_TYPE_DECLARATION = re.compile(r"^[ \t]+type:[ \t]*list[ \t]*$", re.MULTILINE)
CATEGORY_LIST_TYPE = re.compile(r"list_type:[ \t]*category\b")
GROUP_LIST_TYPE = re.compile(r"list_type:[ \t]*group\b")


def is_comment_line(line: str) -> bool:
    return line.lstrip().startswith(COMMENT_OPENERS)


def matched_labels(patterns: Tuple[ApiPattern, ...], text: str) -> list[str]:
    return [pattern.label for pattern in patterns if pattern.regex.search(text)]


def has_list_setting(pattern: Pattern[str], text: str) -> bool:
    """Return True if any setting matching ``pattern`` is declared ``type: list``."""

    return any(LIST_TYPE_DECLARATION.search(match.group("body")) for match in pattern.finditer(text))
