"""External formatters and linters the checker delegates to."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence, Tuple

from .utils import run_command

DEPENDENCY_DIR = "node_modules"


class ExternalTool(Protocol):
    """Opaque CLI with a check mode and a fix mode."""

    def check(self, paths: Sequence[str]) -> Tuple[int, str]:
        """Report problems without touching files."""

    def fix(self, paths: Sequence[str]) -> Tuple[int, str]:
        """Rewrite files in place."""


@dataclass(frozen=True)
class ToolSpec:
    """Describe one delegated tool and when it applies."""

    name: str
    config_markers: Tuple[str, ...]
    check_command: Tuple[str, ...]
    fix_command: Tuple[str, ...]
    targets: Tuple[str, ...]

    def is_configured(self, root: Path) -> bool:
        return any((root / marker).exists() for marker in self.config_markers)

    def remediation(self, targets: Sequence[str]) -> str:
        return shlex.join((*self.fix_command, *targets))


class CommandTool:
    """Run a ``ToolSpec`` through a subprocess in the theme root."""

    def __init__(self, spec: ToolSpec, root: Path, timeout: float) -> None:
        self.spec = spec
        self.root = root
        self.timeout = timeout

    def check(self, paths: Sequence[str]) -> Tuple[int, str]:
        return run_command([*self.spec.check_command, *paths], self.root, self.timeout)

    def fix(self, paths: Sequence[str]) -> Tuple[int, str]:
        return run_command([*self.spec.fix_command, *paths], self.root, self.timeout)


def default_tool_specs(styles_dir: str = "scss", scripts_dir: str = "javascripts") -> Tuple[ToolSpec, ...]:
    """Return stylelint, prettier and eslint in run order."""

    style_glob = f"{styles_dir}/**/*.scss"
    script_glob = f"{scripts_dir}/**/*.{{js,gjs}}"
    return (
        ToolSpec(
            name="stylelint",
            config_markers=(
                "stylelint.config.mjs",
                "stylelint.config.js",
                ".stylelintrc",
                ".stylelintrc.json",
                ".stylelintrc.js",
            ),
            check_command=("npx", "--no-install", "stylelint"),
            fix_command=("npx", "--no-install", "stylelint", "--fix"),
            targets=(style_glob,),
        ),
        ToolSpec(
            name="prettier",
            config_markers=(
                ".prettierrc",
                ".prettierrc.cjs",
                ".prettierrc.json",
                ".prettierrc.js",
                "prettier.config.js",
            ),
            check_command=("npx", "--no-install", "prettier", "--check"),
            fix_command=("npx", "--no-install", "prettier", "--write"),
            targets=(style_glob, script_glob),
        ),
        ToolSpec(
            name="eslint",
            config_markers=(
                "eslint.config.mjs",
                "eslint.config.js",
                ".eslintrc",
                ".eslintrc.js",
                ".eslintrc.cjs",
                ".eslintrc.json",
            ),
            check_command=("npx", "--no-install", "eslint"),
            fix_command=("npx", "--no-install", "eslint", "--fix"),
            targets=(scripts_dir,),
        ),
    )
