"""Rule registry for the checker."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple

from themecheck.config import RunConfig
from themecheck.result import Finding, ScanResult
from themecheck.severity import Severity
from themecheck.utils import iter_code_files, read_text_file

STYLE_EXTENSIONS = (".scss",)
SCRIPT_EXTENSIONS = (".js", ".gjs")


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    name: str
    ok_message: str

    def scan(self, context: "ScanContext", result: ScanResult) -> None:
        """Analyze the provided context and append findings to ``result``."""


@dataclass
class ScanContext:
    """Bundle inputs shared across rules."""

    config: RunConfig
    style_files: Tuple[Path, ...] = ()
    script_files: Tuple[Path, ...] = ()
    unreadable: Dict[Path, str] = field(default_factory=dict)
    _cache: Dict[Path, Optional[str]] = field(default_factory=dict, repr=False)

    @classmethod
    def discover(cls, config: RunConfig) -> "ScanContext":
        return cls(
            config=config,
            style_files=tuple(iter_code_files([config.styles_path], STYLE_EXTENSIONS)),
            script_files=tuple(iter_code_files([config.scripts_path], SCRIPT_EXTENSIONS)),
        )

    @property
    def root(self) -> Path:
        return self.config.root

    def relpath(self, path: Path) -> str:
        try:
            return Path(path).relative_to(self.root).as_posix()
        except ValueError:
            return Path(path).as_posix()

    def read(self, path: Path) -> Optional[str]:
        """Return file text, or ``None`` (remembered in ``unreadable``) on OS errors."""

        if path not in self._cache:
            try:
                self._cache[path] = read_text_file(path)
            except OSError as exc:
                self.unreadable[path] = str(exc)
                self._cache[path] = None
        return self._cache[path]


class FileRule:
    """Base for rules that look at one file at a time."""

    name = ""
    ok_message = ""
    kind = "style"

    def files(self, context: ScanContext) -> Tuple[Path, ...]:
        return context.style_files if self.kind == "style" else context.script_files

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        for path in self.files(context):
            text = context.read(path)
            if text is None:
                continue
            result.extend(self.check_file(context.relpath(path), text))

    def check_file(self, path: str, text: str) -> List[Finding]:
        raise NotImplementedError

    def finding(self, severity: Severity, message: str, path: Optional[str] = None, line: Optional[int] = None) -> Finding:
        return Finding(rule=self.name, severity=severity, message=message, path=path, line=line)
