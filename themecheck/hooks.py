"""Install themecheck as a git pre-push hook."""

from __future__ import annotations

import shlex
import stat
import sys
from pathlib import Path

HOOK_MARKER = "# installed by themecheck"


class HookError(RuntimeError):
    pass


def render_hook(python: str = sys.executable) -> str:
    return "\n".join(
        [
            "#!/bin/sh",
            HOOK_MARKER,
            'ROOT="$(git rev-parse --show-toplevel)" || exit 1',
            f'exec {shlex.quote(python)} -m themecheck --root "$ROOT"',
            "",
        ]
    )


def install_pre_push_hook(root: Path, force: bool = False) -> Path:
    """Write ``.git/hooks/pre-push`` under ``root`` and return its path.

    An existing hook not written by themecheck is left alone unless ``force``.
    """

    git_dir = Path(root) / ".git"
    if not git_dir.is_dir():
        raise HookError(f"{root} is not the top of a git checkout (no .git directory)")

    hook_path = git_dir / "hooks" / "pre-push"
    if hook_path.exists() and not force:
        existing = hook_path.read_text(encoding="utf-8", errors="replace")
        if HOOK_MARKER not in existing:
            raise HookError(f"{hook_path} already exists; rerun with --force to replace it")

    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(render_hook(), encoding="utf-8")
    mode = hook_path.stat().st_mode
    hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path
