import json
import os
import stat
from pathlib import Path

from themecheck import cli
from themecheck.hooks import HOOK_MARKER

THEMES = Path(__file__).resolve().parents[1] / "themes"


def test_cli_flags_legacy_theme_and_writes_json_report(tmp_path, capsys):
    output_path = tmp_path / "report.json"

    exit_code = cli.main(["--root", str(THEMES / "legacy"), "--out", str(output_path)])

    captured = capsys.readouterr()
    assert "Summary: 3 error(s), 5 warning(s)" in captured.out
    assert exit_code == 1
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["summary"] == {"errors": 3, "warnings": 5}
    assert data["passed"] is False
    rules = {finding["rule"] for finding in data["findings"]}
    assert {"legacy-alpha-color", "ownership-tag", "required-metadata", "settings-ux"} <= rules


def test_cli_passes_on_clean_theme(capsys):
    exit_code = cli.main(["--root", str(THEMES / "clean")])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "[ERROR]" not in captured.out
    assert "Summary: 0 error(s), 1 warning(s)" in captured.out


def test_cli_reports_invalid_config(tmp_path, capsys):
    (tmp_path / ".themecheck.yml").write_text("nonsense: true\n", encoding="utf-8")

    exit_code = cli.main(["--root", str(tmp_path)])

    assert exit_code == 1
    assert "unknown setting 'nonsense'" in capsys.readouterr().out


def test_install_hook_writes_executable_pre_push(tmp_path, capsys):
    (tmp_path / ".git" / "hooks").mkdir(parents=True)

    exit_code = cli.main(["--root", str(tmp_path), "--install-hook"])

    hook = tmp_path / ".git" / "hooks" / "pre-push"
    assert exit_code == 0
    content = hook.read_text(encoding="utf-8")
    assert HOOK_MARKER in content
    assert "-m themecheck" in content
    if os.name == "posix":
        assert hook.stat().st_mode & stat.S_IXUSR
    assert "Installed pre-push hook" in capsys.readouterr().out


def test_install_hook_keeps_foreign_hook_unless_forced(tmp_path):
    hooks = tmp_path / ".git" / "hooks"
    hooks.mkdir(parents=True)
    (hooks / "pre-push").write_text("#!/bin/sh\nmake test\n", encoding="utf-8")

    assert cli.main(["--root", str(tmp_path), "--install-hook"]) == 1
    assert "make test" in (hooks / "pre-push").read_text(encoding="utf-8")

    assert cli.main(["--root", str(tmp_path), "--install-hook", "--force"]) == 0
    assert HOOK_MARKER in (hooks / "pre-push").read_text(encoding="utf-8")


def test_install_hook_requires_git_checkout(tmp_path, capsys):
    assert cli.main(["--root", str(tmp_path), "--install-hook"]) == 1
    assert "not the top of a git checkout" in capsys.readouterr().out
