"""Source tree helper utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


def iter_code_files(root_paths: Iterable[Path], extensions: tuple[str, ...]) -> List[Path]:
    """Return files beneath the provided directories, sorted for stable reports."""

    found: List[Path] = []
    for root in root_paths:
        root = Path(root)
        if not root.is_dir():
            continue
        for path in root.rglob("*"):
            if path.suffix in extensions and path.is_file():
                found.append(path)
    return sorted(found)
