"""Utility helpers for the checker."""

from .fileio import read_yaml_file, read_text_file
from .code import iter_code_files
from .process import run_command

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "iter_code_files",
    "run_command",
]
