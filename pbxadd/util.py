"""Path and string helpers used when building project entries."""

from __future__ import annotations

import os
import stat

__all__ = [
    "list_directory",
    "is_directory",
    "path_extension",
    "extension",
    "last_path",
    "strip_chars",
    "remove_chars",
    "remove_extension",
    "split",
    "escape_code",
    "replace_character",
]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def last_path(path: str) -> str:
    """Return the last non-empty ``/``-separated component of ``path``."""
    parts = split(path, "/")
    return parts[-1] if parts else ""


def list_directory(path: str) -> list[str]:
    """Return ``path/name`` for every entry of the directory, sorted by name.

    A directory that cannot be read yields an empty list.
    """
    try:
        names = os.listdir(path)
    except OSError:
        return []
    return [
        f"{path}/{name}"
        for name in sorted(names)
        if last_path(f"{path}/{name}") not in (".", "..")
    ]


def is_directory(path: str) -> bool:
    """Tell whether ``path`` is a directory other than ``.`` or ``..``."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return stat.S_ISDIR(mode) and last_path(path) not in (".", "..")


def extension(path: str) -> str:
    """Return what follows the last ``.`` in ``path``, or ``""``."""
    _, dot, ext = path.rpartition(".")
    return ext if dot else ""


def path_extension(path: str) -> str:
    """Return the extension of a file path; directories have none."""
    parts = split(path, "/")
    if not parts or is_directory(path):
        return ""
    return extension(parts[-1])


def remove_chars(base: str, remove: str) -> str:
    """Delete every character of ``base`` that occurs in ``remove``."""
    return "".join(ch for ch in base if ch not in remove)


def strip_chars(base: str, removes: list[str]) -> str:
    """Apply :func:`remove_chars` for each character set in ``removes``."""
    for remove in removes:
        base = remove_chars(base, remove)
    return base


def remove_extension(file_name: str) -> str:
    """Return the first non-empty ``.``-separated piece of ``file_name``."""
    parts = split(file_name, ".")
    return parts[0] if parts else ""


def escape_code(name: str) -> str:
    """Quote a name for use as a property value in a project file.

    A name that already holds a double quote only gets a closing quote added.
    """
    if '"' in name:
        return name + '"'
    return f'"{name}"'


def replace_character(base: str, replace: str) -> str:
    """Return ``base`` with the span covering its whole content replaced by ``replace``."""
    return base.replace(base, replace, 1)