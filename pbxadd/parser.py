"""Reading of the parts of a project.pbxproj file needed for adding files."""

from __future__ import annotations

from pathlib import Path

from . import sections
from .ids import UuidRegistry, get_registry
from .util import split, strip_chars

__all__ = ["ProjectParser", "first_token"]

MAIN_GROUP_KEY = "mainGroup"


def first_token(line: str) -> str:
    """Return the text of ``line`` before its first space."""
    return line.split(" ", 1)[0]


class ProjectParser:
    """Collects object identifiers and the main group of a project file."""

    def __init__(self, path: str | Path, registry: UuidRegistry | None = None):
        self.path = Path(path)
        self.registry = registry if registry is not None else get_registry()
        self.main_group = ""

    def parse(self) -> None:
        """Read the file, recording identifiers and the main group id.

        Raises OSError if the file cannot be read.
        """
        in_build = in_reference = in_project = False
        with self.path.open(encoding="utf-8", newline="") as handle:
            for raw in handle:
                line = raw[:-1] if raw.endswith("\n") else raw

                if line == sections.BEGIN_BUILD_FILE or in_build:
                    in_build = True
                    self.registry.uuid_store.append(first_token(line))
                    if line == sections.END_BUILD_FILE:
                        in_build = False

                if line == sections.BEGIN_FILE_REFERENCE or in_reference:
                    in_reference = True
                    self.registry.uuid_store.append(first_token(line))
                    if line == sections.END_FILE_REFERENCE:
                        in_reference = False

                if line == sections.BEGIN_PROJECT or in_project:
                    in_project = True
                    if MAIN_GROUP_KEY in line:
                        parts = split(line, "=")
                        if len(parts) > 1:
                            self.main_group = strip_chars(parts[1], [";", " "])