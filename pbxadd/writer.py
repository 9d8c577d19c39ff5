"""Insertion of collected entries into an existing project.pbxproj file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from . import sections
from .create import ObjectCollector
from .util import strip_chars

__all__ = ["ProjectWriter", "build_phase", "overwrite_value"]

FILES_KEY = "files = ("
CHILDREN_KEY = "children = ("
_GROUP_ID_NOISE = ["\t", " ", "=", "{", "\n"]


def build_phase(values: list[str]) -> str:
    """Join build phase lines with newlines, without a trailing one."""
    return "\n".join(values)


def overwrite_value(values: list[str]) -> str:
    """Join entries, each followed by a newline."""
    return "".join(f"{value}\n" for value in values)


def _read_lines(path: Path) -> list[str]:
    with path.open(encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class ProjectWriter:
    """Rewrites a project file with the entries gathered by a collector."""

    path: str | Path
    is_output: bool = False
    main_uuid: str = ""
    parent_group: str = ""

    def rewrite(self, collector: ObjectCollector) -> str:
        """Insert the collector's entries, save the file and return its text.

        Raises OSError if the file cannot be read or written.
        """
        path = Path(self.path)
        after_build = False
        in_group = in_main_group = False
        in_sources = in_resources = in_frameworks = False
        out: list[str] = []

        for line in _read_lines(path):
            if line == sections.BEGIN_CONTAINER_ITEM_PROXY or after_build:
                after_build = False
                line = "\n" + overwrite_value(collector.containers) + line

            if line == sections.END_BUILD_FILE:
                after_build = True
                line = overwrite_value(collector.builds) + line

            if line == sections.END_FILE_REFERENCE:
                line = overwrite_value(collector.references) + line

            if line == sections.BEGIN_GROUP or in_group:
                in_group = True
                uuid = strip_chars(line, _GROUP_ID_NOISE)
                if uuid == self.main_uuid or in_main_group:
                    in_main_group = True
                    if CHILDREN_KEY in line:
                        in_main_group = False
                        line = f"{line}\n{self.parent_group}"
                if line == sections.END_GROUP:
                    in_group = False
                    line = overwrite_value(collector.groups) + line

            if line == sections.BEGIN_SOURCES_BUILD_PHASE or in_sources:
                in_sources = True
                if FILES_KEY in line:
                    in_sources = False
                    line = f"{line}\n{build_phase(collector.sources)}"

            if line == sections.BEGIN_RESOURCES_BUILD_PHASE or in_resources:
                in_resources = True
                if FILES_KEY in line:
                    in_resources = False
                    line = f"{line}\n{build_phase(collector.resources)}"

            if line == sections.BEGIN_FRAMEWORKS_BUILD_PHASE or in_frameworks:
                in_frameworks = True
                if FILES_KEY in line:
                    in_frameworks = False
                    line = f"{line}\n{build_phase(collector.frameworks)}"

            if line == sections.END_PROJECT:
                line = (
                    f"{line}\n{sections.BEGIN_VARIANT_GROUP}\n"
                    f"{overwrite_value(collector.variants)}\n"
                    f"{sections.END_VARIANT_GROUP}\n\n"
                )

            out.append(line + "\n")

        text = "".join(out)
        if self.is_output:
            print(text, file=sys.stdout)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        return text