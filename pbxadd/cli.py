"""Command line entry point for adding files to an Xcode project."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .project import PbxProject

__all__ = ["Options", "parse_options", "main"]

VERSION = "2.0.0"

_STARS = "***************************************************"
USAGE = "\n".join(
    [
        "usage: PBXProject [-v] [<path>] [-a addFile=value] [-o output]",
        "",
        "These are common PBXProject commands used in various situations:",
        "",
        f"PBXProject version: {VERSION}",
        "",
        "(*_*).oO Hi How to use option see the bellow ",
        "",
        _STARS,
        "",
        "-v:  display PBXProject version number",
        "-o:  output result",
        "-a:  add File or directory",
        "",
        _STARS,
        "",
        "Best Regars !",
        "",
    ]
)


@dataclass
class Options:
    """Flags given on the command line."""

    output: bool = False
    overwrite: bool = False
    version: bool = False
    add_file: str = ""


def parse_options(argv: list[str]) -> Options:
    """Scan every argument for the known flags.

    Raises ValueError if ``-a`` is not followed by a value.
    """
    options = Options()
    for index, arg in enumerate(argv):
        if arg == "-o":
            options.output = True
        elif arg == "-w":
            options.overwrite = True
        elif arg == "-v":
            options.version = True
        elif arg == "-a":
            if index + 1 >= len(argv):
                raise ValueError("option -a requires a value")
            options.add_file = argv[index + 1]
    return options


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except ValueError as exc:
        print(f"PBXProject: {exc}", file=sys.stderr)
        return 2

    if not args:
        print(USAGE)
    elif options.version:
        print(f"PBXProject version: {VERSION}")
    elif options.add_file:
        project = PbxProject(args[0], is_output=options.output)
        try:
            project.add(options.add_file)
        except OSError as exc:
            print(f"PBXProject: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())