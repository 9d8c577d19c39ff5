"""Adding files and directories to an Xcode project."""

from __future__ import annotations

from dataclasses import dataclass

from .create import ObjectCollector
from .ids import UuidRegistry, get_registry
from .parser import ProjectParser
from .writer import ProjectWriter

__all__ = ["PbxProject"]

PROJECT_FILE = "project.pbxproj"


@dataclass
class PbxProject:
    """An .xcodeproj bundle whose project file can be extended."""

    xcodeproj: str
    is_output: bool = False
    registry: UuidRegistry | None = None

    @property
    def project_file(self) -> str:
        """Path of the project.pbxproj file inside the bundle."""
        return f"{self.xcodeproj}/{PROJECT_FILE}"

    def add(self, add_file: str) -> str:
        """Add a file or directory to the project and return the new text.

        Raises OSError if the project file cannot be read or written.
        """
        registry = self.registry if self.registry is not None else get_registry()
        parser = ProjectParser(self.project_file, registry)
        collector = ObjectCollector(registry=registry)
        parser.parse()
        collector.collect(add_file)
        writer = ProjectWriter(
            self.project_file,
            is_output=self.is_output,
            main_uuid=parser.main_group,
            parent_group=collector.parent_path,
        )
        return writer.rewrite(collector)