"""Creation of project object entries for files and directories to add."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import sections
from .ids import UuidRegistry, get_registry
from .util import (
    escape_code,
    is_directory,
    last_path,
    list_directory,
    path_extension,
    remove_extension,
)

__all__ = [
    "Child",
    "ObjectCollector",
    "container_item_proxy",
    "build_file",
    "file_reference",
    "named_file_reference",
    "group",
    "variant_group",
    "list_children",
    "last_known_file_type",
    "file_encoding",
    "file_type",
    "phase_entry",
    "child_entry",
    "is_source_file",
    "is_bundle_file",
    "is_lib_file",
    "is_header_file",
    "is_lproj_file",
    "is_storyboard_file",
]

XCASSETS_EXTENSION = "xcassets"

LAST_KNOWN_FILE_TYPES = {
    "m": "sourcecode.c.objc;",
    "h": "sourcecode.c.h;",
    "c": "sourcecode.c.c;",
    "cpp": "sourcecode.cpp.cpp;",
    "swift": "sourcecode.swift;",
    "hpp": "sourcecode.cpp.h;",
    "framework": "wrapper.framework;",
    "s": "sourcecode.asm;",
    "a": "archive.ar;",
    "png": "image.png;",
    "jpg": "image.jpeg;",
    "bundle": '"wrapper.plug-in";',
    "plist": "text.plist.xml;",
    "storyboard": "file.storyboard;",
    "xib": "file.xib;",
    "xcassets": "folder.assetcatalog;",
    "json": "text.json;",
    "ttf": "file;",
    "xcodeproj": '"wrapper.pb-project";',
    "pl": "text.script.perl;",
    "pm": "text.script.perl;",
}

SOURCE_EXTENSIONS = frozenset({"m", "mm", "cpp", "c", "cc", "swift"})
BUNDLE_EXTENSIONS = frozenset({"framework", "bundle", "xcodeproj", XCASSETS_EXTENSION})
LIB_EXTENSIONS = frozenset({"framework", "a", "tbd"})
HEADER_EXTENSIONS = frozenset({"h", "hpp"})
SKIPPED_PREFIXES = (".DS_Store", ".git")


@dataclass(frozen=True)
class Child:
    """An entry of a group's children list."""

    uuid: str
    filename: str


def container_item_proxy(
    uuid: str, container_uuid: str, project_name: str, remote_global_id: str
) -> str:
    """Return a whole PBXContainerItemProxy section for a nested project."""
    return (
        f"{sections.BEGIN_CONTAINER_ITEM_PROXY}\n"
        f"\t\t{uuid} /* PBXContainerItemProxy */ = {{\n"
        "\t\t\tisa = PBXContainerItemProxy;\n"
        f"\t\t\tcontainerPortal = {container_uuid} /* {project_name} */;\n"
        "\t\t\tproxyType = 2;\n"
        f"\t\t\tremoteGlobalIDString = {remote_global_id};\n"
        f"\t\t\tremoteInfo = {remove_extension(project_name)};\n"
        "\t\t};\n"
        f"{sections.END_CONTAINER_ITEM_PROXY}"
    )


def build_file(uuid: str, file_name: str, file_ref: str) -> str:
    """Return a PBXBuildFile line."""
    return (
        f"\t\t{uuid} /* {file_name} in {file_type(file_name)} */ = "
        f"{{isa = PBXBuildFile; fileRef = {file_ref} /* {file_name} */; }};"
    )


def file_reference(uuid: str, file_name: str) -> str:
    """Return a PBXFileReference line for a file in its group."""
    return (
        f"\t\t{uuid} /* {file_name} */ = {{isa = PBXFileReference; "
        f"{file_encoding(file_name)} lastKnownFileType = "
        f"{_known_file_type(file_name)} path = {escape_code(file_name)}; "
        'sourceTree = "<group>"; };'
    )


def named_file_reference(
    uuid: str, file_name: str, name: str, last_known_file_type: str
) -> str:
    """Return a PBXFileReference line carrying an explicit name.

    ``last_known_file_type`` is the file whose extension decides the type.
    """
    return (
        f"\t\t{uuid} /* {file_name} */ = {{isa = PBXFileReference; "
        f"{file_encoding(file_name)} lastKnownFileType = "
        f"{_known_file_type(last_known_file_type)} name = {file_name}; "
        f'path = {escape_code(name)}; sourceTree = "<group>"; }};'
    )


def group(uuid: str, parent: str, children: list[Child]) -> str:
    """Return a PBXGroup entry listing ``children``."""
    return (
        f"\t\t{uuid} /* {parent} */ = {{\n"
        "\t\tisa = PBXGroup;\n"
        "\t\t\tchildren = (\n"
        f"{list_children(children)}"
        "\t\t\t);\n"
        f"\t\tpath = {escape_code(parent)};\n"
        '\t\tsourceTree = "<group>";\n'
        "\t\t};\n"
    )


def variant_group(uuid: str, lproj_uuid: str, file_name: str, lproj_name: str) -> str:
    """Return a PBXVariantGroup entry for a localised file."""
    return (
        f"\t\t{uuid} /* {file_name} */ = {{\n"
        "\t\tisa = PBXVariantGroup;\n"
        "\t\t\tchildren = (\n"
        f"\t\t\t\t{lproj_uuid} /* {lproj_name} */,\n"
        "\t\t\t);\n"
        f"\t\t\tname = {file_name};\n"
        '\t\t\tsourceTree = "<group>";\n'
        "\t\t};"
    )


def list_children(children: list[Child]) -> str:
    """Return one children-list line per child, each ending in a newline."""
    return "".join(f"\t\t\t\t{c.uuid} /* {c.filename} */,\n" for c in children)


def _known_file_type(file: str) -> str:
    return LAST_KNOWN_FILE_TYPES.get(path_extension(file)) or "text;"


def last_known_file_type(file: str) -> str:
    """Return the lastKnownFileType value (with ``;``) for a file name."""
    return _known_file_type(file)


def file_encoding(file: str) -> str:
    """Return the fileEncoding attribute; every file is given UTF-8."""
    return "fileEncoding = 4;"


def file_type(file_name: str) -> str:
    """Return the build phase named in a build file comment.

    Every file is reported as belonging to the Sources phase.
    """
    return "Sources"


def phase_entry(uuid: str, file: str) -> str:
    """Return a build phase ``files`` list line."""
    return f"\t\t\t\t{uuid} /* {file} in {file_type(file)} */,"


def child_entry(uuid: str, file: str) -> str:
    """Return a group ``children`` list line."""
    return f"\t\t\t\t{uuid} /* {file} */,"


def is_source_file(path: str) -> bool:
    """Tell whether ``path`` is compiled in the Sources phase."""
    return path_extension(path) in SOURCE_EXTENSIONS


def is_bundle_file(path: str) -> bool:
    """Tell whether ``path`` is a directory treated as a single file."""
    return path_extension(path) in BUNDLE_EXTENSIONS


def is_lib_file(path: str) -> bool:
    """Tell whether ``path`` is a library linked in the Frameworks phase."""
    return path_extension(path) in LIB_EXTENSIONS


def is_header_file(path: str) -> bool:
    """Tell whether ``path`` is a header file."""
    return path_extension(path) in HEADER_EXTENSIONS


def is_lproj_file(path: str) -> bool:
    """Tell whether ``path`` is a localisation directory."""
    return path_extension(path) == "lproj"


def is_storyboard_file(path: str) -> bool:
    """Tell whether ``path`` is a storyboard."""
    return path_extension(path) == "storyboard"


@dataclass
class ObjectCollector:
    """Walks files and directories and gathers the entries to insert."""

    registry: UuidRegistry = field(default_factory=get_registry)
    groups: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)
    builds: list[str] = field(default_factory=list)
    frameworks: list[str] = field(default_factory=list)
    resources: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    containers: list[str] = field(default_factory=list)
    variants: list[str] = field(default_factory=list)
    parent_path: str = ""
    _lproj_map: dict[str, Child] = field(default_factory=dict, repr=False)

    def collect(self, path: str) -> None:
        """Gather entries for ``path``, descending into plain directories."""
        parent_file = last_path(path)
        parent_uuid = self.registry.generate_for(path)
        if not self.parent_path:
            self.parent_path = child_entry(parent_uuid, parent_file)

        entries = list_directory(path)
        if not entries:
            self._add_file(path, self.registry.generate_for(path), check_lproj=False)
            return

        group_children: list[Child] = []
        subdirs: list[str] = []
        for full_path in entries:
            name = last_path(full_path)
            if name.startswith(SKIPPED_PREFIXES):
                continue
            child = Child(self.registry.generate_for(full_path), name)
            if not is_lproj_file(name):
                group_children.append(child)

            if is_directory(full_path):
                self._add_directory(full_path, child, group_children)
                if not is_bundle_file(name):
                    subdirs.append(full_path)
            else:
                self._add_file(full_path, child.uuid, check_lproj=True)

        if not is_lproj_file(parent_file):
            self.groups.append(group(parent_uuid, parent_file, group_children))

        for subdir in subdirs:
            self.collect(subdir)

    def _add_directory(
        self, full_path: str, child: Child, group_children: list[Child]
    ) -> None:
        name = child.filename
        build_uuid = self.registry.new_id()
        if path_extension(name) == XCASSETS_EXTENSION:
            self.resources.append(phase_entry(build_uuid, name))
            self.builds.append(build_file(build_uuid, name, child.uuid))

        if is_lproj_file(name):
            parent_lproj = remove_extension(name)
            for lproj_key in list_directory(full_path):
                storyboard_name = last_path(lproj_key)
                lproj_path = f"{name}/{storyboard_name}"
                lproj_uuid = self.registry.generate_for(lproj_key)
                lproj_child = Child(
                    self.registry.generate_for(lproj_path), last_path(storyboard_name)
                )
                self._lproj_map[lproj_key] = lproj_child
                group_children.append(lproj_child)
                self.references.append(
                    named_file_reference(
                        lproj_uuid, parent_lproj, lproj_path, lproj_child.filename
                    )
                )
                self.variants.append(
                    variant_group(
                        lproj_child.uuid, lproj_uuid, storyboard_name, parent_lproj
                    )
                )

        if is_bundle_file(name):
            self.references.append(file_reference(child.uuid, name))

        if path_extension(name) == "xcodeproj":
            proxy_uuid = self.registry.generate_for(full_path)
            self.containers.append(
                container_item_proxy(proxy_uuid, child.uuid, name, proxy_uuid)
            )

    def _add_file(self, full_path: str, file_uuid: str, *, check_lproj: bool) -> None:
        name = last_path(full_path)
        if not check_lproj or not is_storyboard_file(name):
            self.references.append(file_reference(file_uuid, name))
        build_uuid = self.registry.new_id()

        if check_lproj:
            lproj_child = self._lproj_map.get(full_path)
            if lproj_child is not None and lproj_child.uuid:
                self.builds.append(build_file(build_uuid, name, lproj_child.uuid))
                self.resources.append(phase_entry(build_uuid, name))
                return

        if is_source_file(name):
            self.sources.append(phase_entry(build_uuid, name))
        elif is_lib_file(name):
            self.frameworks.append(phase_entry(build_uuid, name))
        elif not is_header_file(name):
            self.resources.append(phase_entry(build_uuid, name))
        else:
            return
        self.builds.append(build_file(build_uuid, name, file_uuid))