import re

import pytest

from pbxadd import sections
from pbxadd.ids import UuidRegistry
from pbxadd.project import PbxProject

MAIN = "MAINGROUP000000000000000"

SAMPLE = "\n".join(
    [
        "{",
        sections.BEGIN_BUILD_FILE,
        "\t\tAAA /* x.m in Sources */ = {isa = PBXBuildFile; fileRef = CCC; };",
        sections.END_BUILD_FILE,
        "",
        sections.BEGIN_FILE_REFERENCE,
        "\t\tCCC /* x.m */ = {isa = PBXFileReference; path = x.m; };",
        sections.END_FILE_REFERENCE,
        "",
        sections.BEGIN_GROUP,
        f"\t\t{MAIN} = {{",
        "\t\t\tchildren = (",
        "\t\t\t\tCCC /* x.m */,",
        "\t\t\t);",
        "\t\t};",
        sections.END_GROUP,
        "",
        sections.BEGIN_PROJECT,
        "\t\tPPP /* Project object */ = {",
        f"\t\t\tmainGroup = {MAIN};",
        "\t\t};",
        sections.END_PROJECT,
        "",
        sections.BEGIN_RESOURCES_BUILD_PHASE,
        "\t\tRRR /* Resources */ = {",
        "\t\t\tfiles = (",
        "\t\t\t);",
        "\t\t};",
        sections.END_RESOURCES_BUILD_PHASE,
        "",
        sections.BEGIN_SOURCES_BUILD_PHASE,
        "\t\tSSS /* Sources */ = {",
        "\t\t\tfiles = (",
        "\t\t\t);",
        "\t\t};",
        sections.END_SOURCES_BUILD_PHASE,
        "}",
    ]
) + "\n"


@pytest.fixture
def xcodeproj(tmp_path):
    bundle = tmp_path / "App.xcodeproj"
    bundle.mkdir()
    (bundle / "project.pbxproj").write_text(SAMPLE, encoding="utf-8")
    return bundle


@pytest.fixture
def feature(tmp_path):
    folder = tmp_path / "Feature"
    folder.mkdir()
    (folder / "main.m").write_text("int main(void) { return 0; }\n")
    (folder / "icon.png").write_bytes(b"\x89PNG")
    (folder / "util.h").write_text("#pragma once\n")
    return folder


def test_project_file_is_inside_bundle():
    assert PbxProject("App.xcodeproj").project_file == "App.xcodeproj/project.pbxproj"


def test_add_directory_updates_file(xcodeproj, feature):
    project = PbxProject(str(xcodeproj), registry=UuidRegistry())
    result = project.add(str(feature))
    assert (xcodeproj / "project.pbxproj").read_text(encoding="utf-8") == result
    assert re.search(r"files = \(\n\t\t\t\t[0-9A-F]{24} /\* main\.m in Sources \*/,", result)
    assert result.index("/* main.m */ = {isa = PBXFileReference") < result.index(
        sections.END_FILE_REFERENCE
    )


def test_header_is_referenced_but_not_built(xcodeproj, feature):
    result = PbxProject(str(xcodeproj), registry=UuidRegistry()).add(str(feature))
    assert "/* util.h */ = {isa = PBXFileReference" in result
    assert "/* util.h in" not in result


def test_group_for_directory_is_added(xcodeproj, feature):
    registry = UuidRegistry()
    result = PbxProject(str(xcodeproj), registry=registry).add(str(feature))
    group_uuid = registry.by_path[str(feature)]
    entry = f"{group_uuid} /* Feature */ = {{\n\t\tisa = PBXGroup;"
    assert entry in result
    assert result.index(entry) < result.index(sections.END_GROUP)
    assert f"\t\t\tchildren = (\n\t\t\t\t{group_uuid} /* Feature */,\n" in result


def test_add_single_file(xcodeproj, feature):
    result = PbxProject(str(xcodeproj), registry=UuidRegistry()).add(str(feature / "main.m"))
    assert result.count("/* main.m in Sources */ = {isa = PBXBuildFile;") == 1


def test_add_twice_keeps_bundle_path(xcodeproj, feature):
    project = PbxProject(str(xcodeproj), registry=UuidRegistry())
    project.add(str(feature / "main.m"))
    result = project.add(str(feature / "icon.png"))
    assert project.xcodeproj == str(xcodeproj)
    assert "/* icon.png */ = {isa = PBXFileReference" in result


def test_output_printed(xcodeproj, feature, capsys):
    result = PbxProject(str(xcodeproj), is_output=True, registry=UuidRegistry()).add(
        str(feature)
    )
    assert capsys.readouterr().out == result + "\n"


def test_missing_project_raises(tmp_path, feature):
    with pytest.raises(FileNotFoundError):
        PbxProject(str(tmp_path / "None.xcodeproj"), registry=UuidRegistry()).add(str(feature))