# pbxadd

`pbxadd` adds files and whole directories to an Xcode project. It edits the
project's `project.pbxproj` file in place. It scans the path you give it and
inserts the matching entries into the project file:

- a `PBXFileReference` line for every file and for every bundle-like directory
  (`.framework`, `.bundle`, `.xcodeproj`, `.xcassets`),
- one `PBXGroup` for each plain directory, following the directory tree,
- a `PBXBuildFile` line for every file that takes part in a build, and an entry
  in a build phase chosen by extension:
  - Sources: `.m`, `.mm`, `.cpp`, `.c`, `.cc`, `.swift`
  - Frameworks: `.framework`, `.a`, `.tbd`
  - Resources: every other file except the headers `.h` and `.hpp`, and
    `.xcassets` catalogues
- `PBXVariantGroup` entries for the contents of `.lproj` localisation folders,
- a `PBXContainerItemProxy` section for each nested `.xcodeproj`.

The top-level group that is added goes under the project's main group.
Entries whose names start with `.DS_Store` or `.git` are skipped. Each new
object gets a random 24-character upper-case hexadecimal identifier.

## Installation

```
pip install .
```

## Command line

```
pbxadd <path> -a <file-or-directory> [-o]
pbxadd -v
pbxadd
```

- `<path>` is the `.xcodeproj` directory. It must be the first argument.
- `-a <file-or-directory>` adds that file or directory to
  `<path>/project.pbxproj`.
- `-o` also prints the rewritten project file to standard output.
- `-v` prints the version number.
- `-w` is accepted and does nothing.
- Run it with no arguments to see the usage text.

Exit status: `0` on success. `2` if `-a` has no value after it. `1` if the
project file cannot be read or written.

Example:

```
pbxadd MyApp.xcodeproj -a Sources/Networking -o
```

This rewrites `MyApp.xcodeproj/project.pbxproj` so that it includes everything
found under `Sources/Networking`.

## Library use

```python
from pbxadd.project import PbxProject

project = PbxProject("MyApp.xcodeproj", is_output=False)
new_text = project.add("Sources/Networking")
```

`PbxProject.add` returns the new text of the project file. The file has
already been saved when it returns. The lower-level pieces can be used on
their own:

- `pbxadd.parser.ProjectParser(path).parse()` reads a project file. It sets
  `main_group` to the main group identifier and records the identifiers it
  finds in the build file and file reference sections.
- `pbxadd.create.ObjectCollector().collect(path)` walks a path. It gathers
  the lines to insert in `groups`, `references`, `builds`, `sources`,
  `frameworks`, `resources`, `variants` and `containers`. The module also
  has the functions that format each kind of entry, such as `build_file`,
  `file_reference`, `group` and `variant_group`, and extension checks such
  as `is_source_file`.
- `pbxadd.writer.ProjectWriter(path, main_uuid=..., parent_group=...).rewrite(collector)`
  inserts a collector's entries into the file, saves it and returns the text.
- `pbxadd.ids` has `random_id()` and `UuidRegistry`. The registry gives each
  path a stable identifier within one run. `get_registry()` returns the shared
  instance.
- `pbxadd.util` has the path and string helpers.

## Limitations

- The project file is edited line by line by matching section markers. It is
  not fully parsed. A file whose layout differs from what Xcode writes may not
  be updated correctly.
- Nothing is checked for duplicates. Adding the same path twice adds its
  entries twice.
- A `PBXVariantGroup` section is always inserted after the `PBXProject`
  section, even when the file already has one.
- Every build file comment names the Sources phase, and every file reference
  carries `fileEncoding = 4;`, whatever the file's type.
- The file is overwritten in place. No backup is made, and entries cannot be
  removed.

## Running the tests

```
pip install .[test]
pytest
```