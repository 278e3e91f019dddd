# packwiz

A pure-Python library of the rules used to manage Minecraft modpacks whose
mods come from CurseForge and Modrinth. It covers ordering game versions,
computing CurseForge fingerprints, parsing project URLs, choosing files and
versions, and building Modrinth pack manifests. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `packwiz.versions`

This module orders version strings with the FlexVer rules.

- `compare_versions(a, b)` returns -1, 0 or 1. `version_less` and
  `sort_versions` are built on it.
- `dedupe_versions` drops repeated versions and keeps the last occurrence
  of each.
- `is_sorted` checks that no version is followed by a lower one.

It also maintains a pack's list of acceptable game versions:

- `parse_acceptable_versions("1.16.3,1.16.4")` splits a comma separated
  list and removes duplicates.
- `add_acceptable_version` and `remove_acceptable_version` return a new
  sorted list. They raise `AcceptableVersionsError` when the version is
  already present, or when it is missing, respectively.

### `packwiz.murmur2`

This module computes CurseForge file fingerprints.

- `murmur_hash2(data, seed)` is a 32-bit MurmurHash2.
- `normalize` removes tab, newline, carriage return and space bytes.
- `fingerprint(data)` hashes the normalized bytes with seed 1.
- `Murmur2CF` is a hash object that buffers its input. It offers `update`,
  `digest` (4 bytes, big-endian), `hexdigest`, `intdigest` and `reset`.

### `packwiz.cfversions`

This module covers CurseForge names and metadata.

- `get_curseforge_version` maps a Minecraft version to the name CurseForge
  uses. Pre-releases, release candidates and weekly snapshots become names
  such as `"1.19-Snapshot"`. `get_curseforge_versions` does this for a whole
  list.
- `parse_slug_or_url` reads a CurseForge project URL or a bare slug and
  returns a `CurseforgeRef` with `game`, `category`, `slug` and `file_id`.
  Fields the input does not give stay empty.
- `get_path_for_file` gives the path of a project's `.pw.toml` metadata
  file. It uses the default folder for the project's class or category when
  no meta folder is set.
- `map_dep_override` swaps Fabric API and Fabric Language Kotlin
  dependencies for their Quilt equivalents in Quilt packs.
- `CfUpdateData` and `CfExportData` hold update and export metadata. They
  are read with `parse_update_data` and `parse_export_data` and written with
  `to_map`.

### `packwiz.cffiles`

This module chooses CurseForge files. It uses the data classes `ModInfo`,
`FileInfo`, `GameVersionFile` and the `ModloaderType` enum, in which larger
values are preferred.

- `find_latest_file(mod_info, mc_versions, pack_loaders)` returns a tuple of
  `(file_id, file_info_or_None, file_name)`. Later entries of
  `mc_versions` are preferred, then the more preferred loader, then the
  higher file ID. The file ID is 0 when nothing fits.
- `get_search_loader_type`, `filter_loader_type_index`,
  `filter_file_info_loader_index` and `highest_slice_index` are the helpers
  it is built from.
- `project_url(project_id)` gives a project's web page.

### `packwiz.modrinth`

This module covers Modrinth projects.

- `parse_slug_or_url` reads project, version and CDN URLs, or a bare slug,
  into a `ModrinthRef`. It raises `ModrinthError` for an unknown project
  type or a bad URL escape.
- `get_project_type_folder` picks `mods`, `plugins`, `resourcepacks`,
  `shaderpacks` or the datapack folder from the project type and loaders.
- `find_latest_version` picks among `Version` objects. It compares by
  version number (optionally), then by game version, then by loader
  preference (`compare_loader_lists`), then by publication date.
- `get_best_hash` prefers sha512, then sha256, sha1 and murmur2.
- `get_side` and `should_download_on_side` turn a project's client and
  server support into a pack side.
- `map_dep_override` handles Quilt replacements for Modrinth project IDs.
- `search_facets` builds game version facets for a search.

### `packwiz.mrexport`

This module builds `modrinth.index.json` manifests with `Pack` and
`PackFile`. `Pack.to_json()` writes them with 4-space indentation.

- `can_be_included_directly` decides whether a file may be referenced by
  URL. With domain restriction on, it checks the host against an allowed
  list.
- `file_env` gives the client and server environment values for a file.
- `override_folder` gives the overrides folder for a bundled file.
- `pack_dependencies` gives the Minecraft version plus the pack's loader.
- `sort_files` orders files by path.

### `packwiz.mrupdate`

This module checks Modrinth mods for updates.

- `parse_update_data` reads the `mod-id` and `version` keys into
  `MrUpdateData`.
- `check_update(data, file_name, latest)` returns an `UpdateCheck`.
- `primary_file` chooses the file to install from a version.

## Example

```python
from packwiz.cfversions import get_curseforge_version, parse_slug_or_url
from packwiz.murmur2 import fingerprint
from packwiz.versions import sort_versions

get_curseforge_version("1.19-pre1")                  # "1.19-Snapshot"
parse_slug_or_url("jei").slug                        # "jei"
sort_versions(["1.16.10", "1.16.2"])                 # ["1.16.2", "1.16.10"]
fingerprint(b"hello world")
```

## What this package does not do

This package is a library of rules and data models only. It does not do
the following:

- It has no command-line tool.
- It makes no network requests. Project, version and file data from
  CurseForge or Modrinth must be fetched by the caller and passed in as
  `ModInfo`, `FileInfo` or `Version` objects.
- It does not read or write `pack.toml`, index or `.pw.toml` files.
- It does not download files.
- It does not write export archives.
- It does not import CurseForge packs.
- It does not handle GitHub releases or direct download links.