"""CurseForge version naming, URL parsing and update metadata."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from packwiz.versions import version_less

META_EXTENSION = ".pw.toml"

_UINT32_MAX = 0xFFFFFFFF

_SNAPSHOT_VERSION = re.compile(r"(?:Snapshot )?(\d+)w0?(0|[1-9]\d*)([a-z])", re.ASCII)

_SNAPSHOT_NAMES = ("-pre", " Pre-Release ", " Pre-release ", "-rc")

_URL_PATTERNS = (
    re.compile(
        r"^https?://(?P<game>minecraft)\.curseforge\.com/projects/(?P<slug>[^/]+)"
        r"(?:/(?:files|download)/(?P<fileID>\d+))?",
        re.ASCII,
    ),
    re.compile(
        r"^https?://(?:www\.|beta\.|legacy\.)?curseforge\.com/(?P<game>[^/]+)/(?P<category>[^/]+)"
        r"/(?P<slug>[^/]+)(?:/(?:files|download)/(?P<fileID>\d+))?",
        re.ASCII,
    ),
    re.compile(r"^(?P<slug>[a-z][\da-z\-_]{0,127})$", re.ASCII),
)

# Default folders per game ID, keyed by class or category ID
_DEFAULT_FOLDERS: dict[int, dict[int, str]] = {
    432: {  # Minecraft
        5: "plugins",  # Bukkit plugins
        12: "resourcepacks",
        6: "mods",
        17: "saves",
    },
}


def _snapshot_family(year: int, week: int) -> str | None:
    if year >= 22 and week >= 11:
        return "1.19-Snapshot"
    if year == 21 and week >= 37 or year >= 22:
        return "1.18-Snapshot"
    if year == 20 and week >= 45 or year == 21 and week <= 20:
        return "1.17-Snapshot"
    if year == 20 and week >= 6:
        return "1.16-Snapshot"
    if year == 19 and week >= 34:
        return "1.15-Snapshot"
    if year == 18 and week >= 43 or year == 19 and week <= 14:
        return "1.14-Snapshot"
    if year == 18 and 30 <= week <= 33:
        return "1.13.1-Snapshot"
    if year == 17 and week >= 43 or year == 18 and week <= 22:
        return "1.13-Snapshot"
    if year == 17 and week == 31:
        return "1.12.1-Snapshot"
    if year == 17 and 6 <= week <= 18:
        return "1.12-Snapshot"
    if year == 16 and week == 50:
        return "1.11.1-Snapshot"
    if year == 16 and 32 <= week <= 44:
        return "1.11-Snapshot"
    if year == 16 and 20 <= week <= 21:
        return "1.10-Snapshot"
    if year == 16 and 14 <= week <= 15:
        return "1.9.3-Snapshot"
    if year == 15 and week >= 31 or year == 16 and week <= 7:
        return "1.9-Snapshot"
    if year == 14 and 2 <= week <= 34:
        return "1.8-Snapshot"
    if year == 13 and 47 <= week <= 49:
        return "1.7.4-Snapshot"
    if year == 13 and 36 <= week <= 43:
        return "1.7.2-Snapshot"
    if year == 13 and 16 <= week <= 26:
        return "1.6-Snapshot"
    if year == 13 and 11 <= week <= 12:
        return "1.5.1-Snapshot"
    if year == 13 and 1 <= week <= 10:
        return "1.5-Snapshot"
    if year == 12 and 49 <= week <= 50:
        return "1.4.6-Snapshot"
    if year == 12 and 32 <= week <= 42:
        return "1.4.2-Snapshot"
    if year == 12 and 15 <= week <= 30:
        return "1.3.1-Snapshot"
    if year == 12 and 3 <= week <= 8:
        return "1.2.1-Snapshot"
    if year == 11 and week >= 47 or year == 12 and week <= 1:
        return "1.1-Snapshot"
    return None


def get_curseforge_version(mc_version: str) -> str:
    """The game version name CurseForge uses for a Minecraft version."""
    for name in _SNAPSHOT_NAMES:
        index = mc_version.find(name)
        if index > -1:
            return mc_version[:index] + "-Snapshot"

    match = _SNAPSHOT_VERSION.search(mc_version)
    if match is None:
        return mc_version
    family = _snapshot_family(int(match.group(1)), int(match.group(2)))
    return mc_version if family is None else family


def get_curseforge_versions(mc_versions: Iterable[str]) -> list[str]:
    """CurseForge names for each of the given Minecraft versions."""
    return [get_curseforge_version(v) for v in mc_versions]


@dataclass(frozen=True)
class CurseforgeRef:
    """What a CurseForge URL or slug refers to; empty fields were not given."""

    game: str = ""
    category: str = ""
    slug: str = ""
    file_id: int = 0


def parse_slug_or_url(url: str) -> CurseforgeRef:
    """Parse a CurseForge project URL or a bare slug.

    Input that matches neither gives an empty reference.
    """
    for pattern in _URL_PATTERNS:
        match = pattern.search(url)
        if match is None:
            continue
        groups = match.groupdict()
        file_id = 0
        raw_id = groups.get("fileID") or ""
        if raw_id:
            file_id = int(raw_id)
            if file_id > _UINT32_MAX:
                raise ValueError(f"file ID {raw_id} is out of range")
        return CurseforgeRef(
            game=groups.get("game") or "",
            category=groups.get("category") or "",
            slug=groups.get("slug") or "",
            file_id=file_id,
        )
    return CurseforgeRef()


def _join(*parts: str) -> str:
    present = [p for p in parts if p]
    if not present:
        return ""
    return os.path.normpath(os.sep.join(present))


def get_path_for_file(
    game_id: int,
    class_id: int,
    category_id: int,
    slug: str,
    meta_folder: str = "",
    meta_folder_base: str = "",
) -> str:
    """Path of the metadata file for a CurseForge project."""
    file_name = slug + META_EXTENSION
    if not meta_folder:
        folders = _DEFAULT_FOLDERS.get(game_id, {})
        if class_id in folders:
            return _join(meta_folder_base, folders[class_id], file_name)
        if category_id in folders:
            return _join(meta_folder_base, folders[category_id], file_name)
        meta_folder = "."
    return _join(meta_folder_base, meta_folder, file_name)


def map_dep_override(dep_id: int, is_quilt: bool, mc_version: str) -> int:
    """Replace dependencies that have Quilt equivalents when the pack uses Quilt."""
    if is_quilt and dep_id == 306612:
        # Fabric API becomes QFAPI/QSL
        return 634179
    if is_quilt and dep_id == 308769:
        # Fabric Language Kotlin becomes QKL on 1.19.2 and later releases
        if version_less("1.19.1", mc_version) and version_less(mc_version, "2.0.0"):
            return 720410
    return dep_id


def _field(data: Mapping[str, Any], key: str) -> Any:
    folded = key.casefold()
    found: Any = None
    for k, v in data.items():
        if k == key:
            return v
        if isinstance(k, str) and k.casefold() == folded:
            found = v
    return found


def _uint32(data: Mapping[str, Any], key: str) -> int:
    value = _field(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' expected type 'uint32', got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"cannot parse '{key}', {value} overflows uint")
    number = int(value)
    if number > _UINT32_MAX:
        raise ValueError(f"cannot parse '{key}', {value} overflows uint32")
    return number


@dataclass(frozen=True)
class CfUpdateData:
    """The curseforge section of a mod's update metadata."""

    project_id: int = 0
    file_id: int = 0

    def to_map(self) -> dict[str, int]:
        return {"project-id": self.project_id, "file-id": self.file_id}


@dataclass(frozen=True)
class CfExportData:
    """The curseforge section of a pack's export metadata."""

    project_id: int = 0

    def to_map(self) -> dict[str, int]:
        return {"project-id": self.project_id}


def parse_update_data(data: Mapping[str, Any]) -> CfUpdateData:
    """Read update metadata from its table form."""
    return CfUpdateData(project_id=_uint32(data, "project-id"), file_id=_uint32(data, "file-id"))


def parse_export_data(data: Mapping[str, Any]) -> CfExportData:
    """Read export metadata from its table form."""
    return CfExportData(project_id=_uint32(data, "project-id"))