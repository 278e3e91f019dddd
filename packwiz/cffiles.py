"""Choosing CurseForge files for a pack's game versions and mod loaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Mapping, Sequence

from packwiz.cfversions import get_curseforge_versions

PROJECT_URL_BASE = "https://www.curseforge.com/projects/"


class ModloaderType(IntEnum):
    """CurseForge mod loader types; larger values are preferred."""

    ANY = 0
    FORGE = 1
    CAULDRON = 2
    LITELOADER = 3
    FABRIC = 4
    QUILT = 5
    NEOFORGE = 6

    @property
    def loader_id(self) -> str:
        """The pack component name of this loader."""
        return _LOADER_IDS[self]

    @property
    def display_name(self) -> str:
        """The name CurseForge lists among a file's game versions."""
        return _LOADER_NAMES[self]


_LOADER_IDS = {
    ModloaderType.ANY: "",
    ModloaderType.FORGE: "forge",
    ModloaderType.CAULDRON: "cauldron",
    ModloaderType.LITELOADER: "liteloader",
    ModloaderType.FABRIC: "fabric",
    ModloaderType.QUILT: "quilt",
    ModloaderType.NEOFORGE: "neoforge",
}

_LOADER_NAMES = {
    ModloaderType.ANY: "",
    ModloaderType.FORGE: "Forge",
    ModloaderType.CAULDRON: "Cauldron",
    ModloaderType.LITELOADER: "LiteLoader",
    ModloaderType.FABRIC: "Fabric",
    ModloaderType.QUILT: "Quilt",
    ModloaderType.NEOFORGE: "NeoForge",
}


@dataclass
class FileInfo:
    """A CurseForge file."""

    id: int
    file_name: str = ""
    game_versions: list[str] = field(default_factory=list)
    mod_id: int = 0
    download_url: str = ""


@dataclass
class GameVersionFile:
    """An entry of a project's latest files per game version."""

    id: int
    name: str = ""
    game_version: str = ""
    modloader: int = ModloaderType.ANY


@dataclass
class ModInfo:
    """A CurseForge project."""

    id: int
    name: str = ""
    slug: str = ""
    summary: str = ""
    game_id: int = 0
    class_id: int = 0
    primary_category_id: int = 0
    website_url: str = ""
    latest_files: list[FileInfo] = field(default_factory=list)
    game_version_latest_files: list[GameVersionFile] = field(default_factory=list)


def highest_slice_index(slice: Sequence[str], values: Iterable[str]) -> int:
    """The highest index in ``slice`` of any of ``values``, or -1 if none is present."""
    highest = -1
    for value in values:
        if value in slice:
            highest = max(highest, slice.index(value))
    return highest


def get_search_loader_type(pack_versions: Mapping[str, str]) -> ModloaderType:
    """The loader to filter a search by; ANY unless the pack has exactly one of Fabric or Forge."""
    fabric = "fabric" in pack_versions
    quilt = "quilt" in pack_versions
    forge = "forge" in pack_versions
    neoforge = "neoforge" in pack_versions
    if fabric and not quilt and not forge and not neoforge:
        return ModloaderType.FABRIC
    if forge and not neoforge and not fabric and not quilt:
        return ModloaderType.FORGE
    # Only one loader can be filtered on: accept any and filter the response
    return ModloaderType.ANY


def filter_loader_type_index(
    pack_loaders: Sequence[str], mod_loader_type: int
) -> tuple[ModloaderType, bool]:
    """Check a file's loader type against the pack's loaders; returns (type, supported)."""
    if not pack_loaders or mod_loader_type == ModloaderType.ANY:
        return ModloaderType.ANY, True
    try:
        loader = ModloaderType(mod_loader_type)
    except ValueError:
        return ModloaderType.ANY, False
    if loader.loader_id in pack_loaders:
        return loader, True
    return ModloaderType.ANY, False


def filter_file_info_loader_index(
    pack_loaders: Sequence[str], file_info: FileInfo
) -> tuple[ModloaderType, bool]:
    """The most preferred loader shared by the pack and a file; returns (type, supported)."""
    if not pack_loaders:
        return ModloaderType.ANY, True
    supported = [
        loader
        for loader in ModloaderType
        if loader.loader_id in pack_loaders and loader.display_name in file_info.game_versions
    ]
    if supported:
        return max(supported), True
    return ModloaderType.ANY, False


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _compare(
    mc_index: int,
    best_mc: int,
    loader: ModloaderType,
    best_loader: ModloaderType,
    file_id: int,
    best_id: int,
) -> int:
    # First by Minecraft version: later entries of the version list are preferred
    result = mc_index - best_mc
    if result == 0 and best_loader != ModloaderType.ANY and loader != ModloaderType.ANY:
        # Unmarked loaders are neutral; otherwise prefer the higher loader type
        result = int(loader) - int(best_loader)
    if result == 0:
        result = _int32(file_id - best_id)
    return result


def find_latest_file(
    mod_info: ModInfo, mc_versions: Sequence[str], pack_loaders: Sequence[str]
) -> tuple[int, FileInfo | None, str]:
    """Find the latest suitable file: (file ID, file info if known, file name).

    The file ID is 0 when no file fits the versions and loaders.
    """
    cf_versions = get_curseforge_versions(mc_versions)
    best_id = 0
    best_info: FileInfo | None = None
    best_name = ""
    best_mc = -1
    best_loader = ModloaderType.ANY

    # Snapshots are not listed in the per-game-version files
    for info in mod_info.latest_files:
        mc_index = highest_slice_index(mc_versions, info.game_versions)
        loader, valid = filter_file_info_loader_index(pack_loaders, info)
        if mc_index < 0 or not valid:
            continue
        if _compare(mc_index, best_mc, loader, best_loader, info.id, best_id) > 0:
            best_id, best_info, best_name = info.id, info, info.file_name
            best_mc, best_loader = mc_index, loader

    for entry in mod_info.game_version_latest_files:
        if entry.game_version not in cf_versions:
            continue
        mc_index = cf_versions.index(entry.game_version)
        loader, valid = filter_loader_type_index(pack_loaders, entry.modloader)
        if not valid:
            continue
        if _compare(mc_index, best_mc, loader, best_loader, entry.id, best_id) > 0:
            best_id, best_info, best_name = entry.id, None, entry.name
            best_mc, best_loader = mc_index, loader

    return best_id, best_info, best_name


def project_url(project_id: int) -> str:
    """The web page of a CurseForge project."""
    return f"{PROJECT_URL_BASE}{project_id}"