"""Modrinth project rules: URL parsing, folder choice, version and file selection."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Mapping, Sequence
from urllib.parse import unquote_to_bytes

from packwiz.cffiles import highest_slice_index
from packwiz.mrexport import CLIENT_SIDE, SERVER_SIDE, UNIVERSAL_SIDE
from packwiz.versions import compare_versions, version_less


class ModrinthError(ValueError):
    """Raised when Modrinth project data or input cannot be used."""


# "Loaders" that are supported regardless of the configured mod loaders
DEFAULT_MR_LOADERS = ("canvas", "iris", "optifine", "vanilla", "minecraft")

# As above, when a datapack folder is configured
WITH_DATAPACK_PATH_MR_LOADERS = DEFAULT_MR_LOADERS + ("datapack",)

_LOADER_FOLDERS = {
    "quilt": "mods",
    "fabric": "mods",
    "forge": "mods",
    "neoforge": "mods",
    "liteloader": "mods",
    "modloader": "mods",
    "rift": "mods",
    "bukkit": "plugins",
    "spigot": "plugins",
    "paper": "plugins",
    "purpur": "plugins",
    "sponge": "plugins",
    "bungeecord": "plugins",
    "waterfall": "plugins",
    "velocity": "plugins",
    "canvas": "resourcepacks",
    "iris": "shaderpacks",
    "optifine": "shaderpacks",
    "vanilla": "resourcepacks",
}

# Loader preference when versions are otherwise equal; earlier is preferred
_LOADER_PREFERENCE = (
    "quilt",
    "fabric",
    "neoforge",
    "forge",
    "liteloader",
    "modloader",
    "rift",
    "sponge",
    "purpur",
    "paper",
    "spigot",
    "bukkit",
    "velocity",
    "waterfall",
    "bungeecord",
    "canvas",
    "iris",
    "optifine",
    "vanilla",
    "datapack",
    "minecraft",
)

# Support for the key loader in both lists makes the group's loaders neutral
_LOADER_COMPAT_GROUPS = {
    "fabric": ("quilt",),
    "forge": ("neoforge",),
    "bukkit": ("purpur", "paper", "spigot"),
    "bungeecord": ("waterfall",),
}

_SLUG = r"[a-zA-Z0-9!@$()`.+,_\"-]"

_URL_PATTERNS = (
    re.compile(
        r"^https?://(www.)?modrinth\.com/(?P<urlCategory>[^/]+)/(?P<slug>" + _SLUG + r"{3,64})"
        r"(?:/version/(?P<version>" + _SLUG + r"{1,32}))?"
    ),
    # Version and project IDs are base62
    re.compile(
        r"^https?://cdn\.modrinth\.com/data/(?P<slug>[a-zA-Z0-9]+)/versions/"
        r"(?P<versionID>[a-zA-Z0-9]+)/(?P<filename>[^/]+)\Z"
    ),
    re.compile(r"^(?P<slug>" + _SLUG + r"{3,64})\Z"),
)

_SLUG_PATTERN_INDEX = 2

URL_CATEGORIES = ("mod", "plugin", "datapack", "shader", "resourcepack", "modpack")

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def search_facets(versions: Iterable[str]) -> list[list[str]]:
    """Search facets accepting any of the given game versions."""
    return [["versions:" + v for v in versions]]


def _preference_index(loader: str) -> int:
    try:
        return _LOADER_PREFERENCE.index(loader)
    except ValueError:
        return -1


def _best_loader_folder(loaders: Iterable[str]) -> str | None:
    indexes = [i for i in map(_preference_index, loaders) if i != -1]
    if not indexes:
        return None
    return _LOADER_FOLDERS.get(_LOADER_PREFERENCE[min(indexes)], "")


def get_project_type_folder(
    project_type: str,
    file_loaders: Sequence[str],
    pack_loaders: Sequence[str],
    datapack_folder: str = "",
) -> str:
    """The folder a project's metadata file belongs in."""
    if project_type == "modpack":
        raise ModrinthError(
            "this command should not be used to add Modrinth modpacks, "
            "and importing of Modrinth modpacks is not yet supported"
        )
    if project_type == "resourcepack":
        return "resourcepacks"
    if project_type == "shader":
        folder = _best_loader_folder(file_loaders)
        return "shaderpacks" if folder is None else folder
    if project_type == "mod":
        folder = _best_loader_folder(v for v in file_loaders if v in pack_loaders)
        if folder is not None:
            return folder
        if "datapack" in file_loaders:
            if datapack_folder:
                return datapack_folder
            raise ModrinthError("set the datapack-folder option to use datapacks")
        return "mods"
    raise ModrinthError(f"unknown project type {project_type}")


@dataclass(frozen=True)
class ModrinthRef:
    """What a Modrinth URL or slug refers to; empty fields were not given."""

    slug: str = ""
    version: str = ""
    version_id: str = ""
    filename: str = ""
    # True if the input was a bare slug rather than a URL
    parsed_slug: bool = False


def _path_unescape(text: str) -> str:
    bad = _BAD_ESCAPE.search(text)
    if bad is not None:
        raise ModrinthError(f'invalid URL escape "{text[bad.start():bad.start() + 3]}"')
    return unquote_to_bytes(text).decode("utf-8", "surrogateescape")


def parse_slug_or_url(text: str) -> ModrinthRef:
    """Parse a Modrinth project/version/CDN URL or a bare slug or project ID.

    Input that matches none of these gives an empty reference.
    """
    for index, pattern in enumerate(_URL_PATTERNS):
        match = pattern.search(text)
        if match is None:
            continue
        groups = match.groupdict()
        category = groups.get("urlCategory")
        if category is not None and category not in URL_CATEGORIES:
            raise ModrinthError("unknown project type: " + category)
        filename = groups.get("filename")
        return ModrinthRef(
            slug=groups.get("slug") or "",
            version=groups.get("version") or "",
            version_id=groups.get("versionID") or "",
            filename=_path_unescape(filename) if filename else "",
            parsed_slug=index == _SLUG_PATTERN_INDEX,
        )
    return ModrinthRef()


def compare_loader_lists(a: Sequence[str], b: Sequence[str]) -> int:
    """Compare loader lists: -1 if ``a`` is preferred, 1 if ``b`` is, else 0."""
    compat: set[str] = set()
    for key, group in _LOADER_COMPAT_GROUPS.items():
        if key in a and key in b:
            compat.update(group)

    min_a = None
    for loader in a:
        if loader in compat:
            continue
        idx = _preference_index(loader)
        if idx != -1 and (min_a is None or idx < min_a):
            min_a = idx
    min_b = None
    for loader in b:
        if loader in compat:
            continue
        idx = _preference_index(loader)
        if min_a is None or idx < min_a:
            return 1
        if idx != -1 and (min_b is None or idx < min_b):
            min_b = idx
    if min_a is not None and (min_b is None or min_a < min_b):
        return -1
    return 0


@dataclass
class VersionFile:
    """A file attached to a Modrinth version."""

    filename: str
    url: str = ""
    hashes: dict[str, str] = field(default_factory=dict)
    primary: bool = False


@dataclass
class Version:
    """A Modrinth project version."""

    id: str
    project_id: str = ""
    version_number: str = ""
    game_versions: list[str] = field(default_factory=list)
    loaders: list[str] = field(default_factory=list)
    date_published: datetime | None = None
    files: list[VersionFile] = field(default_factory=list)


def _published_after(a: Version, b: Version) -> bool:
    if a.date_published is None or b.date_published is None:
        return False
    return a.date_published > b.date_published


def find_latest_version(
    versions: Sequence[Version], game_versions: Sequence[str], use_flexver: bool
) -> Version:
    """Pick the newest version, by version number (optionally), game version, loader and date."""
    if not versions:
        raise ModrinthError("no versions to choose from")
    latest = versions[0]
    best_game = highest_slice_index(game_versions, latest.game_versions)
    for candidate in versions[1:]:
        game_index = highest_slice_index(game_versions, candidate.game_versions)
        compare = 0
        if use_flexver:
            compare = compare_versions(candidate.version_number, latest.version_number)
        if compare == 0:
            # Later entries of the game version list are preferred
            compare = game_index - best_game
        if compare == 0:
            compare = compare_loader_lists(latest.loaders, candidate.loaders)
        if compare == 0 and _published_after(candidate, latest):
            compare = 1
        if compare > 0:
            latest = candidate
            best_game = game_index
    return latest


_PREFERRED_HASHES = ("sha512", "sha256", "sha1", "murmur2")


def get_best_hash(hashes: Mapping[str, str]) -> tuple[str, str]:
    """The preferred (algorithm, hash) of a file, or ("", "") if it has none."""
    for algorithm in _PREFERRED_HASHES:
        if algorithm in hashes:
            return algorithm, hashes[algorithm]
    for algorithm, value in hashes.items():
        return algorithm, value
    return "", ""


def should_download_on_side(side: str) -> bool:
    """Whether a project's side support value means it is installed there."""
    return side in ("required", "optional")


def get_side(server_side: str, client_side: str) -> str:
    """The pack side of a project, or "" if it supports neither."""
    server = should_download_on_side(server_side)
    client = should_download_on_side(client_side)
    if server and client:
        return UNIVERSAL_SIDE
    if server:
        return SERVER_SIDE
    if client:
        return CLIENT_SIDE
    return ""


def map_dep_override(dep_id: str, is_quilt: bool, mc_version: str) -> str:
    """Replace dependencies that have Quilt equivalents when the pack uses Quilt."""
    if is_quilt and dep_id in ("P7dR8mSH", "fabric-api"):
        # Fabric API becomes QFAPI/QSL
        return "qvIfYCYJ"
    if is_quilt and dep_id in ("Ha28R6CL", "fabric-language-kotlin"):
        # Fabric Language Kotlin becomes QKL on 1.19.2 and later releases
        if version_less("1.19.1", mc_version) and version_less(mc_version, "2.0.0"):
            return "lwVhp9o5"
    return dep_id