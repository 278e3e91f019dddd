"""Modrinth pack manifest model and the export rules that feed it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterable, Mapping
from urllib.parse import urlsplit

UNIVERSAL_SIDE = "both"
SERVER_SIDE = "server"
CLIENT_SIDE = "client"
EMPTY_SIDE = ""

MODE_URL = "url"

WHITELISTED_HOSTS = (
    "cdn.modrinth.com",
    "github.com",
    "raw.githubusercontent.com",
    "gitlab.com",
)

_LOADER_DEPENDENCIES = (
    ("quilt", "quilt-loader"),
    ("fabric", "fabric-loader"),
    ("forge", "forge"),
    ("neoforge", "neoforge"),
)


def can_be_included_directly(download_mode: str | None, url: str, restrict_domains: bool) -> bool:
    """Whether a file may be referenced by URL in the manifest instead of bundled."""
    if download_mode not in (MODE_URL, "", None):
        return False
    if not restrict_domains:
        return True
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return False
    host = netloc.rpartition("@")[2]
    return host in WHITELISTED_HOSTS


def file_env(side: str, optional: bool) -> tuple[str, str]:
    """The (client, server) environment values for a file."""
    installed = "optional" if optional else "required"
    if side in (UNIVERSAL_SIDE, EMPTY_SIDE):
        return installed, installed
    if side == CLIENT_SIDE:
        return installed, "unsupported"
    if side == SERVER_SIDE:
        return "unsupported", installed
    return "", ""


def override_folder(side: str) -> str:
    """The overrides folder a bundled file goes into."""
    if side == CLIENT_SIDE:
        return "client-overrides"
    if side == SERVER_SIDE:
        return "server-overrides"
    return "overrides"


def pack_dependencies(versions: Mapping[str, str], mc_version: str) -> dict[str, str]:
    """Manifest dependencies: Minecraft plus the pack's preferred loader."""
    deps = {"minecraft": mc_version}
    for component, key in _LOADER_DEPENDENCIES:
        if component in versions:
            deps[key] = versions[component]
            break
    return deps


@dataclass
class PackFile:
    """One file entry in a Modrinth pack manifest."""

    path: str
    hashes: dict[str, str] = field(default_factory=dict)
    env: tuple[str, str] | None = None
    downloads: list[str] = field(default_factory=list)
    file_size: int = 0

    def to_dict(self) -> dict:
        env = None if self.env is None else {"client": self.env[0], "server": self.env[1]}
        return {
            "path": self.path,
            "hashes": dict(sorted(self.hashes.items())),
            "env": env,
            "downloads": list(self.downloads),
            "fileSize": self.file_size,
        }


def sort_files(files: Iterable[PackFile]) -> list[PackFile]:
    """Sort files by path so the manifest is reproducible."""
    return sorted(files, key=lambda f: f.path)


@dataclass
class Pack:
    """A Modrinth pack manifest (modrinth.index.json)."""

    version_id: str
    name: str
    summary: str = ""
    files: list[PackFile] = field(default_factory=list)
    dependencies: dict[str, str] = field(default_factory=dict)
    format_version: int = 1
    game: str = "minecraft"

    def to_dict(self) -> dict:
        data: dict = {
            "formatVersion": self.format_version,
            "game": self.game,
            "versionId": self.version_id,
            "name": self.name,
        }
        if self.summary:
            data["summary"] = self.summary
        data["files"] = [f.to_dict() for f in self.files]
        data["dependencies"] = dict(sorted(self.dependencies.items()))
        return data

    def to_json(self) -> str:
        text = json.dumps(self.to_dict(), indent=4, ensure_ascii=False)
        # Escape HTML-sensitive characters, which only occur inside strings
        for char, escaped in (
            ("&", "\\u0026"),
            ("<", "\\u003c"),
            (">", "\\u003e"),
            ("\u2028", "\\u2028"),
            ("\u2029", "\\u2029"),
        ):
            text = text.replace(char, escaped)
        return text + "\n"